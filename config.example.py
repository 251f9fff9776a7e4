# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "BOB_APP_NAME": "App display name used in the greeting (default: bob).",
    "BOB_LOG_LEVEL": "Console logging level (default: WARNING). The log file always records DEBUG.",
    "BOB_LOG_TO_FILE": "Write <log_dir>/bob.log (true/false, default: true).",
    # Paths
    "BOB_DATA_DIR": "Local data directory (default: data).",
    "BOB_TASKS_PATH": "Task file path (default: <data_dir>/bob.txt).",
    "BOB_LOG_DIR": "Directory for bob.log (default: <data_dir>).",
}
