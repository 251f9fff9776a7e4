# src/bob_tasks/core/errors.py

"""User-facing error type shared by the parser, the task list and storage."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    EMPTY_COMMAND = "empty_command"
    UNKNOWN_COMMAND = "unknown_command"
    EMPTY_DESCRIPTION = "empty_description"
    MISSING_DATE_MARKER = "missing_date_marker"
    INVALID_DATE_FORMAT = "invalid_date_format"
    INVALID_EVENT_RANGE = "invalid_event_range"
    MISSING_TASK_NUMBER = "missing_task_number"
    INVALID_TASK_NUMBER = "invalid_task_number"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    IO_FAILURE = "io_failure"


class BobError(Exception):
    """
    Recoverable error with a message meant for the user.

    None of these end the session: the dispatch layer catches them and turns
    the message into a reply.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"BobError({self.kind.value!r}, {self.message!r})"
