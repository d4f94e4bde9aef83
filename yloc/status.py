"""Status codes and the exception raised when an operation fails."""

from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Outcome codes of topology operations."""

    SUCCESS = 0
    INVALID_ARGS = 1
    NOT_SUPPORTED = 2
    OUT_OF_RESOURCES = 3
    INTERNAL_EXCEPTION = 4
    INPUT_OUT_OF_BOUNDS = 5
    INIT_ERROR = 6
    NOT_YET_IMPLEMENTED = 7
    NOT_FOUND = 8
    INSUFFICIENT_SIZE = 9
    UNEXPECTED_SIZE = 10
    NO_DATA = 11
    UNKNOWN_ERROR = 12


class YlocError(Exception):
    """Raised when an operation fails; carries the failing status."""

    def __init__(self, status: Status, message: str = "") -> None:
        self.status = Status(status)
        self.message = message
        text = f"{self.status.name}: {message}" if message else self.status.name
        super().__init__(text)