"""Status definitions and exceptions for ExpenseLedger.

This module provides:
    - Status: enumeration of possible model states
    - STATUS_MESSAGE: user-facing messages for each status
    - get_message: retrieve the message for a status
    - BaseStatusException: base exception carrying a Status
    - InvalidArgumentException and the specific exceptions raised on rejected input
"""
import enum
import logging
from typing import Dict


class Status(enum.StrEnum):
    """Enumeration of status codes."""
    UnknownStatus = enum.auto()
    Okay = enum.auto()

    # Input validation status
    TransactionInvalid = enum.auto()
    FilterIndicesInvalid = enum.auto()


STATUS_MESSAGE: Dict[Status, str] = {
    Status.UnknownStatus: 'Unknown status.',
    Status.Okay: 'Everything is okay.',

    Status.TransactionInvalid: 'The transaction is invalid.',
    Status.FilterIndicesInvalid: 'The matched filter indices are invalid.',
}


def get_message(status: Status) -> str:
    """
    Get the message for a given status.

    Args:
        status (Status): The status enum.

    Returns:
        str: The message associated with the status.
    """
    return STATUS_MESSAGE.get(status, 'Unknown status')


class BaseStatusException(Exception):
    """Base exception for status-based errors in ExpenseLedger.

    Attributes:
        status (Status): Status code associated with this error.
        status_message (str): User-facing message for the status.

    Args:
        message (str): Optional additional context for the error.
    """
    status = Status.UnknownStatus

    def __init__(self, message: str = None):
        self.status_message = get_message(self.status)
        exception_message = f'{self.status_message} {message}' if message else self.status_message
        super().__init__(exception_message)

        logging.error(exception_message)

        from ..core.signals import signals
        signals.error.emit(message or self.status_message)


class UnknownException(BaseStatusException):
    """Exception for an unknown error during status processing."""
    pass


class InvalidArgumentException(BaseStatusException, ValueError):
    """Exception raised when an argument is rejected before any state is modified."""
    pass


class TransactionInvalidException(InvalidArgumentException):
    """Exception raised when a transaction is missing or holds invalid values."""
    status = Status.TransactionInvalid


class FilterIndicesInvalidException(InvalidArgumentException):
    """Exception raised when matched filter indices are missing or out of range."""
    status = Status.FilterIndicesInvalid
