"""Status package: enums and exceptions for handling invalid input.

This package defines:
    - Status: a StrEnum of possible model states
    - STATUS_MESSAGE: default user-facing messages per status
    - get_message: helper to retrieve messages for statuses
    - BaseStatusException: base exception for status-driven error handling
    - InvalidArgumentException and its subclasses raised by the ledger model
"""
