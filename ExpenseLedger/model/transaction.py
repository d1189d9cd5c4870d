"""Transaction value type.

The ledger model treats transactions as opaque values compared by equality.
This module provides the concrete, immutable record used by the application.
"""
import dataclasses
import datetime
import math

from ..status import status


@dataclasses.dataclass(frozen=True)
class Transaction:
    """
    A single financial entry.

    Attributes:
        amount (float): Signed amount. Negative amounts are expenses.
        category (str): Category name, e.g. ``'food'``.
        timestamp (datetime.datetime): When the transaction was recorded.
        description (str): Optional free-form note.

    Example:
        >>> tx = Transaction(amount=-12.5, category='food')
        >>> tx.is_expense
        True
    """
    amount: float
    category: str
    timestamp: datetime.datetime = dataclasses.field(default_factory=datetime.datetime.now)
    description: str = ''

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise status.TransactionInvalidException(
                f'Amount must be a number, got {type(self.amount).__name__}.')
        if not math.isfinite(self.amount):
            raise status.TransactionInvalidException(f'Amount must be finite, got {self.amount}.')
        if self.amount == 0:
            raise status.TransactionInvalidException('Amount must be non-zero.')

        if not isinstance(self.category, str) or not self.category.strip():
            raise status.TransactionInvalidException('Category must be a non-empty string.')

        if not isinstance(self.timestamp, datetime.datetime):
            raise status.TransactionInvalidException(
                f'Timestamp must be a datetime, got {type(self.timestamp).__name__}.')

        if not isinstance(self.description, str):
            raise status.TransactionInvalidException('Description must be a string.')

        # frozen, bypass __setattr__
        object.__setattr__(self, 'category', self.category.strip())

    @property
    def is_expense(self) -> bool:
        return self.amount < 0
