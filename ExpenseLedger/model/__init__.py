"""Observable ledger model for the ExpenseLedger application.

This subpackage provides the :class:`ExpenseTrackerModel` that stores
transactions and matched filter indices, the :class:`ExpenseTrackerModelListener`
protocol its observers implement, and the :class:`Transaction` value type.
"""
from .model import ExpenseTrackerModel, ExpenseTrackerModelListener
from .transaction import Transaction
