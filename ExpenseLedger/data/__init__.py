"""
ExpenseLedger data package: Qt models for item views.

This package provides:

- :mod:`ExpenseLedger.data.table` – :class:`ExpenseLedger.data.table.TransactionsTableModel`, a
  Qt table model that listens to an :class:`ExpenseLedger.model.model.ExpenseTrackerModel`.
"""
