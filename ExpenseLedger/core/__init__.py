"""
Core package for ExpenseLedger.

This package includes:

- :mod:`ExpenseLedger.core.signals` – Application-wide Qt signals shared by the logging and status layers.
"""
