"""
Logging subsystem for ExpenseLedger.

Modules:

- :mod:`ExpenseLedger.log.log` – Log setup, the in-memory tank handler and the Qt message bridge.
"""
