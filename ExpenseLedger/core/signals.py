"""Application-wide Qt signals for ExpenseLedger.

The ledger model itself notifies its own listeners; these signals carry the
cross-cutting events (errors, log viewer requests) that any part of the
application may want to react to.
"""
from PySide6 import QtCore


class Signals(QtCore.QObject):
    """Centralized Qt signals for application-level events."""
    showLogs = QtCore.Signal()

    error = QtCore.Signal(str)

    def __init__(self):
        super().__init__()


signals = Signals()
