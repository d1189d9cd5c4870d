"""
ExpenseLedger: observable data model for a desktop expense-tracking application.

This package provides:

- :mod:`ExpenseLedger.model` – The observable :class:`ExpenseLedger.model.model.ExpenseTrackerModel`,
  its listener protocol and the :class:`ExpenseLedger.model.transaction.Transaction` value type.
- :mod:`ExpenseLedger.data` – A Qt table model that mirrors the ledger model for item views.
- :mod:`ExpenseLedger.status` – Status codes and the exceptions raised on invalid input.
- :mod:`ExpenseLedger.core` – Application-wide Qt signals.
- :mod:`ExpenseLedger.log` – In-app logging with an in-memory log tank.
"""

import sys

# Fail on Python < 3.11
if not (sys.version_info.major == 3 and sys.version_info.minor >= 11):
    raise RuntimeError('ExpenseLedger requires Python 3.11 or higher.')

__version__ = '0.1.0'
__author__ = 'Gergely Wootsch'
__license__ = 'GPL-3.0'
__copyright__ = 'Copyright (C) 2025 Gergely Wootsch'
__description__ = 'ExpenseLedger: observable transaction model for desktop expense tracking.'

from .log import log

log.setup_logging()
