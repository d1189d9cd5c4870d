"""Unittest base class for creating a clean test environment."""
import logging
import os
import unittest
from typing import List

from PySide6 import QtWidgets

from ExpenseLedger.model.model import ExpenseTrackerModel


class RecordingListener:
    """Listener that records every model it is notified with."""

    def __init__(self) -> None:
        self.calls: List[ExpenseTrackerModel] = []
        self.snapshots: List[tuple] = []

    def update(self, model: ExpenseTrackerModel) -> None:
        self.calls.append(model)
        self.snapshots.append((model.get_transactions(), model.get_matched_filter_indices()))

    @property
    def call_count(self) -> int:
        return len(self.calls)


class BaseTestCase(unittest.TestCase):
    """Base test case that ensures a headless QApplication and quiet logging."""

    def setUp(self) -> None:
        # Ensure headless Qt
        if 'QT_QPA_PLATFORM' not in os.environ:
            os.environ['QT_QPA_PLATFORM'] = 'offscreen'
            logging.debug('QT_QPA_PLATFORM set to offscreen for headless testing.')

        # Ensure a QApplication is available
        if not QtWidgets.QApplication.instance():
            QtWidgets.QApplication([])  # type: ignore
            logging.debug('QtWidgets.QApplication initialized for tests.')

        # Validation errors are logged at ERROR level, keep test output clean
        logging.disable(logging.CRITICAL)

    def tearDown(self) -> None:
        logging.disable(logging.NOTSET)


class ModelTestCase(BaseTestCase):
    """Base test case providing an empty ledger model and a registered listener."""

    model: ExpenseTrackerModel
    listener: RecordingListener

    def setUp(self) -> None:
        super().setUp()
        self.model = ExpenseTrackerModel()
        self.listener = RecordingListener()
        self.model.register(self.listener)
