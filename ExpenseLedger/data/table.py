"""Qt table model mirroring an :class:`ExpenseTrackerModel`.

The table registers itself as a listener of the ledger model and resets its
rows on every notification. Rows matched by the last filter are highlighted.
"""
import enum
import logging
from typing import Any, List, Optional, Set

from PySide6 import QtCore, QtGui

from ..model.model import ExpenseTrackerModel
from ..model.transaction import Transaction

MatchedRole = QtCore.Qt.UserRole + 1

MATCHED_BACKGROUND = QtGui.QColor(255, 236, 153)


class Columns(enum.IntEnum):
    Date = 0
    Amount = 1
    Category = 2
    Description = 3


class TransactionsTableModel(QtCore.QAbstractTableModel):
    """
    TransactionsTableModel displays the transactions of a ledger model as table rows.

    It implements the :class:`ExpenseLedger.model.model.ExpenseTrackerModelListener`
    protocol, so it can be registered directly with the ledger model.
    """

    def __init__(self, model: Optional[ExpenseTrackerModel] = None,
                 parent: Optional[QtCore.QObject] = None) -> None:
        super().__init__(parent=parent)

        self._data: List[Any] = []
        self._matched: Set[int] = set()

        if model is not None:
            model.register(self)
            self.update(model)

    def update(self, model: ExpenseTrackerModel) -> None:
        """Reloads the rows and matched indices from the ledger model."""
        self.beginResetModel()
        try:
            self._data = list(model.get_transactions())
            self._matched = set(model.get_matched_filter_indices())
        finally:
            self.endResetModel()
        logging.debug(f'Transactions table reset: {len(self._data)} rows, {len(self._matched)} matched.')

    def is_matched(self, row: int) -> bool:
        return row in self._matched

    def rowCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._data)

    def columnCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(Columns)

    def data(self, index: QtCore.QModelIndex, role: int = QtCore.Qt.DisplayRole):
        """Returns data for the specified index and role.

        Args:
            index (QtCore.QModelIndex): The model index.
            role (int): The data role.

        Returns:
            Any: Data appropriate for the role, or None.
        """
        if not self._data or not index.isValid():
            return None
        row = index.row()
        if row < 0 or row >= self.rowCount():
            return None

        if role == MatchedRole:
            return self.is_matched(row)
        if role == QtCore.Qt.BackgroundRole:
            return MATCHED_BACKGROUND if self.is_matched(row) else None

        if role not in (QtCore.Qt.DisplayRole, QtCore.Qt.ToolTipRole, QtCore.Qt.EditRole):
            return None

        item = self._data[row]
        col_idx = index.column()

        # Anything that is not a Transaction is shown as plain text
        if not isinstance(item, Transaction):
            if col_idx == Columns.Description.value:
                return f'{item}'
            return None

        if col_idx == Columns.Date.value:
            if role == QtCore.Qt.EditRole:
                return item.timestamp.strftime('%Y-%m-%d')
            return item.timestamp.strftime('%d/%m/%Y')
        elif col_idx == Columns.Amount.value:
            if role == QtCore.Qt.EditRole:
                return item.amount
            return f'{item.amount:.2f}'
        elif col_idx == Columns.Category.value:
            return item.category
        elif col_idx == Columns.Description.value:
            return item.description

        return None

    def headerData(self, section: int, orientation: QtCore.Qt.Orientation,
                   role: int = QtCore.Qt.DisplayRole) -> Any:
        if role != QtCore.Qt.DisplayRole:
            return None
        if orientation == QtCore.Qt.Horizontal:
            if 0 <= section < self.columnCount():
                return Columns(section).name
        elif orientation == QtCore.Qt.Vertical:
            return f'{section + 1}'
        return None
