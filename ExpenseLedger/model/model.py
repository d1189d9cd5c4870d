"""The observable ledger model.

:class:`ExpenseTrackerModel` holds the transactions of the application, the
row indices matched by the last filter run, and the listeners that are told
about every state change.

The model is not thread-safe. All calls are expected to come from a single
thread (normally the Qt GUI thread); callers mutating it from several threads
must synchronize externally.
"""
import logging
from typing import Any, Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from ..status import status


@runtime_checkable
class ExpenseTrackerModelListener(Protocol):
    """Anything that wants to be told when an :class:`ExpenseTrackerModel` changes."""

    def update(self, model: 'ExpenseTrackerModel') -> None:
        ...


class ExpenseTrackerModel:
    """
    Stores transactions and the matched filter indices, and notifies registered
    listeners whenever either changes.

    Listeners are called synchronously, in registration order. An exception raised
    by a listener propagates to the caller of the mutating method and the remaining
    listeners are not notified.
    """

    def __init__(self) -> None:
        self._transactions: List[Any] = []
        self._matched_filter_indices: List[int] = []
        self._listeners: List[ExpenseTrackerModelListener] = []

    def add_transaction(self, transaction: Any) -> None:
        """Appends a transaction and invalidates the current filter.

        Args:
            transaction: The transaction to add. Must not be None.

        Raises:
            status.TransactionInvalidException: If the transaction is None.
        """
        if transaction is None:
            raise status.TransactionInvalidException('The new transaction must not be None.')

        self._transactions.append(transaction)
        # The previous filter is no longer valid
        self._matched_filter_indices.clear()
        logging.debug(f'Transaction added, {len(self._transactions)} transactions in total.')
        self.state_changed()

    def remove_transaction(self, transaction: Any) -> None:
        """Removes the first transaction equal to the given one.

        Removing a transaction that is not in the model leaves the transactions
        untouched, but the filter is still cleared and listeners still notified.
        """
        if transaction in self._transactions:
            self._transactions.remove(transaction)
            logging.debug(f'Transaction removed, {len(self._transactions)} transactions left.')
        else:
            logging.debug('Transaction to remove was not found.')
        # The previous filter is no longer valid
        self._matched_filter_indices.clear()
        self.state_changed()

    def get_transactions(self) -> Tuple[Any, ...]:
        """Returns an immutable snapshot of the transactions in insertion order."""
        return tuple(self._transactions)

    def transaction_count(self) -> int:
        return len(self._transactions)

    def set_matched_filter_indices(self, indices: Optional[Iterable[int]]) -> None:
        """Stores the row indices matched by a filter.

        The indices are copied; order and duplicates are kept. Nothing changes
        when validation fails.

        Args:
            indices: Indices into the current transactions.

        Raises:
            status.FilterIndicesInvalidException: If indices is None, not iterable,
                or holds a value that is not a valid transaction index.
        """
        if indices is None:
            raise status.FilterIndicesInvalidException('The matched filter indices must not be None.')

        try:
            new_indices = list(indices)
        except TypeError as ex:
            raise status.FilterIndicesInvalidException(
                f'Expected an iterable of integers, got {type(indices).__name__}.') from ex

        count = len(self._transactions)
        for index in new_indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise status.FilterIndicesInvalidException(
                    f'Each matched filter index must be an integer, got {index!r}.')
            if index < 0 or index > count - 1:
                raise status.FilterIndicesInvalidException(
                    f'Each matched filter index must be between 0 (inclusive) and '
                    f'the number of transactions ({count}, exclusive), got {index}.')

        self._matched_filter_indices = new_indices
        logging.debug(f'Matched filter indices set: {new_indices}')
        self.state_changed()

    def get_matched_filter_indices(self) -> List[int]:
        """Returns a copy of the matched filter indices."""
        return list(self._matched_filter_indices)

    def get_matched_transactions(self) -> Tuple[Any, ...]:
        """Returns the transactions at the matched filter indices, in index order."""
        return tuple(self._transactions[i] for i in self._matched_filter_indices)

    def register(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """Registers a listener for state change notifications.

        Returns:
            bool: True if the listener was added, False if it is None, has no
            ``update`` method, or is already registered.
        """
        if listener is None:
            return False
        if not isinstance(listener, ExpenseTrackerModelListener):
            logging.warning(f'Refusing to register {listener!r}: it has no update() method.')
            return False
        if self.contains_listener(listener):
            return False
        self._listeners.append(listener)
        logging.debug(f'Listener registered: {listener!r}')
        return True

    def unregister(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """Removes a registered listener.

        Returns:
            bool: True if the listener was removed, False if it was not registered.
        """
        if listener is None:
            return False
        for i, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[i]
                logging.debug(f'Listener unregistered: {listener!r}')
                return True
        return False

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """Checks whether the given listener object is registered."""
        if listener is None:
            return False
        return any(registered is listener for registered in self._listeners)

    def state_changed(self) -> None:
        """Notifies every registered listener, in registration order."""
        # Listeners may register or unregister while being notified
        for listener in list(self._listeners):
            listener.update(self)
