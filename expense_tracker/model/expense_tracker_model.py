"""Mini README: Observable state container for the expense tracker.

Structure:
    * InvalidArgumentError - raised when a caller breaks the input contract.
    * ExpenseTrackerModel - owns the transactions, the matched filter indices,
      and the registered listeners.

The model is the only component allowed to mutate expense state. Every read
returns a fresh copy, every rejected call leaves state untouched, and every
successful mutation notifies all listeners before returning. It is meant for
single-threaded use; callers serialise access themselves.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..logging_utils import get_logger
from .listener import ExpenseTrackerModelListener
from .transaction import Transaction

LOGGER = get_logger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or out of range."""


class ExpenseTrackerModel:
    """Hold transactions and filter results, notifying listeners on change."""

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []
        self._matched_filter_indices: List[int] = []
        # A list rather than a set so listeners need not be hashable.
        self._listeners: List[ExpenseTrackerModelListener] = []

    def add_transaction(self, transaction: Optional[Transaction]) -> None:
        """Append a transaction and clear any previous filtering."""

        if transaction is None:
            LOGGER.warning("Rejected attempt to add a missing transaction")
            raise InvalidArgumentError("The new transaction must be non-null.")
        self._transactions.append(transaction)
        # Indices computed for the previous ledger no longer apply.
        self._matched_filter_indices.clear()
        LOGGER.debug("Added transaction; ledger now holds %s entries", len(self._transactions))
        self.state_changed()

    def remove_transaction(self, transaction: Optional[Transaction]) -> None:
        """Remove the first equal transaction, if any, and clear filtering."""

        try:
            self._transactions.remove(transaction)
            LOGGER.debug("Removed transaction; ledger now holds %s entries", len(self._transactions))
        except ValueError:
            LOGGER.debug("Transaction to remove was not present in the ledger")
        self._matched_filter_indices.clear()
        self.state_changed()

    def get_transactions(self) -> Tuple[Transaction, ...]:
        """Return a read-only snapshot of the transactions in insertion order."""

        return tuple(self._transactions)

    def set_matched_filter_indices(self, indices: Optional[Iterable[int]]) -> None:
        """Validate and store the ledger positions matched by a filter."""

        if indices is None:
            LOGGER.warning("Rejected missing matched filter indices")
            raise InvalidArgumentError("The matched filter indices list must be non-null.")

        try:
            candidates = list(indices)
        except TypeError as error:
            LOGGER.warning("Rejected non-iterable matched filter indices %r", indices)
            raise InvalidArgumentError(
                f"Matched filter indices must be an iterable of integers, got {indices!r}."
            ) from error
        size = len(self._transactions)
        for index in candidates:
            # bool is an int subclass but never a meaningful position.
            if isinstance(index, bool) or not isinstance(index, int):
                LOGGER.warning("Rejected non-integer filter index %r", index)
                raise InvalidArgumentError(f"Matched filter indices must be integers, got {index!r}.")
            if index < 0 or index > size - 1:
                LOGGER.warning("Rejected filter index %s for ledger of size %s", index, size)
                raise InvalidArgumentError(
                    "Each matched filter index must be between 0 (inclusive) "
                    "and the number of transactions (exclusive)."
                )

        self._matched_filter_indices = candidates
        LOGGER.debug("Stored %s matched filter indices", len(candidates))
        self.state_changed()

    def get_matched_filter_indices(self) -> List[int]:
        """Return a copy of the matched filter indices."""

        return list(self._matched_filter_indices)

    def register(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """Register a listener; return ``False`` if missing or already present."""

        if listener is not None and not self.contains_listener(listener):
            self._listeners.append(listener)
            LOGGER.debug("Registered listener %r", listener)
            return True
        return False

    def unregister(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """Unregister a listener; return ``False`` if missing or not registered."""

        if listener is not None and self.contains_listener(listener):
            self._listeners.remove(listener)
            LOGGER.debug("Unregistered listener %r", listener)
            return True
        return False

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        return listener in self._listeners

    def state_changed(self) -> None:
        """Notify every registered listener synchronously.

        Iterates over a copy so listeners may unregister themselves while being
        notified. Exceptions raised by a listener propagate to the caller.
        """

        for listener in tuple(self._listeners):
            listener.update(self)
