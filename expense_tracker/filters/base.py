"""Mini README: Abstract filter interface and the publishing helper.

Structure:
    * TransactionFilter - abstract predicate over transactions.
    * apply_filter - computes matches from a model snapshot and publishes them.

Filters never touch the model's internals. They read a snapshot, compute the
matching positions, and hand those back through the model's validated setter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Sequence

from ..logging_utils import get_logger
from ..model.transaction import Transaction

if TYPE_CHECKING:
    from ..model.expense_tracker_model import ExpenseTrackerModel

LOGGER = get_logger(__name__)


class TransactionFilter(ABC):
    """Base interface for transaction filters."""

    @abstractmethod
    def matches(self, transaction: Transaction) -> bool:
        """Return ``True`` when ``transaction`` satisfies the filter."""

    def filter(self, transactions: Sequence[Transaction]) -> List[int]:
        """Return the positions of matching transactions in order."""

        return [index for index, transaction in enumerate(transactions) if self.matches(transaction)]


def apply_filter(model: "ExpenseTrackerModel", transaction_filter: TransactionFilter) -> List[int]:
    """Filter the model's current transactions and publish the matches."""

    indices = transaction_filter.filter(model.get_transactions())
    LOGGER.info("%s matched %s transactions", type(transaction_filter).__name__, len(indices))
    model.set_matched_filter_indices(indices)
    return indices
