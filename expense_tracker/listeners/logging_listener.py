"""Mini README: Listener reporting model changes through logging.

Structure:
    * LoggingListener - observer that logs a summary of each state change.

The listener re-reads the model on every notification and keeps the last
summary so command line output and tests can inspect what it saw.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from ..logging_utils import get_logger
from ..model.listener import ExpenseTrackerModelListener

if TYPE_CHECKING:
    from ..model.expense_tracker_model import ExpenseTrackerModel

LOGGER = get_logger(__name__)


class LoggingListener(ExpenseTrackerModelListener):
    """Log ledger size, filter size, and total spend after each change."""

    def __init__(self) -> None:
        self.update_count = 0
        self.last_summary: Optional[Dict[str, float]] = None

    def update(self, model: "ExpenseTrackerModel") -> None:
        transactions = model.get_transactions()
        matched = model.get_matched_filter_indices()
        summary = {
            "transactions": len(transactions),
            "matched": len(matched),
            "total": sum(transaction.amount for transaction in transactions),
        }
        self.update_count += 1
        self.last_summary = summary
        LOGGER.info(
            "Model changed: %s transactions, %s matched, total %.2f",
            summary["transactions"],
            summary["matched"],
            summary["total"],
        )
