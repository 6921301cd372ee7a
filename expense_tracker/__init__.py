"""Mini README: Core package initializer for the expense tracker.

This module exposes the observable model and its collaborators so callers can
import them from the package root without knowing the module layout. The
``model`` subpackage owns all state; ``filters`` and ``listeners`` sit on
either side of it.
"""

from .logging_utils import get_logger
from .model import (
    ExpenseTrackerModel,
    ExpenseTrackerModelListener,
    InvalidArgumentError,
    Transaction,
    TransactionCategory,
)

__all__ = [
    "ExpenseTrackerModel",
    "ExpenseTrackerModelListener",
    "InvalidArgumentError",
    "Transaction",
    "TransactionCategory",
    "get_logger",
]
