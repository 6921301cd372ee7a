"""Mini README: State model for the expense tracker.

The ``expense_tracker_model`` module holds the observable container, while
``transaction`` and ``listener`` define the values it stores and the observer
interface it notifies.
"""

from .expense_tracker_model import ExpenseTrackerModel, InvalidArgumentError
from .listener import ExpenseTrackerModelListener
from .transaction import Transaction, TransactionCategory

__all__ = [
    "ExpenseTrackerModel",
    "ExpenseTrackerModelListener",
    "InvalidArgumentError",
    "Transaction",
    "TransactionCategory",
]
