"""Mini README: Observer interface for expense tracker state changes.

Structure:
    * ExpenseTrackerModelListener - abstract observer notified on every change.

Listeners receive the model itself and pull fresh state through its public
accessors rather than caching views between notifications.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .expense_tracker_model import ExpenseTrackerModel


class ExpenseTrackerModelListener(ABC):
    """Base interface for objects observing an ``ExpenseTrackerModel``."""

    @abstractmethod
    def update(self, model: "ExpenseTrackerModel") -> None:
        """React to a state change of ``model``."""
