"""Mini README: Filter engine feeding matched indices into the model.

Filters compute matches outside the model and publish them with
``apply_filter``. ``base`` holds the abstract interface, while ``amount`` and
``category`` provide the concrete filters used by the command line.
"""

from .amount import AmountFilter
from .base import TransactionFilter, apply_filter
from .category import CategoryFilter

__all__ = ["AmountFilter", "CategoryFilter", "TransactionFilter", "apply_filter"]
