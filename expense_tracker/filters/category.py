"""Mini README: Filter selecting transactions of a single category."""

from __future__ import annotations

from typing import Union

from .base import TransactionFilter
from ..model.transaction import Transaction, TransactionCategory


class CategoryFilter(TransactionFilter):
    """Match transactions belonging to one category."""

    def __init__(self, category: Union[TransactionCategory, str]) -> None:
        if not isinstance(category, TransactionCategory):
            category = TransactionCategory.from_str(category)
        self.category = category

    def matches(self, transaction: Transaction) -> bool:
        return transaction.category is self.category
