"""Mini README: Filter selecting transactions within an amount range."""

from __future__ import annotations

from .base import TransactionFilter
from ..model.transaction import Transaction


class AmountFilter(TransactionFilter):
    """Match transactions whose amount lies within inclusive bounds."""

    def __init__(self, min_amount: float, max_amount: float) -> None:
        if min_amount < 0 or max_amount < 0:
            raise ValueError("Amount bounds must not be negative.")
        if min_amount > max_amount:
            raise ValueError(
                f"Minimum amount {min_amount} exceeds maximum amount {max_amount}."
            )
        self.min_amount = float(min_amount)
        self.max_amount = float(max_amount)

    def matches(self, transaction: Transaction) -> bool:
        return self.min_amount <= transaction.amount <= self.max_amount
