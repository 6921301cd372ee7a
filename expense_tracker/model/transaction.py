"""Mini README: Transaction records stored by the expense tracker model.

Structure:
    * TransactionCategory - enum of the supported spending categories.
    * Transaction - dataclass storing a single expense and helpers.

The model treats transactions as opaque values: it stores them by reference
and relies on dataclass equality when removing entries. Construction helpers
live here so callers such as the CLI can coerce loose input before anything
reaches the ledger.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, Optional, Union


class TransactionCategory(str, Enum):
    """Enumerate the supported expense categories."""

    FOOD = "food"
    TRAVEL = "travel"
    BILLS = "bills"
    ENTERTAINMENT = "entertainment"
    OTHER = "other"

    @classmethod
    def from_str(cls, value: str) -> "TransactionCategory":
        """Coerce arbitrary casing into a valid category."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction category: {value}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single expense entry."""

    amount: float
    category: TransactionCategory
    occurred_on: date
    description: str = ""

    @classmethod
    def create(
        cls,
        amount: Union[float, int, str],
        category: Union[TransactionCategory, str],
        *,
        description: str = "",
        occurred_on: Optional[Union[date, datetime, str]] = None,
    ) -> "Transaction":
        """Build a transaction from loosely typed input."""

        try:
            parsed_amount = float(amount)
        except (TypeError, ValueError) as error:
            raise ValueError(f"Amount must be numeric, got {amount!r}") from error
        if parsed_amount <= 0:
            raise ValueError("Amount must be greater than zero.")

        if not isinstance(category, TransactionCategory):
            category = TransactionCategory.from_str(category)

        return cls(
            amount=parsed_amount,
            category=category,
            description=str(description),
            occurred_on=_parse_date(occurred_on) if occurred_on is not None else date.today(),
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "amount": self.amount,
            "category": self.category.value,
            "description": self.description,
            "occurred_on": self.occurred_on.isoformat(),
        }


def _parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as error:
            raise ValueError(f"Invalid ISO date: {value}") from error
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")
