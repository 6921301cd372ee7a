"""Mini README: Tests for transaction construction helpers.

Covers category coercion, amount validation, and date parsing performed by
``Transaction.create`` before values reach the model.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from expense_tracker.model import Transaction, TransactionCategory


def test_create_coerces_loose_input() -> None:
    """Strings are normalised into typed fields."""

    transaction = Transaction.create("12.50", " Food ", description="Snacks", occurred_on="2024-05-02")

    assert transaction.amount == pytest.approx(12.5)
    assert transaction.category is TransactionCategory.FOOD
    assert transaction.occurred_on == date(2024, 5, 2)
    assert transaction.as_dict() == {
        "amount": 12.5,
        "category": "food",
        "description": "Snacks",
        "occurred_on": "2024-05-02",
    }


def test_create_accepts_datetimes() -> None:
    transaction = Transaction.create(1, TransactionCategory.BILLS, occurred_on=datetime(2024, 1, 2, 15, 30))

    assert transaction.occurred_on == date(2024, 1, 2)


@pytest.mark.parametrize("amount", [0, -5, "abc", None])
def test_create_rejects_bad_amounts(amount: object) -> None:
    """Amounts must be numeric and strictly positive."""

    with pytest.raises(ValueError):
        Transaction.create(amount, "food")  # type: ignore[arg-type]


def test_create_rejects_unknown_category() -> None:
    with pytest.raises(ValueError, match="Unsupported transaction category"):
        Transaction.create(5, "groceries")


def test_create_rejects_bad_dates() -> None:
    with pytest.raises(ValueError):
        Transaction.create(5, "food", occurred_on="yesterday")


def test_transactions_compare_by_value() -> None:
    """Equal fields mean equal transactions, which drives removal."""

    first = Transaction.create(3, "travel", occurred_on=date(2024, 3, 1))
    second = Transaction.create(3.0, "TRAVEL", occurred_on="2024-03-01")

    assert first == second
    assert first is not second
