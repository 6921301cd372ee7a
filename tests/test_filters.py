"""Mini README: Tests for the filter engine publishing into the model.

Checks that concrete filters select the expected positions and that
``apply_filter`` stores those positions through the model's validated setter.
"""

from __future__ import annotations

from datetime import date

import pytest

from expense_tracker.filters import AmountFilter, CategoryFilter, apply_filter
from expense_tracker.model import ExpenseTrackerModel, Transaction, TransactionCategory


@pytest.fixture()
def model() -> ExpenseTrackerModel:
    model = ExpenseTrackerModel()
    for amount, category in [(5.0, "food"), (50.0, "travel"), (15.0, "food"), (100.0, "bills")]:
        model.add_transaction(Transaction.create(amount, category, occurred_on=date(2024, 4, 1)))
    return model


def test_category_filter_publishes_matching_indices(model: ExpenseTrackerModel) -> None:
    """Only food rows should be matched."""

    indices = apply_filter(model, CategoryFilter("food"))

    assert indices == [0, 2]
    assert model.get_matched_filter_indices() == [0, 2]


def test_amount_filter_bounds_are_inclusive(model: ExpenseTrackerModel) -> None:
    indices = apply_filter(model, AmountFilter(15.0, 50.0))

    assert indices == [1, 2]


def test_filter_without_matches_clears_result(model: ExpenseTrackerModel) -> None:
    """No matches is a valid, empty result."""

    model.set_matched_filter_indices([3])

    apply_filter(model, CategoryFilter(TransactionCategory.ENTERTAINMENT))

    assert model.get_matched_filter_indices() == []


def test_ledger_change_invalidates_published_matches(model: ExpenseTrackerModel) -> None:
    apply_filter(model, CategoryFilter("bills"))

    model.add_transaction(Transaction.create(1.0, "bills"))

    assert model.get_matched_filter_indices() == []


def test_amount_filter_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        AmountFilter(10.0, 5.0)


def test_amount_filter_rejects_negative_bounds() -> None:
    with pytest.raises(ValueError):
        AmountFilter(-1.0, 5.0)


def test_category_filter_rejects_unknown_category() -> None:
    with pytest.raises(ValueError):
        CategoryFilter("unknown")
