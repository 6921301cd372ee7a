"""Mini README: Tests for the bundled logging listener.

Ensures the listener reads fresh state on each notification and reports it
through the ``expense_tracker`` loggers.
"""

from __future__ import annotations

import logging

import pytest

from expense_tracker.listeners import LoggingListener
from expense_tracker.model import ExpenseTrackerModel, Transaction


def test_logging_listener_tracks_each_change(caplog: pytest.LogCaptureFixture) -> None:
    """Each mutation should produce one summary reflecting current state."""

    model = ExpenseTrackerModel()
    listener = LoggingListener()
    model.register(listener)

    with caplog.at_level(logging.INFO, logger="expense_tracker.listeners.logging_listener"):
        model.add_transaction(Transaction.create(10.0, "food"))
        model.add_transaction(Transaction.create(2.5, "travel"))
        model.set_matched_filter_indices([1])

    assert listener.update_count == 3
    assert listener.last_summary == {"transactions": 2, "matched": 1, "total": 12.5}
    assert "2 transactions, 1 matched, total 12.50" in caplog.text


def test_unregistered_logging_listener_is_silent() -> None:
    model = ExpenseTrackerModel()
    listener = LoggingListener()
    model.register(listener)
    model.unregister(listener)

    model.add_transaction(Transaction.create(1.0, "other"))

    assert listener.update_count == 0
    assert listener.last_summary is None
