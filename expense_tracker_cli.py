"""Mini README: Entry point CLI for exploring the expense tracker model.

This script exposes a Typer CLI that seeds a model with demo expenses,
applies optional category and amount filters, and prints the ledger with
matched rows highlighted. Logging is configured from environment-aware
settings before any command runs.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

import typer

from expense_tracker.configuration import get_settings
from expense_tracker.filters import AmountFilter, CategoryFilter, TransactionFilter, apply_filter
from expense_tracker.listeners import LoggingListener
from expense_tracker.logging_utils import configure_root_logger
from expense_tracker.model import ExpenseTrackerModel, Transaction, TransactionCategory

cli = typer.Typer(help="Inspect and filter expenses held by the expense tracker model.")


def _demo_transactions() -> List[Transaction]:
    """Return deterministic demo expenses."""

    return [
        Transaction.create(42.5, "food", description="Weekly groceries", occurred_on=date(2024, 5, 3)),
        Transaction.create(120.0, "travel", description="Train tickets", occurred_on=date(2024, 5, 7)),
        Transaction.create(64.2, "bills", description="Electricity", occurred_on=date(2024, 5, 10)),
        Transaction.create(18.0, "entertainment", description="Cinema", occurred_on=date(2024, 5, 12)),
        Transaction.create(9.75, "food", description="Lunch", occurred_on=date(2024, 5, 14)),
    ]


def _build_filters(
    category: Optional[str], min_amount: Optional[float], max_amount: Optional[float]
) -> List[TransactionFilter]:
    """Translate command line options into filter instances."""

    filters: List[TransactionFilter] = []
    try:
        if category is not None:
            filters.append(CategoryFilter(category))
        if min_amount is not None or max_amount is not None:
            filters.append(
                AmountFilter(
                    min_amount if min_amount is not None else 0.0,
                    max_amount if max_amount is not None else float("inf"),
                )
            )
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error
    return filters


@cli.command()
def demo(
    category: Optional[str] = typer.Option(None, help="Only match expenses in this category."),
    min_amount: Optional[float] = typer.Option(None, help="Lowest amount to match (inclusive)."),
    max_amount: Optional[float] = typer.Option(None, help="Highest amount to match (inclusive)."),
) -> None:
    """Load demo expenses, apply filters, and print the ledger."""

    settings = get_settings()
    configure_root_logger(settings.log_level)

    model = ExpenseTrackerModel()
    listener = LoggingListener()
    model.register(listener)
    for transaction in _demo_transactions():
        model.add_transaction(transaction)

    # Filters combine by intersection; each run publishes its own matches.
    matched = set(range(len(model.get_transactions())))
    active_filters = _build_filters(category, min_amount, max_amount)
    for transaction_filter in active_filters:
        matched &= set(apply_filter(model, transaction_filter))
    if active_filters:
        model.set_matched_filter_indices(sorted(matched))

    highlighted = set(model.get_matched_filter_indices())
    symbol = settings.currency_symbol
    for index, transaction in enumerate(model.get_transactions()):
        marker = "*" if index in highlighted else " "
        typer.echo(
            f"{marker} {index:>2} {transaction.occurred_on.isoformat()} "
            f"{transaction.category.value:<13} {symbol}{transaction.amount:>8.2f} "
            f"{transaction.description}"
        )
    total = sum(transaction.amount for transaction in model.get_transactions())
    typer.echo(f"Total: {symbol}{total:.2f} ({len(highlighted)} matched, {listener.update_count} updates)")


@cli.command()
def categories() -> None:
    """List the supported expense categories."""

    for category in TransactionCategory:
        typer.echo(category.value)


if __name__ == "__main__":
    cli()
