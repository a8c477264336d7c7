"""Monthly metrics domain service."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Optional

from ledgerlens.domain.entities import (
    MonthOverMonthChange,
    MonthlyMetrics,
    Transaction,
    TransactionType,
)
from ledgerlens.domain.errors import ValidationError, invalid_month
from ledgerlens.utils.amount_parser import ZERO, to_amount
from ledgerlens.utils.months import is_in_month, month_start, previous_month

if TYPE_CHECKING:
    from ledgerlens.database.base import Database


def sum_amounts(
    transactions: Iterable[Transaction],
    txn_type: TransactionType,
    month: Optional[date] = None,
) -> Decimal:
    """Sum amounts of one transaction type, optionally within a month."""
    total = ZERO
    for txn in transactions:
        if txn.type != txn_type:
            continue
        if month is not None and not is_in_month(txn.effective_date, month):
            continue
        total += to_amount(txn.amount)
    return total


def calculate_monthly_metrics(
    transactions: Iterable[Transaction],
    year: int,
    month: int,
    user_id: Optional[str] = None,
) -> MonthlyMetrics:
    """Calculate all-time totals and the totals of one month.

    Args:
        transactions: Transaction snapshot for a user
        year: Target year
        month: Target month (1-12)
        user_id: Owner of the snapshot, carried into the result

    Returns:
        MonthlyMetrics; a month without transactions yields zero monthly fields

    Raises:
        ValidationError: If month is outside 1..12
    """
    if not 1 <= month <= 12:
        raise ValidationError(invalid_month(month))

    snapshot = tuple(transactions)
    target_month = month_start(year, month)

    return MonthlyMetrics(
        user_id=user_id,
        month=target_month,
        total_income=sum_amounts(snapshot, TransactionType.INCOME),
        total_expenses=sum_amounts(snapshot, TransactionType.EXPENSE),
        monthly_income=sum_amounts(snapshot, TransactionType.INCOME, target_month),
        monthly_expenses=sum_amounts(snapshot, TransactionType.EXPENSE, target_month),
    )


def calculate_month_over_month_change(current, previous) -> MonthOverMonthChange:
    """Compare a figure against the same figure of the previous month.

    Without a positive previous value the change counts as +100% when the
    current value is positive, otherwise 0%.
    """
    current = to_amount(current)
    previous = to_amount(previous)
    change = current - previous

    if previous > 0:
        percent_change = float(change / previous * 100)
    elif current > 0:
        percent_change = 100.0
    else:
        percent_change = 0.0

    return MonthOverMonthChange(
        current=current,
        previous=previous,
        change=change,
        percent_change=percent_change,
    )


class MetricsService:
    """Service for computing monthly metrics from a user's ledger."""

    def __init__(self, db: Database):
        """Initialize metrics service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_monthly_metrics(self, user_id: str, year: int, month: int) -> MonthlyMetrics:
        """Compute metrics for one month from a fresh transaction snapshot."""
        transactions = self.db.query_transactions(user_id)
        return calculate_monthly_metrics(transactions, year, month, user_id=user_id)

    def get_month_over_month_change(
        self, user_id: str, year: int, month: int
    ) -> dict[str, MonthOverMonthChange]:
        """Compare income and expenses of a month with the month before.

        Returns:
            Mapping with "income" and "expenses" entries
        """
        if not 1 <= month <= 12:
            raise ValidationError(invalid_month(month))

        transactions = tuple(self.db.query_transactions(user_id))
        prior = previous_month(month_start(year, month))

        current = calculate_monthly_metrics(transactions, year, month, user_id=user_id)
        previous = calculate_monthly_metrics(
            transactions, prior.year, prior.month, user_id=user_id
        )
        return {
            "income": calculate_month_over_month_change(
                current.monthly_income, previous.monthly_income
            ),
            "expenses": calculate_month_over_month_change(
                current.monthly_expenses, previous.monthly_expenses
            ),
        }
