"""Category analytics domain service."""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable

from ledgerlens.domain.categories import normalize_category, palette_color
from ledgerlens.domain.entities import (
    CategoryAnalyticsResult,
    CategoryBucket,
    CategoryTrend,
    Transaction,
    TransactionType,
)
from ledgerlens.domain.errors import ValidationError, invalid_month
from ledgerlens.utils.amount_parser import ZERO, to_amount
from ledgerlens.utils.months import month_start, previous_month

if TYPE_CHECKING:
    from ledgerlens.database.base import Database


def calculate_category_breakdown(
    transactions: Iterable[Transaction],
) -> CategoryAnalyticsResult:
    """Group expense transactions by canonical category.

    Buckets are ordered by amount, highest first; equal amounts are ordered
    by category name so the ranking is deterministic. Income transactions
    are ignored.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        if txn.type != TransactionType.EXPENSE:
            continue
        totals[normalize_category(txn.category)] += to_amount(txn.amount)

    total = sum(totals.values(), ZERO)
    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))

    buckets = []
    for rank, (name, amount) in enumerate(ordered):
        percentage = float(amount / total * 100) if total > 0 else 0.0
        buckets.append(
            CategoryBucket(
                name=name,
                amount=amount,
                percentage=percentage,
                rank=rank,
                color=palette_color(rank),
            )
        )

    return CategoryAnalyticsResult(buckets=tuple(buckets), total=total)


def calculate_percent_change(current: Decimal, previous: Decimal) -> float:
    """Percent change from previous to current, guarded for a zero base."""
    if previous > 0:
        return float((current - previous) / previous * 100)
    if current > 0:
        return 100.0
    return 0.0


def calculate_category_trends(
    current: CategoryAnalyticsResult,
    previous: CategoryAnalyticsResult,
) -> dict[str, CategoryTrend]:
    """Compare two category breakdowns category by category.

    Every category present in either period gets an entry; a category absent
    from a period counts as zero spending there.
    """
    current_amounts = current.amounts_by_category()
    previous_amounts = previous.amounts_by_category()

    trends: dict[str, CategoryTrend] = {}
    for name in sorted(set(current_amounts) | set(previous_amounts)):
        current_amount = current_amounts.get(name, ZERO)
        previous_amount = previous_amounts.get(name, ZERO)
        trends[name] = CategoryTrend(
            current=current_amount,
            previous=previous_amount,
            delta=current_amount - previous_amount,
            percent_change=calculate_percent_change(current_amount, previous_amount),
        )
    return trends


class CategoryAnalyticsService:
    """Service for category breakdowns and their month-over-month trends."""

    def __init__(self, db: Database):
        """Initialize category analytics service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_expense_transactions(
        self, user_id: str, year: int, month: int
    ) -> list[Transaction]:
        """Get the expense transactions of one month."""
        if not 1 <= month <= 12:
            raise ValidationError(invalid_month(month))
        transactions = self.db.query_transactions(user_id, month=month, year=year)
        return [txn for txn in transactions if txn.type == TransactionType.EXPENSE]

    def get_category_analytics(
        self, user_id: str, year: int, month: int
    ) -> CategoryAnalyticsResult:
        """Build the expense breakdown for one month."""
        return calculate_category_breakdown(
            self.get_expense_transactions(user_id, year, month)
        )

    def get_category_trends(
        self, user_id: str, year: int, month: int
    ) -> dict[str, CategoryTrend]:
        """Compare a month's breakdown with the calendar-previous month."""
        current = self.get_category_analytics(user_id, year, month)
        prior = previous_month(month_start(year, month))
        previous = self.get_category_analytics(user_id, prior.year, prior.month)
        return calculate_category_trends(current, previous)
