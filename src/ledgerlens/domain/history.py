"""Historical series domain service.

A series is built from independent per-month metric loads. The loads run
concurrently; only the final chronological sort determines the order of the
result. A month whose load fails or is cancelled is left out of the series
instead of failing the whole request.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import CancelledError, ThreadPoolExecutor, as_completed
from datetime import date
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Sequence, TypeVar

from ledgerlens.domain.entities import ComparisonPoint, MonthlyMetrics
from ledgerlens.domain.errors import (
    ValidationError,
    invalid_window,
    month_load_failed,
)
from ledgerlens.domain.metrics import calculate_monthly_metrics
from ledgerlens.utils.months import shift_month, to_month

if TYPE_CHECKING:
    from ledgerlens.database.base import Database

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_WINDOW = 12
DEFAULT_MAX_WORKERS = 4

MonthLoader = Callable[[date], MonthlyMetrics]
PointT = TypeVar("PointT")


def requested_months(anchor: date, window: int) -> list[date]:
    """Return the anchor month and the window-1 months before it, newest first."""
    if window < 1:
        raise ValidationError(invalid_window(window))
    anchor = to_month(anchor)
    return [shift_month(anchor, -offset) for offset in range(window)]


def _load_month(
    load_month: MonthLoader, month: date, cancel_event: Optional[threading.Event]
) -> MonthlyMetrics:
    if cancel_event is not None and cancel_event.is_set():
        raise CancelledError()
    return load_month(month)


def load_monthly_metrics(
    load_month: MonthLoader,
    months: Sequence[date],
    max_workers: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
) -> list[MonthlyMetrics]:
    """Load metrics for each month concurrently, dropping failed months.

    Args:
        load_month: Callable computing the metrics of one month
        months: Months to load (first day of each month)
        max_workers: Thread pool size; defaults to min(len(months), 4)
        cancel_event: When set, months not yet loaded are cancelled

    Returns:
        Metrics of every month that loaded successfully, in completion order
    """
    if not months:
        return []

    workers = max_workers or min(len(months), DEFAULT_MAX_WORKERS)
    loaded: list[MonthlyMetrics] = []

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(_load_month, load_month, month, cancel_event): month
            for month in months
        }
        for future in as_completed(futures):
            month = futures[future]
            if cancel_event is not None and cancel_event.is_set():
                for pending in futures:
                    pending.cancel()
            try:
                metrics = future.result()
            except CancelledError:
                logger.info("Skipping %s: load cancelled", f"{month:%Y-%m}")
                continue
            except Exception as e:
                # A failing month is omitted; the rest of the series stands
                logger.warning(month_load_failed(month, e), exc_info=True)
                continue

            if to_month(metrics.month) != month:
                logger.warning(
                    "Skipping %s: loader returned metrics for %s",
                    f"{month:%Y-%m}",
                    f"{metrics.month:%Y-%m}",
                )
                continue
            loaded.append(metrics)

    return loaded


def build_comparison_points(metrics: Iterable[MonthlyMetrics]) -> list[ComparisonPoint]:
    """Sort monthly metrics chronologically and attach deltas.

    Each point's deltas are relative to the preceding point of the sorted
    sequence, which is not necessarily the calendar-previous month when
    months are missing. The first point has zero deltas. Only the first
    metrics seen for a month are kept.
    """
    by_month: dict[date, MonthlyMetrics] = {}
    for item in metrics:
        month = to_month(item.month)
        if month in by_month:
            logger.warning("Duplicate metrics for %s ignored", f"{month:%Y-%m}")
            continue
        by_month[month] = item

    points: list[ComparisonPoint] = []
    previous: Optional[ComparisonPoint] = None
    for month in sorted(by_month):
        item = by_month[month]
        point = ComparisonPoint(
            month=month,
            income=item.monthly_income,
            expenses=item.monthly_expenses,
            balance=item.monthly_balance,
        )
        if previous is not None:
            point = ComparisonPoint(
                month=month,
                income=point.income,
                expenses=point.expenses,
                balance=point.balance,
                income_change=point.income - previous.income,
                expenses_change=point.expenses - previous.expenses,
                balance_change=point.balance - previous.balance,
            )
        points.append(point)
        previous = point

    return points


def build_comparison_series(
    load_month: MonthLoader,
    anchor: date,
    window: int = DEFAULT_HISTORY_WINDOW,
    max_workers: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
) -> list[ComparisonPoint]:
    """Build the chronological series of the window months ending at anchor.

    The series holds one point per successfully loaded month, so it can be
    shorter than the requested window.
    """
    months = requested_months(anchor, window)
    metrics = load_monthly_metrics(
        load_month, months, max_workers=max_workers, cancel_event=cancel_event
    )
    series = build_comparison_points(metrics)
    logger.debug(
        "Built series of %d/%d months ending %s", len(series), window, f"{months[0]:%Y-%m}"
    )
    return series


def select_comparison_window(series: Sequence[PointT], months: int) -> list[PointT]:
    """Return the most recent points of a chronological series.

    The requested count is clamped to [1, len(series)], so asking for more
    months than available returns the whole series and asking for fewer than
    one returns the latest point.
    """
    if not series:
        return []
    count = max(1, min(months, len(series)))
    return list(series[-count:])


class HistoryService:
    """Service for multi-month comparison series."""

    def __init__(self, db: Database, max_workers: Optional[int] = None):
        """Initialize history service.

        Args:
            db: Database instance
            max_workers: Optional thread pool size for per-month loads
        """
        self.db = db
        self.max_workers = max_workers

    def build_series(
        self,
        user_id: str,
        anchor: date,
        window: int = DEFAULT_HISTORY_WINDOW,
        cancel_event: Optional[threading.Event] = None,
    ) -> list[ComparisonPoint]:
        """Build the comparison series for a user.

        The ledger is read once; every month is computed from that single
        snapshot so all points reflect the same data.
        """
        requested_months(anchor, window)
        snapshot = tuple(self.db.query_transactions(user_id))

        def load_month(month: date) -> MonthlyMetrics:
            return calculate_monthly_metrics(
                snapshot, month.year, month.month, user_id=user_id
            )

        return build_comparison_series(
            load_month,
            anchor,
            window=window,
            max_workers=self.max_workers,
            cancel_event=cancel_event,
        )

    def get_comparison_window(
        self,
        user_id: str,
        anchor: date,
        months: int,
        window: int = DEFAULT_HISTORY_WINDOW,
    ) -> list[ComparisonPoint]:
        """Build a series and return its most recent months."""
        series = self.build_series(user_id, anchor, window=window)
        return select_comparison_window(series, months)
