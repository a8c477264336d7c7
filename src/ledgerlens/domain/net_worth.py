"""Net worth projection domain service.

Assets and targets are only known at their current value, so the same asset
total is applied to every month of the series. Only the cash component
(cumulative monthly balance) varies over time.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Sequence

from ledgerlens.domain.entities import Asset, ComparisonPoint, NetWorthPoint, Target
from ledgerlens.utils.amount_parser import ZERO, to_amount

if TYPE_CHECKING:
    from ledgerlens.database.base import Database


def calculate_total_assets(assets: Iterable[Asset], targets: Iterable[Target]) -> Decimal:
    """Sum current asset values and the amounts saved towards all targets."""
    asset_total = sum((to_amount(asset.current_value) for asset in assets), ZERO)
    target_total = sum((to_amount(target.current_amount) for target in targets), ZERO)
    return asset_total + target_total


def project_net_worth(
    series: Sequence[ComparisonPoint], total_assets: Decimal
) -> list[NetWorthPoint]:
    """Project net worth over a chronological series.

    Args:
        series: Comparison series sorted ascending by month
        total_assets: Current asset snapshot applied to every point

    Returns:
        One NetWorthPoint per series point
    """
    total_assets = to_amount(total_assets)
    cumulative_cash = ZERO
    points: list[NetWorthPoint] = []
    for point in sorted(series, key=lambda p: p.month):
        cumulative_cash += point.balance
        points.append(
            NetWorthPoint(
                month=point.month,
                net_worth=total_assets + cumulative_cash,
                assets=total_assets,
                cash_available=cumulative_cash,
            )
        )
    return points


class NetWorthService:
    """Service for net worth snapshots and projections."""

    def __init__(self, db: Database):
        """Initialize net worth service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_total_assets(self, user_id: str) -> Decimal:
        """Current value of all assets plus all target balances."""
        return calculate_total_assets(
            self.db.query_assets(user_id), self.db.query_targets(user_id)
        )

    def get_net_worth_history(
        self, user_id: str, series: Sequence[ComparisonPoint]
    ) -> list[NetWorthPoint]:
        """Overlay the current asset snapshot on a comparison series."""
        return project_net_worth(series, self.get_total_assets(user_id))
