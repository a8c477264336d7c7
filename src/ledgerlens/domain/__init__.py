"""Domain layer for ledgerlens application."""

from ledgerlens.domain.metrics import MetricsService
from ledgerlens.domain.analytics import CategoryAnalyticsService
from ledgerlens.domain.history import HistoryService
from ledgerlens.domain.net_worth import NetWorthService
from ledgerlens.domain.health import HealthService
from ledgerlens.domain.targets import TargetService

__all__ = [
    "MetricsService",
    "CategoryAnalyticsService",
    "HistoryService",
    "NetWorthService",
    "HealthService",
    "TargetService",
]
