"""Domain model entities for ledgerlens.

These are pure data classes representing ledger records and the analytics
derived from them, independent of database schema. Derived entities are
recomputed on every request and never persisted.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of a transaction; amounts themselves are never negative."""

    INCOME = "income"
    EXPENSE = "expense"


class TargetType(str, Enum):
    """Kind of target: a savings goal or a spending-limit budget."""

    SAVINGS = "savings"
    BUDGET = "budget"


class HealthScoreBranch(str, Enum):
    """Formula branch that produced a health score."""

    NO_INCOME = "no_income"
    SEVERE_OVERSPEND = "severe_overspend"
    HIGH_OVERSPEND = "high_overspend"
    OVERSPEND = "overspend"
    BREAK_EVEN = "break_even"
    TARGET_SAVINGS = "target_savings"
    PARTIAL_SAVINGS = "partial_savings"


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    user_id: str
    type: TransactionType
    amount: Decimal
    category: Optional[str]
    description: Optional[str]
    date: Optional[date]
    created_at: datetime

    @property
    def effective_date(self) -> date:
        """Explicit transaction date, falling back to the creation timestamp."""
        if self.date is not None:
            return self.date
        return self.created_at.date()


@dataclass(frozen=True)
class Asset:
    """Asset domain entity valued at its current snapshot value."""

    id: int
    user_id: str
    name: str
    type: str
    current_value: Decimal
    currency: str


@dataclass(frozen=True)
class Target:
    """Savings goal or budget domain entity."""

    id: int
    user_id: str
    title: str
    target_amount: Decimal
    current_amount: Decimal
    category: Optional[str]
    target_type: TargetType

    @property
    def progress_percentage(self) -> float:
        """Progress towards the target amount, clamped to [0, 100]."""
        if self.target_amount <= 0:
            return 0.0
        progress = float(self.current_amount / self.target_amount * 100)
        return max(0.0, min(progress, 100.0))


@dataclass(frozen=True)
class MonthlyMetrics:
    """Income/expense totals for one month plus all-time totals."""

    user_id: Optional[str]
    month: date
    total_income: Decimal
    total_expenses: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal

    @property
    def total_balance(self) -> Decimal:
        return self.total_income - self.total_expenses

    @property
    def monthly_balance(self) -> Decimal:
        return self.monthly_income - self.monthly_expenses


@dataclass(frozen=True)
class MonthOverMonthChange:
    """Change of a single figure between two consecutive months."""

    current: Decimal
    previous: Decimal
    change: Decimal
    percent_change: float


@dataclass(frozen=True)
class CategoryBucket:
    """Expense total for one canonical category within a period."""

    name: str
    amount: Decimal
    percentage: float
    rank: int
    color: str


@dataclass(frozen=True)
class CategoryAnalyticsResult:
    """Ordered category breakdown for a period."""

    buckets: tuple[CategoryBucket, ...]
    total: Decimal

    @property
    def count(self) -> int:
        return len(self.buckets)

    def amounts_by_category(self) -> dict[str, Decimal]:
        return {bucket.name: bucket.amount for bucket in self.buckets}


@dataclass(frozen=True)
class CategoryTrend:
    """Period-over-period spending change for one category.

    ``is_positive`` is purely numeric: more spending is still "positive".
    """

    current: Decimal
    previous: Decimal
    delta: Decimal
    percent_change: float

    @property
    def is_positive(self) -> bool:
        return self.delta >= 0


@dataclass(frozen=True)
class ComparisonPoint:
    """One month in a historical series with deltas to the previous point."""

    month: date
    income: Decimal
    expenses: Decimal
    balance: Decimal
    income_change: Decimal = Decimal("0")
    expenses_change: Decimal = Decimal("0")
    balance_change: Decimal = Decimal("0")


@dataclass(frozen=True)
class NetWorthPoint:
    """Projected net worth at the end of one month."""

    month: date
    net_worth: Decimal
    assets: Decimal
    cash_available: Decimal


@dataclass(frozen=True)
class HealthScore:
    """Composite financial-health score in [0, 100]."""

    score: int
    explanation: str
    branch: HealthScoreBranch


@dataclass(frozen=True)
class BudgetUsage:
    """Spending measured against a budget target."""

    target: Target
    spent: Decimal
    remaining: Decimal
    percent_used: float

    @property
    def is_over_budget(self) -> bool:
        return self.target.target_amount > 0 and self.spent > self.target.target_amount
