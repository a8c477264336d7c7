"""Financial health score.

The score is computed with a single formula driven by the savings rate of a
month:

* no income: 0
* expenses above income: 0, 15 or 30 depending on how far income is
  exceeded (at least 50%, at least 25%, less)
* expenses equal to income: 50
* expenses below income: 100 from a 20% savings rate upwards, otherwise
  scaled linearly from 50 towards 100
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import TYPE_CHECKING

from ledgerlens.domain.entities import HealthScore, HealthScoreBranch
from ledgerlens.domain.metrics import calculate_monthly_metrics
from ledgerlens.utils.amount_parser import to_amount

if TYPE_CHECKING:
    from ledgerlens.database.base import Database

TARGET_SAVINGS_RATE = Decimal("0.20")
SEVERE_OVERSPEND_RATE = Decimal("0.50")
HIGH_OVERSPEND_RATE = Decimal("0.25")

HEALTH_EXPLANATIONS: dict[HealthScoreBranch, str] = {
    HealthScoreBranch.NO_INCOME: "No income recorded. Add income transactions to get your health score.",
    HealthScoreBranch.SEVERE_OVERSPEND: "Your expenses exceed your income by 50% or more. Reducing spending is essential.",
    HealthScoreBranch.HIGH_OVERSPEND: "Your expenses exceed your income by 25% or more. Cut back to stop drawing down savings.",
    HealthScoreBranch.OVERSPEND: "Your expenses exceed your income this month. Reducing spending will improve your score.",
    HealthScoreBranch.BREAK_EVEN: "You spent exactly what you earned. Aim to save at least 20% of your income.",
    HealthScoreBranch.TARGET_SAVINGS: "You are saving 20% or more of your income. Keep it up.",
    HealthScoreBranch.PARTIAL_SAVINGS: "You're saving, but raising your savings rate to 20% will improve your score.",
}


def _finalize(raw_score: Decimal, branch: HealthScoreBranch) -> HealthScore:
    score = int(raw_score.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    score = max(0, min(100, score))
    return HealthScore(score=score, explanation=HEALTH_EXPLANATIONS[branch], branch=branch)


def evaluate_health_score(income, expenses) -> HealthScore:
    """Score a month's income and expenses on a 0-100 scale.

    Args:
        income: Monthly income; missing values count as zero
        expenses: Monthly expenses; missing values count as zero

    Returns:
        HealthScore whose explanation identifies the branch that produced it
    """
    income = to_amount(income)
    expenses = to_amount(expenses)

    if income <= 0:
        return _finalize(Decimal("0"), HealthScoreBranch.NO_INCOME)

    if expenses > income:
        overspend_rate = (expenses - income) / income
        if overspend_rate >= SEVERE_OVERSPEND_RATE:
            return _finalize(Decimal("0"), HealthScoreBranch.SEVERE_OVERSPEND)
        if overspend_rate >= HIGH_OVERSPEND_RATE:
            return _finalize(Decimal("15"), HealthScoreBranch.HIGH_OVERSPEND)
        return _finalize(Decimal("30"), HealthScoreBranch.OVERSPEND)

    if expenses == income:
        return _finalize(Decimal("50"), HealthScoreBranch.BREAK_EVEN)

    savings_rate = (income - expenses) / income
    if savings_rate >= TARGET_SAVINGS_RATE:
        return _finalize(Decimal("100"), HealthScoreBranch.TARGET_SAVINGS)
    return _finalize(
        50 + savings_rate / TARGET_SAVINGS_RATE * 50, HealthScoreBranch.PARTIAL_SAVINGS
    )


class HealthService:
    """Service for scoring a user's month."""

    def __init__(self, db: Database):
        self.db = db

    def get_health_score(self, user_id: str, year: int, month: int) -> HealthScore:
        metrics = calculate_monthly_metrics(
            self.db.query_transactions(user_id), year, month, user_id=user_id
        )
        return evaluate_health_score(metrics.monthly_income, metrics.monthly_expenses)
