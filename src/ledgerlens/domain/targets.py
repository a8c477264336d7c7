"""Savings goal and budget domain service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from ledgerlens.domain.categories import normalize_category
from ledgerlens.domain.entities import (
    BudgetUsage,
    Target,
    TargetType,
    Transaction,
    TransactionType,
)
from ledgerlens.domain.errors import NotFoundError, target_not_found
from ledgerlens.utils.amount_parser import ZERO, to_amount

if TYPE_CHECKING:
    from ledgerlens.database.base import Database


def calculate_budget_usage(
    target: Target, transactions: Iterable[Transaction]
) -> BudgetUsage:
    """Measure spending against a target.

    A target with a category is measured by the expenses of that canonical
    category within the supplied transactions. A target without a category
    has nothing to match against and uses its recorded current amount.
    """
    if target.category and target.category.strip():
        category = normalize_category(target.category)
        spent = sum(
            (
                to_amount(txn.amount)
                for txn in transactions
                if txn.type == TransactionType.EXPENSE
                and normalize_category(txn.category) == category
            ),
            ZERO,
        )
    else:
        spent = to_amount(target.current_amount)

    target_amount = to_amount(target.target_amount)
    percent_used = float(spent / target_amount * 100) if target_amount > 0 else 0.0

    return BudgetUsage(
        target=target,
        spent=spent,
        remaining=target_amount - spent,
        percent_used=percent_used,
    )


class TargetService:
    """Service for reading targets and measuring budgets."""

    def __init__(self, db: Database):
        """Initialize target service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_targets(
        self, user_id: str, target_type: Optional[TargetType] = None
    ) -> list[Target]:
        """List a user's targets, optionally only savings goals or budgets."""
        targets = self.db.query_targets(user_id)
        if target_type is None:
            return targets
        return [target for target in targets if target.target_type == target_type]

    def get_target(self, user_id: str, target_id: int) -> Target:
        """Get a single target.

        Raises:
            NotFoundError: If the user has no target with this ID
        """
        for target in self.db.query_targets(user_id):
            if target.id == target_id:
                return target
        raise NotFoundError(target_not_found(target_id))

    def get_budget_usage(self, user_id: str, year: int, month: int) -> list[BudgetUsage]:
        """Measure every budget target against one month's expenses."""
        budgets = self.list_targets(user_id, TargetType.BUDGET)
        if not budgets:
            return []
        transactions = self.db.query_transactions(user_id, month=month, year=year)
        return [calculate_budget_usage(budget, transactions) for budget in budgets]
