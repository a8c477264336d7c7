"""Tests for database mappers."""

from datetime import datetime, date
from decimal import Decimal

from ledgerlens.database.models import (
    Asset as ORMAsset,
    Target as ORMTarget,
    Transaction as ORMTransaction,
)
from ledgerlens.database.mappers import (
    asset_to_domain,
    target_to_domain,
    transaction_to_domain,
)
from ledgerlens.domain.entities import (
    Asset,
    Target,
    TargetType,
    Transaction,
    TransactionType,
)


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_domain(self):
        """Test converting ORM Transaction to domain Transaction."""
        orm_transaction = ORMTransaction(
            id=7,
            user_id="user-1",
            type="income",
            amount=Decimal("1234.56"),
            category="salary",
            description="January pay",
            transaction_date=date(2024, 1, 31),
            created_at=datetime(2024, 2, 1, 9, 30),
        )
        domain_transaction = transaction_to_domain(orm_transaction)

        assert isinstance(domain_transaction, Transaction)
        assert domain_transaction.id == 7
        assert domain_transaction.user_id == "user-1"
        assert domain_transaction.type == TransactionType.INCOME
        assert domain_transaction.amount == Decimal("1234.56")
        assert domain_transaction.category == "salary"
        assert domain_transaction.date == date(2024, 1, 31)
        assert domain_transaction.effective_date == date(2024, 1, 31)

    def test_transaction_without_date_uses_created_at(self):
        """Test that the effective date falls back to the creation timestamp."""
        orm_transaction = ORMTransaction(
            id=1,
            user_id="user-1",
            type="expense",
            amount=Decimal("10"),
            transaction_date=None,
            created_at=datetime(2024, 3, 5, 18, 0),
        )
        domain_transaction = transaction_to_domain(orm_transaction)

        assert domain_transaction.date is None
        assert domain_transaction.effective_date == date(2024, 3, 5)

    def test_transaction_type_is_case_insensitive(self):
        """Test that stored types are matched regardless of case."""
        orm_transaction = ORMTransaction(
            id=1, user_id="u", type="INCOME", amount=Decimal("1"), created_at=datetime(2024, 1, 1)
        )

        assert transaction_to_domain(orm_transaction).type == TransactionType.INCOME

    def test_unknown_transaction_type_counts_as_expense(self):
        """Test that unusable types are treated as expenses."""
        orm_transaction = ORMTransaction(
            id=1, user_id="u", type="transfer", amount=Decimal("1"), created_at=datetime(2024, 1, 1)
        )

        assert transaction_to_domain(orm_transaction).type == TransactionType.EXPENSE

    def test_missing_amount_becomes_zero(self):
        """Test that missing amounts are sanitized."""
        orm_transaction = ORMTransaction(
            id=1, user_id="u", type="expense", amount=None, created_at=datetime(2024, 1, 1)
        )

        assert transaction_to_domain(orm_transaction).amount == Decimal("0")

    def test_non_finite_amount_becomes_zero(self):
        """Test that NaN and infinite amounts are sanitized."""
        for value in (float("nan"), float("inf"), Decimal("-Infinity")):
            orm_transaction = ORMTransaction(
                id=1, user_id="u", type="income", amount=value, created_at=datetime(2024, 1, 1)
            )
            assert transaction_to_domain(orm_transaction).amount == Decimal("0")


class TestAssetMapper:
    """Tests for Asset mapper."""

    def test_asset_to_domain(self):
        """Test converting ORM Asset to domain Asset."""
        orm_asset = ORMAsset(
            id=3,
            user_id="user-1",
            name="Brokerage",
            type="stocks",
            current_value=Decimal("10000.00"),
            currency="EUR",
        )
        domain_asset = asset_to_domain(orm_asset)

        assert isinstance(domain_asset, Asset)
        assert domain_asset.name == "Brokerage"
        assert domain_asset.type == "stocks"
        assert domain_asset.current_value == Decimal("10000.00")
        assert domain_asset.currency == "EUR"

    def test_asset_without_value(self):
        """Test that a missing asset value is treated as zero."""
        orm_asset = ORMAsset(id=1, user_id="u", name="Car", type="vehicle", current_value=None)

        assert asset_to_domain(orm_asset).current_value == Decimal("0")


class TestTargetMapper:
    """Tests for Target mapper."""

    def test_target_to_domain(self):
        """Test converting ORM Target to domain Target."""
        orm_target = ORMTarget(
            id=2,
            user_id="user-1",
            title="Dining budget",
            target_amount=Decimal("250"),
            current_amount=Decimal("40"),
            category="Dining Out",
            target_type="budget",
        )
        domain_target = target_to_domain(orm_target)

        assert isinstance(domain_target, Target)
        assert domain_target.title == "Dining budget"
        assert domain_target.target_amount == Decimal("250")
        assert domain_target.current_amount == Decimal("40")
        assert domain_target.category == "Dining Out"
        assert domain_target.target_type == TargetType.BUDGET

    def test_unknown_target_type_is_savings(self):
        """Test that unusable target types fall back to savings."""
        orm_target = ORMTarget(
            id=1,
            user_id="u",
            title="Goal",
            target_amount=Decimal("100"),
            current_amount=None,
            target_type=None,
        )
        domain_target = target_to_domain(orm_target)

        assert domain_target.target_type == TargetType.SAVINGS
        assert domain_target.current_amount == Decimal("0")
