"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerlens.domain.entities import (
    Asset,
    Target,
    TargetType,
    Transaction,
    TransactionType,
)


class Database(ABC):
    """Abstract data-access interface for ledgerlens.

    The analytics services only read through this interface. The ``add_*``
    operations exist so a ledger can be populated from the CLI and tests.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Read operations
    @abstractmethod
    def query_transactions(
        self,
        user_id: str,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> list[Transaction]:
        """List a user's transactions, optionally restricted to a period.

        Args:
            user_id: Owner of the ledger
            month: Optional month (1-12); requires year
            year: Optional year; without month selects the whole year

        Matching is by effective date: the explicit transaction date, or the
        creation timestamp when no date was recorded.
        """
        pass

    @abstractmethod
    def query_assets(self, user_id: str) -> list[Asset]:
        """List a user's assets."""
        pass

    @abstractmethod
    def query_targets(self, user_id: str) -> list[Target]:
        """List a user's savings goals and budgets."""
        pass

    # Population operations
    @abstractmethod
    def add_transaction(
        self,
        user_id: str,
        type: TransactionType,
        amount: Decimal,
        category: Optional[str] = None,
        description: Optional[str] = None,
        date: Optional[date] = None,
        created_at: Optional[datetime] = None,
    ) -> int:
        """Record a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def add_asset(
        self,
        user_id: str,
        name: str,
        type: str,
        current_value: Decimal,
        currency: str = "USD",
    ) -> int:
        """Record an asset. Returns asset ID."""
        pass

    @abstractmethod
    def add_target(
        self,
        user_id: str,
        title: str,
        target_amount: Decimal,
        current_amount: Decimal = Decimal("0"),
        category: Optional[str] = None,
        target_type: TargetType = TargetType.SAVINGS,
    ) -> int:
        """Record a savings goal or budget. Returns target ID."""
        pass
