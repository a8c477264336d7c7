"""Shared pytest fixtures for ledgerlens tests."""

import tempfile
import os
from datetime import date, datetime
from decimal import Decimal
import pytest

from ledgerlens.database.factories import create_sqlite_database
from ledgerlens.domain.analytics import CategoryAnalyticsService
from ledgerlens.domain.entities import TargetType, Transaction, TransactionType
from ledgerlens.domain.health import HealthService
from ledgerlens.domain.history import HistoryService
from ledgerlens.domain.metrics import MetricsService
from ledgerlens.domain.net_worth import NetWorthService
from ledgerlens.domain.targets import TargetService

USER_ID = "user-1"


def make_transaction(
    txn_type,
    amount,
    category=None,
    txn_date=None,
    created_at=None,
    txn_id=1,
    user_id=USER_ID,
):
    """Build a Transaction entity without touching the database."""
    return Transaction(
        id=txn_id,
        user_id=user_id,
        type=TransactionType(txn_type),
        amount=Decimal(str(amount)),
        category=category,
        description=None,
        date=txn_date,
        created_at=created_at or datetime(2024, 1, 1, 12, 0, 0),
    )


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def metrics_service(temp_db):
    """Create a MetricsService with a temporary database."""
    return MetricsService(temp_db)


@pytest.fixture
def analytics_service(temp_db):
    """Create a CategoryAnalyticsService with a temporary database."""
    return CategoryAnalyticsService(temp_db)


@pytest.fixture
def history_service(temp_db):
    """Create a HistoryService with a temporary database."""
    return HistoryService(temp_db)


@pytest.fixture
def net_worth_service(temp_db):
    """Create a NetWorthService with a temporary database."""
    return NetWorthService(temp_db)


@pytest.fixture
def health_service(temp_db):
    """Create a HealthService with a temporary database."""
    return HealthService(temp_db)


@pytest.fixture
def target_service(temp_db):
    """Create a TargetService with a temporary database."""
    return TargetService(temp_db)


@pytest.fixture
def sample_ledger(temp_db):
    """Populate a ledger spanning January to March 2024.

    Monthly totals:
        2024-01: income 3000, expenses 1000 (Rent 800, Groceries 200)
        2024-02: income 3000, expenses 1500 (Rent 800, Groceries 400, Dining Out 300)
        2024-03: income 2000, expenses 2500 (Rent 800, Groceries 100, Shopping 1600)
    """
    entries = [
        ("income", "3000", "salary", date(2024, 1, 31)),
        ("expense", "800", "rent", date(2024, 1, 1)),
        ("expense", "200", "groceries", date(2024, 1, 12)),
        ("income", "3000", "Salary", date(2024, 2, 29)),
        ("expense", "800", "Rent", date(2024, 2, 1)),
        ("expense", "150", "grocery", date(2024, 2, 10)),
        ("expense", "250", "GROCERIES", date(2024, 2, 20)),
        ("expense", "300", "restaurant", date(2024, 2, 14)),
        ("income", "2000", "freelance", date(2024, 3, 15)),
        ("expense", "800", "rent", date(2024, 3, 1)),
        ("expense", "100", "groceries", date(2024, 3, 5)),
        ("expense", "1600", "shopping", date(2024, 3, 22)),
    ]
    for txn_type, amount, category, txn_date in entries:
        temp_db.add_transaction(
            user_id=USER_ID,
            type=TransactionType(txn_type),
            amount=Decimal(amount),
            category=category,
            description=f"{category} {txn_date}",
            date=txn_date,
        )

    temp_db.add_asset(
        user_id=USER_ID,
        name="Brokerage",
        type="stocks",
        current_value=Decimal("10000"),
    )
    temp_db.add_target(
        user_id=USER_ID,
        title="Emergency fund",
        target_amount=Decimal("5000"),
        current_amount=Decimal("1500"),
        target_type=TargetType.SAVINGS,
    )
    temp_db.add_target(
        user_id=USER_ID,
        title="Groceries budget",
        target_amount=Decimal("300"),
        current_amount=Decimal("0"),
        category="Groceries",
        target_type=TargetType.BUDGET,
    )
    return temp_db


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
