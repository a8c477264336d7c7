"""SQLAlchemy models for ledgerlens database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Numeric,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


def _utc_now() -> datetime:
    # SQLite has no timezone support, so timestamps are stored as naive UTC
    return datetime.now(UTC).replace(tzinfo=None)


class Transaction(Base):
    """Ledger transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False)
    type = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String, nullable=True)
    description = Column(String, nullable=True)
    transaction_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=_utc_now, nullable=False)

    __table_args__ = (Index("ix_transactions_user_id", "user_id"),)


class Asset(Base):
    """Asset model holding a current valuation."""

    __tablename__ = "assets"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    current_value = Column(Numeric(14, 2), nullable=False)
    currency = Column(String, nullable=False, default="USD")
    created_at = Column(DateTime, default=_utc_now, nullable=False)


class Target(Base):
    """Savings goal or budget model."""

    __tablename__ = "targets"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False)
    title = Column(String, nullable=False)
    target_amount = Column(Numeric(14, 2), nullable=False)
    current_amount = Column(Numeric(14, 2), nullable=False, default=0)
    category = Column(String, nullable=True)
    target_type = Column(String, nullable=False, default="savings")
    created_at = Column(DateTime, default=_utc_now, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
