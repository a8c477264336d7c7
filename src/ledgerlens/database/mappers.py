"""Mapper functions to convert SQLAlchemy models into domain entities.

Stored values are sanitized here: missing or non-finite amounts become zero
and unknown enum values fall back to the most conservative member.
"""

from ledgerlens.domain import entities as domain
from ledgerlens.database.models import (
    Asset as ORMAsset,
    Target as ORMTarget,
    Transaction as ORMTransaction,
)
from ledgerlens.utils.amount_parser import to_amount


def _transaction_type(value: str | None) -> domain.TransactionType:
    # Rows without a usable type are counted as expenses
    try:
        return domain.TransactionType((value or "").lower())
    except ValueError:
        return domain.TransactionType.EXPENSE


def _target_type(value: str | None) -> domain.TargetType:
    try:
        return domain.TargetType((value or "").lower())
    except ValueError:
        return domain.TargetType.SAVINGS


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        user_id=orm_transaction.user_id,
        type=_transaction_type(orm_transaction.type),
        amount=to_amount(orm_transaction.amount),
        category=orm_transaction.category,
        description=orm_transaction.description,
        date=orm_transaction.transaction_date,
        created_at=orm_transaction.created_at,
    )


def asset_to_domain(orm_asset: ORMAsset) -> domain.Asset:
    """Convert SQLAlchemy Asset model to domain Asset entity."""
    return domain.Asset(
        id=orm_asset.id,
        user_id=orm_asset.user_id,
        name=orm_asset.name,
        type=orm_asset.type,
        current_value=to_amount(orm_asset.current_value),
        currency=orm_asset.currency,
    )


def target_to_domain(orm_target: ORMTarget) -> domain.Target:
    """Convert SQLAlchemy Target model to domain Target entity."""
    return domain.Target(
        id=orm_target.id,
        user_id=orm_target.user_id,
        title=orm_target.title,
        target_amount=to_amount(orm_target.target_amount),
        current_amount=to_amount(orm_target.current_amount),
        category=orm_target.category,
        target_type=_target_type(orm_target.target_type),
    )
