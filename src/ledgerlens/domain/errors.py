"""Shared domain error messages and error types."""

from datetime import date


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class DataSourceError(DomainError):
    """The data-access collaborator failed to deliver a snapshot."""


def invalid_month(month: int) -> str:
    """Return message for a month number outside 1..12."""
    return f"Invalid month {month}: expected a value between 1 and 12"


def month_requires_year(month: int) -> str:
    """Return message for a month filter given without a year."""
    return f"Month {month} given without a year"


def invalid_window(window: int) -> str:
    """Return message for a history window that cannot produce any month."""
    return f"Invalid history window {window}: expected at least 1 month"


def negative_amount(field: str, amount) -> str:
    """Return message for an amount that must not be negative."""
    return f"{field} must not be negative (got {amount})"


def unknown_transaction_type(value: str) -> str:
    """Return message for an unsupported transaction type."""
    return f"Unknown transaction type '{value}': expected 'income' or 'expense'"


def unknown_target_type(value: str) -> str:
    """Return message for an unsupported target type."""
    return f"Unknown target type '{value}': expected 'savings' or 'budget'"


def target_not_found(target_id: int) -> str:
    """Return message for missing target."""
    return f"Target {target_id} not found"


def ledger_read_failed(what: str, user_id: str, error: Exception) -> str:
    """Return message for a snapshot read that failed in the data source."""
    return f"Could not read {what} for user '{user_id}': {error}"


def month_load_failed(month: date, error: Exception) -> str:
    """Return message for a month that could not be computed."""
    return f"Could not compute metrics for {month:%Y-%m}: {error}"
