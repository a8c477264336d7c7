"""Commands for recording ledger entries."""

import click
from datetime import date
from decimal import Decimal
from ledgerlens.cli.error_handling import handle_domain_error
from ledgerlens.domain.categories import normalize_category
from ledgerlens.domain.entities import TargetType, TransactionType
from ledgerlens.domain.errors import DomainError
from ledgerlens.utils.amount_parser import parse_amount
from dateutil import parser as date_parser


def _parse_amount_or_exit(ctx, value: str, label: str) -> Decimal:
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.group("add")
def add():
    """Record transactions, assets and targets."""


@add.command("transaction")
@click.option(
    "--type",
    "txn_type",
    required=True,
    type=click.Choice([t.value for t in TransactionType], case_sensitive=False),
    help="Transaction direction",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45)")
@click.option("--category", help="Category (e.g., 'Groceries', 'salary')")
@click.option("--description", help="Transaction description")
@click.option("--date", "txn_date", help="Transaction date (YYYY-MM-DD); defaults to now")
@click.pass_context
def add_transaction(
    ctx,
    txn_type: str,
    amount: str,
    category: str | None,
    description: str | None,
    txn_date: str | None,
):
    """Add a transaction.

    Examples:
        ledgerlens add transaction --type expense --amount 42.50 --category groceries
        ledgerlens add transaction --type income --amount 3000 --category salary --date 2024-01-31
    """
    db = ctx.obj["db"]
    parsed_amount = _parse_amount_or_exit(ctx, amount, "amount")

    parsed_date: date | None = None
    if txn_date:
        try:
            parsed_date = date_parser.parse(txn_date).date()
        except (ValueError, OverflowError) as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        transaction_id = db.add_transaction(
            user_id=ctx.obj["user_id"],
            type=TransactionType(txn_type.lower()),
            amount=parsed_amount,
            category=category,
            description=description,
            date=parsed_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Type: {txn_type.lower()}")
    click.echo(f"  Amount: {parsed_amount:,.2f}")
    click.echo(f"  Category: {normalize_category(category)}")
    if parsed_date:
        click.echo(f"  Date: {parsed_date}")


@add.command("asset")
@click.option("--name", required=True, help="Asset name")
@click.option("--type", "asset_type", default="other", show_default=True, help="Asset type (e.g., 'savings', 'stocks')")
@click.option("--value", required=True, help="Current value")
@click.option("--currency", default="USD", show_default=True, help="Currency code")
@click.pass_context
def add_asset(ctx, name: str, asset_type: str, value: str, currency: str):
    """Add an asset valued at its current amount."""
    db = ctx.obj["db"]
    current_value = _parse_amount_or_exit(ctx, value, "value")

    try:
        asset_id = db.add_asset(
            user_id=ctx.obj["user_id"],
            name=name,
            type=asset_type,
            current_value=current_value,
            currency=currency.upper(),
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created asset {asset_id}: {name} ({current_value:,.2f} {currency.upper()})")


@add.command("target")
@click.option("--title", required=True, help="Goal or budget title")
@click.option("--amount", required=True, help="Target amount or spending limit")
@click.option("--current", default="0", show_default=True, help="Amount saved so far")
@click.option("--category", help="Budget category (e.g., 'Dining Out')")
@click.option(
    "--type",
    "target_type",
    type=click.Choice([t.value for t in TargetType], case_sensitive=False),
    default=TargetType.SAVINGS.value,
    show_default=True,
    help="Savings goal or spending budget",
)
@click.pass_context
def add_target(
    ctx,
    title: str,
    amount: str,
    current: str,
    category: str | None,
    target_type: str,
):
    """Add a savings goal or budget."""
    db = ctx.obj["db"]
    target_amount = _parse_amount_or_exit(ctx, amount, "amount")
    current_amount = _parse_amount_or_exit(ctx, current, "current amount")

    try:
        target_id = db.add_target(
            user_id=ctx.obj["user_id"],
            title=title,
            target_amount=target_amount,
            current_amount=current_amount,
            category=category,
            target_type=TargetType(target_type.lower()),
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created {target_type.lower()} target {target_id}: {title}")


def register_commands(cli):
    """Register add commands with main CLI."""
    cli.add_command(add)
