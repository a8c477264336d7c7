"""CLI helpers for month resolution."""

from datetime import date

import click

from ledgerlens.utils.months import parse_month, to_month


def resolve_cli_month(ctx: click.Context, month: str | None) -> date:
    """Resolve the --month option, defaulting to the current month."""
    if not month:
        return to_month(date.today())

    try:
        return parse_month(month)
    except ValueError as e:
        click.echo(f"Error: Invalid month: {e}", err=True)
        ctx.exit(1)


def month_option(func):
    """Attach the shared --month option to a command."""
    return click.option(
        "--month",
        help="Month to analyse (YYYY-MM or relative like 'this month', 'last month')",
    )(func)
