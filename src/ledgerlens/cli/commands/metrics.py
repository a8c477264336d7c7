"""Monthly metrics command."""

import click
from ledgerlens.cli.error_handling import handle_domain_error
from ledgerlens.cli.month_filters import month_option, resolve_cli_month
from ledgerlens.domain.errors import DomainError
from ledgerlens.domain.metrics import MetricsService


def _format_change(change) -> str:
    return f"{change.change:+,.2f} ({change.percent_change:+.1f}%)"


@click.command("metrics")
@month_option
@click.pass_context
def metrics(ctx, month: str | None):
    """Show income, expenses and balance for a month."""
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]
    service = MetricsService(db)
    target_month = resolve_cli_month(ctx, month)

    try:
        result = service.get_monthly_metrics(user_id, target_month.year, target_month.month)
        changes = service.get_month_over_month_change(
            user_id, target_month.year, target_month.month
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nMetrics for {target_month:%Y-%m}:")
    click.echo("-" * 70)
    click.echo(f"{'Monthly income':<25} {result.monthly_income:>15,.2f}   vs last month {_format_change(changes['income'])}")
    click.echo(f"{'Monthly expenses':<25} {result.monthly_expenses:>15,.2f}   vs last month {_format_change(changes['expenses'])}")
    click.echo(f"{'Monthly balance':<25} {result.monthly_balance:>15,.2f}")
    click.echo("-" * 70)
    click.echo(f"{'Total income':<25} {result.total_income:>15,.2f}")
    click.echo(f"{'Total expenses':<25} {result.total_expenses:>15,.2f}")
    click.echo(f"{'Total balance':<25} {result.total_balance:>15,.2f}")


def register_commands(cli):
    """Register metrics command with main CLI."""
    cli.add_command(metrics)
