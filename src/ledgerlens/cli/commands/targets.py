"""Savings goal and budget commands."""

import click
from ledgerlens.cli.error_handling import handle_domain_error
from ledgerlens.cli.month_filters import month_option, resolve_cli_month
from ledgerlens.domain.entities import TargetType
from ledgerlens.domain.errors import DomainError
from ledgerlens.domain.targets import TargetService


@click.command("targets")
@month_option
@click.option(
    "--type",
    "target_type",
    type=click.Choice([t.value for t in TargetType], case_sensitive=False),
    help="Only show savings goals or budgets",
)
@click.pass_context
def targets(ctx, month: str | None, target_type: str | None):
    """Show savings goal progress and budget usage for a month."""
    service = TargetService(ctx.obj["db"])
    user_id = ctx.obj["user_id"]
    target_month = resolve_cli_month(ctx, month)

    try:
        selected_type = TargetType(target_type.lower()) if target_type else None
        goals = []
        if selected_type in (None, TargetType.SAVINGS):
            goals = service.list_targets(user_id, TargetType.SAVINGS)
        budgets = []
        if selected_type in (None, TargetType.BUDGET):
            budgets = service.get_budget_usage(user_id, target_month.year, target_month.month)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not goals and not budgets:
        click.echo("No targets found.")
        return

    if goals:
        click.echo("\nSavings goals:")
        click.echo("-" * 80)
        click.echo(f"{'Goal':<30} {'Saved':>15} {'Target':>15} {'Progress':>12}")
        click.echo("-" * 80)
        for goal in goals:
            click.echo(
                f"{goal.title:<30} {goal.current_amount:>15,.2f} {goal.target_amount:>15,.2f} {goal.progress_percentage:>11.1f}%"
            )

    if budgets:
        click.echo(f"\nBudgets for {target_month:%Y-%m}:")
        click.echo("-" * 80)
        click.echo(f"{'Budget':<30} {'Spent':>15} {'Limit':>15} {'Used':>12}")
        click.echo("-" * 80)
        for usage in budgets:
            flag = "  OVER" if usage.is_over_budget else ""
            click.echo(
                f"{usage.target.title:<30} {usage.spent:>15,.2f} {usage.target.target_amount:>15,.2f} {usage.percent_used:>11.1f}%{flag}"
            )


def register_commands(cli):
    """Register targets command with main CLI."""
    cli.add_command(targets)
