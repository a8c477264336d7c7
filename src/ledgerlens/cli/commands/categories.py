"""Category breakdown command."""

import click
from ledgerlens.cli.error_handling import handle_domain_error
from ledgerlens.cli.month_filters import month_option, resolve_cli_month
from ledgerlens.domain.analytics import CategoryAnalyticsService, calculate_category_trends
from ledgerlens.domain.errors import DomainError
from ledgerlens.utils.months import previous_month


@click.command("categories")
@month_option
@click.option("--trends", is_flag=True, help="Compare each category with the previous month")
@click.pass_context
def categories(ctx, month: str | None, trends: bool):
    """Show expenses grouped by category."""
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]
    service = CategoryAnalyticsService(db)
    target_month = resolve_cli_month(ctx, month)

    try:
        result = service.get_category_analytics(user_id, target_month.year, target_month.month)
        trend_map = {}
        if trends:
            prior = previous_month(target_month)
            previous = service.get_category_analytics(user_id, prior.year, prior.month)
            trend_map = calculate_category_trends(result, previous)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if result.count == 0 and not trend_map:
        click.echo(f"No expenses found for {target_month:%Y-%m}.")
        return

    click.echo(f"\nExpenses by category for {target_month:%Y-%m}:")
    if trends:
        click.echo("-" * 90)
        click.echo(f"{'Category':<30} {'Amount':>15} {'Share':>8} {'Previous':>15} {'Change':>18}")
        click.echo("-" * 90)
        amounts = {bucket.name: bucket for bucket in result.buckets}
        # Categories of this month first (by rank), then ones only spent on last month
        names = [bucket.name for bucket in result.buckets]
        names += [name for name in trend_map if name not in amounts]
        for name in names:
            trend = trend_map[name]
            share = f"{amounts[name].percentage:.1f}%" if name in amounts else "-"
            change = f"{trend.delta:+,.2f} ({trend.percent_change:+.0f}%)"
            click.echo(
                f"{name:<30} {trend.current:>15,.2f} {share:>8} {trend.previous:>15,.2f} {change:>18}"
            )
        click.echo("-" * 90)
    else:
        click.echo("-" * 60)
        click.echo(f"{'Category':<30} {'Amount':>15} {'Share':>12}")
        click.echo("-" * 60)
        for bucket in result.buckets:
            click.echo(f"{bucket.name:<30} {bucket.amount:>15,.2f} {bucket.percentage:>11.1f}%")
        click.echo("-" * 60)

    click.echo(f"{'Total':<30} {result.total:>15,.2f}")
    click.echo(f"{result.count} categor{'y' if result.count == 1 else 'ies'}")


def register_commands(cli):
    """Register categories command with main CLI."""
    cli.add_command(categories)
