"""Historical comparison and net worth commands."""

import click
from ledgerlens.cli.error_handling import handle_domain_error
from ledgerlens.cli.month_filters import month_option, resolve_cli_month
from ledgerlens.domain.errors import DomainError
from ledgerlens.domain.history import (
    DEFAULT_HISTORY_WINDOW,
    HistoryService,
    select_comparison_window,
)
from ledgerlens.domain.net_worth import NetWorthService


def _history_options(func):
    func = click.option(
        "--show",
        type=int,
        default=None,
        help="Number of most recent months to display (clamped to available data)",
    )(func)
    func = click.option(
        "--window",
        type=click.IntRange(min=1),
        default=DEFAULT_HISTORY_WINDOW,
        show_default=True,
        help="Number of months to compute, ending at --month",
    )(func)
    func = click.option(
        "--workers",
        type=click.IntRange(min=1),
        default=None,
        help="Threads used to compute months concurrently",
        envvar="LEDGERLENS_HISTORY_WORKERS",
    )(func)
    return month_option(func)


def _build_series(ctx, month, window, workers):
    service = HistoryService(ctx.obj["db"], max_workers=workers)
    anchor = resolve_cli_month(ctx, month)
    try:
        return service.build_series(ctx.obj["user_id"], anchor, window=window)
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.command("history")
@_history_options
@click.pass_context
def history(ctx, month: str | None, window: int, show: int | None, workers: int | None):
    """Show month-by-month income, expenses and balance."""
    series = _build_series(ctx, month, window, workers)
    if show is not None:
        series = select_comparison_window(series, show)

    if not series:
        click.echo("No months could be computed.")
        return

    click.echo("\nMonthly comparison:")
    click.echo("-" * 92)
    click.echo(
        f"{'Month':<10} {'Income':>14} {'Expenses':>14} {'Balance':>14} "
        f"{'Income chg':>12} {'Expense chg':>12} {'Balance chg':>12}"
    )
    click.echo("-" * 92)
    for point in series:
        click.echo(
            f"{point.month:%Y-%m}    {point.income:>14,.2f} {point.expenses:>14,.2f} {point.balance:>14,.2f} "
            f"{point.income_change:>+12,.2f} {point.expenses_change:>+12,.2f} {point.balance_change:>+12,.2f}"
        )


@click.command("net-worth")
@_history_options
@click.pass_context
def net_worth(ctx, month: str | None, window: int, show: int | None, workers: int | None):
    """Show projected net worth per month.

    Assets and target balances are valued at their current amount for every
    month; only the accumulated cash changes over time.
    """
    series = _build_series(ctx, month, window, workers)
    service = NetWorthService(ctx.obj["db"])
    try:
        points = service.get_net_worth_history(ctx.obj["user_id"], series)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if show is not None:
        points = select_comparison_window(points, show)

    if not points:
        click.echo("No months could be computed.")
        return

    click.echo("\nNet worth:")
    click.echo("-" * 60)
    click.echo(f"{'Month':<10} {'Net worth':>16} {'Assets':>16} {'Cash':>16}")
    click.echo("-" * 60)
    for point in points:
        click.echo(
            f"{point.month:%Y-%m}    {point.net_worth:>16,.2f} {point.assets:>16,.2f} {point.cash_available:>16,.2f}"
        )


def register_commands(cli):
    """Register history commands with main CLI."""
    cli.add_command(history)
    cli.add_command(net_worth)
