"""Health score command."""

import click
from ledgerlens.cli.error_handling import handle_domain_error
from ledgerlens.cli.month_filters import month_option, resolve_cli_month
from ledgerlens.domain.errors import DomainError
from ledgerlens.domain.health import HealthService


@click.command("health")
@month_option
@click.pass_context
def health(ctx, month: str | None):
    """Show the financial health score for a month."""
    service = HealthService(ctx.obj["db"])
    target_month = resolve_cli_month(ctx, month)

    try:
        score = service.get_health_score(
            ctx.obj["user_id"], target_month.year, target_month.month
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Health score for {target_month:%Y-%m}: {score.score}/100")
    click.echo(score.explanation)


def register_commands(cli):
    """Register health command with main CLI."""
    cli.add_command(health)
