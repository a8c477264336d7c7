"""Main CLI entry point."""

import click
from ledgerlens.cli.logging_config import configure_logging
from ledgerlens.database.factories import create_sqlite_database

# Import and register all commands at module level
from ledgerlens.cli.commands import (
    add,
    categories,
    health,
    history,
    metrics,
    targets,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGERLENS_DB_PATH environment variable)",
    envvar="LEDGERLENS_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    default="default",
    show_default=True,
    help="Ledger owner to analyse",
    envvar="LEDGERLENS_USER_ID",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
    envvar="LEDGERLENS_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str, log_level: str):
    """Ledgerlens - Personal finance analytics.

    Monthly metrics, category breakdowns and trends, historical comparisons,
    net worth projections and a financial health score computed from your
    transaction ledger.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)
    ctx.obj["user_id"] = user_id

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
metrics.register_commands(cli)
categories.register_commands(cli)
history.register_commands(cli)
health.register_commands(cli)
targets.register_commands(cli)
add.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
