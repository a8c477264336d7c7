"""CLI error handling helpers."""

import logging

import click

from ledgerlens.domain.errors import DataSourceError, DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print a domain error to stderr and exit with status 1.

    Data source failures also log their traceback at DEBUG level.
    """
    if isinstance(error, DataSourceError):
        logger.debug("Data source failure in '%s'", ctx.info_name, exc_info=error)
        click.echo(f"Error: Ledger unavailable: {error}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
