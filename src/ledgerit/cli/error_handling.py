"""CLI error handling helpers."""

import click

from ledgerit.domain.errors import DomainError, PreconditionError
from ledgerit.logging_setup import get_logger

logger = get_logger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Print a domain error as one diagnostic line and exit with failure."""
    logger.debug("Command failed: %r", error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_precondition_error(ctx: click.Context, error: PreconditionError) -> None:
    """Abort after an internal inconsistency; the caller has already discarded unsaved rows."""
    logger.debug("Session aborted", exc_info=error)
    click.echo(f"Internal error, session aborted without saving: {error}", err=True)
    ctx.exit(1)
