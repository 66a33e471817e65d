"""CLI error handling helpers."""

import click

from fintrack.domain.errors import DomainError, NotFoundError

EXIT_FAILURE = 1
EXIT_NOT_FOUND = 3


def exit_code_for(error: Exception) -> int:
    """Exit code for a domain error: missing entities get their own code."""
    if isinstance(error, NotFoundError):
        return EXIT_NOT_FOUND
    return EXIT_FAILURE


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(exit_code_for(error))
