"""Ledger viewing command."""

from pathlib import Path

import click
from ledgerit.cli.error_handling import handle_domain_error
from ledgerit.database.base import CREDIT, DEBIT
from ledgerit.database.factories import create_sqlite_ledger
from ledgerit.domain.errors import ConfigError, DomainError
from ledgerit.utils.date_parser import parse_date


@click.command("view")
@click.option("--debits", "section", flag_value=DEBIT, help="Only debit rows")
@click.option("--credits", "section", flag_value=CREDIT, help="Only credit rows")
@click.option("--category", help="Exact category name")
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.pass_context
def view_ledger(ctx, section: str | None, category: str | None, start_date: str | None, end_date: str | None):
    """View ledger rows with optional filters."""
    try:
        config = ctx.obj["config_store"].load()
    except DomainError as e:
        handle_domain_error(ctx, e)
    if config.output_filename is None:
        handle_domain_error(ctx, ConfigError("No outputFilename configured"))
    if not Path(config.output_filename).exists():
        click.echo("No ledger rows found.")
        return

    try:
        start = parse_date(start_date) if start_date else None
        end = parse_date(end_date) if end_date else None
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)

    try:
        ledger = create_sqlite_ledger(config.output_filename)
        ledger.connect()
        entries = ledger.list_entries(section=section, category=category, start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
    ledger.disconnect()

    if not entries:
        click.echo("No ledger rows found.")
        return

    click.echo(f"\nFound {len(entries)} row(s):")
    click.echo("-" * 100)
    click.echo(f"{'Date':<12} {'Amount':>12} {'Reimbursed':>12} {'Category':<24} {'Description':<36}")
    click.echo("-" * 100)
    for entry in entries:
        reimbursed = f"${entry.reimbursed:,.2f}" if entry.reimbursed is not None else ""
        click.echo(
            f"{entry.date.isoformat():<12} {f'${entry.amount:,.2f}':>12} {reimbursed:>12} "
            f"{entry.category[:24]:<24} {entry.description[:36]:<36}"
        )


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_ledger)
