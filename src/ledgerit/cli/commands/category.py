"""Category registry commands."""

import click
from ledgerit.cli.error_handling import handle_domain_error
from ledgerit.domain.errors import DomainError


@click.group()
def category_group():
    """Inspect configured categories."""
    pass


@category_group.command("list")
@click.option("--debit", "section", flag_value="debit", help="Only debit categories")
@click.option("--credit", "section", flag_value="credit", help="Only credit categories")
@click.pass_context
def list_categories(ctx, section: str | None):
    """List categories with their patterns and reimbursement formulas."""
    try:
        registry = ctx.obj["config_store"].load().build_registry()
    except DomainError as e:
        handle_domain_error(ctx, e)

    shown = 0
    for is_debit in (True, False):
        if section == ("credit" if is_debit else "debit"):
            continue
        names = registry.names(is_debit)
        click.echo(f"\n{'Debit' if is_debit else 'Credit'} categories:")
        if not names:
            click.echo("  (none)")
        for name in names:
            definition = registry.get(name, is_debit)
            click.echo(f"  {name}")
            for pattern in definition.patterns:
                click.echo(f"    /{pattern}/")
            if definition.reimbursement_formula:
                click.echo(f"    reimbursement: {definition.reimbursement_formula}")
            shown += 1

    if not shown:
        click.echo("\nNo categories configured. Run 'reconcile' to create them as you go.")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
