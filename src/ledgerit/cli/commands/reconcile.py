"""Statement reconciliation command."""

import click
from ledgerit.cli.error_handling import handle_domain_error, handle_precondition_error
from ledgerit.cli.term_ui import TerminalPrompter
from ledgerit.database.factories import create_sqlite_ledger
from ledgerit.domain.errors import ConfigError, DomainError, PreconditionError
from ledgerit.domain.prompts import PromptCancelled
from ledgerit.domain.reconcile import Reconciler, checkpoint, open_session
from ledgerit.domain.statement import StatementParser


@click.command("reconcile")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.pass_context
def reconcile_statements(ctx, files: tuple[str, ...]):
    """Categorize statement files into the ledger.

    Rows already in the ledger are skipped. Press Ctrl-C at any prompt to
    stop; you will be asked whether to keep what was categorized so far.

    Examples:
        ledgerit reconcile january.csv
        ledgerit --config ~/finance/config.json reconcile jan.csv feb.csv
    """
    if not files:
        click.echo("Error: No files given", err=True)
        ctx.exit(1)

    store = ctx.obj["config_store"]
    try:
        config = store.load()
        if config.output_filename is None:
            raise ConfigError(f"No outputFilename configured in {store.path}")
        registry = config.build_registry()
        parser = StatementParser(day_first=config.day_first)
        # Parse every file up front so a bad file fails before any prompt
        statements = [parser.parse(path) for path in files]
        ledger = create_sqlite_ledger(config.output_filename)
        ledger.connect()
        session = open_session(registry, ledger)
    except DomainError as e:
        handle_domain_error(ctx, e)

    prompter = ctx.obj.get("prompter") or TerminalPrompter()
    reconciler = Reconciler(session, prompter, fee_marker=config.fee_marker)

    def save_config():
        store.save(config, registry)

    try:
        result = reconciler.run(statements)
    except (PromptCancelled, KeyboardInterrupt):
        reconciler.discard_pending()
        click.echo("\nInterrupted.", err=True)
        try:
            if not checkpoint(session, prompter, save_config):
                click.echo(f"Error: Could not save ledger {config.output_filename}", err=True)
        except (PromptCancelled, KeyboardInterrupt):
            ledger.discard()
        except ConfigError as e:
            handle_domain_error(ctx, e)
        finally:
            ledger.disconnect()
        ctx.exit(1)
    except PreconditionError as e:
        ledger.discard()
        ledger.disconnect()
        handle_precondition_error(ctx, e)

    click.echo(
        f"\nAdded {result.debits_added} debit(s) and {result.credits_added} credit(s); "
        f"skipped {result.skipped} already recorded."
    )

    failed = False
    if session.rows_added and not ledger.save():
        click.echo(f"Error: Could not save ledger {config.output_filename}", err=True)
        failed = True
    ledger.disconnect()

    if session.config_changed:
        try:
            save_config()
        except ConfigError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Saved category changes to {store.path}")

    if failed:
        ctx.exit(1)


def register_commands(cli):
    """Register reconcile command with main CLI."""
    cli.add_command(reconcile_statements)
