"""Main CLI entry point."""

import click
from ledgerit.config import ConfigStore
from ledgerit.logging_setup import configure_logging

# Import and register all commands at module level
from ledgerit.cli.commands import (
    reconcile,
    category,
    view,
)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Path to configuration file (overrides LEDGERIT_CONFIG environment variable)",
    envvar="LEDGERIT_CONFIG",
)
@click.option(
    "--log-level",
    help="Logging level, e.g. INFO or DEBUG (overrides LEDGERIT_LOG_LEVEL)",
    envvar="LEDGERIT_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, config_path: str | None, log_level: str | None):
    """Ledgerit - reconcile bank statements into a categorized ledger.

    Reads statement CSV exports, skips rows already in the ledger, and
    categorizes new rows using the patterns in the configuration file,
    asking when a row matches no category or several.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)
    ctx.obj["config_store"] = ConfigStore(config_path)


# Register all commands
reconcile.register_commands(cli)
category.register_commands(cli)
view.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
