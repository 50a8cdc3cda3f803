"""Main CLI entry point."""

import dataclasses

import click
from equiledger.config import configure_logging, load_config
from equiledger.database.factories import create_sqlite_database

# Import and register all commands at module level
from equiledger.cli.commands import (
    client,
    expense,
    product,
    report,
    sale,
    settings,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides EQUILEDGER_DB_PATH environment variable)",
    envvar="EQUILEDGER_DB_PATH",
)
@click.option(
    "--supplier",
    "supplier_id",
    help="Supplier ID all commands act on (overrides EQUILEDGER_SUPPLIER_ID)",
    envvar="EQUILEDGER_SUPPLIER_ID",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides EQUILEDGER_LOG_LEVEL)",
    envvar="EQUILEDGER_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, supplier_id: str | None, log_level: str | None):
    """Equiledger - financial ledger for marketplace suppliers.

    Record sales and expenses, set the tax rate, and get monthly summaries
    and printable or CSV reports.
    """
    ctx.ensure_object(dict)

    try:
        config = load_config()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    overrides = {}
    if db_path:
        overrides["database_path"] = db_path
    if supplier_id:
        overrides["supplier_id"] = supplier_id
    if log_level:
        overrides["log_level"] = log_level.upper()
    config = dataclasses.replace(config, **overrides)

    configure_logging(config.log_level)
    ctx.obj["config"] = config
    ctx.obj["supplier_id"] = config.supplier_id

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=config.database_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
sale.register_commands(cli)
expense.register_commands(cli)
settings.register_commands(cli)
report.register_commands(cli)
product.register_commands(cli)
client.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
