"""Financial settings commands."""

import click
from equiledger.cli.error_handling import handle_domain_error
from equiledger.cli.month_filters import resolve_cli_amount
from equiledger.cli.supplier_resolution import require_supplier
from equiledger.domain.errors import DomainError
from equiledger.domain.settings import FinancialSettingsService
from equiledger.utils.formatters import format_percent


@click.group("settings")
def settings_group():
    """Show and change financial settings."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show the tax rate applied in reports."""
    supplier_id = require_supplier(ctx)
    service = FinancialSettingsService(ctx.obj["db"])
    click.echo(f"Tax rate: {format_percent(service.get_tax_rate(supplier_id))}")
    click.echo("Taxes are applied as a percentage of the period's revenue.")


@settings_group.command("set-tax")
@click.argument("rate")
@click.pass_context
def set_tax(ctx, rate: str):
    """Set the tax rate (percent of revenue, 0-100).

    Examples:
        equiledger settings set-tax 6
        equiledger settings set-tax 11,5
    """
    supplier_id = require_supplier(ctx)
    service = FinancialSettingsService(ctx.obj["db"])
    tax_rate = resolve_cli_amount(ctx, rate, "tax rate")

    try:
        settings = service.set_tax_rate(supplier_id, tax_rate)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Tax rate set to {format_percent(settings.tax_rate_percent)}")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group)
