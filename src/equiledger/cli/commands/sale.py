"""Sale commands."""

from datetime import datetime, time

import click
from equiledger.cli.error_handling import handle_domain_error
from equiledger.cli.month_filters import resolve_cli_amount, resolve_cli_date, resolve_cli_month
from equiledger.cli.supplier_resolution import require_supplier
from equiledger.domain.entities import PaymentMethod
from equiledger.domain.errors import DomainError
from equiledger.domain.period import to_local
from equiledger.domain.sale import SaleService
from equiledger.domain.summary import sale_margin_percent
from equiledger.utils.formatters import format_brl, format_percent


@click.group("sale")
def sale_group():
    """Register and manage sales."""
    pass


@sale_group.command("add")
@click.option("--product", "product_name", required=True, help="Product or service sold")
@click.option("--value", "sale_value", required=True, help="Sale value (e.g., 150.00 or 150,00)")
@click.option("--profit", default="0", show_default=True, help="Profit on this sale")
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod]),
    help="Payment method",
)
@click.option("--client", "client_id", help="Supplier client ID the sale was made to")
@click.option("--date", "sale_date", help="Back-date the sale (YYYY-MM-DD or DD/MM/YYYY)")
@click.pass_context
def add_sale(
    ctx,
    product_name: str,
    sale_value: str,
    profit: str,
    payment: str | None,
    client_id: str | None,
    sale_date: str | None,
):
    """Register a sale.

    Examples:
        equiledger sale add --product "Horseshoe set" --value 150 --profit 60 --payment pix
        equiledger sale add --product "Trimming" --value 200,00 --date 2024-01-15
    """
    supplier_id = require_supplier(ctx)
    service = SaleService(ctx.obj["db"])

    value = resolve_cli_amount(ctx, sale_value, "sale value")
    profit_value = resolve_cli_amount(ctx, profit, "profit")
    when = resolve_cli_date(ctx, sale_date)
    created_at = datetime.combine(when, time.min).astimezone() if when else None

    try:
        sale = service.register_sale(
            supplier_id=supplier_id,
            product_name=product_name,
            sale_value=value,
            profit=profit_value,
            payment_method=payment,
            linked_client_id=client_id,
            created_at=created_at,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Registered sale {sale.id}")
    click.echo(f"  Product: {sale.product_name}")
    click.echo(f"  Value: {format_brl(sale.sale_value)}")
    click.echo(f"  Profit: {format_brl(sale.profit)}")
    if sale.payment_method:
        click.echo(f"  Payment: {sale.payment_method.value}")


@sale_group.command("list")
@click.option("--month", help="Month (YYYY-MM, 'this month', 'last month'); defaults to current")
@click.pass_context
def list_sales(ctx, month: str | None):
    """List the sales of a month."""
    supplier_id = require_supplier(ctx)
    month_key = resolve_cli_month(ctx, month)
    service = SaleService(ctx.obj["db"])

    sales = service.list_sales(supplier_id, month_key=month_key)
    if not sales:
        click.echo(f"No sales registered in {month_key}.")
        return

    click.echo(f"\nSales for {month_key}:")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<36} {'Date':<10} {'Product':<20} {'Value':>12} {'Profit':>12} {'Margin':>7}"
    )
    click.echo("-" * 100)
    for sale in sales:
        click.echo(
            f"{sale.id:<36} {to_local(sale.created_at).strftime('%d/%m/%Y'):<10} "
            f"{sale.product_name[:20]:<20} {format_brl(sale.sale_value):>12} "
            f"{format_brl(sale.profit):>12} {format_percent(sale_margin_percent(sale)):>7}"
        )


@sale_group.command("delete")
@click.argument("sale_id")
@click.option("--yes", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_sale(ctx, sale_id: str, yes: bool):
    """Delete a sale. This cannot be undone."""
    supplier_id = require_supplier(ctx)
    service = SaleService(ctx.obj["db"])

    if not yes:
        click.confirm(f"Delete sale {sale_id}? This cannot be undone.", abort=True)

    try:
        deleted = service.delete_sale(supplier_id, sale_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if deleted:
        click.echo(f"Deleted sale {sale_id}")
    else:
        click.echo(f"Sale {sale_id} was already deleted")


def register_commands(cli):
    """Register sale commands with main CLI."""
    cli.add_command(sale_group)
