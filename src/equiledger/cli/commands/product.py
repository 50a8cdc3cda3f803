"""Product catalog commands."""

import click
from equiledger.cli.error_handling import handle_domain_error
from equiledger.cli.month_filters import resolve_cli_amount
from equiledger.cli.supplier_resolution import require_supplier
from equiledger.domain.catalog import CatalogService
from equiledger.domain.demo import seed_demo_catalog
from equiledger.domain.entities import PriceDisplay
from equiledger.domain.errors import DomainError
from equiledger.utils.formatters import format_brl


def _catalog_service(ctx) -> CatalogService:
    config = ctx.obj["config"]
    return CatalogService(ctx.obj["db"], synthetic_markdown=config.synthetic_markdown)


def _price_line(display: PriceDisplay) -> str:
    parts = [format_brl(display.price)]
    if display.display_original is not None:
        parts.append(f"was {format_brl(display.display_original)}")
        parts.append(f"{display.display_discount_percent}% OFF")
    parts.append(
        f"{display.installment_count}x {format_brl(display.installment_value)} interest-free"
    )
    return " | ".join(parts)


@click.group("product")
def product_group():
    """Manage catalog products."""
    pass


@product_group.command("add")
@click.argument("name")
@click.option("--price", required=True, help="Current price")
@click.option("--original-price", help="Original price before discount")
@click.option("--discount", type=int, help="Discount percentage (0-99)")
@click.option("--max-installments", type=int, default=3, show_default=True)
@click.option("--interest-free", type=int, default=3, show_default=True, help="Interest-free installments")
@click.pass_context
def add_product(
    ctx,
    name: str,
    price: str,
    original_price: str | None,
    discount: int | None,
    max_installments: int,
    interest_free: int,
):
    """Add a product to the catalog.

    Examples:
        equiledger product add "Farrier rasp" --price 129,00 --discount 10
        equiledger product add "Leather saddle" --price 1890 --original-price 2200
    """
    supplier_id = require_supplier(ctx)
    service = _catalog_service(ctx)

    try:
        product = service.create_product(
            supplier_id=supplier_id,
            name=name,
            price=resolve_cli_amount(ctx, price, "price"),
            original_price=resolve_cli_amount(ctx, original_price, "original price"),
            discount_percentage=discount,
            max_installments=max_installments,
            interest_free_installments=interest_free,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created product '{product.name}' (ID: {product.id})")
    click.echo(f"  {_price_line(service.price_display(product))}")


@product_group.command("list")
@click.pass_context
def list_products(ctx):
    """List catalog products with their display prices."""
    supplier_id = require_supplier(ctx)
    service = _catalog_service(ctx)

    seeded = seed_demo_catalog(
        service, supplier_id, enabled=ctx.obj["config"].seed_demo_data_when_empty
    )
    if seeded:
        click.echo(f"Catalog was empty: added {len(seeded)} demo products.")

    products = service.list_products(supplier_id)
    if not products:
        click.echo("No products found.")
        return

    click.echo("\nProducts:")
    click.echo("-" * 100)
    for product in products:
        click.echo(f"{product.id}  {product.name}")
        click.echo(f"    {_price_line(service.price_display(product))}")


@product_group.command("price")
@click.argument("product_id")
@click.pass_context
def show_price(ctx, product_id: str):
    """Show how a product's price is displayed on its card."""
    supplier_id = require_supplier(ctx)
    service = _catalog_service(ctx)

    try:
        product = service.get_product(supplier_id, product_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    display = service.price_display(product)
    click.echo(f"{product.name}")
    click.echo(f"  Price: {format_brl(display.price)}")
    if display.display_original is not None:
        label = "Original (synthetic)" if display.is_synthetic else "Original"
        click.echo(f"  {label}: {format_brl(display.display_original)}")
        click.echo(f"  Discount: {display.display_discount_percent}%")
    click.echo(
        f"  Installments: {display.installment_count}x {format_brl(display.installment_value)}"
    )


@product_group.command("delete")
@click.argument("product_id")
@click.pass_context
def delete_product(ctx, product_id: str):
    """Delete a product."""
    supplier_id = require_supplier(ctx)
    service = _catalog_service(ctx)

    try:
        service.delete_product(supplier_id, product_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted product {product_id}")


def register_commands(cli):
    """Register product commands with main CLI."""
    cli.add_command(product_group)
