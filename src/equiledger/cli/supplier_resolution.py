"""CLI helper for resolving the active supplier."""

import click

from equiledger.domain.errors import missing_supplier


def require_supplier(ctx: click.Context) -> str:
    """Return the supplier selected with --supplier, or exit with a CLI error."""
    supplier_id = ctx.obj.get("supplier_id") if ctx.obj else None
    if not supplier_id:
        click.echo(f"Error: {missing_supplier()}", err=True)
        ctx.exit(1)
    return supplier_id
