"""CLI helpers for month and date arguments."""

from datetime import date

import click

from equiledger.domain.period import current_month_key
from equiledger.utils.amount_parser import parse_amount
from equiledger.utils.date_parser import parse_date, parse_month


def resolve_cli_month(ctx: click.Context, month: str | None) -> str:
    """Resolve a --month value to a YYYY-MM key, defaulting to the current month."""
    if not month:
        return current_month_key()
    try:
        return parse_month(month)
    except ValueError as e:
        click.echo(f"Error: Invalid month: {e}", err=True)
        ctx.exit(1)


def resolve_cli_date(ctx: click.Context, value: str | None) -> date | None:
    """Parse an optional --date value, exiting on invalid input."""
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def resolve_cli_amount(ctx: click.Context, value: str | None, label: str):
    """Parse an optional amount option, exiting on invalid input."""
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)
