"""Utility functions for equiledger."""

from equiledger.utils.date_parser import parse_date, parse_month
from equiledger.utils.amount_parser import parse_amount
from equiledger.utils.formatters import format_brl, format_percent

__all__ = ["parse_date", "parse_month", "parse_amount", "format_brl", "format_percent"]
