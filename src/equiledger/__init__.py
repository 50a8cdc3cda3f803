"""Equiledger: financial ledger and derived pricing for marketplace suppliers."""

__version__ = "0.1.0"
