"""Runtime configuration and logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LedgerConfig:
    """Settings read from EQUILEDGER_* environment variables."""

    database_path: str
    supplier_id: Optional[str] = None
    log_level: str = "WARNING"
    seed_demo_data_when_empty: bool = False
    synthetic_markdown: bool = True


def default_database_path() -> str:
    """~/.equiledger/equiledger.db"""
    return str(Path.home() / ".equiledger" / "equiledger.db")


def parse_bool(value: Optional[str], default: bool) -> bool:
    """Parse an on/off environment value, falling back to default when unset."""
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value '{value}'")


def load_config(environ: Optional[Mapping[str, str]] = None) -> LedgerConfig:
    """Build a LedgerConfig from the environment."""
    if environ is None:
        environ = os.environ
    return LedgerConfig(
        database_path=environ.get("EQUILEDGER_DB_PATH") or default_database_path(),
        supplier_id=environ.get("EQUILEDGER_SUPPLIER_ID") or None,
        log_level=environ.get("EQUILEDGER_LOG_LEVEL", "WARNING").upper(),
        seed_demo_data_when_empty=parse_bool(
            environ.get("EQUILEDGER_SEED_DEMO_DATA"), default=False
        ),
        synthetic_markdown=parse_bool(
            environ.get("EQUILEDGER_SYNTHETIC_MARKDOWN"), default=True
        ),
    )


def configure_logging(level_name: str = "WARNING") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    level = getattr(logging, str(level_name).upper(), logging.WARNING)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root.setLevel(level)
