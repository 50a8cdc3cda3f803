"""Tests for configuration loading."""

import logging
from pathlib import Path

import pytest

from equiledger.config import (
    configure_logging,
    default_database_path,
    load_config,
    parse_bool,
)


def test_load_config_defaults():
    config = load_config({})

    assert config.database_path == default_database_path()
    assert Path(config.database_path).name == "equiledger.db"
    assert config.supplier_id is None
    assert config.log_level == "WARNING"
    assert config.seed_demo_data_when_empty is False
    assert config.synthetic_markdown is True


def test_load_config_from_environment():
    config = load_config(
        {
            "EQUILEDGER_DB_PATH": "/tmp/ledger.db",
            "EQUILEDGER_SUPPLIER_ID": "farrier-01",
            "EQUILEDGER_LOG_LEVEL": "debug",
            "EQUILEDGER_SEED_DEMO_DATA": "yes",
            "EQUILEDGER_SYNTHETIC_MARKDOWN": "off",
        }
    )

    assert config.database_path == "/tmp/ledger.db"
    assert config.supplier_id == "farrier-01"
    assert config.log_level == "DEBUG"
    assert config.seed_demo_data_when_empty is True
    assert config.synthetic_markdown is False


def test_parse_bool():
    assert parse_bool(None, default=True) is True
    assert parse_bool("  ", default=False) is False
    assert parse_bool("TRUE", default=False) is True
    assert parse_bool("0", default=True) is False
    with pytest.raises(ValueError, match="Invalid boolean"):
        parse_bool("maybe", default=False)


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("DEBUG")
        assert root.level == logging.DEBUG
        configure_logging("not-a-level")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
