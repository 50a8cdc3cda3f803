"""Shared pytest fixtures for equiledger tests."""

import os
import tempfile
import time

import pytest

from equiledger.database.factories import create_sqlite_database
from equiledger.domain.catalog import CatalogService
from equiledger.domain.client import ClientService
from equiledger.domain.expense import ExpenseService
from equiledger.domain.sale import SaleService
from equiledger.domain.settings import FinancialSettingsService
from equiledger.domain.summary import SummaryService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for CLI tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def sao_paulo_tz(monkeypatch):
    """Run the test with local time at UTC-3."""
    monkeypatch.setenv("TZ", "America/Sao_Paulo")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def supplier_id():
    return "supplier-1"


@pytest.fixture
def sale_service(temp_db):
    """Create a SaleService with a temporary database."""
    return SaleService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def settings_service(temp_db):
    """Create a FinancialSettingsService with a temporary database."""
    return FinancialSettingsService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def catalog_service(temp_db):
    """Create a CatalogService with a temporary database."""
    return CatalogService(temp_db)


@pytest.fixture
def client_service(temp_db):
    """Create a ClientService with a temporary database."""
    return ClientService(temp_db)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
