"""Shared pytest fixtures for supplyledger tests."""

import tempfile
import os
import pytest

from supplyledger.database.factories import create_sqlite_database
from supplyledger.domain.supplier import SupplierService
from supplyledger.domain.summary import SummaryService
from supplyledger.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def supplier_service(temp_db):
    """Create a SupplierService with a temporary database."""
    return SupplierService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def supplier_payload():
    """Supplier request body as sent by API clients."""
    return {
        "Supplier": "Acme",
        "SupplierNameOriginal": "Acme AS",
        "SupplierCountry": "NO",
        "VatID": "NO123",
        "NACE": "4611",
    }


@pytest.fixture
def transaction_payload():
    """Transaction request body as sent by API clients."""
    return {
        "InvoiceNumber": "INV-1001",
        "Supplier": "Acme",
        "InvoiceDate": "2024-01-15T10:30:00+01:00",
        "DueDate": "2024-02-14T00:00:00Z",
        "TransactionValueNOK": 1250.5,
        "SpendCategoryL1": "Indirect",
        "SpendCategoryL2": "IT",
        "SpendCategoryL3": "Hardware",
        "SpendCategoryL4": "Laptops",
    }


@pytest.fixture
def client(temp_db):
    """Create a FastAPI TestClient serving the temporary database."""
    from fastapi.testclient import TestClient
    from supplyledger.api.app import create_app

    with TestClient(create_app(db=temp_db)) as test_client:
        yield test_client


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
