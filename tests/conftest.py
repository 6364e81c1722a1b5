"""
Shared pytest fixtures for the customer list tests.

Every test gets its own storage file under tmp_path so tests never
share state or touch a real customers.json.
"""

import json

import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from api.main import create_app
from customers.data_store import CustomerStore


@pytest.fixture
def storage_file(tmp_path: Path) -> Path:
    """Path to a storage file that does not exist yet."""
    return tmp_path / "customers.json"


@pytest.fixture
def store(storage_file: Path) -> CustomerStore:
    """Fresh, empty CustomerStore for each test."""
    return CustomerStore(storage_file)


@pytest.fixture
def seeded_file(storage_file: Path) -> Path:
    """
    Storage file holding three customers, already in sort order.

    Lee is deliberately stored with lowercase field names.
    """
    storage_file.write_text(json.dumps([
        {"id": 10, "firstName": "Maria", "lastName": "Baker", "age": 41},
        {"id": 11, "firstName": "Tom", "lastName": "Jones", "age": 33},
        {"id": 12, "firstname": "Ann", "lastname": "Lee", "age": 30},
    ]))
    return storage_file


@pytest.fixture
def seeded_store(seeded_file: Path) -> CustomerStore:
    """CustomerStore loaded from the seeded file."""
    return CustomerStore(seeded_file)


@pytest.fixture
def api_client(store: CustomerStore):
    """Test client serving the empty store."""
    with TestClient(create_app(store=store)) as client:
        yield client
