"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient

from bookstore.main import create_app
from bookstore.services.store import BookStore


@pytest.fixture
def store() -> BookStore:
    """Fresh, empty store."""
    return BookStore()


@pytest.fixture
def client(store: BookStore):
    """Test client around an application owning ``store``."""
    with TestClient(create_app(store=store)) as c:
        yield c
