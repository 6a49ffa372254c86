"""
Shared pytest fixtures.

Every test gets a fresh in-memory store; nothing talks to Postgres.
"""

import pytest
from fastapi.testclient import TestClient

from folio.main import create_app
from folio.storage import MemoryStorage


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def app(storage):
    return create_app(storage, seed=False)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def publication_payload() -> dict:
    return {
        "title": "T",
        "authors": "A",
        "venue": "V",
        "year": 2024,
        "isSelected": True,
    }


@pytest.fixture
def profile_payload() -> dict:
    return {
        "name": "Ada Lovelace",
        "title": "Research Fellow",
        "institution": "Analytical Engine Lab",
        "bio": "Works on programmable computation.",
        "email": "ada@example.edu",
        "githubUrl": "https://github.com/ada",
    }
