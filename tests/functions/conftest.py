"""Shared fixtures for the backend function tests."""
import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from src.config import Settings
from src.functions.app import create_app
from src.services.registrant_repository import LocalRegistrantRepository


@pytest.fixture
def repository(tmp_path):
    return LocalRegistrantRepository(str(tmp_path / "registrants.json"))


@pytest.fixture
def mailer():
    return MagicMock()


@pytest.fixture
def client(repository, mailer):
    app = create_app(repository=repository, mailer=mailer, settings=Settings(_env_file=None))
    return TestClient(app)


@pytest.fixture
def payload():
    return {
        "firstName": "Jane",
        "middleName": "",
        "lastName": "Doe",
        "email": "jane@example.com",
        "age": 30,
        "country": "Kenya",
        "address": "1 Main St",
        "phone": "555-0100",
    }
