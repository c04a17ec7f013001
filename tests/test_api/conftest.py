# tests/test_api/conftest.py
import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from core.sa.database import Database

@pytest.fixture
def client(tmp_path):
    """A client bound to a fresh per-test SQLite database"""
    database = Database(f"sqlite:///{tmp_path / 'api_test.db'}")
    app = create_app(database=database)
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def jack(client):
    response = client.post("/create/person", json={"Name": "Jack", "Email": "jack@email.com"})
    assert response.status_code == 200
    return response.json()
