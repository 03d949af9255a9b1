import pytest
from fastapi.testclient import TestClient

from inventory_service.config import Settings
from inventory_service.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(host="localhost", port=3000, cache_dir=tmp_path / "cache")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register an item through the API and return its JSON body."""
    def _register(name="Drill", description="cordless", photo=None):
        data = {"inventory_name": name, "description": description}
        files = {"photo": photo} if photo else None
        response = client.post("/register", data=data, files=files)
        assert response.status_code == 201, response.text
        return response.json()
    return _register
