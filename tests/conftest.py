import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture(name="client")
def client_fixture():
    """Test client with the application lifespan running"""
    with TestClient(app) as client:
        yield client
