import pytest
from fastapi.testclient import TestClient

from client.config.config import ClientSettings
from server.config.config import Settings
from server.main import create_app


@pytest.fixture
def settings():
    return Settings(greeting="Hello from the tests!")


@pytest.fixture
def api(settings):
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def client_settings():
    return ClientSettings(environment="development")
