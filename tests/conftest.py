"""Shared pytest fixtures for tests."""
import pytest
from fastapi.testclient import TestClient

from myapp_api.app.main import app as fastapi_app


@pytest.fixture
def app():
    """Return the FastAPI application under test."""
    return fastapi_app


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI app."""
    with TestClient(app) as client:
        yield client
