"""Root conftest — shared fixtures for route and client tests."""

import os

# Settings are read at import time
os.environ.setdefault("APP_ENV", "local")
os.environ.setdefault("API_PREFIX", "/api")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient

from loan_api.main import app as loan_app


@pytest.fixture
def app():
    return loan_app


@pytest.fixture
def loan_repository(app):
    """The process-wide store behind the app, emptied for each test."""
    repo = app.state.container.api_container.loan_repository()
    repo.clear()
    yield repo
    repo.clear()


@pytest.fixture
async def client(app, loan_repository):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
