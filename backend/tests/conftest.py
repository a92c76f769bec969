"""
socialnet — Test Configuration (conftest.py)
=============================================

Shared pytest fixtures for the whole suite.

Fixtures:
    today:           Fixed "current date" for age arithmetic
    registry:        Fresh, unfrozen RuleRegistry
    default_facade:  Facade over the production rule table
    test_client:     HTTPX AsyncClient bound to the FastAPI app
"""

import os
from datetime import date

# Settings are cached on first use; set test values before any app import
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["VALIDATION_STRICT"] = "false"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from socialnet.validators import ValidationFacade, build_default_registry
from socialnet.validators.registry import RuleRegistry


@pytest.fixture
def today():
    """A fixed date so boundary tests never depend on the wall clock."""
    return date(2026, 10, 19)


@pytest.fixture
def registry():
    return RuleRegistry()


@pytest.fixture
def default_facade():
    return ValidationFacade(build_default_registry())


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/v1/health")
            assert response.status_code == 200
    """
    from socialnet.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
