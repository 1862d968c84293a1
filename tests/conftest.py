"""Test configuration and fixtures for the entire test suite."""

import pytest
from dotenv import load_dotenv

from src.gdax.connection.access import AccessInfo
from src.gdax.service.client import GdaxClient
from tests.unit.gdax.helpers import MockExchange


@pytest.fixture(scope="session", autouse=True)
def load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


@pytest.fixture
def exchange() -> MockExchange:
    """Mock REST server with no routes registered."""
    return MockExchange()


@pytest.fixture
def access(exchange: MockExchange) -> AccessInfo:
    """Access info whose requests are answered by the mock exchange."""
    return exchange.access()


@pytest.fixture
def client(access: AccessInfo) -> GdaxClient:
    """Client whose requests are answered by the mock exchange."""
    return GdaxClient(access)
