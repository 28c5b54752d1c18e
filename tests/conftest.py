"""Global pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from logging import Logger

import pytest
import pytest_asyncio
from pytest_httpserver import HTTPServer

from core import setup_test_logging
from imgflip import ImgflipAccountClient, ImgflipClient

from tests.shared_test_data import TEST_PASSWORD, TEST_USERNAME


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from core import get_logger

    return get_logger("test")


@pytest_asyncio.fixture
async def imgflip_client(
    httpserver: HTTPServer,
) -> AsyncGenerator[ImgflipClient, None]:
    """Anonymous client pointed at the mock imgflip server."""
    client = ImgflipClient(base_url=httpserver.url_for("/"))
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def account_client(
    httpserver: HTTPServer,
) -> AsyncGenerator[ImgflipAccountClient, None]:
    """Account client pointed at the mock imgflip server."""
    client = ImgflipAccountClient(
        TEST_USERNAME, TEST_PASSWORD, base_url=httpserver.url_for("/")
    )
    yield client
    await client.aclose()
