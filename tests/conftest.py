"""Pytest configuration and fixtures."""

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["DRY_RUN"] = "true"
os.environ["LCD_URL"] = "http://lcd.test"
os.environ["BECH32_ACCOUNT_PREFIX"] = "cosmos"
os.environ["BECH32_VALIDATOR_PREFIX"] = "cosmosvaloper"
os.environ["VALIDATOR_BUILD_ERROR_STATUS"] = "400"

from rewards_gateway.api.app import create_app
from rewards_gateway.api.routers.distribution import get_querier
from rewards_gateway.services.broadcast import get_broadcaster
from rewards_gateway.types.address import ValAddress

from helpers import FakeQuerier, RecordingBroadcaster, make_val


@pytest.fixture
def validators() -> list[ValAddress]:
    return [make_val(1), make_val(2)]


@pytest.fixture
def querier(validators) -> FakeQuerier:
    return FakeQuerier(validators)


@pytest.fixture
def broadcaster() -> RecordingBroadcaster:
    return RecordingBroadcaster()


@pytest.fixture
def base_req_body() -> dict:
    """A valid envelope for the broadcast path."""
    return {
        "from": "alice",
        "password": "12345678",
        "chain_id": "cosmoshub-4",
        "account_number": "7",
        "sequence": "3",
        "fees": [{"denom": "uatom", "amount": "5000"}],
        "gas": "200000",
        "generate_only": False,
    }


@pytest.fixture
def test_app(querier, broadcaster):
    """Application with chain and broadcast collaborators faked."""
    app = create_app()
    app.dependency_overrides[get_querier] = lambda: querier
    app.dependency_overrides[get_broadcaster] = lambda: broadcaster
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
