"""Shared pytest fixtures for treasury tests.

This module provides fixtures for:
- Test environment variables
- Settings with and without a treasury private key
- A mocked Ethereum chain client
- Well-known test accounts

Usage:
    @pytest.mark.unit
    def test_something(mock_chain_client):
        mock_chain_client.get_balance.return_value = 10**18
"""

import os
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from treasury.config.settings import Settings, get_settings
from treasury.services.ethereum import EthereumClient

from tests.constants import (
    ONE_ETHER,
    TEST_DESTINATION,
    TEST_PRIVATE_KEY,
    TEST_TX_HASH,
    TWENTY_GWEI,
)

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then removes the wallet secret so that tests
    never sign with a real key by accident.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.pop("TREASURY_PRIVATE_KEY", None)
    os.environ.setdefault("ETHERS_PROVIDER_URL", "http://localhost:8545")

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reset the cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def configured_settings() -> Settings:
    """Settings with a treasury private key and a valid default destination."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        treasury_private_key=TEST_PRIVATE_KEY,  # type: ignore[arg-type]
        sweep_destination_address=TEST_DESTINATION,
        ethers_provider_url="http://localhost:8545",
    )


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without a treasury private key."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        treasury_private_key=None,
        sweep_destination_address=TEST_DESTINATION,
        ethers_provider_url="http://localhost:8545",
    )


# =============================================================================
# Mock External APIs
# =============================================================================


@pytest.fixture
def mock_chain_client() -> MagicMock:
    """Mock Ethereum client.

    Address helpers keep their real behaviour; RPC calls are AsyncMocks
    returning 1 ETH at 20 gwei and a fixed transaction hash.
    """
    mock = MagicMock()
    mock.is_valid_address = MagicMock(side_effect=EthereumClient.is_valid_address)
    mock.to_checksum_address = MagicMock(side_effect=EthereumClient.to_checksum_address)
    mock.get_balance = AsyncMock(return_value=ONE_ETHER)
    mock.get_gas_price = AsyncMock(return_value=TWENTY_GWEI)
    mock.sign_and_send = AsyncMock(return_value=TEST_TX_HASH)
    mock.close = AsyncMock()
    return mock
