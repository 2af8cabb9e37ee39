"""Ethereum JSON-RPC client for treasury operations.

This module wraps an ``AsyncWeb3`` connection and exposes the handful of
calls the sweep needs: balance and gas price reads, address validation,
and signing plus broadcasting a transaction.

Errors from the provider are not caught here; the sweep service turns
them into ``ExecutionFailedError`` using ``provider_error_reason``.
"""

from typing import Any

import structlog
from eth_account.signers.local import LocalAccount
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

log = structlog.get_logger(__name__)


def provider_error_reason(error: BaseException) -> str:
    """Extract the most useful message from a provider or signing error.

    Prefers an explicit ``reason`` (revert reasons), then a ``message``
    attribute (JSON-RPC errors), then an RPC error dict passed as the first
    argument, then ``str(error)``.
    """
    for attr in ("reason", "message"):
        value = getattr(error, attr, None)
        if isinstance(value, str) and value:
            return value

    if error.args and isinstance(error.args[0], dict):
        message = error.args[0].get("message")
        if message:
            return str(message)

    return str(error) or type(error).__name__


class EthereumClient:
    """Client for Ethereum JSON-RPC operations.

    Attributes:
        provider_url: JSON-RPC endpoint URL.

    Example:
        client = EthereumClient("https://cloudflare-eth.com")
        balance = await client.get_balance("0x...")
        await client.close()
    """

    def __init__(self, provider_url: str, web3: AsyncWeb3 | None = None) -> None:
        self.provider_url = provider_url
        self._w3 = web3 or AsyncWeb3(AsyncHTTPProvider(provider_url))
        log.debug("ethereum_client_initialized", provider_url=provider_url)

    @staticmethod
    def is_valid_address(value: Any) -> bool:
        """Check that ``value`` is a well-formed address.

        Single-case hex is accepted as is; mixed case must match the EIP-55
        checksum. ``Web3.is_address`` does not check the checksum in every
        eth-utils release.
        """
        if not isinstance(value, str) or not Web3.is_address(value):
            return False

        hex_body = value[2:] if value[:2] in ("0x", "0X") else value
        if hex_body in (hex_body.lower(), hex_body.upper()):
            return True
        return Web3.to_checksum_address(value)[2:] == hex_body

    @staticmethod
    def to_checksum_address(value: str) -> str:
        return Web3.to_checksum_address(value)

    async def get_balance(self, address: str) -> int:
        """Get the latest balance of ``address`` in wei."""
        balance = await self._w3.eth.get_balance(Web3.to_checksum_address(address))
        log.debug("ethereum_balance_fetched", wallet_address=address, balance_wei=balance)
        return int(balance)

    async def get_gas_price(self) -> int:
        """Get the current network gas price in wei."""
        gas_price = await self._w3.eth.gas_price
        log.debug("ethereum_gas_price_fetched", gas_price_wei=gas_price)
        return int(gas_price)

    async def sign_and_send(self, account: LocalAccount, transaction: dict[str, Any]) -> str:
        """Sign ``transaction`` with ``account`` and broadcast it.

        Fills in the pending nonce and the chain id when the caller did not.

        Args:
            account: Local signing account.
            transaction: Legacy transaction fields (to, value, gas, gasPrice).

        Returns:
            The 0x-prefixed transaction hash.
        """
        tx = dict(transaction)
        if "nonce" not in tx:
            tx["nonce"] = await self._w3.eth.get_transaction_count(account.address, "pending")
        if "chainId" not in tx:
            tx["chainId"] = await self._w3.eth.chain_id

        signed = account.sign_transaction(tx)
        tx_hash = await self._w3.eth.send_raw_transaction(signed.raw_transaction)
        tx_hash_hex = Web3.to_hex(tx_hash)

        log.info(
            "ethereum_transaction_broadcast",
            tx_hash=tx_hash_hex,
            nonce=tx["nonce"],
            chain_id=tx["chainId"],
        )
        return tx_hash_hex

    async def close(self) -> None:
        """Release the provider's HTTP session."""
        await self._w3.provider.disconnect()
        log.info("ethereum_client_closed")
