"""Ethereum chain client, treasury wallet and display helpers."""

from treasury.services.ethereum.client import EthereumClient, provider_error_reason
from treasury.services.ethereum.units import format_ether
from treasury.services.ethereum.wallet import (
    ConfiguredWallet,
    TreasuryWallet,
    UnconfiguredWallet,
    load_treasury_wallet,
)

__all__ = [
    "ConfiguredWallet",
    "EthereumClient",
    "TreasuryWallet",
    "UnconfiguredWallet",
    "format_ether",
    "load_treasury_wallet",
    "provider_error_reason",
]
