"""Treasury wallet state.

The wallet is either configured with a signing account or explicitly
unconfigured. Callers branch on the variant instead of relying on a
stand-in object.

SECURITY: the private key is never logged and never part of a repr.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog
from eth_account import Account
from eth_account.signers.local import LocalAccount
from pydantic import SecretStr

from treasury.constants.sweep import PLACEHOLDER_WALLET_ADDRESS
from treasury.core.exceptions import ConfigurationError

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ConfiguredWallet:
    """Wallet backed by a local signing account."""

    account: LocalAccount = field(repr=False)

    @property
    def address(self) -> str:
        return self.account.address

    @property
    def is_configured(self) -> bool:
        return True


@dataclass(frozen=True)
class UnconfiguredWallet:
    """No private key was supplied; sweeping is disabled."""

    address: str = PLACEHOLDER_WALLET_ADDRESS

    @property
    def is_configured(self) -> bool:
        return False


TreasuryWallet = ConfiguredWallet | UnconfiguredWallet


def load_treasury_wallet(private_key: SecretStr | None) -> TreasuryWallet:
    """Build the treasury wallet from the configured private key.

    Args:
        private_key: Hex private key, or None when not configured.

    Returns:
        ConfiguredWallet for a valid key, UnconfiguredWallet when absent.

    Raises:
        ConfigurationError: If a key is present but cannot be loaded.
    """
    if private_key is None:
        log.warning("treasury_private_key_missing")
        return UnconfiguredWallet()

    try:
        account: LocalAccount = Account.from_key(private_key.get_secret_value())
    except Exception as e:
        # The key itself must not end up in the message
        log.error("treasury_private_key_invalid", error_type=type(e).__name__)
        raise ConfigurationError("TREASURY_PRIVATE_KEY is not a valid private key") from e

    log.info("treasury_wallet_loaded", wallet_address=account.address)
    return ConfiguredWallet(account=account)
