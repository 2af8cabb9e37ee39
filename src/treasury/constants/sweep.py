"""Sweep constants."""

from typing import Final

# Plain ETH transfer
GAS_LIMIT: Final[int] = 21_000

WEI_PER_ETHER: Final[int] = 10**18

# Reported by /health when no private key is configured
PLACEHOLDER_WALLET_ADDRESS: Final[str] = "0xTreasuryWalletPlaceholder"

DEFAULT_DESTINATION_ADDRESS: Final[str] = "0xRecipientAddressGoesHere"
DEFAULT_PROVIDER_URL: Final[str] = "https://cloudflare-eth.com"
DEFAULT_EXPLORER_TX_URL: Final[str] = "https://etherscan.io/tx/"

# Response messages
MSG_BALANCE_TOO_LOW: Final[str] = "Balance is too low to cover gas."
MSG_ZERO_AMOUNT: Final[str] = "Sweep amount is zero after gas deduction."
MSG_SUBMITTED: Final[str] = "Sweep transaction submitted."
MSG_INVALID_ADDRESS: Final[str] = "Invalid destination address."
MSG_NOT_CONFIGURED: Final[str] = "Service Unavailable: Missing private key."
MSG_EXECUTION_FAILED: Final[str] = "Sweep transaction failed."
MSG_INVALID_BODY: Final[str] = "Request body must be a JSON object."
