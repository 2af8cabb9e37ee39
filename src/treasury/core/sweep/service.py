"""Sweep orchestration.

Reads the treasury balance and the gas price, runs the calculator and,
when something is left after gas, signs and broadcasts one transfer to
the destination.

Balance and gas price are read once each; changes between the reads and
the broadcast are not compensated. No locking or nonce sequencing is done
across concurrent sweeps.
"""

from __future__ import annotations

from typing import Any

import structlog

from treasury.constants.sweep import (
    MSG_BALANCE_TOO_LOW,
    MSG_INVALID_ADDRESS,
    MSG_NOT_CONFIGURED,
    MSG_SUBMITTED,
    MSG_ZERO_AMOUNT,
)
from treasury.core.exceptions import (
    ExecutionFailedError,
    InvalidAddressError,
    SweepNotConfiguredError,
)
from treasury.core.sweep.calculator import calculate_sweep
from treasury.models.sweep import (
    SweepDecision,
    SweepQuote,
    SweepSkippedResponse,
    SweepSubmittedResponse,
)
from treasury.services.ethereum import (
    ConfiguredWallet,
    EthereumClient,
    TreasuryWallet,
    format_ether,
    provider_error_reason,
)

log = structlog.get_logger(__name__)

SweepResult = SweepSkippedResponse | SweepSubmittedResponse


class SweepService:
    """Sweeps the treasury wallet's ETH to a destination address.

    Attributes:
        default_destination: Address used when a request names none.
        explorer_tx_url: Prefix for the transaction link in responses.
    """

    def __init__(
        self,
        chain_client: EthereumClient,
        wallet: TreasuryWallet,
        default_destination: str,
        explorer_tx_url: str,
    ) -> None:
        self._chain = chain_client
        self._wallet = wallet
        self.default_destination = default_destination
        self.explorer_tx_url = explorer_tx_url

    async def sweep(self, destination: Any = None) -> SweepResult:
        """Sweep the wallet balance minus gas to ``destination``.

        Args:
            destination: Optional override of the default destination. Any
                value other than None or "" must be a valid address.

        Returns:
            SweepSkippedResponse when the balance does not leave anything
            after gas, SweepSubmittedResponse once the transfer is broadcast.

        Raises:
            InvalidAddressError: Destination is not a well-formed address.
            SweepNotConfiguredError: No private key was configured.
            ExecutionFailedError: A chain read, signing or broadcast failed.
        """
        # A malformed override is rejected even when sweeping is disabled
        has_override = destination is not None and destination != ""
        if has_override and not self._chain.is_valid_address(destination):
            log.warning("sweep_invalid_destination", destination=destination)
            raise InvalidAddressError(MSG_INVALID_ADDRESS, address=destination)

        wallet = self._wallet
        if not isinstance(wallet, ConfiguredWallet):
            log.warning("sweep_rejected_not_configured")
            raise SweepNotConfiguredError(MSG_NOT_CONFIGURED)

        target = destination if has_override else self.default_destination
        if not self._chain.is_valid_address(target):
            log.warning("sweep_invalid_default_destination", destination=target)
            raise InvalidAddressError(MSG_INVALID_ADDRESS, address=target)
        target = self._chain.to_checksum_address(target)

        quote = await self._quote(wallet)

        if quote.decision is SweepDecision.INSUFFICIENT_BALANCE:
            log.info(
                "sweep_skipped_balance_too_low",
                balance_wei=quote.balance,
                gas_cost_wei=quote.gas_cost,
            )
            return self._skipped(MSG_BALANCE_TOO_LOW, quote)

        if quote.decision is SweepDecision.ZERO_AMOUNT:
            log.info("sweep_skipped_zero_amount", balance_wei=quote.balance)
            return self._skipped(MSG_ZERO_AMOUNT, quote)

        return await self._submit(wallet, target, quote)

    async def _quote(self, wallet: ConfiguredWallet) -> SweepQuote:
        try:
            balance = await self._chain.get_balance(wallet.address)
            gas_price = await self._chain.get_gas_price()
        except Exception as e:
            reason = provider_error_reason(e)
            log.error("sweep_chain_read_failed", error=reason)
            raise ExecutionFailedError(reason) from e

        return calculate_sweep(balance, gas_price)

    async def _submit(
        self, wallet: ConfiguredWallet, target: str, quote: SweepQuote
    ) -> SweepSubmittedResponse:
        transaction: dict[str, Any] = {
            "to": target,
            "value": quote.amount_to_send,
            "gasPrice": quote.gas_price,
            "gas": quote.gas_limit,
        }

        amount_eth = format_ether(quote.amount_to_send)
        log.info("sweep_submitting", amount_eth=amount_eth, destination=target)

        try:
            tx_hash = await self._chain.sign_and_send(wallet.account, transaction)
        except Exception as e:
            reason = provider_error_reason(e)
            log.error("sweep_submission_failed", destination=target, error=reason)
            raise ExecutionFailedError(reason) from e

        log.info("sweep_submitted", tx_hash=tx_hash, amount_eth=amount_eth, destination=target)
        return SweepSubmittedResponse(
            message=MSG_SUBMITTED,
            transaction_hash=tx_hash,
            amount_sent=amount_eth,
            destination=target,
            network_link=f"{self.explorer_tx_url}{tx_hash}",
        )

    @staticmethod
    def _skipped(message: str, quote: SweepQuote) -> SweepSkippedResponse:
        return SweepSkippedResponse(
            message=message,
            balance=format_ether(quote.balance),
            gas_cost=format_ether(quote.gas_cost),
        )
