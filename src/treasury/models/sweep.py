"""Sweep data models.

This module contains models for:
- The calculator's quote and decision
- The sweep request body
- Skipped and submitted sweep responses

Wei amounts are plain ``int``; display values are ether strings.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from treasury.constants.sweep import GAS_LIMIT


class SweepDecision(str, Enum):
    """Outcome of the sweep calculation."""

    INSUFFICIENT_BALANCE = "insufficient_balance"
    ZERO_AMOUNT = "zero_amount"
    SWEEPABLE = "sweepable"


class SweepQuote(BaseModel):
    """Transferable amount for a balance at a given gas price."""

    balance: int = Field(..., ge=0, description="Wallet balance in wei")
    gas_price: int = Field(..., ge=0, description="Gas price in wei")
    gas_limit: int = Field(default=GAS_LIMIT, ge=0)
    gas_cost: int = Field(..., ge=0, description="gas_price * gas_limit in wei")
    amount_to_send: int = Field(..., ge=0, description="balance - gas_cost in wei")
    decision: SweepDecision

    @property
    def is_sweepable(self) -> bool:
        return self.decision is SweepDecision.SWEEPABLE


class SweepRequest(BaseModel):
    """Body of POST /api/sweep/eth."""

    # Any JSON value is accepted; non-string values fail address validation
    destination: Any = Field(
        default=None, description="Override of the configured destination address"
    )


class SweepSkippedResponse(BaseModel):
    """No transaction was sent: balance does not cover gas or nothing is left."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    balance: str
    gas_cost: str = Field(..., alias="gasCost")


class SweepSubmittedResponse(BaseModel):
    """A sweep transaction was signed and broadcast."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    transaction_hash: str = Field(..., alias="transactionHash")
    amount_sent: str = Field(..., alias="amountSent")
    destination: str
    network_link: str = Field(..., alias="networkLink")


class HealthResponse(BaseModel):
    """Body of GET /health."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    version: str
    wallet_address: str = Field(..., alias="walletAddress")
    is_sweep_configured: bool = Field(..., alias="isSweepConfigured")
