"""FastAPI dependencies for dependency injection.

The chain client, wallet and settings are built once in ``create_app`` and
kept on ``app.state``; tests substitute them by passing their own to
``create_app``.
"""

from typing import Annotated

from fastapi import Depends, Request

from treasury.config.settings import Settings
from treasury.core.sweep import SweepService
from treasury.services.ethereum import EthereumClient, TreasuryWallet


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    settings: Settings = request.app.state.settings
    return settings


def get_chain_client(request: Request) -> EthereumClient:
    """Get the shared Ethereum client."""
    client: EthereumClient = request.app.state.chain_client
    return client


def get_treasury_wallet(request: Request) -> TreasuryWallet:
    """Get the treasury wallet loaded at startup."""
    wallet: TreasuryWallet = request.app.state.wallet
    return wallet


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
ChainClientDep = Annotated[EthereumClient, Depends(get_chain_client)]
WalletDep = Annotated[TreasuryWallet, Depends(get_treasury_wallet)]


def get_sweep_service(
    settings: SettingsDep, chain_client: ChainClientDep, wallet: WalletDep
) -> SweepService:
    """Get sweep service dependency."""
    return SweepService(
        chain_client=chain_client,
        wallet=wallet,
        default_destination=settings.sweep_destination_address,
        explorer_tx_url=settings.explorer_tx_url,
    )


SweepServiceDep = Annotated[SweepService, Depends(get_sweep_service)]
