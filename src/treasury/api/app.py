"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from treasury.api.middleware.request_logging import RequestLoggingMiddleware
from treasury.api.routes import health, sweep
from treasury.config.logging import configure_logging
from treasury.config.settings import Settings, get_settings
from treasury.services.ethereum import EthereumClient, TreasuryWallet, load_treasury_wallet

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    wallet: TreasuryWallet = app.state.wallet

    log.info(
        "application_started",
        app_name=settings.app_name,
        port=settings.port,
        wallet_address=wallet.address,
        provider_url=settings.ethers_provider_url,
    )
    if not wallet.is_configured:
        log.warning(
            "sweep_disabled_missing_private_key",
            hint="Set TREASURY_PRIVATE_KEY to enable sweeping.",
        )

    yield

    log.info("application_stopping")
    await app.state.chain_client.close()
    log.info("application_stopped")


def create_app(
    settings: Settings | None = None,
    chain_client: EthereumClient | None = None,
    wallet: TreasuryWallet | None = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Settings to use instead of the environment.
        chain_client: Ethereum client to use instead of one built from
            ``settings.ethers_provider_url``.
        wallet: Treasury wallet to use instead of one loaded from
            ``settings.treasury_private_key``.

    Raises:
        ConfigurationError: If the configured private key is malformed.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Sweeps the treasury wallet's ETH to a payout address",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.wallet = wallet or load_treasury_wallet(settings.treasury_private_key)
    app.state.chain_client = chain_client or EthereumClient(settings.ethers_provider_url)

    # Middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(health.router)
    app.include_router(sweep.router, prefix="/api")

    return app
