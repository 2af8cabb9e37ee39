"""Health check endpoint."""

from fastapi import APIRouter

from treasury.api.dependencies import SettingsDep, WalletDep
from treasury.models.sweep import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep, wallet: WalletDep) -> HealthResponse:
    """
    Health check endpoint with treasury wallet status.

    Returns:
        HealthResponse with status, version, wallet address and whether a
        signing key was configured.
    """
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        wallet_address=wallet.address,
        is_sweep_configured=wallet.is_configured,
    )
