"""Sweep API routes.

Provides endpoints for:
- Sweeping the treasury's ETH (minus gas) to a destination address
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, status

from treasury.api.dependencies import SweepServiceDep
from treasury.constants.sweep import (
    MSG_EXECUTION_FAILED,
    MSG_INVALID_ADDRESS,
    MSG_INVALID_BODY,
    MSG_NOT_CONFIGURED,
)
from treasury.core.exceptions import (
    ExecutionFailedError,
    InvalidAddressError,
    SweepNotConfiguredError,
)
from treasury.models.sweep import (
    SweepRequest,
    SweepSkippedResponse,
    SweepSubmittedResponse,
)

router = APIRouter(prefix="/sweep", tags=["sweep"])


@router.post("/eth", response_model=SweepSubmittedResponse | SweepSkippedResponse)
async def sweep_eth(
    service: SweepServiceDep,
    body: Annotated[Any, Body(description="JSON object with an optional destination")] = None,
) -> SweepSubmittedResponse | SweepSkippedResponse:
    """Sweep all ETH from the treasury wallet, minus gas."""
    if body is not None and not isinstance(body, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": MSG_INVALID_BODY},
        )
    destination = SweepRequest.model_validate(body).destination if body else None
    try:
        return await service.sweep(destination)
    except InvalidAddressError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": MSG_INVALID_ADDRESS},
        ) from e
    except SweepNotConfiguredError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": MSG_NOT_CONFIGURED},
        ) from e
    except ExecutionFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": MSG_EXECUTION_FAILED, "details": e.reason},
        ) from e
