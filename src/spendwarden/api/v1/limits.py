"""Category limit endpoints."""

from fastapi import APIRouter, Depends

from spendwarden.api.deps import get_current_user, get_limit_service
from spendwarden.models.user import User
from spendwarden.schemas.limits import (
    CategoryLimitListResult,
    CategoryLimitResponse,
    SetLimitsRequest,
    SetLimitsResult,
)
from spendwarden.services.limits import LimitService

router = APIRouter(prefix="/limits", tags=["limits"])


@router.get(
    "",
    response_model=CategoryLimitListResult,
    summary="List category limits",
)
async def list_limits(
    current_user: User = Depends(get_current_user),
    limit_service: LimitService = Depends(get_limit_service),
) -> CategoryLimitListResult:
    limits = await limit_service.list_limits(current_user.id)
    return CategoryLimitListResult(
        limits=[CategoryLimitResponse.model_validate(limit) for limit in limits]
    )


@router.put(
    "",
    response_model=SetLimitsResult,
    summary="Set category limits",
    description="Upsert monthly caps (minor units). An invalid entry rejects the whole batch.",
)
async def set_limits(
    data: SetLimitsRequest,
    current_user: User = Depends(get_current_user),
    limit_service: LimitService = Depends(get_limit_service),
) -> SetLimitsResult:
    saved = await limit_service.set_limits(current_user.id, data.limits)
    return SetLimitsResult(
        message="Category limits updated successfully.",
        limits=[CategoryLimitResponse.model_validate(limit) for limit in saved],
    )
