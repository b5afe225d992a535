"""Monthly spending analytics."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from spendwarden.api.deps import get_current_user, get_spending_service
from spendwarden.models.user import User
from spendwarden.schemas.analytics import MonthlySummary
from spendwarden.services.spending import SpendingService

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get(
    "",
    response_model=MonthlySummary,
    summary="Monthly spend per category",
    description="Full calendar month totals against caps. Defaults to the current month.",
)
async def monthly_summary(
    month: Annotated[int | None, Query(ge=1, le=12, description="Month (1-12)")] = None,
    year: Annotated[int | None, Query(ge=1970, le=3000, description="Year")] = None,
    current_user: User = Depends(get_current_user),
    spending: SpendingService = Depends(get_spending_service),
) -> MonthlySummary:
    return await spending.monthly_summary(current_user.id, month=month, year=year)
