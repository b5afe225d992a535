"""Guilt message lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from spendwarden.api.deps import get_current_user
from spendwarden.budgeting.messages import guilt_message
from spendwarden.models.user import User
from spendwarden.schemas.messages import GuiltMessageResponse

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get(
    "/guilt",
    response_model=GuiltMessageResponse,
    summary="Random guilt message",
    description="A message for the category, or a generic one when the category has none.",
)
async def get_guilt_message(
    category: Annotated[str | None, Query(max_length=100, description="Spending category")] = None,
    current_user: User = Depends(get_current_user),
) -> GuiltMessageResponse:
    return GuiltMessageResponse(category=category, message=guilt_message(category))
