"""Category inference endpoint."""

from fastapi import APIRouter, Depends

from spendwarden.api.deps import get_category_service, get_current_user
from spendwarden.models.user import User
from spendwarden.schemas.categories import CategoryInferenceRequest, CategoryInferenceResponse
from spendwarden.services.categories import CategoryInferenceService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post(
    "/infer",
    response_model=CategoryInferenceResponse,
    summary="Suggest a category for a payee",
    description='Most recent category used for the payee, or "unknown".',
)
async def infer_category(
    data: CategoryInferenceRequest,
    current_user: User = Depends(get_current_user),
    category_service: CategoryInferenceService = Depends(get_category_service),
) -> CategoryInferenceResponse:
    category = await category_service.infer_category(current_user.id, data.payee)
    return CategoryInferenceResponse(payee=data.payee, category=category)
