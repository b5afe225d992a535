"""Transaction admission and listing endpoints."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.api.deps import get_admission_service, get_current_user, get_db
from spendwarden.config import settings
from spendwarden.core.exceptions import LimitExceededError
from spendwarden.models.user import User
from spendwarden.repositories.base import translate_store_errors
from spendwarden.repositories.transaction import TransactionRepository
from spendwarden.schemas.common import MoneyMeta, PaginationMeta
from spendwarden.schemas.transaction import (
    AdmissionDetails,
    LimitExceededBody,
    TransactionAdmissionRequest,
    TransactionAdmissionResponse,
    TransactionListResult,
    TransactionResponse,
)
from spendwarden.services.admission import TransactionAdmissionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


def _money() -> MoneyMeta:
    return MoneyMeta(currency=settings.currency, minor_unit=settings.currency_minor_unit)


@router.post(
    "",
    response_model=TransactionAdmissionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction",
    description="""
    Record a spending transaction, checked against the monthly cap for its category.

    ## Outcomes
    - **admit**: within the cap (or no cap configured); recorded
    - **reject_over_limit** (409): would exceed the cap; nothing recorded.
      Resubmit with `bypass=true` to record it anyway.
    - **admit_override**: exceeded the cap with `bypass=true`; recorded and flagged

    Amounts are in minor units (paise/cents). Spend is counted month-to-date.
    """,
    responses={status.HTTP_409_CONFLICT: {"model": LimitExceededBody}},
)
async def record_transaction(
    data: TransactionAdmissionRequest,
    current_user: User = Depends(get_current_user),
    admission: TransactionAdmissionService = Depends(get_admission_service),
) -> TransactionAdmissionResponse:
    result = await admission.admit(
        user_id=current_user.id,
        category=data.category,
        amount=data.amount,
        payee=data.payee,
        redirect_url=data.redirect_url,
        bypass=data.bypass,
    )

    if not result.decision.admitted:
        raise LimitExceededError(details=result.decision.as_details(), message=result.message)

    return TransactionAdmissionResponse(
        outcome=result.outcome,
        message=result.message,
        details=AdmissionDetails(
            **result.decision.as_details(),
            redirect=result.redirect_url,
            transaction=TransactionResponse.model_validate(result.transaction),
        ),
        money=_money(),
    )


@router.get(
    "",
    response_model=TransactionListResult,
    summary="List own transactions",
    description="Transactions of the current user, newest first.",
)
async def list_transactions(
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    limit: Annotated[int, Query(ge=1, le=100, description="Items per page (1-100)")] = 20,
    category: Annotated[str | None, Query(description="Filter by category")] = None,
    start: Annotated[
        datetime | None, Query(description="Occurred at or after (inclusive)")
    ] = None,
    end: Annotated[
        datetime | None, Query(description="Occurred at or before (inclusive)")
    ] = None,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> TransactionListResult:
    repo = TransactionRepository(db)
    with translate_store_errors("list_transactions"):
        total = await repo.count(user_id=current_user.id, category=category, start=start, end=end)
        transactions = await repo.find(
            user_id=current_user.id,
            category=category,
            start=start,
            end=end,
            skip=(page - 1) * limit,
            limit=limit,
        )

    total_pages = (total + limit - 1) // limit if total > 0 else 0
    return TransactionListResult(
        transactions=[TransactionResponse.model_validate(txn) for txn in transactions],
        pagination=PaginationMeta(page=page, limit=limit, total=total, total_pages=total_pages),
        money=_money(),
    )
