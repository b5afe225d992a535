"""Transaction admission and listing schemas.

All amounts are in minor units (paise/cents).
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from spendwarden.budgeting.admission import AdmissionOutcome
from spendwarden.schemas.common import MoneyMeta, PaginationMeta


class TransactionAdmissionRequest(BaseModel):
    """Request to record a spending transaction."""

    category: str = Field(..., min_length=1, max_length=100, description="Spending category")
    amount: int = Field(..., gt=0, description="Amount in minor units (must be positive)")
    payee: str = Field(..., min_length=1, max_length=255, description="Who was paid")
    redirect_url: str = Field(
        ..., min_length=1, description="Where the client continues after recording"
    )
    bypass: bool = Field(
        default=False, description="Record even if the monthly limit is exceeded"
    )


class TransactionResponse(BaseModel):
    """Transaction data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    category: str
    amount: int = Field(description="Amount in minor units")
    payee: str
    occurred_at: datetime
    exceeded_limit: bool


class AdmissionDetails(BaseModel):
    cap: int | None = Field(None, description="Monthly cap, null when unbounded")
    prior_spend: int = Field(description="Month-to-date spend before this transaction")
    amount: int
    remaining: int | None = Field(
        None, description="Cap minus prior spend; set when the cap is exceeded"
    )
    exceed_amount: int | None = Field(
        None, description="How far this transaction goes over the cap"
    )
    remaining_after: int | None = Field(
        None, description="Cap left after counting this transaction"
    )
    redirect: str | None = None
    transaction: TransactionResponse | None = None


class TransactionAdmissionResponse(BaseModel):
    """Outcome of an admission request."""

    outcome: AdmissionOutcome
    message: str
    details: AdmissionDetails
    money: MoneyMeta


class TransactionListResult(BaseModel):
    """Paginated list of transactions."""

    transactions: list[TransactionResponse]
    pagination: PaginationMeta
    money: MoneyMeta


class LimitExceededBody(BaseModel):
    """Error body returned when a transaction is rejected over the limit."""

    error_code: str
    outcome: AdmissionOutcome
    message: str
    user_message: str
    suggestion: str
    retry_allowed: bool
    details: dict[str, Any]
