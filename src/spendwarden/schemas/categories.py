"""Category inference schemas."""

from pydantic import BaseModel, Field


class CategoryInferenceRequest(BaseModel):
    payee: str = Field(..., min_length=1, max_length=255, description="Payee to look up")


class CategoryInferenceResponse(BaseModel):
    payee: str
    category: str = Field(description='Most recent category for the payee, or "unknown"')
