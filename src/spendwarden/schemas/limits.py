"""Category limit schemas. Caps are in minor units."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LimitEntry(BaseModel):
    """One category cap in a batch."""

    category: str = Field(..., min_length=1, max_length=100, description="Category name")
    cap: int = Field(..., ge=0, description="Monthly cap in minor units")


class SetLimitsRequest(BaseModel):
    """A batch of caps; one bad entry rejects the whole batch."""

    limits: list[LimitEntry] = Field(..., min_length=1, description="Caps to set")


class CategoryLimitResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    cap: int
    updated_at: datetime


class CategoryLimitListResult(BaseModel):
    limits: list[CategoryLimitResponse]


class SetLimitsResult(BaseModel):
    message: str
    limits: list[CategoryLimitResponse]
