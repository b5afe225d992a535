"""Monthly analytics schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from spendwarden.schemas.common import MoneyMeta


class CategorySpend(BaseModel):
    category: str
    cap: int | None = Field(None, description="Monthly cap, null when unbounded")
    spent: int = Field(description="Spend in the month (minor units)")
    remaining: int | None = Field(None, description="Cap minus spend, null when unbounded")


class MonthlySummary(BaseModel):
    year: int
    month: int
    window_start: datetime
    window_end: datetime
    total: int = Field(description="Total spend in the month (minor units)")
    per_category: list[CategorySpend]
    money: MoneyMeta
