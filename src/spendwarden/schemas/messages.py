"""Guilt message schemas."""

from pydantic import BaseModel, Field


class GuiltMessageResponse(BaseModel):
    category: str | None = Field(None, description="Category the message was picked for")
    message: str
