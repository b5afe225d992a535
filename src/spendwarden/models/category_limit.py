"""Per-user monthly spending cap for a category."""
from uuid import UUID

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spendwarden.models.base import BaseModel


class CategoryLimit(BaseModel):
    """Monthly cap for one (user, category) pair."""

    __tablename__ = "category_limits"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    cap: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "category", name="uq_category_limit_user_category"),
        CheckConstraint("cap >= 0", name="ck_category_limits_cap_non_negative"),
    )

    user: Mapped["User"] = relationship("User", back_populates="category_limits")

    def __repr__(self) -> str:
        return f"<CategoryLimit(user_id={self.user_id}, category={self.category}, cap={self.cap})>"
