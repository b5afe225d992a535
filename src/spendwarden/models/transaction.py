"""Transaction model: one admitted spending event."""
from datetime import datetime
from uuid import UUID

from sqlalchemy import BigInteger, Boolean, CheckConstraint, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spendwarden.models.base import BaseModel, utcnow


class Transaction(BaseModel):
    """A spending transaction recorded by its owner. Never updated after insert."""

    __tablename__ = "transactions"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    payee: Mapped[str] = mapped_column(String(255), nullable=False)
    occurred_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    exceeded_limit: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    __table_args__ = (
        Index("ix_transactions_user_category_occurred", "user_id", "category", "occurred_at"),
        Index("ix_transactions_payee_occurred", "payee", "occurred_at"),
        CheckConstraint("amount >= 0", name="ck_transactions_amount_non_negative"),
    )

    user: Mapped["User"] = relationship("User", back_populates="transactions")

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, category={self.category}, "
            f"amount={self.amount}, exceeded_limit={self.exceeded_limit})>"
        )
