"""Category inference from payee history."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.config import settings
from spendwarden.core.exceptions import ValidationError
from spendwarden.repositories.base import translate_store_errors
from spendwarden.repositories.transaction import TransactionRepository

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "unknown"


class CategoryInferenceService:
    """Suggest a category for a payee from previously recorded transactions."""

    def __init__(self, db: AsyncSession, cross_user: bool | None = None):
        self.txn_repo = TransactionRepository(db)
        self.cross_user = (
            settings.category_inference_cross_user if cross_user is None else cross_user
        )

    async def infer_category(self, user_id: UUID, payee: str) -> str:
        """Most recent category used for ``payee``.

        Looks at the user's own history first, then (when enabled) at every
        user's history. Only the category is ever returned.

        Returns:
            The category, or "unknown" when no transaction matches
        """
        if not isinstance(payee, str) or not payee.strip():
            raise ValidationError(details={"field": "payee", "reason": "must be non-empty text"})
        payee = payee.strip()

        with translate_store_errors("infer_category"):
            own = await self.txn_repo.latest_for_payee(payee, user_id=user_id)
            if own is not None:
                return own.category

            if self.cross_user:
                shared = await self.txn_repo.latest_for_payee(payee)
                if shared is not None:
                    logger.debug("Category inferred from other users' history")
                    return shared.category

        return UNKNOWN_CATEGORY
