"""Category limit configuration and lookup."""

import logging
import math
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.core.exceptions import ValidationError
from spendwarden.models.category_limit import CategoryLimit
from spendwarden.repositories.base import translate_store_errors
from spendwarden.repositories.category_limit import CategoryLimitRepository

logger = logging.getLogger(__name__)


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def validate_limit_entries(entries: Sequence[Any]) -> list[tuple[str, int]]:
    """Check a whole batch of ``{category, cap}`` entries up front.

    Args:
        entries: Mappings or objects with ``category`` and ``cap``

    Returns:
        List of (category, cap) pairs, in input order

    Raises:
        ValidationError: If the batch is empty, a category is not a non-empty
            string, or a cap is not a non-negative whole number
    """
    if not isinstance(entries, Sequence) or isinstance(entries, (str, bytes)) or not entries:
        raise ValidationError(details={"reason": "limits must be a non-empty list"})

    validated: list[tuple[str, int]] = []
    for index, entry in enumerate(entries):
        category = _field(entry, "category")
        cap = _field(entry, "cap")
        if not isinstance(category, str) or not category.strip():
            raise ValidationError(
                details={"index": index, "field": "category", "reason": "must be non-empty text"}
            )
        if (
            isinstance(cap, bool)
            or not isinstance(cap, Real)
            or not math.isfinite(cap)
            or cap < 0
            or cap != int(cap)
        ):
            raise ValidationError(
                details={"index": index, "field": "cap", "reason": "must be a non-negative whole number"}
            )
        validated.append((category.strip(), int(cap)))
    return validated


class LimitService:
    """Resolve and configure monthly category caps."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.limit_repo = CategoryLimitRepository(db)

    async def resolve_limit(
        self, user_id: UUID, category: str, for_update: bool = False
    ) -> int | None:
        """Monthly cap for (user, category), or None when no limit is configured.

        A cap of 0 is a real limit meaning no spending is allowed.
        """
        with translate_store_errors("resolve_limit"):
            limit = await self.limit_repo.find_limit(user_id, category, for_update=for_update)
        return None if limit is None else limit.cap

    async def list_limits(self, user_id: UUID) -> list[CategoryLimit]:
        with translate_store_errors("list_limits"):
            return await self.limit_repo.list_by_user(user_id)

    async def set_limits(self, user_id: UUID, entries: Sequence[Any]) -> list[CategoryLimit]:
        """Upsert a batch of caps.

        The batch is validated before anything is written. Repeated categories
        within one batch resolve to the last entry.
        """
        validated = validate_limit_entries(entries)

        with translate_store_errors("set_limits"):
            saved: dict[str, CategoryLimit] = {}
            for category, cap in validated:
                saved[category] = await self.limit_repo.upsert(user_id, category, cap)
            await self.db.commit()

        logger.info(
            "Category limits updated",
            extra={"user_id": str(user_id), "categories": sorted(saved)},
        )
        return sorted(saved.values(), key=lambda limit: limit.category)
