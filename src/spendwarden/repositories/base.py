"""Base repository with generic CRUD operations."""
import logging
from contextlib import contextmanager
from typing import Generic, Iterator, Type, TypeVar
from uuid import UUID

from sqlalchemy import exc as sa_exc
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.core.exceptions import StoreUnavailableError
from spendwarden.models.base import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Connection loss, driver timeouts and pool exhaustion. Integrity errors are not
# availability problems and propagate unchanged.
STORE_UNAVAILABLE_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.TimeoutError,
    TimeoutError,
    ConnectionError,
)


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise store availability failures as StoreUnavailableError."""
    try:
        yield
    except STORE_UNAVAILABLE_ERRORS as exc:
        # Do not log str(exc): it can include SQL + bound parameters.
        logger.error(
            f"Store unavailable during {operation}",
            extra={"operation": operation, "error_type": type(exc).__name__},
        )
        raise StoreUnavailableError(
            details={"operation": operation, "error_type": type(exc).__name__}
        ) from exc


class BaseRepository(Generic[T]):
    """Generic repository providing CRUD operations for any model."""

    def __init__(self, db: AsyncSession, model: Type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: UUID) -> T | None:
        """Get a single record by ID."""
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def create(self, obj: T) -> T:
        """Create a new record."""
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj
