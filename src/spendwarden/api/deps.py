"""FastAPI dependency injection for authentication, database and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.core.security import get_user_id_from_token
from spendwarden.db.session import get_db
from spendwarden.models.user import User
from spendwarden.repositories.refresh_token import RefreshTokenRepository
from spendwarden.repositories.user import UserRepository
from spendwarden.services.admission import TransactionAdmissionService
from spendwarden.services.auth import AuthService
from spendwarden.services.categories import CategoryInferenceService
from spendwarden.services.limits import LimitService
from spendwarden.services.spending import SpendingService

# OAuth2 bearer token scheme
security = HTTPBearer()


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return UserRepository(db)


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    return AuthService(UserRepository(db), RefreshTokenRepository(db))


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Extract and validate user from JWT access token.

    Raises:
        HTTPException: If token is invalid, expired, or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        user_id = get_user_id_from_token(credentials.credentials)
    except (JWTError, ValueError):
        raise credentials_exception

    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise credentials_exception

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is deactivated",
        )

    # Picked up by the request logging middleware.
    request.state.user = user
    return user


async def get_admission_service(
    db: AsyncSession = Depends(get_db),
) -> TransactionAdmissionService:
    return TransactionAdmissionService(db)


async def get_limit_service(db: AsyncSession = Depends(get_db)) -> LimitService:
    return LimitService(db)


async def get_spending_service(db: AsyncSession = Depends(get_db)) -> SpendingService:
    return SpendingService(db)


async def get_category_service(
    db: AsyncSession = Depends(get_db),
) -> CategoryInferenceService:
    return CategoryInferenceService(db)
