"""Authentication service with business logic."""

import logging
from uuid import UUID

from fastapi import HTTPException, status
from jose import JWTError

from spendwarden.config import settings
from spendwarden.core.security import (
    REFRESH_TOKEN_TYPE,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
)
from spendwarden.models.refresh_token import RefreshToken
from spendwarden.models.user import User
from spendwarden.repositories.refresh_token import RefreshTokenRepository
from spendwarden.repositories.user import UserRepository
from spendwarden.schemas.auth import TokenPair

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, user_repo: UserRepository, token_repo: RefreshTokenRepository):
        """
        Initialize authentication service.

        Args:
            user_repo: User repository for database operations
            token_repo: Persisted refresh token store
        """
        self.user_repo = user_repo
        self.token_repo = token_repo

    async def register(self, email: str, password: str, full_name: str) -> User:
        """
        Register a new user.

        Raises:
            HTTPException: If email already exists
        """
        if await self.user_repo.email_exists(email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )

        user = User(
            email=email,
            password_hash=hash_password(password),
            full_name=full_name,
            points=settings.default_points,
        )
        created_user = await self.user_repo.create(user)
        logger.info("User registered", extra={"user_id": str(created_user.id)})
        return created_user

    async def _issue_tokens(self, user: User) -> TokenPair:
        refresh_token, jti, expires_at = create_refresh_token(user.id)
        await self.token_repo.create(
            RefreshToken(user_id=user.id, jti=jti, expires_at=expires_at)
        )
        return TokenPair(
            access_token=create_access_token(user.id),
            refresh_token=refresh_token,
        )

    async def login(self, email: str, password: str) -> TokenPair:
        """
        Authenticate user and return JWT tokens.

        Raises:
            HTTPException: If credentials are invalid or the account is deactivated
        """
        user = await self.user_repo.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
            )

        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="User account is deactivated",
            )

        return await self._issue_tokens(user)

    def _decode_refresh(self, refresh_token: str) -> tuple[UUID, str]:
        invalid = HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        )
        try:
            payload = decode_token(refresh_token)
            if payload.get("type") != REFRESH_TOKEN_TYPE or not payload.get("jti"):
                raise invalid
            return UUID(payload["sub"]), payload["jti"]
        except (JWTError, KeyError, ValueError):
            raise invalid

    async def refresh_tokens(self, refresh_token: str) -> TokenPair:
        """
        Rotate a refresh token: revoke the presented one and issue a new pair.

        Raises:
            HTTPException: If the token is invalid, expired, revoked, or the user is gone
        """
        user_id, jti = self._decode_refresh(refresh_token)

        stored = await self.token_repo.get_active(jti)
        if stored is None or stored.user_id != user_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired refresh token",
            )

        user = await self.get_current_user(user_id)
        # A concurrent refresh with the same token may have revoked it already.
        if not await self.token_repo.revoke(jti):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired refresh token",
            )
        return await self._issue_tokens(user)

    async def logout(self, refresh_token: str, all_sessions: bool = False) -> int:
        """
        Revoke the presented refresh token, or all of the user's tokens.

        Returns:
            Number of tokens revoked
        """
        user_id, jti = self._decode_refresh(refresh_token)
        if all_sessions:
            revoked = await self.token_repo.revoke_all_for_user(user_id)
        else:
            revoked = 1 if await self.token_repo.revoke(jti) else 0
        logger.info("Refresh tokens revoked", extra={"user_id": str(user_id), "revoked": revoked})
        return revoked

    async def get_current_user(self, user_id: UUID) -> User:
        """
        Get user by ID for authenticated requests.

        Raises:
            HTTPException: If user not found or inactive
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found",
            )

        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="User account is deactivated",
            )

        return user
