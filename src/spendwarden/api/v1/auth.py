"""Authentication endpoints for user registration, login, and token management."""

from fastapi import APIRouter, Depends, status

from spendwarden.api.deps import get_auth_service, get_current_user
from spendwarden.models.user import User
from spendwarden.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LogoutRequest,
    LogoutResult,
    RefreshRequest,
    TokenPair,
    UserRegister,
    UserResponse,
)
from spendwarden.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a new user account with email and password.",
)
async def register(
    data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Register a new user account.

    Raises:
        400: Email already registered or validation error
    """
    user = await auth_service.register(
        email=data.email,
        password=data.password,
        full_name=data.full_name,
    )
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=TokenPair,
    summary="User login",
    description="Authenticate with email and password to receive JWT tokens.",
)
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenPair:
    """
    Authenticate user and return JWT tokens.

    Raises:
        401: Invalid credentials
        403: User account deactivated
    """
    return await auth_service.login(email=data.email, password=data.password)


@router.post(
    "/refresh",
    response_model=TokenPair,
    summary="Refresh access token",
    description="Exchange a refresh token for a new pair. The old refresh token is revoked.",
)
async def refresh(
    data: RefreshRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenPair:
    """
    Rotate the refresh token and issue a new access token.

    Raises:
        401: Invalid, expired or revoked refresh token
        403: User account deactivated
    """
    return await auth_service.refresh_tokens(data.refresh_token)


@router.post(
    "/logout",
    response_model=LogoutResult,
    summary="Revoke refresh token",
    description="Revoke the given refresh token, or every token of its user.",
)
async def logout(
    data: LogoutRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> LogoutResult:
    revoked = await auth_service.logout(data.refresh_token, all_sessions=data.all_sessions)
    return LogoutResult(revoked=revoked)


@router.get(
    "/me",
    response_model=CurrentUser,
    summary="Get current user",
    description="Get authenticated user's profile information.",
)
async def get_me(
    current_user: User = Depends(get_current_user),
) -> CurrentUser:
    return CurrentUser.model_validate(current_user)
