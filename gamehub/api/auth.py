# Authentication API routes: signup, signin, logout and session check

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.db import get_app_db
from gamehub.dependencies.auth import get_optional_claims
from gamehub.exceptions import NotFoundError
from gamehub.schemas import (
    AuthResponse,
    IsAuthResponse,
    LogoutResponse,
    UserLogin,
    UserProfile,
    UserRegister,
    UserSummary,
)
from gamehub.services.credential_store import CredentialStore
from gamehub.utils.auth import TokenService, get_token_service
from gamehub.utils.logger import setup_logger

logger = setup_logger("api.auth")

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def get_credential_store() -> CredentialStore:
    return CredentialStore()


def _issue_for(token_service: TokenService, user) -> str:
    return token_service.issue(user.id, {"username": user.username})


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    user_data: UserRegister,
    db: AsyncSession = Depends(get_app_db),
    credential_store: CredentialStore = Depends(get_credential_store),
    token_service: TokenService = Depends(get_token_service),
):
    """Register a new user and sign them in right away."""
    user = await credential_store.create(user_data.username, user_data.password, db=db)
    return AuthResponse(
        message="User created successfully",
        token=_issue_for(token_service, user),
        user=UserSummary.model_validate(user),
    )


@router.post("/signin", response_model=AuthResponse)
async def signin(
    user_data: UserLogin,
    db: AsyncSession = Depends(get_app_db),
    credential_store: CredentialStore = Depends(get_credential_store),
    token_service: TokenService = Depends(get_token_service),
):
    """Check credentials and return a bearer token valid for 7 days."""
    user = await credential_store.verify(user_data.username, user_data.password, db=db)
    logger.info(f"User {user.id} signed in")
    return AuthResponse(
        message="Login successful",
        token=_issue_for(token_service, user),
        user=UserSummary.model_validate(user),
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout():
    """
    Acknowledge a logout.

    Tokens are stateless and kept by the client, so logging out means the
    client drops its token. Nothing is stored server-side.
    """
    return LogoutResponse(success=True, message="Logged out successfully")


@router.post(
    "/is-auth", response_model=IsAuthResponse, response_model_exclude_none=True
)
async def is_authenticated(
    claims: dict[str, Any] | None = Depends(get_optional_claims),
    db: AsyncSession = Depends(get_app_db),
    credential_store: CredentialStore = Depends(get_credential_store),
):
    """Report whether the bearer token is valid and, if so, who it belongs to."""
    if claims is None:
        return IsAuthResponse(success=False, message="Please login first")

    try:
        user = await credential_store.get_by_id(UUID(claims["sub"]), db=db)
    except (ValueError, NotFoundError):
        return IsAuthResponse(success=False, message="Not authorized")

    return IsAuthResponse(success=True, user=UserProfile.model_validate(user))
