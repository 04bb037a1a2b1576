"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from riderwatch.api.dependencies import get_current_user_id
from riderwatch.database import get_db
from riderwatch.errors import AuthenticationError, NotFoundError
from riderwatch.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from riderwatch.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    get_user_by_id,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    user = create_user(db, user_data.name, user_data.email, user_data.password)

    return AuthResponse(
        message="Account created successfully",
        token=create_access_token(user.id),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise AuthenticationError("Invalid email or password")

    return AuthResponse(
        message="Login successful",
        token=create_access_token(user.id),
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get current user information."""
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user
