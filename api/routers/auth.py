"""
Account endpoints.

POST /api/auth/register → create a user, return a token
POST /api/auth/login    → exchange email + password for a token
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.auth import create_access_token, hash_password, verify_password
from api.dependencies import get_db
from api.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _normalize_email(email: str) -> str:
    return email.strip().lower()


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
) -> TokenResponse:
    email = _normalize_email(body.email)
    existing = await db.execute(select(User.id).where(User.email == email))
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(
        username=body.username,
        email=email,
        password_hash=hash_password(body.password),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # lost a race against a concurrent registration with the same email
        await db.rollback()
        raise HTTPException(status_code=400, detail="User already exists")
    await db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return TokenResponse(token=create_access_token(user), user=UserResponse.model_validate(user))


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> TokenResponse:
    result = await db.execute(select(User).where(User.email == _normalize_email(body.email)))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(body.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return TokenResponse(token=create_access_token(user), user=UserResponse.model_validate(user))
