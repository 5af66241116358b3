"""
Bearer-token authentication.

- Passwords: salted PBKDF2-SHA256, stored as "pbkdf2_sha256$<iterations>$<salt>$<hash>"
- Tokens: HS256 JWTs (PyJWT) with sub = user id, username, exp

Usage:
    @router.get("/protected")
    async def protected(user: User = Depends(get_current_user)):
        ...

Status codes:
- 401 → no token at all
- 403 → token present but invalid, expired, or its user no longer exists
"""

import hashlib
import hmac
import logging
import secrets
import uuid
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_db
from config.settings import settings
from models.user import User

logger = logging.getLogger(__name__)

# auto_error=False so a missing header gives our 401 instead of FastAPI's 403
security = HTTPBearer(auto_error=False)

_HASH_ALGORITHM = "pbkdf2_sha256"
_HASH_ITERATIONS = 100_000


# ── Passwords ───────────────────────────────────────────────────

def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), _HASH_ITERATIONS
    ).hex()
    return f"{_HASH_ALGORITHM}${_HASH_ITERATIONS}${salt}${digest}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algorithm, iterations, salt, expected = stored.split("$")
        rounds = int(iterations)
    except ValueError:
        return False
    if algorithm != _HASH_ALGORITHM or rounds < 1:
        return False

    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), rounds
    ).hex()
    # Constant-time comparison
    return hmac.compare_digest(digest, expected)


# ── Tokens ──────────────────────────────────────────────────────

def create_access_token(user: User) -> str:
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    claims = {"sub": str(user.id), "username": user.username, "exp": expires}
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Raises jwt.PyJWTError if the token is malformed, tampered with or expired."""
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the bearer token to a User, or fail with 401/403."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=401,
            detail="Access denied. No token provided.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        claims = decode_access_token(credentials.credentials)
        user_id = uuid.UUID(claims["sub"])
    except (jwt.PyJWTError, KeyError, ValueError) as e:
        logger.warning(f"Auth failed: invalid token ({e})")
        raise HTTPException(status_code=403, detail="Invalid token.")

    user = (await db.execute(select(User).where(User.id == user_id))).scalar_one_or_none()
    if user is None:
        logger.warning(f"Auth failed: token for unknown user {user_id}")
        raise HTTPException(status_code=403, detail="Invalid token.")
    return user
