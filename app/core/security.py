# File: app/core/security.py

"""
Security helpers for the MyFinance API.

  - Signed access tokens (PyJWT, HS256 by default)
  - Password hashing for the bundled credential store (bcrypt)
  - Random email confirmation tokens
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

from app.core.config import Settings

CONFIRMATION_TOKEN_BYTES = 32

# bcrypt only looks at the first 72 bytes and bcrypt>=5 refuses longer input
MAX_PASSWORD_BYTES = 72


def create_access_token(
    data: dict,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Sign ``data`` into a JWT.

    ``iat`` and ``exp`` are added here; the expiry defaults to
    ``settings.access_token_expire_minutes`` (7 days).
    """
    to_encode: dict[str, Any] = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises ``jwt.InvalidTokenError`` (or a subclass such as
    ``jwt.ExpiredSignatureError``) when the token can't be trusted.
    """
    return jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.algorithm],
        options={"require": ["exp", "sub"]},
    )


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    raw = password.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(raw, password_hash.encode("utf-8"))


def generate_confirmation_token() -> str:
    # 64 hex characters
    return secrets.token_hex(CONFIRMATION_TOKEN_BYTES)
