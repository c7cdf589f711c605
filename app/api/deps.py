# File: app/api/deps.py

from collections.abc import Generator
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.container import ServiceContainer
from app.core.security import decode_access_token
from app.services.credential_service import CredentialService
from app.services.mail_service import MailSender

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Identity decoded from a verified bearer token."""

    id: str
    email: str


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_app_settings(container: ServiceContainer = Depends(get_container)) -> Settings:
    return container.settings


def get_credentials(container: ServiceContainer = Depends(get_container)) -> CredentialService:
    return container.credentials


def get_mailer(container: ServiceContainer = Depends(get_container)) -> MailSender:
    return container.mailer


def get_db(container: ServiceContainer = Depends(get_container)) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = container.session_factory()
    try:
        yield db
    finally:
        db.close()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    token: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> CurrentUser:
    """
    Guard for protected routes: ``Authorization: Bearer <token>``.

    Tokens are stateless; there is no refresh or revocation.
    """
    if token is None or not token.credentials:
        raise _unauthorized("Not authenticated")

    try:
        claims = decode_access_token(token.credentials, settings)
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError:
        raise _unauthorized("Invalid token")

    return CurrentUser(id=claims["sub"], email=claims.get("email", ""))
