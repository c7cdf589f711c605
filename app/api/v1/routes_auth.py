# File: app/api/v1/routes_auth.py

"""
Auth API routes: register, login, email confirmation, current user.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.api.deps import (
    CurrentUser,
    get_credentials,
    get_current_user,
    get_db,
    get_mailer,
    get_app_settings,
)
from app.core.config import Settings
from app.schemas.user import LoginResponse, MessageResponse, UserCredentials, UserResponse
from app.services import auth_service
from app.services.credential_service import CredentialService
from app.services.errors import (
    CredentialError,
    EmailNotConfirmedError,
    InvalidConfirmationTokenError,
    NotFoundError,
    UserCheckError,
)
from app.services.mail_service import MailSender

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(
    payload: UserCredentials,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credentials),
    mailer: MailSender = Depends(get_mailer),
    settings: Settings = Depends(get_app_settings),
):
    """
    Create the identity, store an unconfirmed user and email the
    confirmation link.
    """
    try:
        auth_service.register_user(
            db, credentials, mailer, settings,
            email=payload.email, password=payload.password,
        )
    except Exception:
        logger.exception("Registration failed for %s", payload.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed",
        )
    return MessageResponse(message="Confirmation email sent")


@router.post("/login", response_model=LoginResponse, summary="User login")
def login(
    payload: UserCredentials,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credentials),
    settings: Settings = Depends(get_app_settings),
):
    try:
        token, user = auth_service.authenticate_user(
            db, credentials, settings,
            email=payload.email, password=payload.password,
        )
    except (CredentialError, UserCheckError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EmailNotConfirmedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except Exception:
        logger.exception("Login failed for %s", payload.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error during login",
        )

    return {"token": token, "user": {"id": user.id, "email": user.email}}


@router.get(
    "/confirm-email",
    response_class=PlainTextResponse,
    summary="Redeem an email confirmation token",
)
def confirm_email(
    token: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    if not token:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Token is missing")

    try:
        auth_service.confirm_email(db, token)
    except InvalidConfirmationTokenError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Email confirmation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )

    return "Email confirmed!"


@router.get("/user", response_model=UserResponse, summary="Current user")
def read_current_user(
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        user = auth_service.get_user(db, current.id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception("Could not load user %s", current.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )
    return {"user": user}
