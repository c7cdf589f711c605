# File: app/services/auth_service.py

"""
Authentication service.

  - Registration: identity + local user row + confirmation email
  - Login: password check, confirmation check, token issue
  - Email confirmation: single-use token redemption
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.security import create_access_token, generate_confirmation_token
from app.models.user import User
from app.services.credential_service import CredentialService
from app.services.errors import (
    CredentialError,
    EmailNotConfirmedError,
    InvalidConfirmationTokenError,
    NotFoundError,
    RegistrationError,
    UserCheckError,
)
from app.services.mail_service import MailSender, send_confirmation_email

logger = logging.getLogger(__name__)


def register_user(
    db: Session,
    credentials: CredentialService,
    mailer: MailSender,
    settings: Settings,
    *,
    email: str,
    password: str,
) -> User:
    """
    Create the identity and the unconfirmed user row, then mail the link.

    Identity and user row are committed together. The email goes out after
    the commit; if delivery fails the account stays registered but
    unconfirmed.
    """
    try:
        identity = credentials.sign_up(db, email=email, password=password)
        user = User(
            id=identity.id,
            email=identity.email,
            email_confirmation_token=generate_confirmation_token(),
            email_confirmed=False,
        )
        db.add(user)
        db.commit()
    except (CredentialError, SQLAlchemyError) as e:
        db.rollback()
        raise RegistrationError(str(e)) from e

    send_confirmation_email(mailer, settings, to=user.email, token=user.email_confirmation_token)
    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(
    db: Session,
    credentials: CredentialService,
    settings: Settings,
    *,
    email: str,
    password: str,
) -> tuple[str, User]:
    """
    Return ``(token, user)`` for a confirmed account.

    Raises ``InvalidCredentialsError`` for a bad email/password pair,
    ``UserCheckError`` when the identity has no local row and
    ``EmailNotConfirmedError`` before confirmation.
    """
    identity = credentials.sign_in(db, email=email, password=password)

    user = db.get(User, identity.id)
    if user is None:
        raise UserCheckError("Failed to verify user")
    if not user.email_confirmed:
        raise EmailNotConfirmedError("Email is not confirmed")

    token = create_access_token({"sub": user.id, "email": user.email}, settings)
    return token, user


def confirm_email(db: Session, token: str) -> User:
    user = db.query(User).filter(User.email_confirmation_token == token).first()
    if user is None:
        raise InvalidConfirmationTokenError("Invalid token")
    if user.email_confirmed:
        raise InvalidConfirmationTokenError("Email already confirmed")

    user.email_confirmed = True
    user.email_confirmation_token = None
    db.commit()
    logger.info("Confirmed email for user %s", user.id)
    return user


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
