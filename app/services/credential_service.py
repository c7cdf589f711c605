# File: app/services/credential_service.py

"""
Credential service.

Issues identities and checks passwords. ``CredentialService`` is the
interface route handlers depend on; ``DatabaseCredentialService`` keeps
bcrypt hashes in the ``credentials`` table of the same database, and a
hosted identity provider can be plugged in by implementing the same two
methods.

Writes are flushed, not committed: the caller owns the transaction.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.core.security import MAX_PASSWORD_BYTES, hash_password, verify_password
from app.models.credential import Credential
from app.services.errors import CredentialError, InvalidCredentialsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    id: str
    email: str


class CredentialService(ABC):
    @abstractmethod
    def sign_up(self, db: Session, *, email: str, password: str) -> Identity:
        ...

    @abstractmethod
    def sign_in(self, db: Session, *, email: str, password: str) -> Identity:
        ...


class DatabaseCredentialService(CredentialService):
    min_password_length = 6

    def sign_up(self, db: Session, *, email: str, password: str) -> Identity:
        if len(password) < self.min_password_length:
            raise CredentialError(
                f"Password should be at least {self.min_password_length} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise CredentialError(f"Password should be at most {MAX_PASSWORD_BYTES} bytes")

        existing = db.query(Credential).filter(Credential.email == email).first()
        if existing:
            raise CredentialError("User already registered")

        credential = Credential(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=hash_password(password),
        )
        db.add(credential)
        db.flush()
        logger.info("Issued identity %s for %s", credential.id, email)
        return Identity(id=credential.id, email=credential.email)

    def sign_in(self, db: Session, *, email: str, password: str) -> Identity:
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidCredentialsError("Invalid login credentials")

        credential = db.query(Credential).filter(Credential.email == email).first()
        if credential is None or not verify_password(password, credential.password_hash):
            raise InvalidCredentialsError("Invalid login credentials")
        return Identity(id=credential.id, email=credential.email)
