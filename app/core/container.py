# File: app/core/container.py

"""
Process-wide service handles.

Built once by ``create_application`` in this order: settings, engine,
session factory, credential service, mail sender. Route handlers reach
them through the dependencies in ``app.api.deps``.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.config import Settings
from app.db.session import create_db_engine, create_session_factory
from app.services.credential_service import CredentialService, DatabaseCredentialService
from app.services.mail_service import MailSender, SmtpMailSender


@dataclass
class ServiceContainer:
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    credentials: CredentialService
    mailer: MailSender


def build_container(
    settings: Settings,
    *,
    credentials: Optional[CredentialService] = None,
    mailer: Optional[MailSender] = None,
) -> ServiceContainer:
    engine = create_db_engine(settings.database_url)
    return ServiceContainer(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        credentials=credentials or DatabaseCredentialService(),
        mailer=mailer or SmtpMailSender(settings),
    )
