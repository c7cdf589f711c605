# File: app/services/mail_service.py

"""
Outbound mail.

``SmtpMailSender`` opens one SMTP connection per message using the
``MAIL_*`` settings. Tests swap in a recording sender with the same
``send`` signature.
"""

import logging
import smtplib
from abc import ABC, abstractmethod
from email.message import EmailMessage
from urllib.parse import urlencode

from app.core.config import Settings
from app.services.errors import MailDeliveryError

logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "Confirm your email"

CONFIRMATION_TEMPLATE = """\
<h2>Hello!</h2>
<p>Thank you for signing up for MyFinance.</p>
<p>Please confirm your email address by following the link below:</p>
<a href="{url}">Confirm email</a>
<p>If you did not sign up, just ignore this message.</p>
"""


class MailSender(ABC):
    @abstractmethod
    def send(self, *, to: str, subject: str, html: str) -> None:
        ...


class SmtpMailSender(MailSender):
    def __init__(self, settings: Settings):
        self.host = settings.mail_host
        self.port = settings.mail_port
        self.user = settings.mail_user
        self.password = settings.mail_password
        self.use_ssl = settings.mail_use_ssl
        self.sender = settings.mail_from

    def send(self, *, to: str, subject: str, html: str) -> None:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This message requires an HTML capable mail client.")
        message.add_alternative(html, subtype="html")

        smtp_cls = smtplib.SMTP_SSL if self.use_ssl else smtplib.SMTP
        try:
            with smtp_cls(self.host, self.port) as smtp:
                if self.user:
                    smtp.login(self.user, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(f"Could not deliver mail to {to}: {e}") from e

        logger.info("Sent '%s' to %s", subject, to)


def build_confirmation_url(settings: Settings, token: str) -> str:
    base = settings.public_base_url.rstrip("/")
    return f"{base}{settings.api_prefix}/auth/confirm-email?{urlencode({'token': token})}"


def send_confirmation_email(mailer: MailSender, settings: Settings, *, to: str, token: str) -> str:
    """Send the confirmation link and return it."""
    url = build_confirmation_url(settings, token)
    mailer.send(to=to, subject=CONFIRMATION_SUBJECT, html=CONFIRMATION_TEMPLATE.format(url=url))
    return url
