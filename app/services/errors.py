# File: app/services/errors.py

"""
Domain errors raised by the service layer.

Route handlers translate these into HTTP responses; anything else that
escapes a service is treated as a server error.
"""


class ServiceError(Exception):
    """Base class for expected service failures."""


class NotFoundError(ServiceError):
    """No row matches both the id and the caller."""


class CredentialError(ServiceError):
    """The credential service rejected an email/password pair."""


class RegistrationError(ServiceError):
    pass


class InvalidCredentialsError(CredentialError):
    pass


class UserCheckError(ServiceError):
    """Identity exists but its local user row could not be read."""


class EmailNotConfirmedError(ServiceError):
    pass


class InvalidConfirmationTokenError(ServiceError):
    pass


class MailDeliveryError(ServiceError):
    pass
