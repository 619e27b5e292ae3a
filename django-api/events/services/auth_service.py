"""Simulated sign-in. Accounts are never stored or checked."""

import logging

from events.domain import AuthResult, Credentials, Registration
from events.domain.errors import MissingInformationError, PasswordMismatchError

logger = logging.getLogger(__name__)


def _missing(**fields: str) -> list[str]:
    return [name for name, value in fields.items() if not (value or "").strip()]


def _missing_password(password: str) -> list[str]:
    # Whitespace is a valid password; only an empty one is missing.
    return [] if password else ["password"]


class AuthService:
    """Accepts any complete login or registration form."""

    def login(self, credentials: Credentials) -> AuthResult:
        missing = _missing(email=credentials.email)
        missing += _missing_password(credentials.password)
        if missing:
            raise MissingInformationError(missing)

        email = credentials.email.strip()
        logger.info("Simulated login for %s", email)
        return AuthResult(
            email=email,
            display_name=email.split("@", 1)[0],
            message="Welcome back! Redirecting to events...",
        )

    def register(self, registration: Registration) -> AuthResult:
        """Validate a sign-up form.

        Raises:
            MissingInformationError: If email or either name is blank, or the
                password is empty.
            PasswordMismatchError: If the confirmation differs from the password.
        """
        missing = _missing(email=registration.email)
        missing += _missing_password(registration.password)
        if missing:
            raise MissingInformationError(missing)
        missing = _missing(
            first_name=registration.first_name, last_name=registration.last_name
        )
        if missing:
            raise MissingInformationError(missing, message="Please enter your name.")
        if registration.password != registration.confirm_password:
            raise PasswordMismatchError()

        email = registration.email.strip()
        logger.info("Simulated registration for %s", email)
        return AuthResult(
            email=email,
            display_name=" ".join(
                (registration.first_name.strip(), registration.last_name.strip())
            ),
            message="Your account has been created successfully.",
        )
