"""Form controllers backing the login, registration and recovery windows.

Each controller receives the AuthService explicitly and returns a
FormOutcome for every expected result, so the window only has to show
``outcome.message`` and decide where to navigate.
"""

import logging

from inventory_auth.application.exceptions import ApplicationError
from inventory_auth.application.services.auth_service import AuthService
from inventory_auth.domain.exceptions import DomainException
from inventory_auth.presentation.error_handling import (
    FormOutcome,
    application_error_outcome,
    domain_exception_outcome,
)

logger = logging.getLogger(__name__)

REGISTERED_MESSAGE = "Account created successfully. Please login."
RESET_MESSAGE = "Password reset successful. Please login."


class LoginForm:
    """Sign-in window controller."""

    def __init__(self, auth_service: AuthService):
        self._auth_service = auth_service

    async def submit(self, identity: str, password: str) -> FormOutcome:
        """
        Sign in.

        Returns:
            Successful outcome carrying the AccountDTO, or the login error
        """
        try:
            account = await self._auth_service.login(identity, password)
        except ApplicationError as exc:
            return application_error_outcome(exc)
        except DomainException as exc:
            return domain_exception_outcome(exc)

        return FormOutcome.success(account=account)


class RegistrationForm:
    """
    Sign-up window controller.

    The window asks for the password and the recovery PIN twice; this
    controller checks the confirmations, and the service checks the policy.
    """

    def __init__(self, auth_service: AuthService):
        self._auth_service = auth_service

    async def submit(
        self,
        identity: str,
        password: str,
        confirm_password: str,
        pin: str,
        confirm_pin: str,
    ) -> FormOutcome:
        if password != confirm_password:
            return FormOutcome.failure("Passwords do not match", "VALIDATION_ERROR")

        if pin != confirm_pin:
            return FormOutcome.failure("PINs do not match", "VALIDATION_ERROR")

        try:
            await self._auth_service.register(identity, password, pin)
        except ApplicationError as exc:
            return application_error_outcome(exc)
        except DomainException as exc:
            return domain_exception_outcome(exc)

        return FormOutcome.success(REGISTERED_MESSAGE)


class PasswordRecoveryFlow:
    """
    Forgot-password flow: recovery PIN first, new password second.

    AuthService.reset_password does not check that the PIN was verified;
    this flow is what enforces it. A reset is only accepted after
    ``verify_pin`` succeeded in the same flow, for the identity that was
    verified, and each successful verification allows exactly one reset.
    """

    def __init__(self, auth_service: AuthService):
        self._auth_service = auth_service
        self._verified_identity: str | None = None

    @property
    def pin_verified(self) -> bool:
        return self._verified_identity is not None

    async def verify_pin(self, identity: str, pin: str) -> FormOutcome:
        """Step 1: check the recovery PIN of ``identity``."""
        self._verified_identity = None

        identity = identity.strip()
        if not identity:
            return FormOutcome.failure("Enter your username first", "VALIDATION_ERROR")

        if not pin.strip():
            return FormOutcome.failure("PIN is required", "VALIDATION_ERROR")

        try:
            await self._auth_service.verify_recovery(identity, pin)
        except ApplicationError as exc:
            return application_error_outcome(exc)
        except DomainException as exc:
            return domain_exception_outcome(exc)

        self._verified_identity = identity
        return FormOutcome.success()

    async def reset_password(self, new_password: str, confirm_password: str) -> FormOutcome:
        """Step 2: set the new password for the identity verified in step 1."""
        if self._verified_identity is None:
            return FormOutcome.failure("Verify your recovery PIN first", "UNAUTHORIZED")

        if new_password != confirm_password:
            return FormOutcome.failure("Passwords do not match", "VALIDATION_ERROR")

        try:
            await self._auth_service.reset_password(self._verified_identity, new_password)
        except ApplicationError as exc:
            # A too-short password keeps the verification; the user may retry
            return application_error_outcome(exc)
        except DomainException as exc:
            return domain_exception_outcome(exc)

        logger.info(f"Recovery flow completed for '{self._verified_identity}'")
        self._verified_identity = None
        return FormOutcome.success(RESET_MESSAGE)

    def cancel(self) -> None:
        """Abandon the flow; a later reset needs a new PIN verification."""
        self._verified_identity = None
