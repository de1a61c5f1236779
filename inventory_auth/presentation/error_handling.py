"""Translation of service exceptions into form outcomes.

Forms never let an expected failure escape to the window code. Instead of
one handler per exception, two base handlers cover everything:
- ApplicationError: expected outcome, its message is shown as-is
- DomainException: storage or invariant failure, logged with traceback and
  shown as a generic message

Anything else is a programming error and propagates.
"""

import logging

from pydantic import BaseModel

from inventory_auth.application.dtos.account_dto import AccountDTO
from inventory_auth.application.exceptions import ApplicationError
from inventory_auth.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGES = {
    "DATABASE_ERROR": "An internal database error occurred",
    "INVALID_ENTITY_STATE": "Stored account data is invalid",
}
DEFAULT_ERROR_MESSAGE = "An internal error occurred"


class FormOutcome(BaseModel):
    """Result a form hands back to the window that owns it."""

    ok: bool
    message: str = ""
    error_code: str | None = None
    account: AccountDTO | None = None

    @classmethod
    def success(cls, message: str = "", account: AccountDTO | None = None) -> "FormOutcome":
        return cls(ok=True, message=message, account=account)

    @classmethod
    def failure(cls, message: str, error_code: str | None = None) -> "FormOutcome":
        return cls(ok=False, message=message, error_code=error_code)


def application_error_outcome(exc: ApplicationError) -> FormOutcome:
    """
    Handle ALL application layer exceptions.

    The message was written for the user already (validation reason,
    "Invalid credentials", "Username already exists", ...).
    """
    return FormOutcome.failure(exc.message, exc.error_code)


def domain_exception_outcome(exc: DomainException) -> FormOutcome:
    """
    Handle ALL domain layer exceptions reaching a form.

    These are not user mistakes: log the real error for debugging and show
    a message that does not expose internal details.
    """
    logger.error(f"Auth operation failed: {exc.message}", exc_info=exc)

    return FormOutcome.failure(
        GENERIC_ERROR_MESSAGES.get(exc.error_code, DEFAULT_ERROR_MESSAGE),
        exc.error_code,
    )
