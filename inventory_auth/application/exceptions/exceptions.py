"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when caller input breaks the identity, password or PIN policy."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, error_code="VALIDATION_ERROR")


class DuplicateIdentityError(ApplicationError):
    """Raised when registering an identity that already has an account."""

    def __init__(self, message: str = "Username already exists"):
        super().__init__(message, error_code="DUPLICATE_IDENTITY")


class AccountNotFoundError(ApplicationError):
    """Raised when a recovery operation names an unknown identity."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, error_code="ACCOUNT_NOT_FOUND")


class InvalidCredentialsError(ApplicationError):
    """
    Raised when login fails.

    Deliberately the same for an unknown identity and a wrong password.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, error_code="INVALID_CREDENTIALS")


class InvalidPinError(ApplicationError):
    """Raised when a recovery PIN does not match."""

    def __init__(self, message: str = "Invalid PIN"):
        super().__init__(message, error_code="INVALID_PIN")
