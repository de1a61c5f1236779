"""Domain layer exceptions for business rule violations."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent business rule violations and should be
    raised when domain invariants are broken.

    Examples:
        - Invalid entity state
        - Identity uniqueness violations reported by the credential store
        - Credential store failures
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class DuplicateIdentityException(DomainException):
    """Raised by the credential store when an identity is already taken."""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(
            f"An account with identity '{identity}' already exists",
            error_code="DUPLICATE_IDENTITY",
        )


class AccountNotFoundException(DomainException):
    """Raised by the credential store when updating an account that is gone."""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(
            f"No account with identity '{identity}'",
            error_code="ACCOUNT_NOT_FOUND",
        )


class StorageException(DomainException):
    """
    Raised when the credential store itself fails (I/O error, locked
    database, unexpected constraint violation).

    The original driver exception is chained as ``__cause__``.
    """

    def __init__(self, message: str = "Credential store failure"):
        super().__init__(message, error_code="DATABASE_ERROR")
