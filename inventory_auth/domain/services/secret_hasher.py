"""Secret hashing interface - domain service abstraction.

Both account secrets (the login password and the recovery PIN) go through
this interface. The domain requires that a secret is:
1. Stored only as a salted, deliberately slow derivation
2. Salted with fresh random bytes every time it is hashed
3. Verified with a comparison whose duration does not depend on where the
   first differing byte is

The domain does NOT care which library performs the derivation; the
``HashedSecret.scheme`` tag records the parameters a digest was made with.
"""

from abc import ABC, abstractmethod

from inventory_auth.domain.entities.account import HashedSecret


class ISecretHasher(ABC):
    """
    Interface for secret hashing operations.

    Implementations must use a cryptographically secure random source for
    salts and a constant-time digest comparison in ``verify``.
    """

    @property
    @abstractmethod
    def scheme(self) -> str:
        """Scheme tag attached to every digest produced by ``hash``."""
        pass

    @abstractmethod
    def generate_salt(self) -> bytes:
        """
        Return 16 fresh random bytes.

        Two calls never return the same salt in practice; reusing a salt
        across accounts or across the password/PIN pair is a bug.
        """
        pass

    @abstractmethod
    def derive(self, secret: str, salt: bytes) -> bytes:
        """
        Derive the 32-byte digest of ``secret`` under ``salt`` with the
        current scheme parameters.

        Args:
            secret: Plain text secret
            salt: Salt bytes

        Returns:
            32-byte digest
        """
        pass

    @abstractmethod
    def hash(self, secret: str) -> HashedSecret:
        """
        Hash a secret with a freshly generated salt.

        Args:
            secret: Plain text secret

        Returns:
            HashedSecret carrying digest, salt and scheme tag

        Example:
            hashed = hasher.hash("secret1")
            hasher.verify("secret1", hashed)  # True
        """
        pass

    @abstractmethod
    def verify(self, secret: str, hashed: HashedSecret) -> bool:
        """
        Check a plain text secret against a stored HashedSecret.

        Args:
            secret: Plain text secret to check
            hashed: Previously stored HashedSecret

        Returns:
            True if the secret matches, False otherwise (including when the
            scheme tag is not understood)
        """
        pass
