"""PBKDF2-HMAC-SHA256 secret hasher implementation using cryptography.

This is an INFRASTRUCTURE detail. The domain layer (ISecretHasher interface)
defines WHAT we need (hash and verify operations), while this implementation
defines HOW we do it (PBKDF2 via the ``cryptography`` package).

Dependency flow:
    AuthService (application) → ISecretHasher (domain) ← Pbkdf2SecretHasher (infrastructure)

Digests are stored as raw bytes next to their salt and a scheme tag of the
form ``pbkdf2_sha256$<iterations>``. Secrets are encoded as UTF-8, which
keeps digests written by earlier releases of the ledger verifiable.
"""

import logging
import secrets

from cryptography.hazmat.primitives import constant_time, hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from inventory_auth.domain.entities.account import DIGEST_LENGTH, SALT_LENGTH, HashedSecret
from inventory_auth.domain.services.secret_hasher import ISecretHasher

logger = logging.getLogger(__name__)

ALGORITHM = "pbkdf2_sha256"
MIN_ITERATIONS = 100_000


def format_scheme(iterations: int) -> str:
    """Build the scheme tag stored alongside a digest."""
    return f"{ALGORITHM}${iterations}"


def parse_scheme(scheme: str) -> int | None:
    """
    Extract the iteration count from a scheme tag.

    Returns:
        Iteration count, or None if the tag names another algorithm or is malformed
    """
    algorithm, _, iterations = scheme.partition("$")
    if algorithm != ALGORITHM or not iterations.isdigit():
        return None
    return int(iterations)


class Pbkdf2SecretHasher(ISecretHasher):
    """
    Production secret hasher using PBKDF2 with HMAC-SHA256.

    Configuration:
    - Output: 32-byte digest
    - Salt: 16 bytes from the OS CSPRNG, new for every hash
    - Iterations: at least 100 000 (the floor on offline guessing cost)

    Usage:
        hasher = Pbkdf2SecretHasher(iterations=100_000)

        hashed = hasher.hash("secret1")
        hasher.verify("secret1", hashed)  # True
        hasher.verify("wrong", hashed)    # False
    """

    def __init__(self, iterations: int = MIN_ITERATIONS):
        """
        Initialize hasher.

        Args:
            iterations: Iteration count for newly hashed secrets

        Raises:
            ValueError: If iterations is below the 100 000 floor
        """
        if iterations < MIN_ITERATIONS:
            raise ValueError(
                f"PBKDF2 iterations must be at least {MIN_ITERATIONS}, got {iterations}"
            )
        self._iterations = iterations

    @property
    def scheme(self) -> str:
        return format_scheme(self._iterations)

    def generate_salt(self) -> bytes:
        return secrets.token_bytes(SALT_LENGTH)

    def derive(self, secret: str, salt: bytes) -> bytes:
        return self._derive(secret, salt, self._iterations)

    def hash(self, secret: str) -> HashedSecret:
        """
        Hash a secret with a fresh salt using the configured iterations.

        Note:
            Hashing the same secret twice gives different digests because
            the salt differs (this is correct behavior).
        """
        salt = self.generate_salt()
        return HashedSecret(
            digest=self._derive(secret, salt, self._iterations),
            salt=salt,
            scheme=self.scheme,
        )

    def verify(self, secret: str, hashed: HashedSecret) -> bool:
        """
        Verify a secret against a stored digest.

        The derivation uses the iteration count recorded in the digest's
        scheme tag, and the comparison runs in constant time.

        Security Notes:
        - Unknown scheme tags verify as False instead of raising
        - Runs the full derivation before comparing, whatever the input
        """
        iterations = parse_scheme(hashed.scheme)
        if iterations is None:
            logger.warning(f"Cannot verify secret with unsupported scheme {hashed.scheme!r}")
            return False

        candidate = self._derive(secret, hashed.salt, iterations)
        return constant_time.bytes_eq(candidate, hashed.digest)

    @staticmethod
    def _derive(secret: str, salt: bytes, iterations: int) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=DIGEST_LENGTH,
            salt=salt,
            iterations=iterations,
        )
        return kdf.derive(secret.encode("utf-8"))
