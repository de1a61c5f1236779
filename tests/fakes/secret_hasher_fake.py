"""Fake secret hasher for testing.

This fake implementation allows testing account use cases without the
cost of real key derivation.

WHY USE A FAKE?
In unit tests, we want to test business logic (e.g., "identity must be
unique"), not PBKDF2 itself. Real derivation:
- Takes tens of milliseconds per secret (intentionally slow for security)
- Makes tests slow and adds no value (we trust ``cryptography``)

The fake hasher:
- Uses a counter for salts, so every salt is distinct and predictable
- Digests with a single SHA-256 over salt + secret
- Counts derivations, so tests can check that a code path hashed

WHEN NOT TO USE:
Tests of the real Pbkdf2SecretHasher and the integration tests use the
real implementation.
"""

import hashlib
import hmac

from inventory_auth.domain.entities.account import SALT_LENGTH, HashedSecret
from inventory_auth.domain.services.secret_hasher import ISecretHasher


class FakeSecretHasher(ISecretHasher):
    """
    Fake secret hasher for unit testing.

    Usage in tests:
        hasher = FakeSecretHasher()
        hashed = hasher.hash("secret1")
        hasher.verify("secret1", hashed)  # True
        hasher.derive_calls                # 2

    Security Note:
        NEVER use this in production! One unsalted-cost SHA-256 offers no
        resistance to brute force.
    """

    SCHEME = "fake_sha256$1"

    def __init__(self) -> None:
        self._next_salt = 1
        self.derive_calls = 0

    @property
    def scheme(self) -> str:
        return self.SCHEME

    def generate_salt(self) -> bytes:
        salt = self._next_salt.to_bytes(SALT_LENGTH, "big")
        self._next_salt += 1
        return salt

    def derive(self, secret: str, salt: bytes) -> bytes:
        self.derive_calls += 1
        return hashlib.sha256(salt + secret.encode("utf-8")).digest()

    def hash(self, secret: str) -> HashedSecret:
        salt = self.generate_salt()
        return HashedSecret(digest=self.derive(secret, salt), salt=salt, scheme=self.SCHEME)

    def verify(self, secret: str, hashed: HashedSecret) -> bool:
        if hashed.scheme != self.SCHEME:
            return False
        return hmac.compare_digest(self.derive(secret, hashed.salt), hashed.digest)

    # Helper methods for testing

    def reset_counter(self) -> None:
        """Forget derivations made so far (e.g. during fixture setup)."""
        self.derive_calls = 0
