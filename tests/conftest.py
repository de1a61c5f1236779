"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures follow the Dependency Inversion Principle:
- Use fake implementations (FakeSecretHasher, FakeUnitOfWork)
- Tests run fast (no real key derivation, no database)
- Tests are isolated (each test gets fresh fakes)
"""

from datetime import UTC, datetime

import pytest

from inventory_auth.application.services.auth_service import AuthService
from inventory_auth.domain.entities.account import Account
from tests.fakes.secret_hasher_fake import FakeSecretHasher
from tests.fakes.unit_of_work_fake import FakeUnitOfWork


@pytest.fixture
def fake_secret_hasher() -> FakeSecretHasher:
    """
    Provide a FakeSecretHasher for tests.

    This fake hasher is fast and predictable, making tests easier to write.
    """
    return FakeSecretHasher()


@pytest.fixture
def sample_account(fake_secret_hasher) -> Account:
    """
    Create a stored account for testing.

    Password is "secret1" and recovery PIN is "1234", hashed with the
    FakeSecretHasher so the auth_service fixture can verify them.
    """
    return Account(
        id=1,
        identity="alice",
        password=fake_secret_hasher.hash("secret1"),
        recovery=fake_secret_hasher.hash("1234"),
        created_at=datetime(2024, 1, 15, 9, 30, tzinfo=UTC),
    )


@pytest.fixture
def fake_uow():
    """
    Provide a fresh FakeUnitOfWork for each test.

    This ensures tests are isolated and don't affect each other.
    """
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_account(sample_account):
    """Provide a FakeUnitOfWork pre-populated with the sample account."""
    return FakeUnitOfWork(initial_accounts=[sample_account])


@pytest.fixture
def auth_service(fake_uow, fake_secret_hasher):
    """
    Provide an AuthService over an empty fake store.

    - No database (FakeUnitOfWork)
    - No real key derivation (FakeSecretHasher)
    """

    def uow_factory():
        return fake_uow

    return AuthService(uow_factory=uow_factory, secret_hasher=fake_secret_hasher)


@pytest.fixture
def auth_service_with_data(fake_uow_with_account, fake_secret_hasher):
    """Provide an AuthService whose store already holds the sample account."""

    def uow_factory():
        return fake_uow_with_account

    return AuthService(uow_factory=uow_factory, secret_hasher=fake_secret_hasher)
