"""Account repository interface - the credential store contract."""

from abc import ABC, abstractmethod

from inventory_auth.domain.entities.account import Account


class IAccountRepository(ABC):
    """
    Credential store interface.

    One record per account, keyed by identity. Identity uniqueness must be
    enforced by the storage itself, not only by callers checking
    ``find_by_identity`` first: two concurrent inserts for the same identity
    must leave exactly one record and make the other insert fail.
    """

    @abstractmethod
    async def find_by_identity(self, identity: str) -> Account | None:
        """
        Find an account by its identity (case-sensitive, exact match).

        Args:
            identity: The trimmed username

        Returns:
            Account if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, account: Account) -> Account:
        """
        Insert a new account.

        Args:
            account: The fully populated account to insert

        Returns:
            The stored account with its generated id

        Raises:
            DuplicateIdentityException: If the identity is already stored
        """
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """
        Write the account's password secret back in place.

        Only the password digest, salt and scheme are mutable; the recovery
        secret and creation timestamp are never rewritten.

        Args:
            account: The account carrying the new password secret

        Returns:
            The updated account

        Raises:
            AccountNotFoundException: If no account with that identity exists
        """
        pass
