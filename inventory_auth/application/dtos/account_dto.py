"""Account DTOs for application layer using Pydantic."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from inventory_auth.domain.entities.account import Account


class AccountDTO(BaseModel):
    """
    DTO for returning an authenticated account to the caller.

    Carries no secret material: digests and salts stay in the domain entity.
    """

    id: int
    identity: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @classmethod
    def from_entity(cls, account: Account) -> "AccountDTO":
        """
        Convert a PERSISTED domain entity to DTO.

        Args:
            account: Account domain entity (must be persisted)

        Returns:
            AccountDTO instance

        Raises:
            ValueError: If the entity has not been stored yet (missing id)
        """
        if account.id is None:
            raise ValueError(
                "Cannot create AccountDTO from non-persisted entity: missing id. "
                "Ensure the account has been saved via repository before converting to DTO."
            )

        return cls(
            id=account.id,
            identity=account.identity,
            created_at=account.created_at,
        )
