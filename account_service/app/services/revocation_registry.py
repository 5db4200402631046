from abc import ABC, abstractmethod


class RevocationRegistry(ABC):
    """Session tokens that are no longer accepted although not yet expired"""

    @abstractmethod
    async def revoke(self, token: str) -> None:
        """Mark a token as revoked. Revoking twice is a no-op."""
        pass

    @abstractmethod
    async def is_revoked(self, token: str) -> bool:
        pass
