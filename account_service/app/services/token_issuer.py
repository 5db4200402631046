from abc import ABC, abstractmethod
from uuid import UUID


class TokenIssuer(ABC):
    """Mints session tokens bound to a user"""

    @abstractmethod
    def mint(self, user_id: UUID, role: str) -> str:
        pass
