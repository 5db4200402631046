from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from account_service.domain.entities import Box


class IBoxRepository(ABC):
    """Box repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[Box]:
        """Get all boxes owned by a user"""
        pass
