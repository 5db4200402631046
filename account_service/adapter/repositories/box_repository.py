from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.repositories.box_repository import IBoxRepository
from account_service.domain.entities import Box


class BoxRepository(IBoxRepository):
    """Box repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> List[Box]:
        """Get all boxes owned by a user"""
        stmt = select(Box).where(Box.user_id == user_id).order_by(Box.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())
