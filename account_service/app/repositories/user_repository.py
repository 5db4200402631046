from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from account_service.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer

    ``create`` and ``update`` raise ``DuplicateKeyError`` when a unique field
    collides and ``FieldValidationError`` when a stored field breaks a rule.
    """

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by confirmed email address"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[User]:
        """Get user by name"""
        pass

    @abstractmethod
    async def get_by_email_and_reset_token(
        self, email: str, token: str
    ) -> Optional[User]:
        """Get user whose email and pending reset token both match"""
        pass

    @abstractmethod
    async def get_by_confirmation_token(
        self, email: str, token: str
    ) -> Optional[User]:
        """Get user whose confirmation token matches and whose email or
        unconfirmed email equals ``email``"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass
