from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import and_, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.repositories.user_repository import IUserRepository
from account_service.domain.base import utcnow
from account_service.domain.entities import User
from account_service.domain.exceptions import DuplicateKeyError, FieldValidationError
from account_service.domain.validation import email_error, user_field_errors


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by confirmed email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[User]:
        """Get user by name"""
        stmt = select(User).where(User.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email_and_reset_token(
        self, email: str, token: str
    ) -> Optional[User]:
        stmt = select(User).where(
            User.email == email, User.reset_password_token == token
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_confirmation_token(
        self, email: str, token: str
    ) -> Optional[User]:
        stmt = select(User).where(
            and_(
                or_(User.email == email, User.unconfirmed_email == email),
                User.email_confirmation_token == token,
            )
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, user: User) -> User:
        """Create a new user"""
        await self._validate(user)
        self.session.add(user)
        await self._flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        await self._validate(user)
        user.updated_at = utcnow()
        self.session.add(user)
        await self._flush()
        await self.session.refresh(user)
        return user

    async def _validate(self, user: User) -> None:
        errors = user_field_errors(user.name, user.email)
        if user.unconfirmed_email:
            message = email_error(user.unconfirmed_email)
            if message is None and await self._email_taken(user.unconfirmed_email, user.id):
                message = "is already in use"
            if message:
                errors["unconfirmed_email"] = message
        if errors:
            raise FieldValidationError(errors)

    async def _email_taken(self, email: str, user_id: UUID) -> bool:
        stmt = select(User.id).where(
            or_(User.email == email, User.unconfirmed_email == email),
            User.id != user_id,
        )
        # The user being validated may already be dirty in this session
        with self.session.sync_session.no_autoflush:
            result = await self.session.exec(stmt)
        return result.first() is not None

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            message = str(exc.orig).lower()
            field = "name" if "name" in message else "email" if "email" in message else ""
            raise DuplicateKeyError(field) from exc
