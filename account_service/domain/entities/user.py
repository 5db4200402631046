"""
User Entity

Represents a registered account together with its pending recovery and
confirmation state.
"""

from datetime import datetime, timedelta
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from ..base import generate_token, utcnow
from ..passwords import check_password, hash_password
from .enums import UserRole

if TYPE_CHECKING:
    from .box import Box


class User(SQLModel, table=True):
    """
    User entity - owner of boxes and holder of credentials.

    Business Rules:
    - name and email are unique across all users
    - Password stored as bcrypt hash only
    - reset_password_token and reset_password_expires are set and cleared together
    - unconfirmed_email is set only while an email change awaits confirmation
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=40)
    email: str = Field(unique=True, index=True, max_length=255)
    unconfirmed_email: Optional[str] = Field(default=None, max_length=255)
    role: UserRole = Field(default=UserRole.user)
    language: str = Field(default="en_US", max_length=10)

    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Password reset
    reset_password_token: Optional[str] = Field(default=None, index=True, max_length=64)
    reset_password_expires: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Email confirmation
    email_confirmation_token: Optional[str] = Field(
        default=None, index=True, max_length=64
    )
    email_is_confirmed: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    boxes: list["Box"] = Relationship(back_populates="user")

    def set_password(self, password: str) -> None:
        """Hash and store a new password. Any pending reset is consumed."""
        self.password_hash = hash_password(password)
        self.reset_password_token = None
        self.reset_password_expires = None

    def check_password(self, password: str) -> bool:
        return check_password(password, self.password_hash)

    def init_password_reset(self, lifetime: timedelta) -> str:
        token = generate_token()
        self.reset_password_token = token
        self.reset_password_expires = utcnow() + lifetime
        return token

    def password_reset_expired(self, now: Optional[datetime] = None) -> bool:
        if self.reset_password_expires is None:
            return True
        return (now or utcnow()) > self.reset_password_expires

    def init_email_confirmation(self) -> str:
        self.email_confirmation_token = generate_token()
        return self.email_confirmation_token

    def request_email_change(self, new_email: str) -> str:
        self.unconfirmed_email = new_email
        return self.init_email_confirmation()

    def confirm_email(self, address: str) -> None:
        if self.unconfirmed_email and address == self.unconfirmed_email:
            self.email = self.unconfirmed_email
        # Either the pending address was promoted or its token was consumed
        # by confirming the current address.
        self.unconfirmed_email = None
        self.email_confirmation_token = None
        self.email_is_confirmed = True
