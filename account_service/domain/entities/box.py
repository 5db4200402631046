"""
Box Entity

A sensor station owned by a user. Only listed by the account service.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from ..base import generate_token, utcnow
from .enums import BoxExposure

if TYPE_CHECKING:
    from .user import User


class Box(SQLModel, table=True):
    __tablename__ = "boxes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", index=True)
    name: str = Field(max_length=255)
    exposure: BoxExposure = Field(default=BoxExposure.unknown)
    model: Optional[str] = Field(default=None, max_length=64)

    # Privileged: only returned to the owner
    access_token: str = Field(default_factory=generate_token, max_length=64)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    user: Optional["User"] = Relationship(back_populates="boxes")
