"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
"""

from typing import Optional

from pydantic import BaseModel

from account_service.domain.entities import User, UserRole


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents registration intent

    Created by the API layer after the request body was parsed.
    ``name`` is passed through untrimmed.
    """

    name: str
    email: str
    password: str
    language: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public view of a user. Never carries credentials or pending tokens."""

    id: str
    name: str
    email: str
    unconfirmed_email: Optional[str] = None
    role: str
    language: str
    email_is_confirmed: bool

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            unconfirmed_email=user.unconfirmed_email,
            role=UserRole(user.role).value,
            language=user.language,
            email_is_confirmed=user.email_is_confirmed,
        )


class RegisterResponse(BaseModel):
    """Response for register use case"""

    message: str
    user: UserInfo
    token: str


class SignInResponse(BaseModel):
    """Response for sign-in use case"""

    message: str
    user: UserInfo
    token: str


class SignOutResponse(BaseModel):
    """Response for sign-out use case"""

    status: str
    message: str


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str
    message: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str


class ConfirmEmailResponse(BaseModel):
    """Response for email confirmation use case"""

    status: str
    message: str
