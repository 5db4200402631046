"""
Authentication Use Cases

Registration, sign-in/out and the two token-based recovery flows.
"""

from .register_use_case import RegisterUseCase
from .sign_in_use_case import SignInUseCase
from .sign_out_use_case import SignOutUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .confirm_email_use_case import ConfirmEmailUseCase
from .dtos import (
    RegisterCommand,
    RegisterResponse,
    SignInResponse,
    SignOutResponse,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
    ConfirmEmailResponse,
    UserInfo,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "SignInUseCase",
    "SignOutUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "ConfirmEmailUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "SignInResponse",
    "SignOutResponse",
    "RequestPasswordResetResponse",
    "ConfirmPasswordResetResponse",
    "ConfirmEmailResponse",
    # DTOs - Nested Models
    "UserInfo",
]
