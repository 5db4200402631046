"""
User Use Cases

Self-service operations of the signed-in user.
"""

from .get_self_use_case import GetSelfUseCase
from .list_boxes_use_case import ListOwnedBoxesUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .dtos import (
    BoxListResponse,
    BoxSecretInfo,
    MeResponse,
    UpdateProfileCommand,
    UpdateProfileResponse,
)

__all__ = [
    "GetSelfUseCase",
    "ListOwnedBoxesUseCase",
    "UpdateProfileUseCase",
    "UpdateProfileCommand",
    "MeResponse",
    "UpdateProfileResponse",
    "BoxListResponse",
    "BoxSecretInfo",
]
