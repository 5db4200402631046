"""
Account Service Domain Entities

Each entity in its own file.
"""

from .enums import BoxExposure, UserRole

from .user import User
from .box import Box

__all__ = [
    # Enums
    "UserRole",
    "BoxExposure",
    # Entities
    "User",
    "Box",
]
