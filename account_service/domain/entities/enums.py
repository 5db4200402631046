"""
Account Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role"""

    user = "user"
    admin = "admin"


class BoxExposure(str, Enum):
    """Where a box is deployed"""

    indoor = "indoor"
    outdoor = "outdoor"
    mobile = "mobile"
    unknown = "unknown"
