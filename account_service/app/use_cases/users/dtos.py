"""
User Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from account_service.app.use_cases.auth.dtos import UserInfo
from account_service.domain.entities import Box, BoxExposure


class UpdateProfileCommand(BaseModel):
    """Profile changes requested by the signed-in user. Empty means unchanged."""

    name: Optional[str] = None
    email: Optional[str] = None
    language: Optional[str] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = None


class MeResponse(BaseModel):
    me: UserInfo


class UpdateProfileResponse(BaseModel):
    status: str
    message: str
    me: UserInfo


class BoxSecretInfo(BaseModel):
    """Owner view of a box, including its access token"""

    id: str
    name: str
    exposure: str
    model: Optional[str] = None
    access_token: str

    @classmethod
    def from_box(cls, box: Box) -> "BoxSecretInfo":
        return cls(
            id=str(box.id),
            name=box.name,
            exposure=BoxExposure(box.exposure).value,
            model=box.model,
            access_token=box.access_token,
        )


class BoxListResponse(BaseModel):
    boxes: List[BoxSecretInfo]
