from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from account_service.api.error import raise_for_error
from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.notification_service import NotificationService
from account_service.app.services.revocation_registry import RevocationRegistry
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.users import (
    BoxListResponse,
    GetSelfUseCase,
    ListOwnedBoxesUseCase,
    MeResponse,
    UpdateProfileCommand,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from account_service.depends import (
    AuthenticatedSession,
    get_current_session,
    get_error_classifier,
    get_notification_service,
    get_revocation_registry,
    get_unit_of_work,
)

router = APIRouter(prefix="/users", tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def get_me(
    session: AuthenticatedSession = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    classifier: ErrorClassifier = Depends(get_error_classifier),
):
    """Returns the currently signed in user"""
    use_case = GetSelfUseCase(uow, classifier)
    result = await use_case.execute(session.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateMeRequest(BaseModel):
    """PUT /users/me payload. Every field is optional."""

    name: Optional[str] = None
    email: Optional[str] = None
    language: Optional[str] = None
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = None


def _strip(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


@router.put("/me", status_code=status.HTTP_200_OK, response_model=UpdateProfileResponse)
async def update_me(
    request: UpdateMeRequest,
    session: AuthenticatedSession = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    revocation_registry: RevocationRegistry = Depends(get_revocation_registry),
    notifications: NotificationService = Depends(get_notification_service),
    classifier: ErrorClassifier = Depends(get_error_classifier),
):
    """
    Update name, email, language or password of the signed in user

    Changing the password signs the current token out. Changing the email
    starts an email confirmation.

    Raises:
        - 400 Bad Request: Email and password together, missing or wrong
          current password, new password too short
        - 409 Conflict: Name already taken
        - 422 Unprocessable Entity: Field rules violated or email in use
    """
    command = UpdateProfileCommand(
        name=request.name,
        email=_strip(request.email),
        language=_strip(request.language),
        current_password=request.currentPassword,
        new_password=request.newPassword,
    )

    use_case = UpdateProfileUseCase(uow, revocation_registry, notifications, classifier)
    result = await use_case.execute(session.user_id, session.token, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/me/boxes", status_code=status.HTTP_200_OK, response_model=BoxListResponse)
async def get_my_boxes(
    session: AuthenticatedSession = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    classifier: ErrorClassifier = Depends(get_error_classifier),
):
    """List all boxes of the signed in user, including their access tokens"""
    use_case = ListOwnedBoxesUseCase(uow, classifier)
    result = await use_case.execute(session.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
