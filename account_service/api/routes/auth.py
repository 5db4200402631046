from datetime import timedelta

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from account_service.api.error import raise_for_error
from account_service.api.utils.credentials import verify_credentials
from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.notification_service import NotificationService
from account_service.app.services.revocation_registry import RevocationRegistry
from account_service.app.services.token_issuer import TokenIssuer
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth import (
    ConfirmEmailResponse,
    ConfirmEmailUseCase,
    ConfirmPasswordResetResponse,
    ConfirmPasswordResetUseCase,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
    SignInResponse,
    SignInUseCase,
    SignOutResponse,
    SignOutUseCase,
)
from account_service.depends import (
    AuthenticatedSession,
    get_current_session,
    get_error_classifier,
    get_notification_service,
    get_revocation_registry,
    get_token_issuer,
    get_unit_of_work,
)

router = APIRouter(prefix="/users", tags=["Authentication"])


def _strip(value: str) -> str:
    return value.strip()


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Field rules (name pattern, email format, password length) are enforced
    by the use case so every offending field is reported at once.
    """

    name: str = Field(..., description="Display and login name (kept untrimmed)")
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password (min 8 chars)")
    language: str = Field(
        default=ApplicationConfig.DEFAULT_LANGUAGE, description="Preferred locale"
    )


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
    notifications: NotificationService = Depends(get_notification_service),
    classifier: ErrorClassifier = Depends(get_error_classifier),
):
    """
    Register a new user

    Raises:
        - 409 Conflict: Email or name already registered
        - 422 Unprocessable Entity: Field rules violated
        - 500 Internal Server Error: Token could not be issued (account exists)
    """
    command = RegisterCommand(
        name=request.name,
        email=_strip(request.email),
        password=request.password,
        language=_strip(request.language),
    )

    use_case = RegisterUseCase(
        uow,
        token_issuer,
        notifications,
        classifier,
        default_language=ApplicationConfig.DEFAULT_LANGUAGE,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class SignInRequest(BaseModel):
    email: str = Field(..., description="Email address or name of the user")
    password: str = Field(..., description="User password")


@router.post("/sign-in", status_code=status.HTTP_200_OK, response_model=SignInResponse)
async def sign_in(
    request: SignInRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
    classifier: ErrorClassifier = Depends(get_error_classifier),
):
    """
    Sign in with email or name and password

    Raises:
        - 403 Forbidden: Unknown user or wrong password
        - 500 Internal Server Error: Token could not be issued
    """
    user_id = await verify_credentials(uow, _strip(request.email), request.password)

    use_case = SignInUseCase(uow, token_issuer, classifier)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/sign-out", status_code=status.HTTP_200_OK, response_model=SignOutResponse)
async def sign_out(
    session: AuthenticatedSession = Depends(get_current_session),
    revocation_registry: RevocationRegistry = Depends(get_revocation_registry),
):
    """Invalidate the presented JSON Web Token"""
    use_case = SignOutUseCase(revocation_registry)
    result = await use_case.execute(session.token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RequestPasswordResetRequest(BaseModel):
    email: str = Field(..., description="User email address")


@router.post(
    "/request-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifications: NotificationService = Depends(get_notification_service),
    classifier: ErrorClassifier = Depends(get_error_classifier),
):
    """
    Request a password reset link, valid for 12 hours

    Raises:
        - 403 Forbidden: Reset not possible for this address
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        notifications,
        classifier,
        token_lifetime=timedelta(hours=ApplicationConfig.PASSWORD_RESET_EXPIRES_HOURS),
    )
    result = await use_case.execute(_strip(request.email))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class PasswordResetRequest(BaseModel):
    email: str = Field(..., description="User email address")
    token: str = Field(..., description="Password reset token from email")
    password: str = Field(..., description="New password (min 8 chars)")


@router.post(
    "/password-reset",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def password_reset(
    request: PasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    classifier: ErrorClassifier = Depends(get_error_classifier),
):
    """
    Set a new password with the emailed reset token

    Raises:
        - 403 Forbidden: Unknown email/token pair, or token expired
        - 422 Unprocessable Entity: Password too short
    """
    use_case = ConfirmPasswordResetUseCase(uow, classifier)
    result = await use_case.execute(
        _strip(request.email), _strip(request.token), request.password
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ConfirmEmailRequest(BaseModel):
    email: str = Field(..., description="Address being confirmed")
    token: str = Field(..., description="Email confirmation token")


@router.post(
    "/confirm-email", status_code=status.HTTP_200_OK, response_model=ConfirmEmailResponse
)
async def confirm_email(
    request: ConfirmEmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    classifier: ErrorClassifier = Depends(get_error_classifier),
):
    """
    Confirm an email address

    Raises:
        - 403 Forbidden: Invalid confirmation token
    """
    use_case = ConfirmEmailUseCase(uow, classifier)
    result = await use_case.execute(_strip(request.email), _strip(request.token))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
