"""
Register Use Case

Creates a new account and signs it in.
"""

import logging

from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.notification_service import NotificationService
from account_service.app.services.token_issuer import TokenIssuer
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.entities import User, UserRole
from account_service.domain.exceptions import FieldValidationError
from account_service.domain.passwords import hash_password
from account_service.domain.validation import (
    MIN_PASSWORD_LENGTH,
    is_valid_password,
    user_field_errors,
)
from account_service.libs.result import Error, Result, Return
from .dtos import RegisterCommand, RegisterResponse, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate name, email and password rules (one message per field)
    2. Reject an email or name that is already taken
    3. Create User with email_is_confirmed=False and a confirmation token
    4. Commit, then send the confirmation notification
    5. Mint a session token for the new user

    A failure in step 5 is a partial success: the account exists, and the
    error message says so.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_issuer: TokenIssuer,
        notifications: NotificationService,
        classifier: ErrorClassifier,
        default_language: str = "en_US",
    ):
        self.uow = uow
        self.token_issuer = token_issuer
        self.notifications = notifications
        self.classifier = classifier
        self.default_language = default_language

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with name, email, password, language

        Returns:
            Result[RegisterResponse] with user data and session token, or
            Error(VALIDATION_FAILED | DUPLICATE_ACCOUNT | TOKEN_ISSUANCE_FAILED | UNCLASSIFIED)
        """
        errors = user_field_errors(command.name, command.email)
        if not is_valid_password(command.password):
            errors["password"] = f"must be at least {MIN_PASSWORD_LENGTH} characters"
        if errors:
            return Return.err(self.classifier.classify(FieldValidationError(errors)))

        try:
            return await self._register(command)
        except Exception as exc:
            return Return.err(self.classifier.classify(exc))

    async def _register(self, command: RegisterCommand) -> Result[RegisterResponse]:
        async with self.uow:
            if await self.uow.users.get_by_email(command.email) or \
                    await self.uow.users.get_by_name(command.name):
                return Return.err(Error("DUPLICATE_ACCOUNT", "Duplicate user detected"))

            user = User(
                name=command.name,
                email=command.email,
                language=command.language or self.default_language,
                role=UserRole.user,
                password_hash=hash_password(command.password),
                email_is_confirmed=False,
            )
            confirmation_token = user.init_email_confirmation()
            user = await self.uow.users.create(user)

            await self.uow.commit()
            logger.info(f"Registered user {user.id}")

            await self.notifications.send_email_confirmation(user.email, confirmation_token)

            user_info = UserInfo.from_user(user)
            try:
                token = self.token_issuer.mint(user.id, user_info.role)
            except Exception as exc:
                logger.error(f"Token minting failed for new user {user.id}: {exc}")
                return Return.err(
                    Error(
                        "TOKEN_ISSUANCE_FAILED",
                        f"User successfully created but unable to create jwt token: {exc}",
                    )
                )

            return Return.ok(
                RegisterResponse(
                    message="Successfully registered new user",
                    user=user_info,
                    token=token,
                )
            )
