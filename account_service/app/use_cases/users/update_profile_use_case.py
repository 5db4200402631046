"""
Update Profile Use Case

Self-service changes to name, language, email and password.
"""

import logging
from uuid import UUID

from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.notification_service import NotificationService
from account_service.app.services.revocation_registry import RevocationRegistry
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.dtos import UserInfo
from account_service.domain.exceptions import FieldValidationError
from account_service.domain.validation import MIN_PASSWORD_LENGTH, is_valid_password
from account_service.libs.result import Error, Result, Return
from .dtos import UpdateProfileCommand, UpdateProfileResponse

logger = logging.getLogger(__name__)

EMAIL_CHANGED_MESSAGE = (
    " E-Mail changed. Please confirm your new address."
    " Until confirmation, sign in using your old address"
)
PASSWORD_CHANGED_MESSAGE = " Password changed. Please log in with your new password"


class UpdateProfileUseCase:
    """
    Use case for updating the signed-in user's profile.

    Business Rules:
    - Email and password cannot change in the same request
    - Changing email or password requires the current password
    - The whole request is rejected before any field changes if the new
      password is too short or the current password is wrong
    - A new email is stored as unconfirmed_email until confirmed
    - A password change revokes the token used for this request
    - Only fields that differ from the stored values count as changes;
      if nothing changes, nothing is persisted
    """

    def __init__(
        self,
        uow: UnitOfWork,
        revocation_registry: RevocationRegistry,
        notifications: NotificationService,
        classifier: ErrorClassifier,
    ):
        self.uow = uow
        self.revocation_registry = revocation_registry
        self.notifications = notifications
        self.classifier = classifier

    async def execute(
        self, user_id: UUID, token: str, command: UpdateProfileCommand
    ) -> Result[UpdateProfileResponse]:
        """
        Execute update profile use case.

        Args:
            user_id: Signed-in user
            token: Session token used for this request
            command: Requested changes

        Errors:
            - BAD_REQUEST: contradictory or unauthenticated change
            - VALIDATION_FAILED: stored field rule broken (e.g. email taken)
            - DUPLICATE_ACCOUNT: name already taken
        """
        name, email, language = command.name, command.email, command.language
        current_password, new_password = command.current_password, command.new_password

        if email and new_password:
            return Return.err(
                Error(
                    "BAD_REQUEST",
                    "You cannot change your email address and password in the same request.",
                )
            )

        if new_password or email:
            if not current_password:
                return Return.err(
                    Error(
                        "BAD_REQUEST",
                        "To change your password or email address, please supply your current password.",
                    )
                )
            if new_password and not is_valid_password(new_password):
                return Return.err(
                    Error(
                        "BAD_REQUEST",
                        f"New password should have at least {MIN_PASSWORD_LENGTH} characters",
                    )
                )

        try:
            return await self._update(user_id, token, command)
        except Exception as exc:
            return Return.err(self.classifier.classify(exc))

    async def _update(
        self, user_id: UUID, token: str, command: UpdateProfileCommand
    ) -> Result[UpdateProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("UNAUTHORIZED", "User not found"))

            if (command.new_password or command.email) and \
                    not user.check_password(command.current_password):
                return Return.err(Error("BAD_REQUEST", "Current password not correct."))

            messages = []
            sign_out = False
            confirmation_token = None
            changed = False

            if command.name and command.name != user.name:
                user.name = command.name
                changed = True

            if command.language and command.language != user.language:
                user.language = command.language
                changed = True

            if command.email and command.email != user.email:
                confirmation_token = user.request_email_change(command.email)
                messages.append(EMAIL_CHANGED_MESSAGE)
                changed = True

            if command.new_password:
                user.set_password(command.new_password)
                messages.append(PASSWORD_CHANGED_MESSAGE)
                sign_out = True
                changed = True

            if not changed:
                return Return.ok(
                    UpdateProfileResponse(
                        status="ok",
                        message="No changed properties supplied. User remains unchanged.",
                        me=UserInfo.from_user(user),
                    )
                )

            try:
                user = await self.uow.users.update(user)
            except FieldValidationError as exc:
                if "unconfirmed_email" in exc.errors:
                    return Return.err(
                        Error(
                            "VALIDATION_FAILED",
                            f"New email address invalid or an user with the email address {command.email} already exists.",
                            self.classifier.classify(exc).details,
                        )
                    )
                raise
            await self.uow.commit()

            if sign_out:
                await self.revocation_registry.revoke(token)
                logger.info(f"Password changed for user {user.id}, session revoked")

            if confirmation_token:
                await self.notifications.send_email_confirmation(
                    user.unconfirmed_email, confirmation_token
                )

            return Return.ok(
                UpdateProfileResponse(
                    status="ok",
                    message="User successfully saved." + ".".join(messages),
                    me=UserInfo.from_user(user),
                )
            )
