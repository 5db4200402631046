"""
Request Password Reset Use Case

Issues a time-boxed reset token and sends it to the account's address.
"""

import logging
from datetime import timedelta

from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.notification_service import NotificationService
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.libs.result import Error, Result, Return
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

RESET_NOT_POSSIBLE = "Password reset for this user not possible"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Unknown email answers FORBIDDEN with the same message used for every
      other reset denial, so responses do not reveal which accounts exist
    - A new token replaces any pending one
    - Token expires after ``token_lifetime`` (12 hours by default)
    - Token is sent out of band after the commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifications: NotificationService,
        classifier: ErrorClassifier,
        token_lifetime: timedelta = timedelta(hours=12),
    ):
        self.uow = uow
        self.notifications = notifications
        self.classifier = classifier
        self.token_lifetime = token_lifetime

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with reset status, or Error(FORBIDDEN | UNCLASSIFIED)
        """
        try:
            async with self.uow:
                user = await self.uow.users.get_by_email(email)
                if user is None:
                    return Return.err(Error("FORBIDDEN", RESET_NOT_POSSIBLE))

                reset_token = user.init_password_reset(self.token_lifetime)
                await self.uow.users.update(user)
                await self.uow.commit()

                await self.notifications.send_password_reset_link(user.email, reset_token)
        except Exception as exc:
            return Return.err(self.classifier.classify(exc))

        logger.info("Password reset initiated")
        return Return.ok(
            RequestPasswordResetResponse(status="ok", message="Password reset initiated")
        )
