"""
Confirm Password Reset Use Case

Sets a new password using the token sent by the reset request.
"""

from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.base import utcnow
from account_service.domain.exceptions import FieldValidationError
from account_service.domain.validation import MIN_PASSWORD_LENGTH, is_valid_password
from account_service.libs.result import Error, Result, Return
from .dtos import ConfirmPasswordResetResponse
from .request_password_reset_use_case import RESET_NOT_POSSIBLE


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - The user is looked up by email AND token; no match is FORBIDDEN
    - A matching but expired token is TOKEN_EXPIRED
    - New password must be at least 8 characters
    - Setting the password clears the reset token and expiry
    - Existing sessions are left alone
    """

    def __init__(self, uow: UnitOfWork, classifier: ErrorClassifier):
        self.uow = uow
        self.classifier = classifier

    async def execute(
        self, email: str, token: str, new_password: str
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Errors:
            - FORBIDDEN: no user with this email and token
            - TOKEN_EXPIRED: token matched but its window has passed
            - VALIDATION_FAILED: password does not meet the length rule
        """
        try:
            async with self.uow:
                user = await self.uow.users.get_by_email_and_reset_token(email, token)
                if user is None:
                    return Return.err(Error("FORBIDDEN", RESET_NOT_POSSIBLE))

                if user.password_reset_expired(utcnow()):
                    return Return.err(
                        Error("TOKEN_EXPIRED", "Password reset token expired")
                    )

                if not is_valid_password(new_password):
                    return Return.err(
                        self.classifier.classify(
                            FieldValidationError(
                                {"password": f"must be at least {MIN_PASSWORD_LENGTH} characters"}
                            )
                        )
                    )

                user.set_password(new_password)
                await self.uow.users.update(user)
                await self.uow.commit()
        except Exception as exc:
            return Return.err(self.classifier.classify(exc))

        return Return.ok(
            ConfirmPasswordResetResponse(
                status="ok",
                message="Password successfully changed. You can now login with your new password",
            )
        )
