"""
Confirm Email Use Case

Consumes an email confirmation token.
"""

from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.exceptions import DuplicateKeyError
from account_service.libs.result import Error, Result, Return
from .dtos import ConfirmEmailResponse


class ConfirmEmailUseCase:
    """
    Use case for email confirmation.

    Business Rules:
    - Token must match email_confirmation_token and the address must be
      either the current email or the pending unconfirmed email
    - Confirming the pending address makes it the account email
    - Token is single-use
    """

    def __init__(self, uow: UnitOfWork, classifier: ErrorClassifier):
        self.uow = uow
        self.classifier = classifier

    async def execute(self, email: str, token: str) -> Result[ConfirmEmailResponse]:
        try:
            async with self.uow:
                user = await self.uow.users.get_by_confirmation_token(email, token)
                if user is None:
                    return Return.err(
                        Error("FORBIDDEN", "invalid email confirmation token")
                    )

                user.confirm_email(email)
                await self.uow.users.update(user)
                await self.uow.commit()
        except DuplicateKeyError:
            return Return.err(
                Error(
                    "DUPLICATE_ACCOUNT",
                    f"E-Mail address {email} is already used by another user",
                )
            )
        except Exception as exc:
            return Return.err(self.classifier.classify(exc))

        return Return.ok(
            ConfirmEmailResponse(
                status="ok", message="E-Mail successfully confirmed. Thank you"
            )
        )
