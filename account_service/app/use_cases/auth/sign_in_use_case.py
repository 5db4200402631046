"""
Sign In Use Case

Mints a session token for a user whose credentials were already checked.
"""

import logging
from uuid import UUID

from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.token_issuer import TokenIssuer
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.libs.result import Error, Result, Return
from .dtos import SignInResponse, UserInfo

logger = logging.getLogger(__name__)


class SignInUseCase:
    """
    Use case for sign-in.

    Precondition: the caller matched the supplied password against the
    stored hash (see ``account_service.api.utils.credentials``). This use
    case only issues the token.
    """

    def __init__(
        self, uow: UnitOfWork, token_issuer: TokenIssuer, classifier: ErrorClassifier
    ):
        self.uow = uow
        self.token_issuer = token_issuer
        self.classifier = classifier

    async def execute(self, user_id: UUID) -> Result[SignInResponse]:
        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(user_id)
                if user is None:
                    return Return.err(Error("FORBIDDEN", "User not found"))
                user_info = UserInfo.from_user(user)
        except Exception as exc:
            return Return.err(self.classifier.classify(exc))

        try:
            token = self.token_issuer.mint(user_id, user_info.role)
        except Exception as exc:
            logger.error(f"Token minting failed for user {user_id}: {exc}")
            return Return.err(
                Error("TOKEN_ISSUANCE_FAILED", f"unable to create jwt token: {exc}")
            )

        return Return.ok(
            SignInResponse(message="Successfully signed in", user=user_info, token=token)
        )
