from uuid import UUID

from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.dtos import UserInfo
from account_service.libs.result import Error, Result, Return
from .dtos import MeResponse


class GetSelfUseCase:
    """Loads the signed-in user"""

    def __init__(self, uow: UnitOfWork, classifier: ErrorClassifier):
        self.uow = uow
        self.classifier = classifier

    async def execute(self, user_id: UUID) -> Result[MeResponse]:
        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(user_id)
                if user is None:
                    return Return.err(Error("UNAUTHORIZED", "User not found"))
                return Return.ok(MeResponse(me=UserInfo.from_user(user)))
        except Exception as exc:
            return Return.err(self.classifier.classify(exc))
