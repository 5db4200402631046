from uuid import UUID

from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.libs.result import Result, Return
from .dtos import BoxListResponse, BoxSecretInfo


class ListOwnedBoxesUseCase:
    """
    Lists every box of the signed-in user with privileged fields.

    Each call reads a fresh snapshot from the store.
    """

    def __init__(self, uow: UnitOfWork, classifier: ErrorClassifier):
        self.uow = uow
        self.classifier = classifier

    async def execute(self, user_id: UUID) -> Result[BoxListResponse]:
        try:
            async with self.uow:
                boxes = await self.uow.boxes.get_by_user_id(user_id)
                return Return.ok(
                    BoxListResponse(boxes=[BoxSecretInfo.from_box(b) for b in boxes])
                )
        except Exception as exc:
            return Return.err(self.classifier.classify(exc))
