from account_service.app.services.revocation_registry import RevocationRegistry
from account_service.libs.result import Result, Return
from .dtos import SignOutResponse


class SignOutUseCase:
    """Revokes the presented session token. Idempotent, no store access."""

    def __init__(self, revocation_registry: RevocationRegistry):
        self.revocation_registry = revocation_registry

    async def execute(self, token: str) -> Result[SignOutResponse]:
        await self.revocation_registry.revoke(token)
        return Return.ok(
            SignOutResponse(status="ok", message="Successfully signed out")
        )
