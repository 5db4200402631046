from abc import ABC, abstractmethod


class NotificationService(ABC):
    """Outbound account notifications.

    Implementations own their delivery failures; callers do not retry.
    """

    @abstractmethod
    async def send_password_reset_link(self, email: str, token: str) -> None:
        pass

    @abstractmethod
    async def send_email_confirmation(self, email: str, token: str) -> None:
        pass
