"""
Notification service that writes account mails to the log.

Stands in for a mail transport: links are built exactly as they would be
mailed, so a developer can follow them from the log.
"""

import logging
from urllib.parse import urlencode

from account_service.app.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    def __init__(self, app_url: str):
        self.app_url = app_url.rstrip("/")

    def _link(self, path: str, email: str, token: str) -> str:
        return f"{self.app_url}/{path}?{urlencode({'email': email, 'token': token})}"

    async def send_password_reset_link(self, email: str, token: str) -> None:
        link = self._link("password-reset", email, token)
        logger.info(f"Password reset link for {email}: {link}")

    async def send_email_confirmation(self, email: str, token: str) -> None:
        link = self._link("confirm-email", email, token)
        logger.info(f"Email confirmation link for {email}: {link}")
