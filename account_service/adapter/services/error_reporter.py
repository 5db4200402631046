import logging

import sentry_sdk

from account_service.app.services.error_reporter import ErrorReporter

logger = logging.getLogger(__name__)


class SentryErrorReporter(ErrorReporter):
    """Sends the exception to Sentry. The SDK is initialised by the app factory."""

    def report(self, error: BaseException) -> None:
        event_id = sentry_sdk.capture_exception(error)
        logger.debug(f"Reported error to Sentry: {event_id}")


class LoggingErrorReporter(ErrorReporter):
    def report(self, error: BaseException) -> None:
        logger.error("Unhandled error", exc_info=error)
