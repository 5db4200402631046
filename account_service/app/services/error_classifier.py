"""
Error Classifier

Maps failures raised while persisting a user into the client-facing
error categories. Anything unexpected is reported and rendered opaque.
"""

import logging

from account_service.app.services.error_reporter import ErrorReporter
from account_service.domain.exceptions import DuplicateKeyError, FieldValidationError
from account_service.libs.result import Error, FieldMessage

logger = logging.getLogger(__name__)


class ErrorClassifier:
    def __init__(self, reporter: ErrorReporter):
        self.reporter = reporter

    def classify(self, exc: BaseException) -> Error:
        if isinstance(exc, DuplicateKeyError):
            return Error("DUPLICATE_ACCOUNT", "Duplicate user detected")

        if isinstance(exc, FieldValidationError):
            details = [FieldMessage(f, m) for f, m in exc.errors.items()]
            message = ", ".join(f"Parameter {d.field} {d.message}" for d in details)
            return Error("VALIDATION_FAILED", message, details)

        logger.error(f"Unclassified error: {exc.__class__.__name__}")
        try:
            self.reporter.report(exc)
        except Exception:
            logger.exception("Error reporter failed")
        return Error("UNCLASSIFIED", "Internal server error")
