from fastapi import status
from account_service.libs.result import Error

# Client-facing status for each use case error code
ERROR_STATUS_CODES = {
    "BAD_REQUEST": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "TOKEN_EXPIRED": status.HTTP_403_FORBIDDEN,
    "DUPLICATE_ACCOUNT": status.HTTP_409_CONFLICT,
    "VALIDATION_FAILED": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error, expose_message: bool = False):
        self.base_error = base_error
        self.expose_message = expose_message
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the HTTP-level exception matching a use case error"""
    if error.code in ERROR_STATUS_CODES:
        raise ClientError(error, status_code=ERROR_STATUS_CODES[error.code])
    # The account exists even though no token could be issued; say so.
    if error.code == "TOKEN_ISSUANCE_FAILED":
        raise ServerError(error, expose_message=True)
    raise ServerError(error)
