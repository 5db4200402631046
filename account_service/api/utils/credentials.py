"""
Credential check for sign-in

Resolves an email or name plus password to a user id before the sign-in
use case runs.
"""

from uuid import UUID

from fastapi import status

from account_service.api.error import ClientError
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.passwords import hash_password
from account_service.libs.result import Error

INVALID_CREDENTIALS = Error("FORBIDDEN", "User and or password not valid")


async def verify_credentials(uow: UnitOfWork, identifier: str, password: str) -> UUID:
    """
    Match email-or-name and password against the stored bcrypt hash.

    Args:
        uow: Unit of work for the current request
        identifier: Email address or user name
        password: Plain text password

    Raises:
        ClientError: 403 if no user matches or the password is wrong

    Returns:
        The verified user's id
    """
    async with uow:
        user = await uow.users.get_by_email(identifier)
        if user is None:
            user = await uow.users.get_by_name(identifier)

        if user is None:
            # Hash anyway so unknown identities take as long as known ones
            hash_password(password)
            raise ClientError(INVALID_CREDENTIALS, status_code=status.HTTP_403_FORBIDDEN)

        if not user.check_password(password):
            raise ClientError(INVALID_CREDENTIALS, status_code=status.HTTP_403_FORBIDDEN)

        return user.id
