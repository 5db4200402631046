import pytest
from uuid import uuid4
from unittest.mock import AsyncMock, MagicMock

from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.notification_service import NotificationService
from account_service.domain.entities import User, UserRole
from account_service.domain.passwords import hash_password


async def _return_user(user):
    return user


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_name = AsyncMock(return_value=None)
    uow.users.get_by_email_and_reset_token = AsyncMock(return_value=None)
    uow.users.get_by_confirmation_token = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=_return_user)
    uow.users.update = AsyncMock(side_effect=_return_user)

    uow.boxes = MagicMock()
    uow.boxes.get_by_user_id = AsyncMock(return_value=[])
    return uow


@pytest.fixture
def reporter():
    return MagicMock()


@pytest.fixture
def classifier(reporter):
    return ErrorClassifier(reporter)


@pytest.fixture
def notifications():
    return AsyncMock(spec=NotificationService)


@pytest.fixture
def token_issuer():
    issuer = MagicMock()
    issuer.mint.return_value = "signed.jwt.token"
    return issuer


@pytest.fixture(scope="session")
def password_hash():
    """bcrypt hash of 'CurrentPass123', computed once"""
    return hash_password("CurrentPass123")


@pytest.fixture
def user(password_hash):
    return User(
        id=uuid4(),
        name="alice01",
        email="a@x.com",
        password_hash=password_hash,
        language="en_US",
        role=UserRole.user,
        email_is_confirmed=False,
    )
