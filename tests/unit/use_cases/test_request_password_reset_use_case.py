"""
Unit tests for RequestPasswordResetUseCase
"""
from datetime import timedelta

import pytest

from account_service.app.use_cases.auth import RequestPasswordResetUseCase
from account_service.domain.base import utcnow


@pytest.mark.asyncio
async def test_reset_token_issued_and_sent(mock_uow, notifications, classifier, user):
    mock_uow.users.get_by_email.return_value = user
    use_case = RequestPasswordResetUseCase(mock_uow, notifications, classifier)

    before = utcnow()
    result = await use_case.execute("a@x.com")

    assert result.is_ok()
    assert result.value.message == "Password reset initiated"
    assert user.reset_password_token
    assert before + timedelta(hours=12) <= user.reset_password_expires
    assert user.reset_password_expires <= utcnow() + timedelta(hours=12)

    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()
    notifications.send_password_reset_link.assert_called_once_with(
        "a@x.com", user.reset_password_token
    )


@pytest.mark.asyncio
async def test_new_request_replaces_pending_token(mock_uow, notifications, classifier, user):
    user.reset_password_token = "older-token"
    user.reset_password_expires = utcnow() + timedelta(hours=1)
    mock_uow.users.get_by_email.return_value = user
    use_case = RequestPasswordResetUseCase(mock_uow, notifications, classifier)

    await use_case.execute("a@x.com")

    assert user.reset_password_token != "older-token"
    assert user.reset_password_expires > utcnow() + timedelta(hours=11)


@pytest.mark.asyncio
async def test_unknown_email_is_forbidden_without_side_effects(
    mock_uow, notifications, classifier
):
    use_case = RequestPasswordResetUseCase(mock_uow, notifications, classifier)

    result = await use_case.execute("nobody@x.com")

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert result.error.message == "Password reset for this user not possible"
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()
    notifications.send_password_reset_link.assert_not_called()


@pytest.mark.asyncio
async def test_custom_token_lifetime(mock_uow, notifications, classifier, user):
    mock_uow.users.get_by_email.return_value = user
    use_case = RequestPasswordResetUseCase(
        mock_uow, notifications, classifier, token_lifetime=timedelta(hours=1)
    )

    await use_case.execute("a@x.com")

    assert user.reset_password_expires < utcnow() + timedelta(hours=2)
