import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.domain.entities import Box, BoxExposure, User


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_email_change_and_confirmation(client: AsyncClient, notifications, registered):
    """
    Given alice01 registered with a@x.com
    When she changes her email to b@x.com with her current password
    Then b@x.com is pending and a@x.com stays her email
    When she confirms b@x.com with the emailed token
    Then b@x.com becomes her confirmed email
    """
    token = registered["token"]
    assert registered["user"]["email_is_confirmed"] is False
    notifications.send_email_confirmation.reset_mock()

    response = await client.put("/users/me", headers=bearer(token), json={
        "email": "b@x.com", "currentPassword": "longenough1"
    })
    assert response.status_code == 200
    me = response.json()["me"]
    assert me["email"] == "a@x.com"
    assert me["unconfirmed_email"] == "b@x.com"

    notifications.send_email_confirmation.assert_called_once()
    email, confirmation_token = notifications.send_email_confirmation.call_args.args
    assert email == "b@x.com"

    response = await client.post("/users/confirm-email", json={
        "email": "b@x.com", "token": confirmation_token
    })
    assert response.status_code == 200

    me = (await client.get("/users/me", headers=bearer(token))).json()["me"]
    assert me["email"] == "b@x.com"
    assert me["unconfirmed_email"] is None
    assert me["email_is_confirmed"] is True


@pytest.mark.asyncio
async def test_confirm_with_wrong_token(client: AsyncClient, registered):
    response = await client.post("/users/confirm-email", json={
        "email": "a@x.com", "token": "wrong"
    })

    assert response.status_code == 403
    assert response.json()["error"]["message"] == "invalid email confirmation token"


@pytest.mark.asyncio
async def test_password_change_revokes_calling_token(client: AsyncClient, registered):
    token = registered["token"]

    response = await client.put("/users/me", headers=bearer(token), json={
        "newPassword": "BrandNewPass1", "currentPassword": "longenough1"
    })
    assert response.status_code == 200
    assert "Password changed" in response.json()["message"]

    assert (await client.get("/users/me", headers=bearer(token))).status_code == 401

    sign_in = await client.post(
        "/users/sign-in", json={"email": "a@x.com", "password": "BrandNewPass1"}
    )
    fresh = sign_in.json()["token"]
    assert (await client.get("/users/me", headers=bearer(fresh))).status_code == 200


@pytest.mark.asyncio
async def test_email_and_password_together(client: AsyncClient, db_session: AsyncSession, registered):
    response = await client.put("/users/me", headers=bearer(registered["token"]), json={
        "email": "b@x.com",
        "newPassword": "BrandNewPass1",
        "currentPassword": "longenough1",
    })

    assert response.status_code == 400
    user = (await db_session.exec(select(User).where(User.name == "alice01"))).one()
    await db_session.refresh(user)
    assert user.unconfirmed_email is None
    assert user.check_password("longenough1")


@pytest.mark.asyncio
async def test_nothing_changed(client: AsyncClient, registered):
    response = await client.put("/users/me", headers=bearer(registered["token"]), json={
        "name": "alice01", "language": "en_US"
    })

    assert response.status_code == 200
    assert response.json()["message"] == "No changed properties supplied. User remains unchanged."


@pytest.mark.asyncio
async def test_email_taken_by_other_user(client: AsyncClient, registered):
    await client.post("/users/register", json={
        "name": "bruno01", "email": "bruno@x.com", "password": "longenough1"
    })

    response = await client.put("/users/me", headers=bearer(registered["token"]), json={
        "email": "bruno@x.com", "currentPassword": "longenough1"
    })

    assert response.status_code == 422
    assert "bruno@x.com" in response.json()["error"]["message"]


@pytest.mark.asyncio
async def test_invalid_name(client: AsyncClient, registered):
    response = await client.put("/users/me", headers=bearer(registered["token"]), json={
        "name": "x!"
    })

    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["field"] == "name"


@pytest.mark.asyncio
async def test_list_own_boxes(client: AsyncClient, db_session: AsyncSession, registered):
    user_id = registered["user"]["id"]
    user = (await db_session.exec(select(User).where(User.name == "alice01"))).one()
    db_session.add(Box(user_id=user.id, name="Garden", exposure=BoxExposure.outdoor))
    await db_session.commit()

    response = await client.get("/users/me/boxes", headers=bearer(registered["token"]))

    assert response.status_code == 200
    boxes = response.json()["boxes"]
    assert len(boxes) == 1
    assert boxes[0]["name"] == "Garden"
    assert boxes[0]["access_token"]
    assert user_id == str(user.id)


@pytest.mark.asyncio
async def test_change_to_long_password(client: AsyncClient, registered):
    long_password = "n" * 80

    response = await client.put("/users/me", headers=bearer(registered["token"]), json={
        "newPassword": long_password, "currentPassword": "longenough1"
    })
    assert response.status_code == 200

    sign_in = await client.post(
        "/users/sign-in", json={"email": "a@x.com", "password": long_password}
    )
    assert sign_in.status_code == 200


@pytest.mark.asyncio
async def test_email_pending_for_other_user(client: AsyncClient, registered):
    bruno = (await client.post("/users/register", json={
        "name": "bruno01", "email": "bruno@x.com", "password": "longenough1"
    })).json()
    response = await client.put("/users/me", headers=bearer(bruno["token"]), json={
        "email": "shared@x.com", "currentPassword": "longenough1"
    })
    assert response.status_code == 200

    response = await client.put("/users/me", headers=bearer(registered["token"]), json={
        "email": "shared@x.com", "currentPassword": "longenough1"
    })

    assert response.status_code == 422
    assert "shared@x.com" in response.json()["error"]["message"]
