import pytest
from httpx import AsyncClient


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_sign_in_with_email(client: AsyncClient, registered):
    response = await client.post(
        "/users/sign-in", json={"email": "a@x.com", "password": "longenough1"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Successfully signed in"
    assert data["token"]


@pytest.mark.asyncio
async def test_sign_in_with_name(client: AsyncClient, registered):
    response = await client.post(
        "/users/sign-in", json={"email": "alice01", "password": "longenough1"}
    )

    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("identifier,password", [
    ("a@x.com", "wrongpassword"),
    ("nobody@x.com", "longenough1"),
])
async def test_sign_in_rejected(client: AsyncClient, registered, identifier, password):
    response = await client.post(
        "/users/sign-in", json={"email": identifier, "password": password}
    )

    assert response.status_code == 403
    assert response.json()["error"]["message"] == "User and or password not valid"


@pytest.mark.asyncio
async def test_sign_out_revokes_only_that_token(client: AsyncClient, registered):
    first = registered["token"]
    second = (await client.post(
        "/users/sign-in", json={"email": "a@x.com", "password": "longenough1"}
    )).json()["token"]

    response = await client.post("/users/sign-out", headers=bearer(first))
    assert response.status_code == 200
    assert response.json()["message"] == "Successfully signed out"

    assert (await client.get("/users/me", headers=bearer(first))).status_code == 401
    assert (await client.get("/users/me", headers=bearer(second))).status_code == 200


@pytest.mark.asyncio
async def test_invalid_token_rejected(client: AsyncClient):
    response = await client.get("/users/me", headers=bearer("garbage"))

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_long_password_register_and_sign_in(client: AsyncClient):
    long_password = "p" * 80
    response = await client.post("/users/register", json={
        "name": "longpass", "email": "long@x.com", "password": long_password
    })
    assert response.status_code == 201

    response = await client.post(
        "/users/sign-in", json={"email": "long@x.com", "password": long_password}
    )
    assert response.status_code == 200

    response = await client.post(
        "/users/sign-in", json={"email": "nobody@x.com", "password": long_password}
    )
    assert response.status_code == 403
