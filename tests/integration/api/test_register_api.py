import pytest
from httpx import AsyncClient

from config import ApplicationConfig
from src.domain.entities import DEFAULT_AVATAR
from tests.utils.auth_helpers import image_file, register_user, session_headers, session_token


@pytest.mark.asyncio
async def test_register_logs_the_user_in(client: AsyncClient):
    """
    Given no account exists
    When I register with username, email and password
    Then I get 201 with my public profile
    And a session cookie is set that opens protected routes
    """
    response = await register_user(client, username="alice", email=" Alice@Example.com ")

    assert response.status_code == 201
    data = response.json()
    assert data["username"] == "alice"
    assert data["email"] == "alice@example.com"
    assert data["role"] == "user"
    assert data["avatar"] == DEFAULT_AVATAR
    assert "password" not in data
    assert "password_hash" not in data

    cookie = response.headers["set-cookie"].lower()
    assert "httponly" in cookie
    assert "samesite=strict" in cookie
    assert f"max-age={ApplicationConfig.SESSION_TTL_SECONDS}" in cookie

    token = session_token(response)
    profile = await client.put(
        "/api/users/profile", data={"phone": "555"}, headers=session_headers(token)
    )
    assert profile.status_code == 200
    assert profile.json()["id"] == data["id"]


@pytest.mark.asyncio
async def test_register_with_profile_picture(client: AsyncClient, upload_dir):
    response = await register_user(client, picture=image_file("me.PNG"))

    assert response.status_code == 201
    avatar = response.json()["avatar"]
    assert avatar.startswith("profilePicture-")
    assert avatar.endswith(".png")
    assert (upload_dir / avatar).is_file()

    served = await client.get(f"/uploads/{avatar}")
    assert served.status_code == 200


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, upload_dir):
    """A rejected registration leaves no uploaded file behind"""
    first = await register_user(client, username="alice", email="alice@example.com")
    assert first.status_code == 201

    response = await register_user(
        client, username="alice2", email="ALICE@example.com", picture=image_file()
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_EXISTS"
    assert session_token(response) is None
    assert list(upload_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_register_duplicate_username(client: AsyncClient):
    await register_user(client, username="alice", email="alice@example.com")

    response = await register_user(client, username="alice", email="other@example.com")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_register_invalid_email(client: AsyncClient):
    response = await register_user(client, email="not-an-email")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_FAILED"


@pytest.mark.asyncio
async def test_register_rejects_non_image_upload(client: AsyncClient, upload_dir):
    response = await register_user(client, picture=("notes.txt", b"hello", "text/plain"))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_FILE"
    assert list(upload_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_register_rejects_oversized_upload(client: AsyncClient, upload_dir, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "MAX_UPLOAD_BYTES", 16)

    response = await register_user(client, picture=image_file(data=b"x" * 17))

    assert response.status_code == 413
    assert response.json()["error"]["code"] == "FILE_TOO_LARGE"
    assert list(upload_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
