"""Integration tests for the user endpoints."""

import time
import uuid

import pytest
from fastapi import status
from httpx import AsyncClient

from blog_api.constants import APIStatus

pytestmark = pytest.mark.asyncio

USERS_URL = "/api/user"
TEST_PASSWORD = "TestPassword123!"


def make_unique_username(base: str) -> str:
    """Generate a unique username so tests never collide."""
    return f"{base}_{uuid.uuid4().hex[:6]}_{str(int(time.time() * 1000))[-4:]}"


def registration(username: str | None = None, **overrides) -> dict:
    username = username or make_unique_username("user")
    return {"username": username, "email": f"{username}@example.com", "password": TEST_PASSWORD, **overrides}


class TestHealth:
    """Liveness probe."""

    async def test_health(self, async_client: AsyncClient):
        response = await async_client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"

    async def test_unknown_route_uses_error_shape(self, async_client: AsyncClient):
        response = await async_client.get("/api/nowhere")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Not Found", "error_code": "NOT_FOUND"}
        assert "X-Request-ID" in response.headers


class TestRegistration:
    """POST /api/user"""

    async def test_register(self, async_client: AsyncClient):
        payload = registration()
        response = await async_client.post(USERS_URL, json=payload)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["message"] == "User created successfully"
        assert body["data"]["username"] == payload["username"]
        assert body["data"]["role"] == "user"
        assert "password" not in body["data"]
        assert "password_hash" not in body["data"]

    async def test_missing_fields(self, async_client: AsyncClient):
        response = await async_client.post(USERS_URL, json={"username": "lonely"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "message": "Username, email, and password are required",
            "error_code": "INVALID_INPUT",
        }

    async def test_duplicate_email(self, async_client: AsyncClient, test_user):
        response = await async_client.post(USERS_URL, json=registration(email=test_user.email))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["message"] == "email already exists"

    async def test_malformed_email(self, async_client: AsyncClient):
        response = await async_client.post(USERS_URL, json=registration(email="not-an-email"))

        assert response.status_code == APIStatus.UNPROCESSABLE_ENTITY
        assert response.json()["message"] == "Invalid email"

    async def test_invalid_role(self, async_client: AsyncClient):
        response = await async_client.post(USERS_URL, json=registration(role="superuser"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Invalid role specified"

    async def test_wrong_json_type(self, async_client: AsyncClient):
        response = await async_client.post(USERS_URL, json=registration(username=42))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Invalid request body"


class TestLogin:
    """POST /api/user/login"""

    async def test_login(self, async_client: AsyncClient, test_user):
        response = await async_client.post(
            f"{USERS_URL}/login", json={"username": test_user.username, "password": TEST_PASSWORD}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["data"]["token_type"] == "Bearer"
        assert body["data"]["expires_in"] == 3600
        assert body["data"]["user"]["id"] == str(test_user.id)

        token = body["data"]["access_token"]
        me = await async_client.get(
            f"{USERS_URL}/{test_user.id}", headers={"Authorization": f"Bearer {token}"}
        )
        assert me.status_code == status.HTTP_200_OK

    async def test_wrong_password(self, async_client: AsyncClient, test_user):
        response = await async_client.post(
            f"{USERS_URL}/login", json={"username": test_user.username, "password": "nope"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "Invalid password"

    async def test_unknown_user(self, async_client: AsyncClient):
        response = await async_client.post(
            f"{USERS_URL}/login", json={"username": "ghost", "password": TEST_PASSWORD}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "User not found"

    async def test_missing_credentials(self, async_client: AsyncClient):
        response = await async_client.post(f"{USERS_URL}/login", json={"username": "someone"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Username and password are required"


class TestAuthentication:
    """Bearer token handling."""

    async def test_missing_token(self, async_client: AsyncClient):
        response = await async_client.get(USERS_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"message": "Access token is required", "error_code": "UNAUTHORIZED"}

    async def test_invalid_token(self, async_client: AsyncClient):
        response = await async_client.get(USERS_URL, headers={"Authorization": "Bearer garbage"})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["message"] == "Invalid or expired token"


class TestUserReads:
    """GET /api/user and /api/user/{id}"""

    async def test_list_users(self, async_client: AsyncClient, auth_headers, test_user, other_user):
        response = await async_client.get(USERS_URL, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Users fetched successfully"
        assert {user["id"] for user in body["data"]} == {str(test_user.id), str(other_user.id)}

    async def test_get_other_user(self, async_client: AsyncClient, auth_headers, other_user):
        response = await async_client.get(f"{USERS_URL}/{other_user.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "User fetched successfully"
        assert response.json()["data"]["username"] == other_user.username

    async def test_bad_id(self, async_client: AsyncClient, auth_headers):
        response = await async_client.get(f"{USERS_URL}/12345", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Invalid user ID format"

    async def test_missing_user(self, async_client: AsyncClient, auth_headers):
        response = await async_client.get(f"{USERS_URL}/{uuid.uuid4()}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUserWrites:
    """PUT and DELETE /api/user/{id}"""

    async def test_update_self(self, async_client: AsyncClient, auth_headers, test_user):
        new_name = make_unique_username("renamed")
        response = await async_client.put(
            f"{USERS_URL}/{test_user.id}", json={"username": f"  {new_name}  "}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "User updated successfully"
        assert response.json()["data"]["username"] == new_name

    async def test_update_other_user_forbidden(
        self, async_client: AsyncClient, other_auth_headers, test_user
    ):
        response = await async_client.put(
            f"{USERS_URL}/{test_user.id}", json={"username": "hijack"}, headers=other_auth_headers
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    async def test_update_blank_field(self, async_client: AsyncClient, auth_headers, test_user):
        response = await async_client.put(
            f"{USERS_URL}/{test_user.id}", json={"password": "   "}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "password cannot be blank"

    async def test_update_into_taken_username(
        self, async_client: AsyncClient, auth_headers, test_user, other_user
    ):
        response = await async_client.put(
            f"{USERS_URL}/{test_user.id}", json={"username": other_user.username}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["message"] == "username already exists"

    async def test_delete_requires_admin(self, async_client: AsyncClient, auth_headers, test_user):
        response = await async_client.delete(f"{USERS_URL}/{test_user.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["message"] == "Access denied"

    async def test_admin_deletes(self, async_client: AsyncClient, admin_auth_headers, test_user):
        response = await async_client.delete(f"{USERS_URL}/{test_user.id}", headers=admin_auth_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        again = await async_client.get(f"{USERS_URL}/{test_user.id}", headers=admin_auth_headers)
        assert again.status_code == status.HTTP_404_NOT_FOUND
