"""Tests for registration, login and bearer-token authentication."""

from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.config import get_settings
from src.tasktracker.core.security import create_access_token
from tests.factories import UserFactory

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

STRONG_PASSWORD = "correct-horse-battery-staple"


class TestRegistration:
    async def test_register_creates_user(self, client: AsyncClient) -> None:
        email = f"new_{uuid4().hex[-8:]}@example.com"

        response = await client.post(
            "/api/v1/auth/register",
            json={"email": email, "password": STRONG_PASSWORD, "full_name": " New User "},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == email
        assert data["full_name"] == "New User"
        assert data["is_active"] is True
        assert "hashed_password" not in data

    async def test_register_duplicate_email_fails(
        self, client: AsyncClient, test_user: dict
    ) -> None:
        response = await client.post(
            "/api/v1/auth/register",
            json={
                "email": test_user["email"].upper(),
                "password": STRONG_PASSWORD,
                "full_name": "Copycat",
            },
        )

        assert response.status_code == 409
        assert response.json()["message"] == "A user with this email already exists."

    async def test_register_weak_password_fails(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/auth/register",
            json={"email": "weak@example.com", "password": "password", "full_name": "Weak"},
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "password"


class TestLogin:
    async def test_login_returns_bearer_token(
        self, client: AsyncClient, test_user: dict
    ) -> None:
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": test_user["email"], "password": test_user["password"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"

        me = await client.get(
            "/api/v1/users/me",
            headers={"Authorization": f"Bearer {data['access_token']}"},
        )
        assert me.status_code == 200
        assert me.json()["id"] == test_user["id"]

    async def test_login_wrong_password(self, client: AsyncClient, test_user: dict) -> None:
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": test_user["email"], "password": "not-the-password"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    async def test_login_unknown_email(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "whatever-password"},
        )

        assert response.status_code == 401

    async def test_login_inactive_user(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = UserFactory.inactive()
        db_session.add(user)
        await db_session.commit()

        response = await client.post(
            "/api/v1/auth/login",
            json={"email": user.email, "password": "testpassword123"},
        )

        assert response.status_code == 401

    async def test_auth_responses_are_not_cached(
        self, client: AsyncClient, test_user: dict
    ) -> None:
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": test_user["email"], "password": test_user["password"]},
        )

        assert response.headers["Cache-Control"] == "no-store"


class TestBearerAuthentication:
    async def test_missing_header(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/projects")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["message"] == "Missing or invalid authorization header"

    async def test_garbage_token(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/v1/projects", headers={"Authorization": "Bearer not.a.jwt"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    async def test_expired_token(self, client: AsyncClient, test_user: dict) -> None:
        token = create_access_token(test_user["id"], expires_delta=timedelta(minutes=-1))

        response = await client.get(
            "/api/v1/projects", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    async def test_wrong_token_type(self, client: AsyncClient, test_user: dict) -> None:
        settings = get_settings()
        token = jwt.encode(
            {"sub": test_user["id"], "type": "refresh"},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        response = await client.get(
            "/api/v1/projects", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token type"

    async def test_unknown_user(self, client: AsyncClient) -> None:
        token = create_access_token(uuid4())

        response = await client.get(
            "/api/v1/users/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "User not found or inactive"
