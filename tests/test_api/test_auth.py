"""
API tests for /api/auth and for the bearer-token guard on /api/tasks.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from api.auth import hash_password, verify_password
from config.settings import settings


def test_password_hash_round_trip():
    stored = hash_password("s3cret!")
    assert stored.startswith("pbkdf2_sha256$")
    assert verify_password("s3cret!", stored)
    assert not verify_password("wrong", stored)


def test_password_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_verify_rejects_garbage_hash():
    assert not verify_password("anything", "not-a-hash")


def test_verify_rejects_non_numeric_iterations():
    assert not verify_password("x", "pbkdf2_sha256$abc$salt$digest")
    assert not verify_password("x", "pbkdf2_sha256$0$salt$digest")


@pytest.mark.asyncio
async def test_register_returns_token_and_user(client):
    response = await client.post("/api/auth/register", json={
        "username": "testuser",
        "email": "test@example.com",
        "password": "password123",
    })

    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["user"]["id"] is not None
    assert data["user"]["username"] == "testuser"
    assert data["user"]["email"] == "test@example.com"
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]


@pytest.mark.asyncio
async def test_register_duplicate_email_is_400(client, register_user):
    await register_user(email="dup@example.com")

    response = await client.post("/api/auth/register", json={
        "username": "other",
        "email": "dup@example.com",
        "password": "password123",
    })
    assert response.status_code == 400
    assert "detail" in response.json()


@pytest.mark.asyncio
async def test_register_invalid_email_is_422(client):
    response = await client.post("/api/auth/register", json={
        "username": "x",
        "email": "not-an-email",
        "password": "password123",
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login_with_valid_credentials(client, register_user):
    await register_user(username="testuser", email="test@example.com", password="password123")

    response = await client.post("/api/auth/login", json={
        "email": "test@example.com",
        "password": "password123",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["user"]["username"] == "testuser"


@pytest.mark.asyncio
async def test_login_with_wrong_password_is_401(client, register_user):
    await register_user(email="test@example.com", password="password123")

    response = await client.post("/api/auth/login", json={
        "email": "test@example.com",
        "password": "wrongpassword",
    })
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_unknown_email_is_401(client):
    response = await client.post("/api/auth/login", json={
        "email": "nobody@example.com",
        "password": "password123",
    })
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_token_works_on_tasks(client, register_user):
    await register_user(email="test@example.com", password="password123")
    login = await client.post("/api/auth/login", json={
        "email": "test@example.com",
        "password": "password123",
    })
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    response = await client.get("/api/tasks/", headers=headers)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_tasks_without_token_is_401(client):
    response = await client.get("/api/tasks/")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_tasks_with_garbage_token_is_403(client):
    response = await client.get("/api/tasks/", headers={"Authorization": "Bearer not.a.jwt"})
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_expired_token_is_403(client, register_user):
    await register_user()
    login = await client.post("/api/auth/login", json={
        "email": "alice@example.com",
        "password": "password123",
    })
    user_id = login.json()["user"]["id"]

    expired = jwt.encode(
        {"sub": user_id, "username": "alice", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )
    response = await client.get("/api/tasks/", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_token_for_unknown_user_is_403(client):
    token = jwt.encode(
        {
            "sub": "00000000-0000-0000-0000-000000000000",
            "username": "ghost",
            "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
        },
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )
    response = await client.get("/api/tasks/", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
