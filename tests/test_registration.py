"""
Test suite for user registration.

Tests cover:
- Successful registration
- Password hashing
- Duplicate emails
- Password strength rules
"""

import pytest
from sqlalchemy import select

from jobboard.core.security import pwd_context, security_service
from jobboard.models.user import User

API = "/api/v1"


class TestRegistration:
    async def test_register_success(self, client):
        response = await client.post(f"{API}/register", json={
            "email": "dev@example.com",
            "password": "Str0ngPassword",
        })

        assert response.status_code == 201
        assert response.json() == {"message": "User created", "email": "dev@example.com"}

    async def test_password_stored_as_hash(self, client, db_session):
        await client.post(f"{API}/register", json={
            "email": "dev@example.com",
            "password": "Str0ngPassword",
        })

        user = (await db_session.execute(select(User).where(User.email == "dev@example.com"))).scalar_one()
        assert user.hashed_password != "Str0ngPassword"
        assert pwd_context.verify("Str0ngPassword", user.hashed_password)
        assert user.username == "dev@example.com"
        assert user.is_active

    async def test_duplicate_email_conflicts(self, client):
        payload = {"email": "dev@example.com", "password": "Str0ngPassword"}
        await client.post(f"{API}/register", json=payload)

        response = await client.post(f"{API}/register", json=payload)

        assert response.status_code == 409
        assert response.json()["details"] == {"email": "dev@example.com"}

    async def test_invalid_email(self, client):
        response = await client.post(f"{API}/register", json={
            "email": "not-an-email",
            "password": "Str0ngPassword",
        })

        assert response.status_code == 422

    @pytest.mark.parametrize("password", [
        "short1A",          # too short
        "alllowercase1",    # no uppercase
        "ALLUPPERCASE1",    # no lowercase
        "NoDigitsHere",     # no digit
        "Password123",      # common
    ])
    async def test_weak_password_rejected(self, client, password):
        response = await client.post(f"{API}/register", json={
            "email": "dev@example.com",
            "password": password,
        })

        assert response.status_code == 422


class TestSecurityService:
    def test_hash_and_verify(self):
        hashed = security_service.get_password_hash("Str0ngPassword")

        assert hashed.startswith("$2")
        assert pwd_context.verify("Str0ngPassword", hashed)
        assert not pwd_context.verify("WrongPassword1", hashed)
