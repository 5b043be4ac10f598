"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import uuid
import pytest
from datetime import datetime, timezone, timedelta
from typing import Any, Optional
import jwt  # PyJWT

from api.dependencies import get_auth_service, reset_container
from modules.auth.service import AuthService
from shared.config import Settings
from shared.models import AuthenticatedUser


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_USER_ID = "6f1c2a9e-3b4d-4e5f-8a7b-1c2d3e4f5a6b"
OTHER_USER_ID = "0a9b8c7d-6e5f-4a3b-9c2d-1e0f9a8b7c6d"
TEST_PROFILE_ID = "3e2d1c0b-9a8f-4e7d-b6c5-a4b3c2d1e0f9"


def create_test_token(
    user_id: str = TEST_USER_ID,
    email: str = "test@example.com",
    role: str = "user",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test session token.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        role: Role claim
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    if expired:
        issued = now - timedelta(hours=25)
        exp = now - timedelta(hours=1)
    else:
        issued = now
        exp = now + timedelta(hours=1)

    payload = {
        "id": user_id,
        "email": email,
        "role": role,
        "exp": int(exp.timestamp()),
        "iat": int(issued.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_profile_row(
    profile_id: Optional[str] = None,
    owner_id: str = TEST_USER_ID,
    is_public: bool = False,
    is_user_profile: bool = False,
    name: str = "Asha Rao",
    **overrides: Any,
) -> dict[str, Any]:
    """Helper to create a profiles table row."""
    now = datetime.now(timezone.utc).isoformat()
    row = {
        "id": profile_id or str(uuid.uuid4()),
        "owner_id": owner_id,
        "is_user_profile": is_user_profile,
        "is_public": is_public,
        "name": name,
        "age": "29",
        "gender": "Female",
        "marital_status": "Single",
        "caste": "General",
        "education": "",
        "occupation": "Engineer",
        "location": "Pune",
        "contact": "",
        "email": "",
        "role": "",
        "bio": None,
        "phone_number": "",
        "website": "",
        "social_links": "",
        "skills": "",
        "experience": None,
        "notes": None,
        "created_at": now,
        "updated_at": now,
    }
    row.update(overrides)
    return row


def make_user_row(
    user_id: str = TEST_USER_ID,
    username: str = "asha",
    email: str = "test@example.com",
    password_hash: str = "$2b$04$" + "a" * 53,
    **overrides: Any,
) -> dict[str, Any]:
    """Helper to create a users table row."""
    now = datetime.now(timezone.utc).isoformat()
    row = {
        "id": user_id,
        "username": username,
        "email": email,
        "name": "Asha Rao",
        "role": "user",
        "password_hash": password_hash,
        "created_at": now,
        "updated_at": now,
    }
    row.update(overrides)
    return row


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known JWT secret and a cheap bcrypt cost."""
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
        environment="test",
    )


@pytest.fixture
def auth_service(test_settings: Settings) -> AuthService:
    return AuthService(test_settings)


@pytest.fixture
def test_user() -> AuthenticatedUser:
    """The identity the default test token is issued for."""
    return AuthenticatedUser(id=TEST_USER_ID, email="test@example.com")


@pytest.fixture
def other_user() -> AuthenticatedUser:
    return AuthenticatedUser(id=OTHER_USER_ID, email="other@example.com")


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def app(auth_service: AuthService):
    """
    Create a fresh app for each test.

    Token validation uses the test secret; individual tests override the
    domain services they exercise.
    """
    from api.app import create_app

    application = create_app()
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    yield application
    application.dependency_overrides.clear()
