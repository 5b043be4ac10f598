"""
Tests for messaging API endpoints.
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.dependencies import get_messaging_service
from modules.messaging.exceptions import BookmarkExistsError, BookmarkNotFoundError
from modules.messaging.models import ACCESS_REQUEST_CONTENT, Message
from modules.profiles.exceptions import ProfileNotFoundError

from tests.conftest import TEST_PROFILE_ID, TEST_USER_ID


@pytest.fixture
def mock_service(app) -> AsyncMock:
    service = AsyncMock()
    app.dependency_overrides[get_messaging_service] = lambda: service
    return service


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


class TestSendMessage:
    """Tests for POST /api/send-message"""

    def test_send(self, client, mock_service, auth_headers):
        response = client.post(
            "/api/send-message",
            json={"recipientProfileId": TEST_PROFILE_ID, "content": "Hello"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Message sent successfully"
        user, profile_id, content = mock_service.send_message.await_args[0]
        assert user.id == TEST_USER_ID
        assert (profile_id, content) == (TEST_PROFILE_ID, "Hello")

    def test_requires_token(self, client, mock_service):
        response = client.post(
            "/api/send-message",
            json={"recipientProfileId": TEST_PROFILE_ID, "content": "Hello"},
        )
        assert response.status_code == 401

    def test_empty_content(self, client, mock_service, auth_headers):
        response = client.post(
            "/api/send-message",
            json={"recipientProfileId": TEST_PROFILE_ID, "content": ""},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_unknown_profile(self, client, mock_service, auth_headers):
        mock_service.send_message.side_effect = ProfileNotFoundError(TEST_PROFILE_ID)

        response = client.post(
            "/api/send-message",
            json={"recipientProfileId": TEST_PROFILE_ID, "content": "Hello"},
            headers=auth_headers,
        )

        assert response.status_code == 404


class TestMessages:
    def test_list_messages(self, client, mock_service, auth_headers):
        mock_service.list_messages.return_value = [
            Message(
                id="m-1",
                sender_id=TEST_USER_ID,
                recipient_profile_id=TEST_PROFILE_ID,
                content=ACCESS_REQUEST_CONTENT,
                created_at=datetime.now(timezone.utc),
            )
        ]

        response = client.get("/api/messages", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data[0]["recipientProfileId"] == TEST_PROFILE_ID
        assert data[0]["isAccessRequest"] is True


class TestRequestAccess:
    """Tests for POST /api/request-access"""

    def test_request_access(self, client, mock_service, auth_headers):
        response = client.post(
            "/api/request-access",
            json={"profileId": TEST_PROFILE_ID},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Access request sent successfully"

    def test_missing_profile_id(self, client, mock_service, auth_headers):
        response = client.post("/api/request-access", json={}, headers=auth_headers)
        assert response.status_code == 400


class TestBookmarks:
    def test_bookmark(self, client, mock_service, auth_headers):
        response = client.post(
            "/api/bookmark", json={"profileId": TEST_PROFILE_ID}, headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Profile bookmarked successfully"

    def test_duplicate_bookmark(self, client, mock_service, auth_headers):
        mock_service.bookmark_profile.side_effect = BookmarkExistsError(TEST_PROFILE_ID)

        response = client.post(
            "/api/bookmark", json={"profileId": TEST_PROFILE_ID}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Profile already bookmarked"

    def test_list_bookmarks(self, client, mock_service, auth_headers):
        mock_service.list_bookmarked_profiles.return_value = []

        response = client.get("/api/bookmarks", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == []

    def test_remove_bookmark(self, client, mock_service, auth_headers):
        response = client.delete(f"/api/bookmarks/{TEST_PROFILE_ID}", headers=auth_headers)
        assert response.status_code == 204

    def test_remove_missing_bookmark(self, client, mock_service, auth_headers):
        mock_service.remove_bookmark.side_effect = BookmarkNotFoundError(TEST_PROFILE_ID)

        response = client.delete(f"/api/bookmarks/{TEST_PROFILE_ID}", headers=auth_headers)

        assert response.status_code == 404
