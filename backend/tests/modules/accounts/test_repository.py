"""Tests for the user repository."""

import pytest
from unittest.mock import MagicMock, patch

from postgrest.exceptions import APIError

from shared.exceptions import ConflictError, ExternalServiceError, ValidationError
from shared.models import Role
from modules.accounts.repository import UserRepository

from tests.conftest import TEST_USER_ID, make_user_row


@pytest.fixture
def mock_db() -> MagicMock:
    return MagicMock()


@pytest.fixture
def repo(mock_db) -> UserRepository:
    return UserRepository(mock_db)


def unique_violation() -> APIError:
    return APIError({"message": "duplicate key", "code": "23505", "hint": None, "details": None})


class TestReads:
    def test_get_by_id_maps_row(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            make_user_row()
        ]

        user = repo.get_by_id(TEST_USER_ID)

        assert user.id == TEST_USER_ID
        assert user.username == "asha"
        assert user.role == Role.USER
        mock_db.table.assert_called_with("users")
        mock_db.table.return_value.select.return_value.eq.assert_called_with("id", TEST_USER_ID)

    def test_get_by_email_missing(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_by_email("ghost@example.com") is None

    def test_find_by_email_or_username_uses_single_query(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.or_.return_value.limit.return_value
        chain.execute.return_value.data = [make_user_row()]

        user = repo.find_by_email_or_username("test@example.com", "asha")

        assert user is not None
        mock_db.table.return_value.select.return_value.or_.assert_called_once_with(
            'email.eq."test@example.com",username.eq."asha"'
        )

    def test_or_filter_values_are_quoted(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.or_.return_value.limit.return_value
        chain.execute.return_value.data = []

        repo.find_by_email_or_username('a,b@example.com', 'x"y')

        mock_db.table.return_value.select.return_value.or_.assert_called_once_with(
            'email.eq."a,b@example.com",username.eq."x\\"y"'
        )


class TestPasswordHashing:
    @patch("modules.accounts.repository.hash_password", return_value="$2b$04$hashed")
    def test_create_hashes_password(self, mock_hash, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [make_user_row()]

        repo.create(username="asha", email="test@example.com", password="s3cret!", name="Asha")

        inserted = mock_db.table.return_value.insert.call_args[0][0]
        mock_hash.assert_called_once_with("s3cret!")
        assert inserted["password_hash"] == "$2b$04$hashed"
        assert "password" not in inserted
        assert inserted["role"] == "user"

    @patch("modules.accounts.repository.hash_password")
    def test_update_without_password_leaves_hash_alone(self, mock_hash, repo, mock_db):
        """Saving other fields must never re-hash the stored hash."""
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = [
            make_user_row(name="Renamed")
        ]

        repo.update(TEST_USER_ID, {"name": "Renamed"})

        written = mock_db.table.return_value.update.call_args[0][0]
        mock_hash.assert_not_called()
        assert "password_hash" not in written
        assert written["name"] == "Renamed"
        assert "updated_at" in written

    @patch("modules.accounts.repository.hash_password")
    def test_update_ignores_raw_password_hash(self, mock_hash, repo, mock_db):
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = [
            make_user_row()
        ]

        repo.update(TEST_USER_ID, {"password_hash": "plaintext-sneaking-in"})

        written = mock_db.table.return_value.update.call_args[0][0]
        assert "password_hash" not in written
        mock_hash.assert_not_called()

    @patch("modules.accounts.repository.hash_password", return_value="$2b$04$new")
    def test_update_with_password_hashes_it(self, mock_hash, repo, mock_db):
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = [
            make_user_row()
        ]

        repo.update(TEST_USER_ID, {"password": "n3w-pass"})

        written = mock_db.table.return_value.update.call_args[0][0]
        mock_hash.assert_called_once_with("n3w-pass")
        assert written["password_hash"] == "$2b$04$new"
        assert "password" not in written

    @pytest.mark.parametrize("write", ["create", "update"])
    @patch("modules.accounts.repository.hash_password")
    def test_already_hashed_password_is_rejected(self, mock_hash, write, repo, mock_db):
        """A stored hash passed back in as a password must not be hashed again."""
        stored_hash = "$2b$04$" + "a" * 53

        with pytest.raises(ValidationError, match="must not be a password hash"):
            if write == "create":
                repo.create(username="asha", email="test@example.com", password=stored_hash, name="Asha")
            else:
                repo.update(TEST_USER_ID, {"password": stored_hash})

        mock_hash.assert_not_called()
        mock_db.table.return_value.insert.assert_not_called()
        mock_db.table.return_value.update.assert_not_called()


class TestWriteErrors:
    @patch("modules.accounts.repository.hash_password", return_value="$2b$04$hashed")
    def test_create_duplicate_raises_conflict(self, mock_hash, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = unique_violation()

        with pytest.raises(ConflictError, match="User already exists"):
            repo.create(username="asha", email="test@example.com", password="s3cret!", name="Asha")

    def test_update_returns_none_when_no_row_matched(self, repo, mock_db):
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = []
        assert repo.update(TEST_USER_ID, {"name": "Renamed"}) is None


class TestDeleteAccount:
    def test_runs_cascade_function(self, repo, mock_db):
        repo.delete_account(TEST_USER_ID)

        mock_db.rpc.assert_called_once_with("delete_account", {"target_user_id": TEST_USER_ID})
        mock_db.rpc.return_value.execute.assert_called_once()

    def test_failure_propagates(self, repo, mock_db):
        mock_db.rpc.return_value.execute.side_effect = APIError(
            {"message": "deadlock detected", "code": "40P01", "hint": None, "details": None}
        )

        with pytest.raises(ExternalServiceError):
            repo.delete_account(TEST_USER_ID)
