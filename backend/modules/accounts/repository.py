"""
User repository for database access.

Owns the users table. This is the only place a plaintext password is turned
into a stored hash: any write carrying a ``password`` key has it replaced by
``password_hash`` before the row is sent, and writes without one leave the
stored hash untouched.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.models import Role
from shared.exceptions import ValidationError
from shared.repository import BaseRepository
from modules.auth.passwords import hash_password, is_password_hash

from .models import UserRecord


def _quote(value: str) -> str:
    """Quote a value for a PostgREST or=(...) filter."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class UserRepository(BaseRepository[UserRecord]):
    """Repository for identities."""

    TABLE = "users"

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        result = self._execute(
            self._db.table(self.TABLE).select("*").eq("id", user_id),
            "fetch user",
        )
        return self._first(result.data)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._execute(
            self._db.table(self.TABLE).select("*").eq("email", email),
            "fetch user",
        )
        return self._first(result.data)

    def get_by_username(self, username: str) -> Optional[UserRecord]:
        result = self._execute(
            self._db.table(self.TABLE).select("*").eq("username", username),
            "fetch user",
        )
        return self._first(result.data)

    def find_by_email_or_username(self, email: str, username: str) -> Optional[UserRecord]:
        """Single lookup matching either the email or the username."""
        result = self._execute(
            self._db.table(self.TABLE)
            .select("*")
            .or_(f"email.eq.{_quote(email)},username.eq.{_quote(username)}")
            .limit(1),
            "fetch user",
        )
        return self._first(result.data)

    def create(
        self,
        username: str,
        email: str,
        password: str,
        name: str,
        role: Role = Role.USER,
    ) -> UserRecord:
        """
        Insert a new identity. The password is hashed here.

        Raises:
            ConflictError: If the email or username is already taken.
        """
        data = self._prepare_write({
            "username": username,
            "email": email,
            "password": password,
            "name": name,
            "role": role.value,
        })
        result = self._execute(
            self._db.table(self.TABLE).insert(data),
            "create user",
            conflict_message="User already exists",
        )
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, changes: dict[str, Any]) -> Optional[UserRecord]:
        """
        Update an identity.

        A ``password`` key in changes is hashed; without one the stored hash
        is not touched.

        Raises:
            ConflictError: If a new email or username is already taken.
        """
        data = self._prepare_write(changes)
        data["updated_at"] = datetime.now(timezone.utc).isoformat()
        result = self._execute(
            self._db.table(self.TABLE).update(data).eq("id", user_id),
            "update user",
            conflict_message="Email or username is already taken",
        )
        return self._first(result.data)

    def delete_account(self, user_id: str) -> None:
        """
        Delete an identity and everything that depends on it.

        The delete_account SQL function removes the identity's profiles
        (with messages and bookmarks pointing at them), the messages it sent,
        its bookmarks, and finally the users row, all in one transaction.
        """
        self._execute(
            self._db.rpc("delete_account", {"target_user_id": user_id}),
            "delete account",
        )

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _prepare_write(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Replace a plaintext password with its hash.

        Raises:
            ValidationError: If the password is already a bcrypt hash.
        """
        row = dict(data)
        row.pop("password_hash", None)
        if "password" in row:
            password = row.pop("password")
            if is_password_hash(password):
                raise ValidationError("Password must not be a password hash", code="INVALID_PASSWORD")
            row["password_hash"] = hash_password(password)
        return row

    def _first(self, rows: list[dict[str, Any]]) -> Optional[UserRecord]:
        if not rows:
            return None
        return self._map_to_user(rows[0])

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            username=data["username"],
            email=data["email"],
            name=data["name"],
            role=Role(data.get("role", Role.USER.value)),
            password_hash=data["password_hash"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
