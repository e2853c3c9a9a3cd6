# src/local_todo/auth/user_store.py

"""
Mock signup / login.

NOT access control:
- signup validates the form and appends the user to the users record,
- login only checks that both fields were filled in; it never reads the users
  record, never compares passwords, and issues no session.

The task list does not depend on anything in this module.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field

from ..core.ports import KeyValueStorage
from ..errors import StorageError
from .validators import (
    validate_confirm_password,
    validate_email,
    validate_fullname,
    validate_password,
    validate_username,
)

logger = logging.getLogger(__name__)

DEFAULT_USERS_KEY = "users"


@dataclass(slots=True)
class UserRecord:
    fullname: str
    email: str
    username: str
    # Stored as typed (plain text).
    password: str


@dataclass(slots=True)
class AuthResult:
    ok: bool
    errors: dict[str, str] = field(default_factory=dict)
    message: str = ""


class UserStore:
    def __init__(self, storage: KeyValueStorage, *, key: str = DEFAULT_USERS_KEY) -> None:
        self._storage = storage
        self._key = key

    def _load_raw(self) -> list[dict]:
        try:
            raw = self._storage.get_item(self._key)
        except StorageError:
            logger.exception("Failed to read users record %r", self._key)
            return []
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Users record %r is not valid JSON; treating as empty.", self._key)
            return []
        return [u for u in data if isinstance(u, dict)] if isinstance(data, list) else []

    def count(self) -> int:
        return len(self._load_raw())

    def signup(
        self,
        *,
        fullname: str,
        email: str,
        username: str,
        password: str,
        confirm_password: str,
    ) -> AuthResult:
        checks = {
            "fullname": validate_fullname(fullname),
            "email": validate_email(email),
            "username": validate_username(username),
            "password": validate_password(password),
            "confirm_password": validate_confirm_password(confirm_password, password),
        }
        errors = {name: msg for name, msg in checks.items() if msg}
        if errors:
            return AuthResult(ok=False, errors=errors, message="Please fix the highlighted fields")

        users = self._load_raw()
        users.append(asdict(UserRecord(fullname=fullname, email=email, username=username, password=password)))
        self._storage.set_item(self._key, json.dumps(users, ensure_ascii=False))
        logger.info("Signup stored username=%s total=%d", username, len(users))
        return AuthResult(ok=True, message="Account created successfully! Redirecting to login...")

    @staticmethod
    def login(username: str, password: str) -> AuthResult:
        errors: dict[str, str] = {}
        if not (username or "").strip():
            errors["username"] = "Username is required"
        if not password:
            errors["password"] = "Password is required"
        if errors:
            return AuthResult(ok=False, errors=errors)
        # The users record is not consulted.
        logger.info("Mock login username=%s", username.strip())
        return AuthResult(ok=True, message="Logging in...")
