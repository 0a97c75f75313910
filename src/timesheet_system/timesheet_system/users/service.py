from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..entries.repository import TimeEntryRepository
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _text(value) -> str:
    # JSON clients may send numbers for PS numbers and passwords.
    return "" if value is None else str(value)


@dataclass(frozen=True)
class SessionUser:
    """What we hand back to the client (and store in the Flask session) after login."""

    user_id: int
    name: str
    ps_number: str

    def to_dict(self) -> dict:
        return {"id": self.user_id, "name": self.name, "ps_number": self.ps_number}


class AuthService:
    """Use case: register and authenticate users, check the admin gate."""

    def __init__(self, users: UserRepository, *, admin_password: str):
        self._users = users
        self._admin_password = admin_password

    def register(self, *, ps_number: str, password: str, name: str) -> int:
        ps_number, password, name = _text(ps_number), _text(password), _text(name)
        if not ps_number or not password or not name:
            raise ValidationError("All fields are required")
        ps_number = require_non_empty(ps_number, "PS Number")
        name = require_non_empty(name, "Name")

        if self._users.get_by_ps_number(ps_number):
            raise ValidationError("User already exists")

        user_id = self._users.create_user(
            ps_number=ps_number,
            name=name,
            password_hash=generate_password_hash(password),
        )
        logger.info("User registered ps_number=%s id=%s", ps_number, user_id)
        return user_id

    def authenticate(self, ps_number: str, password: str) -> SessionUser:
        ps_number, password = _text(ps_number), _text(password)
        if not ps_number or not password:
            raise ValidationError("PS Number and password are required")

        user = self._users.get_by_ps_number(ps_number.strip())
        if not user:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return SessionUser(user_id=user.user_id, name=user.name, ps_number=user.ps_number)

    def check_admin_password(self, password: str) -> None:
        # compare_digest only accepts ASCII str, so compare the UTF-8 bytes.
        given = _text(password).encode("utf-8")
        if not given or not hmac.compare_digest(given, self._admin_password.encode("utf-8")):
            raise AuthenticationError("Invalid admin password")


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository, entries: TimeEntryRepository):
        self._users = users
        self._entries = entries

    def list_users(self):
        return list(self._users.list_all())

    def delete_user(self, user_id: int) -> int:
        """Delete the user's entries, then the user. Returns the number of entries removed."""

        if not self._users.get_by_id(int(user_id)):
            raise NotFoundError("User not found")

        deleted_entries = self._entries.delete_for_user(int(user_id))
        if not self._users.delete_by_id(int(user_id)):
            raise NotFoundError("User not found")

        logger.info("User %s deleted with %d time entries", user_id, deleted_entries)
        return deleted_entries
