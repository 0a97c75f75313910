from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_ps_number(self, ps_number: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, ps_number: str, name: str, password_hash: str) -> int:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        """All users ordered by name."""

        raise NotImplementedError
