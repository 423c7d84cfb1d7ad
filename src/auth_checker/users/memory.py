"""In-memory user store (testing, development)."""

from typing import Any, Iterable, List, Optional

from .base import UserStore

_MISSING = object()


class MemoryUserStore(UserStore):
    """User store over a plain list of user objects."""

    def __init__(self, users: Optional[Iterable[Any]] = None):
        self._users: List[Any] = list(users or [])

    def add(self, user: Any) -> None:
        """Register a user."""
        self._users.append(user)

    async def find_by_column(self, column: str, value: Any) -> Optional[Any]:
        for user in self._users:
            if getattr(user, column, _MISSING) == value:
                return user
        return None
