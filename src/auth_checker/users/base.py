"""User store abstract interface.

Used to resolve lockout payloads (which carry a login identifier, not a
user object) to a user.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class UserStore(ABC):
    """Abstract interface for user lookup.

    Implementations:
        - DatabaseUserStore: SQLAlchemy query on the app's User model
        - MemoryUserStore: Linear scan over a list (testing)
    """

    @abstractmethod
    async def find_by_column(self, column: str, value: Any) -> Optional[Any]:
        """Find the first user whose ``column`` equals ``value``.

        Args:
            column: User attribute name (e.g. "email", "username")
            value: Value to match exactly

        Returns:
            User or None. An unknown column also yields None.
        """
        pass
