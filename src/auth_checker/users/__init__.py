"""User lookup for lockout resolution."""

from .base import UserStore
from .database import DatabaseUserStore
from .memory import MemoryUserStore

__all__ = ["DatabaseUserStore", "MemoryUserStore", "UserStore"]
