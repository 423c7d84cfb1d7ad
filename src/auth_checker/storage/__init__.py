"""Device/login storage backends."""

from .base import AuthCheckerStorage
from .database import DatabaseAuthCheckerStorage
from .memory import MemoryAuthCheckerStorage

__all__ = [
    "AuthCheckerStorage",
    "DatabaseAuthCheckerStorage",
    "MemoryAuthCheckerStorage",
]
