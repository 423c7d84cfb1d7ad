"""Database models for the auth checker application."""

from src.models.base import AuthCheckerModel
from src.models.device import Device
from src.models.login import Login
from src.models.user import User

__all__ = [
    "AuthCheckerModel",
    "Device",
    "Login",
    "User",
]
