"""Auth checker domain events.

Four events leave the package:

1. **DeviceCreated**: a request did not match any known device of the
   user, so a new Device was written. Typical handler: "new device signed
   in to your account" notification.
2. **LoginCreated**: a Login row was written (any type). Typical handler:
   audit trail.
3. **FailedAuth**: a failed attempt was recorded against a device.
4. **LockoutAuth**: a lockout was recorded against a device.

FailedAuth and LockoutAuth are published in addition to the LoginCreated
of the same record.
"""

from dataclasses import dataclass

from ..models.base import DeviceBase, LoginBase
from .base import AuthEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class DeviceCreated(AuthEvent):
    """Emitted after a new Device is persisted.

    Attributes:
        device: The new device.
    """

    device: DeviceBase


@dataclass(frozen=True, kw_only=True, slots=True)
class LoginCreated(AuthEvent):
    """Emitted after a Login record is persisted.

    Attributes:
        login: The persisted login (type login, failed or lockout).
    """

    login: LoginBase


@dataclass(frozen=True, kw_only=True, slots=True)
class FailedAuth(AuthEvent):
    """Emitted after a failed authentication attempt is recorded.

    Attributes:
        login: The FAILED login record.
        device: Device the attempt came from.
    """

    login: LoginBase
    device: DeviceBase


@dataclass(frozen=True, kw_only=True, slots=True)
class LockoutAuth(AuthEvent):
    """Emitted after a lockout is recorded.

    Attributes:
        login: The LOCKOUT login record.
        device: Device the locked-out attempts came from.
    """

    login: LoginBase
    device: DeviceBase
