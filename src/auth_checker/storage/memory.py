"""In-memory auth checker storage implementation.

Concrete implementation using Python lists. No external dependencies,
useful for testing and development. Records are lost on restart.
"""

from typing import Any, Dict, List, Optional, Type

from ..models.base import DeviceBase, LoginBase, LoginType
from ..models.records import DeviceRecord, LoginRecord
from .base import AuthCheckerStorage


class MemoryAuthCheckerStorage(AuthCheckerStorage):
    """In-memory storage.

    Usage:
        ```python
        storage = MemoryAuthCheckerStorage()
        device = await storage.create_device(user_id, platform="iOS")
        ```

    Note:
        Not suitable for production with multiple processes/servers.
    """

    def __init__(
        self,
        device_model: Type[DeviceBase] = DeviceRecord,
        login_model: Type[LoginBase] = LoginRecord,
    ):
        """Initialize in-memory storage.

        Args:
            device_model: Class instantiated for new devices
            login_model: Class instantiated for new logins
        """
        self.device_model = device_model
        self.login_model = login_model
        self._devices: Dict[str, List[DeviceBase]] = {}
        self._logins: List[LoginBase] = []

    async def list_devices(self, user_id: Any) -> List[DeviceBase]:
        return list(self._devices.get(str(user_id), []))

    async def create_device(self, user_id: Any, **attributes: Any) -> DeviceBase:
        device = self.device_model(user_id=user_id, **attributes)
        self._devices.setdefault(str(user_id), []).append(device)
        return device

    async def create_login(
        self,
        user_id: Any,
        device_id: Any,
        login_type: LoginType,
        ip_address: Optional[str],
        ip_insights: dict[str, Any],
    ) -> LoginBase:
        login = self.login_model(
            user_id=user_id,
            device_id=device_id,
            type=login_type,
            ip_address=ip_address,
            ip_insights=ip_insights,
        )
        self._logins.append(login)
        return login

    async def latest_login(self, device_id: Any) -> Optional[LoginBase]:
        latest: Optional[LoginBase] = None
        for login in self._logins:
            if login.device_id != device_id:  # type: ignore[attr-defined]
                continue
            # >= so the later insert wins on equal timestamps
            if latest is None or login.created_at >= latest.created_at:  # type: ignore[attr-defined]
                latest = login
        return latest

    async def list_logins(self, device_id: Any) -> List[LoginBase]:
        logins = [
            login
            for login in self._logins
            if login.device_id == device_id  # type: ignore[attr-defined]
        ]
        logins.reverse()
        logins.sort(key=lambda login: login.created_at, reverse=True)  # type: ignore[attr-defined]
        return logins

    def clear_all(self) -> None:
        """Clear all devices and logins. Useful for testing."""
        self._devices.clear()
        self._logins.clear()

    def device_count(self) -> int:
        """Total number of devices across all users."""
        return sum(len(devices) for devices in self._devices.values())

    def login_count(self) -> int:
        """Total number of logins."""
        return len(self._logins)
