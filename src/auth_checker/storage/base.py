"""Auth checker storage abstract interface.

This module defines the AuthCheckerStorage interface that all storage
implementations must follow (database, memory).

Storage is also the model factory: it receives the application's concrete
Device and Login classes and is the only place they are instantiated.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..models.base import DeviceBase, LoginBase, LoginType


class AuthCheckerStorage(ABC):
    """Abstract interface for device/login persistence.

    Implementations:
        - DatabaseAuthCheckerStorage: Works with any SQLAlchemy AsyncSession
        - MemoryAuthCheckerStorage: In-memory lists (testing, development)

    Failures:
        Implementations raise PersistenceError when a write or read fails.
        Callers never catch it.
    """

    @abstractmethod
    async def list_devices(self, user_id: Any) -> List[DeviceBase]:
        """List all devices of a user in creation order (oldest first).

        Args:
            user_id: Owning user's identifier

        Returns:
            Devices, possibly empty
        """
        pass

    @abstractmethod
    async def create_device(self, user_id: Any, **attributes: Any) -> DeviceBase:
        """Instantiate and persist a device.

        Args:
            user_id: Owning user's identifier
            **attributes: Device fields (platform, browser, fingerprint, pin, ...)

        Returns:
            The persisted device (id and created_at populated)

        Raises:
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    async def create_login(
        self,
        user_id: Any,
        device_id: Any,
        login_type: LoginType,
        ip_address: Optional[str],
        ip_insights: dict[str, Any],
    ) -> LoginBase:
        """Instantiate and persist a login.

        Returns:
            The persisted login (id and created_at populated)

        Raises:
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    async def latest_login(self, device_id: Any) -> Optional[LoginBase]:
        """Most recent login of a device by created_at.

        Args:
            device_id: Device identifier

        Returns:
            Latest login or None if the device has no logins
        """
        pass

    @abstractmethod
    async def list_logins(self, device_id: Any) -> List[LoginBase]:
        """Login history of a device, most recent first.

        Args:
            device_id: Device identifier

        Returns:
            Logins, possibly empty
        """
        pass
