"""Device registry - find or create the device a request came from."""

import secrets
from typing import Optional

from .events.auth_events import DeviceCreated
from .events.bus import EventSink
from .logger import LoggerProtocol
from .matcher import DeviceMatcher
from .models.base import AuthenticatableUser, DeviceBase
from .models.descriptor import AgentDescriptor, normalize_platform_version
from .storage.base import AuthCheckerStorage

PIN_LENGTH = 6


def generate_pin(length: int = PIN_LENGTH) -> str:
    """Random numeric code for out-of-band device verification."""
    return "".join(secrets.choice("0123456789") for _ in range(length))


class DeviceRegistry:
    """Finds a user's known device for a request, creating one if needed.

    Matching is first-match over the user's devices in creation order: when
    several stored devices match, the oldest wins.

    Known gap:
        Two concurrent first logins from the same new device can both miss
        and create duplicate devices. Enforce a unique constraint on the
        matching columns in storage if that matters.
    """

    def __init__(
        self,
        storage: AuthCheckerStorage,
        matcher: DeviceMatcher,
        event_sink: EventSink,
        logger: LoggerProtocol,
    ):
        self.storage = storage
        self.matcher = matcher
        self.event_sink = event_sink
        self._logger = logger

    async def find_device(
        self, user: AuthenticatableUser, descriptor: AgentDescriptor
    ) -> Optional[DeviceBase]:
        """Return the first stored device matching the descriptor.

        Args:
            user: Device owner
            descriptor: Descriptor of the current request

        Returns:
            Matching device or None (no devices, or none match)
        """
        devices = await self.storage.list_devices(user.id)
        if not devices:
            return None

        for device in devices:
            if self.matcher.matches(device, descriptor):
                return device
        return None

    async def create_device(
        self, user: AuthenticatableUser, descriptor: AgentDescriptor
    ) -> DeviceBase:
        """Persist a new device built from the descriptor and announce it.

        Raises:
            PersistenceError: If the write fails (no event is published)
        """
        device = await self.storage.create_device(
            user.id,
            platform=descriptor.platform,
            platform_version=normalize_platform_version(descriptor.platform_version),
            browser=descriptor.browser,
            browser_version=descriptor.browser_version,
            is_desktop=descriptor.is_desktop,
            is_mobile=descriptor.is_mobile,
            language=descriptor.language,
            fingerprint=descriptor.session_fingerprint,
            ip_address=descriptor.ip_address,
            pin=generate_pin(),
        )

        self._logger.debug(
            "device_registered",
            user_id=str(user.id),
            device_id=str(device.id),  # type: ignore[attr-defined]
            device_info=device.device_info,
        )

        await self.event_sink.publish(DeviceCreated(device=device))
        return device

    async def find_or_create_device(
        self, user: AuthenticatableUser, descriptor: AgentDescriptor
    ) -> DeviceBase:
        """Return the matching device, creating it when none matches.

        Never returns None.
        """
        device = await self.find_device(user, descriptor)
        if device is None:
            device = await self.create_device(user, descriptor)
        return device
