"""Device matching.

Decides whether a stored device is the device a request came from by
comparing a configured set of attributes.

Matching Rules:
    - Conjunction: every configured attribute must be equal
    - Exact string equality, no fuzzy or partial scoring
    - A None on either side is an inequality (except platform_version)
    - Unknown attribute names are an inequality
    - An empty attribute set matches every device
    - platform_version is normalized on both sides ("" / None -> "0")
"""

from collections.abc import Callable, Iterable
from typing import Any

from .models.base import DeviceBase
from .models.descriptor import AgentDescriptor, normalize_platform_version

# attribute name -> (device field, descriptor accessor)
_ATTRIBUTE_GETTERS: dict[str, tuple[str, Callable[[AgentDescriptor], Any]]] = {
    "platform": ("platform", lambda d: d.platform),
    "platform_version": (
        "platform_version",
        lambda d: normalize_platform_version(d.platform_version),
    ),
    "browser": ("browser", lambda d: d.browser),
    "browser_version": ("browser_version", lambda d: d.browser_version),
    "fingerprint": ("fingerprint", lambda d: d.session_fingerprint),
    "language": ("language", lambda d: d.language),
    "ip": ("ip_address", lambda d: d.ip_address),
}


class DeviceMatcher:
    """Compares stored devices with request descriptors.

    Args:
        attributes: Default attribute set used when matches() is called
            without one (normally config.device_matching_attributes).

    Example:
        >>> matcher = DeviceMatcher({"platform", "browser"})
        >>> matcher.matches(device, descriptor)
        True
    """

    def __init__(self, attributes: Iterable[str]):
        self.attributes = frozenset(attributes)

    def matches(
        self,
        device: DeviceBase,
        descriptor: AgentDescriptor,
        attributes: Iterable[str] | None = None,
    ) -> bool:
        """Check that every configured attribute is equal on both sides.

        Args:
            device: Stored device
            descriptor: Descriptor of the current request
            attributes: Override of the configured attribute set

        Returns:
            True if all attributes match (vacuously True for an empty set)
        """
        names = self.attributes if attributes is None else frozenset(attributes)
        return all(self._attribute_matches(device, descriptor, name) for name in names)

    def _attribute_matches(
        self, device: DeviceBase, descriptor: AgentDescriptor, name: str
    ) -> bool:
        getter = _ATTRIBUTE_GETTERS.get(name)
        if getter is None:
            return False

        field_name, descriptor_value = getter
        stored = getattr(device, field_name, None)
        current = descriptor_value(descriptor)
        if name == "platform_version":
            stored = normalize_platform_version(stored)

        if stored is None or current is None:
            return False
        return str(stored) == str(current)
