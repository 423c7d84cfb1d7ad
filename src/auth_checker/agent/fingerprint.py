"""Fallback device fingerprinting.

Clients should send a session-bound fingerprint (X-Device-Fingerprint).
When they don't, a fingerprint is derived from request metadata so the
"fingerprint" matching attribute still has something stable to compare.

Fingerprint Components:
- User-Agent header (browser, OS, version)
- Accept-Language header (preferred languages)
- Screen resolution (x-screen-resolution, sent by client)
- Timezone offset (x-timezone-offset, sent by client)

Security:
- SHA256 hash (64 hex characters), not reversible
- Cannot identify a user, only distinguish devices
"""

import hashlib
from collections.abc import Mapping


def generate_device_fingerprint(
    user_agent: str | None,
    accept_language: str | None,
    headers: Mapping[str, str] | None = None,
) -> str:
    """Generate SHA256 hash of device fingerprint from request metadata.

    Args:
        user_agent: User-Agent header value
        accept_language: Accept-Language header value
        headers: Other request headers (lower-case keys)

    Returns:
        SHA256 hash (64 hex characters)

    Notes:
        - Missing headers become empty components (still deterministic)
        - Same device/browser produces the same fingerprint
    """
    headers = headers or {}
    components = [
        user_agent or "",
        accept_language or "",
        headers.get("x-screen-resolution", ""),
        headers.get("x-timezone-offset", ""),
    ]

    fingerprint_string = "|".join(components)
    return hashlib.sha256(fingerprint_string.encode("utf-8")).hexdigest()
