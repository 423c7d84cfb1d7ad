"""Auth Checker Package.

A framework-agnostic package that watches authentication outcomes and
correlates them with the device a request came from.

Every login, failed attempt and lockout is attached to a Device record
(found by matching the request's user agent, platform and session
fingerprint against the user's known devices) and written as a Login
record enriched with best-effort IP geolocation.

Key Features:
    - Configurable conjunctive device matching
    - Login throttling per device
    - Pluggable storage (database, memory) and geolocation (MaxMind, none)
    - Domain events for downstream listeners (notifications, audit)
    - Framework adapter (FastAPI)

Usage:
    ```python
    from src.auth_checker.factory import get_auth_checker
    from src.auth_checker.models.config import AuthCheckerConfig
    from src.models.device import Device
    from src.models.login import Login
    from src.models.user import User

    checker = get_auth_checker(
        config=AuthCheckerConfig(throttle=10),
        db_session=db_session,
        device_model=Device,
        login_model=Login,
        user_model=User,
    )
    await checker.on_login(user, context)
    ```
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
