"""Auth checker domain models.

Exports:
    - DeviceBase, LoginBase: Abstract interfaces for persisted records
    - LoginType: Kind of authentication outcome
    - AgentDescriptor, RequestContext: Request-derived value objects
"""

from .base import AuthenticatableUser, DeviceBase, LoginBase, LoginType
from .descriptor import AgentDescriptor, RequestContext

__all__ = [
    "AgentDescriptor",
    "AuthenticatableUser",
    "DeviceBase",
    "LoginBase",
    "LoginType",
    "RequestContext",
]
