"""Agent descriptor extraction.

Extractors:
    - UserAgentExtractor: Parses User-Agent (user-agents library) and Accept-Language
"""

from .base import AgentExtractor
from .fingerprint import generate_device_fingerprint
from .user_agent import UserAgentExtractor, parse_accept_language

__all__ = [
    "AgentExtractor",
    "UserAgentExtractor",
    "generate_device_fingerprint",
    "parse_accept_language",
]
