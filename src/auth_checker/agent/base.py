"""Agent extractor abstract interface.

An agent extractor turns raw request metadata into the AgentDescriptor the
device matcher compares against stored devices.
"""

from abc import ABC, abstractmethod

from ..models.descriptor import AgentDescriptor, RequestContext


class AgentExtractor(ABC):
    """Abstract interface for agent descriptor extraction.

    Implementations:
        - UserAgentExtractor: user-agents library + Accept-Language parsing

    Contract:
        - platform and browser are never None ("Other" when unknown)
        - platform_version is normalized to "0" when unknown
        - browser_version is "" when unknown
        - Never raises on malformed input (fail-open)
    """

    @abstractmethod
    async def extract(self, context: RequestContext) -> AgentDescriptor:
        """Build the descriptor for one request.

        Args:
            context: Raw request metadata

        Returns:
            AgentDescriptor for the request
        """
        pass
