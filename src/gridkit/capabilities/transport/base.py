"""GraphQL transport interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional


class GridTransportError(Exception):
    """Raised when a GraphQL request fails at the network, HTTP or GraphQL level."""

    def __init__(
        self, messages: Iterable[str], *, status_code: Optional[int] = None
    ) -> None:
        self.messages = [str(message) for message in messages] or ["Unknown error"]
        self.status_code = status_code
        super().__init__("; ".join(self.messages))


class GraphQLTransport(ABC):
    """Executes GraphQL documents against a Grid endpoint."""

    @abstractmethod
    async def execute(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Send a document and return its ``data`` payload.

        Raises GridTransportError on any failure.
        """
        pass
