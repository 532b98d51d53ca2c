"""Mock GraphQL transport used as a golden reference implementation."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from gridkit.capabilities.transport import (
    GraphQLRequest,
    GraphQLTransport,
    GridTransportError,
)
from gridkit.core.query_keys import extract_operation_name

MockResponse = Union[Dict[str, Any], Exception]


class MockGraphQLTransport(GraphQLTransport):
    """Records every request and answers from a queue or a responder callable.

    Queued (or returned) exceptions are raised instead of returned.
    """

    def __init__(
        self,
        responses: Optional[Iterable[MockResponse]] = None,
        *,
        responder: Optional[Callable[[GraphQLRequest], MockResponse]] = None,
    ):
        self.requests: List[GraphQLRequest] = []
        self._responses: List[MockResponse] = list(responses or [])
        self._responder = responder

    def queue(self, response: MockResponse) -> None:
        self._responses.append(response)

    async def execute(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        request = GraphQLRequest(
            query=query,
            variables=variables,
            operation_name=extract_operation_name(query),
        )
        self.requests.append(request)

        if self._responder is not None:
            result = self._responder(request)
        elif self._responses:
            result = self._responses.pop(0)
        else:
            raise GridTransportError(
                [f"No mock response queued for {request.operation_name or 'anonymous'}"]
            )

        if isinstance(result, Exception):
            raise result
        return result
