"""GraphQL transport over HTTP using httpx.

Sends ``{"query", "variables", "operationName"}`` as a JSON POST and returns
the ``data`` member of the response. Every failure mode (network error,
HTTP error status, non-JSON body, GraphQL ``errors`` array, missing ``data``)
is raised as :class:`GridTransportError` with the upstream message(s).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from gridkit.capabilities.transport import (
    GraphQLRequest,
    GraphQLTransport,
    GridConfig,
    GridTransportError,
)
from gridkit.core.query_keys import extract_operation_name

logger = logging.getLogger(__name__)


class HttpxGraphQLTransport(GraphQLTransport):
    """httpx-backed transport.

    Args:
        config: Endpoint and headers; falls back to ``GridConfig.from_env()``.
        client: Optional pre-built ``httpx.AsyncClient``. When omitted the
            transport creates one lazily and closes it in ``aclose()``.
    """

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or GridConfig.from_env()
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
        return self._client

    async def execute(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        request = GraphQLRequest(
            query=query,
            variables=variables,
            operation_name=extract_operation_name(query),
        )
        operation = request.operation_name or "anonymous"
        logger.debug("Executing GraphQL operation %s", operation)

        try:
            response = await self._get_client().post(
                self.config.endpoint,
                json=request.to_payload(),
                headers=self.config.request_headers(),
            )
        except httpx.HTTPError as e:
            raise GridTransportError(
                [f"Request to {self.config.endpoint} failed: {e}"]
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise GridTransportError(
                [f"HTTP {response.status_code}: response body is not valid JSON"],
                status_code=response.status_code,
            ) from e

        messages = _error_messages(body)
        if response.is_error:
            raise GridTransportError(
                messages or [f"HTTP {response.status_code}: {response.reason_phrase}"],
                status_code=response.status_code,
            )
        if messages:
            raise GridTransportError(messages, status_code=response.status_code)

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise GridTransportError(
                [f"Operation {operation} returned no data"],
                status_code=response.status_code,
            )
        return data

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxGraphQLTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _error_messages(body: Any) -> List[str]:
    if not isinstance(body, dict):
        return []
    errors = body.get("errors")
    if not errors:
        return []
    if not isinstance(errors, list):
        errors = [errors]
    messages: List[str] = []
    for error in errors:
        if isinstance(error, dict) and error.get("message"):
            messages.append(str(error["message"]))
        else:
            messages.append(str(error))
    return messages
