"""Transport configuration and request models."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class GridConfig(BaseModel):
    endpoint: str = Field(description="The Grid GraphQL endpoint URL")
    api_key: Optional[str] = Field(
        default=None, description="Optional API key, sent as x-api-key"
    )
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Additional request headers"
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")

    @classmethod
    def from_env(
        cls,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        **kwargs: Any,
    ) -> "GridConfig":
        """Build a config, falling back to GRID_ENDPOINT / GRID_API_KEY / GRID_TIMEOUT."""
        endpoint = endpoint or os.getenv("GRID_ENDPOINT")
        if not endpoint:
            raise ValueError(
                "No Grid endpoint configured. Pass endpoint= or set GRID_ENDPOINT."
            )
        api_key = api_key or os.getenv("GRID_API_KEY")
        if "timeout" not in kwargs and os.getenv("GRID_TIMEOUT"):
            kwargs["timeout"] = float(os.environ["GRID_TIMEOUT"])
        return cls(endpoint=endpoint, api_key=api_key, **kwargs)

    def request_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        headers.update(self.headers)
        return headers


class GraphQLRequest(BaseModel):
    query: str
    variables: Optional[Dict[str, Any]] = None
    operation_name: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"query": self.query}
        if self.variables is not None:
            payload["variables"] = self.variables
        if self.operation_name:
            payload["operationName"] = self.operation_name
        return payload
