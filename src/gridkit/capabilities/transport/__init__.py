"""Transport capability exports."""

from .base import GraphQLTransport, GridTransportError
from .models import GraphQLRequest, GridConfig

__all__ = [
    "GraphQLTransport",
    "GridTransportError",
    "GraphQLRequest",
    "GridConfig",
]
