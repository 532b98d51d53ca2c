"""HTTP integration.

Environment variables (used when no GridConfig is passed):
  - GRID_ENDPOINT
  - GRID_API_KEY (optional; sent as x-api-key)
  - GRID_TIMEOUT (optional; seconds, defaults to 30)
"""

from .transport import HttpxGraphQLTransport

__all__ = ["HttpxGraphQLTransport"]
