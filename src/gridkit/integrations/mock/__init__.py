from .transport import MockGraphQLTransport

__all__ = ["MockGraphQLTransport"]
