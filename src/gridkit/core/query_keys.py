"""Deterministic cache keys for Grid queries.

Keys are plain tuples. Variables are canonicalised to sorted-key JSON so that
structurally equal variables always produce equal keys.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional, Tuple

_OPERATION_NAME_RE = re.compile(r"(?:query|mutation|subscription)\s+(\w+)")


def extract_operation_name(query: str) -> Optional[str]:
    """Return the operation name of a GraphQL document, or None if anonymous."""
    match = _OPERATION_NAME_RE.search(query or "")
    return match.group(1) if match else None


def _canonical(variables: Optional[Dict[str, Any]]) -> Optional[str]:
    if variables is None:
        return None
    return json.dumps(variables, sort_keys=True, separators=(",", ":"), default=str)


class GridKeys:
    ROOT = "grid"

    def all(self) -> Tuple[str, ...]:
        return (self.ROOT,)

    def graphql(
        self, op_name: str, variables: Optional[Dict[str, Any]] = None
    ) -> Tuple[Any, ...]:
        return (*self.all(), "graphql", op_name, _canonical(variables))

    def companies(self) -> Tuple[str, ...]:
        return (*self.all(), "company")

    def company(self, company_id: str) -> Tuple[str, ...]:
        return (*self.companies(), company_id)

    def searches(self) -> Tuple[str, ...]:
        return (*self.all(), "search")

    def search(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Tuple[Any, ...]:
        return (*self.searches(), query, _canonical(variables))

    def for_query(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Tuple[Any, ...]:
        """Key a raw document by its operation name ("anonymous" if unnamed)."""
        return self.graphql(extract_operation_name(query) or "anonymous", variables)


grid_keys = GridKeys()
