"""
Facet Compiler — cross-filtered facet counts in a single aggregate query.

For every option O of every dimension D the compiler emits one aliased
aggregate whose where clause is "all other active filters AND D == O", so a
dimension's own selection never suppresses its sibling options. A ``total``
alias carries the full selection. The returned decoder maps the flat
alias -> {_count} response back onto option ids.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .expressions import BooleanExpression, combine
from .filters import ProfileWhereBuilder, equality
from .literals import render_where
from .models import Dimension, FacetCountTable, FilterMetadata, FilterOption, FilterSelection
from .queries import FACET_AGGREGATE_FIELD, FACET_OPERATION_NAME

logger = logging.getLogger(__name__)

TOTAL_ALIAS = "total"

FacetOptions = Dict[Dimension, Tuple[FilterOption, ...]]


@dataclass(frozen=True)
class CompiledFacetQuery:
    """Query text plus the decoder bound to the option lists it was built from."""

    query_text: str
    aliases: Tuple[str, ...]
    options: FacetOptions = field(repr=False)
    decode: Callable[[Optional[Mapping[str, Any]]], FacetCountTable] = field(
        repr=False, compare=False
    )


class FacetCompiler:
    """Deterministic compiler for cross-filtered facet-count queries."""

    def __init__(
        self,
        *,
        aggregate_field: str = FACET_AGGREGATE_FIELD,
        operation_name: str = FACET_OPERATION_NAME,
        builder: Optional[ProfileWhereBuilder] = None,
    ) -> None:
        self.aggregate_field = aggregate_field
        self.operation_name = operation_name
        self._builder = builder or ProfileWhereBuilder()

    def compile(self, selection: Any, catalog: Any) -> CompiledFacetQuery:
        selection = FilterSelection.coerce(selection)
        options = facet_options(FilterMetadata.coerce(catalog))

        fields: List[Tuple[str, BooleanExpression]] = []
        for dimension in Dimension:
            others = self._builder.conditions(selection, exclude=dimension)
            for index, option in enumerate(options[dimension]):
                expression = combine([*others, equality(dimension, option.id)])
                fields.append((dimension.alias(index), expression))

        fields.append((TOTAL_ALIAS, self._builder.build(selection)))

        lines = [f"query {self.operation_name} {{"]
        lines.extend(self._render_field(alias, expr) for alias, expr in fields)
        lines.append("}")
        query_text = "\n".join(lines)

        logger.debug(
            "Compiled facet query %s with %d aliases", self.operation_name, len(fields)
        )

        def decode(raw: Optional[Mapping[str, Any]]) -> FacetCountTable:
            return decode_facet_counts(options, raw)

        return CompiledFacetQuery(
            query_text=query_text,
            aliases=tuple(alias for alias, _ in fields),
            options=options,
            decode=decode,
        )

    def _render_field(self, alias: str, expression: BooleanExpression) -> str:
        where = render_where(expression)
        return (
            f"  {alias}: {self.aggregate_field}"
            f"(filter_input: {{ where: {where} }}) {{ _count }}"
        )


def facet_options(catalog: FilterMetadata) -> FacetOptions:
    """Placeholder-free option lists per dimension, in catalog order."""
    return {
        dimension: tuple(
            option
            for option in catalog.options_for(dimension)
            if not option.is_placeholder
        )
        for dimension in Dimension
    }


def decode_facet_counts(
    options: FacetOptions, raw: Optional[Mapping[str, Any]]
) -> FacetCountTable:
    """Map an alias -> {_count} response onto option ids; missing aliases count 0."""
    payload: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    if TOTAL_ALIAS not in payload and isinstance(payload.get("data"), Mapping):
        payload = payload["data"]

    counts: Dict[str, Dict[str, int]] = {}
    for dimension in Dimension:
        counts[dimension.value] = {
            option.id: _read_count(payload.get(dimension.alias(index)))
            for index, option in enumerate(options.get(dimension, ()))
        }

    return FacetCountTable(**counts, total=_read_count(payload.get(TOTAL_ALIAS)))


def _read_count(entry: Any) -> int:
    if not isinstance(entry, Mapping):
        return 0
    value = entry.get("_count")
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def compile_facets(selection: Any, catalog: Any) -> CompiledFacetQuery:
    """Compile a facet query with the default aggregate field and operation name."""
    return FacetCompiler().compile(selection, catalog)
