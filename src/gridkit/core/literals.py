"""GraphQL literal values and their inline text rendering.

Aggregate facet queries carry one independent where clause per alias, so the
clauses are inlined as literal argument text instead of bound variables.
Values are first converted into a closed set of literal kinds and then
rendered by a single recursive function.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

from pydantic import BaseModel

from .expressions import And, BooleanExpression, Empty, FieldMatch


@dataclass(frozen=True)
class NullLiteral:
    pass


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class NumberLiteral:
    value: Union[int, float]


@dataclass(frozen=True)
class BoolLiteral:
    value: bool


@dataclass(frozen=True)
class ListLiteral:
    items: Tuple["GraphQLLiteral", ...]


@dataclass(frozen=True)
class ObjectLiteral:
    fields: Tuple[Tuple[str, "GraphQLLiteral"], ...]


GraphQLLiteral = Union[
    NullLiteral, StringLiteral, NumberLiteral, BoolLiteral, ListLiteral, ObjectLiteral
]


def to_literal(value: Any) -> GraphQLLiteral:
    """Convert a JSON-like Python value into a literal. Never raises."""
    if value is None:
        return NullLiteral()
    # bool is a subclass of int
    if isinstance(value, bool):
        return BoolLiteral(value)
    if isinstance(value, (int, float)):
        return NumberLiteral(value)
    if isinstance(value, str):
        return StringLiteral(value)
    if isinstance(value, (FieldMatch, And, Empty)):
        return to_literal(value.to_where())
    if isinstance(value, BaseModel):
        return to_literal(value.model_dump(by_alias=True))
    if isinstance(value, Mapping):
        return ObjectLiteral(
            tuple((str(key), to_literal(item)) for key, item in value.items())
        )
    if isinstance(value, (set, frozenset)):
        # Sets have no stable order; sort so equal inputs render identically.
        return ListLiteral(tuple(to_literal(item) for item in sorted(value, key=repr)))
    if isinstance(value, (list, tuple)):
        return ListLiteral(tuple(to_literal(item) for item in value))
    return StringLiteral(str(value))


def _render_number(value: Union[int, float]) -> str:
    if isinstance(value, float):
        if not math.isfinite(value):
            return "null"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def render(literal: GraphQLLiteral) -> str:
    if isinstance(literal, NullLiteral):
        return "null"
    if isinstance(literal, StringLiteral):
        return json.dumps(literal.value, ensure_ascii=False)
    if isinstance(literal, BoolLiteral):
        return "true" if literal.value else "false"
    if isinstance(literal, NumberLiteral):
        return _render_number(literal.value)
    if isinstance(literal, ListLiteral):
        return "[" + ", ".join(render(item) for item in literal.items) + "]"
    if isinstance(literal, ObjectLiteral):
        if not literal.fields:
            return "{}"
        body = ", ".join(f"{key}: {render(item)}" for key, item in literal.fields)
        return "{ " + body + " }"
    raise TypeError(f"Unknown literal kind: {type(literal).__name__}")


def render_literal(value: Any) -> str:
    """Render any JSON-like value as inline GraphQL argument text."""
    return render(to_literal(value))


def render_where(expression: BooleanExpression) -> str:
    return render(to_literal(expression.to_where()))
