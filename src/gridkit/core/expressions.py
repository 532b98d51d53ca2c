"""Boolean expression tree for Hasura-style where clauses."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldMatch(BaseModel):
    """Leaf predicate: ``<path>: { <operator>: <value> }``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["field"] = "field"
    path: str
    operator: str
    value: Any = None

    def to_where(self) -> Dict[str, Any]:
        node: Dict[str, Any] = {self.operator: self.value}
        for part in reversed(self.path.split(".")):
            node = {part: node}
        return node


class And(BaseModel):
    """Conjunction of two or more sub-expressions, in order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["and"] = "and"
    conditions: List[BooleanExpression]

    @field_validator("conditions")
    @classmethod
    def _at_least_two(cls, value: List[Any]) -> List[Any]:
        if len(value) < 2:
            raise ValueError("And requires at least two conditions; use combine()")
        return value

    def to_where(self) -> Dict[str, Any]:
        return {"_and": [condition.to_where() for condition in self.conditions]}


class Empty(BaseModel):
    """Matches everything."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"

    def to_where(self) -> Dict[str, Any]:
        return {}


BooleanExpression = Annotated[
    Union[FieldMatch, And, Empty], Field(discriminator="kind")
]

And.model_rebuild()


def combine(conditions: Sequence[BooleanExpression]) -> BooleanExpression:
    """Collapse a condition list: none -> Empty, one -> itself, more -> And."""
    if not conditions:
        return Empty()
    if len(conditions) == 1:
        return conditions[0]
    return And(conditions=list(conditions))
