"""
Where-clause builder for profileInfos queries — deterministic, no I/O.

Turns a FilterSelection into a BooleanExpression. The same builder is reused
by the facet compiler with one dimension excluded.

    where = build_profile_where(FilterSelection(types=["2"], search="sol"))
    await transport.execute(PROFILE_SEARCH_QUERY, {"where": where.to_where()})
"""

from __future__ import annotations

from typing import Any, List, Optional

from .expressions import BooleanExpression, FieldMatch, combine
from .models import Dimension, FilterSelection

IN_OPERATOR = "_in"
EQ_OPERATOR = "_eq"
CONTAINS_OPERATOR = "_contains"
SEARCH_FIELD = "name"


class ProfileWhereBuilder:
    """Builds where expressions over the four dimensions plus name search."""

    def conditions(
        self,
        selection: Any,
        *,
        exclude: Optional[Dimension] = None,
    ) -> List[FieldMatch]:
        """Return the active predicates in dimension order, search last."""
        selection = FilterSelection.coerce(selection)
        if exclude is not None:
            selection = selection.without(exclude)
        conditions: List[FieldMatch] = []

        for dimension in Dimension:
            values = selection.values_for(dimension)
            if values:
                conditions.append(membership(dimension, values))

        search = selection.normalized_search
        if search is not None:
            conditions.append(
                FieldMatch(path=SEARCH_FIELD, operator=CONTAINS_OPERATOR, value=search)
            )

        return conditions

    def build(
        self,
        selection: Any,
        *,
        exclude: Optional[Dimension] = None,
    ) -> BooleanExpression:
        return combine(self.conditions(selection, exclude=exclude))


def membership(dimension: Dimension, values: List[Any]) -> FieldMatch:
    return FieldMatch(path=dimension.field_path, operator=IN_OPERATOR, value=list(values))


def equality(dimension: Dimension, value: Any) -> FieldMatch:
    return FieldMatch(path=dimension.field_path, operator=EQ_OPERATOR, value=value)


def build_profile_where(selection: Any = None) -> BooleanExpression:
    """Build a where expression for profileInfos queries."""
    return ProfileWhereBuilder().build(selection)
