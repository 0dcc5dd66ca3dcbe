"""SQL fragment builders shared by the repositories."""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple, Optional

from app.domain.exceptions import BadRequestError


class PartialUpdate(NamedTuple):
    """Assignment list for an ``UPDATE ... SET`` and its bound values."""

    set_cols: str
    values: list[Any]


def sql_for_partial_update(
    data: Mapping[str, Any],
    column_map: Optional[Mapping[str, str]] = None,
) -> PartialUpdate:
    """Translate a sparse field mapping into a parameterized SET clause.

    Fields missing from ``column_map`` are written to a column of the same
    name. Placeholders are numbered from ``$1`` in the iteration order of
    ``data``, matching the order of the returned values::

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        PartialUpdate(set_cols='"first_name"=$1, "age"=$2', values=['Aliya', 32])

    Column names are quoted but not escaped; they must come from a fixed
    internal map, never from request input.

    Raises:
        BadRequestError: if ``data`` is empty.
    """
    if not data:
        raise BadRequestError("No data")

    column_map = column_map or {}
    cols = [
        f'"{column_map.get(field, field)}"=${idx}'
        for idx, field in enumerate(data, start=1)
    ]
    return PartialUpdate(set_cols=", ".join(cols), values=list(data.values()))


class WhereClause:
    """Accumulates AND-ed predicates with positional placeholders.

    Placeholders are numbered after ``offset`` existing parameters, so a
    clause can be appended to a statement that already binds values.
    """

    def __init__(self, offset: int = 0) -> None:
        self._offset = offset
        self._predicates: list[str] = []
        self.values: list[Any] = []

    def add(self, template: str, *values: Any) -> "WhereClause":
        """Add a predicate; each ``{}`` in ``template`` becomes the next ``$n``."""
        placeholders = []
        for value in values:
            self.values.append(value)
            placeholders.append(f"${self._offset + len(self.values)}")
        self._predicates.append(template.format(*placeholders))
        return self

    def __bool__(self) -> bool:
        return bool(self._predicates)

    def __str__(self) -> str:
        if not self._predicates:
            return ""
        return " WHERE " + " AND ".join(self._predicates)
