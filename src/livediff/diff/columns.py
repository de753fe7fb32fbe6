"""Column projection resolution.

Determines which columns participate in entry comparison: the explicit
projection when there is one, otherwise every column of every source
table followed by the joined table's columns.
"""

from __future__ import annotations

from livediff.models import Column, SelectQuery


def detect_columns(query: SelectQuery) -> list[Column]:
    """Return the columns present in each result entry of *query*.

    An explicit projection is returned unchanged (as a new list, in the
    same order).  For a select-all query the columns of the ``FROM``
    tables are concatenated in table order, then those of the inner-join
    table.  Columns are not deduplicated.
    """
    if query.columns:
        return list(query.columns)

    tables = list(query.from_tables)
    if query.inner_join is not None:
        tables.append(query.inner_join)

    columns: list[Column] = []
    for table in tables:
        columns.extend(table.columns())
    return columns
