"""Public data models for the livediff engine.

This module contains the schema descriptors (columns, tables, select
queries), the result-set types (rows, relation entries, relations), the
diff plan types, and the collaborator protocols the engine is written
against.  Host query engines are free to supply their own objects as long
as they satisfy the protocols.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class DataType(str, Enum):
    """Column data types understood by the built-in evaluator registry."""

    BOOLEAN = "boolean"
    DATE_TIME = "date_time"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"
    """Raw binary values (``bytes`` / ``bytearray``)."""

    OBJECT = "object"
    """Arbitrary structured values compared with ``==``."""


class EvalType(str, Enum):
    """Operator kinds an evaluator can be registered for."""

    EQ = "eq"
    NEQ = "neq"
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"
    BETWEEN = "between"
    IN = "in"
    MATCH = "match"


class DiffOpType(str, Enum):
    """Operation types emitted by the diff planner.

    There is deliberately no ``UPDATE``: a changed entry is always
    represented as a ``DELETE`` of the old one plus an ``INSERT`` of the
    new one.
    """

    DELETE = "delete"
    """Remove one element from the observed sequence."""

    INSERT = "insert"
    """Insert one payload into the observed sequence."""


# ---------------------------------------------------------------------------
# Collaborator protocols
# ---------------------------------------------------------------------------

Evaluator = Callable[..., bool]


@runtime_checkable
class EqualityRegistry(Protocol):
    """Anything that can resolve an evaluator for a data type and operator."""

    def get_evaluator(self, data_type: DataType, eval_type: EvalType) -> Evaluator:
        ...


@runtime_checkable
class TableLike(Protocol):
    """A source table exposing its columns in declaration order."""

    def columns(self) -> Sequence[Column]:
        ...


@runtime_checkable
class EntryLike(Protocol):
    """One row of a result set."""

    def get_field(self, column: Column) -> Any:
        ...

    def payload(self) -> Any:
        ...


@runtime_checkable
class ResultLike(Protocol):
    """An ordered result set."""

    @property
    def entries(self) -> Sequence[Any]:
        ...


# ---------------------------------------------------------------------------
# Schema descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Column:
    """Descriptor of a projected field.

    Attributes
    ----------
    name:
        Column name as stored in a row payload.
    data_type:
        Data type used to pick the equality evaluator.
    table_name:
        Effective name of the owning table; used to read the value from a
        prefixed (joined) payload.
    alias:
        Optional projection alias.  When a payload carries this key the
        value is read from it directly.
    """

    name: str
    data_type: DataType
    table_name: str = ""
    alias: str | None = None

    def get_name(self) -> str:
        return self.name

    def get_type(self) -> DataType:
        return self.data_type

    def get_table_name(self) -> str:
        return self.table_name

    def get_alias(self) -> str | None:
        return self.alias

    def get_normalized_name(self) -> str:
        """Return ``table.column`` (or just the column when table-less)."""
        if self.table_name:
            return f"{self.table_name}.{self.name}"
        return self.name


class Table:
    """A table schema: a name, an optional alias and ordered columns.

    Column specs may be given either as ready :class:`Column` objects or as
    ``(name, data_type)`` pairs; the latter are bound to this table's
    effective name.
    """

    def __init__(
        self,
        name: str,
        columns: Iterable[Column | tuple[str, DataType]] = (),
        alias: str | None = None,
    ) -> None:
        self.name = name
        self.alias = alias
        effective = alias or name
        self._columns: tuple[Column, ...] = tuple(
            col if isinstance(col, Column) else Column(col[0], col[1], effective)
            for col in columns
        )

    def get_name(self) -> str:
        return self.name

    def get_effective_name(self) -> str:
        return self.alias or self.name

    def columns(self) -> tuple[Column, ...]:
        return self._columns

    def column(self, name: str) -> Column:
        """Look up a column by name."""
        for col in self._columns:
            if col.name == name:
                return col
        raise KeyError(f"table {self.name!r} has no column {name!r}")

    def as_(self, alias: str) -> Table:
        """Return a copy of this table bound to *alias*."""
        return Table(
            self.name,
            [(col.name, col.data_type) for col in self._columns],
            alias=alias,
        )

    def __repr__(self) -> str:
        cols = ", ".join(col.name for col in self._columns)
        suffix = f" AS {self.alias}" if self.alias else ""
        return f"Table({self.name}{suffix}: {cols})"


@dataclass
class SelectQuery:
    """The projection part of a select query.

    Attributes
    ----------
    columns:
        Explicitly projected columns.  Empty means "select all".
    from_tables:
        Source tables in ``FROM`` order.
    inner_join:
        Optional single joined table.
    """

    columns: list[Column] = field(default_factory=list)
    from_tables: list[Any] = field(default_factory=list)
    inner_join: Any | None = None


# ---------------------------------------------------------------------------
# Result sets
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Row:
    """A stored row: an id plus the raw payload handed to observers.

    Compared by identity only; two rows carrying equal payloads are still
    distinct rows.
    """

    row_id: int
    value: dict[str, Any]

    def payload(self) -> dict[str, Any]:
        return self.value


class RelationEntry:
    """One entry of a :class:`Relation`, wrapping a :class:`Row`.

    Parameters
    ----------
    row:
        The wrapped row.
    is_prefix_applied:
        ``True`` when the row payload is nested per table (the shape
        produced by joins), i.e. ``{"table": {"column": value}}``.
    """

    __slots__ = ("is_prefix_applied", "row")

    def __init__(self, row: Row, is_prefix_applied: bool = False) -> None:
        self.row = row
        self.is_prefix_applied = is_prefix_applied

    def get_field(self, column: Column) -> Any:
        value = self.row.payload()
        alias = column.get_alias()
        if alias is not None and alias in value:
            return value[alias]
        if self.is_prefix_applied:
            return value.get(column.get_table_name(), {}).get(column.get_name())
        return value.get(column.get_name())

    def payload(self) -> Any:
        return self.row.payload()

    def __repr__(self) -> str:
        return f"RelationEntry(row_id={self.row.row_id}, payload={self.row.payload()!r})"


class Relation:
    """An ordered, immutable result set."""

    __slots__ = ("entries", "table_names")

    def __init__(
        self,
        entries: Iterable[Any],
        table_names: Iterable[str] = (),
    ) -> None:
        self.entries: tuple[Any, ...] = tuple(entries)
        self.table_names: frozenset[str] = frozenset(table_names)

    @classmethod
    def from_rows(cls, rows: Iterable[Row], table_names: Iterable[str] = ()) -> Relation:
        """Wrap plain (non-prefixed) rows into a relation."""
        names = list(table_names)
        prefixed = len(names) > 1
        return cls(
            (RelationEntry(row, is_prefix_applied=prefixed) for row in rows),
            names,
        )

    @classmethod
    def create_empty(cls) -> Relation:
        return cls(())

    def is_empty(self) -> bool:
        return not self.entries

    def payloads(self) -> list[Any]:
        return [entry.payload() for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Relation({len(self.entries)} entries)"


# ---------------------------------------------------------------------------
# Diff engine types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DiffOp:
    """A single positional mutation in a diff plan.

    Attributes
    ----------
    op_type:
        ``DELETE`` or ``INSERT``.
    position:
        Index in the observed sequence at the moment the op is applied
        (plans are applied strictly in order).
    index:
        Index of the originating entry: into the old result for
        ``DELETE``, into the new result for ``INSERT``.
    payload:
        The payload inserted (``INSERT``) or expected to be removed
        (``DELETE``).
    """

    op_type: DiffOpType
    position: int
    index: int
    payload: Any = None


@dataclass
class DiffResult:
    """Summary of one :meth:`DiffEngine.apply_diff` call.

    Attributes
    ----------
    entries_kept:
        Entries matched by the LCS; their positions were left untouched.
    entries_inserted:
        Single-element insertions applied to the observed sequence.
    entries_deleted:
        Single-element deletions applied to the observed sequence.
    ops:
        The executed plan, in application order.
    """

    entries_kept: int
    entries_inserted: int
    entries_deleted: int
    ops: list[DiffOp] = field(default_factory=list)

    @property
    def mutations(self) -> int:
        return self.entries_inserted + self.entries_deleted
