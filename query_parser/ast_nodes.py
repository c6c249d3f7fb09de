"""
Abstract syntax tree nodes

Every node is a frozen dataclass whose fields are all mandatory, so a node
that exists is always fully populated. Sequences are stored as tuples.
``str(node)`` renders the node back to statement text.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Iterable, Tuple, Union

from catalog import ColumnType
from .errors import ASTBuildError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Operator(Enum):
    """Comparison operators allowed in a WHERE clause"""

    EQUALS = "="
    NOT_EQUALS = "!="
    GREATER = ">"
    GREATER_OR_EQUALS = ">="
    LESS = "<"
    LESS_OR_EQUALS = "<="


class QueryType(Enum):
    """Statement kinds recognized by the dispatcher"""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    CREATE_TABLE = "CREATE_TABLE"
    ALTER_TABLE = "ALTER_TABLE"
    DROP_TABLE = "DROP_TABLE"


def _freeze(node: Any, field_name: str, items: Iterable) -> None:
    object.__setattr__(node, field_name, tuple(items))


def _require_name(node: Any, field_name: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise ASTBuildError(
            f"{type(node).__name__}: '{field_name}' must be a non-empty name, got {value!r}"
        )


# Values
@dataclass(frozen=True)
class IntegerValue:
    """64-bit signed integer literal"""

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ASTBuildError(f"IntegerValue expects an int, got {self.value!r}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ASTBuildError(f"integer literal {self.value} is out of the 64-bit range")

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True, eq=False)
class FloatValue:
    """64-bit float literal.

    Equality is plain float comparison, so a NaN value is never equal to
    anything, itself included.
    """

    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((FloatValue, self.value))

    def __str__(self):
        # fixed-point with digits on both sides of '.', never exponent form
        if not math.isfinite(self.value):
            return repr(self.value)
        text = format(Decimal(repr(self.value)), "f")
        if "." not in text:
            text += ".0"
        return text


@dataclass(frozen=True)
class StringValue:
    value: str

    def __str__(self):
        return f"'{self.value}'"


@dataclass(frozen=True)
class BoolValue:
    value: bool

    def __str__(self):
        return "TRUE" if self.value else "FALSE"


Value = Union[IntegerValue, FloatValue, StringValue, BoolValue]


@dataclass(frozen=True)
class Condition:
    """``column operator value`` inside a WHERE clause"""

    column: str
    operator: Operator
    value: Value

    def __post_init__(self):
        _require_name(self, "column", self.column)

    def __str__(self):
        return f"{self.column} {self.operator.value} {self.value}"


@dataclass(frozen=True)
class Column:
    name: str
    column_type: ColumnType

    def __post_init__(self):
        _require_name(self, "name", self.name)

    def __str__(self):
        return f"{self.name} {self.column_type.value}"


@dataclass(frozen=True)
class PrimaryKey:
    """Partition key columns followed by clustering key columns"""

    partition_key: Tuple[str, ...]
    clustering_key: Tuple[str, ...]

    def __post_init__(self):
        _freeze(self, "partition_key", self.partition_key)
        _freeze(self, "clustering_key", self.clustering_key)
        if not self.partition_key:
            raise ASTBuildError("the partition key needs at least one column")
        names = self.partition_key + self.clustering_key
        if len(set(names)) != len(names):
            raise ASTBuildError(f"primary key columns must be distinct: {', '.join(names)}")

    def __str__(self):
        if len(self.partition_key) == 1:
            parts = list(self.partition_key)
        else:
            parts = [f"({', '.join(self.partition_key)})"]
        parts.extend(self.clustering_key)
        return f"PRIMARY KEY ({', '.join(parts)})"


# ALTER TABLE clauses
@dataclass(frozen=True)
class AddColumn:
    column_name: str
    column_type: ColumnType

    def __post_init__(self):
        _require_name(self, "column_name", self.column_name)

    def __str__(self):
        return f"ADD {self.column_name} {self.column_type.value}"


@dataclass(frozen=True)
class DropColumn:
    column_name: str

    def __post_init__(self):
        _require_name(self, "column_name", self.column_name)

    def __str__(self):
        return f"DROP {self.column_name}"


AlterTableCondition = Union[AddColumn, DropColumn]


def _render_where(conditions: Tuple[Condition, ...]) -> str:
    if not conditions:
        return ""
    return " WHERE " + " AND ".join(str(c) for c in conditions)


# Data manipulation
@dataclass(frozen=True)
class SelectQuery:
    """SELECT; empty ``columns`` means every column"""

    columns: Tuple[str, ...]
    table: str
    conditions: Tuple[Condition, ...]

    query_type: ClassVar[QueryType] = QueryType.SELECT

    def __post_init__(self):
        _freeze(self, "columns", self.columns)
        _freeze(self, "conditions", self.conditions)
        _require_name(self, "table", self.table)

    def __str__(self):
        cols = ", ".join(self.columns) if self.columns else "*"
        return f"SELECT {cols} FROM {self.table}{_render_where(self.conditions)}"


@dataclass(frozen=True)
class InsertQuery:
    """INSERT; ``values`` are aligned with ``columns`` by position only"""

    columns: Tuple[str, ...]
    table: str
    values: Tuple[Value, ...]

    query_type: ClassVar[QueryType] = QueryType.INSERT

    def __post_init__(self):
        _freeze(self, "columns", self.columns)
        _freeze(self, "values", self.values)
        _require_name(self, "table", self.table)

    def __str__(self):
        cols = ", ".join(self.columns)
        vals = ", ".join(str(v) for v in self.values)
        return f"INSERT INTO {self.table} ({cols}) VALUES ({vals})"


@dataclass(frozen=True)
class UpdateQuery:
    table: str
    values: Tuple[Tuple[str, Value], ...]
    conditions: Tuple[Condition, ...]

    query_type: ClassVar[QueryType] = QueryType.UPDATE

    def __post_init__(self):
        _freeze(self, "values", (tuple(pair) for pair in self.values))
        _freeze(self, "conditions", self.conditions)
        _require_name(self, "table", self.table)
        if not self.values:
            raise ASTBuildError("UPDATE needs at least one assignment")

    def __str__(self):
        assignments = ", ".join(f"{column} = {value}" for column, value in self.values)
        return f"UPDATE {self.table} SET {assignments}{_render_where(self.conditions)}"


@dataclass(frozen=True)
class DeleteQuery:
    """DELETE; empty ``columns`` deletes the whole row"""

    columns: Tuple[str, ...]
    table: str
    conditions: Tuple[Condition, ...]

    query_type: ClassVar[QueryType] = QueryType.DELETE

    def __post_init__(self):
        _freeze(self, "columns", self.columns)
        _freeze(self, "conditions", self.conditions)
        _require_name(self, "table", self.table)

    def __str__(self):
        cols = f" {', '.join(self.columns)}" if self.columns else ""
        return f"DELETE{cols} FROM {self.table}{_render_where(self.conditions)}"


# Data definition
@dataclass(frozen=True)
class CreateTableQuery:
    table: str
    primary_key: PrimaryKey
    columns: Tuple[Column, ...]

    query_type: ClassVar[QueryType] = QueryType.CREATE_TABLE

    def __post_init__(self):
        _freeze(self, "columns", self.columns)
        _require_name(self, "table", self.table)
        if not self.columns:
            raise ASTBuildError("CREATE TABLE needs at least one column")
        if not isinstance(self.primary_key, PrimaryKey):
            raise ASTBuildError(f"CreateTableQuery: invalid primary key {self.primary_key!r}")

    def __str__(self):
        defs = [str(c) for c in self.columns] + [str(self.primary_key)]
        return f"CREATE TABLE {self.table} ({', '.join(defs)})"


@dataclass(frozen=True)
class AlterTableQuery:
    table: str
    conditions: Tuple[AlterTableCondition, ...]

    query_type: ClassVar[QueryType] = QueryType.ALTER_TABLE

    def __post_init__(self):
        _freeze(self, "conditions", self.conditions)
        _require_name(self, "table", self.table)
        if not self.conditions:
            raise ASTBuildError("ALTER TABLE needs at least one ADD or DROP clause")

    def __str__(self):
        clauses = ", ".join(str(c) for c in self.conditions)
        return f"ALTER TABLE {self.table} {clauses}"


@dataclass(frozen=True)
class DropTableQuery:
    table: str

    query_type: ClassVar[QueryType] = QueryType.DROP_TABLE

    def __post_init__(self):
        _require_name(self, "table", self.table)

    def __str__(self):
        return f"DROP TABLE {self.table}"


DataManipulationQuery = Union[SelectQuery, InsertQuery, UpdateQuery, DeleteQuery]
DataDefinitionQuery = Union[CreateTableQuery, AlterTableQuery, DropTableQuery]
Query = Union[DataManipulationQuery, DataDefinitionQuery]

DATA_MANIPULATION_QUERIES = (SelectQuery, InsertQuery, UpdateQuery, DeleteQuery)
DATA_DEFINITION_QUERIES = (CreateTableQuery, AlterTableQuery, DropTableQuery)


def is_data_manipulation(query: Query) -> bool:
    return isinstance(query, DATA_MANIPULATION_QUERIES)


def is_data_definition(query: Query) -> bool:
    return isinstance(query, DATA_DEFINITION_QUERIES)
