"""
Fluent builders for AST nodes

Required fields start unset; ``build()`` raises ``IncompleteNodeError``
for the first one still missing. List fields start empty and may be
filled one item at a time or extended in bulk.
"""

from typing import Iterable, List, Optional, Tuple

from catalog import ColumnType
from .ast_nodes import (
    AddColumn,
    AlterTableCondition,
    AlterTableQuery,
    Column,
    Condition,
    CreateTableQuery,
    DeleteQuery,
    DropColumn,
    DropTableQuery,
    InsertQuery,
    Operator,
    PrimaryKey,
    SelectQuery,
    UpdateQuery,
    Value,
)
from .errors import IncompleteNodeError


def _required(node: str, field: str, value):
    if value is None:
        raise IncompleteNodeError(node, field)
    return value


class ColumnBuilder:
    def __init__(self):
        self._name: Optional[str] = None
        self._column_type: Optional[ColumnType] = None

    def name(self, name: str) -> "ColumnBuilder":
        self._name = name
        return self

    def column_type(self, column_type: ColumnType) -> "ColumnBuilder":
        self._column_type = column_type
        return self

    def build(self) -> Column:
        return Column(
            name=_required("Column", "name", self._name),
            column_type=_required("Column", "column_type", self._column_type),
        )


class ConditionBuilder:
    def __init__(self):
        self._column: Optional[str] = None
        self._operator: Optional[Operator] = None
        self._value: Optional[Value] = None

    def column(self, column: str) -> "ConditionBuilder":
        self._column = column
        return self

    def operator(self, operator: Operator) -> "ConditionBuilder":
        self._operator = operator
        return self

    def value(self, value: Value) -> "ConditionBuilder":
        self._value = value
        return self

    def build(self) -> Condition:
        return Condition(
            column=_required("Condition", "column", self._column),
            operator=_required("Condition", "operator", self._operator),
            value=_required("Condition", "value", self._value),
        )


class SelectQueryBuilder:
    def __init__(self):
        self._columns: List[str] = []
        self._table: Optional[str] = None
        self._conditions: List[Condition] = []

    def column(self, column: str) -> "SelectQueryBuilder":
        self._columns.append(column)
        return self

    def columns(self, columns: Iterable[str]) -> "SelectQueryBuilder":
        self._columns.extend(columns)
        return self

    def table(self, table: str) -> "SelectQueryBuilder":
        self._table = table
        return self

    def condition(self, condition: Condition) -> "SelectQueryBuilder":
        self._conditions.append(condition)
        return self

    def conditions(self, conditions: Iterable[Condition]) -> "SelectQueryBuilder":
        self._conditions.extend(conditions)
        return self

    def build(self) -> SelectQuery:
        return SelectQuery(
            columns=self._columns,
            table=_required("SelectQuery", "table", self._table),
            conditions=self._conditions,
        )


class InsertQueryBuilder:
    def __init__(self):
        self._columns: List[str] = []
        self._table: Optional[str] = None
        self._values: List[Value] = []

    def column(self, column: str) -> "InsertQueryBuilder":
        self._columns.append(column)
        return self

    def columns(self, columns: Iterable[str]) -> "InsertQueryBuilder":
        self._columns.extend(columns)
        return self

    def table(self, table: str) -> "InsertQueryBuilder":
        self._table = table
        return self

    def value(self, value: Value) -> "InsertQueryBuilder":
        self._values.append(value)
        return self

    def values(self, values: Iterable[Value]) -> "InsertQueryBuilder":
        self._values.extend(values)
        return self

    def build(self) -> InsertQuery:
        return InsertQuery(
            columns=self._columns,
            table=_required("InsertQuery", "table", self._table),
            values=self._values,
        )


class UpdateQueryBuilder:
    def __init__(self):
        self._table: Optional[str] = None
        self._values: List[Tuple[str, Value]] = []
        self._conditions: List[Condition] = []

    def table(self, table: str) -> "UpdateQueryBuilder":
        self._table = table
        return self

    def value(self, assignment: Tuple[str, Value]) -> "UpdateQueryBuilder":
        self._values.append(assignment)
        return self

    def values(self, assignments: Iterable[Tuple[str, Value]]) -> "UpdateQueryBuilder":
        self._values.extend(assignments)
        return self

    def condition(self, condition: Condition) -> "UpdateQueryBuilder":
        self._conditions.append(condition)
        return self

    def conditions(self, conditions: Iterable[Condition]) -> "UpdateQueryBuilder":
        self._conditions.extend(conditions)
        return self

    def build(self) -> UpdateQuery:
        table = _required("UpdateQuery", "table", self._table)
        if not self._values:
            raise IncompleteNodeError("UpdateQuery", "values")
        return UpdateQuery(
            table=table,
            values=self._values,
            conditions=self._conditions,
        )


class DeleteQueryBuilder:
    def __init__(self):
        self._columns: List[str] = []
        self._table: Optional[str] = None
        self._conditions: List[Condition] = []

    def column(self, column: str) -> "DeleteQueryBuilder":
        self._columns.append(column)
        return self

    def columns(self, columns: Iterable[str]) -> "DeleteQueryBuilder":
        self._columns.extend(columns)
        return self

    def table(self, table: str) -> "DeleteQueryBuilder":
        self._table = table
        return self

    def condition(self, condition: Condition) -> "DeleteQueryBuilder":
        self._conditions.append(condition)
        return self

    def conditions(self, conditions: Iterable[Condition]) -> "DeleteQueryBuilder":
        self._conditions.extend(conditions)
        return self

    def build(self) -> DeleteQuery:
        return DeleteQuery(
            columns=self._columns,
            table=_required("DeleteQuery", "table", self._table),
            conditions=self._conditions,
        )


class CreateTableQueryBuilder:
    def __init__(self):
        self._table: Optional[str] = None
        self._partition_key: List[str] = []
        self._clustering_key: List[str] = []
        self._columns: List[Column] = []

    def table(self, table: str) -> "CreateTableQueryBuilder":
        self._table = table
        return self

    def partition_key(self, *names: str) -> "CreateTableQueryBuilder":
        self._partition_key.extend(names)
        return self

    def clustering_key(self, *names: str) -> "CreateTableQueryBuilder":
        self._clustering_key.extend(names)
        return self

    def column(self, column: Column) -> "CreateTableQueryBuilder":
        self._columns.append(column)
        return self

    def columns(self, columns: Iterable[Column]) -> "CreateTableQueryBuilder":
        self._columns.extend(columns)
        return self

    def build(self) -> CreateTableQuery:
        table = _required("CreateTableQuery", "table", self._table)
        if not self._partition_key:
            raise IncompleteNodeError("CreateTableQuery", "partition_key")
        if not self._columns:
            raise IncompleteNodeError("CreateTableQuery", "columns")
        primary_key = PrimaryKey(
            partition_key=self._partition_key,
            clustering_key=self._clustering_key,
        )
        return CreateTableQuery(table=table, primary_key=primary_key, columns=self._columns)


class AlterTableQueryBuilder:
    def __init__(self):
        self._table: Optional[str] = None
        self._conditions: List[AlterTableCondition] = []

    def table(self, table: str) -> "AlterTableQueryBuilder":
        self._table = table
        return self

    def add_column(self, column_name: str, column_type: ColumnType) -> "AlterTableQueryBuilder":
        self._conditions.append(AddColumn(column_name, column_type))
        return self

    def drop_column(self, column_name: str) -> "AlterTableQueryBuilder":
        self._conditions.append(DropColumn(column_name))
        return self

    def conditions(self, conditions: Iterable[AlterTableCondition]) -> "AlterTableQueryBuilder":
        self._conditions.extend(conditions)
        return self

    def build(self) -> AlterTableQuery:
        table = _required("AlterTableQuery", "table", self._table)
        if not self._conditions:
            raise IncompleteNodeError("AlterTableQuery", "conditions")
        return AlterTableQuery(table=table, conditions=self._conditions)


class DropTableQueryBuilder:
    def __init__(self):
        self._table: Optional[str] = None

    def table(self, table: str) -> "DropTableQueryBuilder":
        self._table = table
        return self

    def build(self) -> DropTableQuery:
        return DropTableQuery(table=_required("DropTableQuery", "table", self._table))
