"""
/tests/test_ast_nodes.py

AST node and builder tests
"""
import sys
import os
import math
from dataclasses import FrozenInstanceError

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from catalog import ColumnType
from query_parser import parse_query
from query_parser.ast_nodes import (
    INT64_MAX,
    AddColumn,
    AlterTableQuery,
    BoolValue,
    Column,
    Condition,
    CreateTableQuery,
    DeleteQuery,
    DropColumn,
    DropTableQuery,
    FloatValue,
    InsertQuery,
    IntegerValue,
    Operator,
    PrimaryKey,
    QueryType,
    SelectQuery,
    StringValue,
    UpdateQuery,
    is_data_definition,
    is_data_manipulation,
)
from query_parser.builder import (
    AlterTableQueryBuilder,
    ColumnBuilder,
    ConditionBuilder,
    CreateTableQueryBuilder,
    DeleteQueryBuilder,
    DropTableQueryBuilder,
    InsertQueryBuilder,
    SelectQueryBuilder,
    UpdateQueryBuilder,
)
from query_parser.errors import ASTBuildError, IncompleteNodeError


# Values
def test_values_of_different_variants_never_compare_equal():
    assert IntegerValue(1) != FloatValue(1.0)
    assert IntegerValue(1) != BoolValue(True)
    assert StringValue("1") != IntegerValue(1)
    assert BoolValue(False) != IntegerValue(0)


def test_nan_float_is_not_equal_to_itself():
    nan = FloatValue(float("nan"))
    assert nan != nan
    assert nan != FloatValue(float("nan"))
    assert FloatValue(2.5) == FloatValue(2.5)
    assert math.isnan(nan.value)


def test_float_value_coerces_to_float():
    value = FloatValue(3)
    assert isinstance(value.value, float)
    assert hash(value) == hash(FloatValue(3.0))


def test_integer_value_range_and_type():
    assert IntegerValue(INT64_MAX).value == INT64_MAX
    with pytest.raises(ASTBuildError):
        IntegerValue(INT64_MAX + 1)
    with pytest.raises(ASTBuildError):
        IntegerValue(True)
    with pytest.raises(ASTBuildError):
        IntegerValue("12")


def test_value_rendering():
    assert str(IntegerValue(-4)) == "-4"
    assert str(FloatValue(30.65)) == "30.65"
    assert str(FloatValue(1e20)) == "100000000000000000000.0"
    assert str(FloatValue(1e-05)) == "0.00001"
    assert str(FloatValue(-2)) == "-2.0"
    assert str(StringValue("LOG_IN")) == "'LOG_IN'"
    assert str(BoolValue(True)) == "TRUE"


# Nodes
def test_nodes_are_immutable():
    query = SelectQueryBuilder().column("a").table("t").build()
    with pytest.raises(FrozenInstanceError):
        query.table = "other"
    assert isinstance(query.columns, tuple)


def test_builder_lists_are_copied_into_the_node():
    columns = ["a"]
    builder = SelectQueryBuilder().columns(columns).table("t")
    query = builder.build()
    columns.append("b")
    builder.column("c")
    assert query.columns == ("a",)


def test_query_types():
    cases = [
        (SelectQuery((), "t", ()), QueryType.SELECT),
        (InsertQuery(("a",), "t", (IntegerValue(1),)), QueryType.INSERT),
        (UpdateQuery("t", (("a", IntegerValue(1)),), ()), QueryType.UPDATE),
        (DeleteQuery((), "t", ()), QueryType.DELETE),
        (CreateTableQuery("t", PrimaryKey(("a",), ()), (Column("a", ColumnType.INT),)), QueryType.CREATE_TABLE),
        (AlterTableQuery("t", (DropColumn("a"),)), QueryType.ALTER_TABLE),
        (DropTableQuery("t"), QueryType.DROP_TABLE),
    ]
    for query, query_type in cases:
        assert query.query_type is query_type

    manipulation = [q for q, _ in cases if is_data_manipulation(q)]
    definition = [q for q, _ in cases if is_data_definition(q)]
    assert len(manipulation) == 4
    assert len(definition) == 3


def test_primary_key_invariants():
    with pytest.raises(ASTBuildError):
        PrimaryKey((), ("a",))
    with pytest.raises(ASTBuildError):
        PrimaryKey(("a",), ("b", "a"))
    key = PrimaryKey(["a", "b"], ["c"])
    assert key.partition_key == ("a", "b")
    assert str(key) == "PRIMARY KEY ((a, b), c)"
    assert str(PrimaryKey(("a",), ("b",))) == "PRIMARY KEY (a, b)"


def test_structural_invariants():
    with pytest.raises(ASTBuildError):
        SelectQuery((), "", ())
    with pytest.raises(ASTBuildError):
        UpdateQuery("t", (), ())
    with pytest.raises(ASTBuildError):
        AlterTableQuery("t", ())
    with pytest.raises(ASTBuildError):
        CreateTableQuery("t", PrimaryKey(("a",), ()), ())
    with pytest.raises(ASTBuildError):
        Condition("", Operator.EQUALS, IntegerValue(1))


# Builders
@pytest.mark.parametrize(
    "builder, node, field",
    [
        (SelectQueryBuilder().column("a"), "SelectQuery", "table"),
        (InsertQueryBuilder().column("a"), "InsertQuery", "table"),
        (UpdateQueryBuilder().value(("a", IntegerValue(1))), "UpdateQuery", "table"),
        (UpdateQueryBuilder().table("t"), "UpdateQuery", "values"),
        (DeleteQueryBuilder(), "DeleteQuery", "table"),
        (CreateTableQueryBuilder().partition_key("a"), "CreateTableQuery", "table"),
        (CreateTableQueryBuilder().table("t"), "CreateTableQuery", "partition_key"),
        (CreateTableQueryBuilder().table("t").partition_key("a"), "CreateTableQuery", "columns"),
        (AlterTableQueryBuilder().drop_column("a"), "AlterTableQuery", "table"),
        (AlterTableQueryBuilder().table("t"), "AlterTableQuery", "conditions"),
        (DropTableQueryBuilder(), "DropTableQuery", "table"),
        (ColumnBuilder().name("a"), "Column", "column_type"),
        (ConditionBuilder().column("a").value(IntegerValue(1)), "Condition", "operator"),
    ],
)
def test_builder_reports_missing_field(builder, node, field):
    with pytest.raises(IncompleteNodeError) as info:
        builder.build()
    assert info.value.node == node
    assert info.value.field == field
    assert str(info.value) == f"{node}: required field '{field}' is not set"


def test_alter_builder_keeps_clause_order():
    query = (
        AlterTableQueryBuilder()
        .table("products")
        .drop_column("old")
        .add_column("new", ColumnType.BOOL)
        .build()
    )
    assert query.conditions == (DropColumn("old"), AddColumn("new", ColumnType.BOOL))
    assert str(query) == "ALTER TABLE products DROP old, ADD new BOOL"


# Rendering
@pytest.mark.parametrize(
    "sql",
    [
        "SELECT * FROM user_sessions",
        "SELECT user_id, session_id FROM user_sessions WHERE user_id = 12345 AND timestamp >= '2024-10-21 00:00:00'",
        "INSERT INTO books (title, price, stock, used) VALUES ('book', 30.65, 10, FALSE)",
        "UPDATE user_sessions SET type = 'LAPTOP', seen = -3 WHERE user_id != 12345",
        "DELETE FROM user_sessions WHERE user_id = 12345",
        "DELETE type, timestamp FROM user_sessions",
        "CREATE TABLE t (a INT, b TEXT, c LONG, PRIMARY KEY ((a, b), c))",
        "CREATE TABLE t (a INT, PRIMARY KEY (a))",
        "ALTER TABLE products ADD description TEXT, DROP price",
        "DROP TABLE persons",
        "INSERT INTO t (a, b) VALUES (100000000000000000000.0, 0.00001)",
        "UPDATE t SET a = -123456789012345680000.0 WHERE b < 0.000000125",
    ],
)
def test_rendered_statement_parses_back_to_the_same_tree(sql):
    query = parse_query(sql)
    assert str(query) == sql
    assert parse_query(str(query)) == query
