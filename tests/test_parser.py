"""
/tests/test_parser.py

Statement dispatcher tests
"""
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from db_logging import LogManager
from query_parser import (
    AlterTableQuery,
    CreateTableQuery,
    DeleteQuery,
    DropTableQuery,
    InsertQuery,
    QuerySyntaxError,
    QueryType,
    SelectQuery,
    SQLParser,
    UnsupportedRequest,
    UpdateQuery,
    get_query_type,
    parse_query,
)


@pytest.mark.parametrize(
    "sql, query_type, node",
    [
        ("SELECT * FROM t", QueryType.SELECT, SelectQuery),
        ("INSERT INTO t (a) VALUES (1)", QueryType.INSERT, InsertQuery),
        ("UPDATE t SET a = 1", QueryType.UPDATE, UpdateQuery),
        ("DELETE FROM t", QueryType.DELETE, DeleteQuery),
        ("CREATE TABLE t (a INT PRIMARY KEY)", QueryType.CREATE_TABLE, CreateTableQuery),
        ("ALTER TABLE t DROP a", QueryType.ALTER_TABLE, AlterTableQuery),
        ("DROP TABLE t", QueryType.DROP_TABLE, DropTableQuery),
    ],
)
def test_dispatch_by_leading_keyword(sql, query_type, node):
    assert get_query_type(sql) is query_type
    query = parse_query(sql)
    assert isinstance(query, node)
    assert query.query_type is query_type


@pytest.mark.parametrize(
    "sql",
    ["TRUNCATE t", "INSERT t (a) VALUES (1)", "", "   ", "DROP t", "SELECTED * FROM t", "GRANT ALL"],
)
def test_unsupported_request(sql):
    with pytest.raises(UnsupportedRequest) as info:
        parse_query(sql)
    assert info.value == UnsupportedRequest(sql)
    assert str(info.value) == f"the request {sql} is not supported"


def test_select_without_columns_is_a_syntax_error():
    with pytest.raises(QuerySyntaxError) as info:
        parse_query("SELECT FROM t")
    assert info.value == QuerySyntaxError("expected the column names or *", "FROM t")
    assert str(info.value) == (
        "an syntax error expected the column names or * occurred while parsing the request FROM t"
    )


def test_keywords_and_whitespace_are_insensitive():
    a = parse_query("SELECT a FROM t WHERE b = 1")
    b = parse_query("select\n\ta\nfrom   t\n  where b=1")
    c = parse_query("  SeLeCt a FrOm t WhErE b = 1  ")
    assert a == b == c


def test_multi_word_keywords_across_lines():
    query = parse_query("insert\ninto t (a) values ('x')")
    assert isinstance(query, InsertQuery)
    query = parse_query("create\n  table t (a INT PRIMARY KEY)")
    assert isinstance(query, CreateTableQuery)


def test_trailing_semicolon_and_trailing_input():
    assert parse_query("DROP TABLE t;") == parse_query("DROP TABLE t")
    assert parse_query("SELECT * FROM t ;\n") == parse_query("SELECT * FROM t")

    with pytest.raises(QuerySyntaxError) as info:
        parse_query("SELECT * FROM t; SELECT * FROM u")
    assert info.value.description == "unexpected input after the statement"


def test_parse_is_repeatable():
    sql = "UPDATE t SET a = 1 WHERE b = 'x'"
    assert parse_query(sql) == parse_query(sql)


def test_syntax_error_location():
    with pytest.raises(QuerySyntaxError) as info:
        parse_query("SELECT a\nFROM t\nWHERE a >")
    error = info.value
    assert error.remaining == "WHERE a >"
    assert error.line == 3
    assert error.column == 10


def test_sql_parser_without_logging():
    parser = SQLParser()
    assert parser.log_manager is None
    assert parser.parse("DROP TABLE t") == DropTableQuery("t")


def test_sql_parser_logs_successes_and_failures(tmp_path):
    log_manager = LogManager("parser_test", str(tmp_path))
    parser = SQLParser(log_manager)

    parser.parse("SELECT *\nFROM t")
    with pytest.raises(UnsupportedRequest):
        parser.parse("TRUNCATE t")
    with pytest.raises(QuerySyntaxError):
        parser.parse("SELECT FROM t")
    log_manager.close()

    lines = (tmp_path / "parser_test.log").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 5
    assert "[INFO] [QUERY_PARSER] parse succeeded: SELECT * FROM t (" in lines[1]
    assert lines[1].endswith("- SELECT")
    assert "[ERROR] [QUERY_PARSER] parse failed: TRUNCATE t" in lines[2]
    assert "UnsupportedRequest: the request TRUNCATE t is not supported" in lines[2]
    assert "QuerySyntaxError: an syntax error expected the column names or *" in lines[3]
    assert lines[4].endswith("logger parser_test closed")
