"""
Data manipulation grammar: SELECT, INSERT, UPDATE, DELETE
"""

from typing import List, Tuple

from .ast_nodes import DeleteQuery, InsertQuery, SelectQuery, UpdateQuery, Value
from .builder import (
    DeleteQueryBuilder,
    InsertQueryBuilder,
    SelectQueryBuilder,
    UpdateQueryBuilder,
)
from .conditions import parse_where_clause
from .lexer import SQLScanner


def _parse_projection(scanner: SQLScanner) -> List[str]:
    def all_columns():
        scanner.symbol("*")
        return []

    return scanner.first_of(all_columns, lambda: scanner.separated(scanner.identifier))


def parse_select(text: str) -> SelectQuery:
    """SELECT (* | column, ...) FROM table [WHERE ...]"""
    scanner = SQLScanner(text)
    scanner.clause("expected the select keyword", scanner.keyword, "SELECT")

    projection_start = scanner.position
    columns = scanner.clause("expected the column names or *", _parse_projection, scanner)
    # "SELECT FROM t" reads FROM as a column name; report the missing projection instead
    if len(columns) == 1 and columns[0].upper() == "FROM" and not scanner.lookahead(
        scanner.keyword, "FROM"
    ):
        raise scanner.syntax_error("expected the column names or *", projection_start)

    scanner.clause("expected the from keyword", scanner.keyword, "FROM")
    table = scanner.clause("expected the table name", scanner.identifier)
    conditions = parse_where_clause(scanner)
    scanner.finish()

    return SelectQueryBuilder().columns(columns).table(table).conditions(conditions).build()


def parse_insert(text: str) -> InsertQuery:
    """INSERT INTO table (column, ...) VALUES (value, ...)

    Column and value counts are not compared here.
    """
    scanner = SQLScanner(text)
    scanner.clause("expected the insert into keyword", scanner.keyword, "INSERT INTO")
    table = scanner.clause("expected the table name", scanner.identifier)
    columns = scanner.clause(
        "an error occurred while parsing column names",
        scanner.parenthesized,
        lambda: scanner.separated(scanner.identifier),
    )
    scanner.clause("expected the values keyword", scanner.keyword, "VALUES")
    values = scanner.clause(
        "an error occurred while parsing values",
        scanner.parenthesized,
        lambda: scanner.separated(scanner.value),
    )
    scanner.finish()

    return InsertQueryBuilder().columns(columns).table(table).values(values).build()


def _parse_assignment(scanner: SQLScanner) -> Tuple[str, Value]:
    column = scanner.identifier()
    scanner.symbol("=")
    return column, scanner.value()


def parse_update(text: str) -> UpdateQuery:
    """UPDATE table SET column = value, ... [WHERE ...]"""
    scanner = SQLScanner(text)
    scanner.clause("an error occurred while parsing update keyword", scanner.keyword, "UPDATE")
    table = scanner.clause("an error occurred while parsing the table name", scanner.identifier)
    scanner.clause("expected set keyword", scanner.keyword, "SET")
    assignments = scanner.clause(
        "an error occurred while parsing values",
        scanner.separated,
        lambda: _parse_assignment(scanner),
    )
    conditions = parse_where_clause(scanner)
    scanner.finish()

    return UpdateQueryBuilder().table(table).values(assignments).conditions(conditions).build()


def parse_delete(text: str) -> DeleteQuery:
    """DELETE [column, ...] FROM table [WHERE ...]

    FROM is tried first, right after DELETE; only when it is absent is a
    column list expected.
    """
    scanner = SQLScanner(text)
    scanner.clause("an error occurred while parsing delete keyword", scanner.keyword, "DELETE")

    if scanner.optional(scanner.keyword, "FROM") is not None:
        columns = []
    else:
        columns = scanner.clause(
            "an error occurred while parsing the columns",
            scanner.separated,
            scanner.identifier,
        )
        scanner.clause("an error occurred while parsing from keyword", scanner.keyword, "FROM")

    table = scanner.clause("an error occurred while parsing the table name", scanner.identifier)
    conditions = parse_where_clause(scanner)
    scanner.finish()

    return DeleteQueryBuilder().columns(columns).table(table).conditions(conditions).build()
