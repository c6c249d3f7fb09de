"""
Statement dispatcher

``parse_query`` classifies a statement by its leading keyword and hands it
to the matching grammar. It is a pure function: no I/O, no state shared
between calls. ``SQLParser`` wraps it with optional parse logging.
"""

import time
from typing import Optional

from db_logging import LogManager
from .ast_nodes import Query, QueryType
from .ddl_parser import parse_alter_table, parse_create_table, parse_drop_table
from .dml_parser import parse_delete, parse_insert, parse_select, parse_update
from .errors import QueryParsingError, UnsupportedRequest
from .lexer import SQLScanner

# tried in this order; multi-word keywords match as a unit
LEADING_KEYWORDS = (
    ("SELECT", QueryType.SELECT),
    ("INSERT INTO", QueryType.INSERT),
    ("UPDATE", QueryType.UPDATE),
    ("DELETE", QueryType.DELETE),
    ("CREATE TABLE", QueryType.CREATE_TABLE),
    ("ALTER TABLE", QueryType.ALTER_TABLE),
    ("DROP TABLE", QueryType.DROP_TABLE),
)

GRAMMARS = {
    QueryType.SELECT: parse_select,
    QueryType.INSERT: parse_insert,
    QueryType.UPDATE: parse_update,
    QueryType.DELETE: parse_delete,
    QueryType.CREATE_TABLE: parse_create_table,
    QueryType.ALTER_TABLE: parse_alter_table,
    QueryType.DROP_TABLE: parse_drop_table,
}


def get_query_type(query: str) -> QueryType:
    """Statement kind from the leading keyword; ``UnsupportedRequest`` if none matches"""
    scanner = SQLScanner(query)
    for keyword, query_type in LEADING_KEYWORDS:
        if scanner.lookahead(scanner.keyword, keyword):
            return query_type
    raise UnsupportedRequest(query)


def parse_query(query: str) -> Query:
    """Parse one statement into its AST.

    Raises ``UnsupportedRequest`` for an unknown statement kind and
    ``QuerySyntaxError`` when a recognized statement is malformed.
    """
    return GRAMMARS[get_query_type(query)](query)


class SQLParser:
    """Parser entry point for callers that want every parse logged"""

    def __init__(self, log_manager: Optional[LogManager] = None):
        self.log_manager = log_manager

    def parse(self, sql: str) -> Query:
        start = time.perf_counter()
        try:
            query = parse_query(sql)
        except QueryParsingError as e:
            self._log(sql, False, start, f"{type(e).__name__}: {e}")
            raise
        self._log(sql, True, start, query.query_type.value)
        if self.log_manager is not None:
            self.log_manager.log_ast(str(query))
        return query

    def _log(self, sql: str, success: bool, start: float, detail: str):
        if self.log_manager is None:
            return
        elapsed_ms = (time.perf_counter() - start) * 1000
        self.log_manager.log_parse(sql, success, elapsed_ms, detail)
