"""
AST and parse error formatter
"""

from typing import List, Tuple

from query_parser import (
    AlterTableQuery,
    CreateTableQuery,
    DeleteQuery,
    DropTableQuery,
    InsertQuery,
    Query,
    QueryParsingError,
    QuerySyntaxError,
    SelectQuery,
    UpdateQuery,
)


def _conditions(query) -> List[Tuple[str, str]]:
    if not query.conditions:
        return [("where", "-")]
    return [("where", " AND ".join(str(c) for c in query.conditions))]


def describe_query(query: Query) -> List[Tuple[str, str]]:
    """(field, value) rows describing a parsed query"""
    rows = [("type", query.query_type.value), ("table", query.table)]

    if isinstance(query, SelectQuery):
        rows.append(("columns", ", ".join(query.columns) or "*"))
        rows.extend(_conditions(query))
    elif isinstance(query, InsertQuery):
        rows.append(("columns", ", ".join(query.columns)))
        rows.append(("values", ", ".join(str(v) for v in query.values)))
    elif isinstance(query, UpdateQuery):
        rows.append(("set", ", ".join(f"{c} = {v}" for c, v in query.values)))
        rows.extend(_conditions(query))
    elif isinstance(query, DeleteQuery):
        rows.append(("columns", ", ".join(query.columns) or "(whole row)"))
        rows.extend(_conditions(query))
    elif isinstance(query, CreateTableQuery):
        rows.append(("columns", ", ".join(str(c) for c in query.columns)))
        rows.append(("partition key", ", ".join(query.primary_key.partition_key)))
        rows.append(("clustering key", ", ".join(query.primary_key.clustering_key) or "-"))
    elif isinstance(query, AlterTableQuery):
        rows.append(("changes", ", ".join(str(c) for c in query.conditions)))
    elif isinstance(query, DropTableQuery):
        pass

    return rows


def format_query_result(query: Query):
    """Print a parsed query as a two-column table"""
    rows = describe_query(query)

    field_width = max(len("field"), *(len(field) for field, _ in rows))
    value_width = max(len("value"), *(len(value) for _, value in rows))

    header = f"{'field':<{field_width}} | {'value':<{value_width}}"
    print(header)
    print("-" * len(header))
    for field, value in rows:
        print(f"{field:<{field_width}} | {value:<{value_width}}")

    print(f"\n{query}")


def format_parse_error(error: QueryParsingError):
    """Print a parse error with its position when known"""
    print(f"❌ Error: {error}")
    if isinstance(error, QuerySyntaxError) and error.line is not None:
        print(f"   at line {error.line}, column {error.column}")
