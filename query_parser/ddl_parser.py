"""
Data definition grammar: CREATE TABLE, ALTER TABLE, DROP TABLE
"""

from typing import Callable, List, Tuple

from catalog import ColumnType
from .ast_nodes import (
    AddColumn,
    AlterTableCondition,
    AlterTableQuery,
    Column,
    CreateTableQuery,
    DropColumn,
    DropTableQuery,
)
from .builder import (
    AlterTableQueryBuilder,
    ColumnBuilder,
    CreateTableQueryBuilder,
    DropTableQueryBuilder,
)
from .errors import ASTBuildError
from .lexer import SQLScanner


def _type_rule(scanner: SQLScanner, column_type: ColumnType) -> Callable[[], ColumnType]:
    def rule():
        scanner.keyword(column_type.value)
        return column_type

    return rule


def parse_column_type(scanner: SQLScanner) -> ColumnType:
    return scanner.first_of(*(_type_rule(scanner, t) for t in ColumnType))


def _parse_column(scanner: SQLScanner) -> Column:
    name = scanner.identifier()
    column_type = parse_column_type(scanner)
    return ColumnBuilder().name(name).column_type(column_type).build()


def _is_single_pk(scanner: SQLScanner) -> bool:
    """Lookahead for ``( name type PRIMARY KEY``"""

    def first_column_is_key():
        scanner.symbol("(")
        _parse_column(scanner)
        scanner.keyword("PRIMARY KEY")

    return scanner.lookahead(first_column_is_key)


def _parse_single_pk_definitions(scanner: SQLScanner, builder: CreateTableQueryBuilder):
    first = _parse_column(scanner)
    scanner.keyword("PRIMARY KEY")
    builder.column(first).partition_key(first.name)
    if scanner.optional(scanner.comma) is not None:
        builder.columns(scanner.separated(lambda: _parse_column(scanner)))


def _parse_key_columns(scanner: SQLScanner) -> Tuple[List[str], List[str]]:
    """Inside ``PRIMARY KEY ( ... )``.

    ``(p1, p2), c1, c2`` gives an explicit partition key; ``c1, c2, c3``
    makes the first name the partition key and the rest clustering columns.
    """

    def explicit_partition():
        partition = scanner.parenthesized(lambda: scanner.separated(scanner.identifier))
        clustering = []
        if scanner.optional(scanner.comma) is not None:
            clustering = scanner.separated(scanner.identifier)
        return partition, clustering

    def leading_partition():
        names = scanner.separated(scanner.identifier)
        return names[:1], names[1:]

    return scanner.first_of(explicit_partition, leading_partition)


def _parse_composite_definitions(scanner: SQLScanner, builder: CreateTableQueryBuilder):
    builder.columns(scanner.separated(lambda: _parse_column(scanner)))
    scanner.comma()
    scanner.keyword("PRIMARY KEY")
    partition, clustering = scanner.parenthesized(lambda: _parse_key_columns(scanner))
    builder.partition_key(*partition).clustering_key(*clustering)


def parse_create_table(text: str) -> CreateTableQuery:
    scanner = SQLScanner(text)
    scanner.clause("cannot parse statement 'CREATE TABLE'", scanner.keyword, "CREATE TABLE")
    table = scanner.clause("cannot parse table name", scanner.identifier)

    builder = CreateTableQueryBuilder().table(table)
    definitions_start = scanner.position
    if _is_single_pk(scanner):
        scanner.clause(
            "cannot parse the column definition with a simple primary key",
            scanner.parenthesized,
            lambda: _parse_single_pk_definitions(scanner, builder),
        )
    else:
        scanner.clause(
            "cannot parse the column definition with a composite primary key",
            scanner.parenthesized,
            lambda: _parse_composite_definitions(scanner, builder),
        )
    scanner.finish()

    try:
        return builder.build()
    except ASTBuildError as exc:
        raise scanner.syntax_error(str(exc), definitions_start, definitions_start) from exc


def _parse_add(scanner: SQLScanner) -> List[AlterTableCondition]:
    def add_column():
        column = _parse_column(scanner)
        return AddColumn(column.name, column.column_type)

    scanner.keyword("ADD")
    return scanner.first_of(
        lambda: [add_column()],
        lambda: scanner.parenthesized(lambda: scanner.separated(add_column)),
    )


def _parse_drop(scanner: SQLScanner) -> List[AlterTableCondition]:
    def drop_column():
        return DropColumn(scanner.identifier())

    scanner.keyword("DROP")
    return scanner.first_of(
        lambda: [drop_column()],
        lambda: scanner.parenthesized(lambda: scanner.separated(drop_column)),
    )


def _parse_alter_clauses(scanner: SQLScanner) -> List[AlterTableCondition]:
    clauses = scanner.separated(
        lambda: scanner.first_of(lambda: _parse_add(scanner), lambda: _parse_drop(scanner))
    )
    return [condition for clause in clauses for condition in clause]


def parse_alter_table(text: str) -> AlterTableQuery:
    """ALTER TABLE table clause, ...; each clause adds or drops one or more columns"""
    scanner = SQLScanner(text)
    scanner.clause("expected 'ALTER TABLE' statement", scanner.keyword, "ALTER TABLE")
    table = scanner.clause("cannot parse table name", scanner.identifier)
    conditions = scanner.clause(
        "cannot parse the ADD or DROP clauses", _parse_alter_clauses, scanner
    )
    scanner.finish()

    return AlterTableQueryBuilder().table(table).conditions(conditions).build()


def parse_drop_table(text: str) -> DropTableQuery:
    scanner = SQLScanner(text)
    scanner.clause("expected 'DROP TABLE' statement", scanner.keyword, "DROP TABLE")
    table = scanner.clause("cannot parse table name", scanner.identifier)
    scanner.finish()

    return DropTableQueryBuilder().table(table).build()
