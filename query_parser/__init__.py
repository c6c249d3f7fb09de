"""
Query parsing layer
"""

from .ast_nodes import (
    AddColumn,
    AlterTableCondition,
    AlterTableQuery,
    BoolValue,
    Column,
    Condition,
    CreateTableQuery,
    DataDefinitionQuery,
    DataManipulationQuery,
    DeleteQuery,
    DropColumn,
    DropTableQuery,
    FloatValue,
    InsertQuery,
    IntegerValue,
    Operator,
    PrimaryKey,
    Query,
    QueryType,
    SelectQuery,
    StringValue,
    UpdateQuery,
    Value,
    is_data_definition,
    is_data_manipulation,
)
from .errors import (
    ASTBuildError,
    IncompleteNodeError,
    QueryParsingError,
    QuerySyntaxError,
    UnsupportedRequest,
)
from .parser import SQLParser, get_query_type, parse_query

__all__ = [
    "SQLParser",
    "parse_query",
    "get_query_type",
    "Query",
    "QueryType",
    "DataManipulationQuery",
    "DataDefinitionQuery",
    "SelectQuery",
    "InsertQuery",
    "UpdateQuery",
    "DeleteQuery",
    "CreateTableQuery",
    "AlterTableQuery",
    "DropTableQuery",
    "AlterTableCondition",
    "AddColumn",
    "DropColumn",
    "Column",
    "PrimaryKey",
    "Condition",
    "Operator",
    "Value",
    "IntegerValue",
    "FloatValue",
    "StringValue",
    "BoolValue",
    "is_data_manipulation",
    "is_data_definition",
    "QueryParsingError",
    "UnsupportedRequest",
    "QuerySyntaxError",
    "ASTBuildError",
    "IncompleteNodeError",
]
