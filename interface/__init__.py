"""
User interface layer
"""

from .shell import SQLShell, interactive_sql_shell
from .formatter import describe_query, format_query_result, format_parse_error

__all__ = [
    "SQLShell",
    "interactive_sql_shell",
    "describe_query",
    "format_query_result",
    "format_parse_error",
]
