"""
Metadata layer: column types shared by the parser and its consumers
"""

from .data_types import ColumnType

__all__ = [
    "ColumnType",
]
