"""
Column data types
"""

from enum import Enum


class ColumnType(Enum):
    """Supported column types"""

    UUID = "UUID"
    INT = "INT"
    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    TIMESTAMP = "TIMESTAMP"
    TEXT = "TEXT"
    BOOL = "BOOL"

    def __str__(self):
        return self.value
