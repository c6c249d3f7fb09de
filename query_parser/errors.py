"""
Parser error taxonomy
"""


class QueryParsingError(Exception):
    """Base class for every error raised while turning text into a query"""


class UnsupportedRequest(QueryParsingError):
    """The statement does not start with any recognized keyword"""

    def __init__(self, query: str):
        self.query = query
        super().__init__(query)

    def __str__(self):
        return f"the request {self.query} is not supported"

    def __eq__(self, other):
        return isinstance(other, UnsupportedRequest) and self.query == other.query

    __hash__ = Exception.__hash__


class QuerySyntaxError(QueryParsingError):
    """A recognized statement failed at a specific grammar position.

    ``description`` tells what was expected, ``remaining`` is the input
    that was still unconsumed when the failing clause started. ``line`` and
    ``column`` (1-based) point at the innermost primitive that failed; they
    are informational and do not take part in equality.
    """

    def __init__(self, description: str, remaining: str, line: int = None, column: int = None):
        self.description = description
        self.remaining = remaining
        self.line = line
        self.column = column
        super().__init__(description, remaining)

    def __str__(self):
        return (
            f"an syntax error {self.description} occurred while parsing "
            f"the request {self.remaining}"
        )

    def __eq__(self, other):
        return (
            isinstance(other, QuerySyntaxError)
            and self.description == other.description
            and self.remaining == other.remaining
        )

    __hash__ = Exception.__hash__


class ASTBuildError(ValueError):
    """An AST node would violate one of its structural invariants"""


class IncompleteNodeError(ASTBuildError):
    """A builder was asked to build a node before all required fields were set"""

    def __init__(self, node: str, field: str):
        self.node = node
        self.field = field
        super().__init__(f"{node}: required field '{field}' is not set")
