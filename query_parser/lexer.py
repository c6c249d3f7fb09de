"""
Lexical primitives

The grammar works directly on the statement text through ``SQLScanner``, a
cursor with backtracking. Every primitive skips whitespace (newlines
included) before and after what it matches, so grammar rules can be
composed without caring about separators.
"""

import re
from typing import Callable, List, Optional, Tuple, TypeVar

from .ast_nodes import (
    INT64_MAX,
    INT64_MIN,
    BoolValue,
    FloatValue,
    IntegerValue,
    StringValue,
    Value,
)
from .errors import QuerySyntaxError

T = TypeVar("T")

_WHITESPACE = re.compile(r"\s*")
# letters and underscore, no digits
_IDENTIFIER = re.compile(r"[^\W\d]+")
_FLOAT = re.compile(r"-?[0-9]+\.[0-9]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_BOOLEAN = re.compile(r"(?:TRUE|FALSE)(?![^\W\d])", re.IGNORECASE)
_STRING = re.compile(r"'([^']+)'")


def is_identifier_char(char: str) -> bool:
    return char.isalpha() or char == "_"


def _keyword_pattern(literal: str):
    body = r"\s+".join(re.escape(word) for word in literal.split())
    if is_identifier_char(literal[-1]):
        body += r"(?![^\W\d])"
    return re.compile(body, re.IGNORECASE)


class GrammarError(Exception):
    """A primitive failed to match at ``position``"""

    def __init__(self, expected: str, position: int):
        self.expected = expected
        self.position = position
        super().__init__(f"expected {expected} at position {position}")


class SQLScanner:
    """Cursor over a single statement"""

    def __init__(self, text: str):
        self.text = text
        self.position = 0

    @property
    def remaining(self) -> str:
        return self.text[self.position :]

    def location(self, position: Optional[int] = None) -> Tuple[int, int]:
        """1-based (line, column) of a position, defaulting to the cursor"""
        pos = self.position if position is None else position
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, column

    def skip_whitespace(self):
        self.position = _WHITESPACE.match(self.text, self.position).end()

    def _match(self, pattern, expected: str):
        self.skip_whitespace()
        match = pattern.match(self.text, self.position)
        if match is None:
            raise GrammarError(expected, self.position)
        self.position = match.end()
        self.skip_whitespace()
        return match

    # Tokens
    def keyword(self, literal: str) -> str:
        """Case-insensitive keyword; words of a multi-word keyword may be split by any whitespace"""
        return self._match(_keyword_pattern(literal), f"'{literal}'").group(0)

    def symbol(self, literal: str) -> str:
        return self._match(re.compile(re.escape(literal)), f"'{literal}'").group(0)

    def comma(self) -> str:
        return self.symbol(",")

    def identifier(self) -> str:
        return self._match(_IDENTIFIER, "an identifier").group(0)

    # Literals
    def float_literal(self) -> FloatValue:
        return FloatValue(float(self._match(_FLOAT, "a float").group(0)))

    def integer_literal(self) -> IntegerValue:
        start = self.position
        number = int(self._match(_INTEGER, "an integer").group(0))
        if not INT64_MIN <= number <= INT64_MAX:
            self.position = start
            raise GrammarError("a 64-bit integer", start)
        return IntegerValue(number)

    def bool_literal(self) -> BoolValue:
        word = self._match(_BOOLEAN, "TRUE or FALSE").group(0)
        return BoolValue(word.upper() == "TRUE")

    def string_literal(self) -> StringValue:
        return StringValue(self._match(_STRING, "a quoted string").group(1))

    def value(self) -> Value:
        # float first: the integer rule would stop at the '.' of 30.65
        return self.first_of(
            self.float_literal,
            self.integer_literal,
            self.bool_literal,
            self.string_literal,
        )

    # Combinators
    def first_of(self, *alternatives: Callable[[], T]) -> T:
        """Ordered choice: the first alternative that matches wins"""
        start = self.position
        expected = []
        for alternative in alternatives:
            try:
                return alternative()
            except GrammarError as exc:
                self.position = start
                expected.append(exc.expected)
        raise GrammarError(" or ".join(expected), start)

    def optional(self, rule: Callable[..., T], *args) -> Optional[T]:
        start = self.position
        try:
            return rule(*args)
        except GrammarError:
            self.position = start
            return None

    def lookahead(self, rule: Callable[..., object], *args) -> bool:
        """Whether ``rule`` would match here; never moves the cursor"""
        start = self.position
        try:
            rule(*args)
            return True
        except GrammarError:
            return False
        finally:
            self.position = start

    def separated(
        self,
        rule: Callable[[], T],
        separator: Optional[Callable[[], object]] = None,
        allow_empty: bool = False,
    ) -> List[T]:
        """``rule (separator rule)*``.

        A separator is only consumed when another element follows it.
        """
        if separator is None:
            separator = self.comma
        start = self.position
        items = []
        try:
            items.append(rule())
        except GrammarError:
            if not allow_empty:
                raise
            self.position = start
            return items
        while True:
            checkpoint = self.position
            try:
                separator()
                items.append(rule())
            except GrammarError:
                self.position = checkpoint
                return items

    def parenthesized(self, rule: Callable[[], T]) -> T:
        self.symbol("(")
        result = rule()
        self.symbol(")")
        return result

    def expect_end(self):
        """Only whitespace and an optional ';' may follow the statement"""
        self.skip_whitespace()
        if self.text.startswith(";", self.position):
            self.position += 1
            self.skip_whitespace()
        if self.position < len(self.text):
            raise GrammarError("the end of the statement", self.position)

    def finish(self):
        self.clause("unexpected input after the statement", self.expect_end)

    def syntax_error(self, description: str, start: int, failed_at: Optional[int] = None) -> QuerySyntaxError:
        line, column = self.location(failed_at)
        return QuerySyntaxError(description, self.text[start:], line=line, column=column)

    def clause(self, description: str, rule: Callable[..., T], *args) -> T:
        """Run a grammar clause, reporting failure as a ``QuerySyntaxError``"""
        start = self.position
        try:
            return rule(*args)
        except GrammarError as exc:
            raise self.syntax_error(description, start, exc.position) from exc
