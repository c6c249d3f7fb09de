"""
Comparison conditions and the WHERE clause
"""

from typing import Callable, List

from .ast_nodes import Condition, Operator
from .builder import ConditionBuilder
from .lexer import SQLScanner

# two-character operators must be tried before their one-character prefixes
COMPARATORS = (
    Operator.GREATER_OR_EQUALS,
    Operator.LESS_OR_EQUALS,
    Operator.GREATER,
    Operator.LESS,
    Operator.EQUALS,
    Operator.NOT_EQUALS,
)


def _operator_rule(scanner: SQLScanner, operator: Operator) -> Callable[[], Operator]:
    def rule():
        scanner.symbol(operator.value)
        return operator

    return rule


def parse_comparator(scanner: SQLScanner) -> Operator:
    return scanner.first_of(*(_operator_rule(scanner, op) for op in COMPARATORS))


def parse_condition(scanner: SQLScanner) -> Condition:
    """identifier comparator value"""
    column = scanner.identifier()
    operator = parse_comparator(scanner)
    value = scanner.value()
    return ConditionBuilder().column(column).operator(operator).value(value).build()


def _parse_conditions(scanner: SQLScanner) -> List[Condition]:
    scanner.keyword("WHERE")
    return scanner.separated(
        lambda: parse_condition(scanner),
        lambda: scanner.keyword("AND"),
    )


def parse_where_clause(scanner: SQLScanner) -> List[Condition]:
    """``WHERE condition (AND condition)*``; no WHERE means no conditions"""
    if not scanner.lookahead(scanner.keyword, "WHERE"):
        return []
    return scanner.clause(
        "an error occurred while parsing where condition", _parse_conditions, scanner
    )
