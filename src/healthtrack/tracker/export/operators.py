"""Filter operators and the filters built from them."""

from dataclasses import dataclass
from enum import Enum

from healthtrack.tracker.core.exceptions import InvalidFilterError

# Separates the values of a multi-valued filter, e.g. 'in:42;17;7'.
OPTION_SEP = ';'

# Separates operator and value in request filters, e.g. 'eq:42'.
OPERATOR_SEP = ':'

WILDCARD = '%'


class QueryOperator(str, Enum):
    """Operators a tracker filter can use."""

    EQ = 'EQ'
    NEQ = 'NEQ'
    GT = 'GT'
    GE = 'GE'
    LT = 'LT'
    LE = 'LE'
    LIKE = 'LIKE'
    NLIKE = 'NLIKE'
    SW = 'SW'
    EW = 'EW'
    IN = 'IN'
    NULL = 'NULL'
    NNULL = 'NNULL'

    @property
    def is_unary(self) -> bool:
        """Whether the operator takes no value."""
        return self in UNARY_OPERATORS

    @property
    def is_in(self) -> bool:
        """Whether the value holds several options separated by OPTION_SEP."""
        return self is QueryOperator.IN

    @property
    def is_cast_operand(self) -> bool:
        """Whether the value is converted to the field's type when it is numeric."""
        return self in CAST_OPERATORS

    @property
    def is_pattern(self) -> bool:
        """Whether the operator matches text against a wildcard pattern."""
        return self in PATTERN_OPERATORS

    @property
    def sql_operator(self) -> str:
        """Operator as written in SQL."""
        return SQL_OPERATORS[self]


UNARY_OPERATORS = frozenset({QueryOperator.NULL, QueryOperator.NNULL})
PATTERN_OPERATORS = frozenset({
    QueryOperator.LIKE,
    QueryOperator.NLIKE,
    QueryOperator.SW,
    QueryOperator.EW,
})
CAST_OPERATORS = frozenset({
    QueryOperator.EQ,
    QueryOperator.NEQ,
    QueryOperator.GT,
    QueryOperator.GE,
    QueryOperator.LT,
    QueryOperator.LE,
    QueryOperator.IN,
})

SQL_OPERATORS: dict[QueryOperator, str] = {
    QueryOperator.EQ: '=',
    QueryOperator.NEQ: '!=',
    QueryOperator.GT: '>',
    QueryOperator.GE: '>=',
    QueryOperator.LT: '<',
    QueryOperator.LE: '<=',
    QueryOperator.LIKE: 'like',
    QueryOperator.NLIKE: 'not like',
    QueryOperator.SW: 'like',
    QueryOperator.EW: 'like',
    QueryOperator.IN: 'in',
    QueryOperator.NULL: 'is null',
    QueryOperator.NNULL: 'is not null',
}


@dataclass(frozen=True)
class QueryFilter:
    """
    Operator and raw value of a filter on a single field.

    Unary operators carry no value. For IN the value holds all options
    joined with OPTION_SEP.
    """

    operator: QueryOperator
    filter: str | None = None

    def __str__(self) -> str:
        """Format as request filter."""
        if self.filter is None:
            return self.operator.value.lower()
        return f'{self.operator.value.lower()}{OPERATOR_SEP}{self.filter}'


def parse_filter(text: str) -> QueryFilter:
    """
    Parse a request filter of the form 'op:value' or 'op' for unary operators.

    Only the first OPERATOR_SEP splits operator and value, so values may
    contain it.

    Args:
        text: Filter text, e.g. 'in:42;17;7' or 'nnull'

    Returns:
        QueryFilter with the parsed operator and raw value

    Raises:
        InvalidFilterError: If the operator is unknown or a required value is missing

    Example:
        >>> parse_filter('sw:summer')
        QueryFilter(operator=<QueryOperator.SW: 'SW'>, filter='summer')
    """
    op_text, sep, value = text.partition(OPERATOR_SEP)
    try:
        operator = QueryOperator(op_text.strip().upper())
    except ValueError:
        supported = ', '.join(op.value.lower() for op in QueryOperator)
        raise InvalidFilterError(text, f"Unknown operator '{op_text}'. Supported: {supported}") from None

    if operator.is_unary:
        return QueryFilter(operator)

    if not sep or value == '':
        raise InvalidFilterError(text, f"Operator '{operator.value.lower()}' requires a value")

    return QueryFilter(operator, value)
