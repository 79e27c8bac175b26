"""Conversion of tracker filters into typed SQL parameter values."""

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import bindparam
from sqlalchemy.sql.elements import BindParameter
from sqlalchemy.types import TypeEngine

from healthtrack.tracker.core.exceptions import InvalidFilterValueError
from healthtrack.tracker.core.types import PYTHON_TO_SQL_TYPES
from healthtrack.tracker.core.types import SqlType
from healthtrack.tracker.core.types import ValueTypedField
from healthtrack.tracker.export.operators import OPTION_SEP
from healthtrack.tracker.export.operators import WILDCARD
from healthtrack.tracker.export.operators import QueryFilter
from healthtrack.tracker.export.operators import QueryOperator

logger = logging.getLogger(__name__)

_TEXT_SQL_TYPE = PYTHON_TO_SQL_TYPES[str]


@dataclass(frozen=True, slots=True)
class SqlParameterValue:
    """
    Typed value ready for SQL parameter binding.

    For arrays, value is a list and sql_type is the type of its elements.
    """

    sql_type: type[TypeEngine]
    value: Any
    is_array: bool = False

    def to_bindparam(self, key: str) -> BindParameter:
        """
        Create a SQLAlchemy bind parameter for this value.

        Arrays become expanding parameters so they can be used with IN.

        Args:
            key: Parameter name

        Returns:
            SQLAlchemy bind parameter
        """
        return bindparam(key, self.value, type_=self.sql_type(), expanding=self.is_array)


@dataclass(frozen=True, slots=True)
class UnaryFilterValue:
    """Filter value of an operator that takes no value, like 'is not null'."""

    operator: QueryOperator

    @property
    def sql_operator(self) -> str:
        return self.operator.sql_operator


@dataclass(frozen=True, slots=True)
class BoundFilterValue:
    """Filter value of an operator that compares against a bound parameter."""

    operator: QueryOperator
    value: SqlParameterValue

    @property
    def sql_operator(self) -> str:
        return self.operator.sql_operator


QueryFilterValue = UnaryFilterValue | BoundFilterValue


def to_query_filter_value(query_filter: QueryFilter, field: ValueTypedField) -> QueryFilterValue:
    """
    Convert a filter on a field into a value that can be bound in SQL.

    Values are converted to the field's value type if the type is numeric and
    the operator compares values (=, <, in, ...). Pattern operators like 'sw'
    always match text, even on numeric fields, and get wildcards added.

    Args:
        query_filter: Filter to convert
        field: Attribute or data element the filter applies to

    Returns:
        UnaryFilterValue for operators without value, BoundFilterValue otherwise

    Raises:
        InvalidFilterValueError: If any of the values cannot be converted to the
            field's value type. No partial result is returned.

    Example:
        >>> from healthtrack.tracker.core.types import TrackedEntityAttribute, ValueType
        >>> attribute = TrackedEntityAttribute('w75KJ2mc4zz', ValueType.INTEGER)
        >>> result = to_query_filter_value(QueryFilter(QueryOperator.IN, '42;17;7'), attribute)
        >>> result.value.value
        [42, 17, 7]
    """
    operator = query_filter.operator
    if operator.is_unary:
        return UnaryFilterValue(operator)

    raw = query_filter.filter or ''
    values = _split_options(raw) if operator.is_in else [raw]

    sql_type = _TEXT_SQL_TYPE
    if operator.is_cast_operand and field.value_type.is_numeric:
        sql_type = PYTHON_TO_SQL_TYPES[field.value_type.python_type]

    logger.debug(
        f'Converting {operator.value} filter on {field.kind.value} {field.uid} '
        f'with {len(values)} value(s) to {sql_type.sql_type.__name__}'
    )
    converted = _convert_values(query_filter, field, sql_type, values)
    if operator.is_pattern:
        converted = [_to_pattern(operator, value) for value in converted]

    if operator.is_in:
        return BoundFilterValue(operator, SqlParameterValue(sql_type.sql_type, converted, is_array=True))
    return BoundFilterValue(operator, SqlParameterValue(sql_type.sql_type, converted[0]))


def _convert_values(
    query_filter: QueryFilter,
    field: ValueTypedField,
    sql_type: SqlType,
    values: list[str],
) -> list[Any]:
    """Convert all values or fail on the first one that does not convert."""
    try:
        return [sql_type.producer(value) for value in values]
    except (ValueError, ArithmeticError) as e:
        raise InvalidFilterValueError(
            field_kind=field.kind.value,
            field_uid=field.uid,
            filter_text=query_filter.filter or '',
            value_type=field.value_type.value,
        ) from e


def _split_options(raw: str) -> list[str]:
    """Split IN options, dropping empty options at the end like '42;17;'."""
    if not raw:
        return [raw]
    options = raw.split(OPTION_SEP)
    while options and not options[-1]:
        options.pop()
    return options


def _to_pattern(operator: QueryOperator, value: str) -> str:
    """Add wildcards to a text value for pattern operators."""
    match operator:
        case QueryOperator.SW:
            return f'{value}{WILDCARD}'
        case QueryOperator.EW:
            return f'{WILDCARD}{value}'
        case _:
            return f'{WILDCARD}{value}{WILDCARD}'
