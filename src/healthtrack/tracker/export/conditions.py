"""SQLAlchemy conditions from converted filter values."""

import logging

from sqlalchemy.sql.expression import ColumnElement

from healthtrack.tracker.export.filter_value import BoundFilterValue
from healthtrack.tracker.export.filter_value import QueryFilterValue
from healthtrack.tracker.export.filter_value import UnaryFilterValue
from healthtrack.tracker.export.operators import QueryOperator

logger = logging.getLogger(__name__)


def filter_condition(
    column: ColumnElement,
    filter_value: QueryFilterValue,
    key: str,
) -> ColumnElement[bool]:
    """
    Build the WHERE condition of a filter on a column.

    Args:
        column: Column or expression the filter applies to
        filter_value: Converted filter value
        key: Name of the bind parameter holding the value

    Returns:
        SQLAlchemy boolean clause
    """
    match filter_value:
        case UnaryFilterValue(operator=QueryOperator.NULL):
            return column.is_(None)
        case UnaryFilterValue(operator=QueryOperator.NNULL):
            return column.is_not(None)
        case BoundFilterValue(operator=operator, value=value):
            logger.debug(f'Building {operator.sql_operator} condition with parameter {key}')
            param = value.to_bindparam(key)
            match operator:
                case QueryOperator.IN:
                    return column.in_(param)
                case QueryOperator.NLIKE:
                    return column.not_like(param)
                case QueryOperator.LIKE | QueryOperator.SW | QueryOperator.EW:
                    return column.like(param)
                case QueryOperator.EQ:
                    return column == param
                case QueryOperator.NEQ:
                    return column != param
                case QueryOperator.GT:
                    return column > param
                case QueryOperator.GE:
                    return column >= param
                case QueryOperator.LT:
                    return column < param
                case QueryOperator.LE:
                    return column <= param

    raise ValueError(f'Unsupported filter value: {filter_value!r}')
