"""Conversion of tracker export filters."""

from healthtrack.tracker.export.conditions import filter_condition
from healthtrack.tracker.export.filter_value import BoundFilterValue
from healthtrack.tracker.export.filter_value import QueryFilterValue
from healthtrack.tracker.export.filter_value import SqlParameterValue
from healthtrack.tracker.export.filter_value import UnaryFilterValue
from healthtrack.tracker.export.filter_value import to_query_filter_value
from healthtrack.tracker.export.operators import OPTION_SEP
from healthtrack.tracker.export.operators import WILDCARD
from healthtrack.tracker.export.operators import QueryFilter
from healthtrack.tracker.export.operators import QueryOperator
from healthtrack.tracker.export.operators import parse_filter

__all__ = [
    'OPTION_SEP',
    'WILDCARD',
    'QueryOperator',
    'QueryFilter',
    'parse_filter',
    'SqlParameterValue',
    'UnaryFilterValue',
    'BoundFilterValue',
    'QueryFilterValue',
    'to_query_filter_value',
    'filter_condition',
]
