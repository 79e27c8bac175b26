"""
Tracker filters

Conversion of tracker export filters into typed SQL parameters.
"""

from healthtrack.tracker.core.exceptions import InvalidFilterError
from healthtrack.tracker.core.exceptions import InvalidFilterValueError
from healthtrack.tracker.core.exceptions import TrackerError
from healthtrack.tracker.core.exceptions import TrackerValidationError
from healthtrack.tracker.core.types import DataElement
from healthtrack.tracker.core.types import FieldKind
from healthtrack.tracker.core.types import TrackedEntityAttribute
from healthtrack.tracker.core.types import ValueType
from healthtrack.tracker.core.types import ValueTypedField
from healthtrack.tracker.export.conditions import filter_condition
from healthtrack.tracker.export.filter_value import BoundFilterValue
from healthtrack.tracker.export.filter_value import QueryFilterValue
from healthtrack.tracker.export.filter_value import SqlParameterValue
from healthtrack.tracker.export.filter_value import UnaryFilterValue
from healthtrack.tracker.export.filter_value import to_query_filter_value
from healthtrack.tracker.export.operators import QueryFilter
from healthtrack.tracker.export.operators import QueryOperator
from healthtrack.tracker.export.operators import parse_filter
from healthtrack.tracker.relationship.fields import RelationshipItemFields
from healthtrack.tracker.relationship.fields import requested_fields

__version__ = '0.1'

__all__ = [
    # Types
    'ValueType',
    'FieldKind',
    'ValueTypedField',
    'TrackedEntityAttribute',
    'DataElement',
    # Exceptions
    'TrackerError',
    'TrackerValidationError',
    'InvalidFilterError',
    'InvalidFilterValueError',
    # Filters
    'QueryOperator',
    'QueryFilter',
    'parse_filter',
    'SqlParameterValue',
    'UnaryFilterValue',
    'BoundFilterValue',
    'QueryFilterValue',
    'to_query_filter_value',
    'filter_condition',
    # Relationships
    'RelationshipItemFields',
    'requested_fields',
]
