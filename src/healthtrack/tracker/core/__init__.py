"""Core types, errors and settings."""

from healthtrack.tracker.core.exceptions import InvalidFilterError
from healthtrack.tracker.core.exceptions import InvalidFilterValueError
from healthtrack.tracker.core.exceptions import TrackerError
from healthtrack.tracker.core.exceptions import TrackerValidationError
from healthtrack.tracker.core.types import PYTHON_TO_SQL_TYPES
from healthtrack.tracker.core.types import DataElement
from healthtrack.tracker.core.types import FieldKind
from healthtrack.tracker.core.types import SqlType
from healthtrack.tracker.core.types import TrackedEntityAttribute
from healthtrack.tracker.core.types import ValueType
from healthtrack.tracker.core.types import ValueTypedField

__all__ = [
    'TrackerError',
    'TrackerValidationError',
    'InvalidFilterError',
    'InvalidFilterValueError',
    'ValueType',
    'SqlType',
    'PYTHON_TO_SQL_TYPES',
    'FieldKind',
    'ValueTypedField',
    'TrackedEntityAttribute',
    'DataElement',
]
