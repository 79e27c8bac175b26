"""Type definitions for tracker filtering."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any
from typing import Protocol
from typing import runtime_checkable

from sqlalchemy import Integer
from sqlalchemy import Numeric
from sqlalchemy import String
from sqlalchemy.types import TypeEngine

_INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
_DECIMAL_PATTERN = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?')

# Range of the SQL INTEGER type.
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1


class ValueType(str, Enum):
    """Declared value type of a tracked entity attribute or data element."""

    TEXT = 'TEXT'
    LONG_TEXT = 'LONG_TEXT'
    MULTI_TEXT = 'MULTI_TEXT'
    LETTER = 'LETTER'
    PHONE_NUMBER = 'PHONE_NUMBER'
    EMAIL = 'EMAIL'
    USERNAME = 'USERNAME'
    URL = 'URL'
    BOOLEAN = 'BOOLEAN'
    TRUE_ONLY = 'TRUE_ONLY'
    DATE = 'DATE'
    DATETIME = 'DATETIME'
    TIME = 'TIME'
    AGE = 'AGE'
    NUMBER = 'NUMBER'
    UNIT_INTERVAL = 'UNIT_INTERVAL'
    PERCENTAGE = 'PERCENTAGE'
    INTEGER = 'INTEGER'
    INTEGER_POSITIVE = 'INTEGER_POSITIVE'
    INTEGER_NEGATIVE = 'INTEGER_NEGATIVE'
    INTEGER_ZERO_OR_POSITIVE = 'INTEGER_ZERO_OR_POSITIVE'
    ORGANISATION_UNIT = 'ORGANISATION_UNIT'

    @property
    def python_type(self) -> type:
        """
        Python type filter values on this type are converted to.

        Only numeric types are converted; all other types compare as text.
        """
        return _PYTHON_TYPES.get(self, str)

    @property
    def is_numeric(self) -> bool:
        """Whether values of this type are numbers."""
        return self in NUMERIC_VALUE_TYPES


INTEGER_VALUE_TYPES = frozenset({
    ValueType.INTEGER,
    ValueType.INTEGER_POSITIVE,
    ValueType.INTEGER_NEGATIVE,
    ValueType.INTEGER_ZERO_OR_POSITIVE,
})
DECIMAL_VALUE_TYPES = frozenset({
    ValueType.NUMBER,
    ValueType.UNIT_INTERVAL,
    ValueType.PERCENTAGE,
})
NUMERIC_VALUE_TYPES = INTEGER_VALUE_TYPES | DECIMAL_VALUE_TYPES

_PYTHON_TYPES: dict[ValueType, type] = {
    **{value_type: int for value_type in INTEGER_VALUE_TYPES},
    **{value_type: Decimal for value_type in DECIMAL_VALUE_TYPES},
}


def parse_text(value: str) -> str:
    """Return text values as they are."""
    return value


def parse_integer(value: str) -> int:
    """
    Parse an integer written as optional sign and ASCII digits within
    the range of the SQL INTEGER type.

    Raises:
        ValueError: If value is not such an integer (e.g. '42.5', ' 42', '4_2')
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f'invalid integer: {value!r}')
    result = int(value)
    if not INTEGER_MIN <= result <= INTEGER_MAX:
        raise ValueError(f'integer out of range: {value!r}')
    return result


def parse_decimal(value: str) -> Decimal:
    """
    Parse a decimal number such as '42.5', '-7' or '1e3'.

    Raises:
        ValueError: If value is not a plain finite decimal (e.g. 'NaN', ' 42', '4_2')
    """
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise ValueError(f'invalid number: {value!r}')
    return Decimal(value)


@dataclass(frozen=True, slots=True)
class SqlType:
    """Producer of typed values from text and the SQL type they are bound with."""

    producer: Callable[[str], Any]
    sql_type: type[TypeEngine]


PYTHON_TO_SQL_TYPES: dict[type, SqlType] = {
    str: SqlType(parse_text, String),
    int: SqlType(parse_integer, Integer),
    Decimal: SqlType(parse_decimal, Numeric),
}


class FieldKind(str, Enum):
    """Kind of field a filter is applied to."""

    ATTRIBUTE = 'attribute'
    DATA_ELEMENT = 'data element'


@runtime_checkable
class ValueTypedField(Protocol):
    """Field with a UID and a declared value type that can be filtered on."""

    uid: str
    value_type: ValueType

    @property
    def kind(self) -> FieldKind:
        """Kind of the field, used in error messages."""
        ...


@dataclass(frozen=True)
class TrackedEntityAttribute:
    """Tracked entity attribute."""

    uid: str
    value_type: ValueType = ValueType.TEXT
    name: str | None = None

    @property
    def kind(self) -> FieldKind:
        return FieldKind.ATTRIBUTE


@dataclass(frozen=True)
class DataElement:
    """Data element captured in events."""

    uid: str
    value_type: ValueType = ValueType.TEXT
    name: str | None = None

    @property
    def kind(self) -> FieldKind:
        return FieldKind.DATA_ELEMENT
