"""Tests for converting filters into SQL parameter values."""

from decimal import Decimal

import pytest
from sqlalchemy import Integer
from sqlalchemy import Numeric
from sqlalchemy import String

from healthtrack.tracker import BoundFilterValue
from healthtrack.tracker import DataElement
from healthtrack.tracker import InvalidFilterValueError
from healthtrack.tracker import QueryFilter
from healthtrack.tracker import QueryOperator
from healthtrack.tracker import TrackedEntityAttribute
from healthtrack.tracker import UnaryFilterValue
from healthtrack.tracker import ValueType
from healthtrack.tracker import to_query_filter_value


def _attribute(value_type: ValueType) -> TrackedEntityAttribute:
    return TrackedEntityAttribute('AttributeA', value_type)


class TestValueType:
    """Tests for value type properties."""

    def test_numeric_types_convert_to_numbers(self) -> None:
        """Test integer and decimal types have their Python types."""
        assert ValueType.INTEGER_POSITIVE.python_type is int
        assert ValueType.PERCENTAGE.python_type is Decimal

    @pytest.mark.parametrize('value_type', [ValueType.DATE, ValueType.BOOLEAN, ValueType.TIME, ValueType.TEXT])
    def test_other_types_compare_as_text(self, value_type: ValueType) -> None:
        """Test non-numeric types are not converted."""
        assert value_type.python_type is str
        assert not value_type.is_numeric


class TestNumericValues:
    """Tests for filters on numeric fields."""

    def test_number(self) -> None:
        """Test NUMBER values convert to Decimal."""
        result = to_query_filter_value(QueryFilter(QueryOperator.EQ, '42.5'), _attribute(ValueType.NUMBER))

        assert isinstance(result, BoundFilterValue)
        assert result.sql_operator == '='
        assert result.value.sql_type is Numeric
        assert result.value.value == Decimal('42.5')
        assert result.value.is_array is False

    def test_number_in_values(self) -> None:
        """Test IN options on NUMBER fields convert in order."""
        result = to_query_filter_value(QueryFilter(QueryOperator.IN, '42.5;17.2;7'), _attribute(ValueType.NUMBER))

        assert result.sql_operator == 'in'
        assert result.value.sql_type is Numeric
        assert result.value.is_array is True
        assert result.value.value == [Decimal('42.5'), Decimal('17.2'), Decimal('7')]

    def test_integer(self) -> None:
        """Test INTEGER values convert to int."""
        result = to_query_filter_value(QueryFilter(QueryOperator.EQ, '42'), _attribute(ValueType.INTEGER))

        assert result.value.sql_type is Integer
        assert result.value.value == 42

    def test_integer_in_values(self) -> None:
        """Test IN options on INTEGER fields convert in order."""
        result = to_query_filter_value(QueryFilter(QueryOperator.IN, '42;17;7'), _attribute(ValueType.INTEGER))

        assert result.value.sql_type is Integer
        assert result.value.is_array is True
        assert result.value.value == [42, 17, 7]

    def test_in_values_drop_trailing_empty_options(self) -> None:
        """Test a trailing separator adds no empty option."""
        result = to_query_filter_value(QueryFilter(QueryOperator.IN, '42;17;'), _attribute(ValueType.INTEGER))

        assert result.value.value == [42, 17]

    def test_integer_range_bounds(self) -> None:
        """Test the smallest and largest SQL INTEGER values are accepted."""
        result = to_query_filter_value(
            QueryFilter(QueryOperator.IN, '-2147483648;2147483647'), _attribute(ValueType.INTEGER)
        )

        assert result.value.value == [-2147483648, 2147483647]

    def test_signed_integer(self) -> None:
        """Test signs are allowed on integers."""
        result = to_query_filter_value(
            QueryFilter(QueryOperator.GT, '-3'), _attribute(ValueType.INTEGER_NEGATIVE)
        )

        assert result.value.value == -3
        assert result.sql_operator == '>'

    @pytest.mark.parametrize('value_type', [ValueType.PERCENTAGE, ValueType.UNIT_INTERVAL])
    def test_other_decimal_types(self, value_type: ValueType) -> None:
        """Test all decimal value types convert to Decimal."""
        result = to_query_filter_value(QueryFilter(QueryOperator.LE, '0.5'), _attribute(value_type))

        assert result.value.sql_type is Numeric
        assert result.value.value == Decimal('0.5')


class TestInvalidNumericValues:
    """Tests for values that do not match a numeric value type."""

    def test_integer_value_is_not_integer(self) -> None:
        """Test decimals are rejected on INTEGER fields."""
        with pytest.raises(InvalidFilterValueError) as exc_info:
            to_query_filter_value(QueryFilter(QueryOperator.EQ, '42.5'), _attribute(ValueType.INTEGER))

        assert str(exc_info.value) == (
            'Filter for attribute AttributeA is invalid. '
            'Could not convert value `42.5` to value type INTEGER.'
        )

    def test_integer_in_value_contains_non_integer(self) -> None:
        """Test one bad option fails the whole filter and the message has the raw value."""
        with pytest.raises(InvalidFilterValueError) as exc_info:
            to_query_filter_value(QueryFilter(QueryOperator.IN, '42;17.5;7'), _attribute(ValueType.INTEGER))

        message = str(exc_info.value)
        assert '42;17.5;7' in message
        assert 'INTEGER' in message

    def test_number_value_is_not_numeric(self) -> None:
        """Test text is rejected on NUMBER fields."""
        with pytest.raises(InvalidFilterValueError, match='is invalid') as exc_info:
            to_query_filter_value(QueryFilter(QueryOperator.EQ, 'not-a-number'), _attribute(ValueType.NUMBER))

        assert 'not-a-number' in str(exc_info.value)
        assert 'NUMBER' in str(exc_info.value)

    def test_number_in_value_contains_non_numeric(self) -> None:
        """Test the raw value, not only the bad option, is reported."""
        with pytest.raises(InvalidFilterValueError) as exc_info:
            to_query_filter_value(QueryFilter(QueryOperator.IN, '42.5;not a number;7'), _attribute(ValueType.NUMBER))

        assert '`42.5;not a number;7`' in str(exc_info.value)

    @pytest.mark.parametrize('value', ['NaN', 'Infinity', ' 42', '', '4_2'])
    def test_number_rejects_non_finite_and_padded(self, value: str) -> None:
        """Test values Decimal would accept but are not plain numbers."""
        with pytest.raises(InvalidFilterValueError):
            to_query_filter_value(QueryFilter(QueryOperator.EQ, value), _attribute(ValueType.NUMBER))

    @pytest.mark.parametrize('value', ['4_2', ' 42', '42 ', '0x2a', ''])
    def test_integer_rejects_non_digits(self, value: str) -> None:
        """Test values int() would accept but are not plain integers."""
        with pytest.raises(InvalidFilterValueError):
            to_query_filter_value(QueryFilter(QueryOperator.EQ, value), _attribute(ValueType.INTEGER))

    @pytest.mark.parametrize('value', ['2147483648', '-2147483649', '99999999999'])
    def test_integer_out_of_range(self, value: str) -> None:
        """Test integers outside the SQL INTEGER range are rejected."""
        with pytest.raises(InvalidFilterValueError, match=f'`{value}` to value type INTEGER'):
            to_query_filter_value(QueryFilter(QueryOperator.EQ, value), _attribute(ValueType.INTEGER))

    def test_empty_option_in_the_middle_fails(self) -> None:
        """Test only trailing empty options are dropped."""
        with pytest.raises(InvalidFilterValueError, match='`42;;7`'):
            to_query_filter_value(QueryFilter(QueryOperator.IN, '42;;7'), _attribute(ValueType.INTEGER))

    def test_error_names_data_element(self) -> None:
        """Test data elements are named as such."""
        field = DataElement('DataElemntA', ValueType.INTEGER)

        with pytest.raises(InvalidFilterValueError, match='Filter for data element DataElemntA') as exc_info:
            to_query_filter_value(QueryFilter(QueryOperator.EQ, 'x'), field)

        error = exc_info.value
        assert error.field_kind == 'data element'
        assert error.field_uid == 'DataElemntA'
        assert error.filter_text == 'x'
        assert error.value_type == 'INTEGER'
        assert isinstance(error.__cause__, ValueError)


class TestTextValues:
    """Tests for filters on text fields."""

    def test_text(self, attribute: TrackedEntityAttribute) -> None:
        """Test text values stay as they are."""
        result = to_query_filter_value(QueryFilter(QueryOperator.EQ, 'summer day'), attribute)

        assert result.value.sql_type is String
        assert result.value.value == 'summer day'

    def test_text_in_values(self, attribute: TrackedEntityAttribute) -> None:
        """Test IN options on text fields are split in order."""
        result = to_query_filter_value(QueryFilter(QueryOperator.IN, 'summer;winter;spring'), attribute)

        assert result.value.sql_type is String
        assert result.value.is_array is True
        assert result.value.value == ['summer', 'winter', 'spring']

    def test_text_in_values_keep_empty_options_in_the_middle(self, attribute: TrackedEntityAttribute) -> None:
        """Test empty options are kept unless they are at the end."""
        result = to_query_filter_value(QueryFilter(QueryOperator.IN, 'summer;;winter;;'), attribute)

        assert result.value.value == ['summer', '', 'winter']

    def test_non_numeric_value_is_not_validated(self, attribute: TrackedEntityAttribute) -> None:
        """Test text fields accept anything."""
        result = to_query_filter_value(QueryFilter(QueryOperator.EQ, 'not-a-number'), attribute)

        assert result.value.value == 'not-a-number'

    @pytest.mark.parametrize('value_type', [ValueType.DATE, ValueType.BOOLEAN, ValueType.ORGANISATION_UNIT])
    def test_non_numeric_types_bind_as_text(self, value_type: ValueType) -> None:
        """Test only numeric value types are converted."""
        result = to_query_filter_value(QueryFilter(QueryOperator.EQ, '2024-01-01'), _attribute(value_type))

        assert result.value.sql_type is String
        assert result.value.value == '2024-01-01'


class TestPatternOperators:
    """Tests for LIKE style operators."""

    @pytest.mark.parametrize(
        ('operator', 'expected'),
        [
            (QueryOperator.SW, 'summer%'),
            (QueryOperator.EW, '%summer'),
            (QueryOperator.LIKE, '%summer%'),
            (QueryOperator.NLIKE, '%summer%'),
        ],
    )
    def test_wildcards(self, attribute: TrackedEntityAttribute, operator: QueryOperator, expected: str) -> None:
        """Test wildcards are added around the value."""
        result = to_query_filter_value(QueryFilter(operator, 'summer'), attribute)

        assert result.value.sql_type is String
        assert result.value.value == expected

    def test_starts_with_renders_like(self, attribute: TrackedEntityAttribute) -> None:
        """Test starts with is a LIKE in SQL."""
        result = to_query_filter_value(QueryFilter(QueryOperator.SW, 'summer'), attribute)

        assert result.operator is QueryOperator.SW
        assert result.sql_operator == 'like'

    @pytest.mark.parametrize('value_type', [ValueType.INTEGER, ValueType.NUMBER])
    def test_numeric_fields_are_matched_as_text(self, value_type: ValueType) -> None:
        """Test pattern values on numeric fields are not converted."""
        result = to_query_filter_value(QueryFilter(QueryOperator.SW, '4.'), _attribute(value_type))

        assert result.value.sql_type is String
        assert result.value.value == '4.%'


class TestUnaryOperators:
    """Tests for operators without value."""

    def test_unary_operator_has_no_value(self) -> None:
        """Test NNULL is not validated against the value type."""
        result = to_query_filter_value(QueryFilter(QueryOperator.NNULL), _attribute(ValueType.NUMBER))

        assert isinstance(result, UnaryFilterValue)
        assert result.sql_operator == 'is not null'
        assert not hasattr(result, 'value')

    def test_unary_operator_ignores_value(self) -> None:
        """Test a value given with a unary operator is ignored."""
        result = to_query_filter_value(QueryFilter(QueryOperator.NULL, 'not a number'), _attribute(ValueType.INTEGER))

        assert result == UnaryFilterValue(QueryOperator.NULL)
        assert result.sql_operator == 'is null'


class TestPureConversion:
    """Tests that conversion has no hidden state."""

    def test_same_input_same_result(self) -> None:
        """Test converting twice gives equal results."""
        query_filter = QueryFilter(QueryOperator.IN, '1;2;3')
        field = _attribute(ValueType.INTEGER)

        assert to_query_filter_value(query_filter, field) == to_query_filter_value(query_filter, field)
