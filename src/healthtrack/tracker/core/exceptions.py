"""Tracker exception hierarchy."""


class TrackerError(Exception):
    """Base exception for tracker errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize tracker exception.

        Args:
            message: Error message
        """
        super().__init__(message)


class TrackerValidationError(TrackerError):
    """Request input failed validation."""


class InvalidFilterError(TrackerValidationError):
    """Filter text could not be parsed into operator and value."""

    def __init__(self, filter_text: str, reason: str) -> None:
        """
        Initialize invalid filter error.

        Args:
            filter_text: Filter text as given in the request
            reason: Why the filter is invalid
        """
        self.filter_text = filter_text
        self.reason = reason
        super().__init__(f'Filter `{filter_text}` is invalid. {reason}')


class InvalidFilterValueError(TrackerValidationError):
    """Filter value does not match the value type of the filtered field."""

    def __init__(
        self,
        field_kind: str,
        field_uid: str,
        filter_text: str,
        value_type: str,
    ) -> None:
        """
        Initialize invalid filter value error.

        Args:
            field_kind: 'attribute' or 'data element'
            field_uid: UID of the filtered field
            filter_text: Raw filter text before splitting into operands
            value_type: Name of the value type the text was converted to
        """
        self.field_kind = field_kind
        self.field_uid = field_uid
        self.filter_text = filter_text
        self.value_type = value_type
        super().__init__(
            f'Filter for {field_kind} {field_uid} is invalid. '
            f'Could not convert value `{filter_text}` to value type {value_type}.'
        )
