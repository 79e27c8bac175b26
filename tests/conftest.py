"""Pytest configuration and fixtures."""

import pytest
from sqlalchemy import Column
from sqlalchemy import Integer
from sqlalchemy import MetaData
from sqlalchemy import Numeric
from sqlalchemy import String
from sqlalchemy import Table

from healthtrack.tracker import TrackedEntityAttribute
from healthtrack.tracker import ValueType


@pytest.fixture
def attribute() -> TrackedEntityAttribute:
    """Create text tracked entity attribute."""
    return TrackedEntityAttribute('AttributeA', ValueType.TEXT)


@pytest.fixture
def attribute_values() -> Table:
    """Create table of tracked entity attribute values."""
    metadata = MetaData()
    return Table(
        'trackedentityattributevalue',
        metadata,
        Column('trackedentityid', Integer, primary_key=True),
        Column('value', String(1200)),
        Column('amount', Numeric),
        Column('count', Integer),
    )
