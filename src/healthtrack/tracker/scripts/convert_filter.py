#!/usr/bin/env python3
"""Console script to convert a tracker filter into its SQL parameter value."""

import json
from enum import Enum
from typing import Annotated
from typing import Any

import typer

from healthtrack.tracker.core.config import get_settings
from healthtrack.tracker.core.exceptions import TrackerValidationError
from healthtrack.tracker.core.logging_config import configure_logging
from healthtrack.tracker.core.types import DataElement
from healthtrack.tracker.core.types import TrackedEntityAttribute
from healthtrack.tracker.core.types import ValueType
from healthtrack.tracker.export.filter_value import BoundFilterValue
from healthtrack.tracker.export.filter_value import QueryFilterValue
from healthtrack.tracker.export.filter_value import to_query_filter_value
from healthtrack.tracker.export.operators import parse_filter

app = typer.Typer(help='Convert tracker filters into typed SQL parameter values.')


class Kind(str, Enum):
    """Kind of field on the command line."""

    ATTRIBUTE = 'attribute'
    DATA_ELEMENT = 'data-element'


@app.command()
def convert(
    filter_text: Annotated[
        str,
        typer.Argument(metavar='FILTER', help="Filter as 'op:value', e.g. 'in:42;17;7' or 'nnull'"),
    ],
    value_type: Annotated[
        ValueType,
        typer.Option('--value-type', '-t', case_sensitive=False, help='Value type of the filtered field'),
    ] = ValueType.TEXT,
    uid: Annotated[
        str,
        typer.Option('--uid', '-u', help='UID of the filtered field'),
    ] = 'field',
    kind: Annotated[
        Kind,
        typer.Option('--kind', '-k', case_sensitive=False, help='Kind of the filtered field'),
    ] = Kind.ATTRIBUTE,
    pretty: Annotated[
        bool | None,
        typer.Option('--pretty/--no-pretty', help='Pretty print output (default from TRACKER_PRETTY)'),
    ] = None,
) -> None:
    """
    Convert a filter on a field into the value bound in SQL.

    Examples:

        uv run convert-filter 'in:42;17;7' --value-type INTEGER

        uv run convert-filter 'sw:summer' --kind data-element --uid qrur9Dvnyt5
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    if pretty is None:
        pretty = settings.pretty

    field = (
        TrackedEntityAttribute(uid, value_type)
        if kind is Kind.ATTRIBUTE
        else DataElement(uid, value_type)
    )

    try:
        result = to_query_filter_value(parse_filter(filter_text), field)
    except TrackerValidationError as e:
        typer.echo(f'Error: {e}', err=True)
        raise typer.Exit(1)

    typer.echo(json.dumps(_to_dict(result), indent=2 if pretty else None, default=str))


def _to_dict(result: QueryFilterValue) -> dict[str, Any]:
    """Convert a filter value to a JSON serializable dictionary."""
    data: dict[str, Any] = {
        'operator': result.operator.value,
        'sql_operator': result.sql_operator,
        'value': None,
    }
    if isinstance(result, BoundFilterValue):
        data['value'] = result.value.value
        data['sql_type'] = result.value.sql_type.__name__
        data['is_array'] = result.value.is_array
    return data


def main() -> None:
    """Entry point for the script."""
    app()


if __name__ == '__main__':
    main()
