"""
Which parts of a relationship item to export.

RelationshipItemFields indicates which of the relationship item fields should be
exported, so data that is not needed is not retrieved. Field names are those of
the view layer, e.g. 'trackedEntity.attributes'.
"""

from collections.abc import Callable
from collections.abc import Iterable
from dataclasses import dataclass

FieldPredicate = Callable[[str], bool]

WILDCARD_FIELD = '*'


def _nested(includes_fields: FieldPredicate, parent: str, path_separator: str) -> FieldPredicate:
    """Predicate for fields below parent."""
    return lambda field: includes_fields(f'{parent}{path_separator}{field}')


def _select_nothing(field: str) -> bool:
    return False


def _select_everything(field: str) -> bool:
    return True


@dataclass(frozen=True)
class TrackedEntityFields:
    """Parts of a tracked entity to export."""

    includes_attributes: bool = False
    includes_enrollments: bool = False

    @classmethod
    def of(cls, includes_fields: FieldPredicate, path_separator: str) -> 'TrackedEntityFields':
        _ = path_separator
        return cls(
            includes_attributes=includes_fields('attributes'),
            includes_enrollments=includes_fields('enrollments'),
        )

    @classmethod
    def none(cls) -> 'TrackedEntityFields':
        return cls()


@dataclass(frozen=True)
class EnrollmentFields:
    """Parts of an enrollment to export."""

    includes_events: bool = False
    includes_attributes: bool = False

    @classmethod
    def of(cls, includes_fields: FieldPredicate, path_separator: str) -> 'EnrollmentFields':
        _ = path_separator
        return cls(
            includes_events=includes_fields('events'),
            includes_attributes=includes_fields('attributes'),
        )

    @classmethod
    def none(cls) -> 'EnrollmentFields':
        return cls()


@dataclass(frozen=True)
class EventFields:
    """Parts of an event to export. Events have no optional parts yet."""

    @classmethod
    def of(cls, includes_fields: FieldPredicate) -> 'EventFields':
        _ = includes_fields
        return cls()

    @classmethod
    def none(cls) -> 'EventFields':
        return cls()


@dataclass(frozen=True)
class RelationshipItemFields:
    """Parts of a relationship item (tracked entity, enrollment or event) to export."""

    includes_tracked_entity: bool = False
    tracked_entity_fields: TrackedEntityFields = TrackedEntityFields()
    includes_enrollment: bool = False
    enrollment_fields: EnrollmentFields = EnrollmentFields()
    includes_event: bool = False
    event_fields: EventFields = EventFields()

    @classmethod
    def of(cls, includes_fields: FieldPredicate, path_separator: str) -> 'RelationshipItemFields':
        """
        Create from a predicate telling whether a field path was requested.

        Args:
            includes_fields: Tests a field path such as 'trackedEntity.attributes'
            path_separator: Separator of path segments used by the predicate

        Returns:
            RelationshipItemFields
        """
        includes_tracked_entity = includes_fields('trackedEntity')
        includes_enrollment = includes_fields('enrollments')
        includes_event = includes_fields('event')
        return cls(
            includes_tracked_entity=includes_tracked_entity,
            tracked_entity_fields=(
                TrackedEntityFields.of(_nested(includes_fields, 'trackedEntity', path_separator), path_separator)
                if includes_tracked_entity
                else TrackedEntityFields.none()
            ),
            includes_enrollment=includes_enrollment,
            enrollment_fields=(
                EnrollmentFields.of(_nested(includes_fields, 'enrollments', path_separator), path_separator)
                if includes_enrollment
                else EnrollmentFields.none()
            ),
            includes_event=includes_event,
            event_fields=(
                EventFields.of(_nested(includes_fields, 'event', path_separator))
                if includes_event
                else EventFields.none()
            ),
        )

    @classmethod
    def none(cls) -> 'RelationshipItemFields':
        """Use this if you do not want fields to be exported."""
        # the separator does not matter, the predicate ignores the path
        return cls.of(_select_nothing, 'x')

    @classmethod
    def all(cls) -> 'RelationshipItemFields':
        """Use this if you want all fields to be exported. This is potentially expensive!"""
        return cls.of(_select_everything, 'x')


def requested_fields(paths: Iterable[str], path_separator: str = '.') -> FieldPredicate:
    """
    Build a field predicate from the requested field paths.

    A path is included if it was requested, if a field below it was requested
    (it has to be fetched to get there) or if a field above it was requested
    (requesting a field exports all of it). '*' includes everything.

    Args:
        paths: Requested paths, e.g. ['trackedEntity.attributes', 'event']
        path_separator: Separator of path segments

    Returns:
        Predicate for RelationshipItemFields.of

    Example:
        >>> includes = requested_fields(['trackedEntity.attributes'])
        >>> includes('trackedEntity'), includes('trackedEntity.enrollments')
        (True, False)
    """
    requested = frozenset(paths)
    if WILDCARD_FIELD in requested:
        return _select_everything

    def includes(field: str) -> bool:
        for path in requested:
            if path == field:
                return True
            if path.startswith(f'{field}{path_separator}'):
                return True
            if field.startswith(f'{path}{path_separator}'):
                return True
        return False

    return includes
