"""Relationship export helpers."""

from healthtrack.tracker.relationship.fields import EnrollmentFields
from healthtrack.tracker.relationship.fields import EventFields
from healthtrack.tracker.relationship.fields import RelationshipItemFields
from healthtrack.tracker.relationship.fields import TrackedEntityFields
from healthtrack.tracker.relationship.fields import requested_fields

__all__ = [
    'RelationshipItemFields',
    'TrackedEntityFields',
    'EnrollmentFields',
    'EventFields',
    'requested_fields',
]
