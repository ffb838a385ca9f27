"""
Social graph analytics over users and the places they like.

Relational distance, friend recommendations, activity plans and place
recommendations computed against a pluggable data source.
"""

from .engine import SocialGraphEngine, open_source
from .errors import SocialGraphError, InvalidArgument, UnknownEntity, DataUnavailable
from .services import NOT_REACHABLE, ActivityPlan, UserSummary, PlaceSummary

__all__ = [
    "SocialGraphEngine",
    "open_source",
    "SocialGraphError",
    "InvalidArgument",
    "UnknownEntity",
    "DataUnavailable",
    "NOT_REACHABLE",
    "ActivityPlan",
    "UserSummary",
    "PlaceSummary",
]
