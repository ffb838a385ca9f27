"""
Services layer for the social graph engine.

This module provides the graph analytics as reusable services sharing one
ServiceContext (data source, graph index).
"""

from .base import BaseService, ServiceContext
from .path_service import PathService, NOT_REACHABLE
from .friend_service import FriendRecommendationService
from .activity_service import ActivityService, ActivityPlan, UserSummary, PlaceSummary
from .place_service import PlaceRecommendationService

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Services
    "PathService",
    "FriendRecommendationService",
    "ActivityService",
    "PlaceRecommendationService",
    # Data classes
    "ActivityPlan",
    "UserSummary",
    "PlaceSummary",
    # Constants
    "NOT_REACHABLE",
]


def create_services(context: ServiceContext):
    """
    Factory function to create all services over one context.

    Args:
        context: ServiceContext with a built graph index

    Returns:
        Tuple of (paths, friends, activities, places)
    """
    return (
        PathService(context),
        FriendRecommendationService(context),
        ActivityService(context),
        PlaceRecommendationService(context)
    )
