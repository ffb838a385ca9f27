"""
Activity planning service.

Picks a user's geographically closest friends and the places that suit that
group best.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Optional

from ..graph.ranking import ScoredQueue, centroid, geo_distance, highest_first, lowest_first
from .base import BaseService

logger = logging.getLogger(__name__)

# suitability = likes / (distance to centroid + SUITABILITY_OFFSET)
SUITABILITY_OFFSET = 0.01


@dataclass
class UserSummary:
    """Display attributes of a user."""
    user_id: int
    first_name: str
    last_name: str
    latitude: float
    longitude: float


@dataclass
class PlaceSummary:
    """Display attributes of a place."""
    place_id: int
    name: str
    category: str
    latitude: float
    longitude: float


@dataclass
class ActivityPlan:
    """A user, their closest friends, and places to go together."""
    user: Optional[UserSummary] = None
    close_friends: List[UserSummary] = field(default_factory=list)
    suggested_places: List[PlaceSummary] = field(default_factory=list)
    place_scores: Dict[int, float] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ActivityPlan":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.user is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user": asdict(self.user) if self.user else None,
            "friends": [asdict(f) for f in self.close_friends],
            "places": [asdict(p) for p in self.suggested_places],
            "place_scores": dict(self.place_scores)
        }


class ActivityService(BaseService):
    """
    Plans activities for a user and their nearest friends.

    Suitability of a place is the number of likes it has in the group divided
    by its distance to the group's centroid (plus a small offset).
    """

    def plan_activities(self, user_id: int, max_friends: int, max_places: int) -> ActivityPlan:
        """
        Build an activity plan.

        Args:
            user_id: User to plan for
            max_friends: Maximum number of close friends to include
            max_places: Maximum number of places to suggest

        Returns:
            ActivityPlan (empty when either limit is zero)
        """
        if max_friends == 0 or max_places == 0:
            return ActivityPlan.empty()

        self.require_non_negative("max_friends", max_friends)
        self.require_non_negative("max_places", max_places)
        self.require_user(user_id)

        user_location = self.fetch(self.source.user_location, user_id)

        # Step 1: nearest friends
        nearest = ScoredQueue(key=lowest_first)
        friend_locations = {}
        for friend in self.known_friends(user_id):
            friend_locations[friend] = self.fetch(self.source.user_location, friend)
            nearest.push(friend, geo_distance(user_location, friend_locations[friend]))

        close_friends = [scored.item for scored in nearest.pop_many(max_friends)]

        # Step 2: centroid of the group, the user's own location without friends
        if close_friends:
            center = centroid(friend_locations[f] for f in close_friends)
        else:
            center = user_location

        # Step 3: one like per distinct place per person
        likes = Counter()
        for person in [user_id, *close_friends]:
            likes.update(set(self.fetch(self.source.liked_places_of, person)))

        # Step 4: rank places by suitability
        ranked = ScoredQueue(key=highest_first)
        for place_id, like_count in likes.items():
            place_location = self.fetch(self.source.place_location, place_id)
            ranked.push(place_id, like_count / (geo_distance(place_location, center) + SUITABILITY_OFFSET))

        top_places = ranked.pop_many(max_places)

        logger.debug(
            f"Activity plan for {user_id}: {len(close_friends)} friends, "
            f"{len(top_places)} of {len(likes)} places"
        )

        return ActivityPlan(
            user=self._user_summary(user_id, user_location),
            close_friends=[self._user_summary(f, friend_locations[f]) for f in close_friends],
            suggested_places=[self._place_summary(s.item) for s in top_places],
            place_scores={s.item: s.score for s in top_places}
        )

    def _user_summary(self, user_id: int, location) -> UserSummary:
        attrs = self.fetch(self.source.user_attributes, user_id)
        return UserSummary(
            user_id=user_id,
            first_name=attrs.get("first_name", ""),
            last_name=attrs.get("last_name", ""),
            latitude=location[0],
            longitude=location[1]
        )

    def _place_summary(self, place_id: int) -> PlaceSummary:
        attrs = self.fetch(self.source.place_attributes, place_id)
        return PlaceSummary(
            place_id=place_id,
            name=attrs.get("name", ""),
            category=attrs.get("category", ""),
            latitude=float(attrs.get("latitude", 0.0)),
            longitude=float(attrs.get("longitude", 0.0))
        )
