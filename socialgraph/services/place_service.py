"""
Place recommendation service.

Two tiers: places the user's friends like, then the nearest places nobody in
the circle has liked yet.
"""

import logging
from collections import Counter
from typing import List

from ..graph.ranking import ScoredQueue, geo_distance, highest_first, lowest_first
from .base import BaseService

logger = logging.getLogger(__name__)


class PlaceRecommendationService(BaseService):
    """Recommends places a user does not like yet."""

    def recommend_places(self, user_id: int, count: int) -> List[int]:
        """
        Recommend up to `count` places.

        Args:
            user_id: User to recommend places for
            count: Maximum number of places

        Returns:
            Place IDs; friend favourites first, then nearest unseen places.
            Fewer than `count` when the place universe runs out.
        """
        self.require_user(user_id)
        self.require_positive("count", count)

        liked = self.index.places_of(user_id)

        friend_likes = Counter()
        for friend in self.known_friends(user_id):
            friend_likes.update(self.index.places_of(friend))

        # Tier 1: liked by friends, ranked by number of friends
        by_friends = ScoredQueue(key=highest_first)
        for place_id, friend_count in friend_likes.items():
            if place_id not in liked:
                by_friends.push(place_id, friend_count)

        results = [scored.item for scored in by_friends.pop_many(count)]
        if len(results) >= count:
            return results

        # Tier 2: unseen by the whole circle, ranked by proximity
        seen = liked | set(friend_likes)
        user_location = self.fetch(self.source.user_location, user_id)

        nearby = ScoredQueue(key=lowest_first)
        for place_id in self.fetch(self.source.all_place_ids):
            if place_id not in seen:
                place_location = self.fetch(self.source.place_location, place_id)
                nearby.push(place_id, geo_distance(user_location, place_location))

        results.extend(scored.item for scored in nearby.pop_many(count - len(results)))

        if len(results) < count:
            logger.info(f"Only {len(results)} of {count} places available for user {user_id}")
        return results
