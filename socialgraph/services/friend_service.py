"""
Friend recommendation service.

Best-first (Dijkstra-style) expansion over the friend graph, where the cost
of an edge is an affinity weight derived from shared liked places and shared
place categories.
"""

import logging
from collections import Counter
from typing import Dict, List, Set

from ..graph.ranking import ScoredItem, ScoredQueue, lowest_first
from .base import BaseService

logger = logging.getLogger(__name__)

# weight = 1 / (shared places + CATEGORY_FACTOR * shared categories + WEIGHT_OFFSET)
CATEGORY_FACTOR = 0.1
WEIGHT_OFFSET = 0.01


class FriendRecommendationService(BaseService):
    """
    Recommends users who are not yet friends.

    Lower cumulative weight means stronger affinity, so the cheapest
    candidates are recommended first.
    """

    def weight(self, user_a: int, user_b: int) -> float:
        """
        Affinity weight between two users.

        Args:
            user_a: First user
            user_b: Second user

        Returns:
            1 / (shared places + 0.1 * shared categories + 0.01)
        """
        places_a = self.index.places_of(user_a)
        places_b = self.index.places_of(user_b)
        shared_places = len(places_a & places_b)

        categories_a = Counter(self.index.category_of(p) for p in places_a)
        categories_b = Counter(self.index.category_of(p) for p in places_b)
        # Counter intersection keeps the minimum count per category
        shared_categories = sum((categories_a & categories_b).values())

        return 1 / (shared_places + CATEGORY_FACTOR * shared_categories + WEIGHT_OFFSET)

    def recommend(self, user_id: int, count: int) -> List[int]:
        """
        Recommend up to `count` users who are not friends of `user_id`.

        Args:
            user_id: User to recommend friends for
            count: Maximum number of recommendations

        Returns:
            User IDs ordered from strongest to weakest affinity
        """
        return [scored.item for scored in self.recommend_with_costs(user_id, count)]

    def recommend_with_costs(self, user_id: int, count: int) -> List[ScoredItem]:
        """
        Same as recommend(), with each user's cumulative path cost.

        Returns:
            ScoredItems (user ID, cost) in non-decreasing cost order
        """
        self.require_positive("count", count)
        self.require_user(user_id)

        friends = self.known_friends(user_id)
        excluded: Set[int] = {user_id, *friends}

        best: Dict[int, float] = {user_id: 0.0}
        queue = ScoredQueue(key=lowest_first)
        queue.push(user_id, 0.0)

        for friend in friends:
            best[friend] = self.weight(user_id, friend)
            queue.push(friend, best[friend])

        settled: Set[int] = set()
        results: List[ScoredItem] = []

        while queue and len(results) < count:
            current = queue.pop()
            node, cost = current.item, current.score

            # Superseded by a cheaper entry pushed later
            if node in settled or cost > best[node]:
                continue
            settled.add(node)

            if node not in excluded:
                results.append(current)
                if len(results) == count:
                    break

            for neighbor in self.known_friends(node):
                if neighbor in settled:
                    continue
                new_cost = cost + self.weight(node, neighbor)
                if neighbor not in best or new_cost < best[neighbor]:
                    best[neighbor] = new_cost
                    queue.push(neighbor, new_cost)

        logger.debug(
            f"Recommended {len(results)}/{count} friends for {user_id} "
            f"({len(settled)} users expanded)"
        )
        return results
