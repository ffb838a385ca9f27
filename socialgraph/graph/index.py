"""
Once-built snapshot of which places each user likes and what category each
place has.

Built eagerly from a DataSource so that per-query code never has to ask the
data source for likes or categories again.
"""

import logging
from typing import Dict, Any, FrozenSet, Iterable

from ..errors import DataUnavailable, SocialGraphError
from .source import DataSource

logger = logging.getLogger(__name__)


class GraphIndex:
    """
    Read-only user/place index.

    Attributes:
        user_ids: Every user identifier known to the data source
    """

    def __init__(
        self,
        user_ids: Iterable[int],
        user_to_places: Dict[int, FrozenSet[int]],
        place_to_category: Dict[int, str]
    ):
        self.user_ids: FrozenSet[int] = frozenset(user_ids)
        self._user_to_places = dict(user_to_places)
        self._place_to_category = dict(place_to_category)

    @classmethod
    def build(cls, source: DataSource) -> "GraphIndex":
        """
        Build the index from a data source.

        Fetches every user's likes, and each distinct place's category once.
        Either the whole index is built or DataUnavailable is raised.

        Args:
            source: Data source to read from

        Returns:
            Populated GraphIndex
        """
        try:
            user_ids = set(source.all_user_ids())
            user_to_places: Dict[int, FrozenSet[int]] = {}
            place_to_category: Dict[int, str] = {}

            for user_id in sorted(user_ids):
                places = frozenset(source.liked_places_of(user_id))
                user_to_places[user_id] = places

                for place_id in places:
                    if place_id not in place_to_category:
                        place_to_category[place_id] = source.category_of(place_id)

        except SocialGraphError:
            logger.error("Graph index build aborted")
            raise
        except Exception as e:
            logger.error(f"Graph index build aborted: {e}")
            raise DataUnavailable(f"Failed to build graph index: {e}") from e

        index = cls(user_ids, user_to_places, place_to_category)
        logger.info(
            f"Built graph index: {len(index.user_ids)} users, "
            f"{len(place_to_category)} liked places"
        )
        return index

    def has_user(self, user_id: int) -> bool:
        return user_id in self.user_ids

    def places_of(self, user_id: int) -> FrozenSet[int]:
        """Places a user likes (empty for unknown users)."""
        return self._user_to_places.get(user_id, frozenset())

    def category_of(self, place_id: int) -> str:
        return self._place_to_category[place_id]

    def stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return {
            "users": len(self.user_ids),
            "liked_places": len(self._place_to_category),
            "likes": sum(len(p) for p in self._user_to_places.values()),
            "categories": len(set(self._place_to_category.values()))
        }
