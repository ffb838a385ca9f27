"""
Social graph engine facade.

Wires the services to one data source and graph index and exposes the
analytics as plain method calls.
"""

import logging
from typing import Any, Dict, List, Optional

from .client import SocialDataAPI
from .config import Config, load_config
from .graph.ranking import ScoredItem
from .graph.source import DataSource
from .graph.store import GraphStore
from .services import ActivityPlan, ServiceContext, create_services

logger = logging.getLogger(__name__)


def open_source(config: Config) -> DataSource:
    """Open the data source selected by configuration."""
    backend = config.data.backend
    if backend == "file":
        return GraphStore.from_file(config.data.graph_file)
    if backend == "api":
        return SocialDataAPI(config.data.api_base_url, timeout=config.data.api_timeout)
    raise ValueError(f"Unknown data source backend '{backend}'. Available: file, api")


class SocialGraphEngine:
    """
    Entry point for graph analytics.

    Usage:
        with SocialGraphEngine.from_config() as engine:
            engine.distance(1, 4)
    """

    def __init__(
        self,
        source: DataSource,
        owns_source: bool = False
    ):
        """
        Build the graph index and services.

        Args:
            source: Data source; stays owned by the caller unless owns_source
            owns_source: Whether close() should close the source
        """
        self.context = ServiceContext.create(source, owns_source=owns_source)
        self.paths, self.friends, self.activities, self.places = create_services(self.context)

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "SocialGraphEngine":
        """Open the configured data source and build an engine that owns it."""
        cfg = config or load_config()
        source = open_source(cfg)
        logger.info(f"Opened {cfg.data.backend} data source")
        try:
            return cls(source, owns_source=True)
        except Exception:
            source.close()
            raise

    # === Analytics ===

    def distance(self, user_a: int, user_b: int) -> int:
        """Friendship hops between two users (NOT_REACHABLE if none)."""
        return self.paths.distance(user_a, user_b)

    def shortest_path(self, user_a: int, user_b: int) -> Optional[List[int]]:
        return self.paths.shortest_path(user_a, user_b)

    def friend_weight(self, user_a: int, user_b: int) -> float:
        return self.friends.weight(user_a, user_b)

    def recommend_friends(self, user_id: int, count: int) -> List[int]:
        return self.friends.recommend(user_id, count)

    def recommend_friends_with_costs(self, user_id: int, count: int) -> List[ScoredItem]:
        return self.friends.recommend_with_costs(user_id, count)

    def plan_activities(self, user_id: int, max_friends: int, max_places: int) -> ActivityPlan:
        return self.activities.plan_activities(user_id, max_friends, max_places)

    def recommend_places(self, user_id: int, count: int) -> List[int]:
        return self.places.recommend_places(user_id, count)

    def index_stats(self) -> Dict[str, Any]:
        return self.context.index.stats()

    # === Lifecycle ===

    def close(self):
        """Release resources held by the engine."""
        self.context.close()

    def __enter__(self) -> "SocialGraphEngine":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
