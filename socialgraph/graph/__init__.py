"""
Graph module for the social graph engine.

Provides:
- User/Place schema and NetworkX-backed storage
- The data source contract
- The once-built graph index
- Ranking helpers shared by the services
"""

from .schema import NodeType, EdgeType, create_node_id
from .source import DataSource
from .store import GraphStore
from .index import GraphIndex
from .ranking import ScoredItem, ScoredQueue, geo_distance, centroid

__all__ = [
    "NodeType",
    "EdgeType",
    "create_node_id",
    "DataSource",
    "GraphStore",
    "GraphIndex",
    "ScoredItem",
    "ScoredQueue",
    "geo_distance",
    "centroid",
]
