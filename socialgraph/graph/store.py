"""
Graph storage using NetworkX.

Holds users, places, friendships and likes in memory and answers the
DataSource queries the engine needs. Can be populated from a JSON snapshot.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List, Set

import networkx as nx

from ..errors import DataUnavailable
from .schema import (
    Node, Edge, NodeType, EdgeType,
    create_node_id, parse_node_id,
    create_user_node, create_place_node,
    create_friendship_edge, create_like_edge
)
from .source import Location

logger = logging.getLogger(__name__)


class GraphStore:
    """
    NetworkX-based graph storage implementing the DataSource contract.

    Provides:
    - In-memory graph operations using NetworkX
    - Loading from a JSON snapshot
    - Node and edge operations for users and places
    - Read queries used by the analytics engine
    """

    def __init__(self, file_path: Optional[Path] = None):
        """
        Initialize graph store.

        Args:
            file_path: Optional JSON snapshot to load
        """
        self.file_path = file_path
        self.graph = nx.DiGraph()
        if file_path is not None:
            self._load()

    @classmethod
    def from_file(cls, file_path: Path) -> "GraphStore":
        """Create a store populated from a JSON snapshot."""
        return cls(file_path=Path(file_path))

    def _load(self):
        """Load graph from JSON file."""
        if not self.file_path.exists():
            raise DataUnavailable(f"Graph file not found: {self.file_path}")

        try:
            with open(self.file_path, "r") as f:
                data = json.load(f)

            for node_data in data.get("nodes", []):
                self.add_node(Node.from_dict(node_data))

            for edge_data in data.get("edges", []):
                edge = Edge.from_dict(edge_data)
                if edge.type == EdgeType.FRIENDS_WITH:
                    _, user_a = parse_node_id(edge.source)
                    _, user_b = parse_node_id(edge.target)
                    self.add_friendship(user_a, user_b)
                else:
                    self.add_edge(edge)

        except (json.JSONDecodeError, KeyError, ValueError) as e:
            raise DataUnavailable(f"Failed to load graph from {self.file_path}: {e}") from e

        logger.info(
            f"Loaded graph: {self.graph.number_of_nodes()} nodes, "
            f"{self.graph.number_of_edges()} edges"
        )

    def close(self):
        """Nothing to release for an in-memory graph."""
        logger.debug("GraphStore closed")

    # === Node Operations ===

    def add_node(self, node: Node) -> bool:
        """
        Add a node to the graph.

        Args:
            node: Node to add

        Returns:
            True if added, False if already exists
        """
        if self.graph.has_node(node.id):
            return False

        self.graph.add_node(node.id, **node.to_dict())
        return True

    def update_node(self, node: Node) -> bool:
        """Update a node's properties. Returns False if not found."""
        if not self.graph.has_node(node.id):
            return False

        self.graph.nodes[node.id].update(node.to_dict())
        return True

    def get_nodes_by_type(self, node_type: NodeType) -> List[Node]:
        """Get all nodes of a specific type."""
        nodes = []
        for node_id, attrs in self.graph.nodes(data=True):
            if attrs.get("type") == node_type.value:
                nodes.append(Node.from_dict(attrs))
        return nodes

    def add_user(self, user_id: int, first_name: str = "", last_name: str = "",
                 latitude: float = 0.0, longitude: float = 0.0) -> Node:
        """Add (or update) a user node."""
        node = create_user_node(user_id, first_name, last_name, latitude, longitude)
        if not self.add_node(node):
            self.update_node(node)
        return node

    def add_place(self, place_id: int, name: str = "", category: str = "",
                  latitude: float = 0.0, longitude: float = 0.0) -> Node:
        """Add (or update) a place node."""
        node = create_place_node(place_id, name, category, latitude, longitude)
        if not self.add_node(node):
            self.update_node(node)
        return node

    # === Edge Operations ===

    def add_edge(self, edge: Edge) -> bool:
        """
        Add an edge between two existing nodes.

        Args:
            edge: Edge to add

        Returns:
            True if added, False if already exists or an endpoint is missing
        """
        if not (self.graph.has_node(edge.source) and self.graph.has_node(edge.target)):
            logger.warning(f"Skipping edge {edge.source} -> {edge.target}: endpoint not in graph")
            return False

        if self.graph.has_edge(edge.source, edge.target):
            return False

        self.graph.add_edge(edge.source, edge.target, **edge.to_dict())
        return True

    def has_edge(self, source: str, target: str) -> bool:
        """Check if an edge exists."""
        return self.graph.has_edge(source, target)

    def add_friendship(self, user_a: int, user_b: int) -> bool:
        """Create a symmetric friendship between two users."""
        if user_a == user_b:
            return False
        forward = self.add_edge(create_friendship_edge(user_a, user_b))
        backward = self.add_edge(create_friendship_edge(user_b, user_a))
        return forward or backward

    def add_like(self, user_id: int, place_id: int) -> bool:
        """Record that a user likes a place."""
        return self.add_edge(create_like_edge(user_id, place_id))

    # === Traversal Operations ===

    def get_neighbors(
        self,
        node_id: str,
        edge_type: Optional[EdgeType] = None
    ) -> List[str]:
        """
        Get IDs of nodes reachable by one outgoing edge.

        Args:
            node_id: Starting node ID
            edge_type: Optional filter by edge type

        Returns:
            Sorted list of neighboring node IDs
        """
        neighbors = set()
        for _, target, attrs in self.graph.out_edges(node_id, data=True):
            if edge_type is None or attrs.get("type") == edge_type.value:
                neighbors.add(target)
        return sorted(neighbors)

    # === DataSource queries ===

    def _require(self, node_type: NodeType, identifier: int) -> Dict[str, Any]:
        """Return a node's properties or raise DataUnavailable."""
        node_id = create_node_id(node_type, identifier)
        if not self.graph.has_node(node_id):
            raise DataUnavailable(f"{node_type.value} {identifier} not found in graph")
        return self.graph.nodes[node_id].get("properties", {})

    def _ids_of_type(self, node_type: NodeType) -> Set[int]:
        return {parse_node_id(node.id)[1] for node in self.get_nodes_by_type(node_type)}

    def _neighbor_ids(self, node_type: NodeType, identifier: int, edge_type: EdgeType) -> List[int]:
        self._require(node_type, identifier)
        node_id = create_node_id(node_type, identifier)
        ids = [parse_node_id(n)[1] for n in self.get_neighbors(node_id, edge_type=edge_type)]
        return sorted(ids)

    def all_user_ids(self) -> Set[int]:
        return self._ids_of_type(NodeType.USER)

    def all_place_ids(self) -> Set[int]:
        return self._ids_of_type(NodeType.PLACE)

    def friends_of(self, user_id: int) -> List[int]:
        return self._neighbor_ids(NodeType.USER, user_id, EdgeType.FRIENDS_WITH)

    def liked_places_of(self, user_id: int) -> List[int]:
        return self._neighbor_ids(NodeType.USER, user_id, EdgeType.LIKES)

    def category_of(self, place_id: int) -> str:
        return self._require(NodeType.PLACE, place_id).get("category", "")

    def user_location(self, user_id: int) -> Location:
        props = self._require(NodeType.USER, user_id)
        return float(props.get("latitude", 0.0)), float(props.get("longitude", 0.0))

    def place_location(self, place_id: int) -> Location:
        props = self._require(NodeType.PLACE, place_id)
        return float(props.get("latitude", 0.0)), float(props.get("longitude", 0.0))

    def user_attributes(self, user_id: int) -> Dict[str, Any]:
        props = self._require(NodeType.USER, user_id)
        return {
            "first_name": props.get("first_name", ""),
            "last_name": props.get("last_name", "")
        }

    def place_attributes(self, place_id: int) -> Dict[str, Any]:
        props = self._require(NodeType.PLACE, place_id)
        return {
            "name": props.get("name", ""),
            "category": props.get("category", ""),
            "latitude": float(props.get("latitude", 0.0)),
            "longitude": float(props.get("longitude", 0.0))
        }

    # === Statistics ===

    def stats(self) -> Dict[str, Any]:
        """Get graph statistics."""
        node_counts = {}
        for _, attrs in self.graph.nodes(data=True):
            node_type = attrs.get("type", "Unknown")
            node_counts[node_type] = node_counts.get(node_type, 0) + 1

        edge_counts = {}
        for _, _, attrs in self.graph.edges(data=True):
            edge_type = attrs.get("type", "Unknown")
            edge_counts[edge_type] = edge_counts.get(edge_type, 0) + 1

        return {
            "total_nodes": self.graph.number_of_nodes(),
            "total_edges": self.graph.number_of_edges(),
            "nodes_by_type": node_counts,
            "edges_by_type": edge_counts
        }
