"""
Graph schema definitions.

Defines node types, edge types, and their properties for the social graph
of users and the places they like.
"""

from enum import Enum
from typing import Dict, Any, Tuple
from dataclasses import dataclass, field


class NodeType(str, Enum):
    """Types of nodes in the graph."""
    USER = "User"
    PLACE = "Place"


class EdgeType(str, Enum):
    """Types of edges (relationships) in the graph."""
    # User <-> User (stored in both directions)
    FRIENDS_WITH = "FRIENDS_WITH"

    # User -> Place
    LIKES = "LIKES"


def create_node_id(node_type: NodeType, identifier: int) -> str:
    """
    Create a unique node ID.

    Args:
        node_type: Type of the node
        identifier: Integer identifier within the type

    Returns:
        Formatted node ID (e.g., "user:42")
    """
    return f"{node_type.value.lower()}:{identifier}"


def parse_node_id(node_id: str) -> Tuple[NodeType, int]:
    """Split a node ID back into its type and integer identifier."""
    prefix, _, identifier = node_id.partition(":")
    for node_type in NodeType:
        if node_type.value.lower() == prefix:
            return node_type, int(identifier)
    raise ValueError(f"Unknown node id prefix: {node_id}")


@dataclass
class Node:
    """Base node representation."""
    id: str
    type: NodeType
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "properties": self.properties
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        return cls(
            id=data["id"],
            type=NodeType(data["type"]),
            properties=data.get("properties", {})
        )


@dataclass
class Edge:
    """Edge (relationship) representation."""
    source: str
    target: str
    type: EdgeType
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "type": self.type.value,
            "properties": self.properties
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            type=EdgeType(data["type"]),
            properties=data.get("properties", {})
        )


# Node factory functions

def create_user_node(
    user_id: int,
    first_name: str = "",
    last_name: str = "",
    latitude: float = 0.0,
    longitude: float = 0.0
) -> Node:
    """Create a User node."""
    return Node(
        id=create_node_id(NodeType.USER, user_id),
        type=NodeType.USER,
        properties={
            "user_id": user_id,
            "first_name": first_name,
            "last_name": last_name,
            "latitude": latitude,
            "longitude": longitude
        }
    )


def create_place_node(
    place_id: int,
    name: str = "",
    category: str = "",
    latitude: float = 0.0,
    longitude: float = 0.0
) -> Node:
    """Create a Place node."""
    return Node(
        id=create_node_id(NodeType.PLACE, place_id),
        type=NodeType.PLACE,
        properties={
            "place_id": place_id,
            "name": name,
            "category": category,
            "latitude": latitude,
            "longitude": longitude
        }
    )


def create_friendship_edge(user_a: int, user_b: int) -> Edge:
    """Create a FRIENDS_WITH edge from user_a to user_b."""
    return Edge(
        source=create_node_id(NodeType.USER, user_a),
        target=create_node_id(NodeType.USER, user_b),
        type=EdgeType.FRIENDS_WITH
    )


def create_like_edge(user_id: int, place_id: int) -> Edge:
    """Create a LIKES edge from a user to a place."""
    return Edge(
        source=create_node_id(NodeType.USER, user_id),
        target=create_node_id(NodeType.PLACE, place_id),
        type=EdgeType.LIKES
    )
