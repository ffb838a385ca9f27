"""
Pytest configuration and shared fixtures.

This module provides common fixtures for testing:
- Small in-memory social graphs
- JSON graph snapshots on disk
- Engines built over those graphs
"""

import json
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from socialgraph import SocialGraphEngine
from socialgraph.graph import GraphStore


# =============================================================================
# Graph Fixtures
# =============================================================================

@pytest.fixture
def chain_store() -> GraphStore:
    """
    Users 1-2-3-4 in a chain, user 5 isolated. No places.
    """
    store = GraphStore()
    for user_id in range(1, 6):
        store.add_user(user_id, f"User{user_id}", "Chain")
    store.add_friendship(1, 2)
    store.add_friendship(2, 3)
    store.add_friendship(3, 4)
    return store


@pytest.fixture
def social_store() -> GraphStore:
    """
    A small social network with places.

    Users (lat, long):        Friendships:
      1 Alice (0, 0)            1-2, 1-3, 1-4
      2 Bob   (1, 0)            2-5, 3-5
      3 Carol (0, 2)            4-6
      4 Dave  (5, 5)          7 has no friends
      5 Eve   (1, 1)
      6 Frank (10, 10)
      7 Grace (2, 2)

    Places (category, lat, long):   Likes:
      10 Cafe A  cafe   (0, 1)        1: 10, 12
      11 Cafe B  cafe   (1, 1)        2: 10, 11
      12 Museum  museum (3, 3)        3: 12, 13
      13 Park    park   (0.5, 0.5)    4: 11, 14
      14 Bar     bar    (9, 9)        5: 11, 13
      15 Gym     gym    (-1, -1)      6: 14, 15
                                      7: 15
    """
    store = GraphStore()
    users = [
        (1, "Alice", "Adams", 0.0, 0.0),
        (2, "Bob", "Brown", 1.0, 0.0),
        (3, "Carol", "Clark", 0.0, 2.0),
        (4, "Dave", "Davis", 5.0, 5.0),
        (5, "Eve", "Evans", 1.0, 1.0),
        (6, "Frank", "Fisher", 10.0, 10.0),
        (7, "Grace", "Green", 2.0, 2.0),
    ]
    for user_id, first, last, lat, lng in users:
        store.add_user(user_id, first, last, lat, lng)

    places = [
        (10, "Cafe A", "cafe", 0.0, 1.0),
        (11, "Cafe B", "cafe", 1.0, 1.0),
        (12, "Museum", "museum", 3.0, 3.0),
        (13, "Park", "park", 0.5, 0.5),
        (14, "Bar", "bar", 9.0, 9.0),
        (15, "Gym", "gym", -1.0, -1.0),
    ]
    for place_id, name, category, lat, lng in places:
        store.add_place(place_id, name, category, lat, lng)

    for a, b in [(1, 2), (1, 3), (1, 4), (2, 5), (3, 5), (4, 6)]:
        store.add_friendship(a, b)

    likes = {
        1: [10, 12],
        2: [10, 11],
        3: [12, 13],
        4: [11, 14],
        5: [11, 13],
        6: [14, 15],
        7: [15],
    }
    for user_id, place_ids in likes.items():
        for place_id in place_ids:
            store.add_like(user_id, place_id)

    return store


def write_snapshot(store: GraphStore, path: Path):
    """Dump a store's nodes and edges in the snapshot format."""
    data = {
        "nodes": [attrs for _, attrs in store.graph.nodes(data=True)],
        "edges": [attrs for _, _, attrs in store.graph.edges(data=True)],
        "metadata": {"version": "1.0"}
    }
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


@pytest.fixture
def graph_file(social_store) -> Generator[Path, None, None]:
    """Write the social graph to a temporary JSON snapshot."""
    with tempfile.NamedTemporaryFile(
        mode='w', suffix='.json', delete=False
    ) as f:
        temp_path = Path(f.name)

    write_snapshot(social_store, temp_path)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def engine(social_store) -> Generator[SocialGraphEngine, None, None]:
    """Engine over the social graph."""
    with SocialGraphEngine(social_store) as eng:
        yield eng


@pytest.fixture
def chain_engine(chain_store) -> Generator[SocialGraphEngine, None, None]:
    """Engine over the chain graph."""
    with SocialGraphEngine(chain_store) as eng:
        yield eng


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
