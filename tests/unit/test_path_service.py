"""
Unit tests for relational distance.

Tests BFS distances, paths and error handling.
"""

import itertools
from unittest.mock import MagicMock

import networkx as nx
import pytest

from socialgraph import NOT_REACHABLE, UnknownEntity
from socialgraph.graph import EdgeType


def brute_force_distance(store, user_a, user_b):
    """Shortest simple path length over the undirected friend graph."""
    friends = nx.Graph()
    friends.add_nodes_from(store.all_user_ids())
    for user_id in store.all_user_ids():
        for friend in store.friends_of(user_id):
            friends.add_edge(user_id, friend)

    lengths = [len(p) - 1 for p in nx.all_simple_paths(friends, user_a, user_b)]
    return min(lengths) if lengths else NOT_REACHABLE


class TestDistance:
    """Tests for PathService.distance."""

    @pytest.mark.unit
    def test_chain_distances(self, chain_engine):
        """Test hop counts along a chain."""
        assert chain_engine.distance(1, 4) == 3
        assert chain_engine.distance(1, 3) == 2
        assert chain_engine.distance(4, 1) == 3
        assert chain_engine.distance(1, 2) == 1

    @pytest.mark.unit
    def test_isolated_user_not_reachable(self, chain_engine):
        """Test that a user without friends cannot be reached."""
        assert chain_engine.distance(1, 5) == NOT_REACHABLE
        assert chain_engine.distance(5, 1) == NOT_REACHABLE

    @pytest.mark.unit
    def test_same_user_is_zero(self, chain_engine):
        """Test distance to self for every user."""
        for user_id in range(1, 6):
            assert chain_engine.distance(user_id, user_id) == 0

    @pytest.mark.unit
    def test_same_user_does_not_query_source(self, chain_engine):
        """Test that distance(a, a) never touches the data source."""
        chain_engine.context.source = MagicMock()
        assert chain_engine.distance(3, 3) == 0
        chain_engine.context.source.friends_of.assert_not_called()

    @pytest.mark.unit
    def test_unknown_user_fails(self, chain_engine):
        """Test that unknown users raise UnknownEntity."""
        with pytest.raises(UnknownEntity):
            chain_engine.distance(1, 99)
        with pytest.raises(UnknownEntity):
            chain_engine.distance(99, 1)

    @pytest.mark.unit
    def test_symmetric(self, engine):
        """Test distance(a, b) == distance(b, a) on the undirected graph."""
        users = sorted(engine.context.index.user_ids)
        for a, b in itertools.combinations(users, 2):
            assert engine.distance(a, b) == engine.distance(b, a)

    @pytest.mark.unit
    def test_matches_brute_force(self, engine, social_store):
        """Test BFS result against an exhaustive search of simple paths."""
        users = sorted(engine.context.index.user_ids)
        for a, b in itertools.permutations(users, 2):
            assert engine.distance(a, b) == brute_force_distance(social_store, a, b)

    @pytest.mark.unit
    def test_friend_lists_not_cached(self, chain_store, chain_engine):
        """Test that a new friendship is seen by the next query."""
        assert chain_engine.distance(1, 5) == NOT_REACHABLE

        chain_store.add_friendship(4, 5)

        assert chain_engine.distance(1, 5) == 4


class TestShortestPath:
    """Tests for PathService.shortest_path."""

    @pytest.mark.unit
    def test_path_along_chain(self, chain_engine):
        """Test the path returned along a chain."""
        assert chain_engine.shortest_path(1, 4) == [1, 2, 3, 4]

    @pytest.mark.unit
    def test_path_to_self(self, chain_engine):
        """Test that the path to self is a single node."""
        assert chain_engine.shortest_path(2, 2) == [2]

    @pytest.mark.unit
    def test_unreachable_path(self, chain_engine):
        """Test that unreachable users give None."""
        assert chain_engine.shortest_path(1, 5) is None

    @pytest.mark.unit
    def test_path_edges_are_friendships(self, engine, social_store):
        """Test that consecutive path nodes are friends."""
        path = engine.shortest_path(5, 6)

        assert path[0] == 5 and path[-1] == 6
        assert len(path) - 1 == engine.distance(5, 6) == 4
        for a, b in zip(path, path[1:]):
            assert b in social_store.friends_of(a)

    @pytest.mark.unit
    def test_skips_friends_unknown_to_index(self, chain_store, chain_engine):
        """Test that users added after the index was built are not traversed."""
        chain_store.add_user(50)
        chain_store.add_friendship(1, 50)
        chain_store.add_friendship(50, 5)

        assert chain_engine.distance(1, 5) == NOT_REACHABLE
        assert chain_store.get_neighbors("user:1", EdgeType.FRIENDS_WITH) == ["user:2", "user:50"]
