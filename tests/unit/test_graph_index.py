"""
Unit tests for the graph index.

Tests the snapshot contents, one-time category fetches and failure handling.
"""

from unittest.mock import MagicMock

import pytest

from socialgraph import DataUnavailable
from socialgraph.graph import GraphIndex


class TestGraphIndex:
    """Tests for GraphIndex.build."""

    @pytest.mark.unit
    def test_build_contents(self, social_store):
        """Test users, likes and categories are captured."""
        index = GraphIndex.build(social_store)

        assert index.user_ids == frozenset(range(1, 8))
        assert index.places_of(1) == frozenset({10, 12})
        assert index.places_of(7) == frozenset({15})
        assert index.category_of(12) == "museum"
        assert index.has_user(3)
        assert not index.has_user(99)
        assert index.places_of(99) == frozenset()

    @pytest.mark.unit
    def test_category_fetched_once_per_place(self, social_store):
        """Test each distinct liked place is looked up exactly once."""
        source = MagicMock(wraps=social_store)

        GraphIndex.build(source)

        assert source.category_of.call_count == 6
        fetched = sorted(call.args[0] for call in source.category_of.call_args_list)
        assert fetched == [10, 11, 12, 13, 14, 15]
        assert source.liked_places_of.call_count == 7

    @pytest.mark.unit
    def test_no_source_calls_after_build(self, social_store):
        """Test lookups are served from the snapshot."""
        source = MagicMock(wraps=social_store)
        index = GraphIndex.build(source)
        source.reset_mock()

        index.places_of(1)
        index.category_of(10)

        assert source.mock_calls == []

    @pytest.mark.unit
    def test_unliked_places_not_indexed(self, social_store):
        """Test places nobody likes never get a category lookup."""
        social_store.add_place(99, "Library", "library")

        index = GraphIndex.build(social_store)

        with pytest.raises(KeyError):
            index.category_of(99)

    @pytest.mark.unit
    def test_stats(self, social_store):
        """Test index statistics."""
        stats = GraphIndex.build(social_store).stats()

        assert stats == {"users": 7, "liked_places": 6, "likes": 13, "categories": 5}

    @pytest.mark.unit
    def test_source_failure_aborts_build(self):
        """Test a failing data source yields DataUnavailable."""
        source = MagicMock()
        source.all_user_ids.return_value = {1, 2}
        source.liked_places_of.side_effect = ConnectionError("store down")

        with pytest.raises(DataUnavailable) as exc_info:
            GraphIndex.build(source)

        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.unit
    def test_missing_user_aborts_build(self, social_store):
        """Test a user the store cannot answer for aborts the build."""
        source = MagicMock(wraps=social_store)
        source.all_user_ids.return_value = {1, 2, 42}

        with pytest.raises(DataUnavailable):
            GraphIndex.build(source)
