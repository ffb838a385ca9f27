"""
Scored items and ranking helpers.

A ScoredQueue is a heap of (item, score) pairs ordered by a sort key chosen
at each use site, e.g. ascending distance or descending suitability, with
the identifier as tie-break.
"""

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Tuple, TypeVar

from .source import Location

T = TypeVar("T")


@dataclass(frozen=True)
class ScoredItem(Generic[T]):
    """An entity paired with the score it is ranked by."""
    item: T
    score: float


def lowest_first(scored: ScoredItem) -> Tuple[float, Any]:
    """Ascending score, lower identifier first on ties."""
    return scored.score, scored.item


def highest_first(scored: ScoredItem) -> Tuple[float, Any]:
    """Descending score, lower identifier first on ties."""
    return -scored.score, scored.item


class ScoredQueue(Generic[T]):
    """Priority queue of ScoredItems; pops the smallest key first."""

    def __init__(self, key: Callable[[ScoredItem], Any] = lowest_first):
        self._key = key
        self._heap: List[Tuple[Any, int, ScoredItem]] = []
        # Insertion counter keeps heap entries comparable when keys tie
        self._counter = itertools.count()

    def push(self, item: T, score: float) -> ScoredItem:
        scored = ScoredItem(item, score)
        heapq.heappush(self._heap, (self._key(scored), next(self._counter), scored))
        return scored

    def pop(self) -> ScoredItem:
        return heapq.heappop(self._heap)[2]

    def pop_many(self, limit: int) -> List[ScoredItem]:
        """Pop up to `limit` items in order."""
        popped = []
        while self._heap and len(popped) < limit:
            popped.append(self.pop())
        return popped

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def geo_distance(a: Location, b: Location) -> float:
    """Euclidean distance on raw (latitude, longitude) pairs."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def centroid(points: Iterable[Location]) -> Location:
    """Mean latitude and longitude of a non-empty set of points."""
    points = list(points)
    if not points:
        raise ValueError("centroid of an empty point set")
    lat = sum(p[0] for p in points) / len(points)
    lng = sum(p[1] for p in points) / len(points)
    return lat, lng
