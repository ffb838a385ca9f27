"""
Data source contract.

The engine reads all user/place data through an object implementing this
protocol. Implementations raise DataUnavailable when they cannot answer.
"""

from typing import Protocol, Dict, Any, List, Set, Tuple

Location = Tuple[float, float]


class DataSource(Protocol):
    """Read-only access to users, places, friendships and likes."""

    def all_user_ids(self) -> Set[int]:
        ...

    def all_place_ids(self) -> Set[int]:
        ...

    def friends_of(self, user_id: int) -> List[int]:
        ...

    def liked_places_of(self, user_id: int) -> List[int]:
        ...

    def category_of(self, place_id: int) -> str:
        ...

    def user_location(self, user_id: int) -> Location:
        ...

    def place_location(self, place_id: int) -> Location:
        ...

    def user_attributes(self, user_id: int) -> Dict[str, Any]:
        """Return at least first_name and last_name."""
        ...

    def place_attributes(self, place_id: int) -> Dict[str, Any]:
        """Return at least name, category, latitude and longitude."""
        ...

    def close(self) -> None:
        ...
