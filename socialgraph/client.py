"""Remote social-data service client."""

import httpx
import logging
from typing import Any, Dict, List, Optional, Set

from .errors import DataUnavailable
from .graph.source import Location

logger = logging.getLogger(__name__)


class SocialDataAPI:
    """HTTP data source for users, places, friendships and likes."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: The API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def _get_headers(self) -> dict:
        """Get headers for API requests."""
        return {
            "accept": "application/json",
            "accept-encoding": "gzip",
        }

    def _get(self, path: str) -> Dict[str, Any]:
        """GET a JSON object, translating transport errors to DataUnavailable."""
        url = f"{self.base_url}{path}"
        try:
            response = self._client.get(url, headers=self._get_headers())
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"{url} returned {e.response.status_code}")
            raise DataUnavailable(f"GET {path} failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise DataUnavailable(f"GET {path} failed: {e}") from e
        except ValueError as e:
            raise DataUnavailable(f"GET {path} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise DataUnavailable(f"GET {path} returned {type(data).__name__}, expected object")
        return data

    def _fields(self, path: str, *names: str) -> Dict[str, Any]:
        data = self._get(path)
        missing = [name for name in names if name not in data]
        if missing:
            raise DataUnavailable(f"GET {path} response missing {', '.join(repr(m) for m in missing)}")
        return {name: data[name] for name in names}

    def _field(self, path: str, name: str) -> Any:
        return self._fields(path, name)[name]

    def _location(self, path: str) -> Location:
        return self._coordinates(path, self._fields(path, "latitude", "longitude"))

    @staticmethod
    def _coordinates(path: str, data: Dict[str, Any]) -> Location:
        try:
            return float(data["latitude"]), float(data["longitude"])
        except (TypeError, ValueError) as e:
            raise DataUnavailable(f"GET {path} returned a non-numeric location") from e

    def all_user_ids(self) -> Set[int]:
        return {int(u) for u in self._field("/users", "user_ids")}

    def all_place_ids(self) -> Set[int]:
        return {int(p) for p in self._field("/places", "place_ids")}

    def friends_of(self, user_id: int) -> List[int]:
        return [int(u) for u in self._field(f"/users/{user_id}/friends", "friends")]

    def liked_places_of(self, user_id: int) -> List[int]:
        return [int(p) for p in self._field(f"/users/{user_id}/likes", "places")]

    def category_of(self, place_id: int) -> str:
        return str(self._field(f"/places/{place_id}", "category"))

    def user_location(self, user_id: int) -> Location:
        return self._location(f"/users/{user_id}")

    def place_location(self, place_id: int) -> Location:
        return self._location(f"/places/{place_id}")

    def user_attributes(self, user_id: int) -> Dict[str, Any]:
        return self._fields(f"/users/{user_id}", "first_name", "last_name")

    def place_attributes(self, place_id: int) -> Dict[str, Any]:
        path = f"/places/{place_id}"
        data = self._fields(path, "name", "category", "latitude", "longitude")
        data["latitude"], data["longitude"] = self._coordinates(path, data)
        return data

    def close(self):
        """Close the HTTP client."""
        self._client.close()
