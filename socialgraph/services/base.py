"""
Base service classes and shared context.

The ServiceContext holds the state every service needs: the data source and
the graph index built from it.
"""

import logging
from typing import Callable, TypeVar
from dataclasses import dataclass, field

from ..errors import DataUnavailable, InvalidArgument, SocialGraphError, UnknownEntity
from ..graph.index import GraphIndex
from ..graph.source import DataSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ServiceContext:
    """
    Shared context for all services.

    The data source is only closed by close() when the context opened it
    itself (owns_source=True); an injected source stays the caller's.
    """
    source: DataSource
    index: GraphIndex
    owns_source: bool = False
    closed: bool = field(default=False, repr=False)

    @classmethod
    def create(
        cls,
        source: DataSource,
        owns_source: bool = False
    ) -> "ServiceContext":
        """
        Factory method that builds the graph index eagerly.

        Args:
            source: Data source to read from
            owns_source: Whether close() should close the source

        Returns:
            Configured ServiceContext
        """
        index = GraphIndex.build(source)
        return cls(source=source, index=index, owns_source=owns_source)

    def close(self):
        """Release the data source if this context owns it."""
        if self.closed:
            return
        self.closed = True
        if self.owns_source:
            self.source.close()
            logger.info("Data source closed")


class BaseService:
    """
    Base class for all services.

    Each service receives the shared context and provides one analytic.
    """

    def __init__(self, context: ServiceContext):
        self.context = context

    @property
    def source(self) -> DataSource:
        if self.context.closed:
            raise RuntimeError("Engine is closed.")
        return self.context.source

    @property
    def index(self) -> GraphIndex:
        return self.context.index

    def fetch(self, call: Callable[..., T], *args) -> T:
        """
        Call the data source, surfacing any failure as DataUnavailable.

        Args:
            call: Bound data source method
            *args: Arguments for the call

        Returns:
            Whatever the data source returned
        """
        try:
            return call(*args)
        except SocialGraphError:
            raise
        except Exception as e:
            name = getattr(call, "__name__", repr(call))
            logger.error(f"Data source call {name}{args} failed: {e}")
            raise DataUnavailable(f"{name} failed: {e}") from e

    def require_user(self, user_id: int):
        """Raise UnknownEntity if the user is not in the index."""
        if not self.index.has_user(user_id):
            raise UnknownEntity(f"Unknown user: {user_id}")

    @staticmethod
    def require_positive(name: str, value: int):
        if value < 1:
            raise InvalidArgument(f"{name} must be at least 1, got {value}")

    @staticmethod
    def require_non_negative(name: str, value: int):
        if value < 0:
            raise InvalidArgument(f"{name} must not be negative, got {value}")

    def known_friends(self, user_id: int):
        """
        Live friend list of a user, restricted to users in the index.

        Unknown ids reported by the data source are dropped with a warning.
        Duplicates are removed, order is preserved.
        """
        friends = []
        for friend_id in dict.fromkeys(self.fetch(self.source.friends_of, user_id)):
            if self.index.has_user(friend_id):
                friends.append(friend_id)
            else:
                logger.warning(f"Skipping unknown friend {friend_id} of user {user_id}")
        return friends
