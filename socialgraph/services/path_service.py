"""
Relational distance service.

Breadth-first search over the live friend relation.
"""

import logging
from collections import deque
from typing import Dict, List, Optional

from .base import BaseService

logger = logging.getLogger(__name__)

NOT_REACHABLE = -1


class PathService(BaseService):
    """
    Shortest friendship paths between users.

    Friend lists are fetched from the data source as nodes are visited and
    are never cached between calls.
    """

    def distance(self, user_a: int, user_b: int) -> int:
        """
        Minimum number of friendship hops between two users.

        Args:
            user_a: Starting user
            user_b: Target user

        Returns:
            Hop count, 0 for the same user, NOT_REACHABLE if no path exists
        """
        if user_a == user_b:
            return 0

        path = self.shortest_path(user_a, user_b)
        if path is None:
            return NOT_REACHABLE
        return len(path) - 1

    def shortest_path(self, user_a: int, user_b: int) -> Optional[List[int]]:
        """
        Find one minimum-hop path between two users.

        Args:
            user_a: Starting user
            user_b: Target user

        Returns:
            List of user IDs from user_a to user_b, or None if unreachable
        """
        if user_a == user_b:
            return [user_a]

        self.require_user(user_a)
        self.require_user(user_b)

        parents: Dict[int, Optional[int]] = {user_a: None}
        queue = deque([user_a])

        while queue:
            node = queue.popleft()
            for friend in self.known_friends(node):
                if friend == user_b:
                    parents[friend] = node
                    path = self._unwind(parents, user_b)
                    logger.debug(f"Reached {user_b} from {user_a} in {len(path) - 1} hops")
                    return path

                if friend not in parents:
                    parents[friend] = node
                    queue.append(friend)

        logger.debug(f"{user_b} not reachable from {user_a} ({len(parents)} users visited)")
        return None

    @staticmethod
    def _unwind(parents: Dict[int, Optional[int]], target: int) -> List[int]:
        path = [target]
        while parents[path[-1]] is not None:
            path.append(parents[path[-1]])
        path.reverse()
        return path
