"""In-memory implementation of SocialGraph (no DB)."""

import threading
from bisect import bisect_left
from collections import deque

from socialgraph.domain import (
    ConnectionExistsError,
    DuplicateUserError,
    InvalidArgumentError,
    NoPathError,
    Persona,
    TraversalLimitError,
    UserNotFoundError,
)


def _friend_order(persona: Persona) -> tuple[str, str]:
    return (persona.name, persona.id)


class InMemorySocialGraph:
    """Stores personas and their friendships in memory. Order preserved by registration.

    Each persona's friends are kept sorted by (name, id) as they are inserted, so
    friend listings and breadth-first exploration are deterministic.
    A single lock serializes every operation; traversals therefore see either all
    or none of a concurrent connect.
    """

    def __init__(self, *, max_traversal: int | None = None) -> None:
        if max_traversal is not None and max_traversal < 1:
            raise InvalidArgumentError("max_traversal must be a positive integer.")
        self._max_traversal = max_traversal
        self._lock = threading.RLock()
        self._by_id: dict[str, Persona] = {}
        self._order: list[str] = []
        self._friends: dict[str, list[Persona]] = {}  # sorted by (name, id)
        self._friend_ids: dict[str, set[str]] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._order)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._by_id

    def _require(self, user_id: str) -> Persona:
        persona = self._by_id.get(user_id)
        if persona is None:
            raise UserNotFoundError(user_id)
        return persona

    def register_user(self, persona: Persona) -> None:
        if persona is None:
            raise InvalidArgumentError("User cannot be None.")
        with self._lock:
            if persona.id in self._by_id:
                raise DuplicateUserError(persona.id)
            self._by_id[persona.id] = persona
            self._order.append(persona.id)
            self._friends[persona.id] = []
            self._friend_ids[persona.id] = set()

    def connect(self, id1: str, id2: str) -> None:
        if id1 == id2:
            raise InvalidArgumentError("Cannot connect a user to themselves.")
        with self._lock:
            user1 = self._require(id1)
            user2 = self._require(id2)
            if id2 in self._friend_ids[id1]:
                raise ConnectionExistsError(id1, id2)
            friends1 = self._friends[id1]
            friends2 = self._friends[id2]
            # Both positions are found before either list changes.
            pos1 = bisect_left(friends1, _friend_order(user2), key=_friend_order)
            pos2 = bisect_left(friends2, _friend_order(user1), key=_friend_order)
            friends1.insert(pos1, user2)
            friends2.insert(pos2, user1)
            self._friend_ids[id1].add(id2)
            self._friend_ids[id2].add(id1)

    def get_user(self, user_id: str) -> Persona:
        with self._lock:
            return self._require(user_id)

    def get_friends(self, user_id: str) -> tuple[Persona, ...]:
        with self._lock:
            self._require(user_id)
            return tuple(self._friends[user_id])

    def get_connection_path_between(self, id1: str, id2: str) -> list[Persona]:
        """Return the shortest path id1 -> id2, both endpoints included.

        Neighbours are explored in (name, id) order, so among several shortest
        paths the same one is always chosen. Raises NoPathError when id2 is not
        reachable from id1.
        """
        with self._lock:
            start = self._require(id1)
            end = self._require(id2)
            if start == end:
                return [start]

            queue = deque([id1])
            visited = {id1}
            previous: dict[str, str] = {}
            found = False

            while queue and not found:
                current = queue.popleft()
                for neighbor in self._friends[current]:
                    if neighbor.id in visited:
                        continue
                    visited.add(neighbor.id)
                    if (
                        self._max_traversal is not None
                        and len(visited) > self._max_traversal
                    ):
                        raise TraversalLimitError(self._max_traversal)
                    previous[neighbor.id] = current
                    queue.append(neighbor.id)
                    if neighbor.id == id2:
                        found = True
                        break

            if not found:
                raise NoPathError(id1, id2)

            path = [end]
            step = id2
            while step != id1:
                step = previous[step]
                path.append(self._by_id[step])
            path.reverse()
            return path

    def get_connection_level_between(self, id1: str, id2: str) -> int:
        """Number of friendships on the shortest path (0 for the same persona)."""
        return len(self.get_connection_path_between(id1, id2)) - 1

    def get_users_ordered_by_registration(self) -> tuple[Persona, ...]:
        with self._lock:
            return tuple(self._by_id[pid] for pid in self._order)
