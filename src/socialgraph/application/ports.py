"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from socialgraph.domain import Persona


class SocialGraph(Protocol):
    """Registers personas, links them as friends, and answers path queries."""

    def register_user(self, persona: Persona) -> None:
        """Add a persona with no friends. Raises DuplicateUserError if the id exists."""
        ...

    def connect(self, id1: str, id2: str) -> None:
        """Make two registered personas friends (undirected)."""
        ...

    def get_user(self, user_id: str) -> Persona:
        ...

    def get_friends(self, user_id: str) -> tuple[Persona, ...]:
        """Return friends sorted by (name, id)."""
        ...

    def get_connection_path_between(self, id1: str, id2: str) -> list[Persona]:
        """Return a shortest path from id1 to id2, inclusive of both."""
        ...

    def get_connection_level_between(self, id1: str, id2: str) -> int:
        """Return the number of friendships separating id1 and id2."""
        ...

    def get_users_ordered_by_registration(self) -> tuple[Persona, ...]:
        """Return all personas in the order they were registered."""
        ...
