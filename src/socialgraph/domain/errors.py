"""Domain errors raised by the social graph store. Callers distinguish kinds by type."""


class SocialGraphError(Exception):
    """Base class for every error raised by the social graph."""


class InvalidArgumentError(SocialGraphError, ValueError):
    """A required value is missing, or a persona was asked to befriend itself."""


class DuplicateUserError(SocialGraphError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"User with ID {user_id} already exists")
        self.user_id = user_id


class UserNotFoundError(SocialGraphError, LookupError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"User with ID {user_id} not found")
        self.user_id = user_id


class ConnectionExistsError(SocialGraphError):
    def __init__(self, id1: str, id2: str) -> None:
        super().__init__(f"Connection between users {id1} and {id2} already exists")
        self.id1 = id1
        self.id2 = id2


class NoPathError(SocialGraphError):
    """Source and target live in disconnected components."""

    def __init__(self, source_id: str, target_id: str) -> None:
        super().__init__(
            f"No path exists between user {source_id} and user {target_id}"
        )
        self.source_id = source_id
        self.target_id = target_id


class TraversalLimitError(SocialGraphError):
    """Breadth-first search visited more personas than the store allows."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Traversal exceeded the limit of {limit} personas")
        self.limit = limit
