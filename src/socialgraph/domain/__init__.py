"""Domain layer: entities and errors. No dependencies on outer layers."""

from socialgraph.domain.entities import Persona
from socialgraph.domain.errors import (
    ConnectionExistsError,
    DuplicateUserError,
    InvalidArgumentError,
    NoPathError,
    SocialGraphError,
    TraversalLimitError,
    UserNotFoundError,
)

__all__ = [
    "ConnectionExistsError",
    "DuplicateUserError",
    "InvalidArgumentError",
    "NoPathError",
    "Persona",
    "SocialGraphError",
    "TraversalLimitError",
    "UserNotFoundError",
]
