"""
Social graph core: clean-architecture layout.

- domain: entities (Persona) and errors. No outer dependencies.
- application: use cases (NetworkService), ports (SocialGraph), DTOs.
- infrastructure: adapters (InMemorySocialGraph).
"""

from socialgraph.application import (
    AlreadyConnected,
    Connected,
    ConnectionPath,
    Duplicate,
    Invalid,
    NetworkService,
    NoPath,
    NotFound,
    PersonaCardData,
    PersonaSummary,
    Registered,
    SocialGraph,
)
from socialgraph.domain import (
    ConnectionExistsError,
    DuplicateUserError,
    InvalidArgumentError,
    NoPathError,
    Persona,
    SocialGraphError,
    TraversalLimitError,
    UserNotFoundError,
)
from socialgraph.infrastructure import InMemorySocialGraph

__all__ = [
    "AlreadyConnected",
    "Connected",
    "ConnectionExistsError",
    "ConnectionPath",
    "Duplicate",
    "DuplicateUserError",
    "InMemorySocialGraph",
    "Invalid",
    "InvalidArgumentError",
    "NetworkService",
    "NoPath",
    "NoPathError",
    "NotFound",
    "Persona",
    "PersonaCardData",
    "PersonaSummary",
    "Registered",
    "SocialGraph",
    "SocialGraphError",
    "TraversalLimitError",
    "UserNotFoundError",
]
