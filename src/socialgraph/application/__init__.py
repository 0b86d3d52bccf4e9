"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from socialgraph.application.dto import (
    AlreadyConnected,
    Connected,
    ConnectionPath,
    Duplicate,
    Invalid,
    NoPath,
    NotFound,
    PersonaCardData,
    PersonaSummary,
    Registered,
)
from socialgraph.application.network_service import NetworkService
from socialgraph.application.ports import SocialGraph

__all__ = [
    "AlreadyConnected",
    "Connected",
    "ConnectionPath",
    "Duplicate",
    "Invalid",
    "NetworkService",
    "NoPath",
    "NotFound",
    "PersonaCardData",
    "PersonaSummary",
    "Registered",
    "SocialGraph",
]
