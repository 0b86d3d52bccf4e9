"""DTOs passed between callers and NetworkService. Plain values, no behaviour."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class PersonaCardData:
    """Raw persona details as received from a caller. Validated on register."""

    id: str | None = None
    name: str | None = None
    birth_date: date | None = None
    city: str | None = None
    registration_date: date | None = None


@dataclass(frozen=True)
class PersonaSummary:
    person_id: str
    name: str
    city: str
    registration_date: date


@dataclass(frozen=True)
class Registered:
    person_id: str
    name: str


@dataclass(frozen=True)
class Duplicate:
    person_id: str
    name: str


@dataclass(frozen=True)
class Invalid:
    reason: str


@dataclass(frozen=True)
class Connected:
    id1: str
    id2: str


@dataclass(frozen=True)
class AlreadyConnected:
    id1: str
    id2: str


@dataclass(frozen=True)
class NotFound:
    person_id: str


@dataclass(frozen=True)
class ConnectionPath:
    personas: list[PersonaSummary] = field(default_factory=list)
    level: int = 0


@dataclass(frozen=True)
class NoPath:
    source_id: str
    target_id: str
    reason: str = ""
