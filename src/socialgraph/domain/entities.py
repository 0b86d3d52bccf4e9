"""Domain entities: Persona."""

from dataclasses import dataclass, field
from datetime import date

from socialgraph.domain.errors import InvalidArgumentError


@dataclass(frozen=True)
class Persona:
    """
    Represents a registered member of the social network.
    Identity is the id alone: two Personas with the same id are the same member,
    whatever their other fields say. Every field is required; id, name and city
    must be strings, and id must also be non-blank.
    """

    id: str
    name: str = field(compare=False)
    birth_date: date = field(compare=False)
    city: str = field(compare=False)
    registration_date: date = field(compare=False)

    def __post_init__(self):
        for attr in ("id", "name", "birth_date", "city", "registration_date"):
            if getattr(self, attr) is None:
                raise InvalidArgumentError(f"Persona {attr} cannot be None.")

        for attr in ("id", "name", "city"):
            if not isinstance(getattr(self, attr), str):
                raise InvalidArgumentError(f"Persona {attr} must be a string.")

        if not self.id.strip():
            raise InvalidArgumentError("Persona id must be non-empty.")
