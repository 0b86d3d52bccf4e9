"""Registration, friendships, and path queries over a SocialGraph."""

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
from socialgraph.application.ports import SocialGraph
from socialgraph.domain import (
    ConnectionExistsError,
    DuplicateUserError,
    InvalidArgumentError,
    NoPathError,
    Persona,
    TraversalLimitError,
    UserNotFoundError,
)


def _summary(persona: Persona) -> PersonaSummary:
    return PersonaSummary(
        person_id=persona.id,
        name=persona.name,
        city=persona.city,
        registration_date=persona.registration_date,
    )


class NetworkService:
    """Core flow: register personas -> befriend -> query. Store errors become result values."""

    def __init__(self, graph: SocialGraph) -> None:
        self._graph = graph

    def register(self, card: PersonaCardData) -> Registered | Duplicate | Invalid:
        """Register a persona from a card. Returns registered, duplicate, or invalid."""
        person_id = (card.id or "").strip()
        if not person_id:
            return Invalid(reason="Id is required.")

        try:
            persona = Persona(
                id=person_id,
                name=card.name,
                birth_date=card.birth_date,
                city=card.city,
                registration_date=card.registration_date,
            )
        except InvalidArgumentError as exc:
            return Invalid(reason=str(exc))

        try:
            self._graph.register_user(persona)
        except DuplicateUserError:
            existing = self._graph.get_user(person_id)
            return Duplicate(person_id=existing.id, name=existing.name)
        return Registered(person_id=persona.id, name=persona.name)

    def befriend(
        self, id1: str, id2: str
    ) -> Connected | AlreadyConnected | NotFound | Invalid:
        try:
            self._graph.connect(id1, id2)
        except InvalidArgumentError as exc:
            return Invalid(reason=str(exc))
        except UserNotFoundError as exc:
            return NotFound(person_id=exc.user_id)
        except ConnectionExistsError:
            return AlreadyConnected(id1=id1, id2=id2)
        return Connected(id1=id1, id2=id2)

    def list_friends(self, person_id: str) -> list[PersonaSummary] | NotFound:
        """Return friends sorted by name then id, or NotFound."""
        try:
            friends = self._graph.get_friends(person_id)
        except UserNotFoundError:
            return NotFound(person_id=person_id)
        return [_summary(p) for p in friends]

    def find_path(
        self, source_id: str, target_id: str
    ) -> ConnectionPath | NoPath | NotFound:
        """Return the shortest chain of friends between two personas."""
        try:
            path = self._graph.get_connection_path_between(source_id, target_id)
        except UserNotFoundError as exc:
            return NotFound(person_id=exc.user_id)
        except (NoPathError, TraversalLimitError) as exc:
            return NoPath(source_id=source_id, target_id=target_id, reason=str(exc))
        return ConnectionPath(
            personas=[_summary(p) for p in path],
            level=len(path) - 1,
        )

    def list_members(self) -> list[PersonaSummary]:
        """Return all personas in registration order."""
        return [_summary(p) for p in self._graph.get_users_ordered_by_registration()]
