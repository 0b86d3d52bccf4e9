"""Load and validate a YAML network scenario. Used by the demo entrypoint."""

import os
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path

import yaml

from socialgraph.application import PersonaCardData


@dataclass(frozen=True)
class Scenario:
    cards: list[PersonaCardData]
    connections: list[tuple[str, str]]
    friend_queries: list[str] = field(default_factory=list)
    path_queries: list[tuple[str, str]] = field(default_factory=list)


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def get_scenario_path() -> Path:
    """Return path to the scenario YAML (SOCIALGRAPH_SCENARIO_PATH env or scenarios/demo.yaml)."""
    default = _repo_root() / "scenarios" / "demo.yaml"
    path = os.environ.get("SOCIALGRAPH_SCENARIO_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def _to_date(value) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValueError(f"Invalid date '{value}'") from None


def _to_text(value, attr: str, person_id: str) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise ValueError(
        f"Invalid {attr} {value!r} for persona '{person_id}': quote it as a string"
    )


def _to_pair(item, what: str) -> tuple[str, str]:
    if not isinstance(item, (list, tuple)) or len(item) != 2:
        raise ValueError(f"Each {what} must be a list of two persona ids")
    return str(item[0]), str(item[1])


def load_scenario(path: Path | None = None) -> Scenario:
    """Load scenario YAML and return a Scenario. Validates minimal structure.

    Names and cities must be YAML strings; NetworkService reports
    incomplete personas when they are registered.
    """
    if path is None:
        path = get_scenario_path()
    raw = path.read_text(encoding="utf-8")
    doc = yaml.safe_load(raw)
    if not isinstance(doc, dict):
        raise ValueError("Scenario YAML must be a dict")
    if not doc.get("personas"):
        raise ValueError("Scenario must have a non-empty 'personas' list")

    cards = []
    for entry in doc["personas"]:
        if not isinstance(entry, dict) or entry.get("id") is None:
            raise ValueError("Every persona must have 'id'")
        person_id = str(entry["id"])
        cards.append(
            PersonaCardData(
                id=person_id,
                name=_to_text(entry.get("name"), "name", person_id),
                birth_date=_to_date(entry.get("birth_date")),
                city=_to_text(entry.get("city"), "city", person_id),
                registration_date=_to_date(entry.get("registration_date")),
            )
        )
    known_ids = {card.id for card in cards}

    connections = [_to_pair(c, "connection") for c in doc.get("connections") or []]
    for id1, id2 in connections:
        for person_id in (id1, id2):
            if person_id not in known_ids:
                raise ValueError(
                    f"Connection {id1}-{id2} references unknown persona '{person_id}'"
                )

    queries = doc.get("queries") or {}
    if not isinstance(queries, dict):
        raise ValueError("Scenario 'queries' must be a dict")
    return Scenario(
        cards=cards,
        connections=connections,
        friend_queries=[str(q) for q in queries.get("friends") or []],
        path_queries=[_to_pair(q, "path query") for q in queries.get("paths") or []],
    )
