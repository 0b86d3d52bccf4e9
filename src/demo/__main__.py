"""
Demo: load a YAML scenario into an in-memory social graph and print queries.
Run: python -m demo (from repo root, with .env or env vars set).
"""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/demo/__main__.py go up to repo root (parent.parent.parent when in src layout)
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from demo.scenario_loader import Scenario, load_scenario
from socialgraph.application import (
    AlreadyConnected,
    Connected,
    ConnectionPath,
    Duplicate,
    Invalid,
    NetworkService,
    NoPath,
    NotFound,
    Registered,
)
from socialgraph.infrastructure import InMemorySocialGraph


def _log_level() -> str:
    name = os.environ.get("SOCIALGRAPH_LOG_LEVEL", "").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(name), int):
        raise SystemExit(
            f"SOCIALGRAPH_LOG_LEVEL must be a logging level name, got '{name}'."
        )
    return name


logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=_log_level(),
)
logger = logging.getLogger(__name__)

MISSING_PERSONA_ID = "nonexistent"


def _max_traversal() -> int | None:
    raw = os.environ.get("SOCIALGRAPH_MAX_TRAVERSAL", "").strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        limit = 0
    if limit < 1:
        raise SystemExit(
            f"SOCIALGRAPH_MAX_TRAVERSAL must be a positive integer, got '{raw}'."
        )
    return limit


def _format_path(result: ConnectionPath) -> str:
    return " -> ".join(p.name for p in result.personas)


def build_network(scenario: Scenario, service: NetworkService) -> None:
    """Register scenario personas in file order, then create its friendships."""
    print("\nRegistering users...")
    for card in scenario.cards:
        result = service.register(card)
        if isinstance(result, Registered):
            logger.debug("Registered %s (%s)", result.name, result.person_id)
        elif isinstance(result, Duplicate):
            logger.warning("Skipping duplicate persona %s", result.person_id)
        elif isinstance(result, Invalid):
            logger.warning("Skipping persona %s: %s", card.id, result.reason)

    print("\nCreating connections...")
    for id1, id2 in scenario.connections:
        result = service.befriend(id1, id2)
        if isinstance(result, Connected):
            logger.debug("Connected %s and %s", id1, id2)
        else:
            logger.warning("Could not connect %s and %s: %s", id1, id2, result)


def run(scenario: Scenario, service: NetworkService) -> None:
    print("Social Network Demonstration")
    print("===========================")
    build_network(scenario, service)

    members = {m.person_id: m for m in service.list_members()}

    for person_id in scenario.friend_queries:
        friends = service.list_friends(person_id)
        if isinstance(friends, NotFound):
            print(f"\nUnknown user {person_id}")
            continue
        print(f"\nFriends of {members[person_id].name}:")
        for friend in friends:
            print(f"- {friend.name}")

    for source_id, target_id in scenario.path_queries:
        result = service.find_path(source_id, target_id)
        if isinstance(result, ConnectionPath):
            source, target = result.personas[0].name, result.personas[-1].name
            print(f"\nConnection path from {source} to {target}:")
            print(_format_path(result))
            print(f"\nConnection level between {source} and {target}: {result.level}")
        elif isinstance(result, NoPath):
            print(f"\n{result.reason}")
        elif isinstance(result, NotFound):
            print(f"\nUnknown user {result.person_id}")

    print("\nUsers ordered by registration date:")
    for member in service.list_members():
        print(f"- {member.name} (Registered: {member.registration_date.isoformat()})")

    if not members:
        return
    first_id = next(iter(members))
    print(
        f"\nTrying to find connection path between {members[first_id].name} "
        "and a non-existent user..."
    )
    missing = service.find_path(first_id, MISSING_PERSONA_ID)
    if isinstance(missing, NotFound):
        print(f"Error: User with ID {missing.person_id} not found")

    if scenario.connections:
        id1, id2 = scenario.connections[0]
        print("\nTrying to create a connection that already exists...")
        again = service.befriend(id1, id2)
        if isinstance(again, AlreadyConnected):
            print(f"Error: Connection between users {id1} and {id2} already exists")


def main() -> None:
    scenario = load_scenario()
    graph = InMemorySocialGraph(max_traversal=_max_traversal())
    service = NetworkService(graph)
    logger.info(
        "Loaded scenario: %d personas, %d connections",
        len(scenario.cards),
        len(scenario.connections),
    )
    run(scenario, service)


if __name__ == "__main__":
    main()
