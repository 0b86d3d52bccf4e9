"""Infrastructure layer: concrete implementations of application ports."""

from socialgraph.infrastructure.memory_graph import InMemorySocialGraph

__all__ = ["InMemorySocialGraph"]
