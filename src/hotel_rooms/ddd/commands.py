"""Command and query — CQRS markers."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Command: intent to change state. One handler per command type."""
    pass


@dataclass(frozen=True)
class Query:
    """Query: intent to read. One handler per query type."""
    pass
