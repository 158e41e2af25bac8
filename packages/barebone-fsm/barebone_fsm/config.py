"""Machine configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FSMConfig:
    """Immutable configuration for a Machine.

    Attributes:
        default_event: Handler name consulted when a state has no handler
            for the requested event.
        enter_event: Hook triggered on the state entered after each event.
        exit_event: Hook triggered on the state left before each event.
    """

    default_event: str = "default"
    enter_event: str = "enter"
    exit_event: str = "exit"

    def __post_init__(self) -> None:
        names = (self.default_event, self.enter_event, self.exit_event)
        if not all(names):
            raise ValueError("reserved event names must be non-empty")
        if len(set(names)) != len(names):
            raise ValueError(f"reserved event names must be distinct, got {names!r}")
