"""Shared type aliases and error types for barebone-fsm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Hashable

StateId = Hashable


@dataclass(frozen=True, slots=True)
class Transition:
    """Explicit handler result naming the next state."""

    to: StateId


class FSMError(RuntimeError):
    """Base class for errors raised by the machine itself."""


class ReentrantDispatchError(FSMError):
    """Raised when a handler dispatches on a machine that is already dispatching."""

    def __init__(self, event: StateId, message: str) -> None:
        self.event = event
        super().__init__(message)


if TYPE_CHECKING:
    from barebone_fsm.machine import Machine

# A handler returns a StateId, a Transition, or None (observer).
Handler = Callable[["Machine"], object]
