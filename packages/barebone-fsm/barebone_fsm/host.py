"""Host-adapter helpers: queries and shorthand over a Machine's public API."""
from __future__ import annotations

from typing import Callable

from barebone_fsm.config import FSMConfig
from barebone_fsm.machine import Machine
from barebone_fsm.state import State
from barebone_fsm.types import StateId


def has_event(machine: Machine, name: StateId) -> bool:
    """True if the current state has a handler registered under ``name``."""
    state = machine.state()
    return state is not None and state.has_event(name)


def is_state(machine: Machine, name: StateId) -> bool:
    """True if the machine's current state is ``name``."""
    return machine.current_state is not None and machine.current_state == name


def fire(machine: Machine, *event_names: StateId) -> None:
    """Dispatch ``event_names`` in order."""
    machine.dispatch(*event_names)


class MachineHost:
    """Mixin embedding one Machine in a host object.

    Subclasses call ``super().__init__(default_state)`` and declare their
    states in their own constructor.
    """

    def __init__(
        self,
        default_state: StateId | None = None,
        config: FSMConfig | None = None,
    ) -> None:
        self.fsm = Machine(default_state, config)

    def declare_state(
        self, name: StateId, configure: Callable[[State], None] | None = None,
    ) -> State:
        return self.fsm.declare_state(name, configure)

    def build(self, configure: Callable[[Machine], None]) -> Machine:
        return self.fsm.build(configure)

    def has_event(self, name: StateId) -> bool:
        return has_event(self.fsm, name)

    def is_state(self, name: StateId) -> bool:
        return is_state(self.fsm, name)

    def fire(self, *event_names: StateId) -> None:
        fire(self.fsm, *event_names)
