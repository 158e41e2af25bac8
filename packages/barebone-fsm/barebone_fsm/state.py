"""State - one node of the machine and its event-handler table."""
from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from barebone_fsm.types import Handler, StateId

if TYPE_CHECKING:
    from barebone_fsm.machine import Machine


def _goto(target: StateId) -> Handler:
    def handler(machine: Machine) -> StateId:
        return target

    return handler


class State:
    """A named state owning an ordered mapping of event name to handler.

    Handlers are called with the owning machine and return the next state
    id, a :class:`~barebone_fsm.types.Transition`, or ``None``.
    """

    def __init__(self, machine: Machine, name: StateId) -> None:
        self._machine = machine
        self._name = name
        self._events: dict[StateId, Handler] = {}

    @property
    def name(self) -> StateId:
        return self._name

    @property
    def machine(self) -> Machine:
        return self._machine

    @property
    def events(self) -> tuple[StateId, ...]:
        """Registered event names in insertion order."""
        return tuple(self._events)

    def register_event(self, name: StateId, handler: Handler) -> None:
        """Register a handler for ``name``. Overwrites if already registered."""
        self._events[name] = handler

    def register_transition_map(self, mapping: Mapping[StateId, StateId]) -> None:
        """Register one fixed-target handler per ``event -> next_state`` pair."""
        for event, target in mapping.items():
            self._events[event] = _goto(target)

    def has_event(self, name: StateId) -> bool:
        return name in self._events

    def trigger(self, name: StateId) -> object:
        """Invoke the handler for ``name`` and return its result.

        Falls back to the reserved default handler, which still sees
        ``name`` as the machine's ``last_event``. Returns ``None`` when
        neither is registered.
        """
        handler = self._events.get(name)
        if handler is None:
            handler = self._events.get(self._machine.config.default_event)
            if handler is None:
                return None
        self._machine._last_event = name
        return handler(self._machine)

    def describe(self) -> str:
        return f"{self._name}: [{', '.join(str(e) for e in self._events)}]"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"State({self._name!r}, events={list(self._events)!r})"
