"""Machine - state registry, current/default pointers, and event dispatch."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping

from barebone_fsm.config import FSMConfig
from barebone_fsm.state import State
from barebone_fsm.types import Handler, ReentrantDispatchError, StateId, Transition

logger = logging.getLogger(__name__)


class Machine:
    """Finite state machine built from lazily created named states.

    The first state ever referenced becomes the current state. When an
    event yields no known next state the machine moves to
    ``default_state``, or stays put if there is none.
    """

    def __init__(
        self,
        default_state: StateId | None = None,
        config: FSMConfig | None = None,
    ) -> None:
        self._config = config if config is not None else FSMConfig()
        self._states: dict[StateId, State] = {}
        self._current: StateId | None = None
        self._default = default_state
        self._last_event: StateId | None = None
        self._dispatching: bool = False
        # Free-form storage shared by every handler of this machine.
        self.data: dict[str, Any] = {}

        if default_state is not None:
            self.ensure_state(default_state)

    @property
    def config(self) -> FSMConfig:
        return self._config

    @property
    def current_state(self) -> StateId | None:
        return self._current

    @property
    def default_state(self) -> StateId | None:
        return self._default

    @property
    def last_event(self) -> StateId | None:
        """Event name most recently handed to a handler."""
        return self._last_event

    @property
    def dispatching(self) -> bool:
        return self._dispatching

    @property
    def states(self) -> Mapping[StateId, State]:
        """Read-only view of all states in creation order."""
        return MappingProxyType(self._states)

    # --- Construction ---

    def ensure_state(self, name: StateId) -> State:
        """Return the state called ``name``, creating it on first reference."""
        state = self._states.get(name)
        if state is None:
            state = State(self, name)
            self._states[name] = state
            logger.debug("created state %r", name)
        if self._current is None:
            self._current = name
        return state

    def state(self, name: StateId | None = None) -> State | None:
        """Look up (or create) ``name``; the current state when omitted."""
        if name is None:
            return None if self._current is None else self._states[self._current]
        return self.ensure_state(name)

    def declare_state(
        self, name: StateId, configure: Callable[[State], None] | None = None,
    ) -> State:
        """Ensure ``name`` exists, then hand it to ``configure`` for registration."""
        state = self.ensure_state(name)
        if configure is not None:
            configure(state)
        return state

    def register_event(self, state: StateId, name: StateId, handler: Handler) -> None:
        self.ensure_state(state).register_event(name, handler)

    def register_transition_map(
        self, state: StateId, mapping: Mapping[StateId, StateId],
    ) -> None:
        self.ensure_state(state).register_transition_map(mapping)

    def build(self, configure: Callable[[Machine], None]) -> Machine:
        """Run ``configure`` against this machine and return it."""
        configure(self)
        return self

    # --- Dispatch ---

    def dispatch(self, *event_names: StateId) -> None:
        """Run the transition algorithm once per event, strictly in order.

        Raises ReentrantDispatchError if called from inside a handler of
        this machine.
        """
        if self._dispatching:
            raise ReentrantDispatchError(
                event_names[0] if event_names else None,
                f"Cannot dispatch {event_names!r} while a dispatch is in progress",
            )
        self._dispatching = True
        try:
            for event in event_names:
                self._step(event)
        finally:
            self._dispatching = False

    def _step(self, event: StateId) -> None:
        if self._current is None:
            logger.debug("no current state, skipping event %r", event)
            return
        cfg = self._config
        old = self._current
        source = self._states[old]

        source.trigger(cfg.exit_event)
        if not source.has_event(event) and not source.has_event(cfg.default_event):
            logger.debug("event %r unresolved in state %r", event, old)
        resolved = self._resolve_target(source.trigger(event))

        new = resolved
        if new is None:
            new = self._default
        if new is None:
            new = old
        self._current = new
        target = self.ensure_state(new)
        logger.debug("%r -[%r]-> %r", old, event, new)

        target.trigger(cfg.enter_event)

    def _resolve_target(self, result: object) -> StateId | None:
        if result is None:
            return None
        if isinstance(result, Transition):
            result = result.to
        try:
            known = result in self._states
        except TypeError:
            known = False
        if not known:
            logger.debug("ignoring unknown transition target %r", result)
            return None
        return self._states[result].name

    # --- Display ---

    def describe(self) -> str:
        entries = [
            (">" if name == self._current else "") + state.describe()
            for name, state in self._states.items()
        ]
        return "Machine: {" + ", ".join(entries) + "}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"Machine(current={self._current!r}, default={self._default!r}, "
            f"states={list(self._states)!r})"
        )
