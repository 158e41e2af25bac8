"""Integration tests: complete state graphs driven by event sequences."""
import logging

import pytest

from barebone_fsm import Machine


def build_door(default_state="default"):
    """Door with a shared transition counter, as in examples/door.py."""

    def count(target):
        def handler(m):
            m.data["transitions"] = m.data.get("transitions", 0) + 1
            return target
        return handler

    machine = Machine(default_state)
    machine.declare_state("default", lambda s: s.register_transition_map({"open": "open", "close": "close"}))
    machine.declare_state("open", lambda s: s.register_event("close", count("close")))
    machine.declare_state("close", lambda s: s.register_event("open", count("open")))
    return machine


class TestDoorScenario:
    """The door graph driven through a fixed event sequence."""

    def test_describe_before_run(self):
        machine = build_door()

        assert machine.describe() == (
            "Machine: {>default: [open, close], open: [close], close: [open]}"
        )

    def test_sequence_without_default_state(self):
        """Undefined event is a silent no-op that leaves the state unchanged."""
        # Arrange
        machine = build_door(default_state=None)
        assert machine.current_state == "default"
        visited = []

        # Act
        for event in ["close", "open", "close", "undefined", "open", "close"]:
            machine.dispatch(event)
            visited.append(machine.current_state)

        # Assert
        assert visited == ["close", "open", "close", "close", "open", "close"]
        assert machine.current_state == "close"
        assert machine.data["transitions"] == 4

    def test_sequence_with_default_state(self):
        """Undefined event falls back to the default state, final state is the same."""
        machine = build_door()
        visited = []

        for event in ["close", "open", "close", "undefined", "open", "close"]:
            machine.dispatch(event)
            visited.append(machine.current_state)

        assert visited == ["close", "open", "close", "default", "open", "close"]
        assert machine.describe() == (
            "Machine: {default: [open, close], open: [close], >close: [open]}"
        )

    def test_multi_event_form_matches_single_calls(self):
        events = ["close", "open", "close", "undefined", "open", "close"]
        one_by_one = build_door()
        batched = build_door()

        for event in events:
            one_by_one.dispatch(event)
        batched.dispatch(*events)

        assert batched.current_state == one_by_one.current_state == "close"
        assert batched.data == one_by_one.data


class TestMicrowaveScenario:
    """No default state: the first declared state is the start state."""

    @pytest.fixture
    def microwave(self):
        machine = Machine()
        machine.declare_state("stopped", lambda s: s.register_transition_map({"open": "open", "start": "started"}))
        machine.declare_state("open", lambda s: s.register_transition_map({"close": "stopped"}))
        machine.declare_state("started", lambda s: s.register_transition_map({"open": "open", "stop": "stopped"}))
        return machine

    def test_run(self, microwave):
        log = []
        for name in microwave.states:
            microwave.state(name).register_event("enter", lambda m: log.append(m.current_state))

        microwave.dispatch("open", "close", "start", "open", "close", "start", "stop")

        assert microwave.current_state == "stopped"
        assert log == ["open", "stopped", "started", "open", "stopped", "started", "stopped"]

    def test_ignored_event_keeps_state(self, microwave):
        microwave.dispatch("open", "start")

        assert microwave.current_state == "open"


class TestLogging:
    """Transitions and fallbacks are logged at DEBUG."""

    def test_transition_logged(self, caplog):
        machine = build_door()

        with caplog.at_level(logging.DEBUG, logger="barebone_fsm"):
            machine.dispatch("open", "undefined")

        messages = [r.getMessage() for r in caplog.records]
        assert "'default' -['open']-> 'open'" in messages
        assert "event 'undefined' unresolved in state 'open'" in messages
        assert "'open' -['undefined']-> 'default'" in messages
