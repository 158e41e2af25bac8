"""barebone-fsm - A minimal embeddable finite state machine."""
from __future__ import annotations

import logging

from barebone_fsm.config import FSMConfig
from barebone_fsm.host import MachineHost, fire, has_event, is_state
from barebone_fsm.machine import Machine
from barebone_fsm.state import State
from barebone_fsm.types import (
    FSMError,
    Handler,
    ReentrantDispatchError,
    StateId,
    Transition,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Machine",
    "State",
    "FSMConfig",
    "Transition",
    "StateId",
    "Handler",
    "FSMError",
    "ReentrantDispatchError",
    "MachineHost",
    "has_event",
    "is_state",
    "fire",
]
