"""Microwave -- a machine without a default state.

Demonstrates:
- The first declared state becoming the start state
- Handlers reading last_event and current_state
- Ignored events leaving the state unchanged

Run: python -m examples.microwave [--verbose]
"""

import argparse
import logging

from barebone_fsm import Machine, State


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Microwave -- barebone-fsm demo")
    p.add_argument("--verbose", action="store_true", help="Log every transition")
    return p.parse_args()


def announce(target: str):
    def handler(machine: Machine) -> str:
        print(f"  [{machine.current_state}]->{machine.last_event}")
        return target

    return handler


def stopped(state: State) -> None:
    state.register_event("open", announce("open"))
    state.register_event("start", announce("started"))


def door_open(state: State) -> None:
    state.register_event("close", announce("stopped"))


def started(state: State) -> None:
    state.register_event("open", announce("open"))
    state.register_event("stop", announce("stopped"))


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s | %(message)s")

    fsm = Machine()
    fsm.declare_state("stopped", stopped)
    fsm.declare_state("open", door_open)
    fsm.declare_state("started", started)

    # "start" while open is ignored.
    fsm.dispatch("open", "start", "close", "start", "open", "close", "start", "stop")
    print(fsm)


if __name__ == "__main__":
    main()
