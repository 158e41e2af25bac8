"""Door -- a three-state machine with a default state.

Demonstrates:
- Declaring states with a configure callable
- Fixed transitions via register_transition_map
- Handlers sharing a counter through machine.data
- Falling back to the default state on an undefined event

Run: python -m examples.door [--verbose]
"""

import argparse
import logging

from barebone_fsm import Machine


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Door -- barebone-fsm demo")
    p.add_argument("--verbose", action="store_true", help="Log every transition")
    return p.parse_args()


def counted(source: str, target: str):
    def handler(machine: Machine) -> str:
        machine.data["x"] = machine.data.get("x", 0) + 1
        print(f"  {machine.data['x']} transition: {source}->{target}")
        return target

    return handler


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s | %(message)s")

    fsm = Machine("default")
    fsm.declare_state("default", lambda s: s.register_transition_map({"open": "open", "close": "close"}))
    fsm.declare_state("open", lambda s: s.register_event("close", counted("open", "close")))
    fsm.declare_state("close", lambda s: s.register_event("open", counted("close", "open")))

    print(fsm)
    fsm.dispatch("close", "open", "close", "undefined", "open", "close")
    print(fsm)


if __name__ == "__main__":
    main()
