"""Vehicle -- embedding a machine in a host class.

Demonstrates:
- Subclassing MachineHost
- has_event / is_state queries and the fire shorthand

Run: python -m examples.vehicle
"""

from barebone_fsm import MachineHost


class Vehicle(MachineHost):
    def __init__(self) -> None:
        super().__init__()
        self.declare_state("parked", lambda s: s.register_transition_map({"start": "running", "open": "open"}))
        self.declare_state("running", lambda s: s.register_transition_map({"park": "parked"}))
        self.declare_state("open", lambda s: s.register_event("park", lambda m: "parked"))

    def __str__(self) -> str:
        return str(self.fsm)


def main() -> None:
    vehicle = Vehicle()
    print(vehicle)

    vehicle.fire("start", "park")
    print(vehicle)

    for event in ("park", "open", "park"):
        if not vehicle.has_event(event):
            print(f"  {event!r} not handled in {vehicle.fsm.current_state!r}")
        vehicle.fire(event)
        print(vehicle)

    print(f"parked: {vehicle.is_state('parked')}")


if __name__ == "__main__":
    main()
