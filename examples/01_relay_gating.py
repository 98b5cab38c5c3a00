"""Example 01: Relay Gating

Demonstrates:
- Gating a receiver link on its platform being parked in orbit of the target planet
- Reading merged red/green signals from a transmitter once the link is up
- Following a platform through depart / approach / settle
"""
import logging

from MissionControl.circuit import WireType, get_merged_input_signals, has_any_circuit_connection
from MissionControl.log_utils import enable_logging
from MissionControl.space import PlatformEvaluator, get_platform_status_string
from MissionControl.testing import HostSimulation


def relay_tick(evaluator: PlatformEvaluator, platform, transmitter, target_surface):
    """One controller tick: check eligibility, then read what would be relayed."""
    print(get_platform_status_string(platform))

    if not evaluator.is_platform_orbiting(platform.unit_number, target_surface.index):
        print("  link down")
        return

    if not has_any_circuit_connection(transmitter):
        print("  link up, transmitter unwired")
        return

    signals = get_merged_input_signals(transmitter)
    print("  link up, relaying:")
    for signal_id, count in sorted(signals.items(), key=lambda item: str(item[0])):
        print(f"    {signal_id}: {count}")


def main():
    enable_logging(logging.INFO)

    host = HostSimulation()
    nauvis = host.create_surface("nauvis")
    nauvis_orbit = host.create_location("nauvis", nauvis)

    transmitter = host.create_entity(nauvis, name="transmitter-combinator")
    host.wire(transmitter, WireType.RED, {"iron-plate": 10, "copper-plate": 20})
    host.wire(transmitter, WireType.GREEN, {"iron-plate": 5, "steel-plate": 15})

    platform = host.create_platform("Alpha", location=nauvis_orbit)
    evaluator = PlatformEvaluator(host.platforms)

    relay_tick(evaluator, platform, transmitter, nauvis)

    platform.depart(speed=2.0)
    relay_tick(evaluator, platform, transmitter, nauvis)

    platform.arrive(nauvis_orbit, speed=0.25)
    relay_tick(evaluator, platform, transmitter, nauvis)

    platform.speed = 0
    relay_tick(evaluator, platform, transmitter, nauvis)


if __name__ == "__main__":
    main()
