"""Host-side circuit interfaces for structural subtyping.

The circuit query functions never own the objects they read. These protocols
describe the slice of the host simulation they consume, so any object with
the right attributes (a live game bridge, or the in-memory host used in tests)
can be passed in.
"""

from typing import Any, Iterable, Mapping, Optional, Protocol, Union, runtime_checkable

from MissionControl.circuit.types import CircuitConnectorId, WireType


# One raw entry of CircuitNetwork.signals: {"signal": {"type": ..., "name": ...}, "count": N}
RawSignal = Mapping[str, Any]


@runtime_checkable
class CircuitNetwork(Protocol):
    """A red or green network as seen from one connector.

    `signals` is a list of raw entries, or None when nothing is on the wire.
    """

    valid: bool
    connected_circuit_count: int

    @property
    def signals(self) -> Optional[Iterable[Union[RawSignal, Any]]]:
        ...


@runtime_checkable
class CircuitEntity(Protocol):
    """An entity exposing circuit connectors.

    Having `get_circuit_network` at all is what makes an entity
    circuit-capable; a chest without connectors simply lacks it.
    """

    valid: bool

    def get_circuit_network(
        self, wire_type: WireType, connector_id: CircuitConnectorId
    ) -> Optional[CircuitNetwork]:
        """Return the network on this wire/connector, or None if unwired."""
        ...


__all__ = ["CircuitEntity", "CircuitNetwork", "RawSignal"]
