from .types import (
    WireType,
    CircuitConnectorId,
    PROBED_CONNECTORS,
    SignalID,
    SignalTable,
)
from .protocols import CircuitEntity, CircuitNetwork
from .network import (
    is_valid_circuit_entity,
    get_circuit_signals,
    get_merged_input_signals,
    set_circuit_signals,
    has_circuit_connection,
    has_any_circuit_connection,
    get_connected_entities,
    get_signal_count,
)

__all__ = [
    "WireType",
    "CircuitConnectorId",
    "PROBED_CONNECTORS",
    "SignalID",
    "SignalTable",
    "CircuitEntity",
    "CircuitNetwork",
    "is_valid_circuit_entity",
    "get_circuit_signals",
    "get_merged_input_signals",
    "set_circuit_signals",
    "has_circuit_connection",
    "has_any_circuit_connection",
    "get_connected_entities",
    "get_signal_count",
]
