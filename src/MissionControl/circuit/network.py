"""Circuit network queries.

Low-level read access to an entity's red and green circuit networks, with no
knowledge of mod-specific entities or stored state. Every function validates
its input first and degrades to an empty result (False, None, {}, 0 or [])
instead of raising: an entity destroyed between two ticks is routine, not an
error.

Signal table format::

    {
        SignalID(type="item", name="iron-plate"): 100,
        SignalID(type="virtual", name="signal-A"): 50,
    }
"""

import logging
from typing import Any, List, Mapping, Optional

from MissionControl.circuit.protocols import CircuitEntity, CircuitNetwork
from MissionControl.circuit.types import (
    PROBED_CONNECTORS,
    CircuitConnectorId,
    SignalID,
    SignalTable,
    WireType,
)
from MissionControl.validation import is_valid, safe_attr

logger = logging.getLogger(__name__)


# =============================================================================
# ENTITY VALIDATION
# =============================================================================

def is_valid_circuit_entity(entity: Optional[CircuitEntity]) -> bool:
    """Check that an entity can be used for circuit operations.

    Args:
        entity: Entity to validate

    Returns:
        True if the entity is present, valid and has circuit connectors.
        An entity without connectors behaves exactly like an unwired one
        in every other query.
    """
    if not is_valid(entity):
        return False
    return callable(safe_attr(entity, "get_circuit_network"))


def _get_network(
    entity: CircuitEntity, wire_type: Any, connector_id: Any
) -> Optional[CircuitNetwork]:
    """Resolve the network on a wire/connector, None for unknown values or no wire."""
    wire = WireType.coerce(wire_type)
    connector = CircuitConnectorId.coerce(connector_id)
    if wire is None or connector is None:
        return None
    try:
        return entity.get_circuit_network(wire, connector)
    except Exception as e:
        logger.debug(f"get_circuit_network({wire.name}, {connector.name}) failed: {e}")
        return None


def _entry_parts(entry: Any):
    """Split a raw signal entry into (signal, count), from a mapping or an object."""
    if isinstance(entry, Mapping):
        return entry.get("signal"), entry.get("count")
    return safe_attr(entry, "signal"), safe_attr(entry, "count")


# =============================================================================
# SIGNAL READING
# =============================================================================

def get_circuit_signals(
    entity: Optional[CircuitEntity],
    wire_type: WireType,
    connector_id: CircuitConnectorId = CircuitConnectorId.COMBINATOR_INPUT,
) -> Optional[SignalTable]:
    """Read signals from one wire of an entity connector.

    Args:
        entity: Entity to read from
        wire_type: RED or GREEN
        connector_id: Which connector (default: combinator input)

    Returns:
        Signal table {signal_id: count}, or None if there is no network.

    Edge cases:
        - None if the entity is invalid or lacks connectors
        - None if no network is attached on that wire/connector (disconnected)
        - {} if a network is attached but carries nothing (connected but silent)
        - Raw entries without a usable signal or an integer count are skipped
    """
    if not is_valid_circuit_entity(entity):
        return None

    network = _get_network(entity, wire_type, connector_id)
    if network is None:
        return None

    signals = safe_attr(network, "signals")
    if signals is None:
        return {}

    try:
        entries = list(signals)
    except Exception as e:
        logger.debug(f"Reading network signals failed: {e}")
        return {}

    signal_table: SignalTable = {}
    for entry in entries:
        raw_signal, count = _entry_parts(entry)
        signal_id = SignalID.coerce(raw_signal)
        if signal_id is None or isinstance(count, bool) or not isinstance(count, int):
            logger.debug(f"Skipping malformed signal entry: {entry!r}")
            continue
        signal_table[signal_id] = count

    return signal_table


def get_merged_input_signals(entity: Optional[CircuitEntity]) -> SignalTable:
    """Get input signals from both red and green wires combined.

    Values of a signal present on both wires are summed.

    Args:
        entity: Entity to read from

    Returns:
        Merged signal table; empty (never None) if invalid or unwired.

    Example:
        Red wire:   iron=10, copper=20
        Green wire: iron=5, steel=15
        Result:     iron=15, copper=20, steel=15
    """
    if not is_valid_circuit_entity(entity):
        return {}

    red_signals = get_circuit_signals(
        entity, WireType.RED, CircuitConnectorId.COMBINATOR_INPUT
    ) or {}
    green_signals = get_circuit_signals(
        entity, WireType.GREEN, CircuitConnectorId.COMBINATOR_INPUT
    ) or {}

    merged: SignalTable = dict(red_signals)
    for signal_id, count in green_signals.items():
        merged[signal_id] = merged.get(signal_id, 0) + count

    return merged


# =============================================================================
# SIGNAL WRITING
# =============================================================================

def set_circuit_signals(
    entity: Optional[CircuitEntity],
    wire_type: WireType,
    signals: Mapping[SignalID, int],
) -> bool:
    """Write signals to an entity's circuit output.

    Entities in this mod output signals through their own behaviour and the
    network propagates them, so after validation this is deliberately a
    no-op that reports success. It is kept as the single entry point for
    relay output so callers do not reach into entity control behaviour.

    Args:
        entity: Entity to write to
        wire_type: RED or GREEN
        signals: Signal table {signal_id: count}, may be empty

    Returns:
        False if the entity is invalid or `signals` is not a mapping, else True.
    """
    if not is_valid_circuit_entity(entity):
        return False

    if not isinstance(signals, Mapping):
        return False

    # No-op: output is produced by the entity itself, not written here.
    logger.debug(f"set_circuit_signals on {wire_type!r} accepted, nothing written")
    return True


# =============================================================================
# CONNECTION STATUS
# =============================================================================

def has_circuit_connection(entity: Optional[CircuitEntity], wire_type: WireType) -> bool:
    """Check if an entity has a network on the given wire on any connector.

    Combinators, constant combinators, containers and inserters each expose
    their signals on a different connector, so all of them are probed rather
    than just the default input.

    Args:
        entity: Entity to check
        wire_type: RED or GREEN

    Returns:
        True if any probed connector has a network on that wire.
    """
    if not is_valid_circuit_entity(entity):
        return False

    for connector_id in PROBED_CONNECTORS:
        if _get_network(entity, wire_type, connector_id) is not None:
            return True

    return False


def has_any_circuit_connection(entity: Optional[CircuitEntity]) -> bool:
    """Check if an entity has any circuit connection (red or green)."""
    return (
        has_circuit_connection(entity, WireType.RED)
        or has_circuit_connection(entity, WireType.GREEN)
    )


# =============================================================================
# NETWORK ENTITY ENUMERATION
# =============================================================================

def get_connected_entities(circuit_network: Optional[CircuitNetwork]) -> List[Any]:
    """Get entities connected to a circuit network.

    A network handle cannot enumerate its endpoints, so this always returns
    an empty list after validating the handle. Membership has to be tracked
    by the caller from wire attach/detach events.

    Args:
        circuit_network: Network to scan

    Returns:
        Empty list
    """
    if not is_valid(circuit_network):
        return []

    if safe_attr(circuit_network, "connected_circuit_count", 0) == 0:
        return []

    return []


# =============================================================================
# UTILITY HELPERS
# =============================================================================

def get_signal_count(entity: Optional[CircuitEntity], wire_type: WireType) -> int:
    """Get the number of distinct signals on one wire (default connector).

    Returns:
        Count of unique signals, 0 if invalid or unwired
    """
    signals = get_circuit_signals(entity, wire_type)
    if not signals:
        return 0
    return len(signals)
