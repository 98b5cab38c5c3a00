from dataclasses import dataclass
import enum
from typing import Any, Dict, Mapping, Optional

from MissionControl.validation import safe_attr


class WireType(enum.Enum):
    """Circuit wire colour.

    Usually specified by using [defines.wire_type](runtime:defines.wire_type).
    Red and green wires form independent networks on the same connector.
    """

    RED = 1
    GREEN = 2

    @classmethod
    def coerce(cls, value: Any) -> Optional["WireType"]:
        """Accept a member or its raw value; anything else gives None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


class CircuitConnectorId(enum.Enum):
    """Connector slot on an entity.

    Usually specified by using [defines.circuit_connector_id](runtime:defines.circuit_connector_id).
    Combinators expose separate input and output slots; most other entities
    only have a single slot of their own kind.
    """

    COMBINATOR_INPUT = 1
    COMBINATOR_OUTPUT = 2
    CONSTANT_COMBINATOR = 3
    CONTAINER = 4
    INSERTER = 5

    @classmethod
    def coerce(cls, value: Any) -> Optional["CircuitConnectorId"]:
        """Accept a member or its raw value; anything else gives None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


# Slots probed by has_circuit_connection, in probe order
PROBED_CONNECTORS = (
    CircuitConnectorId.COMBINATOR_INPUT,
    CircuitConnectorId.COMBINATOR_OUTPUT,
    CircuitConnectorId.CONSTANT_COMBINATOR,
    CircuitConnectorId.CONTAINER,
    CircuitConnectorId.INSERTER,
)


@dataclass(frozen=True)
class SignalID:
    """Identifier of a circuit signal.

    Two ids with the same type and name are the same signal, so SignalID can
    be used directly as a dictionary key in signal tables.
    """

    type: str
    name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SignalID":
        """Create SignalID from {"type": ..., "name": ...}.

        A missing type defaults to "item", matching the game's convention.
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("SignalID expects a non-empty string 'name'")
        signal_type = data.get("type") or "item"
        if not isinstance(signal_type, str):
            raise ValueError("SignalID expects a string 'type'")
        return cls(type=signal_type, name=name)

    @classmethod
    def coerce(cls, value: Any) -> Optional["SignalID"]:
        """Convert a SignalID, a mapping or an object with type/name attributes.

        Returns None for anything that does not describe a signal.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            try:
                return cls.from_dict(value)
            except ValueError:
                return None
        name = safe_attr(value, "name")
        signal_type = safe_attr(value, "type") or "item"
        if isinstance(name, str) and name and isinstance(signal_type, str):
            return cls(type=signal_type, name=name)
        return None

    def __str__(self) -> str:
        return f"{self.type}/{self.name}"


# {signal_id: count}
SignalTable = Dict[SignalID, int]
