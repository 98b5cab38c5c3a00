from dataclasses import dataclass
import enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from MissionControl.space.protocols import Surface


class PlatformState(enum.Enum):
    """Where a space platform is and whether it is moving.

    Derived fresh on every query from the platform's location, the location's
    surface and the platform's speed; never stored.
    """

    IN_TRANSIT = "in_transit"  # No space location: travelling between locations
    MOVING_NEAR_LOCATION = "moving_near_location"  # At a planet orbit but still accelerating/decelerating
    STATIONARY_AT_LOCATION = "stationary_at_location"  # At a planet orbit with zero speed
    DEEP_SPACE = "deep_space"  # At a location with no planet surface (e.g. solar system edge)


def classify(location_present: bool, speed: float, location_has_surface: bool) -> PlatformState:
    """Compute the platform state from its raw fields.

    | location | surface | speed | state                  |
    |----------|---------|-------|------------------------|
    | absent   | any     | any   | IN_TRANSIT             |
    | present  | absent  | any   | DEEP_SPACE             |
    | present  | present | == 0  | STATIONARY_AT_LOCATION |
    | present  | present | != 0  | MOVING_NEAR_LOCATION   |
    """
    if not location_present:
        return PlatformState.IN_TRANSIT
    if not location_has_surface:
        return PlatformState.DEEP_SPACE
    if speed == 0:
        return PlatformState.STATIONARY_AT_LOCATION
    return PlatformState.MOVING_NEAR_LOCATION


@dataclass(frozen=True)
class PlatformStatus:
    """Snapshot of a platform's state taken at query time.

    `at_rest` needs both a location and exactly zero speed, so a platform
    that has arrived but is still decelerating is not settled. A deep-space
    platform can be at rest, but it has no orbited surface and is never
    anchored.
    """

    state: PlatformState
    speed: float
    orbited_surface: Optional["Surface"] = None
    name: str = "Unnamed"
    unit_number: Optional[int] = None

    @property
    def has_location(self) -> bool:
        return self.state is not PlatformState.IN_TRANSIT

    @property
    def at_rest(self) -> bool:
        return self.has_location and self.speed == 0

    @property
    def is_anchored(self) -> bool:
        """At rest in orbit of a planet surface."""
        return self.state is PlatformState.STATIONARY_AT_LOCATION

    def describe(self) -> str:
        """Human-readable one-liner for logs."""
        if self.state is PlatformState.IN_TRANSIT:
            return f"Platform '{self.name}' in transit (speed: {self.speed:.2f})"
        if self.state is PlatformState.DEEP_SPACE:
            return f"Platform '{self.name}' in deep space (speed: {self.speed:.2f})"
        surface_name = getattr(self.orbited_surface, "name", None) or "unknown surface"
        verb = "stationary at" if self.is_anchored else "approaching"
        return f"Platform '{self.name}' {verb} {surface_name}"
