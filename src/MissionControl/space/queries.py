"""Pure space platform queries.

Platform detection, orbit status and platform relationships. Nothing here
stores platform state or touches the platform registry (see
`MissionControl.space.evaluator` for the registry-bound checks), so every
function is safe to call from anywhere.

Every function validates its input and returns False / None instead of
raising; a destroyed platform or entity is a normal input.
"""

import logging
import math
from numbers import Real
from typing import Optional

from MissionControl.space.protocols import LuaEntityLike, SpacePlatform, Surface
from MissionControl.space.types import PlatformStatus, classify
from MissionControl.validation import is_valid, safe_attr

logger = logging.getLogger(__name__)


# =============================================================================
# PLATFORM DETECTION
# =============================================================================

def is_platform_surface(surface: Optional[Surface]) -> bool:
    """Check if a surface is a space platform.

    Returns:
        False for planet surfaces, invalid surfaces and None
    """
    if not is_valid(surface):
        return False
    return safe_attr(surface, "platform") is not None


def get_platform_for_surface(surface: Optional[Surface]) -> Optional[SpacePlatform]:
    """Get the platform object from its surface, None for non-platform surfaces."""
    if not is_valid(surface):
        return None
    return safe_attr(surface, "platform")


def get_platform_from_entity(entity: Optional[LuaEntityLike]) -> Optional[SpacePlatform]:
    """Get the platform an entity stands on.

    Returns:
        Platform, or None if the entity is invalid or not on a platform surface
    """
    if not is_valid(entity):
        return None
    return get_platform_for_surface(safe_attr(entity, "surface"))


# =============================================================================
# ORBIT STATUS
# =============================================================================

def _read_speed(platform: SpacePlatform) -> float:
    speed = safe_attr(platform, "speed")
    if isinstance(speed, bool) or not isinstance(speed, Real):
        # Unknown speed never counts as stopped
        return math.nan
    return float(speed)


def get_platform_status(platform: Optional[SpacePlatform]) -> Optional[PlatformStatus]:
    """Snapshot a platform's state for the predicates below.

    Args:
        platform: Platform to inspect

    Returns:
        PlatformStatus, or None if the platform is absent or invalid
    """
    if not is_valid(platform):
        return None

    location = safe_attr(platform, "space_location")
    orbited = safe_attr(location, "surface")
    if not is_valid(orbited):
        orbited = None

    speed = _read_speed(platform)
    return PlatformStatus(
        state=classify(
            location_present=location is not None,
            speed=speed,
            location_has_surface=orbited is not None,
        ),
        speed=speed,
        orbited_surface=orbited,
        name=safe_attr(platform, "name") or "Unnamed",
        unit_number=safe_attr(platform, "unit_number"),
    )


def is_platform_stationary(platform: Optional[SpacePlatform]) -> bool:
    """Check if a platform is parked at a location with zero speed.

    Both conditions are required: a platform that has reached a location
    but is still decelerating is not stationary, and neither is one in
    transit that happens to report zero speed.

    Returns:
        False if the platform is invalid, in transit or moving
    """
    status = get_platform_status(platform)
    if status is None:
        return False
    return status.at_rest


def get_orbited_surface(platform: Optional[SpacePlatform]) -> Optional[Surface]:
    """Get the planet surface a platform is orbiting.

    Speed is not considered here; use is_platform_stationary as well, or
    PlatformEvaluator.is_platform_orbiting for the combined check.

    Returns:
        Orbited surface, or None if the platform is invalid, in transit,
        or at a location without a planet (deep space, asteroid fields)
    """
    status = get_platform_status(platform)
    if status is None:
        return None
    return status.orbited_surface


# =============================================================================
# RELATIONSHIP QUERIES
# =============================================================================

def on_same_platform(entity_a: Optional[LuaEntityLike], entity_b: Optional[LuaEntityLike]) -> bool:
    """Check if two entities are on the same platform.

    Platforms are compared by unit_number: two lookups of the same platform
    may return different objects.

    Returns:
        False if either entity is invalid or not on a platform
    """
    if not is_valid(entity_a) or not is_valid(entity_b):
        return False

    platform_a = get_platform_from_entity(entity_a)
    platform_b = get_platform_from_entity(entity_b)
    if platform_a is None or platform_b is None:
        return False

    unit_a = safe_attr(platform_a, "unit_number")
    unit_b = safe_attr(platform_b, "unit_number")
    if unit_a is None or unit_b is None:
        return False
    return unit_a == unit_b


# =============================================================================
# DEBUGGING
# =============================================================================

def get_platform_status_string(platform: Optional[SpacePlatform]) -> str:
    """Get a human-readable platform status, for logs only.

    Example output:
        "Platform 'Alpha' stationary at nauvis"
        "Platform 'Beta' in transit (speed: 1.50)"
    """
    status = get_platform_status(platform)
    if status is None:
        return "Invalid platform"
    return status.describe()
