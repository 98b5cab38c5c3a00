"""Registry-bound platform checks.

The relay controller keeps only platform unit_numbers between ticks (object
references do not survive a save/load), so these checks resolve the platform
from the live registry on every call. The registry is injected rather than
reached as a global, which lets tests hand in a fabricated one.
"""

import logging
from typing import List, Optional

from MissionControl.space import queries
from MissionControl.space.protocols import LuaEntityLike, PlatformRegistry, SpacePlatform, Surface
from MissionControl.space.types import PlatformStatus
from MissionControl.validation import is_valid, safe_attr

logger = logging.getLogger(__name__)


class PlatformEvaluator:
    """Answer relay eligibility questions against a live platform registry.

    Example:
        >>> evaluator = PlatformEvaluator(game.space_platforms)
        >>> if evaluator.is_platform_orbiting(receiver_platform_id, nauvis.index):
        ...     relay.activate()
    """

    def __init__(self, registry: PlatformRegistry):
        """
        Initialize evaluator.

        Args:
            registry: Read-only handle on the host's platform registry
        """
        self.registry = registry

    def _resolve(self, platform_id: int) -> Optional[SpacePlatform]:
        try:
            platform = self.registry.get(platform_id)
        except Exception as e:
            logger.debug(f"Platform registry lookup for {platform_id} failed: {e}")
            return None
        if not is_valid(platform):
            return None
        return platform

    def get_platform(self, platform_id: Optional[int]) -> Optional[SpacePlatform]:
        """Resolve a valid platform by unit_number, None if gone."""
        if platform_id is None:
            return None
        return self._resolve(platform_id)

    def is_platform_orbiting(self, platform_id: Optional[int], surface_index: Optional[int]) -> bool:
        """Check if a platform is orbiting a specific surface AND is stationary.

        This is the check for receiver connection eligibility. Orbit and
        stationary are combined so a receiver on a platform that is still
        approaching its target never activates early.

        Args:
            platform_id: Platform unit_number
            surface_index: Target surface index to match

        Returns:
            False if the platform is gone, travelling, decelerating, in deep
            space or orbiting a different surface
        """
        if platform_id is None or surface_index is None:
            return False

        status = self.get_platform_status(platform_id)
        if status is None:
            logger.debug(f"Platform {platform_id} not found; relay gated off")
            return False

        if not status.at_rest or status.orbited_surface is None:
            logger.debug(f"Platform {platform_id} not anchored ({status.state.value}); relay gated off")
            return False

        anchored = safe_attr(status.orbited_surface, "index") == surface_index
        logger.debug(f"Platform {platform_id} anchored at surface {surface_index}: {anchored}")
        return anchored

    def get_platform_status(self, platform_id: Optional[int]) -> Optional[PlatformStatus]:
        """Status snapshot of a platform looked up by unit_number."""
        return queries.get_platform_status(self.get_platform(platform_id))

    def find_all_platforms(self) -> List[SpacePlatform]:
        """Find all valid platforms, in registry order.

        Returns:
            List of platforms (may be empty); invalid entries are dropped
        """
        try:
            entries = list(self.registry)
        except Exception as e:
            logger.debug(f"Platform registry enumeration failed: {e}")
            return []
        return [platform for platform in entries if is_valid(platform)]

    # Pure queries, exposed here so callers need a single handle

    def is_platform_surface(self, surface: Optional[Surface]) -> bool:
        return queries.is_platform_surface(surface)

    def get_platform_for_surface(self, surface: Optional[Surface]) -> Optional[SpacePlatform]:
        return queries.get_platform_for_surface(surface)

    def get_platform_from_entity(self, entity: Optional[LuaEntityLike]) -> Optional[SpacePlatform]:
        return queries.get_platform_from_entity(entity)

    def is_platform_stationary(self, platform: Optional[SpacePlatform]) -> bool:
        return queries.is_platform_stationary(platform)

    def get_orbited_surface(self, platform: Optional[SpacePlatform]) -> Optional[Surface]:
        return queries.get_orbited_surface(platform)

    def on_same_platform(self, entity_a: Optional[LuaEntityLike], entity_b: Optional[LuaEntityLike]) -> bool:
        return queries.on_same_platform(entity_a, entity_b)

    def get_platform_status_string(self, platform: Optional[SpacePlatform]) -> str:
        return queries.get_platform_status_string(platform)
