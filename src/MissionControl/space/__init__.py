from .types import PlatformState, PlatformStatus, classify
from .protocols import (
    Surface,
    SpaceLocation,
    SpacePlatform,
    LuaEntityLike,
    PlatformRegistry,
)
from .queries import (
    is_platform_surface,
    get_platform_for_surface,
    get_platform_from_entity,
    get_platform_status,
    is_platform_stationary,
    get_orbited_surface,
    on_same_platform,
    get_platform_status_string,
)
from .evaluator import PlatformEvaluator

__all__ = [
    "PlatformState",
    "PlatformStatus",
    "classify",
    "Surface",
    "SpaceLocation",
    "SpacePlatform",
    "LuaEntityLike",
    "PlatformRegistry",
    "is_platform_surface",
    "get_platform_for_surface",
    "get_platform_from_entity",
    "get_platform_status",
    "is_platform_stationary",
    "get_orbited_surface",
    "on_same_platform",
    "get_platform_status_string",
    "PlatformEvaluator",
]
