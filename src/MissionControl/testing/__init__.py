from .host import (
    HostSimulation,
    HostSurface,
    HostSpaceLocation,
    HostPlatform,
    HostCircuitNetwork,
    HostEntity,
    HostPlainEntity,
    PlatformTable,
)

__all__ = [
    "HostSimulation",
    "HostSurface",
    "HostSpaceLocation",
    "HostPlatform",
    "HostCircuitNetwork",
    "HostEntity",
    "HostPlainEntity",
    "PlatformTable",
]
