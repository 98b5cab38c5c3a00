"""Host-side space interfaces for structural subtyping.

Platforms, space locations, surfaces and entities all belong to the host
simulation. These protocols list the attributes the space queries read.
References can become invalid at any time, which is why each carries `valid`.

Relationships:
- Surface.platform -> the SpacePlatform whose hull this surface is (None on planets)
- SpacePlatform.space_location -> current SpaceLocation (None while in transit)
- SpaceLocation.surface -> the orbited planet Surface (None for non-planet locations)
"""

from typing import Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class Surface(Protocol):
    """A game surface. Compared by `index`, never by object identity."""

    valid: bool
    index: int
    name: str

    @property
    def platform(self) -> Optional["SpacePlatform"]:
        ...


@runtime_checkable
class SpaceLocation(Protocol):
    """A place a platform can park at: a planet orbit or open space."""

    @property
    def surface(self) -> Optional[Surface]:
        ...


@runtime_checkable
class SpacePlatform(Protocol):
    """A movable platform. `unit_number` is its stable identity."""

    valid: bool
    unit_number: int
    name: str
    speed: float

    @property
    def space_location(self) -> Optional[SpaceLocation]:
        ...


@runtime_checkable
class LuaEntityLike(Protocol):
    """Any entity; only its validity and surface are used."""

    valid: bool

    @property
    def surface(self) -> Optional[Surface]:
        ...


@runtime_checkable
class PlatformRegistry(Protocol):
    """Live registry of every platform, owned by the host.

    Must be re-read on each call; entries may be invalid.
    """

    def get(self, unit_number: int) -> Optional[SpacePlatform]:
        """Resolve a platform by its unit_number, None if unknown."""
        ...

    def __iter__(self) -> Iterator[SpacePlatform]:
        ...
