"""
Pytest configuration for Mission Control tests.

This configuration provides:
- An in-memory host simulation (fresh per test)
- Surfaces and space locations for a small solar system
- A PlatformEvaluator bound to the host's platform registry
- Wired and unwired circuit entities
"""

import pytest

from MissionControl.circuit import WireType
from MissionControl.space import PlatformEvaluator
from MissionControl.testing import HostSimulation


# ============================================================================
# Host Fixtures
# ============================================================================

@pytest.fixture
def host() -> HostSimulation:
    """Fresh host simulation for each test."""
    return HostSimulation()


@pytest.fixture
def nauvis(host: HostSimulation):
    return host.create_surface("nauvis")


@pytest.fixture
def vulcanus(host: HostSimulation):
    return host.create_surface("vulcanus")


@pytest.fixture
def nauvis_orbit(host: HostSimulation, nauvis):
    return host.create_location("nauvis", nauvis)


@pytest.fixture
def vulcanus_orbit(host: HostSimulation, vulcanus):
    return host.create_location("vulcanus", vulcanus)


@pytest.fixture
def solar_system_edge(host: HostSimulation):
    """A location with no planet surface."""
    return host.create_location("solar-system-edge")


@pytest.fixture
def evaluator(host: HostSimulation) -> PlatformEvaluator:
    return PlatformEvaluator(host.platforms)


# ============================================================================
# Circuit Fixtures
# ============================================================================

@pytest.fixture
def combinator(host: HostSimulation, nauvis):
    """Unwired circuit-capable entity on nauvis."""
    return host.create_entity(nauvis, name="transmitter-combinator")


@pytest.fixture
def wired_combinator(host: HostSimulation, combinator):
    """Combinator from the merge example: red iron/copper, green iron/steel."""
    host.wire(combinator, WireType.RED, {"iron-plate": 10, "copper-plate": 20})
    host.wire(combinator, WireType.GREEN, {"iron-plate": 5, "steel-plate": 15})
    return combinator


@pytest.fixture
def chest(host: HostSimulation, nauvis):
    """Entity without circuit connectors."""
    return host.create_plain_entity(nauvis)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "circuit: marks tests of the circuit signal queries"
    )
    config.addinivalue_line(
        "markers", "space: marks tests of the space platform queries"
    )
