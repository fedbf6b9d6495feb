import pytest

from martian_robots.entities.scents import DEFAULT_REGISTRY, LossRegistry


@pytest.fixture(autouse=True)
def clean_default_registry():
    """Robots created without a registry share the process-wide one; wipe it around every test."""
    DEFAULT_REGISTRY.reset()
    yield
    DEFAULT_REGISTRY.reset()


@pytest.fixture
def registry():
    return LossRegistry()
