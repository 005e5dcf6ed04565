import pytest

from solid_principles import create_runner
from solid_principles.config.settings import TestingConfig
from solid_principles.infrastructure.factories.example_factory import ExampleFactory
from solid_principles.infrastructure.managers.example_registry import ExampleRegistry


@pytest.fixture
def registry():
    """Registry populated with every example."""
    registry = ExampleRegistry()
    ExampleFactory.initialize_registry(registry)
    return registry


@pytest.fixture
def runner():
    """Runner built through the application factory with testing config."""
    return create_runner(TestingConfig)


@pytest.fixture
def testing_env(monkeypatch):
    """Select the testing configuration through the environment."""
    monkeypatch.setenv("APP_ENV", "testing")
