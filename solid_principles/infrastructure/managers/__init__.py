"""Registry implementations."""
from solid_principles.infrastructure.managers.example_registry import ExampleRegistry

__all__ = ["ExampleRegistry"]
