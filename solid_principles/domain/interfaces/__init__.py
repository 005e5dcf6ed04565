"""Domain interfaces following Dependency Inversion Principle."""

from solid_principles.domain.interfaces.example_registry import IExampleRegistry

__all__ = [
    "IExampleRegistry",
]
