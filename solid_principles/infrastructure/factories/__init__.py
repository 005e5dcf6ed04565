"""Factories (Factory Pattern)."""
from solid_principles.infrastructure.factories.example_factory import ExampleFactory

__all__ = ["ExampleFactory"]
