"""Application services."""
from solid_principles.application.services.example_runner import ExampleRunner

__all__ = ["ExampleRunner"]
