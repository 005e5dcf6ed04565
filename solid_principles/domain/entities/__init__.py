"""Domain entities."""
from solid_principles.domain.entities.example import Example, VARIANTS

__all__ = ["Example", "VARIANTS"]
