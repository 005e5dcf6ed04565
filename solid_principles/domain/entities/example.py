"""Example domain entity."""
from dataclasses import dataclass, field
from typing import Callable, Tuple


CORRECTED = "corrected"
VIOLATION = "violation"
VARIANTS = (CORRECTED, VIOLATION)


@dataclass(frozen=True)
class Example:
    """Domain entity representing one runnable principle example."""

    name: str  # e.g., "srp", "dip"
    principle: str  # e.g., "Single Responsibility Principle"
    summary: str
    run: Callable[[], None]
    run_violation: Callable[[], None]
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate example entity."""
        if not self.name:
            raise ValueError("name is required")
        if not self.principle:
            raise ValueError("principle is required")
        if not callable(self.run):
            raise ValueError("run must be callable")
        if not callable(self.run_violation):
            raise ValueError("run_violation must be callable")

    def get_driver(self, variant: str = CORRECTED) -> Callable[[], None]:
        """
        Get the driver for a variant.

        Args:
            variant: "corrected" or "violation"

        Returns:
            Driver callable

        Raises:
            ValueError: If variant is unknown
        """
        if variant == CORRECTED:
            return self.run
        if variant == VIOLATION:
            return self.run_violation
        raise ValueError(f"Unknown variant: {variant}. Expected one of: {', '.join(VARIANTS)}")
