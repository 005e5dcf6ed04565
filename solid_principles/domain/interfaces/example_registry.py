"""Interface for example registries (Registry Pattern).

Keeps the runner and the CLI independent of how examples are stored.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from solid_principles.domain.entities.example import Example


class IExampleRegistry(ABC):
    """
    Interface for example registries following Registry Pattern.

    Manages registration and lookup of principle examples.
    """

    @abstractmethod
    def register(self, example: Example) -> None:
        """
        Register an example.

        Args:
            example: Example instance

        Raises:
            ValueError: If example is invalid
        """
        pass

    @abstractmethod
    def get(self, name: str) -> Optional[Example]:
        """
        Get an example by name or alias.

        Args:
            name: Example name or alias (case-insensitive)

        Returns:
            Example if found, None otherwise
        """
        pass

    @abstractmethod
    def list_examples(self) -> List[Example]:
        """
        Get all registered examples.

        Returns:
            Examples in registration order
        """
        pass
