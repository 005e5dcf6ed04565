"""Example registry implementation (Registry Pattern).

Stores principle examples and resolves them by name or alias.
"""
import logging
from typing import Dict, List, Optional

from solid_principles.domain.entities.example import Example
from solid_principles.domain.interfaces.example_registry import IExampleRegistry


logger = logging.getLogger(__name__)


class ExampleRegistry(IExampleRegistry):
    """
    Implementation of example registry following Registry Pattern.

    Lookup is case-insensitive and accepts an example's name or any of its
    aliases. Listing preserves registration order.
    """

    def __init__(self):
        """Initialize registry with empty storage."""
        self._examples: Dict[str, Example] = {}
        self._aliases: Dict[str, str] = {}
        self._logger = logging.getLogger(__name__)

    def register(self, example: Example) -> None:
        """
        Register an example under its name and aliases.

        Args:
            example: Example instance

        Raises:
            ValueError: If example is not an Example
        """
        if not isinstance(example, Example):
            raise ValueError("example must be an Example instance")

        name = example.name.lower()

        if name in self._examples:
            self._logger.warning(
                f"Example '{name}' already registered. Overwriting."
            )
            self._aliases = {
                alias: target for alias, target in self._aliases.items() if target != name
            }

        self._examples[name] = example
        for alias in example.aliases:
            self._aliases[alias.lower()] = name

        self._logger.debug(
            f"Registered example '{name}' ({example.principle}) "
            f"with aliases {list(example.aliases)}"
        )

    def get(self, name: str) -> Optional[Example]:
        """Get an example by name or alias."""
        if not name:
            return None
        key = name.strip().lower()
        if key in self._examples:
            return self._examples[key]
        return self._examples.get(self._aliases.get(key, ""))

    def list_examples(self) -> List[Example]:
        """Get all registered examples in registration order."""
        return list(self._examples.values())

    def __len__(self) -> int:
        return len(self._examples)
