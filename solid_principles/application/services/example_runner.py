"""Service for running principle examples."""
import logging
from typing import Iterable, List, Optional

from solid_principles.domain.entities.example import CORRECTED, Example
from solid_principles.domain.interfaces.example_registry import IExampleRegistry
from solid_principles.infrastructure.monitoring import track_example_run


logger = logging.getLogger(__name__)


class ExampleRunner:
    """
    Runs example drivers looked up through a registry.

    Depends on ``IExampleRegistry`` only, so any registry implementation can
    be injected.
    """

    def __init__(self, registry: IExampleRegistry, enable_metrics: bool = True):
        """
        Initialize runner with dependencies (Dependency Injection).

        Args:
            registry: Example registry
            enable_metrics: Whether to record run metrics
        """
        self.registry = registry
        self.enable_metrics = enable_metrics

    def resolve(self, name: str) -> Example:
        """
        Resolve an example by name or alias.

        Args:
            name: Example name or alias

        Returns:
            Example instance

        Raises:
            ValueError: If no example matches
        """
        example = self.registry.get(name)
        if example is None:
            available = ", ".join(e.name for e in self.registry.list_examples())
            raise ValueError(f"Unknown example: {name}. Available: {available}")
        return example

    def run(self, name: str, variant: str = CORRECTED) -> Example:
        """
        Run one example.

        Args:
            name: Example name or alias
            variant: "corrected" or "violation"

        Returns:
            The example that ran

        Raises:
            ValueError: If the example or variant is unknown
        """
        example = self.resolve(name)
        driver = example.get_driver(variant)

        logger.info(f"Running {example.name} ({variant})")
        driver()
        track_example_run(example.name, variant, enabled=self.enable_metrics)
        return example

    def run_all(self, variant: str = CORRECTED, names: Optional[Iterable[str]] = None) -> List[Example]:
        """
        Run several examples, each under a principle header.

        Args:
            variant: "corrected" or "violation"
            names: Example names to run (all registered examples if omitted)

        Returns:
            Examples that ran, in order
        """
        if names is None:
            examples = self.registry.list_examples()
        else:
            examples = [self.resolve(name) for name in names]

        # Validate the variant before printing anything
        for example in examples:
            example.get_driver(variant)

        ran = []
        for example in examples:
            print(f"=== {example.principle} ===")
            ran.append(self.run(example.name, variant))
        return ran
