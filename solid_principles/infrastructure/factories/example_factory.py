"""Factory for registering the principle examples (Factory Pattern).

Registers one Example per SOLID principle, in SOLID order.
"""
import logging
from typing import List

from solid_principles.domain.entities.example import Example
from solid_principles.domain.interfaces.example_registry import IExampleRegistry
from solid_principles.examples import (
    dependency_inversion,
    interface_segregation,
    liskov_substitution,
    open_closed,
    single_responsibility,
)


logger = logging.getLogger(__name__)


class ExampleFactory:
    """
    Factory for building and registering principle examples.

    Adding a new example is a new entry in ``create_examples``.
    """

    @staticmethod
    def create_examples() -> List[Example]:
        """
        Create the example entities.

        Returns:
            Examples in SOLID order
        """
        return [
            Example(
                name="srp",
                principle="Single Responsibility Principle",
                summary="Salary calculation and persistence live in separate classes.",
                run=single_responsibility.main,
                run_violation=single_responsibility.violation_main,
                aliases=("single_responsibility", "single-responsibility", "s"),
            ),
            Example(
                name="ocp",
                principle="Open/Closed Principle",
                summary="New shapes extend Shape without touching print_area.",
                run=open_closed.main,
                run_violation=open_closed.violation_main,
                aliases=("open_closed", "open-closed", "o"),
            ),
            Example(
                name="lsp",
                principle="Liskov Substitution Principle",
                summary="Any Bird subtype works through the same driver.",
                run=liskov_substitution.main,
                run_violation=liskov_substitution.violation_main,
                aliases=("liskov_substitution", "liskov-substitution", "l"),
            ),
            Example(
                name="isp",
                principle="Interface Segregation Principle",
                summary="Robots implement IWork only, never IEat.",
                run=interface_segregation.main,
                run_violation=interface_segregation.violation_main,
                aliases=("interface_segregation", "interface-segregation", "i"),
            ),
            Example(
                name="dip",
                principle="Dependency Inversion Principle",
                summary="ReportGenerator depends on IDataSaver, not on a concrete saver.",
                run=dependency_inversion.main,
                run_violation=dependency_inversion.violation_main,
                aliases=("dependency_inversion", "dependency-inversion", "d"),
            ),
        ]

    @staticmethod
    def initialize_registry(registry: IExampleRegistry) -> None:
        """
        Register all examples.

        Args:
            registry: Registry to register examples with
        """
        examples = ExampleFactory.create_examples()
        for example in examples:
            registry.register(example)

        logger.info(f"Example registry initialized with {len(examples)} examples")
