"""Runner factory for the SOLID principle examples."""
import logging
import sys
from typing import Optional

import sentry_sdk

from solid_principles.application.services.example_runner import ExampleRunner
from solid_principles.config.settings import Config, get_config


def create_runner(config_class: Optional[type[Config]] = None) -> ExampleRunner:
    """
    Create and configure the example runner with dependency injection.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured ExampleRunner
    """
    config = config_class or get_config()

    # Configure logging FIRST (needed for all subsequent operations)
    _configure_logging(config)
    _logger = logging.getLogger(__name__)

    try:
        config.validate()
    except ValueError as e:
        _logger.warning(f"Configuration validation warning: {e}")

    _init_error_tracking(config)

    # Example modules must not load on package import (python -m runs them directly)
    from solid_principles.infrastructure.factories.example_factory import ExampleFactory
    from solid_principles.infrastructure.managers.example_registry import ExampleRegistry

    registry = ExampleRegistry()
    ExampleFactory.initialize_registry(registry)

    _logger.debug(f"Runner ready with examples: {[e.name for e in registry.list_examples()]}")
    return ExampleRunner(registry, enable_metrics=config.ENABLE_METRICS)


def _configure_logging(config: type[Config]) -> None:
    """Configure application logging."""
    level = config.get_log_level()
    if not isinstance(level, int):
        level = logging.WARNING

    # stdout carries only example output
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True  # Override any existing configuration
    )


def _init_error_tracking(config: type[Config]) -> None:
    """Initialize Sentry error tracking if a DSN is configured."""
    if not config.SENTRY_DSN:
        return

    sentry_sdk.init(
        dsn=config.SENTRY_DSN,
        traces_sample_rate=0.0,
        environment="development" if config.DEBUG else "production",
    )
    logging.getLogger(__name__).info("Sentry error tracking initialized")
