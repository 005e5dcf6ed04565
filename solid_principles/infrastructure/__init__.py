"""Infrastructure layer - registry, factories and monitoring."""
