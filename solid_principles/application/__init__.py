"""Application layer - running examples."""
