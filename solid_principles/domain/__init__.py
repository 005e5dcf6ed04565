"""Domain layer - example entities and registry interfaces.

This layer contains:
- The Example entity describing one runnable principle demo
- The registry interface the runner depends on
"""
