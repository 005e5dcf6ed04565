"""Utility helpers shared by the examples."""
from solid_principles.utils.number_format import format_number

__all__ = ["format_number"]
