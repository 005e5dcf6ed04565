"""SOLID principle examples.

Each module is self-contained and exposes ``main`` (corrected design) and
``violation_main`` (design that breaks the principle).
"""
