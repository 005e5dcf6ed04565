"""Tests for the example registry and the Example entity."""
import pytest

from solid_principles.domain.entities.example import Example
from solid_principles.infrastructure.managers.example_registry import ExampleRegistry


def _noop():
    pass


def make_example(name="demo", aliases=()):
    return Example(
        name=name,
        principle="Demo Principle",
        summary="Demo summary",
        run=_noop,
        run_violation=_noop,
        aliases=aliases,
    )


class TestExample:
    def test_requires_name(self):
        with pytest.raises(ValueError):
            make_example(name="")

    def test_requires_callable_drivers(self):
        with pytest.raises(ValueError):
            Example(name="x", principle="X", summary="", run="nope", run_violation=_noop)

    def test_get_driver(self):
        def corrected():
            pass

        def violation():
            pass

        example = Example("x", "X", "", corrected, violation)

        assert example.get_driver("corrected") is corrected
        assert example.get_driver("violation") is violation

    def test_get_driver_unknown_variant(self):
        with pytest.raises(ValueError, match="Unknown variant"):
            make_example().get_driver("sideways")


class TestExampleRegistry:
    def test_lists_in_solid_order(self, registry):
        assert [e.name for e in registry.list_examples()] == ["srp", "ocp", "lsp", "isp", "dip"]

    @pytest.mark.parametrize("key,expected", [
        ("dip", "dip"),
        ("DIP", "dip"),
        ("dependency_inversion", "dip"),
        ("liskov-substitution", "lsp"),
        ("  isp ", "isp"),
        ("o", "ocp"),
        ("single_responsibility", "srp"),
    ])
    def test_lookup_by_name_or_alias(self, registry, key, expected):
        assert registry.get(key).name == expected

    def test_unknown_returns_none(self, registry):
        assert registry.get("yagni") is None
        assert registry.get("") is None

    def test_rejects_non_example(self):
        with pytest.raises(ValueError):
            ExampleRegistry().register(object())

    def test_duplicate_overwrites(self):
        registry = ExampleRegistry()
        first = make_example()
        second = make_example()

        registry.register(first)
        registry.register(second)

        assert len(registry) == 1
        assert registry.get("demo") is second

    def test_overwrite_drops_stale_aliases(self):
        registry = ExampleRegistry()
        registry.register(make_example(aliases=("old",)))
        replacement = make_example()

        registry.register(replacement)

        assert registry.get("old") is None
        assert registry.get("demo") is replacement

    def test_exact_name_wins_over_alias(self):
        registry = ExampleRegistry()
        first = make_example(name="first", aliases=("second",))
        second = make_example(name="second")

        registry.register(first)
        registry.register(second)

        assert registry.get("second") is second
        assert registry.get("first") is first
