"""Tests for guideline collection and ordering."""

import itertools

import pytest

from stackguide.engine.guidelines import GuidelineManager
from stackguide.models.module import PriorityClass
from stackguide.models.report import DiagnosticKind


class TestGuidelineManager:
    """Tests for GuidelineManager.collect."""

    def test_empty(self):
        """No modules gives no guidelines."""
        collection = GuidelineManager().collect([])
        assert collection.entries == []
        assert collection.diagnostics == []

    def test_entries_carry_module_id(self, stub_module):
        """Each entry names the module that emitted it."""
        collection = GuidelineManager().collect([stub_module("react")])
        assert collection.paths == ["react/guidelines/main.md"]
        assert collection.entries[0].module_id == "react"
        assert collection.entries[0].priority == PriorityClass.FRAMEWORK

    def test_duplicates_dropped_first_registered_wins(self, stub_module):
        """A shared path is kept once, attributed to the first module."""
        modules = [
            stub_module("a", guidelines=("shared.md", "a.md")),
            stub_module("b", guidelines=("b.md", "shared.md")),
        ]
        collection = GuidelineManager().collect(modules)

        assert collection.paths == ["shared.md", "a.md", "b.md"]
        shared = [e for e in collection.entries if e.path == "shared.md"]
        assert [e.module_id for e in shared] == ["a"]
        duplicates = [
            d for d in collection.diagnostics if d.kind == DiagnosticKind.DUPLICATE_GUIDELINE
        ]
        assert duplicates[0].module_id == "b"
        assert duplicates[0].related[0] == "a"

    def test_ordered_by_priority_then_module_order(self, stub_module):
        """Entries are sorted by class; ties keep module then emission order."""
        modules = [
            stub_module("tool", priority=PriorityClass.TOOL, guidelines=("t1.md", "t2.md")),
            stub_module("fw1", priority=PriorityClass.FRAMEWORK, guidelines=("f1.md",)),
            stub_module("lang", priority=PriorityClass.BASE_LANG, guidelines=("l.md",)),
            stub_module("fw2", priority=PriorityClass.FRAMEWORK, guidelines=("f2.md",)),
        ]
        collection = GuidelineManager().collect(modules)
        assert collection.paths == ["l.md", "f1.md", "f2.md", "t1.md", "t2.md"]

    @pytest.mark.parametrize(
        "low,high",
        [pair for pair in itertools.combinations(list(PriorityClass), 2)],
    )
    def test_every_priority_pair_ordered(self, stub_module, low, high):
        """For every pair of classes the lower rank comes first."""
        modules = [
            stub_module("high", priority=high, guidelines=("high.md",)),
            stub_module("low", priority=low, guidelines=("low.md",)),
        ]
        collection = GuidelineManager().collect(modules)
        assert collection.paths == ["low.md", "high.md"]

    def test_version_variant_added(self, stub_module):
        """A supported major adds the features document."""
        module = stub_module("react", guidelines=("react/guidelines/framework.md",),
                             supported_versions=("18.x",))
        collection = GuidelineManager().collect([module], {"react": "18"})
        assert collection.paths == [
            "react/guidelines/framework.md",
            "react/guidelines/18/features.md",
        ]

    def test_guideline_fault_isolated(self, stub_module):
        """A module that fails to list guidelines is reported, others still emit."""
        collection = GuidelineManager().collect(
            [stub_module("bad", fail_on="guidelines"), stub_module("good")]
        )
        assert collection.paths == ["good/guidelines/main.md"]
        assert collection.faulted_modules == ["bad"]
        assert collection.diagnostics[0].kind == DiagnosticKind.GUIDELINE_FAULT


class TestGuidelineCache:
    """Tests for per-signature caching."""

    def test_cached_result_reused(self, stub_module, monkeypatch):
        """Same modules and versions do not rebuild."""
        manager = GuidelineManager()
        modules = [stub_module("a")]
        manager.collect(modules, {"a": "1"})

        def _fail(*args, **kwargs):
            raise AssertionError("cache miss")

        monkeypatch.setattr(manager, "_build", _fail)
        assert manager.collect(modules, {"a": "1"}).paths == ["a/guidelines/main.md"]

    def test_version_change_is_cache_miss(self, stub_module):
        """A different version yields a different collection."""
        manager = GuidelineManager()
        module = stub_module("react", guidelines=("base.md",), supported_versions=("17.x", "18.x"))
        assert manager.collect([module], {"react": "17"}).paths[-1] == "react/guidelines/17/features.md"
        assert manager.collect([module], {"react": "18"}).paths[-1] == "react/guidelines/18/features.md"

    def test_returned_collection_is_a_copy(self, stub_module):
        """Mutating a result does not corrupt the cache."""
        manager = GuidelineManager()
        modules = [stub_module("a")]
        first = manager.collect(modules)
        first.entries.clear()
        assert manager.collect(modules).paths == ["a/guidelines/main.md"]

    def test_clear_cache(self, stub_module):
        """clear_cache forces a rebuild."""
        manager = GuidelineManager()
        manager.collect([stub_module("a")])
        manager.clear_cache()
        assert manager._cache == {}
