"""Tests for the detection engine."""

from stackguide.core.config.settings import DetectionSettings
from stackguide.engine.detection import DetectionEngine
from stackguide.engine.registry import ModuleRegistry
from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import ModuleKind, PriorityClass
from stackguide.models.report import DiagnosticKind
from stackguide.modules.base import BaseModule


def _run(modules, context, **settings):
    engine = DetectionEngine(ModuleRegistry(modules), DetectionSettings(**settings))
    return engine.run(context)


def _kinds(report):
    return [d.kind for d in report.diagnostics]


class TestDetectionRun:
    """Tests for a basic detection run."""

    def test_empty_registry(self, empty_context):
        """No modules means an empty report without faults."""
        report = _run([], empty_context)
        assert report.active == []
        assert report.results == {}
        assert report.dominant_language is None
        assert report.diagnostics == []

    def test_undetected_modules_are_inactive(self, stub_module, empty_context):
        """Only detected modules become active, in registration order."""
        report = _run(
            [stub_module("b"), stub_module("x", detected=False), stub_module("a")],
            empty_context,
        )
        assert report.active == ["b", "a"]
        assert set(report.results) == {"b", "x", "a"}
        assert report.results["x"].detected is False

    def test_every_module_is_detected_once(self, stub_module, empty_context):
        """detect is called exactly once per module, excluded ones included."""
        modules = [stub_module("a", excludes=("b",)), stub_module("b")]
        _run(modules, empty_context)
        assert [m.detect_calls for m in modules] == [1, 1]

    def test_versions_recorded_for_detected_modules(self, stub_module, empty_context):
        """Versions are collected only for detected modules."""
        report = _run(
            [
                stub_module("a", version="18"),
                stub_module("b", version=None),
                stub_module("c", detected=False, version="3"),
            ],
            empty_context,
        )
        assert report.versions == {"a": "18"}

    def test_deterministic(self, stub_module, empty_context):
        """Two runs over the same inputs give identical reports."""
        modules = [
            stub_module("a", excludes=("b",)),
            stub_module("b"),
            stub_module("c", kind=ModuleKind.LANGUAGE),
        ]
        registry = ModuleRegistry(modules)
        engine = DetectionEngine(registry)
        first = engine.run(empty_context)
        second = engine.run(empty_context)
        assert first.model_dump() == second.model_dump()


class TestExclusions:
    """Tests for exclusion resolution."""

    def test_one_directional_exclusion(self, stub_module, empty_context):
        """A excludes B: B is removed, A stays."""
        report = _run([stub_module("a", excludes=("b",)), stub_module("b")], empty_context)
        assert report.active == ["a"]
        assert report.excluded == {"b": ["a"]}
        assert DiagnosticKind.EXCLUDED_MODULE in _kinds(report)

    def test_exclusion_independent_of_registration_order(self, stub_module, empty_context):
        """The excluder wins wherever it is registered."""
        report = _run([stub_module("b"), stub_module("a", excludes=("b",))], empty_context)
        assert report.active == ["a"]

    def test_exclusion_of_undetected_module_is_noop(self, stub_module, empty_context):
        """Excluding a module that was not detected records nothing."""
        report = _run(
            [stub_module("a", excludes=("b",)), stub_module("b", detected=False)],
            empty_context,
        )
        assert report.active == ["a"]
        assert report.excluded == {}
        assert report.diagnostics == []

    def test_undetected_module_excludes_nothing(self, stub_module, empty_context):
        """A module with detected=False contributes no exclusions."""

        class LeakyModule(BaseModule):
            id = "leaky"

            def detect(self, context: DetectionContext) -> DetectionResult:
                return DetectionResult(detected=False, excludes=["b"])

        report = _run([LeakyModule(), stub_module("b")], empty_context)
        assert report.active == ["b"]

    def test_self_exclusion_ignored(self, stub_module, empty_context):
        """A module naming itself in excludes stays active."""
        report = _run([stub_module("a", excludes=("a",))], empty_context)
        assert report.active == ["a"]
        assert report.excluded == {}

    def test_excluded_module_exclusions_still_apply(self, stub_module, empty_context):
        """Exclusions are computed from detection results, not from survivors."""
        report = _run(
            [
                stub_module("a", excludes=("b",)),
                stub_module("b", excludes=("c",)),
                stub_module("c"),
            ],
            empty_context,
        )
        assert report.active == ["a"]
        assert report.excluded == {"b": ["a"], "c": ["b"]}

    def test_multiple_excluders_recorded(self, stub_module, empty_context):
        """Every excluder of a module is listed."""
        report = _run(
            [
                stub_module("a", excludes=("c",)),
                stub_module("b", excludes=("c",)),
                stub_module("c"),
            ],
            empty_context,
        )
        assert report.excluded == {"c": ["a", "b"]}

    def test_mutual_exclusion_keeps_lower_priority_rank(self, stub_module, empty_context):
        """The module with the lower priority rank wins a mutual exclusion."""
        report = _run(
            [
                stub_module("tool", excludes=("meta",), priority=PriorityClass.TOOL),
                stub_module("meta", excludes=("tool",), priority=PriorityClass.META_FRAMEWORK),
            ],
            empty_context,
        )
        assert report.active == ["meta"]
        conflicts = [d for d in report.diagnostics if d.kind == DiagnosticKind.EXCLUSION_CONFLICT]
        assert len(conflicts) == 1
        assert conflicts[0].module_id == "meta"
        assert conflicts[0].related == ["tool"]

    def test_mutual_exclusion_same_rank_keeps_first_registered(self, stub_module, empty_context):
        """Equal ranks fall back to registration order."""
        report = _run(
            [stub_module("a", excludes=("b",)), stub_module("b", excludes=("a",))],
            empty_context,
        )
        assert report.active == ["a"]
        assert report.excluded == {"b": ["a"]}
        assert DiagnosticKind.EXCLUSION_CONFLICT in _kinds(report)

    def test_declared_supersedes_apply(self, empty_context):
        """Class-level supersedes feed the exclusion list when detected."""

        class Winner(BaseModule):
            id = "winner"
            supersedes = ("loser",)

            def detect(self, context: DetectionContext) -> DetectionResult:
                return self._result(1.0, ["found"], threshold=0.5)

        class Loser(BaseModule):
            id = "loser"

            def detect(self, context: DetectionContext) -> DetectionResult:
                return self._result(1.0, ["found"], threshold=0.5)

        report = _run([Loser(), Winner()], empty_context)
        assert report.active == ["winner"]


class TestFaultIsolation:
    """Tests for fault handling."""

    def test_detect_fault_isolated(self, stub_module, empty_context):
        """A module whose detect raises is inactive; others are unaffected."""
        report = _run([stub_module("bad", fail_on="detect"), stub_module("good")], empty_context)
        assert report.active == ["good"]
        assert report.results["bad"].detected is False
        faults = report.faults()
        assert [f.module_id for f in faults] == ["bad"]
        assert faults[0].kind == DiagnosticKind.DETECTION_FAULT
        assert faults[0].stage == "detect"

    def test_faulted_module_exclusions_ignored(self, stub_module, empty_context):
        """A faulted module contributes no exclusions."""
        report = _run(
            [stub_module("bad", excludes=("good",), fail_on="detect"), stub_module("good")],
            empty_context,
        )
        assert report.active == ["good"]

    def test_version_fault_removes_module(self, stub_module, empty_context):
        """A module whose detect_version raises is not active."""
        report = _run([stub_module("bad", fail_on="version"), stub_module("good")], empty_context)
        assert report.active == ["good"]
        assert report.faults()[0].stage == "detect_version"

    def test_version_fault_voids_exclusions(self, stub_module, empty_context):
        """A module that faults on its version excludes nothing."""
        report = _run(
            [stub_module("a", excludes=("b",), fail_on="version"), stub_module("b")],
            empty_context,
        )
        assert report.active == ["b"]
        assert report.candidates == ["b"]
        assert report.excluded == {}
        assert DiagnosticKind.EXCLUDED_MODULE not in _kinds(report)

    def test_excluded_module_version_kept(self, stub_module, empty_context):
        """Excluded modules still have their version read."""
        report = _run(
            [stub_module("a", excludes=("b",)), stub_module("b", version="3")],
            empty_context,
        )
        assert report.active == ["a"]
        assert report.versions == {"b": "3"}


class TestWithdraw:
    """Tests for withdrawing modules after a run."""

    def test_withdrawn_excluder_releases_target(self, stub_module, empty_context):
        """Withdrawing an excluder reactivates what it excluded."""
        registry = ModuleRegistry(
            [stub_module("a", excludes=("b",), version="1"), stub_module("b", version="2")]
        )
        engine = DetectionEngine(registry)
        report = engine.run(empty_context)
        assert report.active == ["a"]

        engine.withdraw(report, ["a"])
        assert report.active == ["b"]
        assert report.excluded == {}
        assert report.versions == {"b": "2"}
        assert DiagnosticKind.EXCLUDED_MODULE not in _kinds(report)

    def test_withdraw_keeps_faults(self, stub_module, empty_context):
        """Earlier fault diagnostics survive a withdrawal."""
        registry = ModuleRegistry(
            [stub_module("bad", fail_on="detect"), stub_module("a"), stub_module("b")]
        )
        engine = DetectionEngine(registry)
        report = engine.run(empty_context)
        engine.withdraw(report, ["a"])
        assert report.active == ["b"]
        assert [f.module_id for f in report.faults()] == ["bad"]

    def test_withdraw_recomputes_dominant_language(self, stub_module, empty_context):
        """The dominant language is picked again from what remains."""
        registry = ModuleRegistry(
            [
                stub_module("js", kind=ModuleKind.LANGUAGE, confidence=0.5),
                stub_module("php", kind=ModuleKind.LANGUAGE, confidence=0.9),
            ]
        )
        engine = DetectionEngine(registry)
        report = engine.run(empty_context)
        assert report.dominant_language == "php"

        engine.withdraw(report, ["php"])
        assert report.dominant_language == "js"

    def test_withdraw_nothing_is_noop(self, stub_module, empty_context):
        registry = ModuleRegistry([stub_module("a", excludes=("b",)), stub_module("b")])
        engine = DetectionEngine(registry)
        report = engine.run(empty_context)
        before = report.model_dump()
        engine.withdraw(report, [])
        assert report.model_dump() == before

    def test_wrong_return_type_is_fault(self, empty_context):
        """Returning something other than a DetectionResult is a fault."""

        class BrokenModule(BaseModule):
            id = "broken"

            def detect(self, context: DetectionContext) -> DetectionResult:
                return {"detected": True}  # type: ignore[return-value]

        report = _run([BrokenModule()], empty_context)
        assert report.active == []
        assert "expected DetectionResult" in report.faults()[0].message


class TestDominantLanguage:
    """Tests for dominant language selection."""

    def test_highest_confidence_wins(self, stub_module, empty_context):
        """The language with the highest confidence is dominant."""
        report = _run(
            [
                stub_module("js", kind=ModuleKind.LANGUAGE, confidence=0.5,
                            priority=PriorityClass.BASE_LANG),
                stub_module("php", kind=ModuleKind.LANGUAGE, confidence=0.9,
                            priority=PriorityClass.SPECIALIZED_LANG),
            ],
            empty_context,
        )
        assert report.dominant_language == "php"
        assert DiagnosticKind.AMBIGUOUS_DOMINANT_LANGUAGE not in _kinds(report)

    def test_tie_goes_to_higher_rank(self, stub_module, empty_context):
        """Equal confidence prefers the more specialized class."""
        report = _run(
            [
                stub_module("js", kind=ModuleKind.LANGUAGE, confidence=0.8,
                            priority=PriorityClass.BASE_LANG),
                stub_module("ts", kind=ModuleKind.LANGUAGE, confidence=0.8,
                            priority=PriorityClass.SPECIALIZED_LANG),
            ],
            empty_context,
        )
        assert report.dominant_language == "ts"

    def test_tie_same_rank_goes_to_first_registered(self, stub_module, empty_context):
        """Full ties fall back to registration order."""
        report = _run(
            [
                stub_module("ts", kind=ModuleKind.LANGUAGE, confidence=0.8),
                stub_module("php", kind=ModuleKind.LANGUAGE, confidence=0.8),
            ],
            empty_context,
        )
        assert report.dominant_language == "ts"

    def test_close_confidences_are_reported(self, stub_module, empty_context):
        """A runner-up within the margin is surfaced as a diagnostic."""
        report = _run(
            [
                stub_module("js", kind=ModuleKind.LANGUAGE, confidence=0.85),
                stub_module("php", kind=ModuleKind.LANGUAGE, confidence=0.9),
            ],
            empty_context,
            ambiguity_margin=0.1,
        )
        assert report.dominant_language == "php"
        ambiguous = [
            d for d in report.diagnostics
            if d.kind == DiagnosticKind.AMBIGUOUS_DOMINANT_LANGUAGE
        ]
        assert ambiguous[0].related == ["js"]

    def test_non_language_modules_ignored(self, stub_module, empty_context):
        """Frameworks never become the dominant language."""
        report = _run([stub_module("react", confidence=1.0)], empty_context)
        assert report.dominant_language is None
