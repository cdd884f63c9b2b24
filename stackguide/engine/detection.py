"""Detection engine: runs every module and resolves exclusions."""

from typing import TYPE_CHECKING

from stackguide.core.config.settings import DetectionSettings
from stackguide.core.exceptions.errors import ModuleContractError
from stackguide.core.logger.logger import get_logger
from stackguide.engine.registry import ModuleRegistry
from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import ModuleKind
from stackguide.models.report import DetectionReport, Diagnostic, DiagnosticKind

if TYPE_CHECKING:
    from stackguide.modules.base import BaseModule

# Diagnostics recomputed whenever the candidate set changes
SETTLE_STAGES = ("exclusion", "dominant_language")


class DetectionEngine:
    """Run all registered modules against one context.

    A run detects every module, drops the undetected ones, asks the rest for
    their version, then applies the exclusions declared by the modules still
    standing. A module that raises is recorded as a fault and treated as not
    detected; it never aborts the run.
    """

    def __init__(
        self,
        registry: ModuleRegistry,
        settings: DetectionSettings | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            registry: Modules to run, in registration order.
            settings: Detection settings. Defaults are used if not provided.
        """
        self.registry = registry
        self.settings = settings or DetectionSettings()
        self.logger = get_logger(self.__class__.__name__)

    def run(self, context: DetectionContext) -> DetectionReport:
        """Detect the stack described by ``context``.

        Args:
            context: Immutable project snapshot shared by all modules.

        Returns:
            Report with every result, the active modules and diagnostics.
        """
        report = DetectionReport()
        modules = list(self.registry.get_all())

        # Every module is detected before any exclusion is applied
        for module in modules:
            report.results[module.id] = self._detect_module(module, context, report)

        detected = [m.id for m in modules if report.results[m.id].detected]

        # Versions are read before exclusions: a module that faults here is not
        # active, so its exclusions must not apply either
        report.candidates = [
            module_id for module_id in detected if self._detect_version(module_id, context, report)
        ]
        self._settle(report)

        self.logger.info(
            f"Detection finished: {len(report.active)} active of {len(modules)} modules "
            f"({len(report.excluded)} excluded, {len(report.faults())} faults)"
        )
        return report

    def withdraw(self, report: DetectionReport, module_ids: list[str]) -> None:
        """Deactivate modules that faulted after the run.

        The withdrawn modules stop being candidates, so their exclusions are
        void: exclusions are resolved again and the modules they excluded
        become active again. The fault itself is recorded by the caller.

        Args:
            report: Report returned by ``run``, updated in place.
            module_ids: Modules to withdraw.
        """
        withdrawn = set(module_ids)
        if not withdrawn:
            return

        self.logger.debug(f"Withdrawing {', '.join(sorted(withdrawn))}")
        report.candidates = [m for m in report.candidates if m not in withdrawn]
        for module_id in withdrawn:
            report.versions.pop(module_id, None)
        report.diagnostics = [d for d in report.diagnostics if d.stage not in SETTLE_STAGES]
        self._settle(report)

    def _settle(self, report: DetectionReport) -> None:
        report.excluded = self._resolve_exclusions(report.candidates, report)
        report.active = [m for m in report.candidates if m not in report.excluded]
        report.dominant_language = self.dominant_language(report)

    def _detect_version(
        self,
        module_id: str,
        context: DetectionContext,
        report: DetectionReport,
    ) -> bool:
        module = self.registry.get(module_id)
        try:
            version = module.detect_version(context)
            if version is not None and not isinstance(version, str):
                raise ModuleContractError(
                    f"detect_version returned {type(version).__name__}, expected str",
                    module_id=module_id,
                    operation="detect_version",
                )
        except Exception as e:
            self.logger.warning(f"Version detection failed for {module_id}: {e}")
            report.diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.DETECTION_FAULT,
                    module_id=module_id,
                    message=str(e),
                    stage="detect_version",
                )
            )
            return False
        if version:
            report.versions[module_id] = version
        return True

    def _detect_module(
        self,
        module: "BaseModule",
        context: DetectionContext,
        report: DetectionReport,
    ) -> DetectionResult:
        try:
            result = module.detect(context)
            if not isinstance(result, DetectionResult):
                raise ModuleContractError(
                    f"detect returned {type(result).__name__}, expected DetectionResult",
                    module_id=module.id,
                    operation="detect",
                )
            return result
        except Exception as e:
            self.logger.warning(f"Detection failed for {module.id}: {e}")
            report.diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.DETECTION_FAULT,
                    module_id=module.id,
                    message=str(e),
                    stage="detect",
                )
            )
            return DetectionResult.not_detected(f"Detection failed: {e}", fault=True)

    def _resolve_exclusions(
        self,
        detected: list[str],
        report: DetectionReport,
    ) -> dict[str, list[str]]:
        """Compute which detected modules are excluded, and by whom.

        Exclusions are one-directional as declared. A pair that excludes each
        other keeps the module with the lower priority rank (then the earlier
        registration) and records a conflict.

        Returns:
            Excluded module id mapped to its excluders, in registration order.
        """
        detected_set = set(detected)
        claims: dict[str, list[str]] = {}

        for module_id in detected:
            targets: list[str] = []
            for target in report.results[module_id].excludes:
                if target == module_id:
                    self.logger.debug(f"Ignoring self-exclusion declared by {module_id}")
                    continue
                if target in detected_set and target not in targets:
                    targets.append(target)
            claims[module_id] = targets

        for index, first in enumerate(detected):
            for second in detected[index + 1:]:
                if second in claims[first] and first in claims[second]:
                    winner, loser = self._break_tie(first, second)
                    claims[loser].remove(winner)
                    message = (
                        f"{first} and {second} exclude each other; keeping {winner}"
                    )
                    self.logger.warning(message)
                    report.diagnostics.append(
                        Diagnostic(
                            kind=DiagnosticKind.EXCLUSION_CONFLICT,
                            module_id=winner,
                            message=message,
                            related=[loser],
                            stage="exclusion",
                        )
                    )

        excluded: dict[str, list[str]] = {}
        for excluder in detected:
            for target in claims[excluder]:
                excluded.setdefault(target, []).append(excluder)

        for target in detected:
            if target not in excluded:
                continue
            excluders = excluded[target]
            self.logger.debug(f"Excluding {target} (excluded by {', '.join(excluders)})")
            report.diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.EXCLUDED_MODULE,
                    module_id=target,
                    message=f"{target} excluded by {', '.join(excluders)}",
                    related=list(excluders),
                    stage="exclusion",
                )
            )

        return {target: excluded[target] for target in detected if target in excluded}

    def _break_tie(self, first: str, second: str) -> tuple[str, str]:
        """Return (winner, loser) for two modules that exclude each other."""

        def key(module_id: str) -> tuple[int, int]:
            module = self.registry.get(module_id)
            return (module.priority.rank, self.registry.index_of(module_id))

        if key(first) <= key(second):
            return first, second
        return second, first

    def dominant_language(self, report: DetectionReport) -> str | None:
        """Pick the active language with the highest confidence.

        Ties go to the more specialized priority class, then to registration
        order. A runner-up within the ambiguity margin is reported.

        This runs opposite to the exclusion tie-break. Among the language
        classes the later one (specialized-lang) is the more specific, whereas
        for exclusions the earlier class (meta-framework before framework) is
        the one that subsumes the other.
        """
        candidates = []
        for index, module_id in enumerate(report.active):
            module = self.registry.get(module_id)
            if module.kind != ModuleKind.LANGUAGE:
                continue
            confidence = report.results[module_id].confidence
            candidates.append((-confidence, -module.priority.rank, index, module_id))

        if not candidates:
            return None

        candidates.sort()
        dominant = candidates[0][3]

        if len(candidates) > 1:
            gap = round(candidates[1][0] - candidates[0][0], 2)
            if gap <= self.settings.ambiguity_margin:
                runner_up = candidates[1][3]
                report.diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.AMBIGUOUS_DOMINANT_LANGUAGE,
                        module_id=dominant,
                        message=(
                            f"{dominant} chosen over {runner_up} "
                            f"(confidence gap {gap:.2f})"
                        ),
                        related=[runner_up],
                        stage="dominant_language",
                    )
                )
        return dominant
