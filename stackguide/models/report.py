"""Detection run report and diagnostics."""

from enum import Enum

from pydantic import BaseModel, Field

from stackguide.models.context import DetectionResult


class DiagnosticKind(str, Enum):
    """Non-fatal conditions surfaced by a detection run."""

    DETECTION_FAULT = "detection_fault"
    GUIDELINE_FAULT = "guideline_fault"
    COMMAND_FAULT = "command_fault"
    EXCLUDED_MODULE = "excluded_module"
    EXCLUSION_CONFLICT = "exclusion_conflict"
    DUPLICATE_GUIDELINE = "duplicate_guideline"
    AMBIGUOUS_DOMINANT_LANGUAGE = "ambiguous_dominant_language"


class Diagnostic(BaseModel):
    """One recorded condition, attributed to a module where possible."""

    kind: DiagnosticKind
    module_id: str | None = None
    message: str
    related: list[str] = Field(default_factory=list)
    stage: str | None = None


class DetectionReport(BaseModel):
    """Per-run outcome of the detection engine.

    ``candidates`` are the detected modules that have not faulted, before
    exclusions; ``active`` is what remains of them once exclusions apply.
    ``versions`` covers every candidate, so a module can be reactivated
    without asking it again.
    """

    results: dict[str, DetectionResult] = Field(default_factory=dict)
    candidates: list[str] = Field(default_factory=list)
    active: list[str] = Field(default_factory=list)
    excluded: dict[str, list[str]] = Field(default_factory=dict)
    versions: dict[str, str] = Field(default_factory=dict)
    dominant_language: str | None = None
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    def faults(self) -> list[Diagnostic]:
        fault_kinds = {
            DiagnosticKind.DETECTION_FAULT,
            DiagnosticKind.GUIDELINE_FAULT,
            DiagnosticKind.COMMAND_FAULT,
        }
        return [d for d in self.diagnostics if d.kind in fault_kinds]
