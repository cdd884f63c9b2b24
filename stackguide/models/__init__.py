"""Data models for stackguide."""

from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import (
    GuidelineCategory,
    GuidelineEntry,
    GuidelinePath,
    ModuleKind,
    ModuleMetadata,
    PriorityClass,
)
from stackguide.models.report import DetectionReport, Diagnostic, DiagnosticKind
from stackguide.models.stack import ModuleContext, Stack, StackCommands, StackDescription

__all__ = [
    "DetectionContext",
    "DetectionResult",
    "DetectionReport",
    "Diagnostic",
    "DiagnosticKind",
    "GuidelineCategory",
    "GuidelineEntry",
    "GuidelinePath",
    "ModuleContext",
    "ModuleKind",
    "ModuleMetadata",
    "PriorityClass",
    "Stack",
    "StackCommands",
    "StackDescription",
]
