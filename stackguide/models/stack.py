"""Aggregated stack description models."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from stackguide.models.context import DetectionResult
from stackguide.models.module import GuidelineEntry
from stackguide.models.report import DetectionReport, Diagnostic

COMMAND_GROUPS = ("dev", "build", "test", "lint", "install")


class StackCommands(BaseModel):
    """Suggested commands, grouped by purpose."""

    dev: list[str] = Field(default_factory=list)
    build: list[str] = Field(default_factory=list)
    test: list[str] = Field(default_factory=list)
    lint: list[str] = Field(default_factory=list)
    install: list[str] = Field(default_factory=list)

    def extend(self, other: "StackCommands") -> None:
        """Append ``other``'s commands group by group; repeats are kept."""
        for group in COMMAND_GROUPS:
            current: list[str] = getattr(self, group)
            current.extend(getattr(other, group))

    def is_empty(self) -> bool:
        return not any(getattr(self, group) for group in COMMAND_GROUPS)


class Stack(BaseModel):
    """What was found in the project, in registration order."""

    model_config = ConfigDict(frozen=True)

    runtime: str = "generic"
    languages: list[str] = Field(default_factory=list)
    frameworks: list[str] = Field(default_factory=list)
    libraries: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    config_files: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    package_managers: list[str] = Field(default_factory=list)
    commands: StackCommands = Field(default_factory=StackCommands)
    versions: dict[str, str] = Field(default_factory=dict)


class ModuleContext(BaseModel):
    """Input of a module's command generation."""

    model_config = ConfigDict(frozen=True)

    project_root: Path
    stack: Stack
    detection_result: DetectionResult
    version: str | None = None
    package_manager: str | None = None

    @property
    def js_package_manager(self) -> str:
        """The JS package manager to put in front of ``run``/``install``."""
        return self.package_manager or "npm"

    def has_framework(self, name: str) -> bool:
        return name in self.stack.frameworks


class StackDescription(BaseModel):
    """Full result of describing a project."""

    stack: Stack
    guidelines: list[GuidelineEntry] = Field(default_factory=list)
    report: DetectionReport
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def active_modules(self) -> list[str]:
        return list(self.report.active)

    @property
    def guideline_paths(self) -> list[str]:
        return [g.path for g in self.guidelines]

    def to_dict(self) -> dict[str, Any]:
        """JSON friendly view used by ``stackguide detect --json``."""
        return {
            "stack": self.stack.model_dump(mode="json"),
            "modules": [
                {
                    "id": module_id,
                    "confidence": self.report.results[module_id].confidence,
                    "version": self.report.versions.get(module_id),
                    "evidence": self.report.results[module_id].evidence,
                }
                for module_id in self.report.active
            ],
            "guidelines": [g.model_dump(mode="json") for g in self.guidelines],
            "excluded": {k: list(v) for k, v in self.report.excluded.items()},
            "diagnostics": [d.model_dump(mode="json") for d in self.diagnostics],
        }
