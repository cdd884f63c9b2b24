"""Pytest configuration and shared fixtures."""

import json
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generator

import pytest

from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import GuidelineCategory, ModuleKind, PriorityClass
from stackguide.modules.base import BaseModule


class StubModule(BaseModule):
    """Configurable module for engine tests.

    Detection, version and guideline behaviour are instance attributes so a
    test can build any combination without writing a class.
    """

    def __init__(
        self,
        module_id: str,
        detected: bool = True,
        confidence: float = 0.9,
        excludes: tuple[str, ...] = (),
        priority: PriorityClass = PriorityClass.FRAMEWORK,
        kind: ModuleKind = ModuleKind.FRAMEWORK,
        guidelines: tuple[str, ...] | None = None,
        version: str | None = None,
        supported_versions: tuple[str, ...] = (),
        runtime: str | None = None,
        commands: dict[str, list[str]] | None = None,
        fail_on: str | None = None,
    ) -> None:
        super().__init__()
        self.id = module_id
        self.name = module_id.title()
        self.kind = kind
        self.priority = priority
        self.supported_versions = supported_versions
        self.runtime = runtime
        paths = guidelines if guidelines is not None else (f"{module_id}/guidelines/main.md",)
        self.guideline_files = tuple((p, GuidelineCategory.FRAMEWORK) for p in paths)
        self._detected = detected
        self._confidence = confidence
        self._excludes = list(excludes)
        self._version = version
        self._commands = commands or {}
        self.fail_on = fail_on
        self.detect_calls = 0

    def detect(self, context: DetectionContext) -> DetectionResult:
        self.detect_calls += 1
        if self.fail_on == "detect":
            raise RuntimeError(f"{self.id} detect exploded")
        if not self._detected:
            return DetectionResult.not_detected()
        return DetectionResult(
            detected=True,
            confidence=self._confidence,
            evidence=[f"{self.id} evidence"],
            excludes=list(self._excludes),
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        if self.fail_on == "version":
            raise RuntimeError(f"{self.id} version exploded")
        return self._version

    def get_guideline_paths(self, version: str | None = None):
        if self.fail_on == "guidelines":
            raise RuntimeError(f"{self.id} guidelines exploded")
        return super().get_guideline_paths(version)

    def generate_commands(self, context):
        from stackguide.models.stack import StackCommands

        if self.fail_on == "commands":
            raise RuntimeError(f"{self.id} commands exploded")
        return StackCommands(**self._commands)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def make_context() -> Callable[..., DetectionContext]:
    """Factory for detection contexts rooted at a dummy path."""

    def _make(**fields: Any) -> DetectionContext:
        fields.setdefault("project_root", Path("/project"))
        for key in ("config_files", "directories", "env_keys"):
            if key in fields:
                fields[key] = frozenset(fields[key])
        if "files" in fields:
            fields["files"] = tuple(fields["files"])
        return DetectionContext(**fields)

    return _make


@pytest.fixture
def empty_context(make_context: Callable[..., DetectionContext]) -> DetectionContext:
    return make_context()


@pytest.fixture
def stub_module() -> Callable[..., StubModule]:
    """Factory for configurable stub modules."""
    return StubModule


@pytest.fixture
def write_project(temp_dir: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a project tree into the temporary directory.

    Values that are dicts or lists are written as JSON, strings as text.
    """

    def _write(files: dict[str, Any]) -> Path:
        for relative, content in files.items():
            path = temp_dir / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, (dict, list)):
                path.write_text(json.dumps(content), encoding="utf-8")
            else:
                path.write_text(content, encoding="utf-8")
        return temp_dir

    return _write
