"""Detection input snapshot and per-module detection result."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

NPM_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")
COMPOSER_DEPENDENCY_SECTIONS = ("require", "require-dev")


class DetectionContext(BaseModel):
    """Immutable snapshot of the shallow project metadata detectors read.

    Every module receives the same instance during a run. Paths are project
    relative and use forward slashes.
    """

    model_config = ConfigDict(frozen=True)

    project_root: Path
    config_files: frozenset[str] = Field(default_factory=frozenset)
    files: tuple[str, ...] = Field(default_factory=tuple)
    directories: frozenset[str] = Field(default_factory=frozenset)
    package_json: dict[str, Any] | None = None
    composer_json: dict[str, Any] | None = None
    package_lock: dict[str, Any] | None = None
    composer_lock: dict[str, Any] | None = None
    text_files: dict[str, str] = Field(default_factory=dict)
    env_keys: frozenset[str] = Field(default_factory=frozenset)

    # npm manifest

    def npm_section(self, section: str) -> dict[str, Any]:
        """Return one section of package.json as a dict (empty when absent)."""
        if not self.package_json:
            return {}
        value = self.package_json.get(section)
        return value if isinstance(value, dict) else {}

    def dependency_spec(self, name: str) -> str | None:
        """Return the declared npm version spec, runtime dependencies first."""
        for section in NPM_DEPENDENCY_SECTIONS:
            spec = self.npm_section(section).get(name)
            if spec is not None:
                return str(spec)
        return None

    def has_dependency(self, name: str, section: str | None = None) -> bool:
        if section is not None:
            return name in self.npm_section(section)
        return self.dependency_spec(name) is not None

    def npm_dependency_names(self) -> list[str]:
        names: list[str] = []
        for section in NPM_DEPENDENCY_SECTIONS:
            names.extend(n for n in self.npm_section(section) if n not in names)
        return names

    def scripts(self) -> dict[str, str]:
        return {k: str(v) for k, v in self.npm_section("scripts").items()}

    # composer manifest

    def composer_section(self, section: str) -> dict[str, Any]:
        """Return one section of composer.json as a dict (empty when absent)."""
        if not self.composer_json:
            return {}
        value = self.composer_json.get(section)
        return value if isinstance(value, dict) else {}

    def composer_spec(self, name: str) -> str | None:
        for section in COMPOSER_DEPENDENCY_SECTIONS:
            spec = self.composer_section(section).get(name)
            if spec is not None:
                return str(spec)
        return None

    def has_composer_package(self, name: str, section: str | None = None) -> bool:
        if section is not None:
            return name in self.composer_section(section)
        return self.composer_spec(name) is not None

    def composer_package_names(self) -> list[str]:
        names: list[str] = []
        for section in COMPOSER_DEPENDENCY_SECTIONS:
            names.extend(n for n in self.composer_section(section) if n not in names)
        return names

    # file listing

    def has_config(self, name: str) -> bool:
        return name in self.config_files

    def has_file(self, path: str) -> bool:
        return path in self.config_files or path in self.files

    def has_dir(self, path: str) -> bool:
        """True when ``path`` was walked or any sampled file lives below it."""
        path = path.rstrip("/")
        if path in self.directories:
            return True
        prefix = f"{path}/"
        return any(f.startswith(prefix) for f in self.files)

    def files_under(self, path: str) -> list[str]:
        prefix = f"{path.rstrip('/')}/"
        return [f for f in self.files if f.startswith(prefix)]

    def files_with_suffix(self, *suffixes: str) -> list[str]:
        return [f for f in self.files if f.endswith(suffixes)]

    def text(self, path: str) -> str | None:
        """Return the captured content of a small text file, if any."""
        return self.text_files.get(path)


class DetectionResult(BaseModel):
    """Outcome of one module's detection against a context."""

    detected: bool = False
    confidence: float = 0.0
    evidence: list[str] = Field(default_factory=list)
    excludes: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, v: float) -> float:
        """Clamp to [0, 1] and round so threshold checks are stable."""
        return round(min(max(float(v), 0.0), 1.0), 2)

    @classmethod
    def not_detected(cls, *evidence: str, **metadata: Any) -> "DetectionResult":
        return cls(detected=False, confidence=0.0, evidence=list(evidence), metadata=metadata)
