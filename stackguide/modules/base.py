"""Base class for technology modules."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from stackguide.core.logger.logger import get_logger
from stackguide.core.utils.versions import composer_version_info, major_version, npm_version_info
from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import (
    GuidelineCategory,
    GuidelinePath,
    ModuleKind,
    ModuleMetadata,
    PriorityClass,
)
from stackguide.models.stack import ModuleContext, StackCommands


class BaseModule(ABC):
    """Base class for all technology modules.

    A module answers three questions about a project: is the technology
    present (``detect``), which version (``detect_version``), and which
    guideline documents and commands belong to it. Modules hold no state
    between calls; every answer is a return value.
    """

    id: ClassVar[str] = ""
    name: ClassVar[str] = ""
    kind: ClassVar[ModuleKind] = ModuleKind.LIBRARY
    priority: ClassVar[PriorityClass] = PriorityClass.TOOL
    description: ClassVar[str] = ""
    homepage: ClassVar[str | None] = None
    keywords: ClassVar[tuple[str, ...]] = ()

    # Known version-specific guideline variants, e.g. "18.x" or "8.2"
    supported_versions: ClassVar[tuple[str, ...]] = ()
    # Module ids this module replaces when it is detected
    supersedes: ClassVar[tuple[str, ...]] = ()
    # Base guideline documents, relative to the guideline root
    guideline_files: ClassVar[tuple[tuple[str, GuidelineCategory], ...]] = ()
    # Category used for the version-specific document
    features_category: ClassVar[GuidelineCategory | None] = None

    supported_extensions: ClassVar[tuple[str, ...]] = ()
    config_files: ClassVar[tuple[str, ...]] = ()
    # Runtime implied by a language module
    runtime: ClassVar[str | None] = None

    def __init__(self) -> None:
        """Initialize the module."""
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def detect(self, context: DetectionContext) -> DetectionResult:
        """Score the presence of this technology.

        Args:
            context: Shared project snapshot.

        Returns:
            Detection result with confidence and evidence.
        """
        pass

    def detect_version(self, context: DetectionContext) -> str | None:
        """Return the detected version, or None when unknown."""
        return None

    def version_variant(self, version: str | None) -> str | None:
        """Map a detected version to a known guideline variant.

        Exact entries ("8.2", "ES2020") match first, then "<major>.x" entries.
        """
        if not version:
            return None
        if version in self.supported_versions:
            return version
        major = major_version(version)
        if major is not None and f"{major}.x" in self.supported_versions:
            return str(major)
        return None

    def get_guideline_paths(self, version: str | None = None) -> list[GuidelinePath]:
        """Return the guideline documents for this module.

        The base documents are always returned. A version-specific
        ``<id>/guidelines/<variant>/features.md`` is appended only for a
        known variant.

        Args:
            version: Version returned by ``detect_version``.

        Returns:
            Guideline paths in emission order.
        """
        paths = [
            GuidelinePath(path=path, priority=self.priority, category=category, version=version)
            for path, category in self.guideline_files
        ]

        variant = self.version_variant(version)
        if variant is not None:
            category = self.features_category or (
                self.guideline_files[0][1] if self.guideline_files else GuidelineCategory.FEATURE
            )
            paths.append(
                GuidelinePath(
                    path=f"{self.id}/guidelines/{variant}/features.md",
                    priority=self.priority,
                    category=category,
                    version=variant,
                )
            )
        return paths

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        """Suggest commands for the aggregated stack. Default: none."""
        return StackCommands()

    def get_supported_extensions(self) -> list[str]:
        return list(self.supported_extensions)

    def get_config_files(self) -> list[str]:
        return list(self.config_files)

    def get_metadata(self, version: str | None = None) -> ModuleMetadata:
        return ModuleMetadata(
            id=self.id,
            name=self.name,
            kind=self.kind,
            priority=self.priority,
            description=self.description,
            version=version,
            homepage=self.homepage,
            keywords=list(self.keywords),
            supported_versions=list(self.supported_versions),
            supported_extensions=self.get_supported_extensions(),
            config_files=self.get_config_files(),
        )

    def _result(
        self,
        confidence: float,
        evidence: list[str],
        threshold: float,
        inclusive: bool = True,
        required: bool = True,
        excludes: list[str] | None = None,
        **metadata: Any,
    ) -> DetectionResult:
        """Build a result from an accumulated score.

        Declared ``supersedes`` are added to ``excludes`` only when detected.

        Args:
            confidence: Accumulated score, capped at 1.0.
            evidence: Evidence lines in the order they were found.
            threshold: Minimum score for detection.
            inclusive: Whether a score equal to ``threshold`` is detected.
            required: Anchor condition; the module is never detected without it.
            excludes: Extra exclusions on top of ``supersedes``.
            metadata: Diagnostic facts to attach.
        """
        confidence = round(min(max(confidence, 0.0), 1.0), 2)
        detected = confidence >= threshold if inclusive else confidence > threshold
        detected = detected and required

        excluded: list[str] = []
        if detected:
            for module_id in (*self.supersedes, *(excludes or [])):
                if module_id not in excluded:
                    excluded.append(module_id)

        return DetectionResult(
            detected=detected,
            confidence=confidence,
            evidence=evidence,
            excludes=excluded,
            metadata=metadata,
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id!r}>"


def npm_major(context: DetectionContext, package: str) -> str | None:
    """Effective major version of an npm package, as a string."""
    info = npm_version_info(package, context)
    if info is None or info.major is None:
        return None
    return str(info.major)


def composer_major(context: DetectionContext, package: str) -> str | None:
    """Effective major version of a composer package, as a string."""
    info = composer_version_info(package, context)
    if info is None or info.major is None:
        return None
    return str(info.major)


def scaled(count: int, step: float, cap: float) -> float:
    """Score contribution of ``count`` matches: ``count * step`` capped at ``cap``."""
    return min(count * step, cap)
