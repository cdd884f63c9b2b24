"""Guideline collection, de-duplication and ordering."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from stackguide.core.logger.logger import get_logger
from stackguide.models.module import GuidelineEntry, GuidelinePath
from stackguide.models.report import Diagnostic, DiagnosticKind

if TYPE_CHECKING:
    from stackguide.modules.base import BaseModule

StackSignature = tuple[tuple[str, str | None], ...]


class GuidelineCollection(BaseModel):
    """Ordered guideline list for one stack."""

    entries: list[GuidelineEntry] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    faulted_modules: list[str] = Field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [entry.path for entry in self.entries]


class GuidelineManager:
    """Merge the guideline documents of the active modules.

    Entries are de-duplicated by path (first emitter wins) and stably sorted
    by priority class, so the order within a class is module order followed by
    each module's own emission order. Results are cached per stack signature
    for the lifetime of the manager.
    """

    def __init__(self) -> None:
        self.logger = get_logger(self.__class__.__name__)
        self._cache: dict[StackSignature, GuidelineCollection] = {}

    def collect(
        self,
        modules: Sequence["BaseModule"],
        versions: dict[str, str] | None = None,
    ) -> GuidelineCollection:
        """Collect guidelines for the given active modules.

        Args:
            modules: Active modules in registration order.
            versions: Detected version per module id.

        Returns:
            De-duplicated, priority-ordered guideline collection.
        """
        versions = versions or {}
        signature: StackSignature = tuple((m.id, versions.get(m.id)) for m in modules)

        cached = self._cache.get(signature)
        if cached is not None:
            self.logger.debug(f"Guideline cache hit for {len(modules)} modules")
            return cached.model_copy(deep=True)

        collection = self._build(modules, versions)
        self._cache[signature] = collection
        return collection.model_copy(deep=True)

    def clear_cache(self) -> None:
        self._cache.clear()

    def _build(
        self,
        modules: Sequence["BaseModule"],
        versions: dict[str, str],
    ) -> GuidelineCollection:
        collection = GuidelineCollection()
        seen: dict[str, str] = {}
        entries: list[GuidelineEntry] = []

        for module in modules:
            try:
                paths = list(module.get_guideline_paths(versions.get(module.id)))
                if not all(isinstance(p, GuidelinePath) for p in paths):
                    raise TypeError("get_guideline_paths must return GuidelinePath values")
            except Exception as e:
                self.logger.warning(f"Guideline lookup failed for {module.id}: {e}")
                collection.faulted_modules.append(module.id)
                collection.diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.GUIDELINE_FAULT,
                        module_id=module.id,
                        message=str(e),
                        stage="guidelines",
                    )
                )
                continue

            for guideline in paths:
                owner = seen.get(guideline.path)
                if owner is not None:
                    self.logger.debug(
                        f"Dropping duplicate guideline {guideline.path} from {module.id}"
                    )
                    collection.diagnostics.append(
                        Diagnostic(
                            kind=DiagnosticKind.DUPLICATE_GUIDELINE,
                            module_id=module.id,
                            message=f"{guideline.path} already provided by {owner}",
                            related=[owner, guideline.path],
                            stage="guidelines",
                        )
                    )
                    continue
                seen[guideline.path] = module.id
                entries.append(GuidelineEntry.from_path(module.id, guideline))

        # sorted() is stable: ties keep module order, then emission order
        collection.entries = sorted(entries, key=lambda entry: entry.priority.rank)
        return collection
