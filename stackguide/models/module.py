"""Module classification and guideline models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ModuleKind(str, Enum):
    """What a module describes."""

    LANGUAGE = "language"
    FRAMEWORK = "framework"
    LIBRARY = "library"
    TOOL = "tool"


class PriorityClass(str, Enum):
    """Closed, totally ordered rendering class of a guideline.

    Declaration order is the rank: lower ranks are rendered first.
    """

    BASE_LANG = "base-lang"
    SPECIALIZED_LANG = "specialized-lang"
    META_FRAMEWORK = "meta-framework"
    FRAMEWORK = "framework"
    LARAVEL_TOOL = "laravel-tool"
    CSS_FRAMEWORK = "css-framework"
    TOOL = "tool"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PriorityClass):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PriorityClass):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PriorityClass):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PriorityClass):
            return NotImplemented
        return self.rank >= other.rank


_PRIORITY_RANKS: dict[PriorityClass, int] = {
    priority: rank for rank, priority in enumerate(PriorityClass)
}


class GuidelineCategory(str, Enum):
    """Topic of a guideline fragment."""

    LANGUAGE = "language"
    FRAMEWORK = "framework"
    FEATURE = "feature"
    TESTING = "testing"
    METHODOLOGY = "methodology"


class GuidelinePath(BaseModel):
    """Reference to one guideline document contributed by a module."""

    model_config = ConfigDict(frozen=True)

    path: str
    priority: PriorityClass
    category: GuidelineCategory
    version: str | None = None


class GuidelineEntry(GuidelinePath):
    """A guideline path tagged with the module that emitted it."""

    module_id: str

    @classmethod
    def from_path(cls, module_id: str, guideline: GuidelinePath) -> "GuidelineEntry":
        return cls(module_id=module_id, **guideline.model_dump())


class ModuleMetadata(BaseModel):
    """Static, descriptive information about a module."""

    id: str
    name: str
    kind: ModuleKind
    priority: PriorityClass
    description: str = ""
    version: str | None = None
    homepage: str | None = None
    keywords: list[str] = Field(default_factory=list)
    supported_versions: list[str] = Field(default_factory=list)
    supported_extensions: list[str] = Field(default_factory=list)
    config_files: list[str] = Field(default_factory=list)
