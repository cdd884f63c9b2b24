"""Exception definitions module."""

from stackguide.core.exceptions.errors import (
    ConfigurationError,
    ContextBuildError,
    DuplicateModuleError,
    ModuleContractError,
    StackGuideError,
)

__all__ = [
    "StackGuideError",
    "ConfigurationError",
    "DuplicateModuleError",
    "ModuleContractError",
    "ContextBuildError",
]
