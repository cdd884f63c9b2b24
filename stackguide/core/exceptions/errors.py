"""Custom exception definitions for stackguide."""

from typing import Any


class StackGuideError(Exception):
    """Base exception for all stackguide errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(StackGuideError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)


class DuplicateModuleError(ConfigurationError):
    """Raised when a module id is registered twice."""

    def __init__(self, module_id: str, details: dict[str, Any] | None = None) -> None:
        """Initialize duplicate module error.

        Args:
            module_id: The id that is already registered.
            details: Additional error details.
        """
        details = details or {}
        details["module_id"] = module_id
        super().__init__(
            f"Module '{module_id}' is already registered",
            config_key="modules",
            details=details,
        )
        self.module_id = module_id


class ModuleContractError(StackGuideError):
    """Raised when a module returns something its contract does not allow."""

    def __init__(
        self,
        message: str,
        module_id: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize module contract error.

        Args:
            message: Error message.
            module_id: Offending module id.
            operation: Contract operation that was violated.
            details: Additional error details.
        """
        details = details or {}
        if module_id:
            details["module_id"] = module_id
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class ContextBuildError(StackGuideError):
    """Raised when a detection context cannot be built for a path."""

    def __init__(
        self,
        message: str,
        project_root: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize context build error.

        Args:
            message: Error message.
            project_root: Project root that was requested.
            details: Additional error details.
        """
        details = details or {}
        if project_root:
            details["project_root"] = project_root
        super().__init__(message, details)
