"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stackguide.core.config.loader import DEFAULT_CONFIG_PATH, ConfigLoader

DEFAULT_IGNORED_DIRS = [
    "node_modules",
    "vendor",
    ".git",
    "venv",
    ".venv",
    "env",
    "__pycache__",
    "dist",
    "build",
    "target",
    ".next",
    ".nuxt",
    ".svelte-kit",
    ".idea",
    "storage",
    "bootstrap/cache",
]


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="STACKGUIDE_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="WARNING",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class ScanSettings(BaseSettings):
    """Bounds for the project scan that builds a detection context."""

    model_config = SettingsConfigDict(
        env_prefix="STACKGUIDE_SCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_files: int = Field(
        default=2000,
        ge=1,
        le=100_000,
        description="Maximum number of files sampled into the context",
    )
    max_depth: int = Field(
        default=4,
        ge=0,
        le=32,
        description="Maximum directory depth below the project root",
    )
    ignored_dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORED_DIRS),
        description="Directory names (or relative paths) that are never walked",
    )
    max_text_bytes: int = Field(
        default=64 * 1024,
        ge=0,
        description="Largest text file whose content is kept in the context",
    )


class DetectionSettings(BaseSettings):
    """Detection engine settings."""

    model_config = SettingsConfigDict(
        env_prefix="STACKGUIDE_DETECTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ambiguity_margin: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Confidence gap under which the dominant language is reported ambiguous",
    )
    disabled_modules: list[str] = Field(
        default_factory=list,
        description="Module ids that are not registered",
    )

    @field_validator("disabled_modules", mode="before")
    @classmethod
    def validate_disabled_modules(cls, v: str | list[str] | None) -> list[str]:
        """Accept a comma separated string as well as a list."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return list(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="STACKGUIDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    scan: ScanSettings = Field(default_factory=ScanSettings)
    detection: DetectionSettings = Field(default_factory=DetectionSettings)

    @classmethod
    def from_yaml(cls, *paths: Path) -> "Settings":
        """Load settings from one or more YAML files.

        Args:
            paths: YAML configuration files, later files take precedence.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(*paths)
        loader.load()

        return cls(
            logging=LoggingSettings(**loader.get_section("logging")),
            scan=ScanSettings(**loader.get_section("scan")),
            detection=DetectionSettings(**loader.get_section("detection")),
        )

    @classmethod
    def load(cls, override: Path | None = None) -> "Settings":
        """Load settings from default locations.

        Priority: override file > config/default.yaml > environment variables > defaults

        Args:
            override: Optional user configuration merged over the default file.

        Returns:
            Settings instance.
        """
        paths: list[Path] = []
        if DEFAULT_CONFIG_PATH.exists():
            paths.append(DEFAULT_CONFIG_PATH)
        if override is not None:
            paths.append(override)
        if paths:
            return cls.from_yaml(*paths)

        # Environment variables and .env are automatically loaded by pydantic-settings
        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
