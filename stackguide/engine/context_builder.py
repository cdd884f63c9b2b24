"""Build the immutable detection context from a project directory."""

import os
from pathlib import Path
from typing import Any

from stackguide.core.config.settings import ScanSettings
from stackguide.core.exceptions.errors import ContextBuildError
from stackguide.core.logger.logger import get_logger
from stackguide.core.utils.jsonc import ManifestParseError, load_object
from stackguide.engine.registry import ModuleRegistry
from stackguide.models.context import DetectionContext

# Project-level files that are always looked up, independent of modules
CONFIG_PATTERNS = (
    "package.json",
    "composer.json",
    "requirements.txt",
    "Pipfile",
    "pyproject.toml",
    "Cargo.toml",
    "go.mod",
    "tsconfig.json",
    "vite.config.js",
    "vite.config.ts",
    "artisan",
    "manage.py",
    ".env",
    "docker-compose.yml",
    "Dockerfile",
)

LOCK_FILES = (
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lockb",
    "bun.lock",
    "composer.lock",
)

# Small files whose content some detectors read
TEXT_FILES = (
    ".nvmrc",
    ".node-version",
    ".php-version",
    "svelte.config.js",
    "tailwind.config.js",
    "tailwind.config.ts",
)

JSON_MANIFESTS = {
    "package_json": "package.json",
    "composer_json": "composer.json",
    "package_lock": "package-lock.json",
    "composer_lock": "composer.lock",
}


class ContextBuilder:
    """Scan a project directory into a ``DetectionContext``.

    The walk is breadth-bounded by ``max_depth`` and ``max_files`` and never
    descends into ignored directories. Broken manifests are logged and left
    out of the context rather than aborting the scan.
    """

    def __init__(
        self,
        settings: ScanSettings | None = None,
        registry: ModuleRegistry | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            settings: Scan bounds. Defaults are used if not provided.
            registry: Modules whose config files should be looked up.
        """
        self.settings = settings or ScanSettings()
        self.registry = registry
        self.logger = get_logger(self.__class__.__name__)

    def config_patterns(self) -> list[str]:
        """All config file names looked up for this registry, without duplicates."""
        patterns: list[str] = []
        candidates = list(CONFIG_PATTERNS) + list(LOCK_FILES)
        if self.registry is not None:
            for module in self.registry.get_all():
                candidates.extend(module.get_config_files())
        for pattern in candidates:
            if pattern not in patterns:
                patterns.append(pattern)
        return patterns

    def build(self, project_root: Path | str) -> DetectionContext:
        """Scan ``project_root``.

        Args:
            project_root: Project directory.

        Returns:
            Detection context snapshot.

        Raises:
            ContextBuildError: If the path is not an existing directory.
        """
        root = Path(project_root).resolve()
        if not root.is_dir():
            raise ContextBuildError(
                f"Project root is not a directory: {root}",
                project_root=str(root),
            )

        files, directories = self._walk(root)
        config_files = frozenset(p for p in self.config_patterns() if (root / p).is_file())

        manifests: dict[str, dict[str, Any] | None] = {}
        for field, name in JSON_MANIFESTS.items():
            manifests[field] = self._read_json(root, name) if name in config_files else None

        text_files: dict[str, str] = {}
        for name in TEXT_FILES:
            content = self._read_text(root / name)
            if content is not None:
                text_files[name] = content

        context = DetectionContext(
            project_root=root,
            config_files=config_files,
            files=tuple(files),
            directories=frozenset(directories),
            text_files=text_files,
            env_keys=self._read_env_keys(root / ".env"),
            **manifests,
        )
        self.logger.info(
            f"Scanned {root}: {len(files)} files, {len(config_files)} config files"
        )
        return context

    def _walk(self, root: Path) -> tuple[list[str], list[str]]:
        files: list[str] = []
        directories: list[str] = []
        ignored = set(self.settings.ignored_dirs)
        max_files = self.settings.max_files

        for current, dirnames, filenames in os.walk(root):
            current_path = Path(current)
            relative = current_path.relative_to(root)
            depth = len(relative.parts)

            kept: list[str] = []
            for dirname in sorted(dirnames):
                rel_dir = (relative / dirname).as_posix()
                directories.append(rel_dir)
                if dirname in ignored or rel_dir in ignored:
                    continue
                if depth + 1 > self.settings.max_depth:
                    continue
                kept.append(dirname)
            # Prune in place so os.walk does not descend into skipped dirs
            dirnames[:] = kept

            for filename in sorted(filenames):
                if len(files) >= max_files:
                    self.logger.debug(f"File limit {max_files} reached, listing truncated")
                    return files, directories
                files.append((relative / filename).as_posix())

        return files, directories

    def _read_json(self, root: Path, name: str) -> dict[str, Any] | None:
        path = root / name
        try:
            return load_object(path.read_text(encoding="utf-8"), source=name)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"Failed to read {path}: {e}")
        except ManifestParseError as e:
            self.logger.warning(f"Ignoring {name}: {e}")
        return None

    def _read_text(self, path: Path) -> str | None:
        try:
            if not path.is_file() or path.stat().st_size > self.settings.max_text_bytes:
                return None
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"Failed to read {path}: {e}")
            return None

    def _read_env_keys(self, path: Path) -> frozenset[str]:
        """Variable names declared in a dotenv file. Values are never kept."""
        content = self._read_text(path)
        if content is None:
            return frozenset()

        keys: set[str] = set()
        for line in content.splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key = line.split("=", 1)[0].strip()
            if key.startswith("export "):
                key = key[len("export "):].strip()
            if key:
                keys.add(key)
        return frozenset(keys)
