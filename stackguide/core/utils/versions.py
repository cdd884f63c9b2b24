"""Version helpers for npm and composer dependencies.

Versions are read from the manifests and lock data captured in the detection
context; nothing here touches the filesystem.
"""

import re
from enum import Enum

from pydantic import BaseModel

from stackguide.models.context import DetectionContext

_VERSION_RE = re.compile(r"(\d+)(?:\.(\d+|x|\*))?(?:\.(\d+|x|\*))?")
_CONSTRAINT_PREFIX_RE = re.compile(r"^[\s~^>=<v]*")


class VersionSource(str, Enum):
    """Where the effective version came from."""

    DEPENDENCY = "dependency"
    INSTALLED = "installed"
    BOTH = "both"


class VersionInfo(BaseModel):
    """Declared and installed version of one package."""

    package: str
    raw: str
    major: int | None
    installed: str | None = None
    source: VersionSource = VersionSource.DEPENDENCY


def normalize_version(spec: str) -> str:
    """Strip range operators from a constraint (``^1.2`` -> ``1.2``)."""
    return _CONSTRAINT_PREFIX_RE.sub("", spec).strip()


def major_version(spec: str | None) -> int | None:
    """Return the first major version mentioned by a constraint.

    ``"^18.2.0"`` gives 18, ``"~10.0 || ^11.0"`` gives 10, ``"*"`` gives None.
    """
    if not spec:
        return None
    match = _VERSION_RE.search(normalize_version(spec))
    return int(match.group(1)) if match else None


def major_minor(spec: str | None) -> str | None:
    """Return ``"<major>.<minor>"`` for a constraint, minor defaulting to 0."""
    if not spec:
        return None
    match = _VERSION_RE.search(normalize_version(spec))
    if not match:
        return None
    minor = match.group(2)
    if minor is None or not minor.isdigit():
        minor = "0"
    return f"{match.group(1)}.{minor}"


def npm_installed_version(package: str, context: DetectionContext) -> str | None:
    """Installed version from package-lock data (v2/v3 ``packages`` or v1 ``dependencies``)."""
    lock = context.package_lock
    if not lock:
        return None

    packages = lock.get("packages")
    if isinstance(packages, dict):
        entry = packages.get(f"node_modules/{package}")
        if isinstance(entry, dict) and entry.get("version"):
            return str(entry["version"])

    dependencies = lock.get("dependencies")
    if isinstance(dependencies, dict):
        entry = dependencies.get(package)
        if isinstance(entry, dict) and entry.get("version"):
            return str(entry["version"])

    return None


def composer_installed_version(package: str, context: DetectionContext) -> str | None:
    """Installed version from composer.lock ``packages`` and ``packages-dev``."""
    lock = context.composer_lock
    if not lock:
        return None

    for section in ("packages", "packages-dev"):
        entries = lock.get(section)
        if not isinstance(entries, list):
            continue
        for entry in entries:
            if isinstance(entry, dict) and entry.get("name") == package and entry.get("version"):
                return normalize_version(str(entry["version"]))

    return None


def _combine(package: str, spec: str | None, installed: str | None) -> VersionInfo | None:
    if spec is None and installed is None:
        return None

    spec_major = major_version(spec)
    installed_major = major_version(installed)

    if installed_major is not None and spec_major is not None:
        source = VersionSource.BOTH
    elif installed_major is not None:
        source = VersionSource.INSTALLED
    else:
        source = VersionSource.DEPENDENCY

    return VersionInfo(
        package=package,
        raw=spec or installed or "",
        major=installed_major if installed_major is not None else spec_major,
        installed=installed,
        source=source,
    )


def npm_version_info(package: str, context: DetectionContext) -> VersionInfo | None:
    """Combine the package.json constraint with the locked version.

    The installed major wins when both are known.
    """
    return _combine(package, context.dependency_spec(package), npm_installed_version(package, context))


def composer_version_info(package: str, context: DetectionContext) -> VersionInfo | None:
    """Combine the composer.json constraint with the composer.lock version."""
    return _combine(
        package, context.composer_spec(package), composer_installed_version(package, context)
    )
