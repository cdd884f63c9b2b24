"""
Core utilities module for stackguide.
"""

from stackguide.core.utils.jsonc import (
    ManifestParseError,
    load_object,
    loads_jsonc,
    strip_comments,
    strip_trailing_commas,
)
from stackguide.core.utils.versions import (
    VersionInfo,
    VersionSource,
    composer_version_info,
    major_minor,
    major_version,
    normalize_version,
    npm_version_info,
)

__all__ = [
    "ManifestParseError",
    "load_object",
    "loads_jsonc",
    "strip_comments",
    "strip_trailing_commas",
    "VersionInfo",
    "VersionSource",
    "composer_version_info",
    "major_minor",
    "major_version",
    "normalize_version",
    "npm_version_info",
]
