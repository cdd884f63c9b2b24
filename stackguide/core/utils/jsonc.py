"""Tolerant JSON loading for project manifests.

Config files such as ``tsconfig.json`` or ``jsconfig.json`` are JSONC: they may
carry ``//`` and ``/* */`` comments and trailing commas. Strict manifests go
through the same path; a clean document parses unchanged.
"""

import json
import re
from typing import Any

# Strings are matched first so comment markers inside them are kept
_TOKEN_RE = re.compile(
    r'"(?:\\.|[^"\\])*"'
    r"|//[^\n]*"
    r"|/\*[\s\S]*?(?:\*/|$)"
)
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")


class ManifestParseError(Exception):
    """Raised when a manifest cannot be parsed even after cleanup."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.original_error = original_error


def strip_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments outside of string literals.

    Args:
        text: JSONC document.

    Returns:
        The document without comments.
    """

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        return token if token.startswith('"') else ""

    return _TOKEN_RE.sub(_replace, text)


def strip_trailing_commas(text: str) -> str:
    """Drop commas that directly precede a closing brace or bracket.

    {"a": 1,} -> {"a": 1}
    """
    parts = re.split(r'("(?:\\.|[^"\\])*")', text)
    # Odd indexes are string literals
    return "".join(
        part if i % 2 else _TRAILING_COMMA_RE.sub(r"\1", part) for i, part in enumerate(parts)
    )


def loads_jsonc(text: str, source: str | None = None) -> Any:
    """Parse a JSON or JSONC document.

    Args:
        text: Document text.
        source: Name used in error messages.

    Returns:
        Parsed value.

    Raises:
        ManifestParseError: If the document is not valid even after cleanup.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    cleaned = strip_trailing_commas(strip_comments(text))
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ManifestParseError(
            f"Invalid JSON in {source or 'document'}: {e.msg} (line {e.lineno})",
            source=source,
            original_error=e,
        ) from e


def load_object(text: str, source: str | None = None) -> dict[str, Any] | None:
    """Parse a document that must be a JSON object.

    Returns:
        The object, or None when the document is valid JSON of another type.
    """
    value = loads_jsonc(text, source=source)
    return value if isinstance(value, dict) else None
