"""Unit tests for tolerant manifest parsing."""

import pytest

from stackguide.core.utils import (
    ManifestParseError,
    load_object,
    loads_jsonc,
    strip_comments,
    strip_trailing_commas,
)


class TestStripComments:
    """Tests for strip_comments."""

    def test_line_comment(self):
        assert strip_comments('{"a": 1} // note').strip() == '{"a": 1}'

    def test_block_comment(self):
        assert strip_comments('{/* x */"a": 1}') == '{"a": 1}'

    def test_markers_inside_strings_kept(self):
        text = '{"url": "https://example.com/*path*/"}'
        assert strip_comments(text) == text


class TestStripTrailingCommas:
    """Tests for strip_trailing_commas."""

    def test_object_trailing_comma(self):
        assert strip_trailing_commas('{"a": 1,}') == '{"a": 1}'

    def test_array_trailing_comma(self):
        assert strip_trailing_commas("[1, 2, 3,]") == "[1, 2, 3]"

    def test_nested(self):
        result = strip_trailing_commas('{"arr": [1, 2,], "obj": {"x": 1,},}')
        assert result == '{"arr": [1, 2], "obj": {"x": 1}}'

    def test_commas_inside_strings_kept(self):
        text = '{"a": ",}"}'
        assert strip_trailing_commas(text) == text


class TestLoadsJsonc:
    """Tests for loads_jsonc and load_object."""

    def test_strict_json(self):
        assert loads_jsonc('{"a": [1, 2]}') == {"a": [1, 2]}

    def test_tsconfig_style(self):
        text = """{
          // compiler options
          "compilerOptions": {
            "strict": true, /* always */
            "paths": {"@/*": ["./src/*"]},
          },
        }"""
        assert loads_jsonc(text) == {
            "compilerOptions": {"strict": True, "paths": {"@/*": ["./src/*"]}}
        }

    def test_invalid_raises(self):
        with pytest.raises(ManifestParseError) as exc_info:
            loads_jsonc("{broken", source="package.json")
        assert exc_info.value.source == "package.json"
        assert "package.json" in str(exc_info.value)
        assert exc_info.value.original_error is not None

    def test_load_object_rejects_non_objects(self):
        assert load_object("[1, 2]") is None
        assert load_object('{"a": 1}') == {"a": 1}
