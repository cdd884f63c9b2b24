"""Tests for CLI display module."""

import io
from unittest.mock import patch

from rich.console import Console

from stackguide.cli.display import show_error, show_info, show_modules, show_stack
from stackguide.engine.registry import ModuleRegistry
from stackguide.engine.stack_detector import StackDetector
from stackguide.modules import create_default_registry


def _capture() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=160, force_terminal=False), buffer


def _describe(empty_context, *modules):
    registry = ModuleRegistry()
    for module in modules:
        registry.register(module)
    return StackDetector(registry).describe(empty_context)


class TestDisplayFunctions:
    """Test display functions."""

    def test_show_error(self) -> None:
        """Error panels carry title and message."""
        console, buffer = _capture()
        with patch("stackguide.cli.display.console", console):
            show_error("Error Title", "Error message [not markup]")
        text = buffer.getvalue()
        assert "Error Title" in text
        assert "[not markup]" in text

    def test_show_info(self) -> None:
        """Info panels carry title and message."""
        console, buffer = _capture()
        with patch("stackguide.cli.display.console", console):
            show_info("Info Title", "Info message")
        assert "Info message" in buffer.getvalue()

    def test_show_modules(self) -> None:
        """The catalogue lists every built-in module."""
        console, buffer = _capture()
        registry = create_default_registry()
        with patch("stackguide.cli.display.console", console):
            show_modules([module.get_metadata() for module in registry.get_all()])
        text = buffer.getvalue()
        assert "Available Modules" in text
        assert "laravel-boost" in text
        assert "tailwind" in text


class TestShowStack:
    """Test stack rendering."""

    def test_empty_stack(self, empty_context) -> None:
        """Nothing detected renders the empty notice."""
        console, buffer = _capture()
        with patch("stackguide.cli.display.console", console):
            show_stack(_describe(empty_context))
        text = buffer.getvalue()
        assert "Detected Stack" in text
        assert "No known technology was detected" in text
        assert "Guidelines" not in text

    def test_active_modules_and_guidelines(self, empty_context, stub_module) -> None:
        """Active modules, guidelines and commands are tabulated."""
        module = stub_module(
            "alpha",
            version="2",
            commands={"dev": ["alpha serve"], "test": ["alpha test"]},
        )
        console, buffer = _capture()
        with patch("stackguide.cli.display.console", console):
            show_stack(_describe(empty_context, module))
        text = buffer.getvalue()
        assert "Active Modules" in text
        assert "alpha/guidelines/main.md" in text
        assert "alpha serve" in text
        assert "0.90" in text

    def test_evidence_only_when_verbose(self, empty_context, stub_module) -> None:
        """Evidence is shown only in verbose mode."""
        description = _describe(empty_context, stub_module("alpha"))

        console, buffer = _capture()
        with patch("stackguide.cli.display.console", console):
            show_stack(description)
        assert "alpha evidence" not in buffer.getvalue()

        console, buffer = _capture()
        with patch("stackguide.cli.display.console", console):
            show_stack(description, verbose=True)
        assert "alpha evidence" in buffer.getvalue()

    def test_faults_always_shown(self, empty_context, stub_module) -> None:
        """Detection faults appear without verbose."""
        description = _describe(
            empty_context, stub_module("alpha"), stub_module("broken", fail_on="detect")
        )
        console, buffer = _capture()
        with patch("stackguide.cli.display.console", console):
            show_stack(description)
        text = buffer.getvalue()
        assert "Diagnostics" in text
        assert "detection_fault" in text

    def test_exclusions_hidden_unless_verbose(self, empty_context, stub_module) -> None:
        """Excluded-module diagnostics are informational."""
        description = _describe(
            empty_context,
            stub_module("alpha", excludes=("beta",)),
            stub_module("beta"),
        )
        console, buffer = _capture()
        with patch("stackguide.cli.display.console", console):
            show_stack(description)
        assert "excluded_module" not in buffer.getvalue()

        console, buffer = _capture()
        with patch("stackguide.cli.display.console", console):
            show_stack(description, verbose=True)
        assert "excluded_module" in buffer.getvalue()
