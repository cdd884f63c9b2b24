"""Display components for the CLI using Rich."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from stackguide.models.module import ModuleMetadata
from stackguide.models.report import Diagnostic, DiagnosticKind
from stackguide.models.stack import StackCommands, StackDescription

console = Console()

DIAGNOSTIC_STYLES = {
    DiagnosticKind.DETECTION_FAULT: "red",
    DiagnosticKind.GUIDELINE_FAULT: "red",
    DiagnosticKind.COMMAND_FAULT: "red",
    DiagnosticKind.EXCLUSION_CONFLICT: "yellow",
    DiagnosticKind.AMBIGUOUS_DOMINANT_LANGUAGE: "yellow",
    DiagnosticKind.EXCLUDED_MODULE: "dim",
    DiagnosticKind.DUPLICATE_GUIDELINE: "dim",
}


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_info(title: str, message: str) -> None:
    """Display an info message."""
    console.print()
    console.print(
        Panel(
            message,
            title=f"[bold]{title}[/]",
            border_style="blue",
        )
    )


def _join(values: list[str]) -> str:
    return ", ".join(values) if values else "[dim]none[/]"


def show_stack(description: StackDescription, verbose: bool = False) -> None:
    """Display a stack description.

    Args:
        description: Result of ``StackDetector.describe``.
        verbose: Also show evidence and informational diagnostics.
    """
    stack = description.stack
    console.print()

    summary = Table(title="[bold]Detected Stack[/]", show_header=False, box=None)
    summary.add_column("Field", style="cyan")
    summary.add_column("Value", style="white")
    summary.add_row("Runtime", stack.runtime)
    summary.add_row("Languages", _join(stack.languages))
    summary.add_row("Frameworks", _join(stack.frameworks))
    summary.add_row("Libraries", _join(stack.libraries))
    summary.add_row("Tools", _join(stack.tools))
    summary.add_row("Package Managers", _join(stack.package_managers))
    console.print(Panel(summary, border_style="cyan"))

    _show_modules(description, verbose)
    _show_guidelines(description)
    _show_commands(stack.commands)
    _show_diagnostics(description.diagnostics, verbose)


def _show_modules(description: StackDescription, verbose: bool) -> None:
    report = description.report
    if not report.active:
        show_info("No Modules", "No known technology was detected in this project.")
        return

    table = Table(title="[bold]Active Modules[/]")
    table.add_column("Module", style="cyan")
    table.add_column("Confidence", justify="right")
    table.add_column("Version")
    if verbose:
        table.add_column("Evidence", style="dim")

    for module_id in report.active:
        result = report.results[module_id]
        row = [module_id, f"{result.confidence:.2f}", report.versions.get(module_id, "-")]
        if verbose:
            row.append(escape("\n".join(result.evidence)))
        table.add_row(*row)
    console.print(table)


def _show_guidelines(description: StackDescription) -> None:
    if not description.guidelines:
        return

    table = Table(title="[bold]Guidelines[/]")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path", style="green")
    table.add_column("Priority")
    table.add_column("Module", style="cyan")
    for index, entry in enumerate(description.guidelines, 1):
        table.add_row(str(index), entry.path, entry.priority.value, entry.module_id)
    console.print(table)


def _show_commands(commands: StackCommands) -> None:
    if commands.is_empty():
        return

    table = Table(title="[bold]Commands[/]", show_header=False, box=None)
    table.add_column("Group", style="cyan")
    table.add_column("Commands", style="white")
    for group in ("dev", "build", "test", "lint", "install"):
        values = getattr(commands, group)
        if values:
            table.add_row(group, escape("\n".join(values)))
    console.print(Panel(table, border_style="green"))


def _show_diagnostics(diagnostics: list[Diagnostic], verbose: bool) -> None:
    # Exclusions and duplicates are expected; only shown on request
    quiet = {DiagnosticKind.EXCLUDED_MODULE, DiagnosticKind.DUPLICATE_GUIDELINE}
    shown = [d for d in diagnostics if verbose or d.kind not in quiet]
    if not shown:
        return

    table = Table(title="[bold]Diagnostics[/]")
    table.add_column("Kind")
    table.add_column("Module", style="cyan")
    table.add_column("Message")
    for diagnostic in shown:
        style = DIAGNOSTIC_STYLES.get(diagnostic.kind, "white")
        table.add_row(
            f"[{style}]{diagnostic.kind.value}[/]",
            diagnostic.module_id or "-",
            escape(diagnostic.message),
        )
    console.print(table)


def show_modules(modules: list[ModuleMetadata]) -> None:
    """Display the module catalogue."""
    table = Table(title="[bold]Available Modules[/]")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Priority")
    table.add_column("Versions", style="dim")
    for meta in modules:
        table.add_row(
            meta.id,
            meta.name,
            meta.kind.value,
            meta.priority.value,
            ", ".join(meta.supported_versions) or "-",
        )
    console.print(table)
