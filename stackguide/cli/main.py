"""Main CLI entry point for StackGuide."""

import json
from pathlib import Path

import click

from stackguide.cli.display import console, show_error, show_modules, show_stack
from stackguide.core.config.settings import Settings, get_settings
from stackguide.core.exceptions.errors import StackGuideError
from stackguide.core.logger.logger import setup_logging
from stackguide.engine.stack_detector import StackDetector
from stackguide.models.module import ModuleKind
from stackguide.modules import create_default_registry


def load_settings(config_path: str | None) -> Settings:
    """Settings for one invocation, with an optional user YAML file on top."""
    if config_path:
        return Settings.load(override=Path(config_path))
    return get_settings()


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def main(ctx: click.Context, version: bool) -> None:
    """StackGuide - detect a project's technology stack and compose its guidelines."""
    if version:
        from stackguide import __version__

        click.echo(f"StackGuide version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the description as JSON")
@click.option("--verbose", is_flag=True, help="Show evidence and debug logging")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file",
)
def detect(path: str, as_json: bool, verbose: bool, config_path: str | None) -> None:
    """Detect the technology stack of a project.

    Example:
        stackguide detect /path/to/project
        stackguide detect . --json
    """
    try:
        settings = load_settings(config_path)
        setup_logging(settings.logging, verbose=verbose)

        registry = create_default_registry(settings.detection.disabled_modules)
        detector = StackDetector(registry, settings=settings)
        description = detector.detect_path(Path(path))
    except StackGuideError as e:
        show_error("Detection Failed", str(e))
        raise SystemExit(1) from e

    if as_json:
        click.echo(json.dumps(description.to_dict(), indent=2))
        return

    console.print(f"[cyan]Project:[/] {Path(path).resolve()}")
    show_stack(description, verbose=verbose)


@main.command()
@click.option(
    "--kind",
    "-k",
    type=click.Choice([kind.value for kind in ModuleKind]),
    help="Only list modules of this kind",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file",
)
def modules(kind: str | None, config_path: str | None) -> None:
    """List the available technology modules, without disabled ones."""
    try:
        settings = load_settings(config_path)
    except StackGuideError as e:
        show_error("Configuration Failed", str(e))
        raise SystemExit(1) from e

    registry = create_default_registry(settings.detection.disabled_modules)
    selected = registry.get_by_kind(ModuleKind(kind)) if kind else list(registry.get_all())
    show_modules([module.get_metadata() for module in selected])


if __name__ == "__main__":
    main()
