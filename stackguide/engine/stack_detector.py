"""Stack detector: composes detection, guidelines and commands."""

from pathlib import Path

from stackguide.core.config.settings import Settings
from stackguide.core.logger.logger import get_logger
from stackguide.engine.context_builder import ContextBuilder
from stackguide.engine.detection import DetectionEngine
from stackguide.engine.guidelines import GuidelineCollection, GuidelineManager
from stackguide.engine.registry import ModuleRegistry
from stackguide.models.context import DetectionContext
from stackguide.models.module import ModuleKind
from stackguide.models.report import DetectionReport, Diagnostic, DiagnosticKind
from stackguide.models.stack import ModuleContext, Stack, StackCommands, StackDescription

LOCKFILE_MANAGERS = (
    ("package-lock.json", "npm"),
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
    ("composer.lock", "composer"),
)

# Most preferred first
JS_MANAGER_PREFERENCE = ("bun", "yarn", "pnpm", "npm")

NODE_RUNTIMES = {"node", "bun"}


def detect_package_managers(context: DetectionContext) -> list[str]:
    """Package managers evidenced by lock files and the ``packageManager`` field."""
    managers: list[str] = []
    for lockfile, manager in LOCKFILE_MANAGERS:
        if context.has_config(lockfile) and manager not in managers:
            managers.append(manager)

    declared = (context.package_json or {}).get("packageManager")
    if isinstance(declared, str) and declared:
        manager = declared.split("@", 1)[0]
        if manager in JS_MANAGER_PREFERENCE and manager not in managers:
            managers.append(manager)

    return managers


def preferred_js_manager(managers: list[str]) -> str | None:
    for manager in JS_MANAGER_PREFERENCE:
        if manager in managers:
            return manager
    return None


class StackDetector:
    """Describe a project: active modules, stack facts, guidelines and commands.

    This is the composition root. The registry is passed in; the engine and
    guideline manager are created from it unless provided.
    """

    def __init__(
        self,
        registry: ModuleRegistry,
        engine: DetectionEngine | None = None,
        guidelines: GuidelineManager | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the detector.

        Args:
            registry: Modules to detect with.
            engine: Detection engine. Created from the registry if not provided.
            guidelines: Guideline manager. A fresh one if not provided.
            settings: Application settings. Defaults are used if not provided.
        """
        self.registry = registry
        self.settings = settings or Settings()
        self.engine = engine or DetectionEngine(registry, self.settings.detection)
        self.guidelines = guidelines or GuidelineManager()
        self.logger = get_logger(self.__class__.__name__)

    def detect_path(self, project_root: Path | str) -> StackDescription:
        """Scan ``project_root`` and describe it.

        Raises:
            ContextBuildError: If the path is not a directory.
        """
        builder = ContextBuilder(self.settings.scan, self.registry)
        return self.describe(builder.build(project_root))

    def describe(self, context: DetectionContext) -> StackDescription:
        """Describe the stack captured by ``context``.

        Args:
            context: Project snapshot.

        Returns:
            Stack facts, ordered guidelines, the detection report and every
            diagnostic recorded along the way.
        """
        report = self.engine.run(context)
        guideline_faults: list[Diagnostic] = []

        collection = self._collect_guidelines(report)
        while collection.faulted_modules:
            # A module whose guidelines cannot be produced is not active; the
            # modules it excluded come back and must be collected too
            guideline_faults.extend(
                d for d in collection.diagnostics if d.kind == DiagnosticKind.GUIDELINE_FAULT
            )
            self.engine.withdraw(report, collection.faulted_modules)
            collection = self._collect_guidelines(report)

        diagnostics = [*report.diagnostics, *guideline_faults, *collection.diagnostics]

        stack = self._build_stack(context, report)
        commands = self._generate_commands(context, report, stack, diagnostics)
        stack = stack.model_copy(update={"commands": commands})

        self.logger.info(
            f"Stack: runtime={stack.runtime}, languages={stack.languages}, "
            f"frameworks={stack.frameworks}, {len(collection.entries)} guidelines"
        )
        return StackDescription(
            stack=stack,
            guidelines=collection.entries,
            report=report,
            diagnostics=diagnostics,
        )

    def _collect_guidelines(self, report: DetectionReport) -> GuidelineCollection:
        active_modules = [self.registry.get(module_id) for module_id in report.active]
        return self.guidelines.collect(active_modules, report.versions)

    def _build_stack(self, context: DetectionContext, report: DetectionReport) -> Stack:
        groups: dict[ModuleKind, list[str]] = {kind: [] for kind in ModuleKind}
        for module_id in report.active:
            module = self.registry.get(module_id)
            groups[module.kind].append(module.name)

        package_managers = detect_package_managers(context)

        return Stack(
            runtime=self._resolve_runtime(report, package_managers),
            languages=groups[ModuleKind.LANGUAGE],
            frameworks=groups[ModuleKind.FRAMEWORK],
            libraries=groups[ModuleKind.LIBRARY],
            tools=groups[ModuleKind.TOOL],
            config_files=sorted(context.config_files),
            dependencies=context.npm_dependency_names() + context.composer_package_names(),
            package_managers=package_managers,
            versions={k: v for k, v in report.versions.items() if k in report.active},
        )

    def _resolve_runtime(self, report: DetectionReport, package_managers: list[str]) -> str:
        dominant = report.dominant_language
        if dominant is None:
            return "generic"

        runtime = self.registry.get(dominant).runtime or "generic"
        if runtime == "node" and "bun" in package_managers:
            return "bun"
        return runtime

    def _generate_commands(
        self,
        context: DetectionContext,
        report: DetectionReport,
        stack: Stack,
        diagnostics: list[Diagnostic],
    ) -> StackCommands:
        commands = StackCommands()
        package_manager = preferred_js_manager(stack.package_managers)

        for module_id in report.active:
            module = self.registry.get(module_id)
            module_context = ModuleContext(
                project_root=context.project_root,
                stack=stack,
                detection_result=report.results[module_id],
                version=report.versions.get(module_id),
                package_manager=package_manager,
            )
            try:
                module_commands = module.generate_commands(module_context)
                if not isinstance(module_commands, StackCommands):
                    raise TypeError("generate_commands must return StackCommands")
            except Exception as e:
                self.logger.warning(f"Command generation failed for {module_id}: {e}")
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.COMMAND_FAULT,
                        module_id=module_id,
                        message=str(e),
                        stage="commands",
                    )
                )
                continue
            commands.extend(module_commands)

        return commands
