"""Built-in technology modules."""

from collections.abc import Iterable

from stackguide.core.logger.logger import get_logger
from stackguide.engine.registry import ModuleRegistry
from stackguide.modules.base import BaseModule
from stackguide.modules.css import BootstrapModule, BulmaModule, TailwindModule
from stackguide.modules.frontend import (
    AstroModule,
    NextModule,
    NuxtModule,
    ReactModule,
    SolidModule,
    SvelteKitModule,
    SvelteModule,
    VueModule,
)
from stackguide.modules.languages import JavaScriptModule, PHPModule, TypeScriptModule
from stackguide.modules.laravel import (
    FluxFreeModule,
    FluxProModule,
    FolioModule,
    InertiaModule,
    LaravelBoostModule,
    LaravelModule,
    LivewireModule,
    PennantModule,
    VoltModule,
)
from stackguide.modules.php_tools import PestModule, PHPUnitModule, PintModule

logger = get_logger(__name__)

# Registration order breaks ties during detection and guideline ordering
ALL_MODULES: tuple[type[BaseModule], ...] = (
    JavaScriptModule,
    TypeScriptModule,
    PHPModule,
    ReactModule,
    VueModule,
    NextModule,
    NuxtModule,
    SvelteModule,
    SvelteKitModule,
    SolidModule,
    AstroModule,
    LaravelModule,
    LaravelBoostModule,
    LivewireModule,
    InertiaModule,
    FluxFreeModule,
    FluxProModule,
    FolioModule,
    VoltModule,
    PennantModule,
    TailwindModule,
    BootstrapModule,
    BulmaModule,
    PestModule,
    PHPUnitModule,
    PintModule,
)


def create_default_registry(disabled: Iterable[str] = ()) -> ModuleRegistry:
    """Build a registry with the built-in catalogue.

    Args:
        disabled: Module ids to leave out.

    Returns:
        A new registry; callers own it.
    """
    skipped = set(disabled)
    unknown = skipped - {module_class.id for module_class in ALL_MODULES}
    if unknown:
        logger.warning(f"Unknown module ids in disabled list: {sorted(unknown)}")

    registry = ModuleRegistry()
    for module_class in ALL_MODULES:
        if module_class.id in skipped:
            logger.debug(f"Module {module_class.id} disabled by configuration")
            continue
        registry.register(module_class())
    return registry


__all__ = [
    "ALL_MODULES",
    "AstroModule",
    "BaseModule",
    "BootstrapModule",
    "BulmaModule",
    "FluxFreeModule",
    "FluxProModule",
    "FolioModule",
    "InertiaModule",
    "JavaScriptModule",
    "LaravelBoostModule",
    "LaravelModule",
    "LivewireModule",
    "NextModule",
    "NuxtModule",
    "PHPModule",
    "PHPUnitModule",
    "PennantModule",
    "PestModule",
    "PintModule",
    "ReactModule",
    "SolidModule",
    "SvelteKitModule",
    "SvelteModule",
    "TailwindModule",
    "TypeScriptModule",
    "VoltModule",
    "VueModule",
    "create_default_registry",
]
