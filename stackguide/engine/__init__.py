"""Detection engine, guideline composition and stack description."""

from stackguide.engine.context_builder import ContextBuilder
from stackguide.engine.detection import DetectionEngine
from stackguide.engine.guidelines import GuidelineCollection, GuidelineManager
from stackguide.engine.registry import ModuleRegistry
from stackguide.engine.stack_detector import (
    StackDetector,
    detect_package_managers,
    preferred_js_manager,
)

__all__ = [
    "ContextBuilder",
    "DetectionEngine",
    "GuidelineCollection",
    "GuidelineManager",
    "ModuleRegistry",
    "StackDetector",
    "detect_package_managers",
    "preferred_js_manager",
]
