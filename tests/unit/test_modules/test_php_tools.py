"""Tests for PHP tooling modules."""

from pathlib import Path

from stackguide.models.context import DetectionResult
from stackguide.models.module import GuidelineCategory
from stackguide.models.stack import ModuleContext, Stack
from stackguide.modules.php_tools import PestModule, PHPUnitModule, PintModule


def _module_context(laravel: bool):
    return ModuleContext(
        project_root=Path("/project"),
        stack=Stack(
            frameworks=["Laravel"] if laravel else [],
            dependencies=["laravel/framework"] if laravel else [],
        ),
        detection_result=DetectionResult(detected=True, confidence=1.0),
    )


class TestPestModule:
    """Tests for Pest detection."""

    def test_detected_supersedes_phpunit(self, make_context):
        context = make_context(
            composer_json={"require-dev": {"pestphp/pest": "^2.34"}},
            config_files={"tests/Pest.php"},
            files=["tests/Pest.php", "tests/Feature/ExampleTest.php"],
        )
        module = PestModule()
        result = module.detect(context)
        assert result.detected is True
        assert result.excludes == ["phpunit"]
        assert module.detect_version(context) == "2"

    def test_guidelines_are_testing(self):
        paths = PestModule().get_guideline_paths()
        assert [p.path for p in paths] == [
            "pest/guidelines/framework.md",
            "pest/guidelines/laravel-integration.md",
        ]
        assert all(p.category == GuidelineCategory.TESTING for p in paths)

    def test_commands(self):
        assert PestModule().generate_commands(_module_context(True)).test[0] == "php artisan test"
        plain = PestModule().generate_commands(_module_context(False))
        assert plain.test[0] == "vendor/bin/pest"
        assert plain.install == ["composer install --dev"]


class TestPHPUnitModule:
    """Tests for PHPUnit detection."""

    def test_detected(self, make_context):
        context = make_context(
            composer_json={"require-dev": {"phpunit/phpunit": "^10.5"}},
            config_files={"phpunit.xml"},
        )
        module = PHPUnitModule()
        assert module.detect(context).detected is True
        assert module.detect_version(context) == "10"

    def test_test_classes_detect_without_package(self, make_context):
        context = make_context(files=["tests/ExampleTest.php"])
        result = PHPUnitModule().detect(context)
        assert result.detected is True
        assert result.confidence == 0.7

    def test_not_detected(self, empty_context):
        assert PHPUnitModule().detect(empty_context).detected is False

    def test_commands_without_laravel(self):
        commands = PHPUnitModule().generate_commands(_module_context(False))
        assert commands.test == [
            "vendor/bin/phpunit",
            "composer test",
            "vendor/bin/phpunit --coverage-html coverage",
        ]


class TestPintModule:
    """Tests for Pint detection."""

    def test_detected_in_laravel(self, make_context):
        context = make_context(
            composer_json={"require": {"laravel/framework": "^11.0"}, "require-dev": {"laravel/pint": "^1.13"}},
        )
        result = PintModule().detect(context)
        assert result.detected is True
        assert result.confidence == 1.0

    def test_laravel_bonus_needs_pint_signal(self, make_context):
        context = make_context(composer_json={"require": {"laravel/framework": "^11.0"}})
        result = PintModule().detect(context)
        assert result.detected is False
        assert result.confidence == 0.0

    def test_commands(self):
        assert PintModule().generate_commands(_module_context(True)).lint == [
            "./vendor/bin/pint",
            "./vendor/bin/pint --diff",
            "./vendor/bin/pint --dirty",
        ]
        assert PintModule().generate_commands(_module_context(False)).lint == [
            "vendor/bin/pint",
            "composer pint",
        ]
