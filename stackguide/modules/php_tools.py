"""PHP tooling modules: Pest, PHPUnit and Pint."""

from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import GuidelineCategory, ModuleKind, PriorityClass
from stackguide.models.stack import ModuleContext, StackCommands
from stackguide.modules.base import BaseModule, composer_major

PEST_CONFIG_FILES = ("tests/Pest.php", "Pest.php", "pest.xml", "pest.xml.dist")
PHPUNIT_CONFIG_FILES = ("phpunit.xml", "phpunit.xml.dist", "phpunit.dist.xml", "tests/phpunit.xml")
PINT_CONFIG_FILES = ("pint.json", ".pint.json", "pint.config.php", ".pint.config.php")


def is_laravel_project(context: ModuleContext) -> bool:
    """Whether commands should go through ``php artisan``."""
    return context.has_framework("Laravel") or "laravel/framework" in context.stack.dependencies


def _php_test_files(context: DetectionContext) -> list[str]:
    return [f for f in context.files_under("tests") if f.endswith(".php")]


class PestModule(BaseModule):
    """Pest testing framework. Supersedes PHPUnit guidelines."""

    id = "pest"
    name = "Pest"
    kind = ModuleKind.TOOL
    priority = PriorityClass.TOOL
    description = "Pest PHP testing guidelines"
    homepage = "https://pestphp.com"
    keywords = ("pest", "php", "testing")
    supported_versions = ("2.x", "3.x")
    supersedes = ("phpunit",)
    guideline_files = (
        ("pest/guidelines/framework.md", GuidelineCategory.TESTING),
        ("pest/guidelines/laravel-integration.md", GuidelineCategory.TESTING),
    )
    supported_extensions = (".php",)
    config_files = PEST_CONFIG_FILES + ("vendor/bin/pest",)

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("pestphp/pest"):
            evidence.append("pestphp/pest in composer.json dependencies")
            confidence += 0.8
        if context.has_composer_package("pestphp/pest-plugin-laravel"):
            evidence.append("Pest Laravel plugin detected")
            confidence += 0.2

        config = next((name for name in PEST_CONFIG_FILES if context.has_file(name)), None)
        if config is not None:
            evidence.append(f"Pest config file: {config}")
            confidence += 0.4

        test_files = _php_test_files(context)
        if test_files or context.has_file("Pest.php"):
            evidence.append(f"PHP test files found: {len(test_files)}")
            confidence += 0.3

        if any(f == "tests/Pest.php" or f.endswith(".pest.php") for f in context.files):
            evidence.append("Pest-specific test files detected")
            confidence += 0.4

        if context.has_config("vendor/bin/pest"):
            evidence.append("Pest binary found in vendor/bin")
            confidence += 0.2

        return self._result(confidence, evidence, threshold=0.7, config=config)

    def detect_version(self, context: DetectionContext) -> str | None:
        return composer_major(context, "pestphp/pest")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        if is_laravel_project(context):
            test = [
                "php artisan test",
                "php artisan test --parallel",
                "php artisan test --coverage",
                "php artisan test --profile",
            ]
        else:
            test = [
                "vendor/bin/pest",
                "composer test",
                "vendor/bin/pest --coverage",
                "vendor/bin/pest --profile",
            ]
        return StackCommands(test=test, install=["composer install --dev"])


class PHPUnitModule(BaseModule):
    """PHPUnit."""

    id = "phpunit"
    name = "PHPUnit"
    kind = ModuleKind.TOOL
    priority = PriorityClass.TOOL
    description = "PHPUnit testing guidelines"
    homepage = "https://phpunit.de"
    keywords = ("phpunit", "php", "testing")
    supported_versions = ("9.x", "10.x", "11.x")
    guideline_files = (("phpunit/guidelines/framework.md", GuidelineCategory.TESTING),)
    supported_extensions = (".php",)
    config_files = PHPUNIT_CONFIG_FILES + ("vendor/bin/phpunit",)

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("phpunit/phpunit"):
            evidence.append("phpunit/phpunit in composer.json dependencies")
            confidence += 0.7

        config = next((name for name in PHPUNIT_CONFIG_FILES if context.has_file(name)), None)
        if config is not None:
            evidence.append(f"PHPUnit config file: {config}")
            confidence += 0.6

        test_files = _php_test_files(context)
        if test_files:
            evidence.append(f"PHP test files found: {len(test_files)}")
            confidence += 0.4

        if any(f.endswith(("Test.php", "TestCase.php")) for f in context.files):
            evidence.append("PHPUnit test classes detected")
            confidence += 0.3

        if context.has_config("vendor/bin/phpunit"):
            evidence.append("PHPUnit binary found in vendor/bin")
            confidence += 0.2

        return self._result(confidence, evidence, threshold=0.6, config=config)

    def detect_version(self, context: DetectionContext) -> str | None:
        return composer_major(context, "phpunit/phpunit")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        if is_laravel_project(context):
            test = ["php artisan test", "php artisan test --parallel", "php artisan test --coverage"]
        else:
            test = [
                "vendor/bin/phpunit",
                "composer test",
                "vendor/bin/phpunit --coverage-html coverage",
            ]
        return StackCommands(test=test, install=["composer install --dev"])


class PintModule(BaseModule):
    """Laravel Pint code style fixer."""

    id = "pint"
    name = "Laravel Pint"
    kind = ModuleKind.TOOL
    priority = PriorityClass.TOOL
    description = "Laravel Pint code style guidelines"
    homepage = "https://laravel.com/docs/pint"
    keywords = ("pint", "php", "code style", "laravel")
    guideline_files = (
        ("pint/guidelines/tool.md", GuidelineCategory.FEATURE),
        ("pint/guidelines/laravel-integration.md", GuidelineCategory.FEATURE),
    )
    supported_extensions = (".php",)
    config_files = PINT_CONFIG_FILES + ("vendor/bin/pint",)

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("laravel/pint"):
            evidence.append("laravel/pint in composer.json dependencies")
            confidence += 0.8

        config = next((name for name in PINT_CONFIG_FILES if context.has_config(name)), None)
        if config is not None:
            evidence.append(f"Pint config file: {config}")
            confidence += 0.4

        if context.has_config("vendor/bin/pint"):
            evidence.append("Pint binary found in vendor/bin")
            confidence += 0.3

        if context.has_composer_package("laravel/framework") and confidence > 0:
            evidence.append("Laravel project detected (Pint is Laravel's default style fixer)")
            confidence += 0.2

        return self._result(confidence, evidence, threshold=0.7, config=config)

    def detect_version(self, context: DetectionContext) -> str | None:
        return composer_major(context, "laravel/pint")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        if is_laravel_project(context):
            lint = ["./vendor/bin/pint", "./vendor/bin/pint --diff", "./vendor/bin/pint --dirty"]
        else:
            lint = ["vendor/bin/pint", "composer pint"]
        return StackCommands(lint=lint, install=["composer install --dev"])
