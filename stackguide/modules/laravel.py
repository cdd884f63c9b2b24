"""Laravel ecosystem modules.

Laravel, Laravel Boost, Livewire, Inertia, Flux UI, Folio, Volt and Pennant.
"""

from stackguide.core.utils.versions import normalize_version
from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import GuidelineCategory, ModuleKind, PriorityClass
from stackguide.models.stack import ModuleContext, StackCommands
from stackguide.modules.base import BaseModule, composer_major, scaled

LARAVEL_DIRECTORIES = ("app/Http", "app/Models", "routes", "database/migrations", "resources/views")
LARAVEL_FILES = ("routes/web.php", "routes/api.php", "config/app.php", "app/Http/Kernel.php")

BOOST_CONFIG_FILES = (
    "boost.config.js",
    "boost.config.php",
    "config/boost.php",
    "laravel-boost.json",
    ".boost",
)
BOOST_DIRECTORIES = ("resources/boost", "app/Boost", "database/boost", "routes/boost")
BOOST_DATA_FILES = (
    "fluxui-pro/core.blade.php",
    "fluxui-free/core.blade.php",
    "pennant/core.blade.php",
    "volt/core.blade.php",
)
BOOST_NPM_PACKAGES = ("laravel-boost", "@laravel-boost/cli", "boost-framework")

LIVEWIRE_COMPONENT_DIRS = ("app/Http/Livewire/", "app/Livewire/", "resources/views/livewire/")

INERTIA_ADAPTERS = (
    ("@inertiajs/react", "React", "react"),
    ("@inertiajs/vue3", "Vue 3", "vue"),
    ("@inertiajs/vue2", "Vue 2", "vue"),
    ("@inertiajs/svelte", "Svelte", "svelte"),
)
INERTIA_PAGE_DIRS = (
    "resources/js/Pages/",
    "resources/js/pages/",
    "resources/ts/Pages/",
    "resources/ts/pages/",
)
FRONTEND_EXTENSIONS = (".js", ".ts", ".jsx", ".tsx", ".vue", ".svelte")

FLUX_PRO_INDICATORS = ("flux-pro", "flux/pro", "flux_pro_license", "flux.pro", "fluxui.pro")
FLUX_LICENSE_KEYS = ("FLUX_PRO_LICENSE", "FLUX_PRO_KEY", "FLUX_LICENSE")
FLUX_LICENSE_FILES = ("flux-license", ".flux-pro")
FLUX_PRO_COMPONENTS = (
    "accordion",
    "autocomplete",
    "calendar",
    "chart",
    "command",
    "context",
    "date-picker",
    "editor",
    "pagination",
    "popover",
    "table",
    "tabs",
    "toast",
)
FLUX_COMPOSER_REPOSITORY = "composer.fluxui.dev"

FOLIO_PAGES_DIR = "resources/views/pages"
FOLIO_CONFIG_FILES = ("config/folio.php", "bootstrap/providers.php", "config/app.php")
FOLIO_PAGE_PATTERNS = (
    "resources/views/pages/index.blade.php",
    "resources/views/pages/[",
    "resources/views/pages/auth/",
    "resources/views/pages/admin/",
)

VOLT_CONFIG_FILES = (
    "config/livewire.php",
    "config/volt.php",
    "bootstrap/providers.php",
    "config/app.php",
)
VOLT_COMPONENT_PATTERNS = (
    "/volt/",
    "resources/views/livewire/",
    "resources/views/components/",
    ".volt.blade.php",
)

PENNANT_CONFIG_FILES = ("config/pennant.php", "bootstrap/providers.php", "config/app.php")
PENNANT_FLAG_PATTERNS = ("Features/", "FeatureFlags/", "flags/", "pennant/")


def has_laravel(context: DetectionContext) -> bool:
    """True when composer requires the Laravel framework."""
    return context.has_composer_package("laravel/framework") or context.has_composer_package(
        "illuminate/support", "require"
    )


def has_livewire(context: DetectionContext) -> bool:
    return context.has_composer_package("livewire/livewire")


def _composer_repository_urls(context: DetectionContext) -> list[str]:
    repositories = (context.composer_json or {}).get("repositories", [])
    if isinstance(repositories, dict):
        repositories = list(repositories.values())
    urls: list[str] = []
    for repository in repositories if isinstance(repositories, list) else []:
        if isinstance(repository, dict) and repository.get("url"):
            urls.append(str(repository["url"]))
    return urls


def has_flux_pro_indicators(context: DetectionContext) -> bool:
    """Signs that the paid Flux UI Pro edition is installed.

    Checks file and config names (case-insensitive), dotenv keys and the
    private Flux composer repository.
    """
    names = list(context.files) + sorted(context.config_files)
    for name in names:
        lowered = name.lower()
        if any(indicator in lowered for indicator in FLUX_PRO_INDICATORS):
            return True
    if any(key in context.env_keys for key in FLUX_LICENSE_KEYS):
        return True
    return any(FLUX_COMPOSER_REPOSITORY in url for url in _composer_repository_urls(context))


def laravel_node_commands(context: ModuleContext) -> tuple[str, str]:
    """(run, install) prefixes for the JS side of a Laravel project."""
    pm = context.js_package_manager
    return f"{pm} run", f"{pm} install"


class LaravelModule(BaseModule):
    """Laravel."""

    id = "laravel"
    name = "Laravel"
    kind = ModuleKind.FRAMEWORK
    priority = PriorityClass.META_FRAMEWORK
    description = "Laravel framework guidelines, conventions and version features"
    homepage = "https://laravel.com"
    keywords = ("laravel", "php", "artisan", "eloquent")
    supported_versions = ("10.x", "11.x", "12.x")
    guideline_files = (
        ("laravel/guidelines/framework.md", GuidelineCategory.FRAMEWORK),
        ("laravel/guidelines/gemini-analysis.md", GuidelineCategory.FRAMEWORK),
    )
    supported_extensions = (".php", ".blade.php")
    config_files = (
        "artisan",
        "composer.json",
        "composer.lock",
        ".env",
        "webpack.mix.js",
        "vite.config.js",
        "vite.config.ts",
        "tests/Pest.php",
        "Pest.php",
        ".php-cs-fixer.php",
        ".php_cs",
        "phpstan.neon",
        "phpstan.neon.dist",
    )

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_config("artisan"):
            evidence.append("artisan command file found")
            confidence += 0.9

        if context.has_composer_package("laravel/framework", "require"):
            evidence.append("laravel/framework in composer.json dependencies")
            confidence += 0.8

        found_dirs = [d for d in LARAVEL_DIRECTORIES if context.has_dir(d)]
        for directory in found_dirs:
            evidence.append(f"Laravel directory structure: {directory}")
            confidence += 0.1

        for name in LARAVEL_FILES:
            if name in context.files:
                evidence.append(f"Laravel file: {name}")
                confidence += 0.15

        config_php = [f for f in context.files_under("config") if f.endswith(".php")]
        if len(config_php) > 5:
            evidence.append(f"Laravel config files found: {len(config_php)}")
            confidence += 0.2

        if {"APP_NAME", "APP_KEY"} & context.env_keys:
            evidence.append(".env file with Laravel variables")
            confidence += 0.1

        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            artisan=context.has_config("artisan"),
            directories=found_dirs,
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        return composer_major(context, "laravel/framework")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        config_files = context.stack.config_files
        run, install = laravel_node_commands(context)
        commands = StackCommands(
            dev=["php artisan serve", "php artisan tinker"],
            test=["php artisan test", "vendor/bin/phpunit"],
            lint=["./vendor/bin/pint"],
            install=["composer install"],
        )

        if "vite.config.js" in config_files or "vite.config.ts" in config_files:
            commands.dev.append(f"{run} dev")
            commands.build.append(f"{run} build")
        elif "webpack.mix.js" in config_files:
            commands.dev.append(f"{run} dev")
            commands.build.append(f"{run} production")

        if "tests/Pest.php" in config_files or "Pest.php" in config_files:
            commands.test.append("vendor/bin/pest")
        if ".php-cs-fixer.php" in config_files or ".php_cs" in config_files:
            commands.lint.append("vendor/bin/php-cs-fixer fix")
        if "phpstan.neon" in config_files or "phpstan.neon.dist" in config_files:
            commands.lint.append("vendor/bin/phpstan analyse")
        if "package.json" in config_files:
            commands.install.append(install)
        return commands


class LaravelBoostModule(BaseModule):
    """Laravel Boost methodology. Supersedes the individual Laravel tool guidelines."""

    id = "laravel-boost"
    name = "Laravel Boost"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.META_FRAMEWORK
    description = "Laravel Boost development methodology covering the Laravel ecosystem"
    homepage = "https://github.com/laravel/boost"
    keywords = ("laravel", "boost", "methodology")
    supersedes = (
        "laravel",
        "tailwind",
        "livewire",
        "pest",
        "pint",
        "volt",
        "folio",
        "pennant",
        "flux-free",
        "flux-pro",
    )
    guideline_files = (("laravel-boost/guidelines/methodology.md", GuidelineCategory.METHODOLOGY),)
    supported_extensions = (".php", ".blade.php", ".js", ".ts")
    config_files = BOOST_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0
        components: list[str] = []

        if context.has_composer_package("laravel/boost"):
            evidence.append("laravel/boost in composer.json dependencies")
            confidence += 0.8

        if any(context.has_config(name) for name in BOOST_CONFIG_FILES):
            evidence.append("Laravel Boost configuration file detected")
            confidence += 0.8

        if any(context.has_dir(directory) for directory in BOOST_DIRECTORIES):
            evidence.append("Laravel Boost directory structure detected")
            confidence += 0.6

        if any(data in f for f in context.files for data in BOOST_DATA_FILES):
            evidence.append("Laravel Boost methodology data files detected")
            confidence += 0.7
            components.append("boost-methodology")

        if any("boost" in f.lower() for f in context.files):
            evidence.append("Laravel Boost patterns detected in files")
            confidence += 0.4

        if any(context.has_dependency(package) for package in BOOST_NPM_PACKAGES):
            evidence.append("Laravel Boost dependencies detected in package.json")
            confidence += 0.5

        laravel = has_laravel(context)
        if not laravel and confidence > 0:
            evidence.append("Warning: Laravel Boost requires Laravel framework")
            confidence *= 0.3
        elif laravel:
            evidence.append("Laravel framework detected (required for Boost)")
            confidence += 0.1

        result = self._result(
            confidence,
            evidence,
            threshold=0.6,
            laravel=laravel,
            components=components,
        )
        if result.detected:
            result.evidence.append(
                f"Laravel Boost detected - excluding {len(self.supersedes)} redundant modules"
            )
        return result

    def detect_version(self, context: DetectionContext) -> str | None:
        return composer_major(context, "laravel/boost")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        return StackCommands(
            dev=["php artisan serve", "php artisan boost:dev"],
            build=["php artisan optimize", "php artisan boost:build"],
            install=["composer install", "php artisan boost:install"],
        )


class LivewireModule(BaseModule):
    """Livewire. Requires Laravel."""

    id = "livewire"
    name = "Livewire"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.LARAVEL_TOOL
    description = "Livewire full-stack component guidelines for Laravel"
    homepage = "https://livewire.laravel.com"
    keywords = ("livewire", "laravel", "components")
    supported_versions = ("2.x", "3.x")
    guideline_files = (("livewire/guidelines/laravel-tool.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".php", ".blade.php")
    config_files = ("config/livewire.php", "phpunit.xml", "phpunit.xml.dist", "pest.xml")

    def detect(self, context: DetectionContext) -> DetectionResult:
        if context.composer_json is None:
            return DetectionResult.not_detected("No composer.json found - Laravel required")
        if not context.has_composer_package("laravel/framework"):
            return DetectionResult.not_detected("Laravel not found - required for Livewire")

        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("livewire/livewire"):
            evidence.append("livewire/livewire in composer.json dependencies")
            confidence += 0.8

        if context.has_composer_package("livewire/volt"):
            evidence.append("livewire/volt detected (Livewire v3 companion)")
            confidence += 0.2

        components = [
            f for f in context.files if any(d in f for d in LIVEWIRE_COMPONENT_DIRS)
        ]
        if components:
            evidence.append(f"Livewire components found: {len(components)}")
            confidence += scaled(len(components), 0.1, 0.3)

        if context.has_file("config/livewire.php"):
            evidence.append("Livewire config file found")
            confidence += 0.2

        tests = [f for f in context.files if "tests/" in f and "livewire" in f.lower()]
        if tests:
            evidence.append(f"Livewire test files found: {len(tests)}")
            confidence += 0.1

        return self._result(confidence, evidence, threshold=0.3, components=len(components))

    def detect_version(self, context: DetectionContext) -> str | None:
        return composer_major(context, "livewire/livewire")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        config_files = context.stack.config_files
        commands = StackCommands(
            dev=["php artisan livewire:publish --force", "php artisan serve"],
            build=["php artisan optimize"],
            test=["php artisan test"],
            lint=["./vendor/bin/pint"],
            install=["composer install"],
        )
        if "phpunit.xml" in config_files or "phpunit.xml.dist" in config_files:
            commands.test.append("./vendor/bin/phpunit --filter=Livewire")
        if "pest.xml" in config_files:
            commands.test.append("./vendor/bin/pest --group=livewire")
        return commands


class InertiaModule(BaseModule):
    """Inertia.js. Replaces the guidelines of the frontend framework it adapts."""

    id = "inertia"
    name = "Inertia.js"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.LARAVEL_TOOL
    description = "Inertia.js guidelines for Laravel backed single page apps"
    homepage = "https://inertiajs.com"
    keywords = ("inertia", "laravel", "spa")
    supported_versions = ("1.x", "2.x")
    guideline_files = (
        ("inertia/guidelines/laravel-tool.md", GuidelineCategory.FRAMEWORK),
        ("inertia/guidelines/gemini-analysis.md", GuidelineCategory.FRAMEWORK),
    )
    supported_extensions = (".php", ".js", ".ts", ".jsx", ".tsx", ".vue", ".svelte")
    config_files = (
        "config/inertia.php",
        "vite.config.js",
        "vite.config.ts",
        "webpack.config.js",
        "webpack.mix.js",
    )

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("laravel/framework") and context.has_composer_package(
            "inertiajs/inertia-laravel"
        ):
            evidence.append("inertiajs/inertia-laravel in composer.json dependencies")
            confidence += 0.7

        adapters = [a for a in INERTIA_ADAPTERS if context.has_dependency(a[0])]
        for _, label, _ in adapters:
            evidence.append(f"Inertia {label} adapter detected")
            confidence += 0.6

        pages = [f for f in context.files if any(d in f for d in INERTIA_PAGE_DIRS)]
        if pages:
            evidence.append(f"Inertia Pages directory found: {len(pages)} files")
            confidence += scaled(len(pages), 0.05, 0.3)

        if any("app/Http/Middleware" in f and "Inertia" in f for f in context.files):
            evidence.append("Inertia middleware found")
            confidence += 0.2

        if context.has_file("config/inertia.php"):
            evidence.append("Inertia config file found")
            confidence += 0.2

        if any(
            ("resources/js/app." in f or "resources/ts/app." in f)
            and f.endswith((".js", ".ts", ".jsx", ".tsx"))
            for f in context.files
        ):
            evidence.append("Frontend app files found (likely Inertia setup)")
            confidence += 0.1

        frontend_files = context.files_with_suffix(*FRONTEND_EXTENSIONS)
        if frontend_files:
            evidence.append(f"Frontend component files found: {len(frontend_files)}")
            confidence += 0.1

        excludes: list[str] = []
        for _, label, framework in adapters:
            if framework not in excludes:
                excludes.append(framework)
                evidence.append(
                    f"Inertia handles {label.split()[0]} integration - "
                    f"excluding standalone {label.split()[0]} guidelines"
                )

        return self._result(
            confidence,
            evidence,
            threshold=0.4,
            excludes=excludes,
            adapters=[a[0] for a in adapters],
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        return composer_major(context, "inertiajs/inertia-laravel")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        config_files = context.stack.config_files
        run, install = laravel_node_commands(context)

        dev = ["php artisan serve", f"{run} dev"]
        if "vite.config.js" in config_files or "vite.config.ts" in config_files:
            # Vite first for HMR
            dev = [f"{run} dev", "php artisan serve"]
        if "webpack.config.js" in config_files or "webpack.mix.js" in config_files:
            dev.append(f"{run} watch")

        return StackCommands(
            dev=dev,
            build=[f"{run} build", "php artisan optimize"],
            test=["php artisan test", f"{run} test"],
            lint=["./vendor/bin/pint", f"{run} lint"],
            install=["composer install", install],
        )


class FluxFreeModule(BaseModule):
    """Flux UI, free edition."""

    id = "flux-free"
    name = "Flux UI Free"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.LARAVEL_TOOL
    description = "Flux UI free component library for Livewire"
    homepage = "https://fluxui.dev"
    keywords = ("flux", "livewire", "components", "ui")
    supported_versions = ("1.x",)
    guideline_files = (("flux-free/guidelines/components.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".php", ".blade.php")
    config_files = ("config/flux.php",)

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("livewire/flux"):
            if has_flux_pro_indicators(context):
                return DetectionResult.not_detected(
                    "Flux UI Pro version detected - Free version not applicable",
                    pro=True,
                )
            evidence.append("Flux UI found in composer.json dependencies")
            evidence.append("Flux UI Free version detected")
            confidence += 0.7

        livewire = has_livewire(context)
        if not livewire and confidence > 0:
            evidence.append("Warning: Flux UI requires Livewire")
            confidence *= 0.5
        elif livewire:
            evidence.append("Livewire framework detected (required for Flux)")
            confidence += 0.2

        laravel = has_laravel(context)
        if laravel:
            evidence.append("Laravel framework detected")
            confidence += 0.1

        blade_usage = any(
            f.endswith(".blade.php")
            and ("/livewire/" in f or "/components/" in f or "resources/views/" in f)
            for f in context.files
        )
        if blade_usage:
            evidence.append("Flux UI component usage detected")
            confidence += 0.3

        return self._result(
            confidence,
            evidence,
            threshold=0.6,
            required=context.has_composer_package("livewire/flux"),
            livewire=livewire,
            laravel=laravel,
            pro=False,
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        spec = context.composer_spec("livewire/flux")
        return normalize_version(spec) if spec else None

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        return StackCommands(
            dev=["php artisan serve", "php artisan livewire:publish --config"],
            install=["composer install", "php artisan flux:install"],
        )


class FluxProModule(BaseModule):
    """Flux UI Pro. Includes everything in the free edition."""

    id = "flux-pro"
    name = "Flux UI Pro"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.LARAVEL_TOOL
    description = "Flux UI Pro component library for Livewire"
    homepage = "https://fluxui.dev/pricing"
    keywords = ("flux", "livewire", "components", "ui", "pro")
    supported_versions = ("1.x",)
    supersedes = ("flux-free",)
    guideline_files = (
        ("flux-pro/guidelines/components.md", GuidelineCategory.FRAMEWORK),
        ("flux-pro/guidelines/pro-features.md", GuidelineCategory.FRAMEWORK),
    )
    supported_extensions = (".php", ".blade.php")
    config_files = ("config/flux.php", "config/livewire.php", ".env", ".env.local")

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("livewire/flux"):
            if not has_flux_pro_indicators(context):
                return DetectionResult.not_detected(
                    "Flux UI detected but no Pro version indicators found",
                    pro=False,
                )
            evidence.append("Flux UI found in composer.json dependencies")
            evidence.append("Flux UI Pro version indicators detected")
            confidence += 1.0

        livewire = has_livewire(context)
        if not livewire and confidence > 0:
            evidence.append("Warning: Flux UI requires Livewire")
            confidence *= 0.5
        elif livewire:
            evidence.append("Livewire framework detected (required for Flux)")
            confidence += 0.1

        laravel = has_laravel(context)
        if laravel:
            evidence.append("Laravel framework detected")
            confidence += 0.1

        pro_components = any(
            f.endswith(".blade.php")
            and (
                "/pro/" in f
                or "flux-pro" in f
                or "/premium/" in f
                or any(component in f.lower() for component in FLUX_PRO_COMPONENTS)
            )
            for f in context.files
        )
        if pro_components:
            evidence.append("Flux UI Pro components detected")
            confidence += 0.4

        license_found = any(key in context.env_keys for key in FLUX_LICENSE_KEYS) or any(
            marker in name
            for name in list(context.files) + sorted(context.config_files)
            for marker in FLUX_LICENSE_FILES
        )
        if license_found:
            evidence.append("Flux UI Pro license or configuration detected")
            confidence += 0.3

        return self._result(
            confidence,
            evidence,
            threshold=0.8,
            required=context.has_composer_package("livewire/flux"),
            livewire=livewire,
            laravel=laravel,
            pro_components=pro_components,
            license=license_found,
            pro=True,
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        spec = context.composer_spec("livewire/flux")
        return normalize_version(spec) if spec else None

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        return StackCommands(
            dev=[
                "php artisan serve",
                "php artisan livewire:publish --config",
                "php artisan flux:publish --pro",
            ],
            install=["composer install", "php artisan flux:install --pro"],
        )


def _found_config_files(context: DetectionContext, names: tuple[str, ...]) -> list[str]:
    return [name for name in names if context.has_file(name)]


class FolioModule(BaseModule):
    """Laravel Folio page-based routing."""

    id = "folio"
    name = "Laravel Folio"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.LARAVEL_TOOL
    description = "Laravel Folio page-based routing guidelines"
    homepage = "https://laravel.com/docs/folio"
    keywords = ("php", "laravel", "routing", "pages", "file-based")
    guideline_files = (
        ("folio/guidelines/routing.md", GuidelineCategory.FRAMEWORK),
        ("folio/guidelines/page-organization.md", GuidelineCategory.FRAMEWORK),
    )
    supported_extensions = (".php", ".blade.php")
    config_files = FOLIO_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("laravel/folio"):
            evidence.append("Laravel Folio found in composer.json dependencies")
            confidence += 0.8

        laravel = has_laravel(context)
        if not laravel and confidence > 0:
            evidence.append("Warning: Folio requires Laravel framework")
            confidence *= 0.5
        elif laravel:
            evidence.append("Laravel framework detected (required for Folio)")
            confidence += 0.2

        pages = [f for f in context.files_under(FOLIO_PAGES_DIR) if f.endswith(".blade.php")]
        if pages:
            evidence.append(f"Folio pages directory found ({FOLIO_PAGES_DIR}/)")
            confidence += 0.6

        found = _found_config_files(context, FOLIO_CONFIG_FILES)
        if found:
            evidence.append(f"Folio config found: {', '.join(found)}")
            confidence += 0.3

        if any(pattern in f for f in context.files for pattern in FOLIO_PAGE_PATTERNS):
            evidence.append("Folio page patterns detected in files")
            confidence += 0.4

        providers = any(f in ("config/app.php", "bootstrap/providers.php") for f in context.files)
        if providers and confidence > 0:
            evidence.append("Laravel configuration files found")
            confidence += 0.1

        return self._result(
            confidence,
            evidence,
            threshold=0.7,
            required=context.has_composer_package("laravel/folio")
            or context.has_file("config/folio.php"),
            laravel=laravel,
            pages=len(pages),
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        spec = context.composer_spec("laravel/folio")
        return normalize_version(spec) if spec else None

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        return StackCommands(
            dev=["php artisan folio:list", "php artisan folio:page", "php artisan serve"],
            install=["composer install", "php artisan folio:install"],
        )


class VoltModule(BaseModule):
    """Livewire Volt single-file components. Requires Livewire."""

    id = "volt"
    name = "Livewire Volt"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.LARAVEL_TOOL
    description = "Livewire Volt functional component guidelines"
    homepage = "https://livewire.laravel.com/docs/volt"
    keywords = ("php", "laravel", "livewire", "volt", "functional", "reactive")
    guideline_files = (
        ("volt/guidelines/functional-api.md", GuidelineCategory.FRAMEWORK),
        ("volt/guidelines/livewire-integration.md", GuidelineCategory.FRAMEWORK),
        ("volt/guidelines/testing.md", GuidelineCategory.TESTING),
    )
    supported_extensions = (".php", ".blade.php")
    config_files = VOLT_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("livewire/volt"):
            evidence.append("Livewire Volt found in composer.json dependencies")
            confidence += 0.8

        livewire = has_livewire(context)
        if not livewire and confidence > 0:
            evidence.append("Warning: Volt requires Livewire framework")
            confidence *= 0.5
        elif livewire:
            evidence.append("Livewire framework detected (required for Volt)")
            confidence += 0.3

        laravel = has_laravel(context)
        if laravel:
            evidence.append("Laravel framework detected (required for Volt)")
            confidence += 0.2

        components = [
            f for f in context.files
            if any(pattern in f for pattern in VOLT_COMPONENT_PATTERNS)
            or (f.endswith(".blade.php") and "volt" in f)
        ]
        if components:
            evidence.append("Volt component patterns detected in Blade files")
            confidence += 0.6

        if any("/volt/" in f for f in context.files):
            evidence.append("Volt-specific directories found")
            confidence += 0.4

        found = _found_config_files(context, VOLT_CONFIG_FILES)
        if found:
            evidence.append(f"Volt/Livewire config found: {', '.join(found)}")
            confidence += 0.2

        volt_components = [
            f for f in context.files
            if f.endswith(".blade.php") and ("/volt/" in f or ".volt." in f)
        ]
        return self._result(
            confidence,
            evidence,
            threshold=0.7,
            required=context.has_composer_package("livewire/volt")
            or context.has_file("config/volt.php"),
            livewire=livewire,
            laravel=laravel,
            components=len(volt_components),
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        spec = context.composer_spec("livewire/volt")
        return normalize_version(spec) if spec else None

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        return StackCommands(
            dev=["php artisan make:volt", "php artisan volt:list", "php artisan serve"],
            test=["php artisan test --filter=Volt", "php artisan test tests/Feature/Volt/"],
            install=["composer install", "php artisan volt:install"],
        )


class PennantModule(BaseModule):
    """Laravel Pennant feature flags."""

    id = "pennant"
    name = "Laravel Pennant"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.LARAVEL_TOOL
    description = "Laravel Pennant feature flag guidelines"
    homepage = "https://laravel.com/docs/pennant"
    keywords = ("php", "laravel", "feature-flags", "toggles", "deployment")
    guideline_files = (("pennant/guidelines/feature-flags.md", GuidelineCategory.FEATURE),)
    supported_extensions = (".php",)
    config_files = PENNANT_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_composer_package("laravel/pennant"):
            evidence.append("Laravel Pennant found in composer.json dependencies")
            confidence += 0.8

        laravel = has_laravel(context)
        if not laravel and confidence > 0:
            evidence.append("Warning: Pennant requires Laravel framework")
            confidence *= 0.5
        elif laravel:
            evidence.append("Laravel framework detected (required for Pennant)")
            confidence += 0.2

        found = _found_config_files(context, PENNANT_CONFIG_FILES)
        if found:
            evidence.append(f"Pennant config found: {', '.join(found)}")
            confidence += 0.4

        flags = any(pattern in f for f in context.files for pattern in PENNANT_FLAG_PATTERNS)
        if flags:
            evidence.append("Feature flag usage patterns detected")
            confidence += 0.3

        return self._result(
            confidence,
            evidence,
            threshold=0.7,
            required=context.has_composer_package("laravel/pennant")
            or context.has_file("config/pennant.php"),
            laravel=laravel,
            flags=flags,
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        spec = context.composer_spec("laravel/pennant")
        return normalize_version(spec) if spec else None

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        return StackCommands(
            dev=["php artisan pennant:purge", "php artisan pennant:clear"],
            install=["composer install", "php artisan pennant:install"],
        )
