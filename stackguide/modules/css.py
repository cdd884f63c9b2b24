"""CSS framework modules: Tailwind CSS, Bootstrap and Bulma."""

from pathlib import PurePosixPath

from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import GuidelineCategory, ModuleKind, PriorityClass
from stackguide.models.stack import ModuleContext, StackCommands
from stackguide.modules.base import BaseModule, npm_major

TAILWIND_PLUGINS = (
    "@tailwindcss/typography",
    "@tailwindcss/forms",
    "@headlessui/react",
    "@headlessui/vue",
)
TAILWIND_CONFIG_FILES = (
    "tailwind.config.js",
    "tailwind.config.ts",
    "tailwind.config.mjs",
    "tailwind.config.cjs",
)
POSTCSS_CONFIG_FILES = ("postcss.config.js", "postcss.config.ts")
TAILWIND_ENTRY_STYLESHEETS = ("globals", "app", "main", "index", "style")
COMPONENT_EXTENSIONS = (".jsx", ".tsx", ".vue", ".svelte")

BOOTSTRAP_INTEGRATIONS = (
    (("react-bootstrap",), "React Bootstrap integration detected"),
    (("vue-bootstrap", "bootstrap-vue", "bootstrap-vue-next"), "Vue Bootstrap integration detected"),
    (("@ng-bootstrap/ng-bootstrap",), "Angular Bootstrap integration detected"),
)
BOOTSTRAP_PACKAGES = ("bootstrap", "react-bootstrap", "bootstrap-vue", "bootstrap-vue-next")

BULMA_INTEGRATIONS = (
    (("@bulma/extensions",), 0.1, "Bulma extensions detected"),
    (("bulma-extensions",), 0.1, "Bulma community extensions detected"),
    (("react-bulma-components",), 0.2, "React Bulma components detected"),
    (("vue-bulma-components", "buefy"), 0.2, "Vue Bulma components detected"),
    (("@angular/cdk", "ngx-bulma"), 0.2, "Angular Bulma components detected"),
)
BULMA_PACKAGES = (
    "bulma",
    "react-bulma-components",
    "buefy",
    "ngx-bulma",
    "vue-bulma-components",
    "bulma-extensions",
    "@bulma/extensions",
)
BULMA_BUILD_CONFIG_FILES = ("webpack.config.js", "webpack.config.ts")
BULMA_GULP_FILES = ("gulpfile.js", "gulpfile.ts")


def _stylesheet_stem(path: str) -> str:
    return PurePosixPath(path).stem.lower()


class TailwindModule(BaseModule):
    """Tailwind CSS."""

    id = "tailwind"
    name = "Tailwind CSS"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.CSS_FRAMEWORK
    description = "Tailwind CSS utility-first styling guidelines"
    homepage = "https://tailwindcss.com"
    keywords = ("tailwind", "css", "utility")
    supported_versions = ("3.x", "4.x")
    guideline_files = (("tailwind/guidelines/css-framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".css", ".scss", ".html", ".jsx", ".tsx", ".vue", ".svelte")
    config_files = TAILWIND_CONFIG_FILES + POSTCSS_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_dependency("tailwindcss"):
            evidence.append("tailwindcss in package.json dependencies")
            confidence += 0.8

        for plugin in TAILWIND_PLUGINS:
            if context.has_dependency(plugin):
                evidence.append(f"Tailwind ecosystem package: {plugin}")
                confidence += 0.1

        config = next((name for name in TAILWIND_CONFIG_FILES if context.has_config(name)), None)
        if config is not None:
            evidence.append(f"Tailwind config file: {config}")
            confidence += 0.6

        if any(context.has_config(name) for name in POSTCSS_CONFIG_FILES):
            evidence.append("PostCSS config found (commonly used with Tailwind)")
            confidence += 0.1

        stylesheets = [
            f for f in context.files_with_suffix(".css")
            if _stylesheet_stem(f) in TAILWIND_ENTRY_STYLESHEETS
        ]
        if stylesheets:
            evidence.append(f"CSS entry files found: {len(stylesheets)}")
            confidence += 0.2

        if context.files_with_suffix(*COMPONENT_EXTENSIONS):
            evidence.append("Component files found (may use Tailwind classes)")
            confidence += 0.1

        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            required=context.has_dependency("tailwindcss") or config is not None,
            config=config,
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "tailwindcss")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        pm = context.js_package_manager
        config_files = context.stack.config_files
        runner = "npx" if pm == "npm" else pm

        dev = [f"{pm} run dev"]
        build = [f"{pm} run build"]
        if any(name in config_files for name in TAILWIND_CONFIG_FILES):
            dev.insert(0, f"{runner} tailwindcss build")
            build.insert(0, f"{runner} tailwindcss build --minify")
        if any(name in config_files for name in POSTCSS_CONFIG_FILES):
            build.append(f"{runner} postcss src/styles.css -o dist/styles.css")

        return StackCommands(
            dev=dev,
            build=build,
            test=[f"{pm} run test"],
            lint=[f"{pm} run lint"],
            install=[f"{pm} install"],
        )


class BootstrapModule(BaseModule):
    """Bootstrap."""

    id = "bootstrap"
    name = "Bootstrap"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.CSS_FRAMEWORK
    description = "Bootstrap component and grid guidelines"
    homepage = "https://getbootstrap.com"
    keywords = ("bootstrap", "css", "components")
    supported_versions = ("4.x", "5.x")
    guideline_files = (("bootstrap/guidelines/css-framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".css", ".scss", ".html", ".js")
    config_files = ("webpack.config.js", "gulpfile.js")

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_dependency("bootstrap"):
            evidence.append("bootstrap in package.json dependencies")
            confidence += 0.8
        if context.has_dependency("bootstrap-icons"):
            evidence.append("Bootstrap Icons detected")
            confidence += 0.1
        if context.has_dependency("@popperjs/core"):
            evidence.append("Popper.js detected (Bootstrap dependency)")
            confidence += 0.1

        for packages, message in BOOTSTRAP_INTEGRATIONS:
            if any(context.has_dependency(p) for p in packages):
                evidence.append(message)
                confidence += 0.2

        bootstrap_styles = [
            f for f in context.files_with_suffix(".css", ".scss")
            if "bootstrap" in f.lower() or "vendor" in f.lower()
        ]
        if bootstrap_styles:
            evidence.append(f"Bootstrap style files found: {len(bootstrap_styles)}")
            confidence += 0.2

        if context.files_with_suffix(".html"):
            evidence.append("HTML files found (may use Bootstrap classes)")
            confidence += 0.1
        if context.files_with_suffix(".jsx", ".tsx", ".vue"):
            evidence.append("Component files found (may use Bootstrap components)")
            confidence += 0.1
        if context.files_with_suffix(".scss"):
            evidence.append("SCSS files found (Bootstrap customization likely)")
            confidence += 0.1

        anchored = any(context.has_dependency(p) for p in BOOTSTRAP_PACKAGES) or any(
            "bootstrap" in f.lower() for f in bootstrap_styles
        )
        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            required=anchored,
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "bootstrap")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        pm = context.js_package_manager
        config_files = context.stack.config_files

        build = [f"{pm} run build"]
        dev = [f"{pm} run dev", f"{pm} run serve", f"{pm} run start"]
        if "webpack.config.js" in config_files:
            build.append("webpack --mode production")
        if "gulpfile.js" in config_files:
            build.append("gulp build")
            dev.append("gulp watch")

        return StackCommands(
            dev=dev,
            build=build,
            test=[f"{pm} run test"],
            lint=[f"{pm} run lint"],
            install=[f"{pm} install"],
        )


class BulmaModule(BaseModule):
    """Bulma."""

    id = "bulma"
    name = "Bulma"
    kind = ModuleKind.LIBRARY
    priority = PriorityClass.CSS_FRAMEWORK
    description = "Bulma flexbox CSS framework guidelines"
    homepage = "https://bulma.io"
    keywords = ("bulma", "css", "flexbox", "sass")
    supported_versions = ("0.9", "1.x")
    guideline_files = (("bulma/guidelines/css-framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".css", ".scss", ".sass", ".html")
    config_files = BULMA_BUILD_CONFIG_FILES + BULMA_GULP_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_dependency("bulma"):
            evidence.append("bulma in package.json dependencies")
            confidence += 0.8

        for packages, weight, message in BULMA_INTEGRATIONS:
            if any(context.has_dependency(p) for p in packages):
                evidence.append(message)
                confidence += weight

        bulma_styles = [
            f for f in context.files_with_suffix(".css", ".scss")
            if "bulma" in f.lower() or "vendor" in f.lower()
        ]
        if bulma_styles:
            evidence.append("CSS files that commonly contain Bulma imports found")
            confidence += 0.2

        if context.files_with_suffix(".html"):
            evidence.append("HTML files found (may use Bulma classes)")
            confidence += 0.1
        if context.files_with_suffix(".jsx", ".tsx", ".vue"):
            evidence.append("Component files found (may use Bulma classes)")
            confidence += 0.1
        if context.files_with_suffix(".scss", ".sass"):
            evidence.append("SCSS/Sass files found (commonly used with Bulma customization)")
            confidence += 0.1

        anchored = any(context.has_dependency(p) for p in BULMA_PACKAGES) or any(
            "bulma" in f.lower() for f in bulma_styles
        )
        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            required=anchored,
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        major = npm_major(context, "bulma")
        if major is None:
            return None
        # 0.9 is the last release line before 1.0
        return "1" if int(major) >= 1 else "0.9"

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        pm = context.js_package_manager
        config_files = context.stack.config_files
        runner = "npx" if pm == "npm" else pm

        dev = [f"{pm} run dev", f"{pm} run serve", f"{pm} run start"]
        build = [f"{pm} run build"]
        if any(name in config_files for name in BULMA_BUILD_CONFIG_FILES):
            build.insert(0, f"{runner} webpack --mode production")
        if any(name in config_files for name in BULMA_GULP_FILES):
            build.append("gulp build")
            dev.insert(0, "gulp watch")

        return StackCommands(
            dev=dev,
            build=build,
            test=[f"{pm} run test"],
            lint=[f"{pm} run lint"],
            install=[f"{pm} install"],
        )
