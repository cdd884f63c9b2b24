"""JavaScript framework modules: React, Vue, Next.js, Nuxt, Svelte, SvelteKit, Solid and Astro."""

from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import GuidelineCategory, ModuleKind, PriorityClass
from stackguide.models.stack import ModuleContext, StackCommands
from stackguide.modules.base import BaseModule, npm_major, scaled

VITE_CONFIG_FILES = ("vite.config.js", "vite.config.ts")
VITEST_CONFIG_FILES = ("vitest.config.js", "vitest.config.ts")
JEST_CONFIG_FILES = ("jest.config.js", "jest.config.ts")
PLAYWRIGHT_CONFIG_FILES = ("playwright.config.js", "playwright.config.ts")

REACT_STATE_LIBRARIES = ("redux", "@reduxjs/toolkit", "zustand", "jotai", "recoil")
SVELTEKIT_ADAPTERS = (
    "@sveltejs/adapter-auto",
    "@sveltejs/adapter-static",
    "@sveltejs/adapter-node",
    "@sveltejs/adapter-vercel",
    "@sveltejs/adapter-netlify",
)
SVELTEKIT_ROUTE_FILES = (
    "src/routes/+layout.svelte",
    "src/routes/+page.svelte",
    "src/routes/+layout.js",
    "src/routes/+page.js",
    "src/routes/+layout.ts",
    "src/routes/+page.ts",
)
SOLID_BUILD_TOOLS = ("vite-plugin-solid", "@solidjs/router", "solid-start", "babel-preset-solid")
SOLID_START_CONFIG_FILES = ("app.config.ts", "app.config.js")
ASTRO_CONFIG_FILES = ("astro.config.js", "astro.config.ts", "astro.config.mjs")
ASTRO_INTEGRATIONS = (
    "@astrojs/react",
    "@astrojs/vue",
    "@astrojs/svelte",
    "@astrojs/solid-js",
    "@astrojs/tailwind",
    "@astrojs/image",
    "@astrojs/sitemap",
)


def _has_any_config(context: DetectionContext, names: tuple[str, ...]) -> bool:
    return any(context.has_config(name) for name in names)


def _script_mentions(context: DetectionContext, needle: str, *scripts: str) -> bool:
    declared = context.scripts()
    return any(needle in declared.get(script, "") for script in scripts)


def _dependency_evidence(
    context: DetectionContext,
    package: str,
    weight: float,
    evidence: list[str],
) -> float:
    """Score a package found in dependencies and/or devDependencies."""
    score = 0.0
    for section in ("dependencies", "devDependencies"):
        if context.has_dependency(package, section):
            evidence.append(f"{package} in package.json {section}")
            score += weight
    return score


def node_project_commands(
    context: ModuleContext,
    dev: tuple[str, ...] = ("dev",),
    build: tuple[str, ...] = ("build",),
    test: tuple[str, ...] = ("test",),
    extra_lint: tuple[str, ...] = (),
    test_runners: tuple[tuple[tuple[str, ...], str], ...] = (
        (VITEST_CONFIG_FILES, "test:vitest"),
        (JEST_CONFIG_FILES, "test:jest"),
    ),
) -> StackCommands:
    """Commands of a package.json driven project.

    Args:
        context: Module context with the aggregated stack.
        dev: Scripts for development.
        build: Scripts for building.
        test: Scripts for testing.
        extra_lint: Lint scripts on top of ``lint`` and ``lint:fix``.
        test_runners: Config files that add a dedicated test script.
    """
    pm = context.js_package_manager
    config_files = context.stack.config_files

    tests = [f"{pm} run {script}" for script in test]
    for runner_files, script in test_runners:
        if any(name in config_files for name in runner_files):
            tests.append(f"{pm} run {script}")

    return StackCommands(
        dev=[f"{pm} run {script}" for script in dev],
        build=[f"{pm} run {script}" for script in build],
        test=tests,
        lint=[f"{pm} run lint", f"{pm} run lint:fix"] + [f"{pm} run {s}" for s in extra_lint],
        install=[f"{pm} install"],
    )


class ReactModule(BaseModule):
    """React."""

    id = "react"
    name = "React"
    kind = ModuleKind.FRAMEWORK
    priority = PriorityClass.FRAMEWORK
    description = "React library guidelines, hooks and component patterns"
    homepage = "https://react.dev"
    keywords = ("react", "jsx", "hooks", "components")
    supported_versions = ("17.x", "18.x", "19.x")
    guideline_files = (("react/guidelines/framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".js", ".jsx", ".ts", ".tsx")
    config_files = (
        "vite.config.js",
        "vite.config.ts",
        "webpack.config.js",
        "craco.config.js",
        "jsconfig.json",
    ) + VITEST_CONFIG_FILES + JEST_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = _dependency_evidence(context, "react", 0.9, evidence)

        if context.has_dependency("react-dom", "dependencies"):
            evidence.append("react-dom in dependencies")
            confidence += 0.8

        has_cra = context.has_dependency("react-scripts")
        if has_cra:
            evidence.append("Create React App detected")
            confidence += 0.7

        if _has_any_config(context, VITE_CONFIG_FILES) and (
            context.has_dependency("@vitejs/plugin-react")
            or context.has_dependency("@vitejs/plugin-react-swc")
        ):
            evidence.append("Vite with React plugin detected")
            confidence += 0.7

        react_files = [
            f for f in context.files
            if f.endswith((".jsx", ".tsx")) or (f.endswith((".js", ".ts")) and "src/" in f)
        ]
        if react_files:
            evidence.append(f"React component files found: {len(react_files)}")
            confidence += scaled(len(react_files), 0.05, 0.3)

        if context.has_dependency("react-router-dom"):
            evidence.append("React Router detected")
            confidence += 0.2

        for library in REACT_STATE_LIBRARIES:
            if context.has_dependency(library):
                evidence.append(f"React state management ({library}) detected")
                confidence += 0.1
                break

        for directory in ("src/components", "src/pages", "src/hooks"):
            if context.files_under(directory):
                evidence.append(f"React directory structure: {directory}")
                confidence += 0.1

        if "public/index.html" in context.files:
            evidence.append("React app structure (public/index.html)")
            confidence += 0.1

        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            create_react_app=has_cra,
            react_files=len(react_files),
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "react")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        commands = node_project_commands(context, dev=("dev", "start"))
        if context.detection_result.metadata.get("create_react_app"):
            commands.test.append(f"{context.js_package_manager} run test -- --coverage")
        return commands


class VueModule(BaseModule):
    """Vue.js."""

    id = "vue"
    name = "Vue.js"
    kind = ModuleKind.FRAMEWORK
    priority = PriorityClass.FRAMEWORK
    description = "Vue.js guidelines, Composition API and single file components"
    homepage = "https://vuejs.org"
    keywords = ("vue", "sfc", "composition-api")
    supported_versions = ("2.x", "3.x")
    guideline_files = (("vue/guidelines/framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".vue", ".js", ".ts")
    config_files = ("vue.config.js", "vue.config.ts") + VITE_CONFIG_FILES + VITEST_CONFIG_FILES + JEST_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = _dependency_evidence(context, "vue", 0.9, evidence)

        for name in ("vue.config.js", "vue.config.ts"):
            if context.has_config(name):
                evidence.append(f"Vue config file: {name}")
                confidence += 0.8

        if _has_any_config(context, VITE_CONFIG_FILES) and context.has_dependency("@vitejs/plugin-vue"):
            evidence.append("Vite with Vue plugin detected")
            confidence += 0.7

        vue_files = context.files_with_suffix(".vue")
        if vue_files:
            evidence.append(f"Vue SFC files found: {len(vue_files)}")
            confidence += scaled(len(vue_files), 0.1, 0.5)

        if context.has_dependency("vue-router"):
            evidence.append("Vue Router detected")
            confidence += 0.2

        if context.has_dependency("vuex") or context.has_dependency("pinia"):
            evidence.append("Vue state management (Vuex/Pinia) detected")
            confidence += 0.2

        for directory in ("src/components", "src/views", "src/pages"):
            if context.files_under(directory):
                evidence.append(f"Vue directory structure: {directory}")
                confidence += 0.1

        return self._result(confidence, evidence, threshold=0.3, inclusive=False, vue_files=len(vue_files))

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "vue")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        return node_project_commands(context, dev=("dev", "serve"), test=("test", "test:unit"))


class NextModule(BaseModule):
    """Next.js. Replaces the standalone React guidelines."""

    id = "next"
    name = "Next.js"
    kind = ModuleKind.FRAMEWORK
    priority = PriorityClass.META_FRAMEWORK
    description = "Next.js guidelines for the App Router, Pages Router and rendering modes"
    homepage = "https://nextjs.org"
    keywords = ("next", "nextjs", "react", "ssr")
    supported_versions = ("13.x", "14.x")
    supersedes = ("react",)
    guideline_files = (("next/guidelines/framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".js", ".jsx", ".ts", ".tsx")
    config_files = ("next.config.js", "next.config.ts", "next.config.mjs") + VITEST_CONFIG_FILES + JEST_CONFIG_FILES

    ENTRY_FILES = (
        "pages/_app.js",
        "pages/_app.tsx",
        "pages/_document.js",
        "pages/_document.tsx",
        "app/layout.js",
        "app/layout.tsx",
        "app/page.js",
        "app/page.tsx",
    )

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = _dependency_evidence(context, "next", 0.9, evidence)
        has_config = False

        for name in ("next.config.js", "next.config.ts", "next.config.mjs"):
            if context.has_config(name):
                evidence.append(f"Next.js config file: {name}")
                confidence += 0.8
                has_config = True

        for directory in ("pages", "app", "public"):
            if context.files_under(directory):
                evidence.append(f"Next.js directory structure: {directory}")
                confidence += 0.3

        for name in self.ENTRY_FILES:
            if name in context.files:
                evidence.append(f"Next.js file: {name}")
                confidence += 0.2

        if context.has_dir(".next"):
            evidence.append("Next.js build directory (.next) found")
            confidence += 0.1

        has_scripts = _script_mentions(context, "next", "dev", "build", "start")
        if has_scripts:
            evidence.append("Next.js scripts in package.json")
            confidence += 0.3

        # Directory names alone are shared with Laravel and plain React apps
        anchored = context.has_dependency("next") or has_config or has_scripts
        result = self._result(confidence, evidence, threshold=0.3, inclusive=False, required=anchored)
        if result.detected:
            result.evidence.append("Next.js includes React - excluding standalone React guidelines")
        return result

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "next")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        return node_project_commands(context, dev=("dev", "start"), build=("build", "export"))


class NuxtModule(BaseModule):
    """Nuxt. Replaces the standalone Vue guidelines."""

    id = "nuxt"
    name = "Nuxt.js"
    kind = ModuleKind.FRAMEWORK
    priority = PriorityClass.META_FRAMEWORK
    description = "Nuxt guidelines for file based routing, rendering modes and modules"
    homepage = "https://nuxt.com"
    keywords = ("nuxt", "vue", "ssr")
    supported_versions = ("2.x", "3.x")
    supersedes = ("vue",)
    guideline_files = (("nuxt/guidelines/framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".vue", ".js", ".ts")
    config_files = ("nuxt.config.js", "nuxt.config.ts") + VITEST_CONFIG_FILES + JEST_CONFIG_FILES

    DIRECTORIES = ("pages", "components", "layouts", "middleware", "plugins", "assets", "static")

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = _dependency_evidence(context, "nuxt", 0.9, evidence)
        has_config = False

        if context.has_dependency("nuxt-edge"):
            evidence.append("nuxt-edge in dependencies")
            confidence += 0.8

        for name in ("nuxt.config.js", "nuxt.config.ts"):
            if context.has_config(name):
                evidence.append(f"Nuxt config file: {name}")
                confidence += 0.8
                has_config = True

        directories = [d for d in self.DIRECTORIES if context.files_under(d)]
        for directory in directories:
            evidence.append(f"Nuxt directory structure: {directory}")
            confidence += 0.1
        if len(directories) >= 3:
            evidence.append("Multiple Nuxt directories found")
            confidence += 0.2

        if context.has_dir(".nuxt"):
            evidence.append("Nuxt build directory (.nuxt) found")
            confidence += 0.1

        has_scripts = _script_mentions(context, "nuxt", "dev", "build", "generate")
        if has_scripts:
            evidence.append("Nuxt scripts in package.json")
            confidence += 0.3

        if context.has_dependency("vue"):
            evidence.append("Vue.js detected (Nuxt dependency)")
            confidence += 0.1

        anchored = (
            context.has_dependency("nuxt")
            or context.has_dependency("nuxt-edge")
            or has_config
            or has_scripts
        )
        result = self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            required=anchored,
            directories=len(directories),
        )
        if result.detected:
            result.evidence.append("Nuxt.js includes Vue.js - excluding standalone Vue guidelines")
        return result

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "nuxt") or npm_major(context, "nuxt-edge")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        return node_project_commands(context, dev=("dev", "start"), build=("build", "generate"))


class SvelteModule(BaseModule):
    """Svelte."""

    id = "svelte"
    name = "Svelte"
    kind = ModuleKind.FRAMEWORK
    priority = PriorityClass.FRAMEWORK
    description = "Svelte component guidelines, reactivity and stores"
    homepage = "https://svelte.dev"
    keywords = ("svelte", "components")
    supported_versions = ("3.x", "4.x", "5.x")
    guideline_files = (("svelte/guidelines/framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".svelte", ".js", ".ts")
    config_files = ("svelte.config.js", "rollup.config.js") + VITE_CONFIG_FILES + VITEST_CONFIG_FILES + JEST_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = _dependency_evidence(context, "svelte", 0.9, evidence)

        if _has_any_config(context, VITE_CONFIG_FILES) and context.has_dependency(
            "@sveltejs/vite-plugin-svelte"
        ):
            evidence.append("Vite with Svelte plugin detected")
            confidence += 0.8

        if context.has_config("rollup.config.js") and context.has_dependency("rollup-plugin-svelte"):
            evidence.append("Rollup with Svelte plugin detected")
            confidence += 0.7

        svelte_files = context.files_with_suffix(".svelte")
        if svelte_files:
            evidence.append(f"Svelte component files found: {len(svelte_files)}")
            confidence += scaled(len(svelte_files), 0.1, 0.5)

        for directory in ("src/lib", "src/routes", "src/components"):
            if context.files_under(directory):
                evidence.append(f"Svelte directory structure: {directory}")
                confidence += 0.1

        if context.has_config("svelte.config.js"):
            evidence.append("svelte.config.js found")
            confidence += 0.7

        return self._result(
            confidence, evidence, threshold=0.3, inclusive=False, svelte_files=len(svelte_files)
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "svelte")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        extra_lint = ("check",) if "tsconfig.json" in context.stack.config_files else ()
        return node_project_commands(context, extra_lint=extra_lint)


class SvelteKitModule(BaseModule):
    """SvelteKit."""

    id = "sveltekit"
    name = "SvelteKit"
    kind = ModuleKind.FRAMEWORK
    priority = PriorityClass.META_FRAMEWORK
    description = "SvelteKit guidelines for routing, load functions and adapters"
    homepage = "https://kit.svelte.dev"
    keywords = ("sveltekit", "svelte", "ssr")
    supported_versions = ("1.x", "2.x")
    guideline_files = (("sveltekit/guidelines/framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".svelte", ".js", ".ts")
    config_files = ("svelte.config.js",) + VITE_CONFIG_FILES + VITEST_CONFIG_FILES + PLAYWRIGHT_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = _dependency_evidence(context, "@sveltejs/kit", 0.9, evidence)

        for adapter in SVELTEKIT_ADAPTERS:
            if context.has_dependency(adapter):
                evidence.append(f"SvelteKit adapter detected: {adapter}")
                confidence += 0.3
                break

        config = context.text("svelte.config.js")
        kit_config = config is not None and ("@sveltejs/kit" in config or "kit:" in config)
        if kit_config:
            evidence.append("svelte.config.js with SvelteKit configuration")
            confidence += 0.8

        for directory in ("src/routes", "src/lib"):
            if context.files_under(directory):
                evidence.append(f"SvelteKit directory structure: {directory}")
                confidence += 0.2

        if "src/app.html" in context.files:
            evidence.append("SvelteKit file: src/app.html")
            confidence += 0.3

        route_files = [name for name in SVELTEKIT_ROUTE_FILES if name in context.files]
        for name in route_files:
            evidence.append(f"SvelteKit file: {name}")
            confidence += 0.2

        if context.has_dir(".svelte-kit"):
            evidence.append("SvelteKit build directory (.svelte-kit) found")
            confidence += 0.1

        if _script_mentions(context, "vite", "dev", "build", "preview"):
            evidence.append("SvelteKit Vite scripts in package.json")
            confidence += 0.2

        # Vite scripts and src/lib are common to any Vite project
        anchored = context.has_dependency("@sveltejs/kit") or kit_config or bool(route_files)
        return self._result(confidence, evidence, threshold=0.3, inclusive=False, required=anchored)

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "@sveltejs/kit")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        extra_lint = ("check",) if "tsconfig.json" in context.stack.config_files else ()
        return node_project_commands(
            context,
            build=("build", "preview"),
            extra_lint=extra_lint,
            test_runners=(
                (VITEST_CONFIG_FILES, "test:vitest"),
                (PLAYWRIGHT_CONFIG_FILES, "test:playwright"),
            ),
        )


class SolidModule(BaseModule):
    """Solid.js."""

    id = "solid"
    name = "Solid.js"
    kind = ModuleKind.FRAMEWORK
    priority = PriorityClass.FRAMEWORK
    description = "Solid.js guidelines for fine-grained reactivity and JSX components"
    homepage = "https://www.solidjs.com"
    keywords = ("solid", "reactive", "jsx", "signals")
    supported_versions = ("1.x",)
    guideline_files = (("solid/guidelines/framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".jsx", ".tsx", ".js", ".ts")
    config_files = (
        VITE_CONFIG_FILES
        + SOLID_START_CONFIG_FILES
        + ("babel.config.js", ".babelrc")
        + VITEST_CONFIG_FILES
        + JEST_CONFIG_FILES
    )

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = _dependency_evidence(context, "solid-js", 0.9, evidence)

        if _has_any_config(context, VITE_CONFIG_FILES) and context.has_dependency("vite-plugin-solid"):
            evidence.append("Vite with Solid plugin detected")
            confidence += 0.8

        tools = [tool for tool in SOLID_BUILD_TOOLS if context.has_dependency(tool)]
        for tool in tools:
            evidence.append(f"Solid build tool detected: {tool}")
            confidence += 0.3

        jsx_files = context.files_with_suffix(".jsx", ".tsx")
        if jsx_files:
            evidence.append(f"JSX/TSX files found: {len(jsx_files)}")
            confidence += scaled(len(jsx_files), 0.05, 0.3)

        for directory in ("src/components", "src/routes", "src/pages"):
            if context.files_under(directory):
                evidence.append(f"Solid directory structure: {directory}")
                confidence += 0.1

        if _has_any_config(context, SOLID_START_CONFIG_FILES):
            evidence.append("Solid Start config detected")
            confidence += 0.3

        if any("solid" in script for script in context.scripts().values()):
            evidence.append("Solid-related scripts in package.json")
            confidence += 0.2

        # JSX files and src/ folders are just as common in React apps
        anchored = context.has_dependency("solid-js") or bool(tools)
        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            required=anchored,
            build_tools=tools,
            jsx_files=len(jsx_files),
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "solid-js")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        extra_lint = ("typecheck",) if "tsconfig.json" in context.stack.config_files else ()
        return node_project_commands(context, extra_lint=extra_lint)


class AstroModule(BaseModule):
    """Astro."""

    id = "astro"
    name = "Astro"
    kind = ModuleKind.FRAMEWORK
    priority = PriorityClass.META_FRAMEWORK
    description = "Astro guidelines for content sites, islands and integrations"
    homepage = "https://astro.build"
    keywords = ("astro", "static-site", "islands", "multi-framework")
    supported_versions = ("3.x", "4.x")
    guideline_files = (("astro/guidelines/framework.md", GuidelineCategory.FRAMEWORK),)
    supported_extensions = (".astro", ".js", ".ts", ".jsx", ".tsx")
    config_files = ASTRO_CONFIG_FILES + VITEST_CONFIG_FILES + PLAYWRIGHT_CONFIG_FILES

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = _dependency_evidence(context, "astro", 0.9, evidence)

        configs = [name for name in ASTRO_CONFIG_FILES if context.has_config(name)]
        for name in configs:
            evidence.append(f"Astro config file: {name}")
            confidence += 0.8

        astro_files = context.files_with_suffix(".astro")
        if astro_files:
            evidence.append(f"Astro component files found: {len(astro_files)}")
            confidence += scaled(len(astro_files), 0.1, 0.5)

        for directory in ("src/pages", "src/components", "src/layouts"):
            if context.files_under(directory):
                evidence.append(f"Astro directory structure: {directory}")
                confidence += 0.1

        integrations = [name for name in ASTRO_INTEGRATIONS if context.has_dependency(name)]
        for integration in integrations:
            evidence.append(f"Astro integration detected: {integration}")
            confidence += 0.2

        if context.files_under("public"):
            evidence.append("Public directory found (Astro convention)")
            confidence += 0.1

        has_scripts = _script_mentions(context, "astro", "dev", "build", "preview")
        if has_scripts:
            evidence.append("Astro scripts in package.json")
            confidence += 0.3

        anchored = (
            context.has_dependency("astro") or bool(configs) or bool(astro_files) or has_scripts
        )
        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            required=anchored,
            astro_files=len(astro_files),
            integrations=integrations,
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        return npm_major(context, "astro")

    def generate_commands(self, context: ModuleContext) -> StackCommands:
        extra_lint = ("check",) if "tsconfig.json" in context.stack.config_files else ()
        return node_project_commands(
            context,
            build=("build", "preview"),
            extra_lint=extra_lint,
            test_runners=(
                (VITEST_CONFIG_FILES, "test:vitest"),
                (PLAYWRIGHT_CONFIG_FILES, "test:playwright"),
            ),
        )
