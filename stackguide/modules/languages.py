"""Language modules: JavaScript, TypeScript and PHP."""

import re

from stackguide.core.utils.versions import major_minor
from stackguide.models.context import DetectionContext, DetectionResult
from stackguide.models.module import GuidelineCategory, ModuleKind, PriorityClass
from stackguide.modules.base import BaseModule, npm_major, scaled

NODE_LOCK_FILES = ("package.json", "package-lock.json", "yarn.lock", "pnpm-lock.yaml", "bun.lockb")

JS_CONFIG_FILES = (
    ".eslintrc.js",
    ".eslintrc.cjs",
    ".eslintrc.mjs",
    "babel.config.js",
    "webpack.config.js",
    "rollup.config.js",
    "vite.config.js",
    "jest.config.js",
    "vitest.config.js",
)

JS_DIRECTORIES = ("src", "lib", "public", "dist", "build", "node_modules")

TS_PACKAGES = (
    "@types/node",
    "@types/react",
    "@types/express",
    "ts-node",
    "tsx",
    "ts-loader",
    "typescript-eslint",
)

TS_CONFIG_FILES = (
    "tsconfig.json",
    "tsconfig.build.json",
    "tsconfig.dev.json",
    ".eslintrc.ts",
    "jest.config.ts",
    "vite.config.ts",
    "webpack.config.ts",
)

PHP_CONFIG_FILES = ("php.ini", ".php-version", ".php-cs-fixer.php", "phpunit.xml", "phpstan.neon")
PHP_DIRECTORIES = ("vendor", "app", "src", "public")
PHP_ENTRY_POINTS = ("index.php", "public/index.php", "web/index.php")

_FIRST_NUMBER_RE = re.compile(r"(\d+)")
_MAJOR_MINOR_RE = re.compile(r"(\d+\.\d+)")


def _typescript_sources(context: DetectionContext) -> list[str]:
    return [
        f for f in context.files
        if (f.endswith(".ts") and not f.endswith(".d.ts")) or f.endswith(".tsx")
    ]


def node_to_es_version(node_constraint: str) -> str | None:
    """Rough mapping from a Node.js major to the ECMAScript edition it ships.

    Node 6 is treated as ES2015; each later major adds a year.
    """
    match = _FIRST_NUMBER_RE.search(node_constraint)
    if not match:
        return None
    return f"ES{2015 + int(match.group(1)) - 6}"


class JavaScriptModule(BaseModule):
    """JavaScript on Node.js."""

    id = "javascript"
    name = "JavaScript"
    kind = ModuleKind.LANGUAGE
    priority = PriorityClass.BASE_LANG
    description = "JavaScript language guidelines and modern ECMAScript features"
    homepage = "https://developer.mozilla.org/docs/Web/JavaScript"
    keywords = ("javascript", "ecmascript", "node")
    supported_versions = ("ES2015", "ES2017", "ES2018", "ES2019", "ES2020", "ES2021", "ES2022")
    guideline_files = (("javascript/guidelines/language.md", GuidelineCategory.LANGUAGE),)
    supported_extensions = (".js", ".mjs", ".cjs", ".jsx")
    config_files = NODE_LOCK_FILES + (".nvmrc", ".eslintrc.json", "jsconfig.json") + JS_CONFIG_FILES
    runtime = "node"

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.package_json is not None:
            evidence.append("package.json found")
            confidence += 0.8

        js_files = context.files_with_suffix(".js", ".mjs", ".cjs")
        if js_files:
            evidence.append(f"JavaScript files found: {len(js_files)}")
            confidence += scaled(len(js_files), 0.05, 0.5)

        # One Node.js indicator is enough
        for name in NODE_LOCK_FILES:
            if context.has_config(name):
                evidence.append(f"Node.js file: {name}")
                confidence += 0.2
                break

        for name in JS_CONFIG_FILES:
            if context.has_config(name):
                evidence.append(f"JavaScript config file: {name}")
                confidence += 0.1

        for directory in JS_DIRECTORIES:
            if context.has_dir(directory):
                evidence.append(f"JavaScript directory: {directory}/")
                confidence += 0.05

        ts_files = [f for f in context.files if f.endswith(".ts") and not f.endswith(".d.ts")]
        if len(ts_files) > len(js_files):
            evidence.append("More TypeScript files detected, reducing JavaScript confidence")
            confidence *= 0.5

        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            js_files=len(js_files),
            ts_files=len(ts_files),
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        engines = context.npm_section("engines")
        if engines.get("node"):
            return node_to_es_version(str(engines["node"]))

        for name in (".nvmrc", ".node-version"):
            content = context.text(name)
            if content is not None:
                return node_to_es_version(content.strip())

        return "ES2020"


class TypeScriptModule(BaseModule):
    """TypeScript, layered over JavaScript."""

    id = "typescript"
    name = "TypeScript"
    kind = ModuleKind.LANGUAGE
    priority = PriorityClass.SPECIALIZED_LANG
    description = "TypeScript language guidelines and type system features"
    homepage = "https://www.typescriptlang.org"
    keywords = ("typescript", "types")
    supported_versions = ("4.0", "4.5", "4.9", "5.0", "5.1", "5.2", "5.3", "5.4")
    guideline_files = (("typescript/guidelines/language.md", GuidelineCategory.LANGUAGE),)
    supported_extensions = (".ts", ".tsx", ".d.ts")
    config_files = TS_CONFIG_FILES + ("rollup.config.ts",)
    runtime = "node"

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.has_config("tsconfig.json"):
            evidence.append("tsconfig.json found")
            confidence += 0.9

        if context.has_dependency("typescript"):
            evidence.append("typescript in package.json dependencies")
            confidence += 0.8

        ts_files = _typescript_sources(context)
        if ts_files:
            evidence.append(f"TypeScript files found: {len(ts_files)}")
            confidence += scaled(len(ts_files), 0.1, 0.7)

        dts_files = context.files_with_suffix(".d.ts")
        if dts_files:
            evidence.append(f"TypeScript declaration files found: {len(dts_files)}")
            confidence += scaled(len(dts_files), 0.05, 0.3)

        found_packages = [p for p in TS_PACKAGES if context.has_dependency(p)]
        for package in found_packages:
            evidence.append(f"TypeScript package detected: {package}")
            confidence += 0.1

        for name in TS_CONFIG_FILES:
            if context.has_config(name):
                evidence.append(f"TypeScript config file: {name}")
                confidence += 0.2

        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            ts_files=len(ts_files),
            dts_files=len(dts_files),
            ts_packages=found_packages,
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        spec = context.dependency_spec("typescript")
        if spec is not None:
            return major_minor(spec)
        return npm_major(context, "typescript")


class PHPModule(BaseModule):
    """PHP."""

    id = "php"
    name = "PHP"
    kind = ModuleKind.LANGUAGE
    priority = PriorityClass.SPECIALIZED_LANG
    description = "PHP language guidelines and modern PHP features"
    homepage = "https://www.php.net"
    keywords = ("php",)
    supported_versions = ("8.1", "8.2", "8.3", "8.4", "8.5")
    guideline_files = (("php/guidelines/language.md", GuidelineCategory.LANGUAGE),)
    supported_extensions = (".php", ".phtml", ".php4", ".php5", ".phps")
    config_files = (
        "composer.json",
        "composer.lock",
        ".php-version",
        "php.ini",
        ".php-cs-fixer.php",
        "phpunit.xml",
        "phpunit.xml.dist",
        "phpstan.neon",
        "phpstan.neon.dist",
        "psalm.xml",
        "pint.json",
    )
    runtime = "php"

    def detect(self, context: DetectionContext) -> DetectionResult:
        evidence: list[str] = []
        confidence = 0.0

        if context.composer_json is not None:
            evidence.append("composer.json found")
            confidence += 0.9

        php_files = context.files_with_suffix(".php")
        if php_files:
            evidence.append(f"PHP files found: {len(php_files)}")
            confidence += scaled(len(php_files), 0.1, 0.7)

        for name in PHP_CONFIG_FILES:
            if context.has_config(name):
                evidence.append(f"PHP config file: {name}")
                confidence += 0.2

        for directory in PHP_DIRECTORIES:
            if context.has_dir(directory):
                evidence.append(f"PHP directory structure: {directory}/")
                confidence += 0.1

        for entry_point in PHP_ENTRY_POINTS:
            if entry_point in context.files:
                evidence.append(f"PHP entry point: {entry_point}")
                confidence += 0.2

        return self._result(
            confidence,
            evidence,
            threshold=0.3,
            inclusive=False,
            php_files=len(php_files),
        )

    def detect_version(self, context: DetectionContext) -> str | None:
        constraint = context.composer_section("require").get("php")
        if constraint:
            match = _MAJOR_MINOR_RE.search(str(constraint))
            return match.group(1) if match else None

        content = context.text(".php-version")
        if content is not None:
            match = _MAJOR_MINOR_RE.search(content)
            return match.group(1) if match else None

        platform = (context.composer_lock or {}).get("platform")
        if isinstance(platform, dict) and platform.get("php"):
            match = _MAJOR_MINOR_RE.search(str(platform["php"]))
            return match.group(1) if match else None

        return None
