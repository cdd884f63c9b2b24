"""Tests for CSS framework modules."""

from pathlib import Path

from stackguide.models.context import DetectionResult
from stackguide.models.stack import ModuleContext, Stack
from stackguide.modules.css import BootstrapModule, BulmaModule, TailwindModule


def _module_context(config_files=(), package_manager=None):
    return ModuleContext(
        project_root=Path("/project"),
        stack=Stack(config_files=list(config_files)),
        detection_result=DetectionResult(detected=True, confidence=1.0),
        package_manager=package_manager,
    )


class TestTailwindModule:
    """Tests for Tailwind CSS detection."""

    def test_dependency_and_config(self, make_context):
        context = make_context(
            package_json={"devDependencies": {"tailwindcss": "^3.4.1", "@tailwindcss/forms": "^0.5"}},
            config_files={"tailwind.config.js", "postcss.config.js"},
            files=["resources/css/app.css"],
        )
        module = TailwindModule()
        result = module.detect(context)
        assert result.detected is True
        assert result.metadata["config"] == "tailwind.config.js"
        assert module.detect_version(context) == "3"
        assert [p.path for p in module.get_guideline_paths("3")] == [
            "tailwind/guidelines/css-framework.md",
            "tailwind/guidelines/3/features.md",
        ]

    def test_stylesheets_alone_do_not_detect(self, make_context):
        """Generic CSS and components without Tailwind are not enough."""
        context = make_context(
            config_files={"postcss.config.js"},
            files=["src/index.css", "src/App.jsx"],
        )
        assert TailwindModule().detect(context).detected is False

    def test_commands_with_config_npm(self):
        commands = TailwindModule().generate_commands(
            _module_context(config_files=["tailwind.config.ts", "postcss.config.js"])
        )
        assert commands.dev == ["npx tailwindcss build", "npm run dev"]
        assert commands.build == [
            "npx tailwindcss build --minify",
            "npm run build",
            "npx postcss src/styles.css -o dist/styles.css",
        ]

    def test_commands_with_yarn(self):
        commands = TailwindModule().generate_commands(
            _module_context(config_files=["tailwind.config.js"], package_manager="yarn")
        )
        assert commands.dev[0] == "yarn tailwindcss build"
        assert commands.install == ["yarn install"]


class TestBootstrapModule:
    """Tests for Bootstrap detection."""

    def test_dependency(self, make_context):
        context = make_context(
            package_json={"dependencies": {"bootstrap": "^5.3.2", "@popperjs/core": "^2.11"}},
        )
        module = BootstrapModule()
        result = module.detect(context)
        assert result.detected is True
        assert result.confidence == 0.9
        assert module.detect_version(context) == "5"

    def test_html_and_scss_alone_do_not_detect(self, make_context):
        context = make_context(files=["index.html", "styles/vendor.scss", "src/App.vue"])
        assert BootstrapModule().detect(context).detected is False

    def test_vendored_stylesheet_detects(self, make_context):
        context = make_context(files=["css/bootstrap.min.css", "index.html", "scss/custom.scss"])
        assert BootstrapModule().detect(context).detected is True

    def test_commands_with_gulp(self):
        commands = BootstrapModule().generate_commands(_module_context(config_files=["gulpfile.js"]))
        assert "gulp build" in commands.build
        assert "gulp watch" in commands.dev


class TestBulmaModule:
    """Tests for Bulma detection."""

    def test_dependency(self, make_context):
        context = make_context(package_json={"dependencies": {"bulma": "^0.9.4"}})
        module = BulmaModule()
        result = module.detect(context)
        assert result.detected is True
        assert result.confidence == 0.8
        assert result.evidence == ["bulma in package.json dependencies"]
        assert module.detect_version(context) == "0.9"
        assert [p.path for p in module.get_guideline_paths("0.9")] == [
            "bulma/guidelines/css-framework.md",
            "bulma/guidelines/0.9/features.md",
        ]

    def test_version_one(self, make_context):
        context = make_context(
            package_json={"dependencies": {"bulma": "^1.0.2", "buefy": "^0.9.29"}},
        )
        module = BulmaModule()
        assert "Vue Bulma components detected" in module.detect(context).evidence
        assert module.detect_version(context) == "1"

    def test_generic_styles_do_not_detect(self, make_context):
        context = make_context(files=["index.html", "styles/vendor.scss", "src/theme.sass"])
        assert BulmaModule().detect(context).detected is False

    def test_vendored_stylesheet_detects(self, make_context):
        context = make_context(files=["css/bulma.min.css", "index.html", "scss/custom.scss"])
        assert BulmaModule().detect(context).detected is True

    def test_bootstrap_stylesheet_is_not_bulma(self, make_context):
        context = make_context(files=["css/bootstrap.min.css", "index.html", "scss/custom.scss"])
        assert BulmaModule().detect(context).detected is False

    def test_commands_with_webpack_and_gulp(self):
        commands = BulmaModule().generate_commands(
            _module_context(config_files=["webpack.config.js", "gulpfile.js"])
        )
        assert commands.build == ["npx webpack --mode production", "npm run build", "gulp build"]
        assert commands.dev == ["gulp watch", "npm run dev", "npm run serve", "npm run start"]
        assert commands.install == ["npm install"]
