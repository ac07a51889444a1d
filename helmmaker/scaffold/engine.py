"""Chart scaffolding engine.

Turns an ``ApplicationSet`` into a chart directory::

    <output>/<chart>/Chart.yaml
    <output>/<chart>/values.yaml
    <output>/<chart>/templates/_helpers.tpl
    <output>/<chart>/templates/deployment_<app>.yaml
    <output>/<chart>/templates/svc_<app>.yaml

The engine is not transactional. A failure part way through leaves the files
written so far in place; re-running is the recovery path.
"""
from pathlib import Path
from typing import IO, List, Optional, Union

from rich.console import Console

from helmmaker.chart.chartutil import render_chart_file
from helmmaker.core.config import HelmMakerConfig, get_config
from helmmaker.core.errors import InvalidOutputPath, PathConflict
from helmmaker.core.layout import (
    CHART_FILE_NAME,
    HELPERS_FILE_NAME,
    TEMPLATES_DIR,
    VALUES_FILE_NAME,
)
from helmmaker.core.logger import diagnostics_console, get_logger, warn_overwrite
from helmmaker.core.naming import validate_chart_name
from helmmaker.core.placeholders import render_placeholders, substitute_chart_name
from helmmaker.core.serialization import dump_yaml
from helmmaker.core.writer import append_file, write_file
from helmmaker.models.app import Application, ApplicationSet
from helmmaker.scaffold.registry import DEFAULT_REGISTRY, TemplateDescriptor, TemplateRegistry
from helmmaker.templates.defaults import APP_HELPERS, CHART_HELPERS

logger = get_logger(__name__)

Diagnostics = Union[Console, IO[str]]


class ChartScaffolder:
    """Generates chart directories from application sets."""

    def __init__(
        self,
        registry: TemplateRegistry = DEFAULT_REGISTRY,
        diagnostics: Optional[Diagnostics] = None,
        config: Optional[HelmMakerConfig] = None,
    ):
        """Initialize the scaffolder.

        Args:
            registry: Read-only template registry to resolve resource types
            diagnostics: Console or text stream for overwrite warnings
                (defaults to stderr)
            config: Runtime configuration (defaults to the global config)
        """
        self.registry = registry
        self.config = config or get_config()
        self.diagnostics = diagnostics_console(diagnostics)

    def generate_chart_tree(self, app_set: ApplicationSet) -> Path:
        """Write the chart directory for ``app_set``.

        Args:
            app_set: Application set describing the chart

        Returns:
            Absolute path of the generated chart directory

        Raises:
            InvalidName: If the chart or an application name is invalid
            InvalidOutputPath: If the output path is missing or not a directory
            PathConflict: If the chart directory exists as a regular file
            ScaffoldIOError: If any file cannot be written
        """
        validate_chart_name(app_set.name)

        output_dir = self._check_output_path(app_set.output_path)
        chart_dir = output_dir / app_set.name
        if chart_dir.exists() and not chart_dir.is_dir():
            raise PathConflict(chart_dir)

        templates_dir = chart_dir / TEMPLATES_DIR
        helpers_path = templates_dir / HELPERS_FILE_NAME

        logger.info(f"Scaffolding chart '{app_set.name}' in {chart_dir}")

        chart_helpers = substitute_chart_name(CHART_HELPERS, app_set.name)
        if self.config.helpers_mode == "truncate":
            write_file(helpers_path, chart_helpers)
        else:
            # Legacy mode: every run appends, so re-runs duplicate the helpers
            append_file(helpers_path, chart_helpers)

        written: List[Path] = []
        for app in app_set.applications:
            written.extend(self._write_application(app_set, app, templates_dir, helpers_path))

        values_path = write_file(chart_dir / VALUES_FILE_NAME, dump_yaml(app_set.values_document()))
        logger.debug(f"Wrote {values_path}")

        chart_path = write_file(chart_dir / CHART_FILE_NAME, self.render_chart_file(app_set))
        logger.debug(f"Wrote {chart_path}")

        logger.info(
            f"Generated {len(written)} template(s) for "
            f"{len(app_set.applications)} application(s) in chart '{app_set.name}'"
        )
        return chart_dir

    def render_chart_file(self, app_set: ApplicationSet) -> str:
        """Render Chart.yaml for ``app_set``."""
        return render_chart_file(
            app_set.name,
            version=app_set.version or self.config.default_chart_version,
            app_version=self.config.app_version,
            description=self.config.description,
        )

    def _check_output_path(self, output_path: Path) -> Path:
        path = Path(output_path).expanduser().resolve()
        if not path.exists():
            raise InvalidOutputPath(path, f"output path {path} does not exist")
        if not path.is_dir():
            raise InvalidOutputPath(path)
        return path

    def _write_application(
        self,
        app_set: ApplicationSet,
        app: Application,
        templates_dir: Path,
        helpers_path: Path,
    ) -> List[Path]:
        validate_chart_name(app.name)

        append_file(
            helpers_path,
            render_placeholders(APP_HELPERS, app_name=app.name, chart_name=app_set.name),
        )

        written: List[Path] = []
        for resource_type in app.resource_types:
            descriptor = self._resolve_template(resource_type)
            if descriptor is None:
                logger.debug(f"No template for resource type '{resource_type}' ({app.name}), skipping")
                continue

            destination = templates_dir / descriptor.filename_for(app.name)
            if destination.exists():
                warn_overwrite(self.diagnostics, destination)

            content = render_placeholders(
                descriptor.content, app_name=app.name, chart_name=app_set.name
            )
            written.append(write_file(destination, content))
            logger.debug(f"Wrote {destination}")

        return written

    def _resolve_template(self, resource_type: str) -> Optional[TemplateDescriptor]:
        return self.registry.lookup(resource_type)


def generate_chart_tree(
    app_set: ApplicationSet,
    registry: TemplateRegistry = DEFAULT_REGISTRY,
    diagnostics: Optional[Diagnostics] = None,
    config: Optional[HelmMakerConfig] = None,
) -> Path:
    """Generate the chart directory for ``app_set`` with a one-off scaffolder."""
    scaffolder = ChartScaffolder(registry=registry, diagnostics=diagnostics, config=config)
    return scaffolder.generate_chart_tree(app_set)
