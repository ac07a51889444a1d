"""Write charts to disk: save loaded charts and create default skeletons."""
from pathlib import Path
from typing import IO, Optional, Union

from rich.console import Console

from helmmaker.chart.types import Chart
from helmmaker.core.errors import PathConflict
from helmmaker.core.layout import (
    CHART_FILE_NAME,
    HELPERS_FILE_NAME,
    IGNORE_FILE_NAME,
    NOTES_FILE_NAME,
    TEMPLATES_DIR,
    TEMPLATES_TESTS_DIR,
    VALUES_FILE_NAME,
)
from helmmaker.core.logger import diagnostics_console, get_logger, warn_overwrite
from helmmaker.core.naming import validate_chart_name
from helmmaker.core.placeholders import substitute_chart_name
from helmmaker.core.serialization import dump_yaml, quote_scalar
from helmmaker.core.writer import write_file
from helmmaker.templates import defaults

logger = get_logger(__name__)

# Skeleton written by create_chart, relative to the chart root
DEFAULT_CHART_FILES = (
    (VALUES_FILE_NAME, defaults.DEFAULT_VALUES),
    (IGNORE_FILE_NAME, defaults.DEFAULT_IGNORE),
    (f"{TEMPLATES_DIR}/ingress.yaml", defaults.DEFAULT_INGRESS),
    (f"{TEMPLATES_DIR}/deployment.yaml", defaults.DEFAULT_DEPLOYMENT),
    (f"{TEMPLATES_DIR}/service.yaml", defaults.DEFAULT_SERVICE),
    (f"{TEMPLATES_DIR}/serviceaccount.yaml", defaults.DEFAULT_SERVICE_ACCOUNT),
    (f"{TEMPLATES_DIR}/hpa.yaml", defaults.DEFAULT_HORIZONTAL_POD_AUTOSCALER),
    (f"{TEMPLATES_DIR}/{NOTES_FILE_NAME}", defaults.DEFAULT_NOTES),
    (f"{TEMPLATES_DIR}/{HELPERS_FILE_NAME}", defaults.CHART_HELPERS),
    (f"{TEMPLATES_TESTS_DIR}/test-connection.yaml", defaults.DEFAULT_TEST_CONNECTION),
)


def render_chart_file(name: str, version: str, app_version: str, description: str) -> str:
    """Render the commented default Chart.yaml for chart ``name``."""
    content = defaults.CHART_FILE.format(
        description=quote_scalar(description),
        version=quote_scalar(version),
        app_version=quote_scalar(app_version),
    )
    return substitute_chart_name(content, name)


def _chart_dir(dest: Union[str, Path], name: str) -> Path:
    chart_dir = Path(dest).expanduser().resolve() / name
    if chart_dir.exists() and not chart_dir.is_dir():
        raise PathConflict(chart_dir)
    return chart_dir


def save_dir(chart: Chart, dest: Union[str, Path]) -> Path:
    """Write ``chart`` to ``dest/<chart name>``.

    The raw values.yaml entry is preferred over the parsed values so that
    comments survive a load/save round trip.

    Returns:
        Path of the written chart directory
    """
    validate_chart_name(chart.name)
    chart_dir = _chart_dir(dest, chart.name)

    write_file(chart_dir / CHART_FILE_NAME, dump_yaml(chart.metadata.to_dict()))

    raw_values = chart.raw_file(VALUES_FILE_NAME)
    if raw_values is not None:
        write_file(chart_dir / VALUES_FILE_NAME, raw_values.data)
    else:
        write_file(chart_dir / VALUES_FILE_NAME, dump_yaml(chart.values))

    for chart_file in [*chart.templates, *chart.files]:
        write_file(chart_dir / chart_file.name, chart_file.data)

    logger.debug(f"Saved chart '{chart.name}' to {chart_dir}")
    return chart_dir


def create_chart(
    name: str,
    dest: Union[str, Path],
    diagnostics: Optional[Union[Console, IO[str]]] = None,
    version: str = "0.1.0",
    app_version: str = "1.16.0",
    description: str = "A Helm chart for Kubernetes",
) -> Path:
    """Create a default chart skeleton named ``name`` inside ``dest``.

    Existing files are overwritten with a warning on ``diagnostics``.

    Returns:
        Path of the new chart directory
    """
    validate_chart_name(name)
    chart_dir = _chart_dir(dest, name)

    diagnostics = diagnostics_console(diagnostics)

    chart_file = render_chart_file(name, version, app_version, description)
    files = ((CHART_FILE_NAME, chart_file), *DEFAULT_CHART_FILES)

    for relative_name, content in files:
        destination = chart_dir / relative_name
        if destination.exists():
            warn_overwrite(diagnostics, destination)
        write_file(destination, substitute_chart_name(content, name))

    logger.info(f"Created chart '{name}' in {chart_dir}")
    return chart_dir
