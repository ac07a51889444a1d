"""Scaffold charts from starter chart directories."""
from pathlib import Path
from typing import IO, Optional, Union

import yaml
from rich.console import Console

from helmmaker.chart import Chart, ChartFile, ChartMetadata, create_chart, load_chart, save_dir
from helmmaker.core.config import HelmMakerConfig, get_config
from helmmaker.core.errors import ChartLoadError
from helmmaker.core.layout import VALUES_FILE_NAME
from helmmaker.core.logger import get_logger
from helmmaker.core.naming import validate_chart_name
from helmmaker.core.placeholders import CHART_NAME_MARKER, substitute_chart_name
from helmmaker.core.serialization import dump_yaml, load_yaml_mapping

logger = get_logger(__name__)


def _transform(data: bytes, replacement: str) -> bytes:
    # Starter files are not required to be UTF-8, so substitute on bytes
    return data.replace(CHART_NAME_MARKER.encode("utf-8"), replacement.encode("utf-8"))


def create_from(metadata: ChartMetadata, dest: Union[str, Path], src: Union[str, Path]) -> Path:
    """Create a new chart in ``dest`` using the chart at ``src`` as a starter.

    The starter's metadata is replaced by ``metadata`` and every
    ``<CHARTNAME>`` marker in its templates and values is replaced with the
    new chart name.

    Args:
        metadata: Chart.yaml contents for the new chart
        dest: Directory the new chart is created in
        src: Starter chart directory

    Returns:
        Path of the new chart directory

    Raises:
        ChartLoadError: If the starter cannot be loaded or its values no
            longer parse after substitution
    """
    try:
        chart = load_chart(src)
    except ChartLoadError as exc:
        raise ChartLoadError(f"could not load {src}: {exc}") from exc

    chart.metadata = metadata
    name = chart.name

    chart.templates = [
        ChartFile(name=template.name, data=_transform(template.data, name))
        for template in chart.templates
    ]

    # Round-trip through YAML so names embedded in string values are replaced
    try:
        chart.values = load_yaml_mapping(substitute_chart_name(dump_yaml(chart.values), name))
    except (yaml.YAMLError, ValueError) as exc:
        raise ChartLoadError(f"transforming values file: {exc}") from exc

    # save_dir writes the raw values.yaml to keep its comments, so the marker
    # has to be replaced there as well.
    for raw_file in chart.raw:
        if raw_file.name == VALUES_FILE_NAME:
            raw_file.data = _transform(raw_file.data, name)

    logger.debug(f"Scaffolding chart '{name}' from {src}")
    return save_dir(chart, dest)


def resolve_starter(starter: Union[str, Path], config: Optional[HelmMakerConfig] = None) -> Path:
    """Resolve a starter name or path.

    Absolute paths and existing directories are used as given; anything
    else is looked up in the configured starters directory.
    """
    path = Path(starter).expanduser()
    if path.is_absolute() or path.is_dir():
        return path
    config = config or get_config()
    return Path(config.starters_dir).expanduser() / path


def gen_local_chart(
    name: str,
    dest: Union[str, Path] = ".",
    starter: Optional[Union[str, Path]] = None,
    version: str = "0.2.0",
    diagnostics: Optional[Union[Console, IO[str]]] = None,
    config: Optional[HelmMakerConfig] = None,
) -> Chart:
    """Create a chart in ``dest``, reload it and save it with ``version``.

    Args:
        name: Chart name
        dest: Directory the chart is created in
        starter: Optional starter chart to scaffold from instead of the
            default skeleton
        version: Version written into the saved chart
        diagnostics: Console or stream for overwrite warnings
        config: Runtime configuration (defaults to the global config)

    Returns:
        The saved Chart

    Raises:
        ChartLoadError: If the created chart cannot be loaded or is deprecated
    """
    config = config or get_config()
    validate_chart_name(name)

    if starter is not None:
        metadata = ChartMetadata(
            name=name,
            description=config.description,
            type="application",
            version=config.default_chart_version,
            app_version=config.app_version,
        )
        chart_dir = create_from(metadata, dest, resolve_starter(starter, config))
    else:
        chart_dir = create_chart(
            name,
            dest,
            diagnostics=diagnostics,
            version=config.default_chart_version,
            app_version=config.app_version,
            description=config.description,
        )

    chart = load_chart(chart_dir)
    if chart.metadata.deprecated:
        raise ChartLoadError("deprecated chart")

    chart.metadata = chart.metadata.model_copy(update={"version": version})
    save_dir(chart, Path(chart_dir).parent)
    logger.info(f"Generated local chart '{name}' version {version} in {chart_dir}")
    return chart
