"""Load chart directories from disk."""
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from helmmaker.chart.types import Chart, ChartFile, ChartMetadata
from helmmaker.core.errors import ChartLoadError, ScaffoldIOError
from helmmaker.core.layout import CHART_FILE_NAME, TEMPLATES_DIR, VALUES_FILE_NAME
from helmmaker.core.serialization import load_yaml_mapping
from helmmaker.core.writer import read_file


def load_chart(path: Union[str, Path]) -> Chart:
    """Load the chart rooted at ``path``.

    Args:
        path: Chart directory containing Chart.yaml

    Returns:
        Loaded Chart

    Raises:
        ChartLoadError: If the directory, Chart.yaml or values.yaml is unusable
    """
    root = Path(path).expanduser()
    if not root.is_dir():
        raise ChartLoadError(f"chart directory not found: {root}")

    chart_file = root / CHART_FILE_NAME
    if not chart_file.is_file():
        raise ChartLoadError(f"{CHART_FILE_NAME} file is missing in {root}")

    raw = []
    templates = []
    files = []
    for file_path in sorted(p for p in root.rglob("*") if p.is_file()):
        name = file_path.relative_to(root).as_posix()
        try:
            entry = ChartFile(name=name, data=read_file(file_path))
        except ScaffoldIOError as exc:
            raise ChartLoadError(str(exc)) from exc
        raw.append(entry)
        if name in (CHART_FILE_NAME, VALUES_FILE_NAME):
            continue
        if name.startswith(f"{TEMPLATES_DIR}/"):
            templates.append(entry)
        else:
            files.append(entry)

    metadata = _parse_metadata(next(f for f in raw if f.name == CHART_FILE_NAME))

    values = {}
    values_entry = next((f for f in raw if f.name == VALUES_FILE_NAME), None)
    if values_entry is not None:
        try:
            values = load_yaml_mapping(values_entry.data)
        except (yaml.YAMLError, ValueError) as exc:
            raise ChartLoadError(f"cannot parse {VALUES_FILE_NAME}: {exc}") from exc

    return Chart(metadata=metadata, templates=templates, values=values, raw=raw, files=files)


def _parse_metadata(entry: ChartFile) -> ChartMetadata:
    try:
        data = load_yaml_mapping(entry.data)
    except (yaml.YAMLError, ValueError) as exc:
        raise ChartLoadError(f"cannot parse {CHART_FILE_NAME}: {exc}") from exc

    # Versions like 1.0 are parsed as floats by YAML
    for key in ("version", "appVersion"):
        if key in data and data[key] is not None:
            data[key] = str(data[key])

    try:
        metadata = ChartMetadata.model_validate(data)
    except ValidationError as exc:
        raise ChartLoadError(f"invalid {CHART_FILE_NAME}: {exc}") from exc

    _check_loaded_name(metadata.name)
    return metadata


def _check_loaded_name(name: str) -> None:
    """Require a non-empty base name; the naming rule applies on create and save."""
    if not name:
        raise ChartLoadError(f"invalid {CHART_FILE_NAME}: chart name is required")
    if "/" in name or "\\" in name or name in (".", ".."):
        raise ChartLoadError(f"invalid {CHART_FILE_NAME}: chart name {name!r} is not a base name")
