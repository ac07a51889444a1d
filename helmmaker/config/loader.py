"""YAML loader for application sets."""
import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from helmmaker.core.errors import ApplicationSetError
from helmmaker.core.serialization import dump_yaml, load_yaml_document
from helmmaker.models.app import Application, ApplicationSet
from helmmaker.templates.defaults import DEMO_APP_VALUES

# Accepted spellings for the application list
APPLICATION_KEYS = ('apps', 'applications')


def load_application_set(
    path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
) -> ApplicationSet:
    """Load an application set from a YAML file.

    Args:
        path: YAML file describing the chart and its applications
        output_path: Overrides the ``path`` key of the file

    Returns:
        Parsed ApplicationSet. A relative output path is resolved against
        the directory holding the YAML file.

    Raises:
        ApplicationSetError: On missing files, invalid YAML or invalid fields
    """
    spec_path = Path(path).expanduser()
    if not spec_path.exists():
        raise ApplicationSetError(f"Application set file not found: {spec_path}")

    try:
        raw = load_yaml_document(spec_path.read_text())
    except yaml.YAMLError as exc:
        raise ApplicationSetError(f"Failed to parse application set YAML: {exc}") from exc

    if not raw:
        raise ApplicationSetError(f"Application set file is empty: {spec_path}")
    if not isinstance(raw, dict):
        raise ApplicationSetError("Application set must be a mapping")

    data = _normalize(raw)
    if output_path is not None:
        data['path'] = str(output_path)
    elif 'path' in data:
        target = Path(str(data['path'])).expanduser()
        if not target.is_absolute():
            target = spec_path.parent / target
        data['path'] = str(target)
    else:
        data['path'] = str(spec_path.parent)

    try:
        return ApplicationSet.model_validate(data)
    except ValidationError as exc:
        raise ApplicationSetError(_format_validation_error(spec_path, exc)) from exc


def _normalize(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Map the accepted top-level spellings onto the model's aliases."""
    data = dict(raw)
    present = [key for key in APPLICATION_KEYS if key in data]
    if len(present) > 1:
        raise ApplicationSetError("Use either 'apps' or 'applications', not both")
    if present and present[0] != 'apps':
        data['apps'] = data.pop(present[0])
    if data.get('apps') is None:
        data['apps'] = []
    if data.get('version') is not None:
        data['version'] = str(data['version'])
    if data.get('name') is not None:
        data['name'] = str(data['name'])
    return data


def _format_validation_error(spec_path: Path, exc: ValidationError) -> str:
    lines = [f"Invalid application set in {spec_path}:"]
    for error in exc.errors():
        location = '.'.join(str(part) for part in error['loc'])
        lines.append(f"  {location}: {error['msg']}")
    return '\n'.join(lines)


def default_application_set(output_path: Union[str, Path] = ".") -> ApplicationSet:
    """Return the built-in demo application set."""
    apps = [
        Application(
            name=name,
            types=["deployment", "svc"],
            values=copy.deepcopy(DEMO_APP_VALUES),
        )
        for name in ("app1", "app2", "app3")
    ]
    return ApplicationSet(name="demo", path=Path(output_path), apps=apps, version="1.0.0")


def dump_application_set(app_set: ApplicationSet) -> str:
    """Render ``app_set`` as YAML readable by load_application_set."""
    data = {
        'name': app_set.name,
        'version': app_set.version,
        'path': str(app_set.output_path),
        'apps': [
            {
                'name': app.name,
                'types': list(app.resource_types),
                'values': app.values,
            }
            for app in app_set.applications
        ],
    }
    if app_set.version is None:
        del data['version']
    return dump_yaml(data)
