"""YAML marshalling for values documents and chart metadata."""
from typing import Any, Dict, Union

import yaml

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class StringTimestampLoader(yaml.SafeLoader):
    """SafeLoader that leaves dates and timestamps as plain strings."""


StringTimestampLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def dump_yaml(data: Any) -> str:
    """Serialize ``data`` as block-style YAML, keeping mapping order."""
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def quote_scalar(value: Any) -> str:
    """Render ``value`` as a double-quoted YAML scalar for inline use.

    Line breaks and non-ASCII characters are escaped, so the result is
    always a single line.
    """
    text = yaml.safe_dump(str(value), default_style='"', width=float("inf"))
    return text.splitlines()[0]


def load_yaml_mapping(text: Union[str, bytes]) -> Dict[str, Any]:
    """Parse YAML that must hold a mapping; an empty document yields ``{}``.

    Raises:
        yaml.YAMLError: If the text is not valid YAML
        ValueError: If the document is not a mapping
    """
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")
    return data


def load_yaml_document(text: Union[str, bytes]) -> Any:
    """Parse YAML into JSON-compatible data.

    Timestamps stay strings and non-string mapping keys (``80: http``) are
    converted to strings, matching how Helm reads values files.
    """
    return stringify_keys(yaml.load(text, Loader=StringTimestampLoader))


def stringify_keys(data: Any) -> Any:
    """Return ``data`` with every mapping key converted to ``str``."""
    if isinstance(data, dict):
        return {_key_text(key): stringify_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [stringify_keys(item) for item in data]
    return data


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)
