"""Chart and application name validation."""
import re

from helmmaker.core.errors import InvalidName

# Newlines, $, quotes, +, parens and % are known to break templates and
# Kubernetes fields, so the allowed set is kept narrow.
CHART_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+$")

# Lower than the limits of common filesystems and Kubernetes name fields.
MAX_CHART_NAME_LENGTH = 250


def validate_chart_name(name: str) -> None:
    """Raise InvalidName unless ``name`` is a usable chart or app name.

    Args:
        name: Candidate identifier

    Raises:
        InvalidName: If the name is empty, too long or has disallowed characters
    """
    if not isinstance(name, str) or not name or len(name) > MAX_CHART_NAME_LENGTH:
        raise InvalidName(
            name,
            f"chart name must be between 1 and {MAX_CHART_NAME_LENGTH} characters",
        )
    if not CHART_NAME_PATTERN.fullmatch(name):
        raise InvalidName(
            name,
            f"chart name {name!r} must match the regular expression "
            f"{CHART_NAME_PATTERN.pattern!r}",
        )


def is_valid_chart_name(name: str) -> bool:
    """Return True when ``name`` passes validate_chart_name."""
    try:
        validate_chart_name(name)
    except InvalidName:
        return False
    return True
