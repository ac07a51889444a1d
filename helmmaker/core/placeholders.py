"""Literal placeholder substitution for template bodies.

Templates carry two fixed markers. Neither marker is a substring of the other,
so the substitutions commute and may be applied in any order.
"""
from typing import Optional

APP_NAME_MARKER = "<APPNAME>"
CHART_NAME_MARKER = "<CHARTNAME>"


def substitute_chart_name(text: str, replacement: str) -> str:
    """Replace every ``<CHARTNAME>`` in ``text`` with ``replacement``."""
    return text.replace(CHART_NAME_MARKER, replacement)


def substitute_app_name(text: str, replacement: str) -> str:
    """Replace every ``<APPNAME>`` in ``text`` with ``replacement``."""
    return text.replace(APP_NAME_MARKER, replacement)


def render_placeholders(
    text: str,
    app_name: Optional[str] = None,
    chart_name: Optional[str] = None,
) -> str:
    """Apply whichever substitutions were given a value."""
    if app_name is not None:
        text = substitute_app_name(text, app_name)
    if chart_name is not None:
        text = substitute_chart_name(text, chart_name)
    return text
