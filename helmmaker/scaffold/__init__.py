"""Chart scaffolding: turn application sets into chart directories."""

from .starter import create_from, gen_local_chart
from .engine import ChartScaffolder, generate_chart_tree
from .registry import DEFAULT_REGISTRY, TemplateDescriptor, TemplateRegistry

__all__ = [
    "ChartScaffolder",
    "DEFAULT_REGISTRY",
    "TemplateDescriptor",
    "TemplateRegistry",
    "create_from",
    "gen_local_chart",
    "generate_chart_tree",
]
