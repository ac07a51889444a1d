"""Minimal chart-directory library: load, save and create charts."""
from helmmaker.chart.chartutil import create_chart, save_dir
from helmmaker.chart.loader import load_chart
from helmmaker.chart.types import Chart, ChartFile, ChartMetadata

__all__ = [
    'Chart',
    'ChartFile',
    'ChartMetadata',
    'create_chart',
    'load_chart',
    'save_dir',
]
