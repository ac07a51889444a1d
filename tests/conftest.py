"""Shared test fixtures for helmmaker tests."""
import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from helmmaker.core.config import HelmMakerConfig, set_config
from helmmaker.models.app import Application, ApplicationSet
from helmmaker.scaffold.engine import ChartScaffolder


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Keep the process-wide config and environment out of each test."""
    for var in (
        "HELMMAKER_CHART_VERSION",
        "HELMMAKER_APP_VERSION",
        "HELMMAKER_DESCRIPTION",
        "HELMMAKER_HELPERS_MODE",
        "HELMMAKER_STARTERS_DIR",
        "HELMMAKER_APPS",
    ):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files."""
    temp = Path(tempfile.mkdtemp())
    yield temp
    # Cleanup handled by OS tempdir cleanup


@pytest.fixture
def diagnostics_buffer():
    """Text buffer capturing overwrite warnings."""
    return io.StringIO()


@pytest.fixture
def scaffolder(diagnostics_buffer):
    """Scaffolder writing diagnostics to a buffer, default config."""
    return ChartScaffolder(
        diagnostics=Console(file=diagnostics_buffer, width=400),
        config=HelmMakerConfig(),
    )


@pytest.fixture
def app1_values():
    """Values for app1."""
    return {
        'appname': 'app1',
        'value': {
            'replicaCount': 2,
            'image': {'repository': 'nginx', 'tag': '1.25', 'pullPolicy': 'IfNotPresent'},
            'service': {'type': 'ClusterIP', 'port': 80},
            'env': [{'name': 'APP_PORT', 'value': '8088'}],
        },
    }


@pytest.fixture
def demo_app_set(temp_dir, app1_values):
    """The two-application demo chart rooted in temp_dir."""
    return ApplicationSet(
        name='demo',
        path=temp_dir,
        apps=[
            Application(name='app1', types=['deployment', 'svc'], values=app1_values),
            Application(name='app2', types=['deployment'], values={'appname': 'app2'}),
        ],
    )
