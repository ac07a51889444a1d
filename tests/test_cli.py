"""Tests for the helmmaker CLI."""
import yaml
from typer.testing import CliRunner

from helmmaker.cli import app

runner = CliRunner()

APPS_YAML = """name: shop
path: out
apps:
  - name: api
    types: [deployment, svc]
    values:
      appname: api
  - name: worker
    types: [deployment]
"""


class TestInfoCommands:
    """Test version and templates."""

    def test_version(self):
        result = runner.invoke(app, ['version'])
        assert result.exit_code == 0
        assert 'helmmaker v0.1.0' in result.output

    def test_templates(self):
        result = runner.invoke(app, ['templates'])
        assert result.exit_code == 0
        assert 'deployment' in result.output
        assert 'svc' in result.output
        assert 'Reserved (skipped): pv, pvc, set' in result.output


class TestGenerateCommand:
    """Test the generate command."""

    def test_generate(self, tmp_path):
        """Test a valid file produces the chart under its path key."""
        (tmp_path / 'out').mkdir()
        spec = tmp_path / 'apps.yml'
        spec.write_text(APPS_YAML)

        result = runner.invoke(app, ['generate', str(spec)])

        assert result.exit_code == 0, result.output
        assert "Chart 'shop' written" in result.output
        chart_dir = tmp_path / 'out' / 'shop'
        assert (chart_dir / 'templates' / 'svc_api.yaml').exists()
        assert (chart_dir / 'templates' / 'deployment_worker.yaml').exists()
        assert list(yaml.safe_load((chart_dir / 'values.yaml').read_text())) == ['api', 'worker']

    def test_output_option(self, tmp_path):
        spec = tmp_path / 'apps.yml'
        spec.write_text(APPS_YAML)
        target = tmp_path / 'charts'
        target.mkdir()

        result = runner.invoke(app, ['generate', str(spec), '--output', str(target)])

        assert result.exit_code == 0, result.output
        assert (target / 'shop' / 'Chart.yaml').exists()

    def test_apps_file_from_environment(self, tmp_path, monkeypatch):
        (tmp_path / 'out').mkdir()
        spec = tmp_path / 'custom.yml'
        spec.write_text(APPS_YAML)
        monkeypatch.setenv('HELMMAKER_APPS', str(spec))

        result = runner.invoke(app, ['generate'])

        assert result.exit_code == 0, result.output
        assert (tmp_path / 'out' / 'shop' / 'Chart.yaml').exists()

    def test_missing_output_directory(self, tmp_path):
        """Test generation fails when the output directory does not exist."""
        spec = tmp_path / 'apps.yml'
        spec.write_text(APPS_YAML)

        result = runner.invoke(app, ['generate', str(spec)])

        assert result.exit_code == 1
        assert 'Error:' in result.output
        assert not (tmp_path / 'out').exists()

    def test_invalid_app_name(self, tmp_path):
        spec = tmp_path / 'apps.yml'
        spec.write_text("name: shop\napps:\n  - name: bad name!\n    types: [deployment]\n")

        result = runner.invoke(app, ['generate', str(spec)])

        assert result.exit_code == 1
        assert 'Error:' in result.output
        assert 'must match' in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ['generate', str(tmp_path / 'missing.yml')])
        assert result.exit_code == 1
        assert 'not found' in result.output


class TestDemoAndInit:
    """Test demo and init commands."""

    def test_demo(self, tmp_path):
        result = runner.invoke(app, ['demo', '--output', str(tmp_path)])

        assert result.exit_code == 0, result.output
        templates = tmp_path / 'demo' / 'templates'
        for name in ('app1', 'app2', 'app3'):
            assert (templates / f'deployment_{name}.yaml').exists()
            assert (templates / f'svc_{name}.yaml').exists()
        chart = yaml.safe_load((tmp_path / 'demo' / 'Chart.yaml').read_text())
        assert chart['version'] == '1.0.0'

    def test_init_then_generate(self, tmp_path):
        """Test the file written by init generates the demo chart next to it."""
        spec = tmp_path / 'apps.yml'

        result = runner.invoke(app, ['init', str(spec)])
        assert result.exit_code == 0, result.output
        assert spec.exists()

        result = runner.invoke(app, ['generate', str(spec)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / 'demo' / 'templates' / 'svc_app3.yaml').exists()

    def test_init_existing_cancelled(self, tmp_path):
        spec = tmp_path / 'apps.yml'
        spec.write_text('name: keep\n')

        result = runner.invoke(app, ['init', str(spec)], input='n\n')

        assert 'Cancelled' in result.output
        assert spec.read_text() == 'name: keep\n'

    def test_init_force(self, tmp_path):
        spec = tmp_path / 'apps.yml'
        spec.write_text('name: keep\n')

        result = runner.invoke(app, ['init', str(spec), '--force'])

        assert result.exit_code == 0
        assert yaml.safe_load(spec.read_text())['name'] == 'demo'


class TestChartCommands:
    """Test create and scaffold-from."""

    def test_create(self, tmp_path):
        result = runner.invoke(app, ['create', 'web', '--output', str(tmp_path)])

        assert result.exit_code == 0, result.output
        chart = yaml.safe_load((tmp_path / 'web' / 'Chart.yaml').read_text())
        assert chart['name'] == 'web'
        assert chart['version'] == '0.2.0'

    def test_create_invalid_name(self, tmp_path):
        result = runner.invoke(app, ['create', 'bad name', '--output', str(tmp_path)])
        assert result.exit_code == 1
        assert 'Error:' in result.output

    def test_scaffold_from(self, tmp_path):
        """Test an existing chart is copied under a new name."""
        runner.invoke(app, ['create', 'base', '--output', str(tmp_path)])

        result = runner.invoke(
            app,
            ['scaffold-from', str(tmp_path / 'base'), 'shop', '--output', str(tmp_path), '--version', '2.0.0'],
        )

        assert result.exit_code == 0, result.output
        chart = yaml.safe_load((tmp_path / 'shop' / 'Chart.yaml').read_text())
        assert chart['name'] == 'shop'
        assert chart['version'] == '2.0.0'
        assert (tmp_path / 'shop' / 'templates' / 'deployment.yaml').exists()

    def test_scaffold_from_missing_source(self, tmp_path):
        result = runner.invoke(app, ['scaffold-from', str(tmp_path / 'nope'), 'shop'])
        assert result.exit_code == 1
        assert 'could not load' in result.output
