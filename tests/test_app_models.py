"""Tests for application models."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from helmmaker.models import Application, ApplicationSet


class TestApplication:
    """Test Application model."""

    def test_alias_and_field_names(self):
        """Test both 'types' and 'resource_types' populate the same field."""
        by_alias = Application(name='app1', types=['deployment'])
        by_name = Application(name='app1', resource_types=['deployment'])
        assert by_alias == by_name
        assert by_alias.resource_types == ['deployment']

    def test_defaults(self):
        app = Application(name='app1')
        assert app.resource_types == []
        assert app.values == {}

    def test_duplicate_types_removed_in_order(self):
        """Test repeated tags are emitted once, keeping first position."""
        app = Application(name='app1', types=['svc', 'deployment', 'svc', 'deployment'])
        assert app.resource_types == ['svc', 'deployment']

    def test_nested_values(self):
        """Test JSON-like nested values are accepted."""
        values = {'value': {'env': [{'name': 'A', 'value': '1'}], 'enabled': True, 'ratio': 0.5, 'none': None}}
        app = Application(name='app1', values=values)
        assert app.values == values

    def test_non_json_values_rejected(self):
        with pytest.raises(ValidationError):
            Application(name='app1', values={'when': object()})

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            Application(name='app1', kind='deployment')

    def test_frozen(self):
        app = Application(name='app1')
        with pytest.raises(ValidationError):
            app.name = 'app2'

    def test_name_not_validated_by_model(self):
        """Test name rules are left to the scaffolding engine."""
        assert Application(name='bad name').name == 'bad name'


class TestApplicationSet:
    """Test ApplicationSet model."""

    def test_aliases(self):
        app_set = ApplicationSet(name='demo', path='/tmp/out', apps=[{'name': 'app1'}])
        assert app_set.output_path == Path('/tmp/out')
        assert app_set.applications[0].name == 'app1'

    def test_defaults(self):
        app_set = ApplicationSet(name='demo')
        assert app_set.output_path == Path('.')
        assert app_set.applications == []
        assert app_set.version is None

    def test_values_document_order(self):
        """Test the combined values follow application order."""
        app_set = ApplicationSet(
            name='demo',
            apps=[
                {'name': 'b', 'values': {'x': 1}},
                {'name': 'a', 'values': {'y': 2}},
            ],
        )
        document = app_set.values_document()
        assert list(document) == ['b', 'a']
        assert document == {'b': {'x': 1}, 'a': {'y': 2}}

    def test_values_document_last_wins(self):
        app_set = ApplicationSet(
            name='demo',
            apps=[{'name': 'a', 'values': {'x': 1}}, {'name': 'a', 'values': {'x': 2}}],
        )
        assert app_set.values_document() == {'a': {'x': 2}}
