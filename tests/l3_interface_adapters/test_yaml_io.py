"""Tests for shared YAML mapping parsing."""

import pytest

from message_templates.l1_entities.errors import MalformedFileError
from message_templates.l3_interface_adapters.gateways.yaml_io import parse_yaml_mapping


class TestParseYamlMapping:
    def test_mapping(self):
        assert parse_yaml_mapping('a: 1\nb: [x]\n', 'f.yaml') == {'a': 1, 'b': ['x']}

    def test_empty_document(self):
        assert parse_yaml_mapping('', 'f.yaml') == {}

    def test_syntax_error_names_source(self):
        with pytest.raises(MalformedFileError, match=r'^f\.yaml: invalid YAML'):
            parse_yaml_mapping('body: "unterminated\n', 'f.yaml')

    def test_scalar_document_rejected(self):
        with pytest.raises(MalformedFileError, match='got str'):
            parse_yaml_mapping('just text', 'f.yaml')

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_yaml_mapping('- a\n', 'f.yaml')
