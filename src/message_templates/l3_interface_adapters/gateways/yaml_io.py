"""Shared YAML parsing for config and template files."""

from __future__ import annotations

import yaml

from message_templates.l1_entities.errors import MalformedFileError


def parse_yaml_mapping(text: str, source: str) -> dict:
    """Parse *text* into a dict; empty documents give ``{}``.

    Syntax errors and non-mapping documents raise MalformedFileError naming *source*.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedFileError(f'{source}: invalid YAML ({e})') from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFileError(f'{source}: expected a mapping at top level, got {type(data).__name__}')
    return data
