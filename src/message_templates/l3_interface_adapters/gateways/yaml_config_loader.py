"""Gateway: YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

from message_templates.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS
from message_templates.l3_interface_adapters.gateways.yaml_io import parse_yaml_mapping


def find_config_file(config_path: str | None = None) -> Path | None:
    """Explicit path if given (must exist), else the first platform default that exists."""
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        return path
    return next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)


class YamlConfigLoader:
    """Reads user config as a raw dict; defaults and validation are applied in L4."""

    def load_raw(self, config_path: str | None = None) -> dict:
        path = find_config_file(config_path)
        if path is None:
            return {}
        return parse_yaml_mapping(path.read_text(encoding='utf-8'), str(path))


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
