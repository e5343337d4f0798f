"""Application config defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from message_templates.l1_entities.config import AppConfig
from message_templates.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'library': {
        'directory': None,
        'default_category': 'general',
        'default_language': 'en',
    },
    'preview': {
        'sample_values': {
            'contact-name': 'John Doe',
            'contact-phone': '+1234567890',
            'contact-email': 'john@example.com',
            'company-name': 'ADSapp',
            'agent-name': 'Alice Smith',
        },
        'date_format': '%Y-%m-%d',
        'time_format': '%H:%M',
        'escape_html': False,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
