"""Shared path constants for configuration, user templates and logs."""

from __future__ import annotations

from platformdirs import user_config_path, user_log_path

APP_NAME = 'message-templates'

CONFIG_DIR = user_config_path(APP_NAME)
USER_TEMPLATES_DIR = CONFIG_DIR / 'templates'
LOG_DIR = user_log_path(APP_NAME)

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
