"""Tests for the dependency container wiring."""

from __future__ import annotations

from pathlib import Path

from message_templates.l1_entities.config import AppConfig
from message_templates.l3_interface_adapters.gateways.paths import USER_TEMPLATES_DIR
from message_templates.l4_frameworks_and_drivers.config import build_app_config
from message_templates.l4_frameworks_and_drivers.container import DependencyContainer


class TestDependencyContainer:
    def test_default_repository_dir(self, default_config: AppConfig):
        container = DependencyContainer(default_config)
        assert container.repository.user_dir == USER_TEMPLATES_DIR

    def test_configured_directory(self, tmp_path: Path):
        config = build_app_config({'library': {'directory': str(tmp_path)}})
        container = DependencyContainer(config)
        assert container.repository.user_dir == tmp_path

    def test_renderer_uses_config_samples(self, tmp_path: Path):
        config = build_app_config({'library': {'directory': str(tmp_path)}})
        container = DependencyContainer(config)
        welcome = container.repository.get('welcome')
        preview = container.renderer.execute(welcome)
        assert 'John Doe' in preview
        assert '<strong>ADSapp</strong>' in preview

    def test_library_writes_through_repository(self, tmp_path: Path):
        config = build_app_config({'library': {'directory': str(tmp_path)}})
        container = DependencyContainer(config)
        tmpl = container.library.create('Promo')
        assert (tmp_path / f'{tmpl.id}.yaml').exists()
