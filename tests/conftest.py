"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from message_templates.l1_entities.config import AppConfig
from message_templates.l1_entities.errors import TemplateNotFoundError
from message_templates.l1_entities.placeholder import SYSTEM_PLACEHOLDERS, PlaceholderDeclaration
from message_templates.l1_entities.registry import PlaceholderRegistry
from message_templates.l1_entities.template import Template
from message_templates.l3_interface_adapters.gateways.yaml_template_repository import YamlTemplateRepository
from message_templates.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeTemplateRepository:
    """In-memory template repository for L2 use case tests."""

    def __init__(self, templates: list[Template] | None = None) -> None:
        self._templates: dict[str, Template] = {t.id: t for t in templates or []}
        self.save_calls: list[Template] = []
        self.delete_calls: list[str] = []

    def get(self, template_id: str) -> Template:
        if template_id not in self._templates:
            raise TemplateNotFoundError(f"Template not found: '{template_id}'")
        return self._templates[template_id]

    def list_all(self) -> list[Template]:
        return [self._templates[k] for k in sorted(self._templates)]

    def save(self, template: Template) -> None:
        self.save_calls.append(template.model_copy(deep=True))
        self._templates[template.id] = template

    def delete(self, template_id: str) -> None:
        self.get(template_id)
        del self._templates[template_id]
        self.delete_calls.append(template_id)


class FakeSampleSource:
    """Fake sample source for L2 rendering tests."""

    def __init__(self, bindings: dict[str, str] | None = None) -> None:
        self._bindings = dict(bindings or {})
        self.calls = 0

    def sample_bindings(self) -> dict[str, str]:
        self.calls += 1
        return dict(self._bindings)


# --- Standard Fixtures ---


def required(placeholder_id: str) -> PlaceholderDeclaration:
    return PlaceholderDeclaration(id=placeholder_id, display_name=placeholder_id, required=True)


@pytest.fixture
def system_registry() -> PlaceholderRegistry:
    return PlaceholderRegistry.build(SYSTEM_PLACEHOLDERS)


@pytest.fixture
def welcome_template() -> Template:
    return Template(
        id='welcome',
        name='Welcome Message',
        body='Hello {{contact-name}}, welcome to {{company-name}}.',
        declarations=[required('contact-name'), required('company-name')],
        category='onboarding',
        tags={'welcome', 'greeting'},
    )


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def user_templates_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'templates'
    d.mkdir()
    return d


@pytest.fixture
def yaml_repo(user_templates_dir: Path) -> YamlTemplateRepository:
    return YamlTemplateRepository(user_templates_dir)


@pytest.fixture
def fake_repo() -> FakeTemplateRepository:
    return FakeTemplateRepository()


@pytest.fixture
def fake_samples() -> FakeSampleSource:
    return FakeSampleSource({'contact-name': 'John Doe', 'company-name': 'ADSapp'})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
library:
  default_category: "support"
preview:
  sample_values:
    contact-name: "Jane Roe"
  date_format: "%d/%m/%Y"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
