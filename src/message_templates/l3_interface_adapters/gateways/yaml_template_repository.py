"""Gateway: YAML template repository — implements TemplateRepository port."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

import yaml

from message_templates.l1_entities.errors import TemplateNotFoundError
from message_templates.l1_entities.template import Template
from message_templates.l3_interface_adapters.gateways.paths import USER_TEMPLATES_DIR
from message_templates.l3_interface_adapters.gateways.yaml_io import parse_yaml_mapping

log = logging.getLogger('mtpl.repo')

_TEMPLATES_DIR = resources.files('message_templates') / 'templates'


def builtin_ids() -> set[str]:
    """Discover built-in template ids from the packaged templates directory."""
    return {p.name.removesuffix('.yaml') for p in _TEMPLATES_DIR.iterdir() if p.name.endswith('.yaml')}


def load_template_file(path: Path) -> Template:
    """Load a single template YAML file; the file stem is the id when none is stored."""
    data = parse_yaml_mapping(path.read_text(encoding='utf-8'), str(path))
    data.setdefault('id', path.name.removesuffix('.yaml'))
    return Template.model_validate(data)


class YamlTemplateRepository:
    """Stores one YAML file per template in a user directory, over read-only built-ins.

    A user file shadows the built-in with the same id. Saving a built-in
    writes a user copy; built-ins themselves cannot be deleted.
    """

    def __init__(self, user_dir: Path | None = None) -> None:
        self._user_dir = user_dir or USER_TEMPLATES_DIR

    @property
    def user_dir(self) -> Path:
        return self._user_dir

    def user_ids(self) -> set[str]:
        if not self._user_dir.is_dir():
            return set()
        return {p.name.removesuffix('.yaml') for p in self._user_dir.iterdir() if p.name.endswith('.yaml')}

    def all_ids(self) -> set[str]:
        return builtin_ids() | self.user_ids()

    def get(self, template_id: str) -> Template:
        if template_id in self.user_ids():
            return load_template_file(self._user_dir / f'{template_id}.yaml')
        if template_id in builtin_ids():
            return _load_builtin(template_id)
        available = ', '.join(sorted(self.all_ids()))
        raise TemplateNotFoundError(f"Template not found: '{template_id}'. Available templates: {available}")

    def resolve(self, template_ref: str) -> Template:
        """Resolve an id or an explicit YAML file path."""
        path = Path(template_ref)
        if path.suffix in ('.yaml', '.yml') and path.is_file():
            return load_template_file(path)
        return self.get(template_ref)

    def list_all(self) -> list[Template]:
        loaded: dict[str, Template] = {}
        # Built-ins first, then user overrides on top
        for template_id in builtin_ids():
            loaded[template_id] = _load_builtin(template_id)
        for template_id in self.user_ids():
            loaded[template_id] = load_template_file(self._user_dir / f'{template_id}.yaml')
        return [loaded[k] for k in sorted(loaded)]

    def save(self, template: Template) -> None:
        self._user_dir.mkdir(parents=True, exist_ok=True)
        path = self._user_dir / f'{template.id}.yaml'
        content = yaml.safe_dump(template.model_dump(mode='json'), sort_keys=False, allow_unicode=True)
        path.write_text(content, encoding='utf-8')
        log.debug('Wrote template %s to %s', template.id, path)

    def delete(self, template_id: str) -> None:
        if template_id not in self.user_ids():
            if template_id in builtin_ids():
                raise ValueError(f"'{template_id}' is a built-in template and cannot be deleted")
            raise TemplateNotFoundError(f"Template not found: '{template_id}'")
        (self._user_dir / f'{template_id}.yaml').unlink()
        log.debug('Removed template file for %s', template_id)


def _load_builtin(template_id: str) -> Template:
    template_file = _TEMPLATES_DIR / f'{template_id}.yaml'
    data = parse_yaml_mapping(template_file.read_text(encoding='utf-8'), f'built-in template {template_id}')
    data.setdefault('id', template_id)
    return Template.model_validate(data)
