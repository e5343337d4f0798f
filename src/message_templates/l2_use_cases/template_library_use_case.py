"""Use case: manage the template library (create, save, promote, copy, search)."""

from __future__ import annotations

import logging
import time
from datetime import datetime

from message_templates.l1_entities.errors import TemplateNotFoundError, TemplateValidationError
from message_templates.l1_entities.template import Template, TemplateStatus, new_draft
from message_templates.l2_use_cases.ports.template_repository import TemplateRepository
from message_templates.l2_use_cases.validate_template_use_case import ValidateTemplateUseCase, ValidationReport

log = logging.getLogger('mtpl.library')

ALL_CATEGORIES = 'all'


class TemplateLibraryUseCase:
    """Lifecycle operations over a TemplateRepository.

    Only templates without findings may be active; that policy is enforced
    here, never inside the validation engine.
    """

    def __init__(self, repository: TemplateRepository, validator: ValidateTemplateUseCase | None = None) -> None:
        self._repo = repository
        self._validator = validator or ValidateTemplateUseCase()

    def create(self, name: str = 'New Template', *, category: str = 'general', language: str = 'en') -> Template:
        template = new_draft(self._new_id(), name, category=category, language=language)
        self._repo.save(template)
        log.info('Created template %s (%s)', template.id, name)
        return template

    def save(self, template: Template, body: str | None = None) -> ValidationReport:
        """Persist *template* (with *body* if given). Active templates must validate cleanly."""
        if body is not None:
            template.body = body
        report = self._validator.execute(template)
        if template.status is TemplateStatus.ACTIVE and not report.is_valid:
            raise TemplateValidationError(template.id, report.findings)
        template.last_modified_at = datetime.now()
        self._repo.save(template)
        log.info('Saved template %s (%d finding(s))', template.id, len(report.findings))
        return report

    def activate(self, template: Template) -> Template:
        report = self._validator.execute(template)
        if not report.is_valid:
            log.warning('Refusing to activate %s: %s', template.id, '; '.join(report.findings))
            raise TemplateValidationError(template.id, report.findings)
        template.status = TemplateStatus.ACTIVE
        template.last_modified_at = datetime.now()
        self._repo.save(template)
        return template

    def archive(self, template: Template) -> Template:
        template.status = TemplateStatus.ARCHIVED
        template.last_modified_at = datetime.now()
        self._repo.save(template)
        return template

    def duplicate(self, template: Template) -> Template:
        now = datetime.now()
        copy = template.model_copy(
            update={
                'id': self._new_id(),
                'name': f'{template.name} (copy)',
                'status': TemplateStatus.DRAFT,
                'usage_count': 0,
                'created_at': now,
                'last_modified_at': now,
            },
            deep=True,
        )
        self._repo.save(copy)
        log.info('Duplicated template %s as %s', template.id, copy.id)
        return copy

    def delete(self, template_id: str) -> None:
        self._repo.delete(template_id)
        log.info('Deleted template %s', template_id)

    def record_usage(self, template: Template) -> Template:
        template.usage_count += 1
        self._repo.save(template)
        return template

    def search(self, query: str = '', category: str | None = None) -> list[Template]:
        """Case-insensitive match on name, body or any tag; sorted by name."""
        needle = query.strip().lower()
        results = []
        for tmpl in self._repo.list_all():
            if category not in (None, ALL_CATEGORIES) and tmpl.category != category:
                continue
            if needle and not _matches(tmpl, needle):
                continue
            results.append(tmpl)
        return sorted(results, key=lambda t: (t.name.lower(), t.id))

    def _new_id(self) -> str:
        stamp = time.time_ns() // 1_000_000
        candidate = f'template-{stamp}'
        while self._exists(candidate):
            stamp += 1
            candidate = f'template-{stamp}'
        return candidate

    def _exists(self, template_id: str) -> bool:
        try:
            self._repo.get(template_id)
        except TemplateNotFoundError:
            return False
        return True


def _matches(template: Template, needle: str) -> bool:
    return (
        needle in template.name.lower()
        or needle in template.body.lower()
        or any(needle in tag.lower() for tag in template.tags)
    )
