"""Use case: validate a template against the system placeholders and its own declarations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field

from message_templates.l1_entities.placeholder import SYSTEM_PLACEHOLDERS, PlaceholderDeclaration
from message_templates.l1_entities.registry import PlaceholderRegistry, effective_registry
from message_templates.l1_entities.template import Template
from message_templates.l2_use_cases.utils.placeholder_scanner import used_placeholders
from message_templates.l2_use_cases.utils.template_validator import validate_template

log = logging.getLogger('mtpl.engine')


class ValidationReport(BaseModel):
    template_id: str
    findings: list[str] = Field(default_factory=list)
    used: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.findings


class ValidateTemplateUseCase:
    """Builds the effective registry for a template and validates its body."""

    def __init__(self, system_placeholders: Iterable[PlaceholderDeclaration] = SYSTEM_PLACEHOLDERS) -> None:
        self._system = tuple(system_placeholders)

    def registry_for(self, template: Template) -> PlaceholderRegistry:
        return effective_registry(template, self._system)

    def execute(self, template: Template, body: str | None = None) -> ValidationReport:
        """Validate *template*, or *body* in its place when the editor holds unsaved text."""
        text = template.body if body is None else body
        findings = validate_template(text, template.declarations, self.registry_for(template))
        log.debug('Validated template %s: %d finding(s)', template.id, len(findings))
        return ValidationReport(template_id=template.id, findings=findings, used=used_placeholders(text))
