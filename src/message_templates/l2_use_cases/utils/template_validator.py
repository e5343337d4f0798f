"""Pure validation of template text against an effective placeholder registry."""

from __future__ import annotations

from collections.abc import Sequence

from message_templates.l1_entities.placeholder import PlaceholderDeclaration
from message_templates.l1_entities.registry import PlaceholderRegistry
from message_templates.l2_use_cases.utils.placeholder_scanner import used_placeholders


def undefined_variable(token: str) -> str:
    return f'Undefined variable: {token}'


def required_not_used(placeholder_id: str) -> str:
    return f'Required variable not used: {placeholder_id}'


def validate_template(
    body: str,
    declarations: Sequence[PlaceholderDeclaration],
    registry: PlaceholderRegistry,
) -> list[str]:
    """Return findings; an empty list means the template is valid.

    Undefined-variable findings come first (first-appearance order, one per
    token), then required-but-unused findings (declaration order).
    """
    used = used_placeholders(body)
    findings = [undefined_variable(token) for token in used if not registry.is_defined(token)]
    used_set = set(used)
    findings.extend(required_not_used(d.id) for d in declarations if d.required and d.id not in used_set)
    return findings
