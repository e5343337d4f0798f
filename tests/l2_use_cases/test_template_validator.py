"""Tests for pure template validation."""

from message_templates.l1_entities.placeholder import PlaceholderDeclaration
from message_templates.l1_entities.registry import PlaceholderRegistry
from message_templates.l2_use_cases.utils.template_validator import validate_template
from tests.conftest import required


def _validate(body: str, declarations: list[PlaceholderDeclaration]) -> list[str]:
    return validate_template(body, declarations, PlaceholderRegistry.build(declarations=declarations))


class TestValidateTemplate:
    def test_clean_template(self):
        decls = [required('contact-name'), required('company-name')]
        assert _validate('Hello {{contact-name}}, welcome to {{company-name}}.', decls) == []

    def test_undefined_placeholder(self):
        assert _validate('Hi {{unknown-field}}', []) == ['Undefined variable: unknown-field']

    def test_unused_required(self):
        assert _validate('Hello there.', [required('contact-name')]) == [
            'Required variable not used: contact-name'
        ]

    def test_system_placeholder_always_defined(self):
        assert _validate('Today is {{current-date}}', []) == []

    def test_repeated_undefined_reported_once(self):
        body = '{{ghost}} and {{ghost}} and {{ ghost }}'
        assert _validate(body, []) == ['Undefined variable: ghost']

    def test_empty_body_only_reports_required(self):
        decls = [required('order-id'), PlaceholderDeclaration(id='coupon')]
        assert _validate('', decls) == ['Required variable not used: order-id']

    def test_undefined_before_required_and_ordered(self):
        decls = [required('second'), required('first')]
        body = '{{zeta}} {{alpha}} {{zeta}}'
        assert _validate(body, decls) == [
            'Undefined variable: zeta',
            'Undefined variable: alpha',
            'Required variable not used: second',
            'Required variable not used: first',
        ]

    def test_case_sensitive_tokens(self):
        assert _validate('{{Contact-Name}}', []) == ['Undefined variable: Contact-Name']

    def test_malformed_markers_ignored(self):
        assert _validate('Hi {{contact-name', []) == []

    def test_idempotent(self):
        decls = [required('order-id')]
        body = '{{nope}} {{contact-name}}'
        registry = PlaceholderRegistry.build(declarations=decls)
        first = validate_template(body, decls, registry)
        second = validate_template(body, decls, registry)
        assert first == second
        assert first == ['Undefined variable: nope', 'Required variable not used: order-id']

    def test_required_system_collision_counts_when_used(self):
        decls = [required('contact-name')]
        assert _validate('Dear {{contact-name}}', decls) == []
