"""Tests for the effective placeholder registry."""

from message_templates.l1_entities.placeholder import PlaceholderDeclaration, PlaceholderKind
from message_templates.l1_entities.registry import PlaceholderRegistry, effective_registry, is_defined, lookup
from message_templates.l1_entities.template import Template


class TestIsDefined:
    def test_system_placeholder_defined_without_declarations(self, system_registry: PlaceholderRegistry):
        assert is_defined(system_registry, 'contact-name')

    def test_unknown_not_defined(self, system_registry: PlaceholderRegistry):
        assert not is_defined(system_registry, 'unknown-field')

    def test_case_sensitive(self, system_registry: PlaceholderRegistry):
        assert not is_defined(system_registry, 'Contact-Name')

    def test_template_declaration_defined(self):
        tmpl = Template(id='t', declarations=[PlaceholderDeclaration(id='order-id')])
        assert is_defined(effective_registry(tmpl), 'order-id')

    def test_empty_registry(self):
        assert not PlaceholderRegistry().is_defined('contact-name')


class TestLookup:
    def test_lookup_system(self, system_registry: PlaceholderRegistry):
        decl = lookup(system_registry, 'contact-phone')
        assert decl is not None
        assert decl.kind is PlaceholderKind.PHONE

    def test_lookup_missing(self, system_registry: PlaceholderRegistry):
        assert lookup(system_registry, 'nope') is None

    def test_template_metadata_wins_on_collision(self):
        custom = PlaceholderDeclaration(
            id='contact-name', display_name='Customer', kind=PlaceholderKind.CONTACT_FIELD, required=True
        )
        registry = PlaceholderRegistry.build(declarations=[custom])
        assert registry.lookup('contact-name') == custom
        assert registry.is_defined('contact-name')


class TestIds:
    def test_system_first_then_template_only(self):
        registry = PlaceholderRegistry.build(
            declarations=[PlaceholderDeclaration(id='contact-name'), PlaceholderDeclaration(id='order-id')]
        )
        ids = registry.ids()
        assert ids[0] == 'contact-name'
        assert ids[-1] == 'order-id'
        assert ids.count('contact-name') == 1

    def test_entries_resolve_collisions(self):
        custom = PlaceholderDeclaration(id='agent-name', display_name='Rep')
        registry = PlaceholderRegistry.build(declarations=[custom])
        by_id = {d.id: d for d in registry.entries()}
        assert by_id['agent-name'].display_name == 'Rep'
        assert len(registry.entries()) == len(registry.ids())
