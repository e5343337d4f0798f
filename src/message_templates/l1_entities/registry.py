"""Effective placeholder registry: system placeholders plus one template's declarations."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from message_templates.l1_entities.placeholder import SYSTEM_PLACEHOLDERS, PlaceholderDeclaration
from message_templates.l1_entities.template import Template


class PlaceholderRegistry(BaseModel):
    """Immutable union of system and template placeholders.

    On an id collision both entries count as defined; ``lookup`` returns the
    template's declaration so its display metadata wins.
    """

    model_config = ConfigDict(frozen=True)

    system: tuple[PlaceholderDeclaration, ...] = ()
    declarations: tuple[PlaceholderDeclaration, ...] = ()

    @classmethod
    def build(
        cls,
        system: Iterable[PlaceholderDeclaration] = SYSTEM_PLACEHOLDERS,
        declarations: Iterable[PlaceholderDeclaration] = (),
    ) -> PlaceholderRegistry:
        return cls(system=tuple(system), declarations=tuple(declarations))

    def is_defined(self, placeholder_id: str) -> bool:
        return any(d.id == placeholder_id for d in self.declarations) or any(
            d.id == placeholder_id for d in self.system
        )

    def lookup(self, placeholder_id: str) -> PlaceholderDeclaration | None:
        for decl in self.declarations:
            if decl.id == placeholder_id:
                return decl
        for decl in self.system:
            if decl.id == placeholder_id:
                return decl
        return None

    def ids(self) -> list[str]:
        """System ids first, then template-only ids, each once."""
        return list(dict.fromkeys([d.id for d in self.system] + [d.id for d in self.declarations]))

    def entries(self) -> list[PlaceholderDeclaration]:
        """Resolved declaration for every id, in ``ids()`` order."""
        return [decl for decl in (self.lookup(i) for i in self.ids()) if decl is not None]


def effective_registry(
    template: Template,
    system: Iterable[PlaceholderDeclaration] = SYSTEM_PLACEHOLDERS,
) -> PlaceholderRegistry:
    return PlaceholderRegistry.build(system, template.declarations)


def is_defined(registry: PlaceholderRegistry, placeholder_id: str) -> bool:
    """Exact, case-sensitive membership test."""
    return registry.is_defined(placeholder_id)


def lookup(registry: PlaceholderRegistry, placeholder_id: str) -> PlaceholderDeclaration | None:
    return registry.lookup(placeholder_id)
