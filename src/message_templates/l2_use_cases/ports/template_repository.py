"""Port: template repository."""

from __future__ import annotations

from typing import Protocol

from message_templates.l1_entities.template import Template


class TemplateRepository(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract storage for templates."""

    def get(self, template_id: str) -> Template:
        """Load a template by id. Raises TemplateNotFoundError if absent."""
        ...

    def list_all(self) -> list[Template]:
        """All templates, user copies overriding built-ins of the same id."""
        ...

    def save(self, template: Template) -> None:
        """Persist *template*, replacing any stored copy with the same id."""
        ...

    def delete(self, template_id: str) -> None:
        """Remove a template. Raises TemplateNotFoundError if absent."""
        ...
