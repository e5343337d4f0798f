"""Use case: render a human-readable preview of a template."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from message_templates.l1_entities.template import Template
from message_templates.l2_use_cases.ports.sample_source import SampleSource
from message_templates.l2_use_cases.utils.markup import render_preview

log = logging.getLogger('mtpl.engine')


class RenderPreviewUseCase:
    """Assembles a binding map and renders the template body with it.

    Precedence, lowest to highest: sample values, declaration defaults,
    caller overrides.
    """

    def __init__(self, samples: SampleSource | None = None, *, escape_html: bool = False) -> None:
        self._samples = samples
        self._escape_html = escape_html

    def bindings_for(self, template: Template, overrides: Mapping[str, str] | None = None) -> dict[str, str]:
        bindings: dict[str, str] = dict(self._samples.sample_bindings()) if self._samples else {}
        for decl in template.declarations:
            if decl.default_value is not None:
                bindings[decl.id] = decl.default_value
        if overrides:
            bindings.update(overrides)
        return bindings

    def execute(
        self,
        template: Template,
        overrides: Mapping[str, str] | None = None,
        *,
        body: str | None = None,
    ) -> str:
        text = template.body if body is None else body
        bindings = self.bindings_for(template, overrides)
        log.debug('Rendering preview for %s with %d binding(s)', template.id, len(bindings))
        return render_preview(text, bindings, escape_html=self._escape_html)
