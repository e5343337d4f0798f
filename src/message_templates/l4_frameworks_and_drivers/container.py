"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from message_templates.l1_entities.config import AppConfig
from message_templates.l1_entities.placeholder import SYSTEM_PLACEHOLDERS
from message_templates.l2_use_cases.ports.sample_source import SampleSource
from message_templates.l2_use_cases.render_preview_use_case import RenderPreviewUseCase
from message_templates.l2_use_cases.template_library_use_case import TemplateLibraryUseCase
from message_templates.l2_use_cases.validate_template_use_case import ValidateTemplateUseCase
from message_templates.l3_interface_adapters.gateways.yaml_template_repository import YamlTemplateRepository
from message_templates.l3_interface_adapters.presenters.sample_bindings import ConfigSampleSource


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, config: AppConfig, repository: YamlTemplateRepository | None = None) -> None:
        self.config = config

        user_dir = Path(config.library.directory).expanduser() if config.library.directory else None
        self.repository: YamlTemplateRepository = repository or YamlTemplateRepository(user_dir)
        self.samples: SampleSource = ConfigSampleSource(config.preview)

        self.validator = ValidateTemplateUseCase(SYSTEM_PLACEHOLDERS)
        self.renderer = RenderPreviewUseCase(self.samples, escape_html=config.preview.escape_html)
        self.library = TemplateLibraryUseCase(self.repository, self.validator)

