"""Domain error types."""


class TemplateNotFoundError(FileNotFoundError):
    """Raised when a template id or path cannot be resolved."""


class DuplicatePlaceholderError(ValueError):
    """Raised when a template declares the same placeholder id more than once."""


class TemplateValidationError(Exception):
    """Raised when a template with validation findings is promoted or saved as active."""

    def __init__(self, template_id: str, findings: list[str]) -> None:
        self.template_id = template_id
        self.findings = list(findings)
        super().__init__(f"Template '{template_id}' has {len(self.findings)} problem(s): {'; '.join(self.findings)}")


class MalformedFileError(ValueError):
    """Raised when a config or template file is not a YAML mapping."""
