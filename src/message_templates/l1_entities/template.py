"""Template Pydantic models — pure data, no I/O."""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from message_templates.l1_entities.errors import DuplicatePlaceholderError
from message_templates.l1_entities.placeholder import PlaceholderDeclaration


class TemplateStatus(enum.Enum):
    DRAFT = 'draft'
    ACTIVE = 'active'
    ARCHIVED = 'archived'


class AttachmentKind(enum.Enum):
    IMAGE = 'image'
    DOCUMENT = 'document'
    VIDEO = 'video'
    AUDIO = 'audio'


class Attachment(BaseModel):
    """Media carried alongside a template. Never inspected by the engine."""

    id: str
    kind: AttachmentKind
    name: str
    location_ref: str
    size_bytes: int = Field(default=0, ge=0)


class TemplateCategory(BaseModel):
    id: str
    label: str


TEMPLATE_CATEGORIES: tuple[TemplateCategory, ...] = (
    TemplateCategory(id='onboarding', label='Onboarding'),
    TemplateCategory(id='follow-up', label='Follow-up'),
    TemplateCategory(id='support', label='Support'),
    TemplateCategory(id='sales', label='Sales'),
    TemplateCategory(id='general', label='General'),
)


class Template(BaseModel):
    """A reusable outbound message. Only ``body`` is read structurally by the engine."""

    model_config = ConfigDict(validate_assignment=True)

    id: str
    name: str = 'New Template'
    body: str = ''
    declarations: list[PlaceholderDeclaration] = Field(default_factory=list)
    category: str = 'general'
    tags: set[str] = Field(default_factory=set)
    language: str = 'en'
    status: TemplateStatus = TemplateStatus.DRAFT
    created_at: datetime = Field(default_factory=datetime.now)
    last_modified_at: datetime = Field(default_factory=datetime.now)
    usage_count: int = Field(default=0, ge=0)
    attachments: list[Attachment] = Field(default_factory=list)

    @field_serializer('tags')
    def _serialize_tags(self, tags: set[str]) -> list[str]:
        return sorted(tags)

    @field_validator('declarations')
    @classmethod
    def _validate_unique_declaration_ids(cls, declarations: list[PlaceholderDeclaration]) -> list[PlaceholderDeclaration]:
        # Field-level so a rejected assignment leaves the stored list untouched.
        seen: set[str] = set()
        for decl in declarations:
            if decl.id in seen:
                raise DuplicatePlaceholderError(f"Duplicate placeholder id '{decl.id}'")
            seen.add(decl.id)
        return declarations

    def declaration(self, placeholder_id: str) -> PlaceholderDeclaration | None:
        for decl in self.declarations:
            if decl.id == placeholder_id:
                return decl
        return None

    def add_declaration(self, declaration: PlaceholderDeclaration) -> None:
        """Append *declaration*; raises DuplicatePlaceholderError if its id is already declared."""
        if self.declaration(declaration.id) is not None:
            raise DuplicatePlaceholderError(f"Duplicate placeholder id '{declaration.id}' in template '{self.id}'")
        self.declarations = [*self.declarations, declaration]

    def remove_declaration(self, placeholder_id: str) -> None:
        self.declarations = [d for d in self.declarations if d.id != placeholder_id]


def new_draft(
    template_id: str,
    name: str = 'New Template',
    *,
    category: str = 'general',
    language: str = 'en',
) -> Template:
    """Create an empty draft template stamped with the current time."""
    now = datetime.now()
    return Template(
        id=template_id,
        name=name,
        category=category,
        language=language,
        created_at=now,
        last_modified_at=now,
    )
