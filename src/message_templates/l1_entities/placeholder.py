"""Placeholder declaration entities."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class PlaceholderKind(enum.Enum):
    """Descriptive only; picks an input control in authoring UIs."""

    TEXT = 'text'
    NUMBER = 'number'
    DATE = 'date'
    PHONE = 'phone'
    EMAIL = 'email'
    URL = 'url'
    CONTACT_FIELD = 'contact-field'


def marker_for(placeholder_id: str) -> str:
    """Return the marker text written into a template body for *placeholder_id*."""
    return '{{' + placeholder_id + '}}'


class PlaceholderDeclaration(BaseModel):
    """A named placeholder a template body may reference."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str = ''
    kind: PlaceholderKind = PlaceholderKind.TEXT
    required: bool = False
    default_value: str | None = None
    description: str | None = None

    @property
    def marker(self) -> str:
        return marker_for(self.id)


SYSTEM_PLACEHOLDERS: tuple[PlaceholderDeclaration, ...] = (
    PlaceholderDeclaration(
        id='contact-name',
        display_name='Contact Name',
        description='The name of the contact',
    ),
    PlaceholderDeclaration(
        id='contact-phone',
        display_name='Phone Number',
        kind=PlaceholderKind.PHONE,
        description='Contact phone number',
    ),
    PlaceholderDeclaration(
        id='contact-email',
        display_name='Email Address',
        kind=PlaceholderKind.EMAIL,
        description='Contact email address',
    ),
    PlaceholderDeclaration(
        id='company-name',
        display_name='Company Name',
        description='Name of the company',
    ),
    PlaceholderDeclaration(
        id='agent-name',
        display_name='Agent Name',
        description='Name of the assigned agent',
    ),
    PlaceholderDeclaration(
        id='current-date',
        display_name='Current Date',
        kind=PlaceholderKind.DATE,
        description="Today's date",
    ),
    PlaceholderDeclaration(
        id='current-time',
        display_name='Current Time',
        description='Current time',
    ),
)
