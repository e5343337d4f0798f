"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LibraryConfig(BaseModel):
    directory: str | None = None  # None → platform user config dir
    default_category: str
    default_language: str


class PreviewConfig(BaseModel):
    # Unquoted YAML such as `contact-phone: +1234567890` loads as an int
    model_config = ConfigDict(coerce_numbers_to_str=True)

    sample_values: dict[str, str] = Field(default_factory=dict)
    date_format: str
    time_format: str
    escape_html: bool


class AppConfig(BaseModel):
    library: LibraryConfig
    preview: PreviewConfig
