"""L1 entity: inline markup styles offered by the editor toolbar."""

from __future__ import annotations

import enum


class MarkupStyle(enum.Enum):
    BOLD = 'bold'
    ITALIC = 'italic'
    UNDERLINE = 'underline'
    LINK = 'link'
