"""Pure string-splice helpers backing the editor toolbar and variable picker."""

from __future__ import annotations

from typing import NamedTuple

from message_templates.l1_entities.markup import MarkupStyle
from message_templates.l1_entities.placeholder import PlaceholderDeclaration

LINK_PLACEHOLDER_LABEL = 'Link text'
LINK_PLACEHOLDER_TARGET = 'https://example.com'


class EditResult(NamedTuple):
    body: str
    cursor: int


def _clamp(pos: int, body: str) -> int:
    return max(0, min(pos, len(body)))


def _splice(body: str, start: int, end: int, text: str) -> EditResult:
    new_body = body[:start] + text + body[end:]
    return EditResult(new_body, start + len(text))


def insert_placeholder(
    body: str,
    cursor: int,
    declaration: PlaceholderDeclaration,
    *,
    selection_end: int | None = None,
) -> EditResult:
    """Insert *declaration*'s marker at *cursor*, replacing any selection up to *selection_end*."""
    start = _clamp(cursor, body)
    end = start if selection_end is None else _clamp(selection_end, body)
    start, end = min(start, end), max(start, end)
    return _splice(body, start, end, declaration.marker)


def wrap_selection(selected: str, style: MarkupStyle) -> str:
    if style is MarkupStyle.BOLD:
        return f'**{selected}**'
    if style is MarkupStyle.ITALIC:
        return f'*{selected}*'
    if style is MarkupStyle.UNDERLINE:
        return f'_{selected}_'
    return f'[{selected or LINK_PLACEHOLDER_LABEL}]({LINK_PLACEHOLDER_TARGET})'


def apply_inline_markup(
    body: str,
    selection_start: int,
    selection_end: int,
    style: MarkupStyle,
) -> EditResult:
    """Wrap the selected range in *style*'s markers; cursor lands after the inserted markup."""
    start, end = sorted((_clamp(selection_start, body), _clamp(selection_end, body)))
    return _splice(body, start, end, wrap_selection(body[start:end], style))
