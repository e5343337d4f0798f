"""Pure functions for turning template text into a preview string."""

from __future__ import annotations

import html
import re
from collections.abc import Mapping, Sequence
from typing import NamedTuple

from message_templates.l2_use_cases.utils.placeholder_scanner import MARKER_PATTERN


class MarkupRule(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    replacement: str


# Applied strictly in this order. Bold must precede italic, otherwise the
# inner ``*`` pairs of a ``**bold**`` span are consumed as italics first.
MARKUP_RULES: tuple[MarkupRule, ...] = (
    MarkupRule('bold', re.compile(r'\*\*(.*?)\*\*'), r'<strong>\1</strong>'),
    MarkupRule('italic', re.compile(r'\*(.*?)\*'), r'<em>\1</em>'),
    MarkupRule('underline', re.compile(r'_(.*?)_'), r'<u>\1</u>'),
    MarkupRule('link', re.compile(r'\[(.*?)\]\((.*?)\)'), r'<a href="\2">\1</a>'),
    MarkupRule('line_break', re.compile(r'\n'), '<br>'),
)


def substitute(body: str, bindings: Mapping[str, str]) -> str:
    """Replace bound markers with their literal values in a single pass.

    Values are inserted as text and never re-scanned. Unbound markers stay verbatim.
    """

    def _replace(match: re.Match[str]) -> str:
        token = match.group(1).strip()
        if token in bindings:
            return str(bindings[token])
        return match.group(0)

    return MARKER_PATTERN.sub(_replace, body)


def apply_markup(text: str, rules: Sequence[MarkupRule] = MARKUP_RULES) -> str:
    """Run each rule as one global replace over the previous rule's output."""
    for rule in rules:
        text = rule.pattern.sub(rule.replacement, text)
    return text


def render_preview(body: str, bindings: Mapping[str, str], *, escape_html: bool = False) -> str:
    """Substitute placeholders, optionally HTML-escape, then apply inline markup."""
    text = substitute(body, bindings)
    if escape_html:
        text = html.escape(text, quote=True)
    return apply_markup(text)
