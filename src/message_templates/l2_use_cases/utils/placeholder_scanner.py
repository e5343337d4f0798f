"""Pure lexical pass over template text: find ``{{token}}`` markers."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import NamedTuple

# Token excludes both brace characters, so unterminated or nested markers never match.
MARKER_PATTERN = re.compile(r'\{\{([^{}]+)\}\}')


class PlaceholderMatch(NamedTuple):
    token: str
    start: int
    end: int


def scan_placeholders(body: str) -> Iterator[PlaceholderMatch]:
    """Yield each marker in *body* in order; token is whitespace-trimmed.

    A fresh iterator is produced on every call, so scans are restartable.
    Markers whose token is blank after trimming are skipped.
    """
    for match in MARKER_PATTERN.finditer(body):
        token = match.group(1).strip()
        if token:
            yield PlaceholderMatch(token, match.start(), match.end())


def used_placeholders(body: str) -> list[str]:
    """Distinct tokens in order of first appearance."""
    return list(dict.fromkeys(m.token for m in scan_placeholders(body)))
