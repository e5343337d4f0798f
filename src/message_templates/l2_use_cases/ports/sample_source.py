"""Port: preview sample values."""

from __future__ import annotations

from typing import Protocol


class SampleSource(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Supplies realistic values for system placeholders when previewing."""

    def sample_bindings(self) -> dict[str, str]:
        """Return a binding map keyed by placeholder id."""
        ...
