"""Presenter: realistic sample values for previewing system placeholders."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from message_templates.l1_entities.config import PreviewConfig


class ConfigSampleSource:
    """Implements SampleSource from preview config plus clock-derived dates.

    ``last-contact-date`` is the day before now, so follow-up templates preview
    without a raw marker. Configured ``sample_values`` win over every derived value.
    """

    def __init__(self, config: PreviewConfig, clock: Callable[[], datetime] = datetime.now) -> None:
        self._config = config
        self._clock = clock

    def sample_bindings(self) -> dict[str, str]:
        now = self._clock()
        bindings = {
            'current-date': now.strftime(self._config.date_format),
            'current-time': now.strftime(self._config.time_format),
            'last-contact-date': (now - timedelta(days=1)).strftime(self._config.date_format),
        }
        bindings.update(self._config.sample_values)
        return bindings
