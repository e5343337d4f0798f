"""message-templates -- placeholder validation and preview rendering for outbound message templates."""

__version__ = '0.3.0'
