"""Unified exception hierarchy for inbox-lens.

Extraction itself never raises for missing or unexpected page structure;
these cover misuse of the public API only.
"""


class InboxLensError(Exception):
    """Base exception for all inbox-lens errors."""


# Records
class RecordError(InboxLensError):
    """Base exception for structured record problems."""


class UnsupportedRecordError(RecordError, TypeError):
    """Object handed to a summarizer is not a known record variant."""


# Agent tools
class ToolError(InboxLensError):
    """Base exception for agent tool wrapping."""


class ToolConfigurationError(ToolError, ValueError):
    """A tool wrapper was built around something that cannot be called."""
