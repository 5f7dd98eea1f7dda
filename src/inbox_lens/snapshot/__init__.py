"""Accessibility snapshot summarization (no markup parser required)."""

from inbox_lens.snapshot.models import SnapshotRow
from inbox_lens.snapshot.summarizer import (
    extract_email_rows,
    extract_key_lines,
    summarize_snapshot,
)

__all__ = [
    "SnapshotRow",
    "extract_email_rows",
    "extract_key_lines",
    "summarize_snapshot",
]
