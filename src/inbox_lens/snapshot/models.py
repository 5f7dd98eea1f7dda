"""Data models for the accessibility snapshot module."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SnapshotRow:
    """A ``row`` node of a snapshot that reads like an email."""

    ref: str
    details: str  # comma-separated accessible name: sender, subject, snippet, date...
