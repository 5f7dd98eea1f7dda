"""Summarize a textual accessibility-tree snapshot without building a record.

Snapshots are the YAML-like outline a remote browser returns, e.g.::

    - Page URL: https://mail.google.com/mail/u/0/#inbox
    - navigation "Main menu" [ref=e12]:
      - link "Inbox 3 unread messages" [ref=e15]
    - row "unread, Alice, Lunch?, Are you free, 10:42 AM" [ref=e40]:
"""

from __future__ import annotations

import re

from inbox_lens.snapshot.models import SnapshotRow

MAX_KEY_LINES = 10
MAX_ROWS = 10
FALLBACK_LINES = 3
MIN_ROW_FIELDS = 4

SUMMARY_MARKER = "... (summary, summarized)"
TRUNCATION_MARKER = "... (truncated, summarized)"
ROWS_HEADING = "# Visible Emails"

KEY_LINE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"alert"),
    re.compile(r"navigation"),
    re.compile(r"Inbox"),
    re.compile(r"unread messages"),
    re.compile(r"Conversation moved to Trash"),
    re.compile(r"Page URL:"),
    re.compile(r"Page Title:"),
)

_ROW_RE = re.compile(r'- row "([^"]+)" \[ref=(\w+)\]:')
_DATE_TOKEN_RE = re.compile(
    r"\d{1,2}:\d{2}\s*(?:AM|PM)?|Mon|Tue|Wed|Thu|Fri|Sat|Sun"
    r"|Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec",
    re.IGNORECASE,
)


def extract_email_rows(text: str | None) -> list[SnapshotRow]:
    """Rows with at least four comma-separated fields and a date or time token."""
    rows = []
    for match in _ROW_RE.finditer(text or ""):
        details, ref = match.group(1), match.group(2)
        if len(details.split(",")) >= MIN_ROW_FIELDS and _DATE_TOKEN_RE.search(details):
            rows.append(SnapshotRow(ref=ref, details=details))
    return rows


def extract_key_lines(text: str | None, limit: int = MAX_KEY_LINES) -> list[str]:
    """Alert, navigation, counter and page-marker lines, in order, stripped."""
    key_lines: list[str] = []
    for line in (text or "").split("\n"):
        if len(key_lines) >= limit:
            break
        if any(pattern.search(line) for pattern in KEY_LINE_PATTERNS):
            key_lines.append(line.strip())
    return key_lines


def summarize_snapshot(text: str | None) -> str:
    """Key lines plus a numbered block of visible email rows.

    Falls back to the first few raw lines when nothing recognisable is found.
    The result always ends with a marker so it is never mistaken for the
    full snapshot.
    """
    text = text or ""
    key_lines = extract_key_lines(text)
    rows = extract_email_rows(text)[:MAX_ROWS]

    if not key_lines and not rows:
        head = text.split("\n")[:FALLBACK_LINES]
        return "\n".join(head) + "\n" + TRUNCATION_MARKER

    parts = list(key_lines)
    if rows:
        parts.append(ROWS_HEADING)
        parts.extend(f"{i}. [ref={row.ref}] {row.details}" for i, row in enumerate(rows, start=1))
    return "\n".join(parts) + "\n" + SUMMARY_MARKER
