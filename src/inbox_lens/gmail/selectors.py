"""Low-level extraction heuristics shared by the view extractors.

Every helper here tolerates missing or unexpected markup: absence of a
node yields ``None``, an empty string, an empty list or zero, never an
exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from bs4 import Tag

from inbox_lens.gmail.models import (
    ActionableElement,
    Attachment,
    MAX_BODY_LENGTH,
    Pagination,
    Participant,
)

T = TypeVar("T")

MAX_REF_DEPTH = 10
REF_ATTR = "ref"

_PAGINATION_RE = re.compile(r"(\d+)(?:\s*[–-]\s*(\d+))?\s+of\s+(\d[\d,]*)")
_UNREAD_RE = re.compile(r"(\d+)(?:\s+unread)?$")
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
_SIZE_RE = re.compile(r"\(([^)]+)\)")
_SUBJECT_SEPARATOR = " - "


def node_text(node: Tag | None) -> str:
    """Visible text of ``node`` with whitespace collapsed."""
    if node is None:
        return ""
    return re.sub(r"\s+", " ", node.get_text(separator=" ")).strip()


def resolve_reference(node: Tag | None, max_depth: int = MAX_REF_DEPTH) -> str | None:
    """Return the first reference id on ``node`` or its ancestors.

    At most ``max_depth`` nodes are inspected, starting with ``node`` itself.
    """
    current = node
    for _ in range(max_depth):
        if current is None:
            break
        if isinstance(current, Tag):
            ref = current.get(REF_ATTR)
            if ref:
                return ref
        current = current.parent
    return None


def describe_actionable(
    scope: Tag | None,
    selector: str | None = None,
) -> ActionableElement | None:
    """Describe an interactive element.

    With a ``selector`` the first matching descendant of ``scope`` is used,
    otherwise ``scope`` itself. Returns None when no element resolves.
    """
    if scope is None:
        return None
    node = scope.select_one(selector) if selector else scope
    if node is None:
        return None

    return ActionableElement(
        ref=resolve_reference(node),
        tag=(node.name or "").lower(),
        type=node.get("type"),
        aria_label=node.get("aria-label"),
        title=node.get("title"),
        text=node_text(node),
        href=node.get("href"),
        value=_form_value(node),
        is_disabled=node.has_attr("disabled") or node.get("aria-disabled") == "true",
    )


def _form_value(node: Tag) -> str | None:
    if node.name in ("input", "button", "option"):
        return node.get("value")
    if node.name == "textarea":
        return node.get_text()
    if node.name == "select":
        option = node.find("option", selected=True) or node.find("option")
        if option is None:
            return None
        return option.get("value", option.get_text())
    return None


def parse_pagination(text: str | None) -> Pagination | None:
    """Parse text like ``1–25 of 1,234`` or ``3 of 10``."""
    match = _PAGINATION_RE.search(text or "")
    if not match:
        return None
    start = int(match.group(1))
    return Pagination(
        start=start,
        end=int(match.group(2)) if match.group(2) else start,
        total=int(match.group(3).replace(",", "")),
    )


def parse_unread_count(text: str | None) -> int:
    """Trailing count of a navigation entry such as ``Inbox 42 unread``; 0 if absent."""
    match = _UNREAD_RE.search((text or "").strip())
    return int(match.group(1)) if match else 0


def split_subject(text: str) -> tuple[str, str]:
    """Split row text into (subject, snippet) at the first `` - ``."""
    subject, sep, snippet = text.partition(_SUBJECT_SEPARATOR)
    if not sep:
        return text.strip(), ""
    return subject.strip(), snippet.strip()


# Ordered candidate strategies


@dataclass(frozen=True)
class Candidate(Generic[T]):
    """One named way of finding a value; returns None when it finds nothing."""

    name: str
    extract: Callable[[Tag], T | None]

    def __call__(self, scope: Tag) -> T | None:
        return self.extract(scope)


def first_success(candidates: Iterable[Candidate[T]], scope: Tag | None) -> T | None:
    """Evaluate candidates in order and return the first non-empty result."""
    if scope is None:
        return None
    for candidate in candidates:
        result = candidate(scope)
        if result:
            return result
    return None


def _participant(selector: str) -> Candidate[Participant]:
    def extract(scope: Tag) -> Participant | None:
        node = scope.select_one(selector)
        if node is None:
            return None
        participant = _to_participant(node)
        if not participant.name and not participant.email:
            return None
        return participant

    return Candidate(f"sender:{selector}", extract)


def _to_participant(node: Tag) -> Participant:
    return Participant(
        name=node_text(node),
        email=node.get("email") or node.get("data-hovercard-id") or node.get("title") or "",
    )


def _dated_span(scope: Tag) -> str | None:
    node = scope.find("span", attrs={"title": YEAR_RE})
    return node.get("title") if node is not None else None


def _date_text(selector: str) -> Candidate[str]:
    def extract(scope: Tag) -> str | None:
        node = scope.select_one(selector)
        if node is None:
            return None
        return node.get("title") or node_text(node) or None

    return Candidate(f"date:{selector}", extract)


def _body_text(selector: str) -> Candidate[str]:
    def extract(scope: Tag) -> str | None:
        text = node_text(scope.select_one(selector))
        return text[:MAX_BODY_LENGTH] or None

    return Candidate(f"body:{selector}", extract)


SENDER_CANDIDATES: tuple[Candidate[Participant], ...] = (
    _participant('[data-hovercard-id*="@"]'),
    _participant("span[email]"),
    _participant('span[title*="@"]'),
    _participant(".go span[title]"),
)

DATE_CANDIDATES: tuple[Candidate[str], ...] = (
    Candidate("date:span[title~year]", _dated_span),
    _date_text(".g3[title]"),
    _date_text('td:-soup-contains("AM"), td:-soup-contains("PM")'),
)

BODY_CANDIDATES: tuple[Candidate[str], ...] = (
    _body_text('div[dir="ltr"][style*="font-family"]'),
    _body_text(".ii.gt div"),
    _body_text(".a3s.aiL"),
    _body_text('[data-smartmail="gmail_signature"]'),
)


def extract_sender(scope: Tag | None) -> Participant:
    return first_success(SENDER_CANDIDATES, scope) or Participant()


def extract_date(scope: Tag | None) -> str:
    return first_success(DATE_CANDIDATES, scope) or ""


def extract_body(scope: Tag | None) -> str:
    return first_success(BODY_CANDIDATES, scope) or ""


def extract_recipients(scope: Tag | None, sender: Participant | None = None) -> list[Participant]:
    """Every addressed participant on the page, minus the first one matching ``sender``."""
    if scope is None:
        return []
    recipients = []
    skip_sender = sender is not None and bool(sender.email or sender.name)
    for node in scope.select('[data-hovercard-id*="@"], span[email]'):
        participant = _to_participant(node)
        if skip_sender and participant == sender:
            skip_sender = False
            continue
        if participant.name or participant.email:
            recipients.append(participant)
    return recipients


def extract_attachments(scope: Tag | None) -> list[Attachment]:
    if scope is None:
        return []
    attachments = []
    for node in scope.select("span[download], a[download], .aZo"):
        name = node_text(node) or node.get("download") or ""
        if not name:
            continue
        size = _SIZE_RE.search(_sibling_text(node))
        attachments.append(Attachment(
            name=name,
            size=size.group(1) if size else "",
            download_ref=resolve_reference(node),
        ))
    return attachments


def _sibling_text(node: Tag) -> str:
    if node.parent is None:
        return ""
    return " ".join(
        node_text(sibling)
        for sibling in node.parent.find_all(True, recursive=False)
        if sibling is not node
    )
