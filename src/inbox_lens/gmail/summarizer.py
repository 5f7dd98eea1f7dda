"""Compress an extracted record into a few lines of plain text."""

from __future__ import annotations

from inbox_lens.exceptions import UnsupportedRecordError
from inbox_lens.gmail.models import (
    ComposeViewRecord,
    DetailViewRecord,
    GenericViewRecord,
    ListViewRecord,
    Participant,
    ViewRecord,
)

MAX_SUMMARY_ITEMS = 10
MAX_SUMMARY_BODY = 300

NO_DATA_MESSAGE = "No Gmail data."
NO_ITEMS_MESSAGE = "No emails found."
COMPOSE_MESSAGE = "Gmail compose window is open."
UNKNOWN_VIEW_MESSAGE = "Unknown Gmail view."


def summarize_record(record: ViewRecord | None) -> str:
    """One case per view kind; anything that is not a record is rejected."""
    if record is None:
        return NO_DATA_MESSAGE
    if isinstance(record, ListViewRecord):
        return _summarize_list(record)
    if isinstance(record, DetailViewRecord):
        return _summarize_detail(record)
    if isinstance(record, ComposeViewRecord):
        return COMPOSE_MESSAGE
    if isinstance(record, GenericViewRecord):
        return f"Page: {record.page_title}" if record.page_title else UNKNOWN_VIEW_MESSAGE
    raise UnsupportedRecordError(f"Cannot summarize {type(record).__name__}")


def _summarize_list(record: ListViewRecord) -> str:
    if not record.items:
        return NO_ITEMS_MESSAGE
    return "\n".join(
        f"{i}. From: {item.sender} | Subject: {item.subject} | Snippet: {item.snippet}"
        for i, item in enumerate(record.items[:MAX_SUMMARY_ITEMS], start=1)
    )


def _summarize_detail(record: DetailViewRecord) -> str:
    message = record.message
    recipients = ", ".join(r.name or r.email for r in message.recipients)
    body = (message.body or "")[:MAX_SUMMARY_BODY]
    lines = [
        ("Subject", message.subject),
        ("From", format_participant(message.sender)),
        ("To", recipients),
        ("Date", message.date),
        ("Body", body),
    ]
    return "\n".join(f"{label}: {_one_line(value)}" for label, value in lines)


def _one_line(value: str) -> str:
    return " ".join((value or "").splitlines())


def format_participant(sender: Participant | str | None) -> str:
    """Render a sender given either as plain text or as a name/address pair."""
    if sender is None:
        return ""
    if isinstance(sender, str):
        return sender
    if sender.name and sender.email:
        return f"{sender.name} <{sender.email}>"
    return sender.name or sender.email
