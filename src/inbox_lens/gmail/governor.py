"""Keep extracted records within a serialized size budget."""

from __future__ import annotations

import json
import logging
import os

from inbox_lens.gmail.models import (
    DetailViewRecord,
    ListViewRecord,
    TruncationInfo,
    ViewRecord,
)

logger = logging.getLogger(__name__)


DEFAULT_MAX_BYTES = int(os.environ.get("INBOX_LENS_MAX_BYTES", "50000"))
MAX_BOUNDED_ITEMS = 10
MAX_BOUNDED_BODY = 500
ELLIPSIS = "..."


def serialized_size(record: ViewRecord) -> int:
    """UTF-8 size of the record's indented JSON form."""
    return len(json.dumps(record.to_dict(), indent=2, ensure_ascii=False).encode("utf-8"))


def bound(record: ViewRecord, max_bytes: int = DEFAULT_MAX_BYTES) -> ViewRecord:
    """Truncate the record in place when its JSON form exceeds ``max_bytes``.

    A single pass: item lists are cut to ``MAX_BOUNDED_ITEMS`` and a detail
    body to ``MAX_BOUNDED_BODY`` characters plus an ellipsis. The size is not
    re-measured afterwards, so the budget is a soft cap.
    """
    size = serialized_size(record)
    logger.debug("Record for %s is %d bytes (budget %d)", record.url, size, max_bytes)
    if size <= max_bytes:
        return record

    if isinstance(record, ListViewRecord) and len(record.items) > MAX_BOUNDED_ITEMS:
        original_count = len(record.items)
        del record.items[MAX_BOUNDED_ITEMS:]
        info = _truncation(record)
        info.items = True
        info.original_count = original_count
        logger.info("Truncated %d list items to %d", original_count, MAX_BOUNDED_ITEMS)

    if isinstance(record, DetailViewRecord):
        body = record.message.body
        if len(body) > MAX_BOUNDED_BODY and body != body[:MAX_BOUNDED_BODY] + ELLIPSIS:
            record.message.body = body[:MAX_BOUNDED_BODY] + ELLIPSIS
            _truncation(record).body = True
            logger.info("Truncated message body of %d chars to %d", len(body), MAX_BOUNDED_BODY)

    return record


def _truncation(record: ListViewRecord | DetailViewRecord) -> TruncationInfo:
    if record.truncated is None:
        record.truncated = TruncationInfo()
    return record.truncated
