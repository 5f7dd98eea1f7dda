"""Turn rendered Gmail markup into a bounded structured record."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from inbox_lens.gmail.classifier import classify
from inbox_lens.gmail.extractors import EXTRACTORS
from inbox_lens.gmail.governor import DEFAULT_MAX_BYTES, bound
from inbox_lens.gmail.models import ViewRecord

logger = logging.getLogger(__name__)


def parse_gmail_dom(
    html: str,
    url: str,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> ViewRecord:
    """Classify ``url``, extract the matching record from ``html`` and bound its size.

    This is a pure parsing function — no network calls. Errors raised by the
    HTML parser itself are not caught.
    """
    doc = BeautifulSoup(html or "", "html.parser")
    kind = classify(url)
    record = EXTRACTORS[kind](doc, url or "")
    logger.debug("Extracted %s record from %s", kind.value, url)
    return bound(record, max_bytes=max_bytes)
