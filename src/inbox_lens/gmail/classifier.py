"""Map a Gmail URL to the kind of view it renders."""

from __future__ import annotations

import logging
import re

from inbox_lens.gmail.models import ViewKind

logger = logging.getLogger(__name__)

LIST_FOLDERS = ("inbox", "starred", "sent", "snoozed", "drafts")

_MAILBOX = r"(?:mail\.google|gmail)\.com/mail/u/\d+/"
_FOLDER = r"(?:" + "|".join(LIST_FOLDERS) + r"|label/[^/?#]+)"

# Evaluated in declared order; the first match wins.
VIEW_PATTERNS: tuple[tuple[ViewKind, re.Pattern[str]], ...] = (
    (ViewKind.LIST, re.compile(_MAILBOX + r"#" + _FOLDER + r"(?:/p\d+)?/?$")),
    (ViewKind.DETAIL, re.compile(_MAILBOX + r"#" + _FOLDER + r"/[A-Za-z0-9]+/?$")),
    (ViewKind.COMPOSE, re.compile(_MAILBOX + r".*[#?&]compose\b")),
    (ViewKind.SEARCH, re.compile(_MAILBOX + r"#search/")),
)


def classify(url: str | None) -> ViewKind:
    """Return the view kind for ``url``; ``GENERIC`` when nothing matches."""
    if not url:
        return ViewKind.GENERIC
    for kind, pattern in VIEW_PATTERNS:
        if pattern.search(url):
            logger.debug("Classified %s as %s view", url, kind.value)
            return kind
    return ViewKind.GENERIC
