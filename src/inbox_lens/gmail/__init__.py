"""Gmail page extraction — classify a view, extract a record, bound and summarize it.

Markup-dependent imports are deferred. Use explicit imports:
    from inbox_lens.gmail.parser import parse_gmail_dom
    from inbox_lens.gmail.summarizer import summarize_record
    etc.
"""

# Light imports only (no external deps)
from inbox_lens.gmail.classifier import classify
from inbox_lens.gmail.governor import DEFAULT_MAX_BYTES, bound
from inbox_lens.gmail.models import (
    ActionableElement,
    ComposeViewRecord,
    DetailViewRecord,
    GenericViewRecord,
    ListViewRecord,
    SearchViewRecord,
    ViewKind,
)
from inbox_lens.gmail.summarizer import summarize_record


def __getattr__(name):
    """Lazy imports for functions that need BeautifulSoup."""
    if name == "parse_gmail_dom":
        from inbox_lens.gmail.parser import parse_gmail_dom
        return parse_gmail_dom
    if name == "parse_pagination":
        from inbox_lens.gmail.selectors import parse_pagination
        return parse_pagination
    if name == "parse_unread_count":
        from inbox_lens.gmail.selectors import parse_unread_count
        return parse_unread_count
    if name == "resolve_reference":
        from inbox_lens.gmail.selectors import resolve_reference
        return resolve_reference
    if name == "describe_actionable":
        from inbox_lens.gmail.selectors import describe_actionable
        return describe_actionable
    raise AttributeError(f"module 'inbox_lens.gmail' has no attribute {name!r}")


__all__ = [
    "classify",
    "bound",
    "DEFAULT_MAX_BYTES",
    "summarize_record",
    "parse_gmail_dom",
    "parse_pagination",
    "parse_unread_count",
    "resolve_reference",
    "describe_actionable",
    "ViewKind",
    "ActionableElement",
    "ListViewRecord",
    "SearchViewRecord",
    "DetailViewRecord",
    "ComposeViewRecord",
    "GenericViewRecord",
]
