"""Data models for the Gmail page extraction module."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum

MAX_ELEMENT_TEXT = 100
MAX_BODY_LENGTH = 1000
MAX_AVAILABLE_ACTIONS = 50


class ViewKind(str, Enum):
    """Page-state category that selects an extractor and a record shape."""

    LIST = "list"
    DETAIL = "detail"
    COMPOSE = "compose"
    SEARCH = "search"
    GENERIC = "generic"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class ActionableElement:
    """One interactive control on the page, enough for an agent to act on it."""

    ref: str | None
    tag: str
    type: str | None = None
    aria_label: str | None = None
    title: str | None = None
    text: str = ""
    href: str | None = None
    value: str | None = None
    is_disabled: bool = False

    def __post_init__(self):
        if len(self.text) > MAX_ELEMENT_TEXT:
            object.__setattr__(self, "text", self.text[:MAX_ELEMENT_TEXT])


@dataclass(frozen=True)
class Participant:
    """A name + address pair; either side may be empty."""

    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class Attachment:
    name: str
    size: str = ""
    download_ref: str | None = None


@dataclass(frozen=True)
class Pagination:
    start: int
    end: int
    total: int


@dataclass(frozen=True)
class NavigationEntry:
    """A folder or label link from the navigation pane."""

    name: str
    href: str | None
    ref: str | None
    unread_count: int = 0


@dataclass(frozen=True)
class Alert:
    message: str
    type: str = "info"
    dismiss: ActionableElement | None = None
    has_undo: bool = False


@dataclass
class TruncationInfo:
    """What the size governor cut from a record."""

    items: bool = False
    original_count: int | None = None
    body: bool = False


@dataclass
class RowActions:
    open: ActionableElement | None = None
    select: ActionableElement | None = None
    star: ActionableElement | None = None
    important: ActionableElement | None = None


@dataclass
class ListItem:
    """One conversation row of a message list."""

    ref: str | None = None
    sender: str = ""
    subject: str = ""
    snippet: str = ""
    date: str = ""
    is_unread: bool = False
    is_starred: bool = False
    is_important: bool = False
    has_attachment: bool = False
    labels: frozenset[str] = frozenset()
    actions: RowActions = field(default_factory=RowActions)


@dataclass
class ListActions:
    compose: ActionableElement | None = None
    refresh: ActionableElement | None = None
    select_all: ActionableElement | None = None
    bulk_actions: list[ActionableElement] = field(default_factory=list)


@dataclass
class Navigation:
    folders: list[NavigationEntry] = field(default_factory=list)
    labels: list[NavigationEntry] = field(default_factory=list)


@dataclass
class Message:
    """The message shown in a detail view."""

    subject: str = ""
    sender: Participant = field(default_factory=Participant)
    recipients: list[Participant] = field(default_factory=list)
    date: str = ""
    body: str = ""
    attachments: list[Attachment] = field(default_factory=list)

    def __post_init__(self):
        if len(self.body) > MAX_BODY_LENGTH:
            self.body = self.body[:MAX_BODY_LENGTH]


@dataclass
class DetailActions:
    reply: ActionableElement | None = None
    reply_all: ActionableElement | None = None
    forward: ActionableElement | None = None
    delete: ActionableElement | None = None
    archive: ActionableElement | None = None
    back: ActionableElement | None = None
    star: ActionableElement | None = None
    mark_unread: ActionableElement | None = None


@dataclass
class DetailNavigation:
    previous: ActionableElement | None = None
    next: ActionableElement | None = None


@dataclass
class ComposeForm:
    to: ActionableElement | None = None
    cc: ActionableElement | None = None
    bcc: ActionableElement | None = None
    subject: ActionableElement | None = None
    body: ActionableElement | None = None


@dataclass
class ComposeActions:
    send: ActionableElement | None = None
    discard: ActionableElement | None = None
    minimize: ActionableElement | None = None
    attach_file: ActionableElement | None = None


def _jsonable(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


@dataclass
class _Record:
    url: str
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict:
        """JSON-serializable mapping keyed by field name."""
        return _jsonable(asdict(self))


@dataclass
class ListViewRecord(_Record):
    view: ViewKind = ViewKind.LIST
    items: list[ListItem] = field(default_factory=list)
    actions: ListActions = field(default_factory=ListActions)
    navigation: Navigation = field(default_factory=Navigation)
    pagination: Pagination | None = None
    truncated: TruncationInfo | None = None


@dataclass
class SearchViewRecord(ListViewRecord):
    view: ViewKind = ViewKind.SEARCH
    search_query: str = ""


@dataclass
class DetailViewRecord(_Record):
    view: ViewKind = ViewKind.DETAIL
    message: Message = field(default_factory=Message)
    actions: DetailActions = field(default_factory=DetailActions)
    navigation: DetailNavigation = field(default_factory=DetailNavigation)
    truncated: TruncationInfo | None = None


@dataclass
class ComposeViewRecord(_Record):
    view: ViewKind = ViewKind.COMPOSE
    form: ComposeForm = field(default_factory=ComposeForm)
    actions: ComposeActions = field(default_factory=ComposeActions)


@dataclass
class GenericViewRecord(_Record):
    view: ViewKind = ViewKind.GENERIC
    page_title: str = ""
    available_actions: list[ActionableElement] = field(default_factory=list)
    alerts: list[Alert] = field(default_factory=list)

    def __post_init__(self):
        self.available_actions = self.available_actions[:MAX_AVAILABLE_ACTIONS]


ViewRecord = (
    ListViewRecord
    | SearchViewRecord
    | DetailViewRecord
    | ComposeViewRecord
    | GenericViewRecord
)
