"""Per-view structural extraction over a parsed Gmail page.

Each ``extract_*`` function takes the parsed document and its URL and
returns a fresh record. Missing structure leaves the documented default
in place; nothing here raises for absent elements.
"""

from __future__ import annotations

from typing import Callable

from bs4 import BeautifulSoup, Tag

from inbox_lens.gmail.classifier import LIST_FOLDERS
from inbox_lens.gmail.models import (
    ActionableElement,
    Alert,
    ComposeActions,
    ComposeForm,
    ComposeViewRecord,
    DetailActions,
    DetailNavigation,
    DetailViewRecord,
    GenericViewRecord,
    ListActions,
    ListItem,
    ListViewRecord,
    MAX_AVAILABLE_ACTIONS,
    Message,
    Navigation,
    NavigationEntry,
    Pagination,
    RowActions,
    SearchViewRecord,
    ViewKind,
    ViewRecord,
)
from inbox_lens.gmail.selectors import (
    describe_actionable,
    extract_attachments,
    extract_body,
    extract_date,
    extract_recipients,
    extract_sender,
    node_text,
    parse_pagination,
    parse_unread_count,
    resolve_reference,
    split_subject,
    YEAR_RE,
)

ROW_SELECTOR = 'div[role="main"] table tbody tr, div[role="main"] div[role="listitem"]'
# Row links point at the listing they were opened from.
ROW_LINK_SELECTOR = ", ".join(f'a[href*="#{target}"]' for target in (*LIST_FOLDERS, "label", "search"))
NAV_LINK_SELECTOR = 'a[href*="#label"], a[href*="#inbox"], a[href*="#starred"]'
FOLDER_TARGETS = ("#inbox", "#starred")
INTERACTIVE_SELECTOR = "button, a, input, select, textarea"
ALERT_SELECTOR = '[role="alert"], .vh, .aKz'


def extract_list(doc: BeautifulSoup, url: str) -> ListViewRecord:
    """Inbox, folder or label listing."""
    record = ListViewRecord(url=url)
    _fill_list(record, doc)
    return record


def _fill_list(record: ListViewRecord, doc: BeautifulSoup) -> None:
    for row in doc.select(ROW_SELECTOR):
        item = extract_row(row)
        if item.subject:
            record.items.append(item)

    record.actions = ListActions(
        compose=describe_actionable(doc, 'button[aria-label*="Compose"], button:-soup-contains("Compose")'),
        refresh=describe_actionable(doc, 'button[aria-label*="Refresh"], button[title*="Refresh"]'),
        select_all=describe_actionable(
            doc, 'button[aria-label*="Select"], input[type="checkbox"][title*="Select"]'
        ),
        bulk_actions=[
            describe_actionable(button)
            for button in doc.select(
                'button[aria-label*="Delete"], button[aria-label*="Archive"], button[aria-label*="Mark"]'
            )
        ],
    )
    record.navigation = extract_navigation(doc)
    record.pagination = extract_pagination(doc)


def extract_search(doc: BeautifulSoup, url: str) -> SearchViewRecord:
    """Search results: a list view plus the query from the search box."""
    record = SearchViewRecord(url=url)
    _fill_list(record, doc)
    search_box = doc.select_one('input[aria-label*="Search"], input[name="q"]')
    record.search_query = (search_box.get("value") or "") if search_box is not None else ""
    return record


def extract_detail(doc: BeautifulSoup, url: str) -> DetailViewRecord:
    """A single opened conversation."""
    sender = extract_sender(doc)
    message = Message(
        subject=node_text(doc.select_one('h2, [aria-label*="Subject"], [data-legacy-thread-id] h2')),
        sender=sender,
        recipients=extract_recipients(doc, sender),
        date=extract_date(doc),
        body=extract_body(doc),
        attachments=extract_attachments(doc),
    )
    actions = DetailActions(
        reply=describe_actionable(doc, 'button[aria-label*="Reply"], button:-soup-contains("Reply")'),
        reply_all=describe_actionable(
            doc, 'button[aria-label*="Reply all"], button:-soup-contains("Reply all")'
        ),
        forward=describe_actionable(doc, 'button[aria-label*="Forward"], button:-soup-contains("Forward")'),
        delete=describe_actionable(doc, 'button[aria-label*="Delete"], button[title*="Delete"]'),
        archive=describe_actionable(doc, 'button[aria-label*="Archive"], button[title*="Archive"]'),
        back=describe_actionable(doc, 'button[aria-label*="Back"], a[href*="#inbox"]'),
        star=describe_actionable(doc, 'button[aria-label*="star" i], button[title*="star" i]'),
        mark_unread=describe_actionable(doc, 'button[aria-label*="unread" i], button[title*="unread" i]'),
    )
    navigation = DetailNavigation(
        previous=describe_actionable(doc, 'button[aria-label*="Older"], button[aria-label*="Previous"]'),
        next=describe_actionable(doc, 'button[aria-label*="Newer"], button[aria-label*="Next"]'),
    )
    return DetailViewRecord(url=url, message=message, actions=actions, navigation=navigation)


def extract_compose(doc: BeautifulSoup, url: str) -> ComposeViewRecord:
    """The compose editor's fields and controls."""
    form = ComposeForm(
        to=describe_actionable(doc, 'input[name="to"], textarea[aria-label*="To"]'),
        cc=describe_actionable(doc, 'input[name="cc"], textarea[aria-label*="Cc"]'),
        bcc=describe_actionable(doc, 'input[name="bcc"], textarea[aria-label*="Bcc"]'),
        subject=describe_actionable(doc, 'input[name="subjectbox"], input[aria-label*="Subject"]'),
        body=describe_actionable(doc, 'div[aria-label*="Message Body"], div[contenteditable="true"]'),
    )
    actions = ComposeActions(
        send=describe_actionable(doc, 'button[aria-label*="Send"], button:-soup-contains("Send")'),
        discard=describe_actionable(doc, 'button[aria-label*="Discard"], button:-soup-contains("Discard")'),
        minimize=describe_actionable(doc, 'button[aria-label*="Minimize"], button[aria-label*="Pop-out"]'),
        attach_file=describe_actionable(doc, 'button[aria-label*="Attach"], input[type="file"]'),
    )
    return ComposeViewRecord(url=url, form=form, actions=actions)


def extract_generic(doc: BeautifulSoup, url: str) -> GenericViewRecord:
    """Fallback: page title, referenced controls and alerts only."""
    return GenericViewRecord(
        url=url,
        page_title=node_text(doc.find("title")),
        available_actions=extract_interactive_elements(doc),
        alerts=extract_alerts(doc),
    )


EXTRACTORS: dict[ViewKind, Callable[[BeautifulSoup, str], ViewRecord]] = {
    ViewKind.LIST: extract_list,
    ViewKind.DETAIL: extract_detail,
    ViewKind.COMPOSE: extract_compose,
    ViewKind.SEARCH: extract_search,
    ViewKind.GENERIC: extract_generic,
}


# Shared pieces


def extract_row(row: Tag) -> ListItem:
    """One conversation row. Unread state is approximated from row text."""
    subject, snippet = split_subject(
        node_text(row.select_one(f'{ROW_LINK_SELECTOR}, span[id*="thread"]'))
    )
    return ListItem(
        ref=resolve_reference(row),
        sender=node_text(row.select_one('span[email], span[title*="@"], td:nth-child(4), td:nth-child(5)')),
        subject=subject,
        snippet=snippet,
        date=_row_date(row),
        is_unread="unread" in row.get_text() or row.select_one('[aria-label*="unread"]') is not None,
        is_starred=row.select_one('button[aria-label*="Starred"], img[alt*="Starred"]') is not None,
        is_important=row.select_one('button[aria-label*="Important"], img[alt*="Important"]') is not None,
        has_attachment=row.select_one(
            'img[alt*="attachment" i], span:-soup-contains("attachment")'
        ) is not None,
        labels=_row_labels(row),
        actions=RowActions(
            open=describe_actionable(row, ROW_LINK_SELECTOR),
            select=describe_actionable(row, 'input[type="checkbox"]'),
            star=describe_actionable(row, 'button[aria-label*="star" i]'),
            important=describe_actionable(row, 'button[aria-label*="Important"]'),
        ),
    )


def _row_labels(row: Tag) -> frozenset[str]:
    labels = set()
    for node in row.select("[data-label], .at[title]"):
        label = node.get("data-label") or node.get("title")
        if label:
            labels.add(label)
    return frozenset(labels)


def _row_date(row: Tag) -> str:
    # The last dated cell wins: a span whose title carries a year, or the trailing cell.
    cells = [
        node for node in row.select("span[title], td:last-child")
        if node.name == "td" or YEAR_RE.search(node["title"])
    ]
    if not cells:
        return ""
    cell = cells[-1]
    return node_text(cell) or cell.get("title") or ""


def extract_navigation(doc: BeautifulSoup) -> Navigation:
    """Folder and label links outside the message list."""
    navigation = Navigation()
    for link in doc.select(NAV_LINK_SELECTOR):
        if link.find_parent("div", attrs={"role": "main"}) is not None:
            continue
        name = node_text(link)
        if not name:
            continue
        href = link.get("href")
        entry = NavigationEntry(
            name=name,
            href=href,
            ref=resolve_reference(link),
            unread_count=parse_unread_count(name),
        )
        if href and any(target in href for target in FOLDER_TARGETS):
            navigation.folders.append(entry)
        else:
            navigation.labels.append(entry)
    return navigation


def extract_pagination(doc: BeautifulSoup) -> Pagination | None:
    """First ``N–M of T`` counter found among text containers."""
    for node in doc.select('span:-soup-contains(" of "), div:-soup-contains(" of ")'):
        pagination = parse_pagination(node_text(node))
        if pagination is not None:
            return pagination
    return None


def extract_alerts(doc: BeautifulSoup) -> list[Alert]:
    alerts = []
    for node in doc.select(ALERT_SELECTOR):
        text = node_text(node)
        if not text:
            continue
        alerts.append(Alert(
            message=text,
            dismiss=describe_actionable(node, "button, a"),
            has_undo="undo" in text.lower(),
        ))
    return alerts


def extract_interactive_elements(
    doc: BeautifulSoup,
    limit: int = MAX_AVAILABLE_ACTIONS,
) -> list[ActionableElement]:
    """Referenced interactive controls in document order, at most ``limit``."""
    elements: list[ActionableElement] = []
    for node in doc.select(INTERACTIVE_SELECTOR):
        element = describe_actionable(node)
        if element is not None and element.ref:
            elements.append(element)
            if len(elements) >= limit:
                break
    return elements
