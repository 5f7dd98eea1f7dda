"""Tests for the parse_gmail_dom entry point."""

import pytest

from inbox_lens.gmail.models import DetailViewRecord, GenericViewRecord, ListViewRecord, ViewKind
from inbox_lens.gmail.parser import parse_gmail_dom
from inbox_lens.gmail.summarizer import summarize_record


def _make_inbox_html(rows=3):
    body = "".join(
        f'<tr ref="r{i}"><td><span email="u{i}@example.com">User {i}</span></td>'
        f'<td><a href="#inbox/id{i}">Subject {i} - snippet {i}</a></td><td>10:0{i % 10} AM</td></tr>'
        for i in range(rows)
    )
    return f'<html><body><div role="main"><table><tbody>{body}</tbody></table></div></body></html>'


def test_parse_inbox():
    result = parse_gmail_dom(_make_inbox_html(), "https://mail.google.com/mail/u/0/#inbox")
    assert isinstance(result, ListViewRecord)
    assert result.view is ViewKind.LIST
    assert [item.subject for item in result.items] == ["Subject 0", "Subject 1", "Subject 2"]
    assert result.items[0].snippet == "snippet 0"
    assert result.truncated is None


def test_parse_bounds_large_inbox():
    result = parse_gmail_dom(
        _make_inbox_html(rows=15),
        "https://mail.google.com/mail/u/0/#inbox",
        max_bytes=1000,
    )
    assert len(result.items) == 10
    assert result.truncated.original_count == 15


def test_parse_detail_routes_by_url():
    html = '<html><body><h2>Hello</h2><span email="a@example.com">A</span></body></html>'
    result = parse_gmail_dom(html, "https://mail.google.com/mail/u/0/#inbox/FMfcg123")
    assert isinstance(result, DetailViewRecord)
    assert result.message.subject == "Hello"


def test_parse_without_url_is_generic():
    result = parse_gmail_dom("<html><head><title>Gmail</title></head></html>", None)
    assert isinstance(result, GenericViewRecord)
    assert result.url == ""
    assert result.page_title == "Gmail"


@pytest.mark.parametrize("url", [
    "https://mail.google.com/mail/u/0/#inbox",
    "https://mail.google.com/mail/u/0/#inbox/abc",
    "https://mail.google.com/mail/u/0/#compose",
    "https://mail.google.com/mail/u/0/#search/x",
    "https://example.com",
    "",
])
@pytest.mark.parametrize("html", ["", "<", "plain text", "<div><span>unclosed", "<html><tr ref=x></html>"])
def test_round_trip_never_raises(url, html):
    assert isinstance(summarize_record(parse_gmail_dom(html, url)), str)
