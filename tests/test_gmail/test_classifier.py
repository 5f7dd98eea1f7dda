"""Tests for Gmail view classification."""

import pytest

from inbox_lens.gmail.classifier import classify
from inbox_lens.gmail.models import ViewKind


@pytest.mark.parametrize("url", [
    "https://mail.google.com/mail/u/0/#inbox",
    "https://mail.google.com/mail/u/1/#inbox/p2",
    "https://mail.google.com/mail/u/0/#starred",
    "https://mail.google.com/mail/u/0/#label/Work",
    "https://gmail.com/mail/u/0/#inbox",
])
def test_list_urls(url):
    assert classify(url) is ViewKind.LIST


@pytest.mark.parametrize("url", [
    "https://mail.google.com/mail/u/0/#inbox/FMfcgzGxyz123",
    "https://mail.google.com/mail/u/0/#label/Work/FMfcgzGxyz123",
    "https://gmail.com/mail/u/0/#inbox/abc123",
])
def test_detail_urls(url):
    assert classify(url) is ViewKind.DETAIL


@pytest.mark.parametrize("url", [
    "https://mail.google.com/mail/u/0/#compose",
    "https://mail.google.com/mail/u/0/#inbox?compose=new",
])
def test_compose_urls(url):
    assert classify(url) is ViewKind.COMPOSE


def test_search_url():
    assert classify("https://mail.google.com/mail/u/0/#search/invoice") is ViewKind.SEARCH


@pytest.mark.parametrize("url", [
    "",
    None,
    "https://example.com/",
    "https://mail.google.com/mail/u/0/#settings/general",
    "not a url at all",
])
def test_everything_else_is_generic(url):
    assert classify(url) is ViewKind.GENERIC
