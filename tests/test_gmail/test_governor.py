"""Tests for record size bounding."""

import copy

from inbox_lens.gmail.governor import bound, serialized_size
from inbox_lens.gmail.models import (
    ComposeViewRecord,
    DetailViewRecord,
    ListItem,
    ListViewRecord,
    Message,
    SearchViewRecord,
)

URL = "https://mail.google.com/mail/u/0/#inbox"


def _list_record(count, cls=ListViewRecord):
    return cls(
        url=URL,
        items=[ListItem(subject=f"Subject {i}", sender="Alice") for i in range(count)],
    )


def test_within_budget_is_unchanged():
    record = _list_record(15)
    before = copy.deepcopy(record)
    assert bound(record) is record
    assert record == before
    assert record.truncated is None


def test_truncates_items_over_budget():
    record = bound(_list_record(15), max_bytes=100)
    assert len(record.items) == 10
    assert record.truncated.items is True
    assert record.truncated.original_count == 15
    assert record.truncated.body is False


def test_bound_is_idempotent():
    once = bound(_list_record(15), max_bytes=100)
    snapshot = copy.deepcopy(once)
    twice = bound(once, max_bytes=100)
    assert twice == snapshot
    assert twice.truncated.original_count == 15


def test_search_records_are_bounded_too():
    record = bound(_list_record(12, SearchViewRecord), max_bytes=100)
    assert len(record.items) == 10
    assert record.truncated.items is True


def test_short_list_over_budget_is_not_flagged():
    record = bound(_list_record(3), max_bytes=10)
    assert len(record.items) == 3
    assert record.truncated is None


def test_truncates_long_body():
    record = DetailViewRecord(url=URL, message=Message(subject="s", body="z" * 900))
    bound(record, max_bytes=100)
    assert record.message.body == "z" * 500 + "..."
    assert record.truncated.body is True
    assert record.truncated.items is False

    again = copy.deepcopy(record)
    bound(record, max_bytes=100)
    assert record == again


def test_other_views_pass_through():
    record = ComposeViewRecord(url=URL)
    assert bound(record, max_bytes=1) is record


def test_serialized_size_counts_bytes():
    small = _list_record(0)
    large = _list_record(5)
    assert 0 < serialized_size(small) < serialized_size(large)
