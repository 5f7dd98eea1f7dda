"""Tests for tool result summarization and the tool wrapper."""

import asyncio
import inspect
import logging

import pytest

from inbox_lens.agent.tools import (
    RAW_RESULT_LIMIT,
    summarize_tool,
    summarize_tool_result,
    wrap_tools,
)
from inbox_lens.exceptions import ToolConfigurationError
from inbox_lens.snapshot.summarizer import SUMMARY_MARKER, TRUNCATION_MARKER

INBOX_URL = "https://mail.google.com/mail/u/0/#inbox"
INBOX_HTML = (
    '<html><body><div role="main"><table><tbody>'
    '<tr ref="r1"><td><span email="a@example.com">Alice</span></td>'
    '<td><a href="#inbox/x1">Lunch - are you free?</a></td><td>10:42 AM</td></tr>'
    "</tbody></table></div></body></html>"
)
SNAPSHOT = '- Page Snapshot\n- document [ref=s1]:\n  - alert "Conversation moved to Trash."'


def test_html_with_url_is_summarized():
    assert summarize_tool_result(INBOX_HTML, INBOX_URL) == (
        "1. From: Alice | Subject: Lunch | Snippet: are you free?"
    )


def test_html_without_url_falls_through():
    assert summarize_tool_result(INBOX_HTML) == INBOX_HTML


def test_snapshot_is_summarized():
    summary = summarize_tool_result(SNAPSHOT)
    assert summary.endswith(SUMMARY_MARKER)
    assert '- alert "Conversation moved to Trash."' in summary


def test_long_text_is_cut_to_first_lines():
    text = "\n".join("x" * 200 for _ in range(20))
    assert len(text) > RAW_RESULT_LIMIT
    summary = summarize_tool_result(text)
    assert summary.split("\n")[:10] == ["x" * 200] * 10
    assert summary.endswith(TRUNCATION_MARKER)


def test_short_text_and_other_values_unchanged():
    assert summarize_tool_result("ok") == "ok"
    assert summarize_tool_result(42) == 42
    assert summarize_tool_result(None) is None


def test_content_string_container():
    result = {"isError": False, "content": SNAPSHOT}
    summarized = summarize_tool_result(result)
    assert summarized["isError"] is False
    assert summarized["content"].endswith(SUMMARY_MARKER)
    assert result["content"] == SNAPSHOT


def test_content_list_container():
    long_text = "y" * (RAW_RESULT_LIMIT + 1)
    image = {"type": "image", "data": "..."}
    result = {"content": [{"type": "text", "text": "short"}, {"type": "text", "text": long_text}, image]}
    content = summarize_tool_result(result)["content"]
    assert content[0] == {"type": "text", "text": "short"}
    assert content[1]["text"] == long_text + "\n" + TRUNCATION_MARKER
    assert content[2] is image


def test_sync_tool_wrapper_summarizes_and_logs(caplog):
    @summarize_tool("browser_snapshot")
    def snapshot(**kwargs):
        return INBOX_HTML

    with caplog.at_level(logging.INFO, logger="inbox_lens.agent.tools"):
        assert snapshot(url=INBOX_URL).startswith("1. From: Alice")
    assert "Tool used: browser_snapshot" in caplog.text


def test_page_url_argument_variants():
    tools = wrap_tools({"navigate": lambda **kwargs: INBOX_HTML})
    assert tools["navigate"](pageUrl=INBOX_URL).startswith("1. From: Alice")
    assert tools["navigate"](target_url=INBOX_URL).startswith("1. From: Alice")
    assert tools["navigate"]() == INBOX_HTML


def test_async_tool_wrapper():
    async def click(**kwargs):
        return {"content": SNAPSHOT}

    wrapped = summarize_tool("click")(click)
    result = asyncio.run(wrapped(element="Inbox", ref="e12"))
    assert result["content"].endswith(SUMMARY_MARKER)
    assert inspect.iscoroutinefunction(wrapped)


def test_tool_errors_are_logged_and_reraised(caplog):
    class Boom(RuntimeError):
        pass

    @summarize_tool("type")
    def failing(**kwargs):
        raise Boom("transport closed")

    with caplog.at_level(logging.ERROR, logger="inbox_lens.agent.tools"):
        with pytest.raises(Boom, match="transport closed"):
            failing(text="hi")
    assert "Tool error: type" in caplog.text


def test_async_tool_errors_are_reraised():
    @summarize_tool()
    async def failing(**kwargs):
        raise ValueError("bad ref")

    with pytest.raises(ValueError, match="bad ref"):
        asyncio.run(failing())


def test_non_callable_tool_rejected():
    with pytest.raises(ToolConfigurationError):
        summarize_tool("broken")("not a function")
