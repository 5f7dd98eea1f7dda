"""Shrink browser tool results before they reach a language model.

``summarize_tool`` wraps a tool callable (sync or async) so each call is
logged and its result replaced by a compact summary: Gmail HTML becomes a
record summary, accessibility snapshots a snapshot summary, and other long
text is cut to its first lines.
"""

from __future__ import annotations

import functools
import inspect
import logging
import os
from typing import Any, Callable

from inbox_lens.exceptions import ToolConfigurationError
from inbox_lens.gmail.summarizer import summarize_record
from inbox_lens.snapshot.summarizer import TRUNCATION_MARKER, summarize_snapshot

logger = logging.getLogger(__name__)


RAW_RESULT_LIMIT = int(os.environ.get("INBOX_LENS_RAW_RESULT_LIMIT", "1000"))
RAW_RESULT_LINES = 10
URL_ARGUMENTS = ("url", "pageUrl", "targetUrl", "page_url", "target_url")
SNAPSHOT_MARKERS = ("Page Snapshot", "document [ref=")


def summarize_tool_result(result: Any, url: str | None = None) -> Any:
    """Summarize a tool result, keeping the container shape it arrived in."""
    if isinstance(result, str):
        return _summarize_text(result, url)

    if isinstance(result, dict):
        content = result.get("content")
        if isinstance(content, str):
            return {**result, "content": _summarize_text(content, url)}
        if isinstance(content, list):
            return {**result, "content": [_summarize_item(item, url) for item in content]}

    return result


def _summarize_text(text: str, url: str | None) -> str:
    if "<html" in text and url:
        from inbox_lens.gmail.parser import parse_gmail_dom

        return summarize_record(parse_gmail_dom(text, url))
    if any(marker in text for marker in SNAPSHOT_MARKERS):
        return summarize_snapshot(text)
    if len(text) > RAW_RESULT_LIMIT:
        return "\n".join(text.split("\n")[:RAW_RESULT_LINES]) + "\n" + TRUNCATION_MARKER
    return text


def _summarize_item(item: Any, url: str | None) -> Any:
    if (
        isinstance(item, dict)
        and item.get("type") == "text"
        and isinstance(item.get("text"), str)
        and len(item["text"]) > RAW_RESULT_LIMIT
    ):
        return {**item, "text": _summarize_text(item["text"], url)}
    return item


def _page_url(arguments: dict[str, Any]) -> str | None:
    for key in URL_ARGUMENTS:
        value = arguments.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def summarize_tool(name: str | None = None) -> Callable[[Callable], Callable]:
    """Decorator: log each call of a tool and summarize what it returns.

    Tool exceptions are logged with traceback and re-raised unchanged.
    """

    def decorator(tool: Callable) -> Callable:
        if not callable(tool):
            raise ToolConfigurationError(f"Tool {name or tool!r} is not callable")
        tool_name = name or getattr(tool, "__name__", repr(tool))

        if inspect.iscoroutinefunction(tool):

            @functools.wraps(tool)
            async def async_wrapper(**kwargs):
                logger.info("Tool used: %s %s", tool_name, kwargs)
                try:
                    result = await tool(**kwargs)
                except Exception:
                    logger.exception("Tool error: %s", tool_name)
                    raise
                return _finish(tool_name, result, kwargs)

            return async_wrapper

        @functools.wraps(tool)
        def wrapper(**kwargs):
            logger.info("Tool used: %s %s", tool_name, kwargs)
            try:
                result = tool(**kwargs)
            except Exception:
                logger.exception("Tool error: %s", tool_name)
                raise
            return _finish(tool_name, result, kwargs)

        return wrapper

    return decorator


def _finish(tool_name: str, result: Any, arguments: dict[str, Any]) -> Any:
    logger.debug("Tool result (raw): %s %r", tool_name, result)
    summarized = summarize_tool_result(result, _page_url(arguments))
    logger.debug("Tool result (summarized): %s %r", tool_name, summarized)
    return summarized


def wrap_tools(tools: dict[str, Callable]) -> dict[str, Callable]:
    """Apply ``summarize_tool`` to every tool of a name -> callable mapping."""
    return {name: summarize_tool(name)(tool) for name, tool in tools.items()}
