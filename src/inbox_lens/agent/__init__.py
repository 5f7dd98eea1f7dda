"""Agent-side helpers: summarized, logged browser tool calls."""

from inbox_lens.agent.tools import (
    RAW_RESULT_LIMIT,
    summarize_tool,
    summarize_tool_result,
    wrap_tools,
)

__all__ = ["RAW_RESULT_LIMIT", "summarize_tool", "summarize_tool_result", "wrap_tools"]
