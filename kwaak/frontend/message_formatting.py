"""Chat messages shown in the frontend, their styles and tool-call summaries."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class ChatRole(enum.Enum):
    """Who a chat message comes from."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    TOOL = "tool"
    COMMAND = "command"

    @property
    def is_user(self) -> bool:
        return self is ChatRole.USER

    @property
    def is_assistant(self) -> bool:
        return self is ChatRole.ASSISTANT

    @property
    def is_system(self) -> bool:
        return self is ChatRole.SYSTEM


@dataclass(frozen=True)
class Style:
    """A foreground colour and a text modifier."""

    fg: str | tuple[int, int, int]
    modifier: str


USER_STYLE = Style("cyan", "italic")
ASSISTANT_STYLE = Style((200, 160, 255), "bold")
SYSTEM_STYLE = Style("dark_gray", "dim")
TOOL_DONE_STYLE = Style("green", "dim")
TOOL_CALLED_STYLE = Style("dark_gray", "dim")
COMMAND_STYLE = Style("light_magenta", "bold")


@dataclass(frozen=True)
class ToolCall:
    """A tool invocation requested by an assistant; ``args`` is a JSON string."""

    id: str
    name: str
    args: str | None = None


@dataclass
class ChatMessage:
    """A message in a chat as shown to the user."""

    role: ChatRole
    content: str
    tool_calls: tuple[ToolCall, ...] = ()
    original: Any = None
    rendered: Any = None

    @classmethod
    def new_system(cls, content: str) -> ChatMessage:
        return cls(ChatRole.SYSTEM, content)

    @classmethod
    def new_user(cls, content: str) -> ChatMessage:
        return cls(ChatRole.USER, content)

    @classmethod
    def new_command(cls, content: str) -> ChatMessage:
        return cls(ChatRole.COMMAND, content)

    @classmethod
    def new_assistant(cls, content: str) -> ChatMessage:
        return cls(ChatRole.ASSISTANT, content)


_PREFIXES: dict[ChatRole, tuple[str, Style]] = {
    ChatRole.USER: ("▶ ", USER_STYLE),
    ChatRole.ASSISTANT: ("✦ ", ASSISTANT_STYLE),
    ChatRole.SYSTEM: ("ℹ ", SYSTEM_STYLE),
    ChatRole.TOOL: ("⚙ ", TOOL_DONE_STYLE),
    ChatRole.COMMAND: ("» ", COMMAND_STYLE),
}


def get_style_and_prefix(role: ChatRole) -> tuple[str, Style]:
    """The line prefix and style used for messages of ``role``."""
    return _PREFIXES[role]


def _parse_args(tool_call: ToolCall) -> Any:
    if tool_call.args is None:
        return None
    try:
        return json.loads(tool_call.args)
    except ValueError:
        return None


def _truncate(text: str) -> str:
    return f"{text[:20]} ..." if len(text) > 20 else text


def format_tool_call(tool_call: ToolCall) -> str:
    """A short description of a tool call for display in a chat."""
    pretty = pretty_format_tool(tool_call)
    if pretty is not None:
        return pretty

    formatted_args: str | None = None
    parsed = _parse_args(tool_call)
    if isinstance(parsed, dict) and parsed:
        if len(parsed) == 1:
            value = next(iter(parsed.values()))
            formatted_args = _truncate(value if isinstance(value, str) else "")
        else:
            formatted_args = _truncate(tool_call.args or "")

    if formatted_args is not None:
        return f"calling tool `{tool_call.name}` with `{formatted_args}`"
    return f"calling tool `{tool_call.name}`"


# tool name -> (template, argument key or None when the template takes no value)
_PRETTY_TOOLS: dict[str, tuple[str, str | None]] = {
    "shell_command": ("running shell command `{}`", "cmd"),
    "read_file": ("reading file `{}`", "file_name"),
    "write_file": ("writing file `{}`", "file_name"),
    "search_file": ("searching for files matching `{}`", "file_name"),
    "search_code": ("searching for code matching `{}`", "query"),
    "git": ("running git command `{}`", "command"),
    "explain_code": ("querying for code explaining `{}`", "query"),
    "create_or_update_pull_request": ("creating a pull request", None),
    "run_tests": ("running tests", None),
    "run_coverage": ("running tests and gathering coverage", None),
    "search_web": ("searching the web for `{}`", "query"),
    "github_search_code": ("searching github for code matching `{}`", "query"),
    "replace_lines": ("replacing lines in file `{}`", "file_name"),
    "add_lines": ("adding lines to file `{}`", "file_name"),
    "read_file_with_line_numbers": ("reading file `{}` (with line numbers)", "file_name"),
    "fetch_url": ("fetching url `{}`", "url"),
}


def pretty_format_tool(tool_call: ToolCall) -> str | None:
    """A friendly description of a known tool call, or None if there is none."""
    entry = _PRETTY_TOOLS.get(tool_call.name)
    if entry is None:
        return None
    template, key = entry
    if key is None:
        return template
    parsed = _parse_args(tool_call)
    value = get_value(parsed if isinstance(parsed, dict) else None, key)
    if value is None:
        return None
    return template.format(value)


def get_value(args: Mapping[str, Any] | None, key: str) -> str | None:
    """The string stored under ``key``, or None if absent or not a string."""
    if args is None:
        return None
    value = args.get(key)
    return value if isinstance(value, str) else None