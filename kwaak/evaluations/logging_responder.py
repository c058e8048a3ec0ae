"""A responder that records everything an agent reports into a text log."""

from __future__ import annotations

import threading
from typing import Any


def format_string(text: str) -> str:
    """Turn escaped quotes, newlines, tabs and carriage returns into the real characters."""
    return (
        text.replace('\\"', '"')
        .replace("\\n", "\n")
        .replace("\\t", "\t")
        .replace("\\r", "\r")
    )


def _format_debug(value: Any) -> str:
    return format_string(repr(value).replace("\\\\", "\\"))


class LoggingResponder:
    """Collects agent messages, updates and command responses as log lines."""

    def __init__(self) -> None:
        self._messages: list[str] = []
        self._lock = threading.Lock()
        self.chat_name: str | None = None
        self.branch_name: str | None = None

    def _push(self, line: str) -> None:
        with self._lock:
            self._messages.append(line)

    def get_log(self) -> str:
        with self._lock:
            return "\n".join(self._messages)

    def agent_message(self, message: Any) -> None:
        self._push(f"DEBUG: Agent message: {_format_debug(message)}")

    def update(self, message: str) -> None:
        self._push(f"DEBUG: State update: {format_string(message)}")

    def send(self, response: Any) -> None:
        self._push(f"DEBUG: Command response: {_format_debug(response)}")

    def system_message(self, message: str) -> None:
        self._push(f"DEBUG: System message: {format_string(message)}")

    def rename_chat(self, name: str) -> None:
        """Remember the chat name; renames are kept out of the log."""
        with self._lock:
            self.chat_name = name

    def rename_branch(self, name: str) -> None:
        """Remember the branch name; renames are kept out of the log."""
        with self._lock:
            self.branch_name = name