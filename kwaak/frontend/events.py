"""Events handled by the frontend and the slash commands a user can type."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any
from uuid import UUID


class BackendCommand(enum.Enum):
    """Commands the frontend sends to the backend."""

    SHOW_CONFIG = "show_config"
    INDEX_REPOSITORY = "index_repository"
    RETRY_CHAT = "retry_chat"
    QUIT = "quit"
    STOP_AGENT = "stop_agent"
    DIFF = "diff"


class DiffVariant(enum.Enum):
    """What to do with the changes an agent made."""

    SHOW = "show"
    """Print the current changes."""
    PULL = "pull"
    """Pull the current changes into the same branch as the agent works in."""


class UIEventKind(enum.Enum):
    INPUT = "Input"
    TICK = "Tick"
    CHAT_MESSAGE = "ChatMessage"
    NEW_CHAT = "NewChat"
    NEXT_CHAT = "NextChat"
    RENAME_CHAT = "RenameChat"
    RENAME_BRANCH = "RenameBranch"
    CHANGE_MODE = "ChangeMode"
    COMMAND_DONE = "CommandDone"
    ACTIVITY_UPDATE = "ActivityUpdate"
    QUIT = "Quit"
    COPY_LAST_MESSAGE = "CopyLastMessage"
    DELETE_CHAT = "DeleteChat"
    USER_INPUT_COMMAND = "UserInputCommand"
    SCROLL_END = "ScrollEnd"
    SCROLL_DOWN = "ScrollDown"
    SCROLL_UP = "ScrollUp"
    DIFF_PULL = "DiffPull"
    DIFF_SHOW = "DiffShow"
    HELP = "Help"


@dataclass(frozen=True)
class UIEvent:
    """An event for the frontend; ``uuid`` names the chat, ``payload`` carries data."""

    kind: UIEventKind
    uuid: UUID | None = None
    payload: Any = None

    def __str__(self) -> str:
        return self.kind.value


_DOCUMENTATION: dict[str, str] = {
    "quit": "Stop the application",
    "show_config": "Show the current configuration",
    "index_repository": "Force a re-index of the repository",
    "next_chat": "Switch to the next chat",
    "new_chat": "Start a new chat",
    "delete_chat": "Delete the current chat",
    "copy": "Copy the last message from an agent",
    "diff": (
        "Show or pull changes made by an agent\n"
        "Defaults to `show` if no argument is given\n\n"
        "Usage:\n"
        "    /diff show - Shows the diff in the chat\n"
        "    /diff pull - Pulls the diff into a new branch"
    ),
    "retry": "Retries the last chat with the agent.",
    "help": "Print help",
}

_TO_COMMAND: dict[str, BackendCommand] = {
    "show_config": BackendCommand.SHOW_CONFIG,
    "index_repository": BackendCommand.INDEX_REPOSITORY,
    "retry": BackendCommand.RETRY_CHAT,
}

_TO_UI_EVENT: dict[str, UIEventKind] = {
    "next_chat": UIEventKind.NEXT_CHAT,
    "new_chat": UIEventKind.NEW_CHAT,
    "copy": UIEventKind.COPY_LAST_MESSAGE,
    "delete_chat": UIEventKind.DELETE_CHAT,
    "help": UIEventKind.HELP,
    "quit": UIEventKind.QUIT,
}

_DIFF_EVENTS: dict[DiffVariant, UIEventKind] = {
    DiffVariant.SHOW: UIEventKind.DIFF_SHOW,
    DiffVariant.PULL: UIEventKind.DIFF_PULL,
}


@dataclass(frozen=True)
class UserInputCommand:
    """A slash command typed by the user; ``variant`` is set for ``diff`` only."""

    command: str
    variant: DiffVariant | None = None

    def __post_init__(self) -> None:
        if self.command not in _DOCUMENTATION:
            raise ValueError(f"unknown input command {self.command!r}")
        if self.command == "diff" and self.variant is None:
            object.__setattr__(self, "variant", DiffVariant.SHOW)
        elif self.command != "diff" and self.variant is not None:
            raise ValueError(f"command {self.command!r} takes no variant")

    def name(self) -> str:
        """The command name as typed after the slash."""
        return self.command

    def __str__(self) -> str:
        return self.command

    @property
    def documentation(self) -> str:
        return _DOCUMENTATION[self.command]

    @classmethod
    def parse_from_input(cls, text: str) -> UserInputCommand:
        """Parse ``/command [subcommand]`` typed by the user."""
        parts = text.split()
        if not parts or not parts[0].startswith("/"):
            raise ValueError(f"failed to parse input command {text}")
        head = parts[0]
        name = head[1:]
        if name not in _DOCUMENTATION:
            raise ValueError(f"failed to parse input command {head}")
        if name != "diff":
            return cls(name)
        if len(parts) < 2:
            return cls("diff", DiffVariant.SHOW)
        subcommand = parts[1]
        try:
            variant = DiffVariant(subcommand)
        except ValueError:
            raise ValueError(f"failed to parse diff subcommand {subcommand}") from None
        return cls("diff", variant)

    def to_command(self) -> BackendCommand | None:
        """The backend command this maps to, if any."""
        return _TO_COMMAND.get(self.command)

    def to_ui_event(self) -> UIEvent | None:
        """The frontend event this maps to, if any."""
        if self.command == "diff":
            assert self.variant is not None
            return UIEvent(_DIFF_EVENTS[self.variant])
        kind = _TO_UI_EVENT.get(self.command)
        return UIEvent(kind) if kind is not None else None


USER_INPUT_COMMANDS: tuple[UserInputCommand, ...] = tuple(
    UserInputCommand(name) for name in _DOCUMENTATION
)
"""Every slash command, in the order they are listed to the user."""