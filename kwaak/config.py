"""Project configuration: command settings and defaults derived from the environment."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

APP_NAME = "kwaak"

_REMOTE_URL_RE = re.compile(
    r"^(?:https://|git@|ssh://|git://|http://)?(?:[^@/]+@)?(?:[^/:]+[/:])?"
    r"([^/]+)/([^/.]+)(?:\.git)?$"
)


@dataclass
class CommandConfiguration:
    """Commands that tools can use to operate on the project."""

    test: str | None = None
    """Runs the tests."""
    coverage: str | None = None
    """Prints (preferably concise) coverage information to stdout."""
    lint_and_fix: str | None = None
    """Lints and fixes the project; run whenever files were written."""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CommandConfiguration:
        """Build a configuration from a parsed mapping; missing keys become None."""
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a mapping, got {type(data).__name__}")
        values: dict[str, str | None] = {}
        for field in fields(cls):
            value = data.get(field.name)
            if value is not None and not isinstance(value, str):
                raise TypeError(
                    f"invalid type for {field.name!r}: expected a string, "
                    f"got {type(value).__name__}"
                )
            values[field.name] = value
        return cls(**values)

    def to_mapping(self) -> dict[str, str]:
        """Return the configured commands, leaving out those that are unset."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not None
        }


def default_project_name() -> str:
    """The name of the current directory."""
    name = Path.cwd().name
    if not name:
        raise RuntimeError("Failed to get current directory name")
    return name


def _user_cache_root() -> Path:
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches"
    if os.name == "nt":
        local = os.environ.get("LOCALAPPDATA")
        if not local:
            raise RuntimeError("Failed to get cache directory")
        return Path(local)
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return Path.home() / ".cache"


def default_cache_dir() -> Path:
    """The per-user cache directory for the application."""
    return _user_cache_root() / APP_NAME


def default_log_dir() -> Path:
    """The directory that log files are written to."""
    return default_cache_dir() / "logs"


def default_dockerfile() -> Path:
    return Path("./Dockerfile")


def default_docker_context() -> Path:
    return Path(".")


def default_auto_push_remote() -> bool:
    return True


def default_owner_and_repo(workdir: str | os.PathLike[str] | None = None) -> tuple[str, str] | None:
    """Owner and repository name taken from the `origin` remote, if there is one."""
    try:
        result = subprocess.run(
            ["git", "remote", "get-url", "origin"],
            cwd=workdir,
            capture_output=True,
            check=False,
        )
    except OSError:
        return None
    try:
        url = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return extract_owner_and_repo(url)


def extract_owner_and_repo(url: str) -> tuple[str, str] | None:
    """Extract ``(owner, repo)`` from a git remote url."""
    match = _REMOTE_URL_RE.match(url.strip())
    if match is None:
        return None
    return match.group(1), match.group(2)