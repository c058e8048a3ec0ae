"""Evaluation of how well an agent applies small patches to a large file with
semantic whitespace."""

from __future__ import annotations

import os
import subprocess
import textwrap
from dataclasses import dataclass, field

from kwaak.evaluations.output import EvalOutput

FIXTURE_PATH = "src/evaluations/fixtures/swebench_2148/models.py"

EXPECTED_REMOVALS: tuple[str, ...] = ("            self._content_consumed = True",)

EXPECTED_ADDITIONS: tuple[str, ...] = (
    "                except socket.error as e:",
    "                    raise ConnectionError(e)",
    "            finally:",
    "                self._content_consumed = True",
)


def prompt() -> str:
    """The task given to the agent: patch the file without exploring too much context."""
    return textwrap.dedent(
        f"""\
        There is a bug in the `{FIXTURE_PATH}` file in the `iter_content` method.

        To fix it add an additional exception handler to the nested try block that looks like this (but adjusted for indentation):

        ```
        except socket.error as e:
            raise ConnectionError(e)
        ```

        And also move the content consumed setter to a new finally clause on the outer try block that looks like this (but adjusted for indentation):

        ```
        finally:
            self._content_consumed = True
        ```

        Apply only these fixes, do not make any other changes to the code. The file is long and the modifications are small.
        """
    )


@dataclass
class PatchComparison:
    """The outcome of checking a diff against the expected changes."""

    found_removals: list[str] = field(default_factory=list)
    found_additions: list[str] = field(default_factory=list)
    missing_removals: list[str] = field(default_factory=list)
    missing_additions: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.missing_removals and not self.missing_additions

    def failure_report(self) -> str:
        """A human readable account of what was expected and what was found."""
        sections = [
            ("Missing removals", self.missing_removals),
            ("Missing additions", self.missing_additions),
            ("Found removals", self.found_removals),
            ("Found additions", self.found_additions),
        ]
        blocks = [
            f"{title}:\n" + "".join(f"{line}\n" for line in lines) for title, lines in sections
        ]
        return "Expected changes were not found in the patch.\n\n" + "\n".join(blocks)


def _changed_lines(text: str, marker: str) -> list[str]:
    lines = (line.rstrip("\r") for line in text.split("\n"))
    stripped = (line.lstrip(marker) for line in lines if line.startswith(marker))
    return [line for line in stripped if line.strip()]


def compare_diff(diff: str) -> PatchComparison:
    """Check a git diff of the fixture file against the expected changes."""
    _, sep, changes = diff.partition(f"+++ b/{FIXTURE_PATH}")
    if not sep:
        raise ValueError("Failed to split diff")
    removals = _changed_lines(changes, "-")
    additions = _changed_lines(changes, "+")
    return PatchComparison(
        found_removals=removals,
        found_additions=additions,
        missing_removals=[r for r in EXPECTED_REMOVALS if r not in removals],
        missing_additions=[a for a in EXPECTED_ADDITIONS if a not in additions],
    )


def reset_file(workdir: str | os.PathLike[str] | None = None) -> None:
    """Restore the fixture file from HEAD."""
    result = subprocess.run(
        ["git", "checkout", "HEAD", "--", FIXTURE_PATH], cwd=workdir, check=False
    )
    if result.returncode != 0:
        raise RuntimeError("Failed to reset file using git checkout")


def compare_changes(eval_output: EvalOutput, workdir: str | os.PathLike[str] | None = None) -> bool:
    """Record the agent's diff, check it, and restore the fixture file."""
    result = subprocess.run(
        ["git", "diff", "--", FIXTURE_PATH], cwd=workdir, capture_output=True, check=False
    )
    if result.returncode != 0:
        raise RuntimeError("Failed to get git diff")

    diff = result.stdout.decode("utf-8")
    eval_output.write_diff(diff)

    comparison = compare_diff(diff)
    if not comparison.success:
        eval_output.write_file("failed", comparison.failure_report())

    print(f"\nChange validation result: {str(comparison.success).lower()}")

    subprocess.run(
        ["git", "checkout", "HEAD", "--", FIXTURE_PATH],
        cwd=workdir,
        capture_output=True,
        check=False,
    )
    return comparison.success