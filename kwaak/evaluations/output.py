"""Files written for each evaluation iteration."""

from __future__ import annotations

import shutil
import time
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path


@dataclass
class EvalMetrics:
    """Measurements of a single evaluation iteration."""

    time_spent: timedelta
    input_tokens: int
    output_tokens: int

    def render(self) -> str:
        """The metrics file contents."""
        return (
            f"Time spent: {self.time_spent.total_seconds():.2f}s\n"
            f"Input tokens: {self.input_tokens}\n"
            f"Output tokens: {self.output_tokens}\n"
        )


class EvalOutput:
    """Output directory ``<base>/<eval_type>/iteration_<n>`` of one iteration.

    The directory must already exist; it is wiped and recreated.
    """

    def __init__(self, eval_type: str, iteration: int, base_dir: str | Path = "evals") -> None:
        self.iteration_dir = Path(base_dir) / eval_type / f"iteration_{iteration}"
        shutil.rmtree(self.iteration_dir)
        self.iteration_dir.mkdir(parents=True, exist_ok=True)
        self.start_time = time.monotonic()

    def write_agent_log(self, content: str) -> None:
        self.write_file("agent.log", content)

    def write_diff(self, content: str) -> None:
        self.write_file("changes.diff", content)

    def write_file(self, name: str, content: str) -> None:
        (self.iteration_dir / name).write_text(content, encoding="utf-8")

    def write_metrics(self, metrics: EvalMetrics) -> None:
        self.write_file("metrics", metrics.render())

    def elapsed_time(self) -> timedelta:
        return timedelta(seconds=time.monotonic() - self.start_time)