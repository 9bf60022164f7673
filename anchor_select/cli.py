"""Run selector tasks declared in a YAML file and print their outcomes."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, TextIO

from anchor_select.config import ConfigError, TaskModel, load_task_file
from anchor_select.core import SelectionError, Selector

LOGGER = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_TASK_ERROR = 1
EXIT_INPUT_ERROR = 2


class JsonLogFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("anchor-select")
    parser.add_argument("tasks", type=Path, help="YAML file listing sequence/key tasks")
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="output format (text/json)",
    )
    parser.add_argument("--json-logs", action="store_true", help="emit logs as JSON")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def _configure_logging(as_json: bool, verbose: bool) -> None:
    handler = logging.StreamHandler()
    if as_json:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def _render(label: str, fmt: str, *, pair: tuple[Any, int] | None = None, error: SelectionError | None = None) -> str:
    if fmt == "json":
        if error is not None:
            return json.dumps({"task": label, "error": error.message, "kind": error.kind.value}, ensure_ascii=False)
        assert pair is not None
        return json.dumps({"task": label, "value": pair[0], "count": pair[1]}, ensure_ascii=False, default=str)
    if error is not None:
        return f"error: {error.message}"
    return repr(pair)


def run_tasks(tasks: List[TaskModel], *, fmt: str = "text", out: TextIO | None = None) -> int:
    """Solve every task, printing one line each; returns the number of failures."""

    stream = out or sys.stdout
    selector = Selector()
    failures = 0
    for index, task in enumerate(tasks):
        label = task.label(index)
        try:
            pair = selector.solve(task.sequence, task.key)
        except SelectionError as exc:
            failures += 1
            LOGGER.debug("task %s failed: %s", label, exc.kind.value)
            print(_render(label, fmt, error=exc), file=stream)
            continue
        print(_render(label, fmt, pair=pair), file=stream)
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.json_logs, args.verbose)
    try:
        task_file = load_task_file(args.tasks)
    except ConfigError as exc:
        LOGGER.error(str(exc))
        return EXIT_INPUT_ERROR

    LOGGER.info("tasks: %d", len(task_file.tasks))
    failures = run_tasks(task_file.tasks, fmt=args.format)
    if failures:
        LOGGER.info("%d of %d tasks failed", failures, len(task_file.tasks))
        return EXIT_TASK_ERROR
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
