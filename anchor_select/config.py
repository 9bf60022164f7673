"""Task file loading for the command-line driver."""
from __future__ import annotations

from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

__all__ = ["ConfigError", "TaskModel", "TaskFileModel", "load_task_file"]


class ConfigError(ValueError):
    """Raised when a task file cannot be read or fails validation."""


def _ensure_hashable(value: Any) -> Any:
    try:
        hash(value)
    except TypeError as exc:
        raise ValueError(f"values must be hashable scalars, got {type(value).__name__}") from exc
    return value


class TaskModel(BaseModel):
    """One (sequence, key) pair to run through the selector."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    sequence: list[Any] | None = None
    key: Any = None

    @field_validator("sequence")
    @classmethod
    def _check_sequence(cls, value: list[Any] | None) -> list[Any] | None:
        if value is None:
            return None
        return [_ensure_hashable(item) for item in value]

    @field_validator("key")
    @classmethod
    def _check_key(cls, value: Any) -> Any:
        return _ensure_hashable(value)

    def label(self, index: int) -> str:
        return self.name or f"task-{index}"


class TaskFileModel(BaseModel):
    """Top-level schema of a task file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: int = 1
    tasks: list[TaskModel] = Field(default_factory=list)


def _format_validation_error(path: Path, exc: ValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part is not None)
        message = error.get("msg", "unknown error")
        if location:
            details.append(f"{location}: {message}")
        else:
            details.append(message)
    summary = "; ".join(details)
    return f"Task file validation failed ({path}): {summary}"


def load_task_file(path: str | Path) -> TaskFileModel:
    """Read and validate a YAML task file."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"Task file not found: {path}") from exc

    try:
        raw_data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc

    if not isinstance(raw_data, MutableMapping):
        raise ConfigError("Task file root must be a mapping.")

    try:
        return TaskFileModel.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error(path, exc)) from exc
