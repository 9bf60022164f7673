"""Classified failures raised by the selector."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

__all__ = [
    "FailureKind",
    "SelectionError",
    "EmptyInputError",
    "MissingKeyError",
    "InsufficientLengthError",
    "HeterogeneousInputError",
    "KeyNotFoundError",
]


class FailureKind(str, Enum):
    """Enumerates the structured failure kinds, in check order."""

    EMPTY_INPUT = "empty_input"
    MISSING_KEY = "missing_key"
    INSUFFICIENT_LENGTH = "insufficient_length"
    HETEROGENEOUS_INPUT = "heterogeneous_input"
    KEY_NOT_FOUND = "key_not_found"


class SelectionError(Exception):
    """Base class for selector-originated errors."""

    kind: FailureKind
    default_message = "Selection failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class EmptyInputError(SelectionError):
    """Raised when the sequence is absent or has no elements."""

    kind = FailureKind.EMPTY_INPUT
    default_message = "List is empty"


class MissingKeyError(SelectionError):
    """Raised when no key value was supplied."""

    kind = FailureKind.MISSING_KEY
    default_message = "Key item is nil"


class InsufficientLengthError(SelectionError):
    """Raised for single-element sequences."""

    kind = FailureKind.INSUFFICIENT_LENGTH
    default_message = "List must contain more than one item"


class HeterogeneousInputError(SelectionError):
    """Raised when sequence elements do not share one concrete type."""

    kind = FailureKind.HETEROGENEOUS_INPUT
    default_message = "Got a dataset of items with different types"

    def __init__(self, type_names: Iterable[str], message: str | None = None) -> None:
        super().__init__(message)
        self.type_names = tuple(sorted(set(type_names)))


class KeyNotFoundError(SelectionError):
    """Raised when the key never occurs, so no anchor can be established."""

    kind = FailureKind.KEY_NOT_FOUND
    default_message = "No target items available"

    def __init__(self, key: Any = None, message: str | None = None) -> None:
        super().__init__(message)
        self.key = key
