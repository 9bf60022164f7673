"""Precondition checks run before the candidate scan."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .errors import (
    EmptyInputError,
    HeterogeneousInputError,
    InsufficientLengthError,
    MissingKeyError,
)

__all__ = ["validate_inputs"]


def validate_inputs(sequence: Sequence[Any] | None, key: Any) -> list[Any]:
    """Check the inputs in failure precedence order and return them as a list."""

    if sequence is None:
        raise EmptyInputError()
    items = list(sequence)
    if not items:
        raise EmptyInputError()
    if key is None:
        raise MissingKeyError()
    if len(items) == 1:
        raise InsufficientLengthError()
    expected = type(items[0])
    if any(type(item) is not expected for item in items):
        raise HeterogeneousInputError(type(item).__name__ for item in items)
    return items
