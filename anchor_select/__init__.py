"""Anchor-relative most-frequent value selection."""
from __future__ import annotations

from .core import (
    EmptyInputError,
    FailureKind,
    HeterogeneousInputError,
    InsufficientLengthError,
    KeyNotFoundError,
    MissingKeyError,
    SelectionError,
    SelectionResult,
    Selector,
    select,
    solve,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyInputError",
    "FailureKind",
    "HeterogeneousInputError",
    "InsufficientLengthError",
    "KeyNotFoundError",
    "MissingKeyError",
    "SelectionError",
    "SelectionResult",
    "Selector",
    "select",
    "solve",
]
