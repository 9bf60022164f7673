"""Selector core: validation, candidate scan and resolution."""
from __future__ import annotations

from .candidates import build_candidate_table, matches_key
from .errors import (
    EmptyInputError,
    FailureKind,
    HeterogeneousInputError,
    InsufficientLengthError,
    KeyNotFoundError,
    MissingKeyError,
    SelectionError,
)
from .models import CandidateStats, CandidateTable, SelectionResult, TieBreaker
from .selector import Selector, select, solve
from .tie_breakers import ClosestToAnchorTieBreaker, resolve_maximum_count
from .validation import validate_inputs

__all__ = [
    "CandidateStats",
    "CandidateTable",
    "ClosestToAnchorTieBreaker",
    "EmptyInputError",
    "FailureKind",
    "HeterogeneousInputError",
    "InsufficientLengthError",
    "KeyNotFoundError",
    "MissingKeyError",
    "SelectionError",
    "SelectionResult",
    "Selector",
    "TieBreaker",
    "build_candidate_table",
    "matches_key",
    "resolve_maximum_count",
    "select",
    "solve",
    "validate_inputs",
]
