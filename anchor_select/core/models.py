"""Data carried through a single selection."""
from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

__all__ = ["CandidateStats", "CandidateTable", "SelectionResult", "TieBreaker"]


@dataclass(slots=True)
class CandidateStats:
    occurrences: int
    first_relative_position: int


CandidateTable = dict[Hashable, CandidateStats]


@dataclass(slots=True)
class SelectionResult:
    value: Any
    count: int
    anchor_index: int
    relative_position: int
    candidates: Mapping[Hashable, CandidateStats] = field(default_factory=dict)
    tie_breaker_used: str | None = None

    def as_pair(self) -> tuple[Any, int]:
        return self.value, self.count


@runtime_checkable
class TieBreaker(Protocol):
    name: str

    def break_tie(self, table: Mapping[Hashable, CandidateStats], maximum: int) -> Hashable: ...
