"""Maximum-count lookup and the proximity tie breaker."""
from __future__ import annotations

from collections.abc import Hashable, Mapping
import sys

from .errors import KeyNotFoundError
from .models import CandidateStats

__all__ = ["ClosestToAnchorTieBreaker", "resolve_maximum_count"]


def resolve_maximum_count(table: Mapping[Hashable, CandidateStats]) -> int:
    if not table:
        raise KeyNotFoundError(message="candidate table is empty")
    return max(stats.occurrences for stats in table.values())


class ClosestToAnchorTieBreaker:
    name = "closest_to_anchor"

    def break_tie(self, table: Mapping[Hashable, CandidateStats], maximum: int) -> Hashable:
        winner: Hashable | None = None
        closest = sys.maxsize
        found = False
        for value, stats in table.items():
            if stats.occurrences == maximum and stats.first_relative_position < closest:
                closest = stats.first_relative_position
                winner = value
                found = True
        if not found:
            raise KeyNotFoundError(message=f"no candidate reaches the maximum count {maximum}")
        return winner
