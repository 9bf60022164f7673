"""Most-frequent value after the first occurrence of a key."""
from __future__ import annotations

from collections.abc import Hashable, Sequence
import logging
from typing import Any

from .candidates import build_candidate_table
from .errors import KeyNotFoundError
from .models import SelectionResult, TieBreaker
from .tie_breakers import ClosestToAnchorTieBreaker, resolve_maximum_count
from .validation import validate_inputs

__all__ = ["Selector", "select", "solve"]

LOGGER = logging.getLogger(__name__)


class Selector:
    """Find the value occurring most often from the key's first appearance on.

    Counts exclude the anchor occurrence of the key itself. When several
    values share the maximum count the tie breaker decides; by default the
    value first seen closest to the anchor wins.
    """

    def __init__(self, *, tie_breaker: TieBreaker | None = None) -> None:
        self._tie_breaker = tie_breaker or ClosestToAnchorTieBreaker()

    @property
    def tie_breaker(self) -> TieBreaker:
        return self._tie_breaker

    def select(self, sequence: Sequence[Hashable] | None, key: Hashable | None) -> SelectionResult:
        items = validate_inputs(sequence, key)
        anchor, table = build_candidate_table(items, key)
        if anchor is None:
            raise KeyNotFoundError(key)

        maximum = resolve_maximum_count(table)
        contenders = sum(1 for stats in table.values() if stats.occurrences == maximum)
        value = self._tie_breaker.break_tie(table, maximum)
        result = SelectionResult(
            value=value,
            count=maximum,
            anchor_index=anchor,
            relative_position=table[value].first_relative_position,
            candidates=dict(table),
            tie_breaker_used=self._tie_breaker.name if contenders > 1 else None,
        )
        LOGGER.debug(
            "selected %r (count=%d, candidates=%d, tie_breaker=%s)",
            result.value,
            result.count,
            len(table),
            result.tie_breaker_used,
        )
        return result

    def solve(self, sequence: Sequence[Hashable] | None, key: Hashable | None) -> tuple[Any, int]:
        return self.select(sequence, key).as_pair()


def select(sequence: Sequence[Hashable] | None, key: Hashable | None) -> SelectionResult:
    return Selector().select(sequence, key)


def solve(sequence: Sequence[Hashable] | None, key: Hashable | None) -> tuple[Any, int]:
    """Return ``(value, count)`` for the most frequent value after ``key``'s anchor."""

    return Selector().solve(sequence, key)
