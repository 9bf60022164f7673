"""Single-pass construction of the candidate table."""
from __future__ import annotations

from collections.abc import Hashable, Sequence
import logging
from typing import Any

from .models import CandidateStats, CandidateTable

__all__ = ["build_candidate_table", "matches_key"]

LOGGER = logging.getLogger(__name__)


def matches_key(item: Any, key: Any) -> bool:
    # 1 == 1.0 == True in Python; an anchor needs the same concrete type.
    return type(item) is type(key) and item == key


def build_candidate_table(items: Sequence[Hashable], key: Hashable) -> tuple[int | None, CandidateTable]:
    """Scan ``items`` once and summarise every value seen from the anchor onwards.

    Returns the anchor index (``None`` when ``key`` never occurs) and the
    candidate table in first-seen order. The anchor occurrence itself is
    not counted; the key's relative position is that of its second
    occurrence.
    """

    table: CandidateTable = {}
    anchor: int | None = None
    key_reoccurred = False
    for position, item in enumerate(items):
        if anchor is None:
            if matches_key(item, key):
                anchor = position
                table[item] = CandidateStats(occurrences=0, first_relative_position=0)
                LOGGER.debug("anchor for key %r found at index %d", key, position)
            continue
        relative = position - anchor
        if matches_key(item, key):
            stats = table[item]
            if not key_reoccurred:
                key_reoccurred = True
                stats.first_relative_position = relative
            stats.occurrences += 1
            continue
        existing = table.get(item)
        if existing is not None:
            existing.occurrences += 1
        else:
            table[item] = CandidateStats(occurrences=1, first_relative_position=relative)
    return anchor, table
