from __future__ import annotations

from collections.abc import Hashable, Mapping
import logging
from typing import Any

import pytest

from anchor_select import solve, select
from anchor_select.core import (
    CandidateStats,
    ClosestToAnchorTieBreaker,
    EmptyInputError,
    FailureKind,
    HeterogeneousInputError,
    InsufficientLengthError,
    KeyNotFoundError,
    MissingKeyError,
    Selector,
    TieBreaker,
)

_SCENARIOS = [
    ([1, 1, 1, 2, 3, 4, 4, 1], 2, (4, 2)),
    ([1, 1, 1, 2, 3, 4, 4, 1], 1, (1, 3)),
    (["red", "green", "blue", "green", "blue"], "green", ("blue", 2)),
    ([-1, 40, 2, 40, 3, 40, 2], 40, (2, 2)),
]

_FAILURES = [
    ([2], 2, InsufficientLengthError),
    ([1, 3], 0, KeyNotFoundError),
    (["red", "green", "blue", "green", "blue"], None, MissingKeyError),
    (None, None, EmptyInputError),
    (None, 2, EmptyInputError),
    ([1, "fish", 1, 2, "fish"], 2, HeterogeneousInputError),
]


@pytest.mark.parametrize(("sequence", "key", "expected"), _SCENARIOS)
def test_solve_returns_value_and_count(sequence: list[Any], key: Any, expected: tuple[Any, int]) -> None:
    assert solve(sequence, key) == expected


@pytest.mark.parametrize(("sequence", "key", "error"), _FAILURES)
def test_solve_classifies_failures(sequence: list[Any] | None, key: Any, error: type[Exception]) -> None:
    with pytest.raises(error):
        solve(sequence, key)


def test_select_reports_anchor_and_tie_breaker() -> None:
    result = select([-1, 40, 2, 40, 3, 40, 2], 40)
    assert result.as_pair() == (2, 2)
    assert result.anchor_index == 1
    assert result.relative_position == 1
    assert result.tie_breaker_used == "closest_to_anchor"
    assert result.candidates == {
        40: CandidateStats(occurrences=2, first_relative_position=2),
        2: CandidateStats(occurrences=2, first_relative_position=1),
        3: CandidateStats(occurrences=1, first_relative_position=3),
    }


def test_select_without_tie_leaves_tie_breaker_unset() -> None:
    result = select([1, 1, 1, 2, 3, 4, 4, 1], 2)
    assert result.tie_breaker_used is None
    assert result.anchor_index == 3
    assert result.relative_position == 2


def test_key_as_last_element_counts_zero() -> None:
    result = select([5, 7, 9], 9)
    assert result.as_pair() == (9, 0)
    assert result.relative_position == 0


def test_key_only_once_loses_to_tail_values() -> None:
    assert solve([3, 1, 2, 2], 1) == (2, 2)


def test_pre_anchor_values_are_ignored() -> None:
    # 8 dominates the prefix but never appears after the anchor.
    result = select([8, 8, 8, 8, 5, 6, 6], 5)
    assert 8 not in result.candidates
    assert result.as_pair() == (6, 2)


def test_key_not_found_records_key() -> None:
    with pytest.raises(KeyNotFoundError) as excinfo:
        solve([1, 3], 0)
    assert excinfo.value.key == 0
    assert excinfo.value.kind is FailureKind.KEY_NOT_FOUND
    assert str(excinfo.value) == "No target items available"


def test_key_of_other_type_does_not_anchor() -> None:
    with pytest.raises(KeyNotFoundError):
        solve([1, 2, 2], 1.0)
    with pytest.raises(KeyNotFoundError):
        solve([1, 2, 2], True)


def test_repeated_calls_are_deterministic() -> None:
    sequence = ["a", "b", "c", "b", "c", "a", "d"]
    results = {solve(sequence, "b") for _ in range(5)}
    assert results == {("c", 2)}


def test_solve_accepts_tuples_and_does_not_mutate_input() -> None:
    sequence = [1, 2, 3, 3]
    assert solve(tuple(sequence), 2) == (3, 2)
    assert sequence == [1, 2, 3, 3]


class _FarthestTieBreaker:
    name = "farthest"

    def break_tie(self, table: Mapping[Hashable, CandidateStats], maximum: int) -> Hashable:
        tied = [(stats.first_relative_position, value) for value, stats in table.items() if stats.occurrences == maximum]
        return max(tied)[1]


def test_selector_accepts_custom_tie_breaker() -> None:
    breaker = _FarthestTieBreaker()
    assert isinstance(breaker, TieBreaker)
    selector = Selector(tie_breaker=breaker)
    result = selector.select([-1, 40, 2, 40, 3, 40, 2], 40)
    assert result.as_pair() == (40, 2)
    assert result.tie_breaker_used == "farthest"


def test_selector_defaults_to_closest_tie_breaker() -> None:
    assert isinstance(Selector().tie_breaker, ClosestToAnchorTieBreaker)


def test_select_logs_anchor_and_result_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="anchor_select")
    solve([1, 1, 1, 2, 3, 4, 4, 1], 2)
    messages = [record.getMessage() for record in caplog.records]
    assert "anchor for key 2 found at index 3" in messages
    assert any(message.startswith("selected 4 (count=2") for message in messages)
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
