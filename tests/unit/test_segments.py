"""
Name: Locked-Segment Text Model Unit Tests

Responsibilities:
  - Verify partitioning of a draft against a lock set
  - Cover tie-breaks, overlap discards and empty-lock filtering
  - Check the concatenation invariant on varied inputs
"""

import pytest

from studio.domain.segments import (
    LockMatch,
    Segment,
    compute_segments,
    find_lock_matches,
    select_non_overlapping,
)

pytestmark = pytest.mark.unit


def _pairs(segments):
    return [(s.text, s.locked) for s in segments]


class TestComputeSegments:
    def test_empty_text_returns_empty_list(self):
        assert compute_segments("", ["ab"]) == []
        assert compute_segments("", []) == []

    def test_no_locks_returns_single_unlocked_segment(self):
        assert compute_segments("hello world", []) == [Segment("hello world", False)]

    def test_repeated_lock_matches_every_occurrence(self):
        result = compute_segments("ab cd ab", ["ab"])
        assert _pairs(result) == [("ab", True), (" cd ", False), ("ab", True)]

    def test_tied_start_prefers_longer_lock(self):
        result = compute_segments("abcdef", ["abc", "ab"])
        assert _pairs(result) == [("abc", True), ("def", False)]

    def test_tied_start_prefers_longer_lock_regardless_of_order(self):
        result = compute_segments("abcdef", ["ab", "abc"])
        assert _pairs(result) == [("abc", True), ("def", False)]

    def test_overlapping_later_lock_is_discarded(self):
        result = compute_segments("abcdef", ["abcd", "cdef"])
        assert _pairs(result) == [("abcd", True), ("ef", False)]

    def test_empty_lock_is_ignored(self):
        assert _pairs(compute_segments("abc", [""])) == [("abc", False)]

    def test_absent_lock_is_ignored(self):
        assert _pairs(compute_segments("abc", ["zzz"])) == [("abc", False)]

    def test_duplicate_locks_are_deduplicated(self):
        result = compute_segments("x ab y", ["ab", "ab", "ab"])
        assert _pairs(result) == [("x ", False), ("ab", True), (" y", False)]

    def test_whole_text_locked(self):
        assert _pairs(compute_segments("locked", ["locked"])) == [("locked", True)]

    def test_adjacent_locks_produce_no_empty_gap(self):
        result = compute_segments("foobar", ["foo", "bar"])
        assert _pairs(result) == [("foo", True), ("bar", True)]

    def test_lock_does_not_overlap_itself(self):
        assert _pairs(compute_segments("aaa", ["aa"])) == [("aa", True), ("a", False)]

    def test_lock_matching_is_case_sensitive(self):
        assert _pairs(compute_segments("AB ab", ["ab"])) == [("AB ", False), ("ab", True)]

    @pytest.mark.parametrize(
        "text,locks",
        [
            ("ab cd ab", ["ab"]),
            ("abcdef", ["abcd", "cdef"]),
            ("the quick brown fox", ["quick", "k b", "fox", ""]),
            ("naïve café — ünïcödé", ["café", "ü"]),
            ("no locks here", []),
            ("aaaaaa", ["aa", "aaa"]),
        ],
    )
    def test_concatenation_reproduces_text(self, text, locks):
        segments = compute_segments(text, locks)
        assert "".join(s.text for s in segments) == text
        assert all(s.text for s in segments)


class TestMatchHelpers:
    def test_find_lock_matches_returns_positions(self):
        matches = find_lock_matches("ab cd ab", ["ab"])
        assert matches == [LockMatch(0, 2, "ab"), LockMatch(6, 8, "ab")]

    def test_select_non_overlapping_keeps_touching_matches(self):
        selected = select_non_overlapping([LockMatch(3, 6, "def"), LockMatch(0, 3, "abc")])
        assert selected == [LockMatch(0, 3, "abc"), LockMatch(3, 6, "def")]

    def test_select_non_overlapping_is_greedy_not_optimal(self):
        # "abcd" wins by starting first even though "bc" + "de" would cover more
        matches = [LockMatch(0, 4, "abcd"), LockMatch(1, 3, "bc"), LockMatch(3, 5, "de")]
        assert select_non_overlapping(matches) == [LockMatch(0, 4, "abcd")]
