"""
Name: Locked-Segment Text Model

Responsibilities:
  - Partition a draft into alternating locked/unlocked runs
  - Find every non-overlapping occurrence of each lock string
  - Resolve overlaps between different locks (first start, longest first)

Collaborators:
  - routes.py: /v1/tweets/segments renders highlights from this partition
  - application.tweet_prompts: lock lists mirror what is highlighted here

Constraints:
  - Pure function of (text, locks): no IO, no state, safe to recompute
  - "".join(segment.text) always reproduces the input text
  - Overlap resolution is a single greedy left-to-right pass; it does not
    search for the arrangement covering the most text
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Segment:
    """A contiguous run of the draft, tagged locked or unlocked."""

    text: str
    locked: bool


@dataclass(frozen=True)
class LockMatch:
    """One literal occurrence of a lock string: text[start:end] == lock."""

    start: int
    end: int
    lock: str


def _unique_locks(locks: Iterable[str]) -> list[str]:
    # R: dict.fromkeys keeps first-seen order while dropping duplicates
    return [lock for lock in dict.fromkeys(locks) if lock]


def find_lock_matches(text: str, locks: Iterable[str]) -> list[LockMatch]:
    """
    R: Collect all occurrences of every distinct non-empty lock.

    The cursor advances by the lock length after each hit, so a lock never
    overlaps itself ("aaa" locked with "aa" matches once, at 0).
    """
    matches: list[LockMatch] = []
    for lock in _unique_locks(locks):
        cursor = 0
        while True:
            found = text.find(lock, cursor)
            if found == -1:
                break
            matches.append(LockMatch(start=found, end=found + len(lock), lock=lock))
            cursor = found + len(lock)
    return matches


def select_non_overlapping(matches: Iterable[LockMatch]) -> list[LockMatch]:
    """
    R: Greedy pass over matches sorted by (start asc, end desc).

    A match is kept when it starts at or after the end of the last kept one.
    """
    ordered = sorted(matches, key=lambda m: (m.start, -m.end))
    accepted: list[LockMatch] = []
    last_end = -1
    for match in ordered:
        if match.start >= last_end:
            accepted.append(match)
            last_end = match.end
    return accepted


def compute_segments(text: str, locks: Iterable[str]) -> list[Segment]:
    """
    R: Partition `text` into locked/unlocked segments.

    Args:
        text: Current draft
        locks: Lock strings (duplicates and empty strings are ignored)

    Returns:
        Ordered segments without empty runs; [] for empty text.
    """
    if not text:
        return []

    segments: list[Segment] = []
    pos = 0
    for match in select_non_overlapping(find_lock_matches(text, locks)):
        if match.start > pos:
            segments.append(Segment(text=text[pos : match.start], locked=False))
        segments.append(Segment(text=text[match.start : match.end], locked=True))
        pos = match.end

    if pos < len(text):
        segments.append(Segment(text=text[pos:], locked=False))

    return segments
