# src/window_switcher/engine/matching.py
"""
Fuzzy ranking of window records against the filter text.

A record is matched on ``"<title> <app>"``. Containing the filter as a
substring gives the top score; otherwise the filter is scanned as an
in-order subsequence and every matched character is worth one point,
stopping at the first character that cannot be found.
"""

from dataclasses import dataclass
from typing import Optional

from .models import WindowRecord

EXACT_MATCH_SCORE = 100
MIN_SUBSEQUENCE_SCORE = 3


@dataclass(frozen=True)
class MatchedEntry:
    record: WindowRecord
    score: Optional[int]


def match_text(record):
    """Text a record is matched against."""
    return f"{record.title} {record.app}"


def score(text, pattern):
    """
    Score how well ``pattern`` matches ``text``, ignoring case.

    Args:
        text (str): Text to search in
        pattern (str): Filter typed by the user

    Returns:
        int: EXACT_MATCH_SCORE for a substring match, otherwise the number
        of pattern characters matched in order before the first miss
    """
    text = text.lower()
    pattern = pattern.lower()

    if pattern in text:
        return EXACT_MATCH_SCORE

    points = 0
    position = 0
    for char in pattern:
        found = text.find(char, position)
        if found < 0:
            break
        points += 1
        position = found + 1
    return points


def threshold(pattern):
    """Minimum score a non-substring match needs to be listed."""
    return max(MIN_SUBSEQUENCE_SCORE, len(pattern) // 2)


def rank(windows, pattern):
    """
    Filter and order windows by relevance to ``pattern``.

    An empty pattern passes every record through in its original order
    with no score. Otherwise substring matches are always kept, other
    entries below the threshold are dropped, and the rest are sorted by
    score, highest first. The sort is stable, so equal scores keep the
    input order.

    Args:
        windows: Sequence of WindowRecord
        pattern (str): Filter text

    Returns:
        list[MatchedEntry]
    """
    if not pattern:
        return [MatchedEntry(record, None) for record in windows]

    minimum = threshold(pattern)
    needle = pattern.lower()
    entries = []
    for record in windows:
        text = match_text(record)
        points = score(text, pattern)
        if needle in text.lower() or points >= minimum:
            entries.append(MatchedEntry(record, points))

    entries.sort(key=lambda entry: entry.score, reverse=True)
    return entries
