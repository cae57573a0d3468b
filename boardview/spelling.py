"""Suggestions of dictionary words close to a mistyped word."""

from __future__ import annotations

from typing import Iterable


def levenshtein_distance(s1: str, s2: str, limit: int) -> int:
    """Return the edit distance between s1 and the first limit characters of s2."""
    limit = min(limit, len(s2))
    target = s2[:limit]
    previous = list(range(limit + 1))
    for i, ch in enumerate(s1):
        column = [i + 1]
        for j, other in enumerate(target):
            column.append(
                min(previous[j + 1] + 1, column[j] + 1, previous[j] + (ch != other))
            )
        previous = column
    return previous[limit]


class SpellCorrector:
    """Suggest words from a dictionary within a small edit distance."""

    def __init__(self, threshold: int = 3) -> None:
        self.threshold = threshold
        self.dictionary: list[str] = []

    def set_dictionary(self, words: Iterable[str]) -> None:
        self.dictionary = list(words)

    def _fuzzy_match(self, s1: str, s2: str) -> int:
        score = levenshtein_distance(s1, s2, len(s1) + 1)
        if score > self.threshold:
            return 0
        return self.threshold - score

    def suggest(self, word: str) -> list[str]:
        """Return close dictionary words, best match first."""
        lowered = word.lower()
        scored = [
            (entry, score)
            for entry in self.dictionary
            if (score := self._fuzzy_match(lowered, entry.lower()))
        ]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        return [entry for entry, _ in scored]