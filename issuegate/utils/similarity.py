from __future__ import annotations

from collections import Counter


def _bigrams(text: str) -> Counter:
    return Counter(text[i : i + 2] for i in range(len(text) - 1))


def compare_strings(first: str, second: str) -> float:
    """
    Dice coefficient over character bigrams, ignoring whitespace and case.
    Returns a score between 0.0 (nothing shared) and 1.0 (identical).
    """
    a = "".join((first or "").lower().split())
    b = "".join((second or "").lower().split())
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0
    left = _bigrams(a)
    right = _bigrams(b)
    overlap = sum((left & right).values())
    return (2.0 * overlap) / (len(a) + len(b) - 2)
