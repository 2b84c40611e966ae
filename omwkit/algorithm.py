"""General purpose algorithms."""

from __future__ import annotations

from collections.abc import Sequence


def levenshtein_distance(a: Sequence, b: Sequence) -> int:
    """Return the Levenshtein edit distance between two sequences.

    Substitutions, insertions and deletions each cost 1. Elements are
    compared with ``==``, so strings, lists and tuples all work.
    """
    if a is None or b is None:
        raise TypeError("levenshtein_distance() needs two sequences, got None")

    previous = list(range(len(b) + 1))
    for i, item_a in enumerate(a, start=1):
        current = [i]
        for j, item_b in enumerate(b, start=1):
            substitution = previous[j - 1] + (0 if item_a == item_b else 1)
            insertion = current[j - 1] + 1
            deletion = previous[j] + 1
            current.append(min(substitution, insertion, deletion))
        previous = current
    return previous[-1]