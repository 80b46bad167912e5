from __future__ import annotations

"""Damerau-Levenshtein edit distance (optimal string alignment variant).

Insertions, deletions, substitutions and transpositions of two adjacent
symbols all cost 1. The recurrence only keeps two rolling rows instead of the
full matrix and trims the common suffix and prefix of both operands before
running.

Reference: https://en.wikipedia.org/wiki/Damerau%E2%80%93Levenshtein_distance
"""

from typing import Any, Sequence


def damerau_levenshtein(a: Sequence[Any] | str, b: Sequence[Any] | str) -> int:
    """Return the Damerau-Levenshtein distance between *a* and *b*.

    Both operands may be any indexable sequence whose symbols support
    equality; neither is mutated.
    """

    if a is b or (len(a) == len(b) and all(x == y for x, y in zip(a, b))):
        return 0

    la, lb = len(a), len(b)
    if not la:
        return lb
    if not lb:
        return la

    # The shorter operand drives the outer loop.
    if la > lb:
        a, b = b, a
        la, lb = lb, la

    while la > 0 and a[la - 1] == b[lb - 1]:
        la -= 1
        lb -= 1

    start = 0
    if not la or a[0] == b[0]:
        while start < la and a[start] == b[start]:
            start += 1
        la -= start
        lb -= start
        if not la:
            return lb

    # row0[j]: distance to b[:j + 1] for the current prefix of a.
    # row1[j]: diagonal value of the previous row, read back for transpositions.
    row0 = list(range(1, lb + 1))
    row1 = [0] * lb

    char_a = a[start]
    current = 0

    for i in range(la):
        previous_char_a = char_a
        char_a = a[start + i]

        next_transposition_cost = 0
        char_b = b[start]
        left = i
        current = i + 1

        for j in range(lb):
            above = current
            previous_char_b = char_b
            this_transposition_cost = next_transposition_cost

            char_b = b[start + j]
            next_transposition_cost = row1[j]
            row1[j] = current = left
            left = row0[j]

            if char_a != char_b:
                if left < current:
                    current = left
                if above < current:
                    current = above
                current += 1

                if (
                    i != 0
                    and j != 0
                    and char_a == previous_char_b
                    and char_b == previous_char_a
                ):
                    this_transposition_cost += 1
                    if this_transposition_cost < current:
                        current = this_transposition_cost

            row0[j] = current

    return current
