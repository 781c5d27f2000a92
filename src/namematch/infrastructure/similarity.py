"""String similarity utilities for fuzzy matching."""

from __future__ import annotations

import sys

__all__ = [
    "edit_distance",
    "edit_distance_with_substrings",
]


def edit_distance(a: str, b: str, limit: int = sys.maxsize) -> int | None:
    """Calculate the bounded edit distance between two strings.

    Counts single-character insertions, deletions and substitutions, plus
    transpositions of two adjacent characters, each with cost 1. Only one
    transposition is considered per cell (restricted edit distance), so
    this is not full Damerau-Levenshtein.

    Strings are compared by code point, never by encoded byte.

    Args:
        a: First string.
        b: Second string.
        limit: Largest distance the caller cares about.

    Returns:
        The edit distance, or None if it exceeds ``limit``.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    # Make b the shorter string so the rows stay small
    if len(a) < len(b):
        a, b = b, a

    min_dist = len(a) - len(b)
    if min_dist > limit:
        return None

    # Strip common prefix, then common suffix
    start = 0
    while start < len(b) and a[start] == b[start]:
        start += 1
    a_end, b_end = len(a), len(b)
    while b_end > start and a[a_end - 1] == b[b_end - 1]:
        a_end -= 1
        b_end -= 1
    a = a[start:a_end]
    b = b[start:b_end]

    # b is the shorter string, so an empty b means only insertions remain
    if not b:
        return min_dist

    width = len(b) + 1
    prev_prev = [sys.maxsize] * width
    prev = list(range(width))
    current = [0] * width

    for i in range(1, len(a) + 1):
        current[0] = i
        a_char = a[i - 1]

        for j in range(1, width):
            b_char = b[j - 1]

            # No cost to substitute a character with itself
            substitution_cost = 0 if a_char == b_char else 1

            current[j] = min(
                prev[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                prev[j - 1] + substitution_cost,  # substitution
            )

            if i > 1 and j > 1 and a_char == b[j - 2] and a[i - 2] == b_char:
                # transposition
                current[j] = min(current[j], prev_prev[j - 2] + 1)

        # Rotate rows, reusing the oldest one as scratch space
        prev_prev, prev, current = prev, current, prev_prev

    # prev holds the last row after the final rotation
    distance = prev[-1]
    return distance if distance <= limit else None


def edit_distance_with_substrings(
    a: str, b: str, limit: int = sys.maxsize
) -> int | None:
    """Score two strings so that substring matches rank close, but not equal.

    The raw edit distance is discounted by the difference in length, so
    "capture" scores low against "force_capture". A pure substring match
    still scores 1, keeping 0 for true whole-word matches. When one string
    is less than half the length of the other, the length difference is
    charged in full since the two are unlikely to be related.

    Args:
        a: First string.
        b: Second string.
        limit: Largest score the caller cares about.

    Returns:
        The score, or None if it exceeds ``limit``.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    n = len(a)
    m = len(b)

    big_len_diff = n * 2 < m or m * 2 < n
    len_diff = abs(n - m)
    distance = edit_distance(a, b, limit + len_diff)
    if distance is None:
        return None

    # Subtracting the length difference scores exact substrings as 0
    score = distance - len_diff

    if score == 0 and len_diff > 0 and not big_len_diff:
        # Substring match, not a whole word match
        score = 1
    elif not big_len_diff:
        score += (len_diff + 1) // 2
    else:
        score += len_diff

    return score if score <= limit else None
