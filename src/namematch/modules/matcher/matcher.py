"""Best-candidate selection for "did you mean" suggestions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from namematch.infrastructure.similarity import (
    edit_distance,
    edit_distance_with_substrings,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "WORD_SEPARATOR",
    "find_best_match",
    "find_best_match_impl",
    "find_best_match_with_substrings",
    "find_match_by_sorted_words",
    "sort_by_words",
]

logger = structlog.get_logger()

WORD_SEPARATOR = "_"


def find_best_match(
    candidates: Sequence[str],
    lookup: str,
    max_distance: int | None = None,
) -> str | None:
    """Find the candidate closest to a name that did not match exactly.

    Args:
        candidates: Known names, in the order they should be preferred.
        lookup: The name the user typed.
        max_distance: Largest edit distance to accept. Defaults to a third
            of the lookup length (at least 1).

    Returns:
        The best candidate, or None if nothing is close enough.
    """
    return find_best_match_impl(False, candidates, lookup, max_distance)


def find_best_match_with_substrings(
    candidates: Sequence[str],
    lookup: str,
    max_distance: int | None = None,
) -> str | None:
    """Like find_best_match, but score candidates with substring awareness.

    Candidates that tie on score are separated by a second round of plain
    edit distance, so whole-word matches win over substring matches.
    """
    return find_best_match_impl(True, candidates, lookup, max_distance)


def find_best_match_impl(
    use_substring_score: bool,
    candidates: Sequence[str],
    lookup: str,
    max_distance: int | None = None,
) -> str | None:
    """Select the best candidate for ``lookup``.

    Priority of matches:
        1. Case-insensitive exact or substring match
        2. Edit distance match
        3. Sorted word match

    Args:
        use_substring_score: Rank with edit_distance_with_substrings and
            break ties among equally scored candidates.
        candidates: Known names, in the order they should be preferred.
        lookup: The name the user typed.
        max_distance: Largest distance (or score) to accept.

    Returns:
        The best candidate, or None if nothing qualifies.

    Raises:
        ValueError: If ``max_distance`` is negative.
    """
    if max_distance is not None and max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, got {max_distance}")

    lookup_upper = lookup.upper()
    for candidate in candidates:
        candidate_upper = candidate.upper()
        if candidate_upper in lookup_upper or lookup_upper in candidate_upper:
            logger.debug(
                "match_found",
                tier="case_insensitive",
                lookup=lookup,
                candidate=candidate,
            )
            return candidate

    dist = max_distance if max_distance is not None else max(len(lookup), 3) // 3
    score = edit_distance_with_substrings if use_substring_score else edit_distance

    best: str | None = None
    # Candidates tied at the best score, only kept when scoring substrings
    tied: list[str] = []
    for candidate in candidates:
        d = score(lookup, candidate, dist)
        if d is None:
            continue
        if d == 0:
            logger.debug(
                "match_found", tier="edit_distance", lookup=lookup, candidate=candidate
            )
            return candidate

        if use_substring_score:
            if d < dist:
                dist = d
                tied.clear()
            # Otherwise d == dist; keep the budget so ties still qualify
            tied.append(candidate)
        else:
            dist = d - 1
        best = candidate

    # Among tied candidates prefer the better whole-word match, e.g.
    # "force_capture" over "capture" for the input "forced_capture".
    if len(tied) > 1:
        assert use_substring_score
        logger.debug("tie_break", lookup=lookup, candidates=len(tied))
        best = find_best_match_impl(False, tied, lookup, len(lookup))
        if best is not None:
            return best
    elif best is not None:
        logger.debug("match_found", tier="edit_distance", lookup=lookup, candidate=best)
        return best

    return find_match_by_sorted_words(candidates, lookup)


def find_match_by_sorted_words(candidates: Sequence[str], lookup: str) -> str | None:
    """Find a candidate made of the same words as ``lookup`` in any order.

    Args:
        candidates: Known names.
        lookup: The name the user typed.

    Returns:
        The first candidate with the same sorted words, or None.
    """
    lookup_words = sort_by_words(lookup)
    for candidate in candidates:
        if sort_by_words(candidate) == lookup_words:
            logger.debug(
                "match_found", tier="sorted_words", lookup=lookup, candidate=candidate
            )
            return candidate

    logger.debug("match_not_found", lookup=lookup, candidates=len(candidates))
    return None


def sort_by_words(name: str) -> list[str]:
    """Split a name on the word separator and sort the words."""
    return sorted(name.split(WORD_SEPARATOR))
