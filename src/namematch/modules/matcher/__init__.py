"""Name matching module."""

from namematch.modules.matcher.matcher import (
    find_best_match,
    find_best_match_impl,
    find_best_match_with_substrings,
    find_match_by_sorted_words,
    sort_by_words,
)

__all__ = [
    "find_best_match",
    "find_best_match_impl",
    "find_best_match_with_substrings",
    "find_match_by_sorted_words",
    "sort_by_words",
]
