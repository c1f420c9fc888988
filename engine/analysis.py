"""
analysis.py — Complexity Comparison Helpers
============================================
Pure functions behind Comparison Mode's verdict sentences.  They only
read descriptor metadata (name, time/space complexity strings, best_for),
never traces.

A complexity string like "O(n log n) average, O(n²) worst case" is
reduced to its first O(...) group, then ranked by a fixed table.
Anything not in the table ranks UNKNOWN_RANK, i.e. slower than every
known class.
"""

import re
from typing import Dict

from algorithms import AlgoInfo

UNKNOWN_RANK = 999

TIME_RANK: Dict[str, int] = {
    "O(1)":       1,
    "O(log n)":   2,
    "O(n)":       3,
    "O(n log n)": 4,
    "O(n²)":      5,
    "O(2^n)":     6,
    "O(n!)":      7,
}

SPACE_RANK: Dict[str, int] = {
    "O(1)":       1,
    "O(log n)":   2,
    "O(n)":       3,
    "O(n log n)": 4,
    "O(n²)":      5,
}

_BIG_O = re.compile(r"O\([^)]+\)")


def base_complexity(complexity: str) -> str:
    """First O(...) group of `complexity`, or the whole string if there is none."""
    match = _BIG_O.search(complexity)
    return match.group(0) if match else complexity


def complexity_rank(complexity: str, table: Dict[str, int] = TIME_RANK) -> int:
    return table.get(base_complexity(complexity), UNKNOWN_RANK)


def time_efficiency_comparison(a: AlgoInfo, b: AlgoInfo) -> str:
    rank_a = complexity_rank(a.time_complexity, TIME_RANK)
    rank_b = complexity_rank(b.time_complexity, TIME_RANK)

    if rank_a < rank_b:
        return (f"{a.name} is generally faster than {b.name} with time complexity "
                f"{a.time_complexity} vs {b.time_complexity}.")
    if rank_a > rank_b:
        return (f"{b.name} is generally faster than {a.name} with time complexity "
                f"{b.time_complexity} vs {a.time_complexity}.")
    return f"Both have similar time complexity: {a.time_complexity}."


def space_efficiency_comparison(a: AlgoInfo, b: AlgoInfo) -> str:
    rank_a = complexity_rank(a.space_complexity, SPACE_RANK)
    rank_b = complexity_rank(b.space_complexity, SPACE_RANK)

    if rank_a < rank_b:
        return (f"{a.name} uses less memory than {b.name} with space complexity "
                f"{a.space_complexity} vs {b.space_complexity}.")
    if rank_a > rank_b:
        return (f"{b.name} uses less memory than {a.name} with space complexity "
                f"{b.space_complexity} vs {a.space_complexity}.")
    return f"Both have similar space requirements: {a.space_complexity}."


def use_case_recommendation(a: AlgoInfo, b: AlgoInfo) -> str:
    return (f"{a.name} is best for {a.best_for.lower()}, "
            f"while {b.name} is best for {b.best_for.lower()}.")
