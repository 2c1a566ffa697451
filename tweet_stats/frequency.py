"""
Frequency tables over any hashable unit (tokens or single characters).

Tables are collections.Counter instances. Rankings are lists of (key, count)
pairs sorted by descending count; equal counts keep first-seen order because
Counter preserves insertion order and the sort is stable.
"""

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import List, Tuple


def count(items: Iterable[Hashable]) -> Counter:
    """Tally occurrences of each item."""
    return Counter(items)


def rank(table: Counter) -> List[Tuple[Hashable, int]]:
    """
    Order a frequency table for consumption.

    Args:
        table: Mapping key -> count.
    Returns:
        (key, count) pairs, highest count first, ties in first-seen order.
        Entries with a non-positive count are dropped.
    """
    pairs = [(k, c) for k, c in table.items() if c > 0]
    pairs.sort(key=lambda kv: kv[1], reverse=True)
    return pairs


def top(table: Counter, n: int) -> List[Tuple[Hashable, int]]:
    """First n entries of rank(table); the whole ranking when n exceeds it."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return rank(table)[:n]
