"""
selector.py - Top-N Word Selection

Ranks the counted words by frequency, keeps the N most frequent and puts
that subset back into alphabetical order for display.
"""

from collections import namedtuple

from tagcloud.errors import InvalidArgument


WordCount = namedtuple("WordCount", ["word", "count"])

Selection = namedtuple("Selection", ["entries", "effective_count"])


def by_word(entry):
    return entry.word


def by_count(entry):
    return entry.count


def sort_by(entries, key, descending=False):
    """
    Runtime Complexity: O(n log n)
    Stable sort, so entries comparing equal under key keep their
    relative order (also when descending).
    """
    return sorted(entries, key=key, reverse=descending)


def rank(mapping):
    """
    Order every entry by count, highest first.

    Entries with equal counts are ranked alphabetically, which makes the
    cut at the top-N boundary deterministic.
    """
    entries = [WordCount(word, count) for word, count in mapping.items()]
    return sort_by(sort_by(entries, by_word), by_count, descending=True)


def check_count(n):
    """Raise InvalidArgument unless n is a non-negative integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"requested count must be an integer, got {n!r}")
    if n < 0:
        raise InvalidArgument(f"requested count must not be negative, got {n}")


def select_top(mapping, n):
    """
    Pick the n most frequent words and sort them alphabetically.

    Args:
        mapping: word -> count mapping from the counter
        n: number of words requested, n >= 0

    Returns:
        Selection(entries, effective_count) where effective_count is
        min(n, len(mapping))

    Raises:
        InvalidArgument: if n is not a non-negative integer
    """
    check_count(n)
    selected = rank(mapping)[:n]
    return Selection(sort_by(selected, by_word), len(selected))
