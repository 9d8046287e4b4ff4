"""
fonts.py - Font Size Mapping

Maps each selected word's count linearly onto [min_font, max_font]. The
scale is relative to the largest count among the selected words, so the
most frequent selected word always gets max_font.
"""

from collections import namedtuple

from tagcloud.errors import InvalidArgument


MIN_FONT = 11
MAX_FONT = 48

RankedEntry = namedtuple("RankedEntry", ["word", "count", "font_size"])


def max_count(entries):
    """Largest count in entries, 0 when there are none."""
    return max((entry.count for entry in entries), default=0)


def font_size(count, highest, min_font=MIN_FONT, max_font=MAX_FONT):
    """
    Truncating linear interpolation: count * (max - min) // highest + min.

    Raises:
        InvalidArgument: if count is not in [1, highest]
    """
    if not 1 <= count <= highest:
        raise InvalidArgument(f"count {count} must be between 1 and {highest}")
    return count * (max_font - min_font) // highest + min_font


def assign_font_sizes(entries, min_font=MIN_FONT, max_font=MAX_FONT):
    """
    Attach a font size to every selected entry, keeping their order.

    Args:
        entries: the selected (word, count) entries, not the whole mapping
        min_font: font size of the smallest possible count
        max_font: font size of the largest selected count

    Returns:
        list of RankedEntry, empty when entries is empty
    """
    if min_font > max_font:
        raise InvalidArgument(f"min font {min_font} is larger than max font {max_font}")

    highest = max_count(entries)
    return [
        RankedEntry(entry.word, entry.count,
                    font_size(entry.count, highest, min_font, max_font))
        for entry in entries
    ]
