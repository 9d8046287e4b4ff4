"""
counter.py - Word Frequency Counter

Reads the input file and folds its words into an occurrence count per
lowercased word.
"""

from collections import Counter
from types import MappingProxyType

from tagcloud.errors import InputUnavailable
from tagcloud.tokenizer import words_in_line


def read_lines(path, encoding="utf-8"):
    """
    Read the whole input file into a list of lines.

    Line endings are kept since they are separator characters. The file
    is read completely before anything is counted, so a read failure
    never leaves a partial mapping behind.

    Raises:
        InputUnavailable: if the file cannot be opened, read or decoded
    """
    try:
        with open(path, "r", encoding=encoding) as file:
            return file.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailable(path, e) from e


def iter_words(lines, separators):
    """
    Runtime Complexity: O(N) where N is the total number of characters.
    Each line is lowercased before tokenizing, so "The" and "the" merge.
    """
    for line in lines:
        yield from words_in_line(line.lower(), separators)


def count_words(lines, separators):
    """
    Count every word in lines.

    Returns:
        A read-only mapping of word -> number of occurrences. Words only
        appear as keys if they occur at least once.
    """
    return MappingProxyType(dict(Counter(iter_words(lines, separators))))
