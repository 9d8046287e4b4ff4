"""
tokenizer.py - Word / Separator Tokenizer

Splits a line of text into maximal runs of separator characters and
maximal runs of non-separator characters. Concatenating every token of
a line gives back the line exactly.

Key role: first stage of the pipeline, feeds the frequency counter
"""

from tagcloud.errors import InvalidArgument


DEFAULT_SEPARATORS = " \t\n\r,-.!?[]';:/()\"*`"


def separator_set(chars=DEFAULT_SEPARATORS):
    """
    Build the immutable set of separator characters.

    Built once at startup and passed explicitly to every function that
    needs it.
    """
    if not isinstance(chars, str):
        raise InvalidArgument(f"separators must be a string, got {type(chars).__name__}")
    return frozenset(chars)


def next_token(text, position, separators):
    """
    Return the word or separator string starting at text[position].

    Runtime Complexity: O(k) where k is the length of the returned token.
    The character at position decides the classification; the token is
    extended while following characters classify the same way.

    Raises:
        InvalidArgument: if position is not in [0, len(text))
    """
    if not 0 <= position < len(text):
        raise InvalidArgument(
            f"position {position} out of range for text of length {len(text)}")

    is_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == is_separator:
        end += 1
    return text[position:end]


def is_separator_token(token, separators):
    return token[0] in separators


def tokenize_line(text, separators):
    """
    Yield every token of text, words and separator runs alike.

    Runtime Complexity: O(n) where n is len(text).
    """
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield token
        position += len(token)


def words_in_line(text, separators):
    """Yield only the word tokens of text, in order."""
    for token in tokenize_line(text, separators):
        if not is_separator_token(token, separators):
            yield token
