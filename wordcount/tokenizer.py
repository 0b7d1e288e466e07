"""
tokenizer.py - Word / Separator Tokenizer

Splits a line of text into maximal runs of separator or non-separator
characters. Runs of separators are what the collector throws away; runs
of everything else are words.

Key role: Leaf of the pipeline, no state and no I/O
"""

# space, tab, newline, carriage return and the punctuation treated as gaps
SEPARATOR_CHARS = " \t\n\r,-.!?[]';:/()"


def generate_elements(chars):
    """
    Build the immutable set of characters contained in a string.

    Args:
        chars: String whose characters become the set members

    Returns:
        frozenset of the distinct characters in chars
    """
    return frozenset(chars)


SEPARATORS = generate_elements(SEPARATOR_CHARS)


def is_separator(char, separators=SEPARATORS):
    return char in separators


def next_word_or_separator(text, position, separators=SEPARATORS):
    """
    Return the word or separator run of text starting at position.

    Runtime Complexity: O(k) where k is the length of the returned token.
    Only the characters of the token plus the one boundary character
    after it are inspected.

    Args:
        text: Line to read from
        position: Start index, 0 <= position < len(text)
        separators: Set of separator characters

    Returns:
        Longest substring text[position:end] whose characters all share
        the class (separator or not) of text[position]

    Raises:
        ValueError: If position is outside the line
    """
    if not 0 <= position < len(text):
        raise ValueError(
            f"position {position} out of range for text of length {len(text)}")

    in_separator = is_separator(text[position], separators)
    end = position + 1
    while end < len(text) and is_separator(text[end], separators) == in_separator:
        end += 1
    return text[position:end]
