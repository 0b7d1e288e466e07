"""
collector.py - Word Collector

Runs the tokenizer across every line of the input and keeps only the
word tokens, in encounter order with duplicates preserved.
"""

from wordcount.tokenizer import SEPARATORS, is_separator, next_word_or_separator


def collect_words(lines, separators=SEPARATORS):
    """
    Collect the words of a line source.

    Runtime Complexity: O(N) where N is the total number of characters.
    Each line is tokenized independently, so a word never spans two lines.

    Args:
        lines: Iterable of text lines (an open file works)
        separators: Set of separator characters

    Returns:
        List of words in the order they were found
    """
    words = []
    for line in lines:
        line = line.rstrip("\r\n")
        position = 0
        while position < len(line):
            token = next_word_or_separator(line, position, separators)
            position += len(token)
            if not is_separator(token[0], separators):
                words.append(token)
    return words
