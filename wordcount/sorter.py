"""
sorter.py - Alphabetical Word Ordering

Case-insensitive order first, case-sensitive order to break ties, so
"Apple" lands before "apple" and the order is total.
"""


def alpha_order(word):
    """Sort key: (case-insensitive form, original word)."""
    # Compares by code point after str.lower(). Differs from Java's
    # CASE_INSENSITIVE_ORDER / UTF-16 compareTo for characters outside
    # the BMP (emoji sort after U+FFFF) and for letters like "İ" whose
    # lower() is more than one character.
    return (word.lower(), word)


def sort_words(words):
    """
    Sort a word list in place using alpha_order.

    Runtime Complexity: O(n log n) where n is the number of words.

    Args:
        words: List of words, reordered in place

    Returns:
        The same list, now sorted
    """
    words.sort(key=alpha_order)
    return words
