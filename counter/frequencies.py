"""
frequencies.py - Word Frequency Counter

Builds the word -> count table from lines of text, tracking the set of
distinct words alongside it.
"""

from counter.tokenizer import SEPARATORS, tokenize_line


def compute_word_frequencies(lines, words=None, separators=SEPARATORS):
    """
    Runtime Complexity: O(N) where N is the total number of characters.
    Each word is processed once, and dictionary/set operations are O(1).

    Args:
        lines: Iterable of text lines
        words: Optional set receiving every distinct word as it is first seen
        separators: Separator characters handed to the scanner

    Returns:
        dict mapping each case-sensitive word to its occurrence count
    """
    if words is None:
        words = set()

    frequencies = {}
    for line in lines:
        for word in tokenize_line(line, separators):
            if word in frequencies:
                frequencies[word] += 1
            else:
                frequencies[word] = 1
                words.add(word)
    return frequencies
