"""
tokenizer.py - Word / Separator Scanner

Splits lines of text into maximal runs of word characters and separator
characters. Before scanning, every character that is not an ASCII letter
is replaced with a space, so in practice words are runs of [a-zA-Z].
"""

import re

NON_LETTER = re.compile(r"[^a-zA-Z]")


def generate_elements(text):
    """
    Runtime Complexity: O(n)
    Returns the set of characters appearing in text.
    """
    elements = set()
    for char in text:
        elements.add(char)
    return elements


SEPARATORS = frozenset(generate_elements(" ,"))


def next_word_or_separator(text, position, separators):
    """
    Runtime Complexity: O(k)
    where k is the length of the returned token.

    Returns the maximal run starting at position whose characters all
    share the separator-membership of text[position]. The returned
    token is never empty and never extends past the end of text.
    """
    if not 0 <= position < len(text):
        raise ValueError(
            f"position {position} out of range for text of length {len(text)}")

    in_separators = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separators:
        end += 1
    return text[position:end]


def replace_non_letters(line):
    """Replace every character outside [a-zA-Z] with a space."""
    return NON_LETTER.sub(" ", line)


def tokenize_line(line, separators=SEPARATORS):
    """
    Runtime Complexity: O(n)
    where n is the length of the line.

    Yields the words of a line. Tokens whose first character is not a
    letter are separator runs and are skipped.
    """
    line = replace_non_letters(line)
    position = 0
    while position < len(line):
        token = next_word_or_separator(line, position, separators)
        if token[0].isalpha():
            yield token
        position += len(token)


def read_lines(file_path, encoding="utf-8"):
    """
    Yields the lines of a file without their line terminators.
    Undecodable bytes are replaced and end up as separators.
    """
    # File-level exceptions will propagate
    with open(file_path, "r", encoding=encoding, errors="replace") as file:
        for line in file:
            yield line.rstrip("\r\n")


def tokenize_generator(file_path, encoding="utf-8", separators=SEPARATORS):
    """
    Runtime Complexity: O(N)
    where N is the total number of characters in the input file.
    """
    for line in read_lines(file_path, encoding):
        yield from tokenize_line(line, separators)
