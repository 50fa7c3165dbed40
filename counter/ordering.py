"""
ordering.py - Alphabetical Ordering of Distinct Words

Words compare case-insensitively. Case variants of the same word are
ordered by code point, so "The" always precedes "the".
"""


def lexicographic_key(word):
    return (word.lower(), word)


def first_lexicographic(terms):
    """
    Runtime Complexity: O(n) where n is the number of terms.
    Removes the alphabetically smallest term from the set and returns it.
    """
    if not terms:
        raise ValueError("cannot take the first term of an empty set")
    smallest = min(terms, key=lexicographic_key)
    terms.remove(smallest)
    return smallest


def drain_alphabetically(terms):
    """
    Runtime Complexity: O(n^2)
    Empties the set, yielding its terms in ascending order.
    """
    while terms:
        yield first_lexicographic(terms)


def alphabetical_order(terms):
    """
    Runtime Complexity: O(nlogn)
    Returns a sorted list of the terms; the input is left untouched.
    """
    return sorted(terms, key=lexicographic_key)
