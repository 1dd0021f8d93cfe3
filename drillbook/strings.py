"""String utilities: parsing, searching and character counting."""

import string
from collections import Counter
from itertools import zip_longest

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def roman_to_int(s):
    """Convert a Roman numeral to an integer.

    A symbol smaller than the one after it is subtracted. Unknown characters
    count as zero.
    """
    total = 0
    for current, following in zip_longest(s, s[1:], fillvalue=""):
        value = _ROMAN_VALUES.get(current, 0)
        if value < _ROMAN_VALUES.get(following, 0):
            total -= value
        else:
            total += value
    return total


def find_substring(haystack, needle):
    """Return the index of the first occurrence of ``needle``, or -1.

    An empty needle is found at index 0.
    """
    return haystack.find(needle)


def is_anagram(s, t):
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def reverse_chars(chars):
    """Reverse a list of characters in place and return it."""
    chars.reverse()
    return chars


def first_unique_char(s):
    """Return the index of the first character occurring once, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)


def longest_palindrome_length(s):
    """Return the length of the longest palindrome buildable from ``s``."""
    length = 0
    odd_found = False
    for count in Counter(s).values():
        length += count - count % 2
        odd_found = odd_found or count % 2 == 1
    return length + 1 if odd_found else length


def find_anagrams(s, p):
    """Return the start indices of every window of ``s`` that is an anagram of ``p``."""
    width = len(p)
    if len(s) < width:
        return []
    target = Counter(p)
    window = Counter(s[:width])
    result = []
    for start in range(len(s) - width + 1):
        if window == target:
            result.append(start)
        if start + width < len(s):
            window[s[start + width]] += 1
            leaving = s[start]
            window[leaving] -= 1
            if window[leaving] == 0:
                del window[leaving]
    return result


def to_lower_case(s):
    """Lower-case the ASCII letters of ``s``, leaving other characters alone."""
    return s.translate(_ASCII_LOWER)


def is_rotation(s, goal):
    """Return True if ``goal`` is ``s`` rotated by some number of places."""
    return len(s) == len(goal) and goal in s + s


def merge_alternately(word1, word2):
    """Interleave the characters of two words, appending the longer tail."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))