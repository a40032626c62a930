#!/usr/bin/env python
"""
Character classes over whole texts.

A text belongs to a class when every one of its code points does. Membership of a
single code point is read from its Unicode general category via unicodedata:

  - alpha  : letters (Lu, Ll, Lt, Lm, Lo)
  - digit  : decimal digits (Nd), in any script
  - alnum  : either of the above

'digit' is deliberately narrow. Signs, decimal points, grouping separators,
whitespace, fractions (No) and letter-like numerals (Nl) are all rejected, so
is_digit() answers "all decimal digits", not "parses as a number".

An empty text belongs to no class.
"""

import unicodedata
from typing import Callable, Dict

from .codepoints import TextValue

LETTER_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo"})
DIGIT_CATEGORIES = frozenset({"Nd"})

CodePointPredicate = Callable[[int], bool]


def is_letter(cp: int) -> bool:
    """Return True if the code point is a letter."""
    return unicodedata.category(chr(cp)) in LETTER_CATEGORIES


def is_digit(cp: int) -> bool:
    """Return True if the code point is a decimal digit."""
    return unicodedata.category(chr(cp)) in DIGIT_CATEGORIES


def is_letter_or_digit(cp: int) -> bool:
    """Return True if the code point is a letter or a decimal digit."""
    category = unicodedata.category(chr(cp))
    return category in LETTER_CATEGORIES or category in DIGIT_CATEGORIES


# Named classes, in the spirit of POSIX bracket names.
CHARACTER_CLASSES: Dict[str, CodePointPredicate] = {
    'alpha': is_letter,
    'alnum': is_letter_or_digit,
    'digit': is_digit,
}


def is_character_match(value: TextValue, predicate: CodePointPredicate) -> bool:
    """
    Return True if value is present, non-empty, and every code point satisfies predicate.

    Parameters:
        value (TextValue): the text to classify.
        predicate (CodePointPredicate): test applied to each code point.

    Returns:
        bool: False for an absent or empty value.
    """
    if value.is_absent or value.is_empty:
        return False
    return all(predicate(cp) for cp in value.code_points())
