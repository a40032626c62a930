"""
Core Module for textmatch

This module is the public API of the text matching engine. Every operation takes
its operands as plain strings (None meaning "no text") or as TextValue objects,
and answers with a bool. No operation raises for absent or empty operands; each
one applies its own absence policy:

1. Equality:
   - equals / equals_ignore_case: either operand absent -> False.

2. Containment and affixes:
   - contains / contains_ignore_case, starts_with / starts_with_ignore_case,
     ends_with / ends_with_ignore_case: absent subject -> False, absent
     pattern -> False, empty pattern -> True.
   - contains_code_point: absent subject -> False.

3. Character classes:
   - is_alphabetic / is_alphanumeric / is_numeric: absent -> False, empty -> False.
"""

from typing import Union

from .charclass import CHARACTER_CLASSES, is_character_match
from .codepoints import TextLike, to_text_value
from . import matching
from .matching import TM_CASEFOLD, CodepointEqualityEvaluator, CodepointMatcher


def _flags(ignore_case: bool) -> int:
    return TM_CASEFOLD if ignore_case else 0

###############################################################################
# Equality
###############################################################################

def equals(subject: TextLike, pattern: TextLike, ignore_case: bool = False) -> bool:
    """
    Returns whether subject and pattern hold the same code points.

    Parameters:
        subject (TextLike): the text under test.
        pattern (TextLike): the text to compare against.
        ignore_case (bool): If True, code points are compared after case folding.

    Returns:
        bool: False when either operand is absent.
    """
    left = to_text_value(subject)
    right = to_text_value(pattern)
    if left.is_absent or right.is_absent:
        return False
    return CodepointEqualityEvaluator(left.code_points(), right.code_points()).compare(_flags(ignore_case))

def equals_ignore_case(subject: TextLike, pattern: TextLike) -> bool:
    return equals(subject, pattern, ignore_case=True)

###############################################################################
# Containment
###############################################################################

def contains(subject: TextLike, pattern: TextLike, ignore_case: bool = False) -> bool:
    """
    Returns whether pattern occurs somewhere in subject.

    An empty pattern is contained in every present subject; an absent subject or
    pattern never matches.
    """
    matcher = CodepointMatcher(to_text_value(subject), to_text_value(pattern))
    return matcher.contains(_flags(ignore_case))

def contains_ignore_case(subject: TextLike, pattern: TextLike) -> bool:
    return contains(subject, pattern, ignore_case=True)

def contains_code_point(subject: TextLike, code_point: Union[int, str]) -> bool:
    """Returns whether subject contains code_point (an int or a one-character str)."""
    return matching.contains_code_point(to_text_value(subject), code_point)

###############################################################################
# Prefix and suffix
###############################################################################

def starts_with(subject: TextLike, pattern: TextLike, ignore_case: bool = False) -> bool:
    """Returns whether pattern is a prefix of subject (same absence policy as contains)."""
    return matching.starts_with(to_text_value(subject), to_text_value(pattern), _flags(ignore_case))

def starts_with_ignore_case(subject: TextLike, pattern: TextLike) -> bool:
    return starts_with(subject, pattern, ignore_case=True)

def ends_with(subject: TextLike, pattern: TextLike, ignore_case: bool = False) -> bool:
    """Returns whether pattern is a suffix of subject (same absence policy as contains)."""
    return matching.ends_with(to_text_value(subject), to_text_value(pattern), _flags(ignore_case))

def ends_with_ignore_case(subject: TextLike, pattern: TextLike) -> bool:
    return ends_with(subject, pattern, ignore_case=True)

###############################################################################
# Character classes
###############################################################################

def is_alphabetic(subject: TextLike) -> bool:
    """Returns whether subject is non-empty and made only of letters."""
    return is_character_match(to_text_value(subject), CHARACTER_CLASSES['alpha'])

def is_alphanumeric(subject: TextLike) -> bool:
    """Returns whether subject is non-empty and made only of letters and decimal digits."""
    return is_character_match(to_text_value(subject), CHARACTER_CLASSES['alnum'])

def is_numeric(subject: TextLike) -> bool:
    """
    Returns whether subject is non-empty and made only of decimal digits.

    This is a strict all-digits test: '+1', '1.5', '1,000' and ' 1' are not numeric.
    """
    return is_character_match(to_text_value(subject), CHARACTER_CLASSES['digit'])
