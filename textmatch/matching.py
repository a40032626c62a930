#!/usr/bin/env python
"""
Code Point Matching

This module holds the comparison logic of textmatch: equality, containment and
prefix/suffix checks between a subject text and a pattern text. All comparisons
walk code points (see codepoints.py), so a supplementary character such as
U+1F600 is one comparison unit even when the string stores it as a surrogate pair.

Absence and emptiness are handled states, not errors:
  - An absent subject or an absent pattern never matches.
  - A present, empty pattern is contained in, and is a prefix and a suffix of,
    every present subject.

Flags:
  TM_CASEFOLD  - Compare code points after case folding each one on its own
                 (see casefold.py). (Default: exact comparison.)
"""

import logging
from collections import deque
from typing import Optional, Tuple, Union

from .casefold import fold_code_point, fold_equals
from .codepoints import (
    MAX_CODE_POINT,
    CodepointSequence,
    TextValue,
    count_code_points,
    decode_code_points,
)

# Flag constants that control matching behavior.
TM_CASEFOLD = 1             # When set, code points are compared after case folding.


def _pair_matches(left: int, right: int, flags: int) -> bool:
    if flags & TM_CASEFOLD:
        return fold_equals(left, right)
    return left == right


class CodepointEqualityEvaluator:
    """
    Compares two present code point sequences, exactly or ignoring case.

    Both operands must be present; absence is decided by the callers before an
    evaluator is built.
    """

    def __init__(self, left: CodepointSequence, right: CodepointSequence) -> None:
        self.left = left
        self.right = right

    def compare(self, flags: int = 0) -> bool:
        """
        Return True if both sequences hold the same code points.

        Parameters:
            flags (int): TM_CASEFOLD for a case-insensitive comparison.

        Returns:
            bool: True when the lengths agree and every pair of code points is
                  equal (or equal after folding when TM_CASEFOLD is set).
        """
        # The same range of the same text is equal to itself; skip the scan.
        if self.left.same_view(self.right):
            return True
        if len(self.left) != len(self.right):
            return False
        # zip() stops on the first pair all() rejects.
        return all(_pair_matches(a, b, flags) for a, b in zip(self.left, self.right))

    def equals(self) -> bool:
        return self.compare(0)

    def equals_ignore_case(self) -> bool:
        return self.compare(TM_CASEFOLD)


class CodepointMatcher:
    """
    Decides whether a pattern occurs anywhere inside a subject.

    The subject is read lazily through a sliding window as long as the pattern;
    the pattern is decoded (and folded when ignoring case) once up front.
    """

    def __init__(self, subject: TextValue, pattern: TextValue) -> None:
        self.subject = subject
        self.pattern = pattern

    def _prepared_pattern(self, flags: int) -> Tuple[int, ...]:
        points = self.pattern.code_points()
        if flags & TM_CASEFOLD:
            return tuple(fold_code_point(cp) for cp in points)
        return tuple(points)

    def contains(self, flags: int = 0) -> bool:
        """
        Return True if the pattern's code points occur consecutively in the subject.

        Parameters:
            flags (int): TM_CASEFOLD for a case-insensitive search.

        Returns:
            bool: False for an absent subject or pattern, True for an empty
                  pattern, otherwise whether some window of the subject matches.
        """
        if self.subject.is_absent or self.pattern.is_absent:
            logging.debug("Containment with an absent operand never matches")
            return False
        if self.pattern.is_empty:
            return True

        needle = self._prepared_pattern(flags)
        size = len(needle)
        subject = self.subject.code_points()
        if len(subject) < size:
            return False

        window = deque(maxlen=size)
        for cp in subject:
            window.append(fold_code_point(cp) if flags & TM_CASEFOLD else cp)
            # Compare only once the window is full; stop at the first full match.
            if len(window) == size and all(w == p for w, p in zip(window, needle)):
                return True
        return False

    def contains_search_sequence(self) -> bool:
        return self.contains(0)

    def contains_search_sequence_ignore_case(self) -> bool:
        return self.contains(TM_CASEFOLD)


def contains_code_point(subject: TextValue, code_point: Union[int, str]) -> bool:
    """
    Return True if the subject contains the given code point (exact match only).

    Parameters:
        subject (TextValue): the text to search.
        code_point (int | str): a code point, or a string holding exactly one
                                code point (a surrogate pair counts as one).

    Returns:
        bool: False for an absent subject or an out-of-range code point.

    Raises:
        ValueError: if a string that is not exactly one code point is given.
    """
    if isinstance(code_point, str):
        if count_code_points(code_point) != 1:
            raise ValueError(f"expected a single code point, got {code_point!r}")
        code_point = next(decode_code_points(code_point))
    if not 0 <= code_point <= MAX_CODE_POINT:
        logging.warning(f"Code point {code_point!r} is outside the Unicode range; no text contains it")
        return False
    if subject.is_absent:
        return False
    return any(cp == code_point for cp in subject.code_points())


def _affix_precheck(subject: TextValue, pattern: TextValue) -> Optional[bool]:
    # Shared absence/emptiness policy of starts_with and ends_with.
    # Returns the decided outcome, or None when the code points must be compared.
    if subject.is_absent or pattern.is_absent:
        logging.debug("Affix check with an absent operand never matches")
        return False
    if pattern.is_empty:
        return True
    return None


def starts_with(subject: TextValue, pattern: TextValue, flags: int = 0) -> bool:
    """
    Return True if the pattern is a prefix of the subject.

    The leading code points of the subject, as many as the pattern holds, are
    compared with the pattern by CodepointEqualityEvaluator.
    """
    decided = _affix_precheck(subject, pattern)
    if decided is not None:
        return decided
    text = subject.code_points()
    prefix = pattern.code_points()
    if len(text) < len(prefix):
        return False
    return CodepointEqualityEvaluator(text.head(len(prefix)), prefix).compare(flags)


def ends_with(subject: TextValue, pattern: TextValue, flags: int = 0) -> bool:
    """
    Return True if the pattern is a suffix of the subject.

    Mirrors starts_with() using the trailing code points of the subject.
    """
    decided = _affix_precheck(subject, pattern)
    if decided is not None:
        return decided
    text = subject.code_points()
    suffix = pattern.code_points()
    if len(text) < len(suffix):
        return False
    return CodepointEqualityEvaluator(text.tail(len(suffix)), suffix).compare(flags)
