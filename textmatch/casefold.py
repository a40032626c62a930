# textmatch/casefold.py
"""
Per code point case folding.

Case-insensitive comparisons in textmatch fold each code point on its own
instead of calling str.casefold() or str.lower() on a whole string. Whole-string
folding can change the length of a text ('ß' folds to 'ss', 'İ' lowers to two
code points), which would break the offset arithmetic of the prefix, suffix and
containment checks.
"""

from functools import lru_cache

from .codepoints import HIGH_SURROGATE_MIN, LOW_SURROGATE_MAX


def _single(folded: str) -> bool:
    return len(folded) == 1


@lru_cache(maxsize=4096)
def fold_code_point(cp: int) -> int:
    """
    Return the case-folded representative of a code point.

    Full Unicode case folding is used when it maps cp to exactly one code point.
    Otherwise the simple upper-then-lower mapping is tried, again only when each
    step stays a single code point. Anything else folds to itself, so the result
    is always a single code point and folding a folded value is a no-op.

    Parameters:
        cp (int): a code point in range 0..0x10FFFF.

    Returns:
        int: the folded code point.
    """
    # Lone surrogates have no case.
    if HIGH_SURROGATE_MIN <= cp <= LOW_SURROGATE_MAX:
        return cp
    ch = chr(cp)
    folded = ch.casefold()
    if _single(folded):
        return ord(folded)
    # Characters like U+1E9E fold to two code points; use the simple mapping.
    upper = ch.upper()
    if _single(upper):
        ch = upper
    lower = ch.lower()
    if _single(lower):
        return ord(lower.casefold()) if _single(lower.casefold()) else ord(lower)
    return ord(ch)


def fold_equals(left: int, right: int) -> bool:
    """True when two code points are equal after case folding."""
    return left == right or fold_code_point(left) == fold_code_point(right)
