# textmatch/codepoints.py
"""
Code point views over text for the textmatch engine.

Python strings normally hold one code point per item, but text that came from a
UTF-16 source (JSON escapes, 'surrogatepass' decoding, interop with Java or
JavaScript) can carry a supplementary character as a high/low surrogate pair.
Everything in textmatch compares code points, so a pair must be read back as
the single character it encodes and never as two comparison units.

Key pieces:
    - decode_code_points: generator joining surrogate pairs into code points.
    - count_code_points: code point length of a string.
    - CodepointSequence: a lazy, restartable view over a range of code points.
    - TextValue: a text value that is either absent or present (maybe empty).
"""

import re
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Optional, Union

# Surrogate ranges used by UTF-16 to encode characters above U+FFFF.
HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF
SUPPLEMENTARY_MIN = 0x10000
MAX_CODE_POINT = 0x10FFFF

# A high surrogate directly followed by a low surrogate.
SURROGATE_PAIR = re.compile('[\ud800-\udbff][\udc00-\udfff]')


def decode_code_points(text: str) -> Iterator[int]:
    """
    Yield the code points of text in logical order.

    A high surrogate immediately followed by a low surrogate is combined into one
    supplementary code point. Unpaired surrogates are yielded unchanged, one code
    point each.
    """
    i = 0
    n = len(text)
    while i < n:
        cp = ord(text[i])
        if HIGH_SURROGATE_MIN <= cp <= HIGH_SURROGATE_MAX and i + 1 < n:
            low = ord(text[i + 1])
            if LOW_SURROGATE_MIN <= low <= LOW_SURROGATE_MAX:
                yield SUPPLEMENTARY_MIN + ((cp - HIGH_SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN)
                i += 2
                continue
        yield cp
        i += 1


def count_code_points(text: str) -> int:
    """Return how many code points decode_code_points(text) yields."""
    # Text without a single surrogate is the common case; len() is exact there.
    return len(text) - len(SURROGATE_PAIR.findall(text))


class CodepointSequence:
    """
    A lazy view over the code points [start, stop) of a string.

    The view never copies the text. Iterating it decodes the code points afresh,
    so it can be iterated any number of times and always yields the same values.
    Offsets are measured in code points, not in string items.
    """

    def __init__(self, text: str, start: int = 0, stop: Optional[int] = None) -> None:
        self.text = text
        total = count_code_points(text)
        # Clamp the bounds into the decoded range, like slicing does.
        self.stop = total if stop is None else max(0, min(stop, total))
        self.start = max(0, min(start, self.stop))

    def __iter__(self) -> Iterator[int]:
        return islice(decode_code_points(self.text), self.start, self.stop)

    def __len__(self) -> int:
        return self.stop - self.start

    def __repr__(self) -> str:
        return f"CodepointSequence({self.text!r}, start={self.start}, stop={self.stop})"

    def same_view(self, other: "CodepointSequence") -> bool:
        """True when both views cover the same range of the same text value."""
        return self is other or (
            self.start == other.start and self.stop == other.stop and self.text == other.text
        )

    @classmethod
    def _view(cls, text: str, start: int, stop: int) -> "CodepointSequence":
        # Sub-views reuse bounds that are already clamped; no recount of the text.
        view = cls.__new__(cls)
        view.text = text
        view.start = start
        view.stop = stop
        return view

    def head(self, count: int) -> "CodepointSequence":
        """Return the view of the first count code points (or all, if fewer)."""
        return self._view(self.text, self.start, min(self.stop, self.start + max(0, count)))

    def tail(self, count: int) -> "CodepointSequence":
        """Return the view of the last count code points (or all, if fewer)."""
        return self._view(self.text, max(self.start, self.stop - max(0, count)), self.stop)


@dataclass(frozen=True)
class TextValue:
    """
    A text operand: either absent or present.

    Absence (text is None) and emptiness (text == "") are distinct states and the
    matching operations give them different results, so the two must never be
    folded together. Use ABSENT for the absent value.
    """

    text: Optional[str] = None

    @property
    def is_absent(self) -> bool:
        return self.text is None

    @property
    def is_present(self) -> bool:
        return self.text is not None

    @property
    def is_empty(self) -> bool:
        """True only for a present value with no code points."""
        return self.text == ""

    def code_points(self) -> CodepointSequence:
        """
        Return the code point sequence of a present value.

        Raises:
            ValueError: if the value is absent. Callers branch on absence first.
        """
        if self.text is None:
            raise ValueError("an absent text value has no code points")
        return CodepointSequence(self.text)


ABSENT = TextValue(None)

TextLike = Union[TextValue, str, None]


def to_text_value(value: TextLike) -> TextValue:
    """
    Coerce an operand into a TextValue.

    Parameters:
        value: a TextValue, a str (present) or None (absent).

    Returns:
        TextValue: the tagged value.

    Raises:
        TypeError: for any other type.
    """
    if isinstance(value, TextValue):
        return value
    if value is None:
        return ABSENT
    if isinstance(value, str):
        return TextValue(value)
    raise TypeError(f"expected str, None or TextValue, got {type(value).__name__}")
