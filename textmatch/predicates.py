# textmatch/predicates.py
"""
Predicate builders over the matching engine.

Each builder binds an extractor (a callable pulling a text value out of some
object) together with a pattern, and returns a one-argument predicate that can
be handed to filter(), any(), all() or a sort key. The predicates add no
matching logic of their own: the extracted text goes straight to textmatch.core,
so a None coming out of the extractor is an absent text and gets the absence
policy of the operation.

Example:
    >>> names = ["Ann", "bob", None, "Anna"]
    >>> list(filter(starts_with_ignore_case(identity, "an"), names))
    ['Ann', 'Anna']

Exceptions raised by an extractor propagate to the caller unchanged.
"""

from typing import Any, Callable, Optional, TypeVar, Union

from . import core
from .codepoints import TextLike

T = TypeVar("T")

Extractor = Callable[[T], Optional[str]]
Predicate = Callable[[T], bool]


def identity(value: Any) -> Any:
    """The default extractor: the object is its own text."""
    return value


def _bind(extractor: Extractor, test: Callable[[Optional[str]], bool]) -> Predicate:
    def predicate(target):
        return test(extractor(target))
    return predicate


###############################################################################
# Equality
###############################################################################

def equals(constant: TextLike, extractor: Extractor = identity) -> Predicate:
    """Predicate: the extracted text equals constant."""
    return _bind(extractor, lambda text: core.equals(text, constant))


def equals_ignore_case(constant: TextLike, extractor: Extractor = identity) -> Predicate:
    """Predicate: the extracted text equals constant, ignoring case."""
    return _bind(extractor, lambda text: core.equals_ignore_case(text, constant))


###############################################################################
# Containment
###############################################################################

def contains_char(extractor: Extractor, code_point: Union[int, str]) -> Predicate:
    """Predicate: the extracted text contains code_point."""
    return _bind(extractor, lambda text: core.contains_code_point(text, code_point))


def contains_sequence(extractor: Extractor, pattern: TextLike) -> Predicate:
    """Predicate: the extracted text contains pattern."""
    return _bind(extractor, lambda text: core.contains(text, pattern))


def contains_ignore_case(extractor: Extractor, pattern: TextLike) -> Predicate:
    """Predicate: the extracted text contains pattern, ignoring case."""
    return _bind(extractor, lambda text: core.contains_ignore_case(text, pattern))


###############################################################################
# Prefix and suffix
###############################################################################

def starts_with(extractor: Extractor, prefix: TextLike) -> Predicate:
    return _bind(extractor, lambda text: core.starts_with(text, prefix))


def starts_with_ignore_case(extractor: Extractor, prefix: TextLike) -> Predicate:
    return _bind(extractor, lambda text: core.starts_with_ignore_case(text, prefix))


def ends_with(extractor: Extractor, suffix: TextLike) -> Predicate:
    return _bind(extractor, lambda text: core.ends_with(text, suffix))


def ends_with_ignore_case(extractor: Extractor, suffix: TextLike) -> Predicate:
    return _bind(extractor, lambda text: core.ends_with_ignore_case(text, suffix))


###############################################################################
# Character classes
###############################################################################

def is_alpha(extractor: Extractor = identity) -> Predicate:
    return _bind(extractor, core.is_alphabetic)


def is_alphanumeric(extractor: Extractor = identity) -> Predicate:
    return _bind(extractor, core.is_alphanumeric)


def is_numeric(extractor: Extractor = identity) -> Predicate:
    return _bind(extractor, core.is_numeric)
