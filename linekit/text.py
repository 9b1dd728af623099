"""Unicode text segmentation: grapheme clusters and word boundaries.

All indices produced here are positions in the given ``str``, counted in
code points.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache

import regex

_GRAPHEME = regex.compile(r"\X")
_WHITESPACE = regex.compile(r"\p{White_Space}*")
_PICTOGRAPHIC = regex.compile(r"\p{Extended_Pictographic}")

_WORD_BREAK_CLASSES = (
    "CR",
    "LF",
    "Newline",
    "Extend",
    "ZWJ",
    "Regional_Indicator",
    "Format",
    "Katakana",
    "Hebrew_Letter",
    "ALetter",
    "Single_Quote",
    "Double_Quote",
    "MidNumLet",
    "MidLetter",
    "MidNum",
    "Numeric",
    "ExtendNumLet",
    "WSegSpace",
)
_WORD_BREAK_PATTERNS = tuple(
    (name, regex.compile(rf"\p{{Word_Break={name}}}")) for name in _WORD_BREAK_CLASSES
)

_IGNORABLE = frozenset({"Extend", "Format", "ZWJ"})
_NEWLINES = frozenset({"CR", "LF", "Newline"})
_AHLETTER = frozenset({"ALetter", "Hebrew_Letter"})
_MID_LETTER_Q = frozenset({"MidLetter", "MidNumLet", "Single_Quote"})
_MID_NUM_Q = frozenset({"MidNum", "MidNumLet", "Single_Quote"})
_WORDLIKE = _AHLETTER | {"Numeric", "Katakana"}


@lru_cache(maxsize=4096)
def _word_break_class(ch: str) -> str:
    for name, pattern in _WORD_BREAK_PATTERNS:
        if pattern.match(ch):
            return name
    return "Other"


def grapheme_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(index, grapheme)`` for every extended grapheme cluster."""
    for match in _GRAPHEME.finditer(text):
        yield match.start(), match.group()


def is_whitespace_str(text: str) -> bool:
    """Return True if every character of ``text`` is whitespace (True when empty)."""
    return _WHITESPACE.fullmatch(text) is not None


def _skip_back(classes: list[str], k: int) -> int | None:
    """Index of the effective character at or before ``k``, ignoring extenders."""
    if k < 0:
        return None
    if classes[k] not in _IGNORABLE:
        return k
    while k >= 0 and classes[k] in _IGNORABLE:
        k -= 1
    if k < 0 or classes[k] in _NEWLINES:
        return None
    return k


def _skip_forward(classes: list[str], k: int) -> int | None:
    """Index of the effective character at or after ``k``, ignoring extenders."""
    while k < len(classes) and classes[k] in _IGNORABLE:
        k += 1
    return k if k < len(classes) else None


def _class_at(classes: list[str], index: int | None) -> str | None:
    return None if index is None else classes[index]


def _is_break(text: str, classes: list[str], i: int) -> bool:
    prev, cur = classes[i - 1], classes[i]
    if prev == "CR" and cur == "LF":
        return False
    if prev in _NEWLINES or cur in _NEWLINES:
        return True
    if prev == "ZWJ" and _PICTOGRAPHIC.match(text[i]):
        return False
    if prev == "WSegSpace" and cur == "WSegSpace":
        return False
    if cur in _IGNORABLE:
        return False

    p = _skip_back(classes, i - 1)
    if p is None:
        return True
    a, b = classes[p], cur
    a2 = _class_at(classes, _skip_back(classes, p - 1))
    c = _class_at(classes, _skip_forward(classes, i + 1))

    if a in _AHLETTER and b in _AHLETTER:
        return False
    if a in _AHLETTER and b in _MID_LETTER_Q and c in _AHLETTER:
        return False
    if a in _MID_LETTER_Q and b in _AHLETTER and a2 in _AHLETTER:
        return False
    if a == "Hebrew_Letter" and b == "Single_Quote":
        return False
    if a == "Hebrew_Letter" and b == "Double_Quote" and c == "Hebrew_Letter":
        return False
    if a == "Double_Quote" and b == "Hebrew_Letter" and a2 == "Hebrew_Letter":
        return False
    if a == "Numeric" and b == "Numeric":
        return False
    if a in _AHLETTER and b == "Numeric":
        return False
    if a == "Numeric" and b in _AHLETTER:
        return False
    if a in _MID_NUM_Q and b == "Numeric" and a2 == "Numeric":
        return False
    if a == "Numeric" and b in _MID_NUM_Q and c == "Numeric":
        return False
    if a == "Katakana" and b == "Katakana":
        return False
    if (a in _WORDLIKE or a == "ExtendNumLet") and b == "ExtendNumLet":
        return False
    if a == "ExtendNumLet" and b in _WORDLIKE:
        return False
    if a == "Regional_Indicator" and b == "Regional_Indicator":
        count = 0
        k: int | None = p
        while k is not None and classes[k] == "Regional_Indicator":
            count += 1
            k = _skip_back(classes, k - 1)
        return count % 2 == 0
    return True


def word_bound_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(index, segment)`` for every segment between word boundaries.

    Segments cover the whole text: words, runs of spaces, line breaks and
    single punctuation marks each form their own segment.
    """
    if not text:
        return
    classes = [_word_break_class(ch) for ch in text]
    start = 0
    for i in range(1, len(text)):
        if _is_break(text, classes, i):
            yield start, text[start:i]
            start = i
    yield start, text[start:]