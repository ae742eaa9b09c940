"""
Polish collation for table text columns.

Letters are ordered by the Polish alphabet (a < ą < b < c < ć ... z < ź < ż),
not by code point. Keys are compared level by level like a UCA collator:
primary (base letters), secondary (non-Polish accents such as é), tertiary
(case, lowercase first).
"""
from __future__ import annotations

import unicodedata
from functools import lru_cache
from typing import Tuple

POLISH_ALPHABET = "aąbcćdeęfghijklłmnńoópqrsśtuvwxyzźż"

_RANK = {letter: idx for idx, letter in enumerate(POLISH_ALPHABET)}

# Primary groups: punctuation/whitespace < digits < letters < everything else.
_GROUP_PUNCT = 0
_GROUP_DIGIT = 1
_GROUP_LETTER = 2
_GROUP_OTHER = 3


def _char_weights(ch: str) -> Tuple[Tuple[int, int], Tuple[int, ...], int]:
    lowered = ch.lower()
    if len(lowered) != 1:
        lowered = ch
    tertiary = 1 if ch.isupper() else 0

    if lowered in _RANK:
        return (_GROUP_LETTER, _RANK[lowered]), (), tertiary

    decomposed = unicodedata.normalize("NFD", lowered)
    base, marks = decomposed[0], decomposed[1:]
    if base in _RANK:
        return (_GROUP_LETTER, _RANK[base]), tuple(ord(m) for m in marks), tertiary

    if ch.isdigit():
        return (_GROUP_DIGIT, unicodedata.digit(ch, 0)), (), 0
    if ch.isspace() or unicodedata.category(ch)[0] in ("P", "S"):
        return (_GROUP_PUNCT, ord(ch)), (), 0
    return (_GROUP_OTHER, ord(lowered)), (), tertiary


class PolishCollator:
    """Locale-aware string comparison following Polish alphabetical rules."""

    locale = "pl"

    @staticmethod
    @lru_cache(maxsize=4096)
    def sort_key(text: str) -> tuple:
        normalized = unicodedata.normalize("NFC", text)
        weights = [_char_weights(ch) for ch in normalized]
        primary = tuple(w[0] for w in weights)
        secondary = tuple(w[1] for w in weights)
        tertiary = tuple(w[2] for w in weights)
        return primary, secondary, tertiary, normalized

    def compare(self, a: str, b: str) -> int:
        ka, kb = self.sort_key(a), self.sort_key(b)
        return (ka > kb) - (ka < kb)


polish_collator = PolishCollator()
