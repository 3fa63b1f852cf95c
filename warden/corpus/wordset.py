"""
Indexed Word Sets
==================

A :class:`WordSet` is an immutable collection of lowercase strings that
answers two questions about a lowercased password:

* ``contains`` -- exact membership, a ``frozenset`` lookup;
* ``count_occurrences`` -- how many (position, word) substring matches
  the password holds, overlapping matches counted independently.

Substring queries use a MARISA trie built once at construction. From each
offset of the password the trie enumerates every stored word that is a
prefix of the remaining suffix, so a query costs
O(len(password) * longest word) regardless of corpus size.

References:
    - Yata, S. (2011). MARISA: Matching Algorithm with Recursively
      Implemented StorAge. https://github.com/s-yata/marisa-trie
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

import marisa_trie

REPLACEMENT_CHAR = "\ufffd"

_SURROGATES = re.compile("[\ud800-\udfff]")


def replace_surrogates(text: str) -> str:
    """Swap lone surrogate code points for U+FFFD, one for one.

    Surrogate-escaped bytes (e.g. undecodable ``argv``) cannot be UTF-8
    encoded, which the trie requires. Offsets and length are unchanged.
    """
    return _SURROGATES.sub(REPLACEMENT_CHAR, text)


class WordSet:
    """Immutable, trie-indexed set of lowercase words.

    Usage::

        words = WordSet(["pass", "word", "password"])
        words.contains("password")          # True
        words.count_occurrences("password") # 3 (pass, password, word)
    """

    __slots__ = ("_words", "_trie", "_longest")

    def __init__(self, words: Iterable[str]) -> None:
        cleaned = {w.strip().lower() for w in words}
        cleaned.discard("")
        self._words: frozenset[str] = frozenset(cleaned)
        self._trie = marisa_trie.Trie(sorted(self._words))
        self._longest = max((len(w) for w in self._words), default=0)

    # ------------------------------------------------------------------ #
    #  Queries
    # ------------------------------------------------------------------ #

    def contains(self, text: str) -> bool:
        """Exact membership of an already-lowercased string."""
        return text in self._words

    def count_occurrences(self, text: str) -> int:
        """Number of (offset, word) substring matches in *text*."""
        return sum(1 for _ in self.iter_matches(text))

    def iter_matches(self, text: str) -> Iterator[tuple[int, str]]:
        """Yield ``(offset, word)`` for every stored word found in *text*.

        Matches are produced by ascending offset, shorter words first.
        """
        if not text or not self._words:
            return
        text = replace_surrogates(text)
        for offset in range(len(text)):
            window = text[offset : offset + self._longest]
            for word in sorted(self._trie.prefixes(window), key=len):
                yield offset, word

    # ------------------------------------------------------------------ #
    #  Container protocol
    # ------------------------------------------------------------------ #

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and text in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"WordSet(size={len(self._words)}, longest={self._longest})"
