"""
Corpus Loading
===============

The :class:`Corpus` bundles the two read-only word sets the pattern
detector consults: breached passwords (exact membership) and dictionary
words (substring occurrences). It is built once and injected into the
analyzer; nothing in the pipeline mutates it.

Word-list files hold one entry per line. Blank lines and lines starting
with ``#`` are skipped; entries are lowercased.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, Optional

from warden.corpus.wordset import WordSet

_DATA_PACKAGE = "warden.corpus.data"
COMMON_PASSWORDS_FILE = "common_passwords.txt"
DICTIONARY_WORDS_FILE = "dictionary_words.txt"


class Corpus:
    """Common-password and dictionary-word sets used by the detector.

    Attributes:
        common_passwords: Breached passwords, matched exactly.
        dictionary_words: Dictionary words, matched as substrings.
    """

    __slots__ = ("common_passwords", "dictionary_words")

    def __init__(self, common_passwords: WordSet, dictionary_words: WordSet) -> None:
        self.common_passwords = common_passwords
        self.dictionary_words = dictionary_words

    @classmethod
    def from_words(
        cls,
        common_passwords: Iterable[str],
        dictionary_words: Iterable[str],
    ) -> Corpus:
        """Build a corpus from in-memory word iterables."""
        return cls(WordSet(common_passwords), WordSet(dictionary_words))

    @classmethod
    def empty(cls) -> Corpus:
        return cls.from_words((), ())

    def is_common_password(self, password_lower: str) -> bool:
        return self.common_passwords.contains(password_lower)

    def count_dictionary_words(self, password_lower: str) -> int:
        return self.dictionary_words.count_occurrences(password_lower)

    def __repr__(self) -> str:
        return (
            f"Corpus(common_passwords={len(self.common_passwords)}, "
            f"dictionary_words={len(self.dictionary_words)})"
        )


# ===================================================================== #
#  File readers
# ===================================================================== #


def _iter_entries(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        entry = line.strip()
        if entry and not entry.startswith("#"):
            yield entry.lower()


def read_word_file(path: str | Path) -> list[str]:
    """Read a word list from *path*.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Word list not found: {file_path}")
    with open(file_path, "r", encoding="utf-8", errors="ignore") as fh:
        return list(_iter_entries(fh))


def read_bundled_words(name: str) -> list[str]:
    """Read one of the word lists shipped in ``warden/corpus/data``."""
    text = resources.files(_DATA_PACKAGE).joinpath(name).read_text(encoding="utf-8")
    return list(_iter_entries(text.splitlines()))


def load_corpus(
    common_passwords_path: Optional[str | Path] = None,
    dictionary_words_path: Optional[str | Path] = None,
) -> Corpus:
    """Load a corpus; empty or ``None`` paths select the bundled lists.

    Raises:
        FileNotFoundError: If an explicitly given path does not exist.
    """
    common = (
        read_word_file(common_passwords_path)
        if common_passwords_path
        else read_bundled_words(COMMON_PASSWORDS_FILE)
    )
    words = (
        read_word_file(dictionary_words_path)
        if dictionary_words_path
        else read_bundled_words(DICTIONARY_WORDS_FILE)
    )
    return Corpus.from_words(common, words)


@lru_cache(maxsize=1)
def default_corpus() -> Corpus:
    """The bundled corpus, built once per process."""
    return load_corpus()
