"""
Pattern Detector
=================

Scans a password for structural weaknesses and reports each one as a
:class:`PatternFinding` with an entropy penalty. Checks are independent;
any subset may fire and penalties are summed by the caller.

Detection order (also the display order):

1. Common password    -- exact, case-insensitive corpus membership (50 bits)
2. Dictionary words   -- substring occurrences of corpus words
                         (30 bits per word, at most 4 words)
3. Sequential run     -- 4-character run of 0-9 or a-z, either direction (12)
4. Keyboard pattern   -- keyboard walks and six-fold digit repeats (10)
5. Year pattern       -- 1900-1999 or 2000-2029 (8)
6. Repeated chars     -- identical run of 3+ (12 + (run - 2) * 4)
7. Leet substitution  -- common substitution digrams (6)

References:
    - Weir, M., Aggarwal, S., Collins, M., & Stern, H. (2010). Testing
      Metrics for Password Creation Policies by Attacking Large Sets of
      Revealed Passwords. ACM CCS.
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

from __future__ import annotations

import re
import string

from warden.corpus.loader import Corpus
from warden.core.models import PatternFinding, PatternKind


# ===================================================================== #
#  Pattern Catalogs
# ===================================================================== #

COMMON_PASSWORD_PENALTY = 50.0
DICTIONARY_WORD_PENALTY = 30.0
DICTIONARY_WORD_CAP = 4
SEQUENTIAL_PENALTY = 12.0
KEYBOARD_PENALTY = 10.0
YEAR_PENALTY = 8.0
LEET_PENALTY = 6.0

SEQUENCE_BASES: tuple[str, ...] = (string.digits, string.ascii_lowercase)
SEQUENCE_WINDOW = 4

KEYBOARD_PATTERNS: tuple[str, ...] = (
    "qwerty", "asdfgh", "zxcvbn", "qazwsx", "qweasd",
    "123456", "654321",
    "111111", "222222", "333333", "444444", "555555",
    "666666", "777777", "888888", "999999",
)

LEET_DIGRAMS: tuple[str, ...] = (
    "a0", "@0", "a@", "1!", "l1", "o0", "s5", "e3", "b8", "g9", "t7",
)

_YEAR_RE = re.compile(r"19\d{2}|20[0-2]\d")


def _sequence_windows() -> frozenset[str]:
    windows: set[str] = set()
    for base in SEQUENCE_BASES:
        for i in range(len(base) - SEQUENCE_WINDOW + 1):
            forward = base[i : i + SEQUENCE_WINDOW]
            windows.add(forward)
            windows.add(forward[::-1])
    return frozenset(windows)


_SEQUENCE_WINDOWS = _sequence_windows()


def longest_run(password: str) -> tuple[int, str]:
    """Length and character of the first longest identical-character run.

    Returns ``(0, "")`` for the empty string.
    """
    best_len, best_char = 0, ""
    run_len, run_char = 0, ""
    for ch in password:
        if ch == run_char:
            run_len += 1
        else:
            run_char, run_len = ch, 1
        if run_len > best_len:
            best_len, best_char = run_len, run_char
    return best_len, best_char


def repeated_chars_penalty(run_length: int) -> float:
    return 12.0 + (run_length - 2) * 4.0


class PatternDetector:
    """Detects weakening patterns using an injected :class:`Corpus`.

    Usage::

        detector = PatternDetector(corpus)
        for finding in detector.detect("Summer2024!"):
            print(finding.label, finding.penalty_bits)
    """

    def __init__(self, corpus: Corpus) -> None:
        self._corpus = corpus

    def detect(self, password: str) -> list[PatternFinding]:
        """Return every finding for *password* in detection order."""
        if not password:
            return []

        pw_lower = password.lower()
        findings: list[PatternFinding] = []

        if self._corpus.is_common_password(pw_lower):
            findings.append(PatternFinding(
                kind=PatternKind.COMMON_PASSWORD,
                penalty_bits=COMMON_PASSWORD_PENALTY,
                label="Common password",
                warning=(
                    "This password appears in breached-password lists. "
                    "It will be cracked in seconds."
                ),
            ))

        word_count = self._corpus.count_dictionary_words(pw_lower)
        if word_count > 0:
            findings.append(PatternFinding(
                kind=PatternKind.DICTIONARY_WORDS,
                penalty_bits=DICTIONARY_WORD_PENALTY * min(word_count, DICTIONARY_WORD_CAP),
                label=f"Dictionary words ({word_count})",
                warning=(
                    f"Contains {word_count} common word(s). "
                    f"Dictionary attacks will succeed quickly."
                ),
                count=word_count,
            ))

        if self.has_sequential_run(pw_lower):
            findings.append(PatternFinding(
                kind=PatternKind.SEQUENTIAL_RUN,
                penalty_bits=SEQUENTIAL_PENALTY,
                label="Sequential pattern",
                warning=(
                    "Sequential digits or letters (like 1234 or abcd) are "
                    "predictable and easy to guess."
                ),
            ))

        if self.has_keyboard_pattern(pw_lower):
            findings.append(PatternFinding(
                kind=PatternKind.KEYBOARD_PATTERN,
                penalty_bits=KEYBOARD_PENALTY,
                label="Keyboard pattern",
                warning="Common keyboard patterns (qwerty, asdf) are in most attack dictionaries.",
            ))

        if self.has_year_pattern(password):
            findings.append(PatternFinding(
                kind=PatternKind.YEAR_PATTERN,
                penalty_bits=YEAR_PENALTY,
                label="Year pattern",
                warning="Birth years and recent years (1900-2029) are frequently guessed.",
            ))

        run_length, run_char = longest_run(password)
        if run_length >= 3:
            findings.append(PatternFinding(
                kind=PatternKind.REPEATED_CHARS,
                penalty_bits=repeated_chars_penalty(run_length),
                label=f"Repeated characters ({run_length}+ in a row)",
                warning=(
                    f"Long runs of identical characters ({run_char * run_length}) "
                    f"reduce effective complexity."
                ),
                run_length=run_length,
            ))

        if self.has_leet_substitution(pw_lower):
            findings.append(PatternFinding(
                kind=PatternKind.LEET_SUBSTITUTION,
                penalty_bits=LEET_PENALTY,
                label="Simple leet substitution",
                warning="Basic substitutions like a->@ or l->1 are in all modern crack dictionaries.",
            ))

        return findings

    # ------------------------------------------------------------------ #
    #  Individual checks
    # ------------------------------------------------------------------ #

    @staticmethod
    def has_sequential_run(pw_lower: str) -> bool:
        """Any forward or reverse 4-character window of 0-9 or a-z."""
        return any(
            pw_lower[i : i + SEQUENCE_WINDOW] in _SEQUENCE_WINDOWS
            for i in range(len(pw_lower) - SEQUENCE_WINDOW + 1)
        )

    @staticmethod
    def has_keyboard_pattern(pw_lower: str) -> bool:
        return any(pattern in pw_lower for pattern in KEYBOARD_PATTERNS)

    @staticmethod
    def has_year_pattern(password: str) -> bool:
        return _YEAR_RE.search(password) is not None

    @staticmethod
    def has_leet_substitution(pw_lower: str) -> bool:
        return any(digram in pw_lower for digram in LEET_DIGRAMS)
