"""Shared fixtures: a small explicit corpus and an analyzer bound to it."""

from __future__ import annotations

import pytest

from warden.analyzers.password_analyzer import PasswordAnalyzer
from warden.corpus.loader import Corpus

COMMON = ["password", "123456", "qwerty", "letmein"]
WORDS = ["pass", "word", "password", "dragon", "summer", "sun"]

STRONG_PASSWORD = "Tr0ub4dor&3xyz9Q!"


@pytest.fixture
def corpus() -> Corpus:
    return Corpus.from_words(COMMON, WORDS)


@pytest.fixture
def analyzer(corpus: Corpus) -> PasswordAnalyzer:
    return PasswordAnalyzer(corpus)


@pytest.fixture
def strong_password() -> str:
    return STRONG_PASSWORD
