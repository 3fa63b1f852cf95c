"""
Password Analyzer
==================

The full analysis pipeline for one password:

    Corpus -> PatternDetector -> EntropyModel -> Scorer -> Suggestions

Every stage is pure. The analyzer holds only its injected corpus and
the suggestion cap, so one instance can be shared freely.

Usage::

    analyzer = PasswordAnalyzer(default_corpus())
    result = analyzer.analyze("Tr0ub4dor&3")
    print(result.score, result.label.display)
"""

from __future__ import annotations

from typing import Optional

from warden.analyzers.entropy_model import (
    char_class,
    character_classes,
    entropy_breakdown,
    repetition_penalty,
    unique_ratio,
)
from warden.analyzers.patterns import PatternDetector, longest_run
from warden.analyzers.scorer import compute_score, strength_label
from warden.analyzers.suggestions import DEFAULT_MAX_SUGGESTIONS, generate_suggestions
from warden.corpus.loader import Corpus, default_corpus
from warden.corpus.wordset import replace_surrogates
from warden.core.models import DetailedMetrics, PasswordAnalysis, PatternKind


class PasswordAnalyzer:
    """Analyses password strength against an injected :class:`Corpus`.

    Args:
        corpus: Word lists for pattern detection; the bundled corpus
            when ``None``.
        max_suggestions: Upper bound on suggestions per analysis.
    """

    def __init__(
        self,
        corpus: Optional[Corpus] = None,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    ) -> None:
        self._corpus = corpus if corpus is not None else default_corpus()
        self._detector = PatternDetector(self._corpus)
        self._max_suggestions = max_suggestions

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    def analyze(self, password: str) -> PasswordAnalysis:
        """Perform the full strength analysis of *password*.

        Total over all strings; the empty string yields a zero analysis
        with a single prompt suggestion. Lone surrogates are replaced with
        U+FFFD first; both count as symbols so the scoring is unchanged.
        """
        password = replace_surrogates(password)
        classes = character_classes(password)
        findings = self._detector.detect(password)

        entropy = entropy_breakdown(
            length=len(password),
            charset_size=classes.charset_size,
            penalty_bits=sum(f.penalty_bits for f in findings),
            repetition_penalty_bits=repetition_penalty(password),
        )
        score = compute_score(
            entropy.effective_bits, len(password), classes.classes_used, findings
        )

        return PasswordAnalysis(
            password_masked=self.mask_password(password),
            length=len(password),
            classes=classes,
            entropy=entropy,
            score=score,
            label=strength_label(score),
            findings=findings,
            suggestions=generate_suggestions(
                password, classes, findings, self._max_suggestions
            ),
            metrics=self._metrics(password, findings),
        )

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def mask_password(password: str) -> str:
        """First and last character with asterisks in between.

        Passwords of two characters or fewer are fully masked.
        """
        if len(password) <= 2:
            return "*" * len(password)
        return password[0] + "*" * (len(password) - 2) + password[-1]

    @staticmethod
    def _metrics(password: str, findings: list) -> DetailedMetrics:
        counts = {"lower": 0, "upper": 0, "digit": 0, "symbol": 0}
        for ch in password:
            counts[char_class(ch)] += 1

        dictionary = next(
            (f for f in findings if f.kind is PatternKind.DICTIONARY_WORDS), None
        )
        run_length, _ = longest_run(password)

        return DetailedMetrics(
            unique_char_ratio=round(unique_ratio(password), 2),
            lower_count=counts["lower"],
            upper_count=counts["upper"],
            digit_count=counts["digit"],
            symbol_count=counts["symbol"],
            longest_run=run_length,
            dictionary_word_count=dictionary.count if dictionary else 0,
        )
