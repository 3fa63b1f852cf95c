"""
Warden Public API
==================

Plain functions over the analysis pipeline for library callers. All are
pure except :func:`generate_strong_password`, which reads the OS CSPRNG.

Usage::

    from warden import analyze, compute_risk, estimate_crack_time

    result = analyze("correct horse battery staple")
    risk = compute_risk(result.entropy.effective_bits)
    eta = estimate_crack_time(result.entropy.effective_bits, 1e9)
"""

from __future__ import annotations

from typing import Optional

from warden.analyzers.crack_time import estimate_crack_time, format_crack_time, format_duration
from warden.analyzers.generator import generate_strong_password
from warden.analyzers.password_analyzer import PasswordAnalyzer
from warden.analyzers.risk import compute_risk
from warden.analyzers.suggestions import DEFAULT_MAX_SUGGESTIONS
from warden.corpus.loader import Corpus
from warden.core.models import PasswordAnalysis


def analyze(
    password: str,
    corpus: Optional[Corpus] = None,
    *,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> PasswordAnalysis:
    """Analyse *password* against *corpus* (bundled lists when ``None``).

    Never raises for any string input.
    """
    return PasswordAnalyzer(corpus, max_suggestions).analyze(password)


__all__ = [
    "analyze",
    "compute_risk",
    "estimate_crack_time",
    "format_crack_time",
    "format_duration",
    "generate_strong_password",
]
