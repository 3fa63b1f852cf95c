"""
Entropy Model
==============

Baseline (brute-force) entropy of a password and its effective entropy
after penalties.

Baseline entropy assumes every position is drawn uniformly from the union
of the character classes the password uses:

    H = L * log2(N)

where L is the length and N the charset size (26 lower, 26 upper,
10 digits, 33 symbols). Effective entropy subtracts pattern penalties and
a repetition penalty derived from the share of distinct characters, and is
floored at zero. Values are never rounded here; rounding belongs to the
presentation layer.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - NIST SP 800-63-2 (2013), Appendix A. Estimating Password Entropy.
"""

from __future__ import annotations

import math
import string

from shared.math_utils import is_positive_finite, log2
from warden.core.models import CharacterClassSet, EntropyBreakdown

CHARSET_SIZES: dict[str, int] = {
    "lower": 26,
    "upper": 26,
    "digit": 10,
    # Commonly typeable ASCII punctuation and symbols
    "symbol": 33,
}

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)


def char_class(ch: str) -> str:
    """Class name of a single character; anything non-alphanumeric is a symbol."""
    if ch in _LOWER:
        return "lower"
    if ch in _UPPER:
        return "upper"
    if ch in _DIGITS:
        return "digit"
    return "symbol"


def character_classes(password: str) -> CharacterClassSet:
    """Detect the character classes present in *password*."""
    present = {char_class(ch) for ch in password}
    return CharacterClassSet(
        has_lower="lower" in present,
        has_upper="upper" in present,
        has_digit="digit" in present,
        has_symbol="symbol" in present,
        charset_size=sum(CHARSET_SIZES[name] for name in present),
    )


def baseline_entropy_bits(length: float, charset_size: float) -> float:
    """Brute-force entropy ``length * log2(charset_size)``.

    Returns 0 when either input is non-positive or non-finite.
    """
    if not is_positive_finite(length) or not is_positive_finite(charset_size):
        return 0.0
    return length * log2(charset_size)


def effective_entropy(
    baseline_bits: float,
    penalty_bits: float,
    repetition_penalty_bits: float = 0.0,
) -> float:
    """Baseline minus penalties, floored at zero. No upper clamp."""
    if math.isnan(baseline_bits) or baseline_bits <= 0:
        return 0.0
    total = _non_negative(penalty_bits) + _non_negative(repetition_penalty_bits)
    return max(0.0, baseline_bits - total)


def repetition_penalty(password: str) -> float:
    """Penalty for a low share of distinct characters.

    ``ratio = distinct / length``; below 0.5 costs ``(0.5 - ratio) * 30``
    bits, below 0.7 costs ``(0.7 - ratio) * 15`` bits.
    """
    ratio = unique_ratio(password)
    if ratio < 0.5:
        return (0.5 - ratio) * 30
    if ratio < 0.7:
        return (0.7 - ratio) * 15
    return 0.0


def unique_ratio(password: str) -> float:
    """Distinct characters over length; 1.0 for the empty string."""
    if not password:
        return 1.0
    return len(set(password)) / len(password)


def entropy_breakdown(
    length: int,
    charset_size: int,
    penalty_bits: float,
    repetition_penalty_bits: float,
) -> EntropyBreakdown:
    """Assemble an :class:`EntropyBreakdown` from its inputs."""
    baseline = baseline_entropy_bits(length, charset_size)
    penalty = _non_negative(penalty_bits)
    repetition = _non_negative(repetition_penalty_bits)
    return EntropyBreakdown(
        baseline_bits=baseline,
        penalty_bits=penalty,
        repetition_penalty_bits=repetition,
        effective_bits=effective_entropy(baseline, penalty, repetition),
    )


def _non_negative(value: float) -> float:
    if math.isnan(value) or value < 0:
        return 0.0
    return value
