"""
Warden Mathematical Utilities
==============================

Numeric primitives shared by the entropy model, crack-time projector and
risk classifier. Everything that touches a logarithm or an exponential goes
through these helpers so that non-positive arguments and overflow never
leak NaN or Infinity into scores and labels.

All functions are pure and operate on plain Python floats.

References:
    [1] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
    [2] IEEE 754-2019. Standard for Floating-Point Arithmetic.
        (double range: exp(x) overflows for x > ~709.78)
"""

from __future__ import annotations

import math

# Natural log of two, used for log-domain conversions between bits and nats.
LN2: float = math.log(2.0)

# exp() argument bound; beyond this the double range is exhausted [2].
EXP_LIMIT: float = 700.0


# ===================================================================== #
#  Logarithms
# ===================================================================== #


def log2(value: float) -> float:
    """Base-2 logarithm computed as the natural-log ratio ``ln(n) / ln(2)``.

    Args:
        value: A strictly positive, finite number.

    Returns:
        ``log2(value)``, or ``0.0`` when *value* is non-positive or
        non-finite.
    """
    if not is_positive_finite(value):
        return 0.0
    return math.log(value) / LN2


# ===================================================================== #
#  Exponentials
# ===================================================================== #


def safe_exp(exponent: float) -> float:
    """Exponential clamped to the double range.

    Returns ``math.inf`` for ``exponent > EXP_LIMIT`` and ``0.0`` for
    ``exponent < -EXP_LIMIT`` rather than raising :class:`OverflowError`.
    """
    if exponent > EXP_LIMIT:
        return math.inf
    if exponent < -EXP_LIMIT:
        return 0.0
    return math.exp(exponent)


# ===================================================================== #
#  Clamping / rounding
# ===================================================================== #


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp *value* into the closed interval ``[lower, upper]``."""
    return max(lower, min(upper, value))


def clamp01(value: float) -> float:
    """Clamp a probability into ``[0, 1]``; NaN collapses to 0."""
    if math.isnan(value):
        return 0.0
    return clamp(value, 0.0, 1.0)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with ties going towards positive infinity.

    Python's :func:`round` uses banker's rounding (``round(2.5) == 2``);
    scores and duration buckets use the conventional half-up rule.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def is_positive_finite(value: float) -> bool:
    """``True`` for finite numbers strictly greater than zero."""
    return math.isfinite(value) and value > 0
