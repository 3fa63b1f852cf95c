"""
Strength Scorer
================

Maps effective entropy, length, character variety and the detected
patterns to a bounded 0-100 score and a qualitative label.

Score composition:

    entropy  = clamp(effective_bits / 100 * 75, 0, 75)
    length   = min(15, length / 12 * 12 + max(0, (length - 20) * 0.5))
    variety  = classes_used / 4 * 10

Deductions:

    common password                      -45
    more than two dictionary words       -20
    sequential run                        -8
    identical run of five or more         -10

The sum is rounded half-up and clamped to [0, 100].
"""

from __future__ import annotations

from typing import Sequence

from shared.math_utils import clamp, round_half_up
from warden.core.models import PatternFinding, PatternKind, StrengthLabel

ENTROPY_WEIGHT = 75.0
LENGTH_CAP = 15.0
VARIETY_WEIGHT = 10.0

# (threshold, label), checked top-down, inclusive.
LABEL_THRESHOLDS: tuple[tuple[int, StrengthLabel], ...] = (
    (80, StrengthLabel.VERY_STRONG),
    (60, StrengthLabel.STRONG),
    (40, StrengthLabel.FAIR),
    (20, StrengthLabel.WEAK),
)


def entropy_score(effective_bits: float) -> float:
    return clamp(effective_bits / 100.0 * ENTROPY_WEIGHT, 0.0, ENTROPY_WEIGHT)


def length_score(length: int) -> float:
    return min(LENGTH_CAP, length / 12 * 12 + max(0.0, (length - 20) * 0.5))


def variety_score(classes_used: int) -> float:
    return classes_used / 4 * VARIETY_WEIGHT


def pattern_deductions(findings: Sequence[PatternFinding]) -> float:
    """Total score deduction for the detected patterns."""
    deduction = 0.0
    for finding in findings:
        if finding.kind is PatternKind.COMMON_PASSWORD:
            deduction += 45
        elif finding.kind is PatternKind.DICTIONARY_WORDS and finding.count > 2:
            deduction += 20
        elif finding.kind is PatternKind.SEQUENTIAL_RUN:
            deduction += 8
        elif finding.kind is PatternKind.REPEATED_CHARS and finding.run_length >= 5:
            deduction += 10
    return deduction


def compute_score(
    effective_bits: float,
    length: int,
    classes_used: int,
    findings: Sequence[PatternFinding],
) -> int:
    """Integer strength score in [0, 100]."""
    raw = (
        entropy_score(effective_bits)
        + length_score(length)
        + variety_score(classes_used)
        - pattern_deductions(findings)
    )
    return int(clamp(round_half_up(raw), 0, 100))


def strength_label(score: int) -> StrengthLabel:
    for threshold, label in LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return StrengthLabel.VERY_WEAK
