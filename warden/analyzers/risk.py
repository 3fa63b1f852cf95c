"""
Risk Classifier
================

Two independent risk views of an analysed password:

* :func:`compute_risk` -- a numeric 0-100 score from the probability of
  compromise by an online (rate-limited) and an offline (GPU) attacker at
  1 hour, 1 day and 1 week. Patterns enter only through a guess-rate
  multiplier clamped to [0.25, 4].
* :func:`classify_narrative` -- a coarse CRITICAL / HIGH / MODERATE / LOW
  tier with a confidence, driven by effective entropy, the score and the
  impactful patterns. Used by the narrative security report.

The two are deliberately not reconciled; each is reported on its own.
"""

from __future__ import annotations

from typing import Iterable

from shared.math_utils import clamp, round_half_up
from warden.analyzers.crack_time import horizon_probabilities
from warden.core.models import (
    IMPACTFUL_KINDS,
    NarrativeRisk,
    PasswordAnalysis,
    PatternFinding,
    PatternKind,
    RiskClassification,
    RiskReport,
    RiskTier,
)

DEFAULT_ONLINE_RATE = 100.0
DEFAULT_OFFLINE_RATE = 1e9

MULTIPLIER_MIN = 0.25
MULTIPLIER_MAX = 4.0

HIGH_RISK_THRESHOLD = 70
MEDIUM_RISK_THRESHOLD = 35

IMPACTFUL_PATTERN_FACTOR = 1.5
COMMON_PASSWORD_MULTIPLIER = 4.0


# ===================================================================== #
#  Numeric Risk
# ===================================================================== #


def risk_tier_from_score(score: float) -> RiskTier:
    if score >= HIGH_RISK_THRESHOLD:
        return RiskTier.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskTier.MEDIUM
    return RiskTier.LOW


def compute_risk(
    effective_bits: float,
    online_rate: float = DEFAULT_ONLINE_RATE,
    offline_rate: float = DEFAULT_OFFLINE_RATE,
    pattern_multiplier: float = 1.0,
) -> RiskReport:
    """Numeric risk report for *effective_bits* of entropy.

    Args:
        effective_bits: Effective entropy of the password.
        online_rate: Online attacker guesses per second.
        offline_rate: Offline attacker guesses per second.
        pattern_multiplier: Guess-rate multiplier, clamped to [0.25, 4].

    Returns:
        RiskReport with score, tier and per-horizon probabilities.
    """
    multiplier = clamp(pattern_multiplier, MULTIPLIER_MIN, MULTIPLIER_MAX)

    online = horizon_probabilities(effective_bits, online_rate * multiplier)
    offline = horizon_probabilities(effective_bits, offline_rate * multiplier)

    worst = max(
        0.55 * online.p1d + 0.45 * online.p1w,
        0.60 * offline.p1h + 0.40 * offline.p1d,
    )
    score = int(clamp(round_half_up(worst * 100), 0, 100))

    return RiskReport(
        score=score,
        tier=risk_tier_from_score(score),
        online=online,
        offline=offline,
        pattern_multiplier=multiplier,
    )


def pattern_multiplier(findings: Iterable[PatternFinding]) -> float:
    """Guess-rate multiplier implied by the detected patterns.

    Starts at 1.0 and grows by 1.5x per impactful kind present
    (dictionary, keyboard, sequential). A common password pins it to 4.0.
    """
    kinds = {f.kind for f in findings}
    if PatternKind.COMMON_PASSWORD in kinds:
        return COMMON_PASSWORD_MULTIPLIER
    multiplier = 1.0
    for _ in kinds & IMPACTFUL_KINDS:
        multiplier *= IMPACTFUL_PATTERN_FACTOR
    return multiplier


# ===================================================================== #
#  Narrative Risk
# ===================================================================== #


def classify_narrative(analysis: PasswordAnalysis) -> RiskClassification:
    """Narrative tier and confidence for *analysis*.

    Uses unrounded effective entropy. Two or more impactful pattern kinds
    escalate MODERATE to HIGH and LOW to MODERATE.
    """
    effective = analysis.entropy.effective_bits

    if analysis.has(PatternKind.COMMON_PASSWORD):
        return RiskClassification(tier=NarrativeRisk.CRITICAL, confidence=95)

    if effective < 25:
        tier, confidence = NarrativeRisk.CRITICAL, 90
    elif effective < 40:
        tier, confidence = NarrativeRisk.HIGH, 85
    elif effective < 60:
        tier, confidence = NarrativeRisk.MODERATE, 80
    elif analysis.score >= 75:
        tier, confidence = NarrativeRisk.LOW, 88
    else:
        tier, confidence = NarrativeRisk.MODERATE, 78

    impactful = sum(1 for kind in IMPACTFUL_KINDS if analysis.has(kind))
    if impactful >= 2:
        if tier is NarrativeRisk.MODERATE:
            tier = NarrativeRisk.HIGH
        elif tier is NarrativeRisk.LOW:
            tier = NarrativeRisk.MODERATE

    return RiskClassification(tier=tier, confidence=confidence)
