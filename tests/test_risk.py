import pytest

from warden.analyzers.risk import (
    classify_narrative,
    compute_risk,
    pattern_multiplier,
    risk_tier_from_score,
)
from warden.core.models import (
    EntropyBreakdown,
    NarrativeRisk,
    PasswordAnalysis,
    PatternFinding,
    PatternKind,
    RiskTier,
)


def finding(kind):
    return PatternFinding(kind=kind, penalty_bits=0.0, label=kind.value, warning="w")


def analysis(effective_bits, score=50, kinds=()):
    return PasswordAnalysis(
        entropy=EntropyBreakdown(baseline_bits=200.0, effective_bits=effective_bits),
        score=score,
        findings=[finding(k) for k in kinds],
    )


# ===================================================================== #
#  Numeric risk
# ===================================================================== #


def test_zero_entropy_scores_zero():
    report = compute_risk(0)
    assert report.score == 0
    assert report.tier is RiskTier.LOW


def test_low_entropy_is_high_risk():
    report = compute_risk(20)
    assert report.score == 100
    assert report.tier is RiskTier.HIGH
    assert report.offline.p1h == pytest.approx(1.0)


def test_high_entropy_is_low_risk():
    report = compute_risk(120)
    assert report.score == 0
    assert report.tier is RiskTier.LOW


def test_multiplier_raises_risk():
    plain = compute_risk(45)
    boosted = compute_risk(45, pattern_multiplier=4.0)
    assert plain.tier is RiskTier.MEDIUM
    assert 40 <= plain.score <= 44
    assert 58 <= boosted.score <= 62
    assert boosted.score > plain.score


def test_multiplier_is_clamped():
    assert compute_risk(45, pattern_multiplier=10.0).pattern_multiplier == 4.0
    assert compute_risk(45, pattern_multiplier=0.01).pattern_multiplier == 0.25


def test_probabilities_are_monotone_in_horizon():
    report = compute_risk(38)
    for probs in (report.online, report.offline):
        assert probs.p1h <= probs.p1d <= probs.p1w


def test_tier_thresholds():
    assert risk_tier_from_score(70) is RiskTier.HIGH
    assert risk_tier_from_score(69) is RiskTier.MEDIUM
    assert risk_tier_from_score(35) is RiskTier.MEDIUM
    assert risk_tier_from_score(34) is RiskTier.LOW


def test_pattern_multiplier():
    assert pattern_multiplier([]) == 1.0
    assert pattern_multiplier([finding(PatternKind.YEAR_PATTERN)]) == 1.0
    assert pattern_multiplier(
        [finding(PatternKind.DICTIONARY_WORDS), finding(PatternKind.KEYBOARD_PATTERN)]
    ) == pytest.approx(2.25)
    assert pattern_multiplier(
        [finding(PatternKind.COMMON_PASSWORD), finding(PatternKind.DICTIONARY_WORDS)]
    ) == 4.0


# ===================================================================== #
#  Narrative risk
# ===================================================================== #


def test_common_password_is_critical():
    result = classify_narrative(analysis(100.0, 90, [PatternKind.COMMON_PASSWORD]))
    assert result.tier is NarrativeRisk.CRITICAL
    assert result.confidence == 95


@pytest.mark.parametrize(
    "bits, score, tier, confidence",
    [
        (10.0, 0, NarrativeRisk.CRITICAL, 90),
        (30.0, 30, NarrativeRisk.HIGH, 85),
        (50.0, 60, NarrativeRisk.MODERATE, 80),
        (70.0, 80, NarrativeRisk.LOW, 88),
        (70.0, 70, NarrativeRisk.MODERATE, 78),
    ],
)
def test_entropy_bands(bits, score, tier, confidence):
    result = classify_narrative(analysis(bits, score))
    assert result.tier is tier
    assert result.confidence == confidence


def test_boundary_uses_unrounded_entropy():
    assert classify_narrative(analysis(24.96)).tier is NarrativeRisk.CRITICAL


def test_two_impactful_patterns_escalate():
    kinds = [PatternKind.DICTIONARY_WORDS, PatternKind.KEYBOARD_PATTERN]
    assert classify_narrative(analysis(50.0, 60, kinds)).tier is NarrativeRisk.HIGH
    assert classify_narrative(analysis(70.0, 80, kinds)).tier is NarrativeRisk.MODERATE


def test_single_impactful_pattern_does_not_escalate():
    kinds = [PatternKind.SEQUENTIAL_RUN]
    assert classify_narrative(analysis(50.0, 60, kinds)).tier is NarrativeRisk.MODERATE
