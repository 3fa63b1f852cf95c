from warden.analyzers.scorer import (
    compute_score,
    entropy_score,
    length_score,
    pattern_deductions,
    strength_label,
)
from warden.core.models import PatternFinding, PatternKind, StrengthLabel


def finding(kind, **kwargs):
    return PatternFinding(kind=kind, penalty_bits=0.0, label="x", warning="x", **kwargs)


def test_components():
    assert entropy_score(100) == 75.0
    assert entropy_score(250) == 75.0
    assert entropy_score(-5) == 0.0
    assert length_score(12) == 12.0
    assert length_score(30) == 15.0


def test_score_without_patterns():
    assert compute_score(100, 12, 4, []) == 97


def test_score_is_clamped_to_zero():
    findings = [finding(PatternKind.COMMON_PASSWORD), finding(PatternKind.SEQUENTIAL_RUN)]
    assert compute_score(0, 4, 1, findings) == 0


def test_dictionary_deduction_needs_more_than_two_words():
    assert pattern_deductions([finding(PatternKind.DICTIONARY_WORDS, count=2)]) == 0
    assert pattern_deductions([finding(PatternKind.DICTIONARY_WORDS, count=3)]) == 20


def test_repeated_deduction_needs_run_of_five():
    assert pattern_deductions([finding(PatternKind.REPEATED_CHARS, run_length=4)]) == 0
    assert pattern_deductions([finding(PatternKind.REPEATED_CHARS, run_length=5)]) == 10


def test_label_thresholds_are_inclusive():
    assert strength_label(100) is StrengthLabel.VERY_STRONG
    assert strength_label(80) is StrengthLabel.VERY_STRONG
    assert strength_label(79) is StrengthLabel.STRONG
    assert strength_label(60) is StrengthLabel.STRONG
    assert strength_label(40) is StrengthLabel.FAIR
    assert strength_label(20) is StrengthLabel.WEAK
    assert strength_label(19) is StrengthLabel.VERY_WEAK
    assert strength_label(0) is StrengthLabel.VERY_WEAK
