import math

from warden.analyzers.entropy_model import (
    baseline_entropy_bits,
    char_class,
    character_classes,
    effective_entropy,
    entropy_breakdown,
    repetition_penalty,
    unique_ratio,
)


def test_baseline_is_length_times_log2_charset():
    assert math.isclose(baseline_entropy_bits(8, 26), 8 * math.log2(26))
    assert math.isclose(baseline_entropy_bits(17, 95), 17 * math.log2(95))


def test_baseline_guards_degenerate_inputs():
    assert baseline_entropy_bits(0, 26) == 0.0
    assert baseline_entropy_bits(8, 0) == 0.0
    assert baseline_entropy_bits(-3, 26) == 0.0
    assert baseline_entropy_bits(math.inf, 26) == 0.0
    assert baseline_entropy_bits(8, math.nan) == 0.0


def test_effective_entropy_floors_at_zero_without_upper_clamp():
    assert effective_entropy(50.0, 60.0) == 0.0
    assert effective_entropy(50.0, 10.0, 5.0) == 35.0
    assert effective_entropy(500.0, 0.0) == 500.0


def test_negative_penalties_are_ignored():
    assert effective_entropy(50.0, -5.0) == 50.0
    assert effective_entropy(50.0, 0.0, -2.0) == 50.0


def test_character_classes():
    classes = character_classes("aB3!")
    assert classes.has_lower and classes.has_upper
    assert classes.has_digit and classes.has_symbol
    assert classes.charset_size == 95
    assert classes.classes_used == 4

    digits_only = character_classes("2024")
    assert digits_only.charset_size == 10
    assert digits_only.names == ["digits"]


def test_empty_password_has_no_charset():
    classes = character_classes("")
    assert classes.charset_size == 0
    assert classes.classes_used == 0


def test_non_ascii_counts_as_symbol():
    assert char_class("é") == "symbol"
    assert char_class(" ") == "symbol"
    assert character_classes("café").has_symbol


def test_repetition_penalty_bands():
    assert math.isclose(repetition_penalty("aaaa"), (0.5 - 0.25) * 30)
    assert math.isclose(repetition_penalty("aabb"), (0.7 - 0.5) * 15)
    assert repetition_penalty("abcd") == 0.0
    assert repetition_penalty("") == 0.0


def test_unique_ratio():
    assert unique_ratio("") == 1.0
    assert unique_ratio("abab") == 0.5


def test_breakdown_invariant():
    breakdown = entropy_breakdown(10, 62, 12.0, 3.0)
    assert math.isclose(breakdown.baseline_bits, 10 * math.log2(62))
    assert math.isclose(
        breakdown.effective_bits,
        breakdown.baseline_bits - breakdown.penalty_bits - breakdown.repetition_penalty_bits,
    )
