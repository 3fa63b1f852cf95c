import math

import pytest

from warden import analyze
from warden.analyzers.password_analyzer import PasswordAnalyzer
from warden.core.models import PatternKind, StrengthLabel
from warden.analyzers.scorer import strength_label


SAMPLES = ["", "a", "password", "abcd1234", "Summer2024!!!", "Zebra!Quokka77", "aaaaaaa", "café☕"]


@pytest.mark.parametrize("password", SAMPLES)
def test_analysis_invariants(analyzer, password):
    result = analyzer.analyze(password)
    assert 0 <= result.score <= 100
    assert result.label is strength_label(result.score)
    assert result.entropy.effective_bits <= result.entropy.baseline_bits
    assert result.entropy.effective_bits >= 0
    assert math.isfinite(result.entropy.baseline_bits)
    assert len(result.suggestions) <= 10
    assert len(result.suggestions) == len(set(result.suggestions))
    assert result.length == len(password)


def test_analysis_is_deterministic(analyzer):
    assert analyzer.analyze("Summer2024!!!") == analyzer.analyze("Summer2024!!!")


def test_empty_password(analyzer):
    result = analyzer.analyze("")
    assert result.score == 0
    assert result.label is StrengthLabel.VERY_WEAK
    assert result.findings == []
    assert result.charset_size == 0
    assert result.suggestions == ["Enter a password to analyze."]


def test_common_password(analyzer):
    result = analyzer.analyze("password")
    assert result.has(PatternKind.COMMON_PASSWORD)
    assert result.entropy.effective_bits == 0.0
    assert result.score == 0
    assert result.suggestions[0].startswith("CRITICAL:")
    assert result.metrics.dictionary_word_count == 3


def test_strong_password(analyzer, strong_password):
    result = analyzer.analyze(strong_password)
    assert result.findings == []
    assert result.charset_size == 95
    assert result.classes.classes_used == 4
    assert math.isclose(result.entropy.effective_bits, result.entropy.baseline_bits)
    assert result.effective_entropy_bits == pytest.approx(111.7, abs=0.05)
    assert result.score == 100
    assert result.label is StrengthLabel.VERY_STRONG


def test_adding_a_new_class_does_not_lower_baseline(analyzer):
    base = analyzer.analyze("xkqvbm")
    more = analyzer.analyze("xkqvbM")
    assert more.entropy.baseline_bits >= base.entropy.baseline_bits


@pytest.mark.parametrize(
    ("password", "extra"),
    [("xkqvbm", "w"), ("ABC", "Q"), ("2468", "0"), ("aB3!", "#"), ("café", "z")],
)
def test_appending_a_present_class_raises_baseline(analyzer, password, extra):
    base = analyzer.analyze(password)
    longer = analyzer.analyze(password + extra)
    assert longer.charset_size == base.charset_size
    assert longer.entropy.baseline_bits > base.entropy.baseline_bits


def test_strong_password_with_bundled_corpus(strong_password):
    result = analyze(strong_password)
    assert result.label in (StrengthLabel.STRONG, StrengthLabel.VERY_STRONG)
    assert result.entropy.baseline_bits - result.entropy.effective_bits <= 0.1


@pytest.mark.parametrize("password", ["dragon\udcffsun", "\udcff", "ab\udcff\udcff\udcff\udcff"])
def test_lone_surrogates_are_analysed(analyzer, password):
    result = analyzer.analyze(password)
    assert result.length == len(password)
    assert result == analyzer.analyze(password.replace("\udcff", "\ufffd"))
    assert "\udcff" not in result.model_dump_json()


def test_lone_surrogates_with_bundled_corpus():
    result = analyze("abc\udcffdef")
    assert result.length == 7
    assert result.classes.has_symbol
    assert 0 <= result.score <= 100


def test_surrogate_does_not_hide_dictionary_words(analyzer):
    assert analyzer.analyze("dragon\udcffsun").metrics.dictionary_word_count == 2


def test_mask_password():
    assert PasswordAnalyzer.mask_password("") == ""
    assert PasswordAnalyzer.mask_password("ab") == "**"
    assert PasswordAnalyzer.mask_password("abc") == "a*c"
    assert PasswordAnalyzer.mask_password("secret") == "s****t"


def test_raw_password_is_not_serialised(analyzer):
    dumped = analyzer.analyze("Zebra!Quokka77").model_dump_json()
    assert "Zebra!Quokka77" not in dumped
    assert "Z************7" in dumped


def test_metrics(analyzer):
    metrics = analyzer.analyze("aB3!aa").metrics
    assert metrics.lower_count == 3
    assert metrics.upper_count == 1
    assert metrics.digit_count == 1
    assert metrics.symbol_count == 1
    assert metrics.unique_char_ratio == 0.67
    assert metrics.longest_run == 2


def test_max_suggestions_is_honoured(corpus):
    result = PasswordAnalyzer(corpus, max_suggestions=2).analyze("abc")
    assert len(result.suggestions) == 2


def test_api_analyze_uses_given_corpus(corpus):
    result = analyze("dragon", corpus)
    assert result.has(PatternKind.DICTIONARY_WORDS)
    assert not result.has(PatternKind.COMMON_PASSWORD)


def test_api_analyze_with_bundled_corpus():
    result = analyze("password")
    assert result.has(PatternKind.COMMON_PASSWORD)
