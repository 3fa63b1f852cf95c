from warden.analyzers.entropy_model import character_classes
from warden.analyzers.patterns import PatternDetector
from warden.analyzers.suggestions import (
    COMMON_PASSWORD_SUGGESTIONS,
    EMPTY_PASSWORD_SUGGESTION,
    generate_suggestions,
)


def suggest(corpus, password, **kwargs):
    findings = PatternDetector(corpus).detect(password)
    return generate_suggestions(password, character_classes(password), findings, **kwargs)


def test_empty_password(corpus):
    assert suggest(corpus, "") == [EMPTY_PASSWORD_SUGGESTION]


def test_common_password_short_circuits(corpus):
    assert suggest(corpus, "letmein") == list(COMMON_PASSWORD_SUGGESTIONS)


def test_short_single_class_password(corpus):
    assert suggest(corpus, "xkq") == [
        "Increase to minimum 8 characters (12+ is better).",
        "Aim for 12-16+ characters for better security.",
        "Add uppercase letters.",
        "Add at least one digit.",
        "Add special characters (!@#$%^&*-_=+).",
    ]


def test_pattern_suggestions_follow_fixed_order(corpus):
    out = suggest(corpus, "Xqwerty1987!zzzzz")
    keyboard = out.index('Avoid keyboard patterns like "qwerty" or "asdf".')
    year = out.index("Avoid years or birth dates. Use random numbers instead.")
    run = out.index("Avoid character runs. Replace 'zzzzz' with variety.")
    assert run < keyboard < year


def test_run_of_three_gets_no_run_suggestion(corpus):
    out = suggest(corpus, "Xk!9mmmQv7#p")
    assert not any(s.startswith("Avoid character runs") for s in out)


def test_strong_password_needs_no_advice(corpus, strong_password):
    assert suggest(corpus, strong_password) == []


def test_cap(corpus):
    assert len(suggest(corpus, "ab", max_suggestions=1)) == 1
    assert suggest(corpus, "ab", max_suggestions=0) == []
