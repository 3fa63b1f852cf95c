from warden.analyzers.security_report import (
    TRANSPARENCY_LABEL,
    build_security_report,
    estimated_crack_times,
)
from warden.core.models import NarrativeRisk


def test_strong_password_report(analyzer, strong_password):
    report = build_security_report(analyzer.analyze(strong_password))

    assert report.risk.tier is NarrativeRisk.LOW
    assert report.risk.confidence == 88
    assert report.executive_summary.startswith("LOW RISK:")
    assert report.technical_findings[0] == (
        "Password Length: 17 characters (minimum recommended: 12, optimal: 16+)"
    )
    assert report.estimated_crack_time.gpu == "> 1 billion years"
    assert any(line.startswith("Dictionary/Hybrid Attacks: LOW RISK") for line in report.attack_feasibility)
    assert report.recommendations[0].startswith("This password is strong")


def test_common_password_report(analyzer):
    report = build_security_report(analyzer.analyze("password"))

    assert report.risk.tier is NarrativeRisk.CRITICAL
    assert report.risk.confidence == 95
    assert report.executive_summary.startswith("CRITICAL RISK:")
    assert report.recommendations[0].startswith("URGENT:")
    assert report.estimated_crack_time.online == "instant"
    assert any(line.startswith("Dictionary/Hybrid Attacks: HIGH RISK") for line in report.attack_feasibility)
    assert "Dictionary words detected: 3 word(s) found in common-word list" in report.technical_findings


def test_general_practices_always_follow(analyzer, strong_password):
    for password in ("password", strong_password, "Summer2024!!!"):
        recs = build_security_report(analyzer.analyze(password)).recommendations
        assert "IMPLEMENTATION:" in recs
        assert "DEPLOYMENT:" in recs
        assert recs[-1].startswith("  - Enable 2FA")


def test_warnings_are_listed(analyzer):
    report = build_security_report(analyzer.analyze("Summer2024!!!"))
    assert "Warnings:" in report.technical_findings
    assert any("Year pattern" in line for line in report.technical_findings)


def test_report_is_deterministic(analyzer):
    first = build_security_report(analyzer.analyze("Summer2024!!!"))
    second = build_security_report(analyzer.analyze("Summer2024!!!"))
    assert first == second


def test_estimated_crack_times_scale_with_rate():
    times = estimated_crack_times(40.0)
    assert times.online != times.gpu
    assert estimated_crack_times(0.0).gpu == "instant"


def test_transparency_label_mentions_heuristics():
    assert "heuristics" in TRANSPARENCY_LABEL
