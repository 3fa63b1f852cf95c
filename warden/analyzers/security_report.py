"""
Narrative Security Report
==========================

Turns a :class:`PasswordAnalysis` into a prose report: executive summary,
technical findings, attack feasibility per attacker scenario, tiered
recommendations and estimated crack times. The narrative risk tier comes
from :func:`warden.analyzers.risk.classify_narrative`.

The report is fully deterministic; the same analysis always produces the
same text.
"""

from __future__ import annotations

from warden.analyzers.crack_time import average_seconds, format_crack_time
from warden.analyzers.risk import classify_narrative
from warden.core.models import (
    CrackTimeSummary,
    NarrativeRisk,
    PasswordAnalysis,
    PatternKind,
    SecurityReport,
)

ONLINE_RATE = 100.0
LAPTOP_RATE = 1e6
GPU_FARM_RATE = 1e9

TRANSPARENCY_LABEL = (
    "Analysis uses deterministic security heuristics, entropy calculations "
    "and simulated brute-force models. Results represent reasonable "
    "estimates but are not foolproof."
)

_GENERAL_PRACTICES: tuple[str, ...] = (
    "IMPLEMENTATION:",
    "  - Use bcrypt (cost >= 12) or Argon2id (memory >= 64MB) for hashing",
    "  - Apply unique per-account salts (bcrypt does this automatically)",
    "  - Never log or transmit passwords in plain text",
    "DEPLOYMENT:",
    "  - Implement rate limiting on authentication endpoints (e.g., 5 attempts per minute)",
    "  - Enable account lockout after 10 failed attempts within 1 hour",
    "  - Require multi-factor authentication (2FA/TOTP) for sensitive accounts",
    "USER PRACTICES:",
    "  - Use unique passwords per service (password manager recommended)",
    "  - Monitor for breaches at haveibeenpwned.com",
    "  - Enable 2FA whenever available, especially on accounts with sensitive data",
)


def _fmt_bits(bits: float) -> str:
    return f"{round(bits, 1)} bits"


def build_security_report(analysis: PasswordAnalysis) -> SecurityReport:
    """Build the narrative report for *analysis*."""
    classification = classify_narrative(analysis)
    crack_times = estimated_crack_times(analysis.entropy.effective_bits)

    return SecurityReport(
        executive_summary=executive_summary(classification.tier, analysis),
        technical_findings=technical_findings(analysis),
        attack_feasibility=attack_feasibility(analysis, crack_times),
        risk=classification,
        recommendations=recommendations(classification.tier),
        estimated_crack_time=crack_times,
        analysis=analysis,
    )


def estimated_crack_times(effective_bits: float) -> CrackTimeSummary:
    return CrackTimeSummary(
        online=format_crack_time(average_seconds(effective_bits, ONLINE_RATE)),
        laptop=format_crack_time(average_seconds(effective_bits, LAPTOP_RATE)),
        gpu=format_crack_time(average_seconds(effective_bits, GPU_FARM_RATE)),
    )


# ===================================================================== #
#  Sections
# ===================================================================== #


def executive_summary(tier: NarrativeRisk, analysis: PasswordAnalysis) -> str:
    bits = _fmt_bits(analysis.entropy.effective_bits)
    if tier is NarrativeRisk.CRITICAL:
        return (
            "CRITICAL RISK: This password is highly vulnerable. It will be "
            "cracked in seconds to minutes using GPU-accelerated attacks. "
            "Immediate replacement is necessary."
        )
    if tier is NarrativeRisk.HIGH:
        return (
            f"HIGH RISK: This password exhibits significant weaknesses. With "
            f"effective entropy of {bits}, offline attacks could succeed within "
            f"hours to days on modern hardware."
        )
    if tier is NarrativeRisk.MODERATE:
        return (
            f"MODERATE RISK: This password provides some protection ({bits} "
            f"effective entropy) but contains patterns that weaken its "
            f"resistance to targeted attacks."
        )
    return (
        f"LOW RISK: This password demonstrates strong entropy ({bits}) and "
        f"character diversity, suitable for high-value accounts. Consider "
        f"using it with multi-factor authentication."
    )


def technical_findings(analysis: PasswordAnalysis) -> list[str]:
    length = analysis.length
    metrics = analysis.metrics
    classes = ", ".join(analysis.classes.names) or "insufficient variety"

    lines = [
        f"Password Length: {length} character{'' if length == 1 else 's'} "
        f"(minimum recommended: 12, optimal: 16+)",
        f"Character Classes: {classes}",
        f"Baseline Entropy: {_fmt_bits(analysis.entropy.baseline_bits)} "
        f"(theoretical maximum against brute-force)",
        f"Effective Entropy: {_fmt_bits(analysis.entropy.effective_bits)} "
        f"(practical estimate after pattern penalties)",
        f"Character Set Size: ~{analysis.charset_size} possible values per position",
        f"Unique Characters: {round(metrics.unique_char_ratio * 100)}% "
        f"ratio of unique-to-total chars",
    ]

    if metrics.longest_run >= 3:
        lines.append(
            f"Longest repeated sequence: {metrics.longest_run}+ identical "
            f"characters (reduces entropy)"
        )
    if metrics.dictionary_word_count > 0:
        lines.append(
            f"Dictionary words detected: {metrics.dictionary_word_count} "
            f"word(s) found in common-word list"
        )
    if analysis.patterns:
        lines.append(f"Identified Patterns: {' | '.join(analysis.patterns)}")
    if analysis.warnings:
        lines.append("Warnings:")
        lines.extend(f"  - {w}" for w in analysis.warnings)

    return lines


def attack_feasibility(
    analysis: PasswordAnalysis,
    crack_times: CrackTimeSummary,
) -> list[str]:
    bits = analysis.entropy.effective_bits
    lines = [
        f"Online (Rate-Limited): Estimated {crack_times.online} to crack with "
        f"100 guesses/sec (typical auth rate limit)",
    ]
    if bits < 30:
        lines.append("  -> Vulnerable to brute-force if rate limiting is weak or disabled")
    elif bits < 50:
        lines.append("  -> Risk increases if rate limits are not enforced or have high thresholds")
    else:
        lines.append("  -> Well-protected against online attacks with standard rate limiting")

    lines.append(
        f"Offline (Laptop): Estimated {crack_times.laptop} to crack with "
        f"1M guesses/sec (single machine)"
    )
    lines.append(
        f"Offline (GPU Farm): Estimated {crack_times.gpu} to crack with "
        f"1B guesses/sec (optimized hardware)"
    )
    if bits < 25:
        lines.append("  -> CRITICAL: Even with bcrypt/Argon2, this would be cracked on modern GPU farms")
    elif bits < 40:
        lines.append("  -> Risk: Vulnerable if hash function is weak; bcrypt/Argon2 required to mitigate")
    elif bits < 60:
        lines.append("  -> With bcrypt/Argon2 (cost 12+): Practically resistant to offline attacks")
    else:
        lines.append("  -> Excellent protection even against state-level adversaries with GPU farms")

    wordlist_prone = any(
        analysis.has(kind)
        for kind in (
            PatternKind.DICTIONARY_WORDS,
            PatternKind.KEYBOARD_PATTERN,
            PatternKind.COMMON_PASSWORD,
        )
    )
    if wordlist_prone:
        lines.append(
            "Dictionary/Hybrid Attacks: HIGH RISK. Attackers will try common "
            "word lists and pattern variations first"
        )
        lines.append("  -> Pre-computed rainbow tables may contain variants of this password")
    else:
        lines.append("Dictionary/Hybrid Attacks: LOW RISK. No common words or patterns detected")
        lines.append("  -> Random character sequences resist dictionary attacks regardless of entropy")

    return lines


def recommendations(tier: NarrativeRisk) -> list[str]:
    if tier is NarrativeRisk.CRITICAL:
        recs = [
            "URGENT: Do not use this password. Generate a new one immediately "
            "using a password manager.",
            "Replace with a randomly generated 16+ character password "
            "containing mixed character classes.",
        ]
    elif tier is NarrativeRisk.HIGH:
        recs = [
            "Increase length to 16+ characters and add variety to reach 60+ "
            "bits of effective entropy.",
            "Remove all dictionary words and common patterns. Use random "
            "sequences or passphrases.",
        ]
    elif tier is NarrativeRisk.MODERATE:
        recs = [
            "Consider increasing length to 16+ characters or changing it if "
            "it contains dictionary words.",
            "While usable, stronger alternatives exist through password generation.",
        ]
    else:
        recs = [
            "This password is strong. Maintain high security by:",
            "  1. Using a password manager to avoid memorizing or reusing it",
            "  2. Storing it securely encrypted",
        ]
    recs.extend(_GENERAL_PRACTICES)
    return recs
