"""
Suggestion Generator
=====================

Ordered, de-duplicated remediation advice for an analysed password.
"""

from __future__ import annotations

from typing import Sequence

from warden.core.models import CharacterClassSet, PatternFinding, PatternKind

DEFAULT_MAX_SUGGESTIONS = 10

EMPTY_PASSWORD_SUGGESTION = "Enter a password to analyze."
COMMON_PASSWORD_SUGGESTIONS: tuple[str, ...] = (
    "CRITICAL: Replace immediately with a unique, random password.",
    "This password has been compromised in major breaches.",
)


def generate_suggestions(
    password: str,
    classes: CharacterClassSet,
    findings: Sequence[PatternFinding],
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> list[str]:
    """Build the suggestion list for *password*.

    Args:
        password: The raw password (used for length and run quoting only).
        classes: Character classes present.
        findings: Pattern findings in detection order.
        max_suggestions: Upper bound on the number returned.

    Returns:
        Suggestions in fixed priority order, at most *max_suggestions*.
    """
    if not password:
        return [EMPTY_PASSWORD_SUGGESTION][:max(0, max_suggestions)]

    by_kind = {f.kind: f for f in findings}
    if PatternKind.COMMON_PASSWORD in by_kind:
        return list(COMMON_PASSWORD_SUGGESTIONS)[:max(0, max_suggestions)]

    length = len(password)
    out: list[str] = []

    if length < 8:
        out.append("Increase to minimum 8 characters (12+ is better).")
    if length < 12:
        out.append("Aim for 12-16+ characters for better security.")

    if classes.classes_used > 0:
        if not classes.has_lower:
            out.append("Add lowercase letters.")
        if not classes.has_upper:
            out.append("Add uppercase letters.")
        if not classes.has_digit:
            out.append("Add at least one digit.")
        if not classes.has_symbol:
            out.append("Add special characters (!@#$%^&*-_=+).")

    if PatternKind.DICTIONARY_WORDS in by_kind:
        out.append("Avoid dictionary words. Use random character sequences or long passphrases.")
    if PatternKind.SEQUENTIAL_RUN in by_kind:
        out.append("Remove predictable sequences (1234, abcd).")

    repeated = by_kind.get(PatternKind.REPEATED_CHARS)
    if repeated is not None and repeated.run_length >= 4:
        run = _first_run(password, repeated.run_length)
        out.append(f"Avoid character runs. Replace '{run}' with variety.")

    if PatternKind.KEYBOARD_PATTERN in by_kind:
        out.append('Avoid keyboard patterns like "qwerty" or "asdf".')
    if PatternKind.YEAR_PATTERN in by_kind:
        out.append("Avoid years or birth dates. Use random numbers instead.")
    if PatternKind.LEET_SUBSTITUTION in by_kind:
        out.append("Leet substitutions are easily defeated. Use actual special characters instead.")

    deduped = list(dict.fromkeys(out))
    return deduped[:max(0, max_suggestions)]


def _first_run(password: str, run_length: int) -> str:
    """The first identical-character run of exactly *run_length* or longer."""
    count = 0
    prev = ""
    for ch in password:
        count = count + 1 if ch == prev else 1
        prev = ch
        if count >= run_length:
            return ch * run_length
    return password[:run_length]
