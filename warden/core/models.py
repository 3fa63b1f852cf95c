"""
Warden Core Data Models
========================

Pydantic models for the password analysis pipeline: character classes,
pattern findings, entropy breakdowns, the aggregate analysis, crack-time
projections and both risk classifications.

Every model is frozen. An analysis is a value: two analyses of the same
password compare equal and nothing downstream can mutate one.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Bonneau, J. (2012). The Science of Guessing: Analyzing an
      Anonymized Corpus of 70 Million Passwords. IEEE S&P.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthLabel(str, enum.Enum):
    """Qualitative password strength rating derived from the 0-100 score."""

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @property
    def display(self) -> str:
        return self.value.replace("_", " ").capitalize()


class PatternKind(str, enum.Enum):
    """Closed set of weakness kinds the pattern detector reports."""

    COMMON_PASSWORD = "common_password"
    DICTIONARY_WORDS = "dictionary_words"
    SEQUENTIAL_RUN = "sequential_run"
    KEYBOARD_PATTERN = "keyboard_pattern"
    YEAR_PATTERN = "year_pattern"
    REPEATED_CHARS = "repeated_chars"
    LEET_SUBSTITUTION = "leet_substitution"


# Kinds that make a password fall to dictionary/hybrid attacks first.
IMPACTFUL_KINDS: frozenset[PatternKind] = frozenset({
    PatternKind.DICTIONARY_WORDS,
    PatternKind.KEYBOARD_PATTERN,
    PatternKind.SEQUENTIAL_RUN,
})


class CrackTimeKind(str, enum.Enum):
    """Tag of a :class:`CrackTime` result.

    IMMEDIATE:   nothing to search (no entropy) or no usable guess rate.
    SECONDS:     a finite, representable number of seconds.
    INTRACTABLE: beyond the double range; never an overflowed float.
    """

    IMMEDIATE = "immediate"
    SECONDS = "seconds"
    INTRACTABLE = "intractable"


class RiskTier(str, enum.Enum):
    """Numeric-risk tier of a :class:`RiskReport`."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class NarrativeRisk(str, enum.Enum):
    """Coarse narrative risk tier used in the security report."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class CharacterClassSet(_Frozen):
    """Character classes present in a password.

    Attributes:
        has_lower: ``[a-z]`` present.
        has_upper: ``[A-Z]`` present.
        has_digit: ``[0-9]`` present.
        has_symbol: any other character present.
        charset_size: Sum of the class sizes (26/26/10/33); 0 iff empty.
        classes_used: Number of classes present (0-4).
    """

    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False
    charset_size: int = 0

    @property
    def classes_used(self) -> int:
        return sum((self.has_lower, self.has_upper, self.has_digit, self.has_symbol))

    @property
    def names(self) -> list[str]:
        """Human names of the classes present, in fixed order."""
        flags = (
            (self.has_lower, "lowercase"),
            (self.has_upper, "UPPERCASE"),
            (self.has_digit, "digits"),
            (self.has_symbol, "symbols"),
        )
        return [name for present, name in flags if present]


class PatternFinding(_Frozen):
    """A named, penalised weakness.

    Attributes:
        kind: Weakness kind.
        penalty_bits: Entropy penalty contributed by this finding.
        label: Short human label (e.g. ``"Dictionary words (2)"``).
        warning: Sentence explaining why the pattern is weak.
        count: Dictionary word occurrences (DICTIONARY_WORDS only).
        run_length: Longest identical run (REPEATED_CHARS only).
    """

    kind: PatternKind
    penalty_bits: float
    label: str
    warning: str
    count: int = 0
    run_length: int = 0


class EntropyBreakdown(_Frozen):
    """Baseline and effective entropy, all values unrounded.

    Invariant: ``effective_bits == max(0, baseline_bits - penalty_bits
    - repetition_penalty_bits)``.
    """

    baseline_bits: float = 0.0
    penalty_bits: float = 0.0
    repetition_penalty_bits: float = 0.0
    effective_bits: float = 0.0


class DetailedMetrics(_Frozen):
    """Per-password counters shown in the technical findings."""

    unique_char_ratio: float = 1.0
    lower_count: int = 0
    upper_count: int = 0
    digit_count: int = 0
    symbol_count: int = 0
    longest_run: int = 0
    dictionary_word_count: int = 0


class PasswordAnalysis(_Frozen):
    """Complete result of one analysis call.

    The raw password is not kept; ``password_masked`` shows the first
    and last characters only.

    Attributes:
        password_masked: Masked password for display.
        length: Password length in characters.
        classes: Character classes present.
        entropy: Unrounded entropy breakdown.
        score: Integer score 0-100.
        label: Strength label derived from the score.
        findings: Pattern findings in detection order.
        suggestions: Ordered remediation advice.
        metrics: Detailed counters.
    """

    password_masked: str = ""
    length: int = 0
    classes: CharacterClassSet = Field(default_factory=CharacterClassSet)
    entropy: EntropyBreakdown = Field(default_factory=EntropyBreakdown)
    score: int = Field(default=0, ge=0, le=100)
    label: StrengthLabel = StrengthLabel.VERY_WEAK
    findings: list[PatternFinding] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    metrics: DetailedMetrics = Field(default_factory=DetailedMetrics)

    @property
    def charset_size(self) -> int:
        return self.classes.charset_size

    @property
    def entropy_bits(self) -> float:
        """Baseline entropy rounded to one decimal for display."""
        return round(self.entropy.baseline_bits, 1)

    @property
    def effective_entropy_bits(self) -> float:
        """Effective entropy rounded to one decimal for display."""
        return round(self.entropy.effective_bits, 1)

    @property
    def patterns(self) -> list[str]:
        return [f.label for f in self.findings]

    @property
    def warnings(self) -> list[str]:
        return [f.warning for f in self.findings]

    def has(self, kind: PatternKind) -> bool:
        """Whether a finding of *kind* was detected."""
        return any(f.kind is kind for f in self.findings)

    def finding(self, kind: PatternKind) -> Optional[PatternFinding]:
        """The finding of *kind*, or ``None``."""
        return next((f for f in self.findings if f.kind is kind), None)


# ===================================================================== #
#  Crack-Time Models
# ===================================================================== #


class CrackProfile(_Frozen):
    """An attacker throughput profile.

    Attributes:
        key: Stable identifier used on the command line.
        label: Human description.
        guesses_per_second: Sustained guess rate.
    """

    key: str
    label: str
    guesses_per_second: float = Field(gt=0)


class CrackTime(_Frozen):
    """Tagged average-case time-to-crack.

    ``seconds`` is ``0.0`` for IMMEDIATE, the finite estimate for SECONDS
    and ``None`` for INTRACTABLE.
    """

    kind: CrackTimeKind
    seconds: Optional[float] = 0.0

    @classmethod
    def immediate(cls) -> CrackTime:
        return cls(kind=CrackTimeKind.IMMEDIATE, seconds=0.0)

    @classmethod
    def intractable(cls) -> CrackTime:
        return cls(kind=CrackTimeKind.INTRACTABLE, seconds=None)

    @classmethod
    def of(cls, seconds: float) -> CrackTime:
        return cls(kind=CrackTimeKind.SECONDS, seconds=seconds)

    @property
    def is_intractable(self) -> bool:
        return self.kind is CrackTimeKind.INTRACTABLE


class HorizonProbabilities(_Frozen):
    """Probability of compromise by 1 hour, 1 day and 1 week."""

    p1h: float = Field(default=0.0, ge=0.0, le=1.0)
    p1d: float = Field(default=0.0, ge=0.0, le=1.0)
    p1w: float = Field(default=0.0, ge=0.0, le=1.0)


class CrackProjection(_Frozen):
    """Crack-time and success probabilities for one attacker profile.

    Attributes:
        profile: The attacker profile.
        crack_time: Average-case time to crack.
        display: Formatted ``crack_time``.
        probabilities: Horizon (seconds) to probability of success.
    """

    profile: CrackProfile
    crack_time: CrackTime
    display: str
    probabilities: dict[float, float] = Field(default_factory=dict)


# ===================================================================== #
#  Risk Models
# ===================================================================== #


class RiskReport(_Frozen):
    """Numeric risk from online/offline compromise probabilities.

    Attributes:
        score: 0-100 risk score.
        tier: LOW / MEDIUM / HIGH.
        online: Online-profile probabilities.
        offline: Offline-profile probabilities.
        pattern_multiplier: Applied multiplier after clamping.
    """

    score: int = Field(ge=0, le=100)
    tier: RiskTier
    online: HorizonProbabilities
    offline: HorizonProbabilities
    pattern_multiplier: float = 1.0


class RiskClassification(_Frozen):
    """Narrative risk tier with the confidence attached to it."""

    tier: NarrativeRisk
    confidence: int = Field(ge=0, le=100)


class CrackTimeSummary(_Frozen):
    """Formatted crack times for the three narrative scenarios."""

    online: str
    laptop: str
    gpu: str


class SecurityReport(_Frozen):
    """Narrative security report built on top of an analysis.

    Attributes:
        executive_summary: One-paragraph verdict.
        technical_findings: Measured properties and warnings.
        attack_feasibility: Per-scenario commentary.
        risk: Narrative classification and confidence.
        recommendations: Ordered advice, tier specific first.
        estimated_crack_time: Online / laptop / GPU farm estimates.
        analysis: The underlying analysis.
    """

    executive_summary: str
    technical_findings: list[str] = Field(default_factory=list)
    attack_feasibility: list[str] = Field(default_factory=list)
    risk: RiskClassification
    recommendations: list[str] = Field(default_factory=list)
    estimated_crack_time: CrackTimeSummary
    analysis: PasswordAnalysis
