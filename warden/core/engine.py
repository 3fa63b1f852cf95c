"""
Warden Analysis Engine
=======================

Central orchestrator for Warden. :class:`WardenEngine` wires the corpus,
the analyzer pipeline and the configured attacker model together and
returns unified :class:`~shared.models.ScanResult` objects for the
console and JSON outputs.

Architecture follows the Facade pattern (Gamma et al., 1994): the CLI
talks to the engine, the engine talks to the pure analyzer functions.
Every operation catches unexpected errors, logs them and records an
error finding instead of propagating.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

from typing import Optional

from shared.config import WardenConfig
from shared.logger import WardenLogger
from shared.models import Finding, Risk, ScanResult, Severity

from warden.analyzers.crack_time import DAY, HOUR, PROFILE_KEYS, YEAR, get_profile, project
from warden.analyzers.generator import generate_strong_password
from warden.analyzers.password_analyzer import PasswordAnalyzer
from warden.analyzers.risk import compute_risk, pattern_multiplier
from warden.analyzers.security_report import TRANSPARENCY_LABEL, build_security_report
from warden.corpus.loader import Corpus, default_corpus, load_corpus
from warden.core.models import (
    CrackProfile,
    CrackTime,
    NarrativeRisk,
    PasswordAnalysis,
    PatternKind,
    RiskReport,
    RiskTier,
    StrengthLabel,
)

TOOL_NAME = "warden"
PASSWORD_TARGET = "[password]"

_REFERENCES = [
    "NIST SP 800-63B (2017). Digital Identity Guidelines.",
    "Bonneau, J. (2012). The Science of Guessing. IEEE S&P.",
]


class WardenEngine:
    """Orchestrates all Warden operations.

    Usage::

        engine = WardenEngine()
        result = engine.analyze_password("P@ssw0rd!")
        result = engine.assess_risk("P@ssw0rd!")
        password = engine.generate_password(20)

    Attributes:
        config: Warden configuration instance.
        logger: Logger for the engine component.
        corpus: Word lists injected into the analyzer.

    Raises:
        FileNotFoundError: At construction, if a configured corpus path
            does not exist.
    """

    def __init__(
        self,
        config: Optional[WardenConfig] = None,
        corpus: Optional[Corpus] = None,
    ) -> None:
        self.config = config or WardenConfig()
        self.logger = WardenLogger.from_config("engine", self.config)

        settings = self.config.analyzer
        if corpus is not None:
            self.corpus = corpus
        elif settings.common_passwords_path or settings.dictionary_words_path:
            self.corpus = load_corpus(
                settings.common_passwords_path or None,
                settings.dictionary_words_path or None,
            )
        else:
            self.corpus = default_corpus()
        self.logger.debug("Corpus loaded: %r", self.corpus)

        self._analyzer = PasswordAnalyzer(self.corpus, settings.max_suggestions)

    @property
    def analyzer(self) -> PasswordAnalyzer:
        return self._analyzer

    # ------------------------------------------------------------------ #
    #  Strength Analysis
    # ------------------------------------------------------------------ #

    def analyze_password(self, password: str) -> ScanResult:
        """Analyse the strength of *password*.

        Returns:
            ScanResult with a strength finding, one finding per pattern
            and the suggestions as informational findings.
        """
        result = self._new_result()

        with self.logger.operation("analyze_password"):
            self.logger.info("Starting password analysis", length=len(password))
            try:
                with self.logger.timed("analysis"):
                    analysis = self._analyzer.analyze(password)
                report = self._risk_report(analysis)

                result.metadata = {"analysis": analysis.model_dump(mode="json")}
                self._add_strength_findings(result, analysis)
                for suggestion in analysis.suggestions:
                    result.add_finding(Finding(
                        severity=Severity.INFO,
                        title="Password Improvement Suggestion",
                        description=suggestion,
                    ))
                result.risk = self._risk(report, analysis)
                result.finalize(
                    f"Password analysis: {analysis.label.display}, "
                    f"effective entropy={analysis.effective_entropy_bits} bits, "
                    f"score={analysis.score}/100"
                )
                self.logger.info(
                    "Password analysis complete",
                    score=analysis.score,
                    label=analysis.label.value,
                )
            except Exception as exc:
                self._record_error(result, "Password analysis", exc)

        return result

    # ------------------------------------------------------------------ #
    #  Crack-Time Projection
    # ------------------------------------------------------------------ #

    def project_crack_time(
        self,
        password: str,
        profile_keys: Optional[list[str]] = None,
    ) -> ScanResult:
        """Project crack times for *password* across attacker profiles.

        Args:
            password: The password to analyse.
            profile_keys: Profile keys to include; the configured set
                when ``None``.
        """
        result = self._new_result()

        with self.logger.operation("project_crack_time"):
            self.logger.info("Starting crack-time projection", length=len(password))
            try:
                analysis = self._analyzer.analyze(password)
                bits = analysis.entropy.effective_bits
                profiles = self._profiles(profile_keys)
                projections = project(
                    bits, profiles, self.config.analyzer.horizons_seconds
                )

                result.metadata = {
                    "effective_entropy_bits": analysis.effective_entropy_bits,
                    "projections": [p.model_dump(mode="json") for p in projections],
                }
                for projection in projections:
                    result.add_finding(Finding(
                        severity=self._crack_severity(projection.crack_time),
                        title=f"Crack Time: {projection.profile.label}",
                        description=(
                            f"Average time to crack at "
                            f"{projection.profile.guesses_per_second:.0e} guesses/s: "
                            f"{projection.display}."
                        ),
                        evidence={
                            "profile": projection.profile.key,
                            "kind": projection.crack_time.kind.value,
                            "seconds": projection.crack_time.seconds,
                        },
                    ))
                result.risk = self._risk(self._risk_report(analysis), analysis)
                result.finalize(
                    f"Crack-time projection over {len(projections)} profile(s) "
                    f"at {analysis.effective_entropy_bits} effective bits"
                )
            except Exception as exc:
                self._record_error(result, "Crack-time projection", exc)

        return result

    # ------------------------------------------------------------------ #
    #  Risk Assessment
    # ------------------------------------------------------------------ #

    def assess_risk(self, password: str) -> ScanResult:
        """Numeric risk assessment of *password* under the configured rates."""
        result = self._new_result()

        with self.logger.operation("assess_risk"):
            self.logger.info("Starting risk assessment", length=len(password))
            try:
                analysis = self._analyzer.analyze(password)
                report = self._risk_report(analysis)

                result.metadata = {
                    "risk": report.model_dump(mode="json"),
                    "effective_entropy_bits": analysis.effective_entropy_bits,
                }
                result.add_finding(Finding(
                    severity=self._tier_severity(report.tier),
                    title=f"Compromise Risk: {report.tier.value.upper()}",
                    description=(
                        f"Risk score {report.score}/100. Offline success "
                        f"probability within one hour: {report.offline.p1h:.1%}; "
                        f"online within one week: {report.online.p1w:.1%}."
                    ),
                    evidence=report.model_dump(mode="json"),
                    references=_REFERENCES,
                ))
                result.risk = self._risk(report, analysis)
                result.finalize(
                    f"Risk assessment: {report.tier.value} ({report.score}/100), "
                    f"pattern multiplier x{report.pattern_multiplier:g}"
                )
                self.logger.info("Risk assessment complete", score=report.score)
            except Exception as exc:
                self._record_error(result, "Risk assessment", exc)

        return result

    # ------------------------------------------------------------------ #
    #  Narrative Report
    # ------------------------------------------------------------------ #

    def security_report(self, password: str) -> ScanResult:
        """Narrative security report for *password*."""
        result = self._new_result()

        with self.logger.operation("security_report"):
            self.logger.info("Starting security report", length=len(password))
            try:
                analysis = self._analyzer.analyze(password)
                report = build_security_report(analysis)

                result.metadata = {
                    "report": report.model_dump(mode="json"),
                    "transparency": TRANSPARENCY_LABEL,
                }
                result.add_finding(Finding(
                    severity=self._narrative_severity(report.risk.tier),
                    title=f"Risk Classification: {report.risk.tier.value}",
                    description=report.executive_summary,
                    evidence={"confidence": report.risk.confidence},
                    recommendation=report.recommendations[0],
                    references=_REFERENCES,
                ))
                self._add_strength_findings(result, analysis)
                result.risk = self._risk(self._risk_report(analysis), analysis)
                result.finalize(
                    f"Security report: {report.risk.tier.value} risk "
                    f"({report.risk.confidence}% confidence)"
                )
            except Exception as exc:
                self._record_error(result, "Security report", exc)

        return result

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate_password(self, length: Optional[int] = None) -> str:
        """Generate a strong password.

        Raises:
            RandomSourceUnavailableError: If the OS CSPRNG fails.
        """
        target = length if length is not None else self.config.analyzer.generator_length
        with self.logger.operation("generate_password"):
            password = generate_strong_password(target)
            self.logger.info("Generated password", length=len(password))
        return password

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _new_result() -> ScanResult:
        return ScanResult(tool_name=TOOL_NAME, target=PASSWORD_TARGET)

    def _risk_report(self, analysis: PasswordAnalysis) -> RiskReport:
        settings = self.config.analyzer
        return compute_risk(
            analysis.entropy.effective_bits,
            online_rate=settings.online_guesses_per_second,
            offline_rate=settings.offline_guesses_per_second,
            pattern_multiplier=settings.pattern_multiplier * pattern_multiplier(analysis.findings),
        )

    def _profiles(self, keys: Optional[list[str]]) -> list[CrackProfile]:
        wanted = keys if keys else self.config.analyzer.crack_profiles
        unknown = [k for k in wanted if k not in PROFILE_KEYS]
        if unknown:
            raise ValueError(
                f"Unknown crack profile(s): {', '.join(unknown)}. "
                f"Known: {', '.join(PROFILE_KEYS)}"
            )
        return [get_profile(k) for k in wanted]

    def _add_strength_findings(self, result: ScanResult, analysis: PasswordAnalysis) -> None:
        result.add_finding(Finding(
            severity=self._strength_severity(analysis.label),
            title=f"Password Strength: {analysis.label.display}",
            description=(
                f"Baseline entropy: {analysis.entropy_bits} bits. "
                f"Effective entropy: {analysis.effective_entropy_bits} bits. "
                f"Character set: {analysis.charset_size}. "
                f"Length: {analysis.length}. Score: {analysis.score}/100."
            ),
            evidence={
                "baseline_bits": analysis.entropy_bits,
                "effective_bits": analysis.effective_entropy_bits,
                "charset_size": analysis.charset_size,
                "length": analysis.length,
                "score": analysis.score,
                "label": analysis.label.value,
            },
            references=_REFERENCES,
        ))
        for pattern in analysis.findings:
            result.add_finding(Finding(
                severity=_PATTERN_SEVERITY[pattern.kind],
                title=f"Pattern Detected: {pattern.label}",
                description=(
                    f"{pattern.warning} Entropy penalty: "
                    f"{pattern.penalty_bits:.1f} bits."
                ),
            ))

    @staticmethod
    def _risk(report: RiskReport, analysis: PasswordAnalysis) -> Risk:
        return Risk(score=float(report.score), factors=analysis.patterns)

    def _record_error(self, result: ScanResult, label: str, exc: Exception) -> None:
        self.logger.exception("%s failed: %s", label, type(exc).__name__)
        result.add_finding(Finding(
            severity=Severity.MEDIUM,
            title=f"{label} Error",
            description=f"Error during {label.lower()}: {exc}",
        ))
        result.finalize(f"Error: {exc}")

    @staticmethod
    def _strength_severity(label: StrengthLabel) -> Severity:
        mapping = {
            StrengthLabel.VERY_WEAK: Severity.CRITICAL,
            StrengthLabel.WEAK: Severity.HIGH,
            StrengthLabel.FAIR: Severity.MEDIUM,
            StrengthLabel.STRONG: Severity.LOW,
            StrengthLabel.VERY_STRONG: Severity.INFO,
        }
        return mapping.get(label, Severity.MEDIUM)

    @staticmethod
    def _tier_severity(tier: RiskTier) -> Severity:
        mapping = {
            RiskTier.HIGH: Severity.HIGH,
            RiskTier.MEDIUM: Severity.MEDIUM,
            RiskTier.LOW: Severity.LOW,
        }
        return mapping.get(tier, Severity.MEDIUM)

    @staticmethod
    def _narrative_severity(tier: NarrativeRisk) -> Severity:
        mapping = {
            NarrativeRisk.CRITICAL: Severity.CRITICAL,
            NarrativeRisk.HIGH: Severity.HIGH,
            NarrativeRisk.MODERATE: Severity.MEDIUM,
            NarrativeRisk.LOW: Severity.LOW,
        }
        return mapping.get(tier, Severity.MEDIUM)

    @staticmethod
    def _crack_severity(crack_time: CrackTime) -> Severity:
        if crack_time.is_intractable:
            return Severity.INFO
        seconds = crack_time.seconds or 0.0
        if seconds < HOUR:
            return Severity.CRITICAL
        if seconds < 30 * DAY:
            return Severity.HIGH
        if seconds < 100 * YEAR:
            return Severity.MEDIUM
        return Severity.LOW


_PATTERN_SEVERITY: dict[PatternKind, Severity] = {
    PatternKind.COMMON_PASSWORD: Severity.CRITICAL,
    PatternKind.DICTIONARY_WORDS: Severity.HIGH,
    PatternKind.SEQUENTIAL_RUN: Severity.MEDIUM,
    PatternKind.KEYBOARD_PATTERN: Severity.MEDIUM,
    PatternKind.REPEATED_CHARS: Severity.MEDIUM,
    PatternKind.YEAR_PATTERN: Severity.LOW,
    PatternKind.LEET_SUBSTITUTION: Severity.LOW,
}
