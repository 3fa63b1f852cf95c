"""
Warden Result Models
=====================

Envelope models every engine operation returns: a :class:`ScanResult`
holding :class:`Finding` objects and an optional :class:`Risk` summary.
The analysis payload itself travels in ``ScanResult.metadata`` as the
JSON dump of the relevant core model.

Severity follows the OWASP rating vocabulary; the finding layout borrows
from SARIF ``result`` objects.

References:
    - OWASP Risk Rating Methodology.
      https://owasp.org/www-community/OWASP_Risk_Rating_Methodology
    - SARIF v2.1.0 Specification (OASIS, 2020), section 3.27.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Severity(str, Enum):
    """How much a finding matters for the password under test."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def rank(self) -> int:
        """0 for CRITICAL up to 4 for INFO."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {sev: i for i, sev in enumerate(Severity)}


class RiskLevel(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    NEGLIGIBLE = "NEGLIGIBLE"

    @classmethod
    def from_score(cls, score: float) -> RiskLevel:
        """Level for a 0-100 score (90 / 70 / 40 / 10 lower bounds)."""
        for floor, level in _RISK_FLOORS:
            if score >= floor:
                return level
        return cls.NEGLIGIBLE


_RISK_FLOORS = (
    (90, RiskLevel.CRITICAL),
    (70, RiskLevel.HIGH),
    (40, RiskLevel.MEDIUM),
    (10, RiskLevel.LOW),
)


class Finding(BaseModel):
    """One observation about a password.

    Attributes:
        severity: How much the observation matters.
        title: Short heading, e.g. ``"Pattern Detected: Year pattern"``.
        description: Full sentence(s) for the reader.
        evidence: Structured supporting values (JSON-serialisable).
        recommendation: What to do about it, when there is something to do.
        references: Citations backing the finding.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    severity: Severity
    title: str = Field(min_length=1, max_length=256)
    description: str = Field(min_length=1)
    evidence: dict[str, Any] = Field(default_factory=dict)
    recommendation: str = ""
    references: list[str] = Field(default_factory=list)


class Risk(BaseModel):
    """Numeric risk with its derived level and contributing factors."""

    score: float = Field(ge=0.0, le=100.0)
    level: Optional[RiskLevel] = None
    factors: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _fill_level(self) -> Risk:
        if self.level is None:
            self.level = RiskLevel.from_score(self.score)
        return self


class ScanResult(BaseModel):
    """Outcome of a single engine operation.

    Attributes:
        tool_name: Producing tool.
        target: Placeholder for what was analysed; never the password.
        start_time: UTC start of the operation.
        end_time: UTC end, set by :meth:`finalize`.
        findings: Findings in the order they were added.
        risk: Overall risk, when the operation computes one.
        summary: One-line outcome.
        metadata: JSON dump of the operation's core result. Empty when
            the operation failed.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool_name: str = Field(min_length=1)
    target: str = Field(min_length=1)
    start_time: datetime = Field(default_factory=_now)
    end_time: Optional[datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    risk: Optional[Risk] = None
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    @property
    def severity_counts(self) -> dict[str, int]:
        """Findings per severity, every severity present (zero included)."""
        tally = Counter(f.severity for f in self.findings)
        return {sev.value: tally.get(sev, 0) for sev in Severity}

    @property
    def highest_severity(self) -> Optional[Severity]:
        if not self.findings:
            return None
        return min((f.severity for f in self.findings), key=lambda s: s.rank)

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def add_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

    def finalize(self, summary: Optional[str] = None) -> ScanResult:
        """Stamp ``end_time`` and set the summary.

        Without *summary*, one is built from the non-zero severity counts.
        """
        self.end_time = _now()
        if summary is None:
            nonzero = ", ".join(f"{k}: {v}" for k, v in self.severity_counts.items() if v)
            summary = f"{self.finding_count} finding(s) ({nonzero or 'none'})"
        self.summary = summary
        return self
