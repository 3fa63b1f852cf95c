"""
Warden Core Module
===================

Data models for the Warden password analysis pipeline. The engine facade
lives in :mod:`warden.core.engine`.
"""

from warden.core.models import (
    CharacterClassSet,
    CrackProfile,
    CrackProjection,
    CrackTime,
    CrackTimeKind,
    EntropyBreakdown,
    HorizonProbabilities,
    NarrativeRisk,
    PasswordAnalysis,
    PatternFinding,
    PatternKind,
    RiskClassification,
    RiskReport,
    RiskTier,
    SecurityReport,
    StrengthLabel,
)

__all__ = [
    "CharacterClassSet",
    "CrackProfile",
    "CrackProjection",
    "CrackTime",
    "CrackTimeKind",
    "EntropyBreakdown",
    "HorizonProbabilities",
    "NarrativeRisk",
    "PasswordAnalysis",
    "PatternFinding",
    "PatternKind",
    "RiskClassification",
    "RiskReport",
    "RiskTier",
    "SecurityReport",
    "StrengthLabel",
]
