"""
Warden Analyzers
=================

Pipeline stages for password analysis. Each module is a pure function
set (or a small stateless class) over one password or one analysis.
"""

from warden.analyzers.generator import (
    RandomSourceUnavailableError,
    generate_strong_password,
)
from warden.analyzers.password_analyzer import PasswordAnalyzer
from warden.analyzers.patterns import PatternDetector
from warden.analyzers.security_report import build_security_report

__all__ = [
    "PasswordAnalyzer",
    "PatternDetector",
    "RandomSourceUnavailableError",
    "build_security_report",
    "generate_strong_password",
]
