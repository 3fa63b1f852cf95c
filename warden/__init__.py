"""
Warden -- Password Strength & Crack-Risk Analyzer
===================================================

Estimates the real-world strength of a password: brute-force and
effective entropy, weakening patterns, a 0-100 score, crack-time and
compromise-probability projections, two risk classifications, ordered
remediation advice, and a CSPRNG-backed strong-password generator.

Modules:
    - warden.api: Public library functions
    - warden.corpus: Indexed common-password and dictionary word sets
    - warden.analyzers: Individual pipeline stages
    - warden.core.models: Pydantic data models
    - warden.core.engine: Facade producing ScanResult objects
    - warden.output: Console and JSON report output
    - warden.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Bonneau, J. (2012). The Science of Guessing: Analyzing an
      Anonymized Corpus of 70 Million Passwords. IEEE S&P.
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

__version__ = "1.0.0"
__tool_name__ = "warden"

from warden.analyzers.generator import RandomSourceUnavailableError
from warden.api import (
    analyze,
    compute_risk,
    estimate_crack_time,
    format_crack_time,
    format_duration,
    generate_strong_password,
)
from warden.corpus import Corpus, default_corpus, load_corpus

__all__ = [
    "Corpus",
    "RandomSourceUnavailableError",
    "analyze",
    "compute_risk",
    "default_corpus",
    "estimate_crack_time",
    "format_crack_time",
    "format_duration",
    "generate_strong_password",
    "load_corpus",
]
