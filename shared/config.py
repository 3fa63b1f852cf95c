"""
Warden Configuration
=====================

Dataclass settings loaded from TOML. Two sections are read:

``[global]``    logging and banner settings (:class:`GlobalConfig`)
``[analyzer]``  corpus paths, attacker model and presentation
                (:class:`AnalyzerConfig`)

Lookup order for the file: the explicit path, then ``$WARDEN_CONFIG``,
then ``config.toml`` in the working directory. With none present the
defaults apply. Keys missing from a section keep their defaults and
unknown keys are ignored.

References:
    - Wiggins, A. (2011). The Twelve-Factor App, III. Config.
      https://12factor.net/config
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import math
import os
import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_ENV_VAR = "WARDEN_CONFIG"
DEFAULT_CONFIG_NAME = "config.toml"

OUTPUT_FORMATS = ("console", "json")


@dataclass(slots=True)
class AnalyzerConfig:
    """Analysis pipeline settings.

    Empty corpus paths select the word lists bundled in
    ``warden.corpus``. The two guess rates drive the numeric risk
    score; ``pattern_multiplier`` scales them on top of the multiplier
    derived from detected patterns.
    """

    common_passwords_path: str = ""
    dictionary_words_path: str = ""

    online_guesses_per_second: float = 100.0
    offline_guesses_per_second: float = 1e9
    pattern_multiplier: float = 1.0
    crack_profiles: list[str] = field(
        default_factory=lambda: ["online", "bot", "gpu", "farm", "nation"]
    )
    horizons_seconds: list[float] = field(
        default_factory=lambda: [3600.0, 86400.0, 604800.0, 31557600.0]
    )

    max_suggestions: int = 10
    generator_length: int = 16
    output_format: str = "console"

    def __post_init__(self) -> None:
        for name in ("common_passwords_path", "dictionary_words_path", "output_format"):
            value = getattr(self, name)
            _require(isinstance(value, str), name, "must be a string", value)
        for name in ("online_guesses_per_second", "offline_guesses_per_second", "pattern_multiplier"):
            value = getattr(self, name)
            _require(
                _is_number(value) and math.isfinite(value) and value > 0,
                name, "must be a positive number", value,
            )
        _require(
            isinstance(self.crack_profiles, list)
            and all(isinstance(k, str) for k in self.crack_profiles),
            "crack_profiles", "must be a list of strings", self.crack_profiles,
        )
        _require(
            isinstance(self.horizons_seconds, list)
            and all(_is_number(h) and h > 0 for h in self.horizons_seconds),
            "horizons_seconds", "must hold positive numbers", self.horizons_seconds,
        )
        for name in ("max_suggestions", "generator_length"):
            value = getattr(self, name)
            _require(_is_int(value) and value >= 0, name, "must be a non-negative integer", value)
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"analyzer.output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}"
            )


@dataclass(slots=True)
class GlobalConfig:
    """Logging and banner settings."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"

    def __post_init__(self) -> None:
        for name in ("log_level", "log_file", "version"):
            value = getattr(self, name)
            _require(isinstance(value, str), name, "must be a string", value, "global")
        for name in ("log_json", "debug"):
            value = getattr(self, name)
            _require(isinstance(value, bool), name, "must be true or false", value, "global")


@dataclass(slots=True)
class WardenConfig:
    """Complete configuration tree.

    Usage::

        config = WardenConfig.load()              # lookup order above
        config = WardenConfig.load("ci.toml")     # explicit file
        config.analyzer.offline_guesses_per_second
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> WardenConfig:
        """Read configuration from TOML.

        Raises:
            FileNotFoundError: If *path* (or ``$WARDEN_CONFIG``) names a
                file that does not exist.
            ValueError: If a setting is out of range or the file is not
                valid TOML.
        """
        source = cls._resolve(path)
        if source is None:
            return cls()
        try:
            with open(source, "rb") as fh:
                raw = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid TOML in {source}: {exc}") from exc
        return cls.from_mapping(raw)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> WardenConfig:
        """Build a config from parsed TOML (``global`` / ``analyzer`` tables)."""
        return cls(
            global_settings=_section(GlobalConfig, raw.get("global", {}), "global"),
            analyzer=_section(AnalyzerConfig, raw.get("analyzer", {}), "analyzer"),
        )

    @staticmethod
    def _resolve(path: str | Path | None) -> Path | None:
        explicit = path if path is not None else os.environ.get(CONFIG_ENV_VAR)
        if explicit:
            candidate = Path(explicit)
            if not candidate.is_file():
                raise FileNotFoundError(f"Configuration file not found: {candidate}")
            return candidate
        local = Path.cwd() / DEFAULT_CONFIG_NAME
        return local if local.is_file() else None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _section(kind: type, data: Any, table: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"[{table}] must be a table, got {data!r}")
    known = {f.name for f in fields(kind)}
    return kind(**{k: v for k, v in data.items() if k in known})


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require(ok: bool, name: str, rule: str, value: Any, table: str = "analyzer") -> None:
    if not ok:
        raise ValueError(f"{table}.{name} {rule}, got {value!r}")
