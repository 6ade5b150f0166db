"""Load, validate, and hot-reload the analytics configuration.

The config lives in ``analytics_config.yaml`` alongside this module.  It is
loaded once on first use and cached.  Call ``reload_analytics_config()`` to
re-read from disk after the thresholds change without a restart.

Usage::

    from src.analytics.config_loader import get_analytics_config

    config = get_analytics_config()
    config.min_logs                      # 7
    config.correlation.min_correlation   # 0.4
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger("journal.analytics.config")

# Path to the YAML file sitting next to this module
_CONFIG_PATH = Path(__file__).parent / "analytics_config.yaml"

_PHASE_NAMES = ("menstrual", "follicular", "ovulation", "luteal")


# ---------------------------------------------------------------------------
# Typed config sections
# ---------------------------------------------------------------------------


@dataclass
class CycleStatsConfig:
    """Settings for cycle length statistics."""

    max_periods: int = 12


@dataclass
class CyclePhaseConfig:
    """Cycle-day ranges for each phase plus phase-insight thresholds.

    ``ranges`` maps phase name → inclusive (first_day, last_day).
    """

    ranges: dict[str, tuple[int, int]]
    max_cycle_day: int = 35
    min_days_per_phase: int = 2
    peak_ratio: float = 1.5


@dataclass
class CycleVariabilityConfig:
    min_cycle_lengths: int = 3
    max_variation_days: float = 7.0


@dataclass
class CorrelationConfig:
    """Noise floors for symptom co-occurrence correlation."""

    min_co_occurrences: int = 3
    min_symptom_total: int = 3
    min_correlation: float = 0.4
    max_results: int = 10


@dataclass
class DayOfWeekConfig:
    peak_ratio: float = 1.5
    min_peak_count: int = 3


@dataclass
class SleepConfig:
    """Sleep/symptom correlation thresholds."""

    min_logs: int = 5
    good_quality_min: int = 4
    poor_quality_max: int = 2
    min_group_size: int = 3
    symptom_ratio: float = 1.3
    low_sleep_hours: float = 6.0
    min_low_sleep_logs: int = 3
    fatigue_symptom_id: str = "fatigue"
    fatigue_share: float = 0.5


@dataclass
class MoodConfig:
    """Mood variability and anxiety/mood thresholds."""

    min_logs: int = 7
    max_std_dev: float = 2.5
    high_anxiety_min: int = 7
    min_high_anxiety_logs: int = 3
    mood_drop: float = 1.5


@dataclass
class AnalyticsConfig:
    """Complete, validated analytics configuration.

    This is the single in-memory representation of analytics_config.yaml.
    All engines read their thresholds from this object.

    Attributes:
        version:          Config schema version string.
        min_logs:         Data floor for pattern and trend analysis.
        cycle_stats:      Cycle statistics window.
        cycle_phases:     Phase day ranges and phase-insight thresholds.
        cycle_variability: Cycle length variability thresholds.
        correlation:      Symptom co-occurrence floors.
        day_of_week:      Weekday clustering thresholds.
        sleep:            Sleep correlation thresholds.
        mood:             Mood pattern thresholds.
    """

    version: str
    min_logs: int
    cycle_stats: CycleStatsConfig
    cycle_phases: CyclePhaseConfig
    cycle_variability: CycleVariabilityConfig
    correlation: CorrelationConfig
    day_of_week: DayOfWeekConfig
    sleep: SleepConfig
    mood: MoodConfig
    _raw: dict = field(default_factory=dict, repr=False)

    def phase_range(self, phase: str) -> tuple[int, int]:
        """Return the inclusive cycle-day range for a phase name.

        Raises:
            KeyError: If the phase is not configured.
        """
        return self.cycle_phases.ranges[phase]


# ---------------------------------------------------------------------------
# Loader / validation
# ---------------------------------------------------------------------------


class ConfigValidationError(ValueError):
    """Raised when analytics_config.yaml fails validation."""


def _load_yaml(path: Path) -> dict:
    """Read and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the YAML is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Analytics config not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            return yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"YAML parse error in {path}: {exc}") from exc


def _validate_and_build(raw: dict) -> AnalyticsConfig:
    """Validate the raw YAML dict and construct an AnalyticsConfig.

    Missing sections fall back to the dataclass defaults.  Every problem is
    collected and reported together.

    Args:
        raw: Parsed YAML dict.

    Returns:
        Validated AnalyticsConfig instance.

    Raises:
        ConfigValidationError: If any value is of the wrong type or out of range.
    """
    errors: list[str] = []

    def _number(section: dict, key: str, default: Any, path: str, cast=float) -> Any:
        if key not in section:
            return default
        try:
            value = cast(section[key])
        except (TypeError, ValueError):
            errors.append(f"{path}.{key} must be a number, got {section[key]!r}")
            return default
        if value < 0:
            errors.append(f"{path}.{key} = {value} must not be negative")
        return value

    def _section(name: str) -> dict:
        value = raw.get(name) or {}
        if not isinstance(value, dict):
            errors.append(f"'{name}' must be a mapping")
            return {}
        return value

    version = str(raw.get("version", "1.0"))
    min_logs = _number(raw, "min_logs", 7, "root", int)

    # ── Cycle statistics ──
    cs_raw = _section("cycle_stats")
    cycle_stats = CycleStatsConfig(
        max_periods=_number(cs_raw, "max_periods", 12, "cycle_stats", int),
    )
    if cycle_stats.max_periods < 2:
        errors.append("cycle_stats.max_periods must be at least 2")

    # ── Cycle phases ──
    cp_raw = _section("cycle_phases")
    defaults = {"menstrual": (1, 5), "follicular": (6, 13), "ovulation": (14, 16), "luteal": (17, 35)}
    ranges: dict[str, tuple[int, int]] = {}
    for phase in _PHASE_NAMES:
        bounds = cp_raw.get(phase, defaults[phase])
        try:
            first, last = (int(b) for b in bounds)
        except (TypeError, ValueError):
            errors.append(f"cycle_phases.{phase} must be a [first_day, last_day] pair")
            continue
        if first < 1 or last < first:
            errors.append(f"cycle_phases.{phase} = [{first}, {last}] is not a valid day range")
        ranges[phase] = (first, last)
    cycle_phases = CyclePhaseConfig(
        ranges=ranges,
        max_cycle_day=_number(cp_raw, "max_cycle_day", 35, "cycle_phases", int),
        min_days_per_phase=_number(cp_raw, "min_days_per_phase", 2, "cycle_phases", int),
        peak_ratio=_number(cp_raw, "peak_ratio", 1.5, "cycle_phases"),
    )

    # ── Cycle variability ──
    cv_raw = _section("cycle_variability")
    cycle_variability = CycleVariabilityConfig(
        min_cycle_lengths=_number(cv_raw, "min_cycle_lengths", 3, "cycle_variability", int),
        max_variation_days=_number(cv_raw, "max_variation_days", 7.0, "cycle_variability"),
    )

    # ── Correlation ──
    co_raw = _section("correlation")
    correlation = CorrelationConfig(
        min_co_occurrences=_number(co_raw, "min_co_occurrences", 3, "correlation", int),
        min_symptom_total=_number(co_raw, "min_symptom_total", 3, "correlation", int),
        min_correlation=_number(co_raw, "min_correlation", 0.4, "correlation"),
        max_results=_number(co_raw, "max_results", 10, "correlation", int),
    )
    if correlation.min_correlation > 1.0:
        errors.append(
            f"correlation.min_correlation = {correlation.min_correlation} is out of range [0.0, 1.0]"
        )

    # ── Day of week ──
    dw_raw = _section("day_of_week")
    day_of_week = DayOfWeekConfig(
        peak_ratio=_number(dw_raw, "peak_ratio", 1.5, "day_of_week"),
        min_peak_count=_number(dw_raw, "min_peak_count", 3, "day_of_week", int),
    )

    # ── Sleep ──
    sl_raw = _section("sleep")
    sleep = SleepConfig(
        min_logs=_number(sl_raw, "min_logs", 5, "sleep", int),
        good_quality_min=_number(sl_raw, "good_quality_min", 4, "sleep", int),
        poor_quality_max=_number(sl_raw, "poor_quality_max", 2, "sleep", int),
        min_group_size=_number(sl_raw, "min_group_size", 3, "sleep", int),
        symptom_ratio=_number(sl_raw, "symptom_ratio", 1.3, "sleep"),
        low_sleep_hours=_number(sl_raw, "low_sleep_hours", 6.0, "sleep"),
        min_low_sleep_logs=_number(sl_raw, "min_low_sleep_logs", 3, "sleep", int),
        fatigue_symptom_id=str(sl_raw.get("fatigue_symptom_id", "fatigue")),
        fatigue_share=_number(sl_raw, "fatigue_share", 0.5, "sleep"),
    )
    if sleep.poor_quality_max >= sleep.good_quality_min:
        errors.append("sleep.poor_quality_max must be below sleep.good_quality_min")

    # ── Mood ──
    md_raw = _section("mood")
    mood = MoodConfig(
        min_logs=_number(md_raw, "min_logs", 7, "mood", int),
        max_std_dev=_number(md_raw, "max_std_dev", 2.5, "mood"),
        high_anxiety_min=_number(md_raw, "high_anxiety_min", 7, "mood", int),
        min_high_anxiety_logs=_number(md_raw, "min_high_anxiety_logs", 3, "mood", int),
        mood_drop=_number(md_raw, "mood_drop", 1.5, "mood"),
    )

    if errors:
        raise ConfigValidationError(
            f"analytics_config.yaml has {len(errors)} validation error(s):\n"
            + "\n".join(f"  • {e}" for e in errors)
        )

    return AnalyticsConfig(
        version=version,
        min_logs=min_logs,
        cycle_stats=cycle_stats,
        cycle_phases=cycle_phases,
        cycle_variability=cycle_variability,
        correlation=correlation,
        day_of_week=day_of_week,
        sleep=sleep,
        mood=mood,
        _raw=raw,
    )


def load_analytics_config(path: Path | None = None) -> AnalyticsConfig:
    """Load and validate the analytics config from disk.

    Args:
        path: Override path to YAML. Uses the bundled analytics_config.yaml by default.

    Returns:
        Validated AnalyticsConfig instance.
    """
    target = path or _CONFIG_PATH
    raw = _load_yaml(target)
    config = _validate_and_build(raw)
    logger.info("Loaded analytics config v%s from %s", config.version, target)
    return config


# ---------------------------------------------------------------------------
# Global singleton with hot-reload support
# ---------------------------------------------------------------------------

_config: AnalyticsConfig | None = None
_config_lock = threading.Lock()


def get_analytics_config() -> AnalyticsConfig:
    """Return the global AnalyticsConfig singleton, loading it on first call.

    Thread-safe.  Use ``reload_analytics_config()`` to refresh after YAML changes.
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:  # double-checked locking
                _config = load_analytics_config()
    return _config


def reload_analytics_config(path: Path | None = None) -> AnalyticsConfig:
    """Reload the analytics config from disk and replace the global singleton.

    If validation fails, the old config is retained and the error is re-raised.

    Args:
        path: Override path to YAML. Defaults to bundled analytics_config.yaml.

    Returns:
        The newly loaded AnalyticsConfig.

    Raises:
        ConfigValidationError: If the new config is invalid.
        FileNotFoundError:     If the config file is missing.
    """
    global _config
    new_config = load_analytics_config(path)  # validate before acquiring lock
    with _config_lock:
        old_version = _config.version if _config else "none"
        _config = new_config
    logger.info(
        "Reloaded analytics config: %s → %s",
        old_version,
        new_config.version,
    )
    return new_config
