"""Symptom catalog and descriptive summary statistics for a log window.

These numbers feed the summary cards and the doctor report: how often each
symptom was logged and how severe it was, average mood/sleep, and how
consistently the journal was kept over a date range.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from src.analytics.base import DailyLog, PeriodFlow
from src.analytics.cycle_stats import round_half_up

# Built-in symptoms.  Custom symptoms fall back to their raw id for display.
SYMPTOMS: list[dict[str, str]] = [
    # Vasomotor
    {"id": "hot_flashes", "name": "Hot Flashes", "category": "vasomotor", "icon": "fire"},
    {"id": "night_sweats", "name": "Night Sweats", "category": "vasomotor", "icon": "weather-night"},
    # Sleep
    {"id": "sleep_disturbances", "name": "Sleep Disturbances", "category": "sleep", "icon": "sleep-off"},
    # Mood
    {"id": "mood_swings", "name": "Mood Swings", "category": "mood", "icon": "emoticon-confused"},
    {"id": "anxiety", "name": "Anxiety", "category": "mood", "icon": "alert-circle"},
    {"id": "irritability", "name": "Irritability", "category": "mood", "icon": "emoticon-angry"},
    {"id": "depression", "name": "Depression", "category": "mood", "icon": "emoticon-sad"},
    # Cognitive
    {"id": "brain_fog", "name": "Brain Fog", "category": "cognitive", "icon": "cloud"},
    {"id": "fatigue", "name": "Fatigue", "category": "cognitive", "icon": "battery-low"},
    {"id": "headaches", "name": "Headaches", "category": "cognitive", "icon": "head-alert"},
    # Physical
    {"id": "joint_pain", "name": "Joint Pain", "category": "physical", "icon": "bone"},
    {"id": "muscle_aches", "name": "Muscle Aches", "category": "physical", "icon": "arm-flex"},
    {"id": "weight_changes", "name": "Weight Changes", "category": "physical", "icon": "scale-bathroom"},
    {"id": "bloating", "name": "Bloating", "category": "physical", "icon": "circle-expand"},
    # Sexual / reproductive
    {"id": "low_libido", "name": "Low Libido", "category": "sexual", "icon": "heart-off"},
    {"id": "vaginal_dryness", "name": "Vaginal Dryness", "category": "sexual", "icon": "water-off"},
]

_SYMPTOM_NAMES = {s["id"]: s["name"] for s in SYMPTOMS}


def symptom_name(symptom_id: str) -> str:
    """Display name for a symptom id, or the id itself if it is not built in."""
    return _SYMPTOM_NAMES.get(symptom_id, symptom_id)


@dataclass
class SymptomStat:
    """How often a symptom was logged and how severe it was.

    Attributes:
        symptom_id:   Symptom identifier.
        count:        Number of logs containing the symptom.
        avg_severity: Mean severity across those logs.
        max_severity: Highest severity logged.
    """

    symptom_id: str
    count: int
    avg_severity: float
    max_severity: int

    @property
    def name(self) -> str:
        return symptom_name(self.symptom_id)


@dataclass
class MoodStats:
    """Averages over logs that have at least one mood value.

    Each average skips logs where that particular value is missing.
    """

    avg_overall: float | None = None
    avg_anxiety: float | None = None
    avg_energy: float | None = None
    avg_sleep_hours: float | None = None
    avg_sleep_quality: float | None = None
    log_count: int = 0


@dataclass
class LogSummary:
    """Journal coverage for a date range.

    Attributes:
        total_days:    Calendar days in the range, inclusive.
        logged_days:   Number of logs supplied.
        logging_rate:  logged_days / total_days as a rounded percentage.
        period_days:   Logs with any flow other than none.
        top_symptoms:  Display names of the most frequent symptoms.
        mood:          Mood and sleep averages.
    """

    total_days: int
    logged_days: int
    logging_rate: int
    period_days: int
    top_symptoms: list[str] = field(default_factory=list)
    mood: MoodStats = field(default_factory=MoodStats)


def get_symptom_stats(logs: Sequence[DailyLog]) -> list[SymptomStat]:
    """Per-symptom frequency and severity, most frequent first."""
    severities: dict[str, list[int]] = {}
    for log in logs:
        for entry in log.symptoms:
            severities.setdefault(entry.symptom_id, []).append(entry.severity)

    stats = [
        SymptomStat(
            symptom_id=symptom_id,
            count=len(values),
            avg_severity=sum(values) / len(values),
            max_severity=max(values),
        )
        for symptom_id, values in severities.items()
    ]
    stats.sort(key=lambda s: s.count, reverse=True)
    return stats


def _avg(values: list[float]) -> float | None:
    return sum(values) / len(values) if values else None


def get_mood_stats(logs: Sequence[DailyLog]) -> MoodStats:
    with_mood = [
        log for log in logs
        if log.mood_overall is not None
        or log.mood_anxiety is not None
        or log.mood_energy is not None
    ]

    def present(attr: str) -> list[float]:
        return [getattr(log, attr) for log in with_mood if getattr(log, attr) is not None]

    return MoodStats(
        avg_overall=_avg(present("mood_overall")),
        avg_anxiety=_avg(present("mood_anxiety")),
        avg_energy=_avg(present("mood_energy")),
        avg_sleep_hours=_avg(present("sleep_hours")),
        avg_sleep_quality=_avg(present("sleep_quality")),
        log_count=len(with_mood),
    )


def build_log_summary(
    logs: Sequence[DailyLog],
    start_date: date,
    end_date: date,
    top_n: int = 3,
) -> LogSummary:
    """Summarise journal coverage between ``start_date`` and ``end_date``.

    Args:
        logs:       Logs already restricted to the range by the caller.
        start_date: First day of the range.
        end_date:   Last day of the range (inclusive).
        top_n:      How many symptom names to list.

    Raises:
        ValueError: If ``end_date`` is before ``start_date``.
    """
    if end_date < start_date:
        raise ValueError(f"end_date {end_date} is before start_date {start_date}")

    total_days = (end_date - start_date).days + 1
    symptom_stats = get_symptom_stats(logs)

    return LogSummary(
        total_days=total_days,
        logged_days=len(logs),
        logging_rate=round_half_up(len(logs) / total_days * 100),
        period_days=sum(1 for log in logs if log.period_flow != PeriodFlow.none),
        top_symptoms=[s.name for s in symptom_stats[:top_n]],
        mood=get_mood_stats(logs),
    )
