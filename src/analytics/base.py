"""Canonical record types for the journal analytics engines.

The persistence layer (or the HTTP boundary in ``src.models.journal``)
validates incoming data once and hands the engines these plain records.
The engines only read them; every analysis returns fresh output objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class PeriodFlow(str, Enum):
    none = "none"
    spotting = "spotting"
    light = "light"
    medium = "medium"
    heavy = "heavy"


class CyclePhase(str, Enum):
    menstrual = "menstrual"
    follicular = "follicular"
    ovulation = "ovulation"
    luteal = "luteal"


# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------


@dataclass
class SymptomEntry:
    """One symptom logged on a day, with severity 1–5."""

    symptom_id: str
    severity: int = 1


@dataclass
class DailyLog:
    """A single journal entry.  One per calendar date.

    Attributes:
        date:          Calendar date of the entry (unique key).
        period_flow:   Menstrual flow logged for the day.
        mood_overall:  Overall mood 1–10, None if not logged.
        mood_anxiety:  Anxiety 1–10, None if not logged.
        mood_energy:   Energy 1–10, None if not logged.
        sleep_hours:   Hours slept the previous night.
        sleep_quality: Sleep quality 1–5.
        symptoms:      Symptoms logged that day (ids unique within the log).
    """

    date: date
    period_flow: PeriodFlow = PeriodFlow.none
    mood_overall: int | None = None
    mood_anxiety: int | None = None
    mood_energy: int | None = None
    sleep_hours: float | None = None
    sleep_quality: int | None = None
    symptoms: list[SymptomEntry] = field(default_factory=list)

    @property
    def symptom_count(self) -> int:
        return len(self.symptoms)

    @property
    def symptom_ids(self) -> set[str]:
        return {s.symptom_id for s in self.symptoms}

    def has_symptom(self, symptom_id: str) -> bool:
        return any(s.symptom_id == symptom_id for s in self.symptoms)


@dataclass
class CyclePeriod:
    """A contiguous menstrual interval.

    ``end_date`` is None while the period is still ongoing.  ``length`` is
    derived from the dates when the period is closed and no explicit length
    was stored.

    Attributes:
        start_date: First day of bleeding.
        end_date:   Last day of bleeding, None for the current open period.
        length:     Days from start to end inclusive, None while open.
    """

    start_date: date
    end_date: date | None = None
    length: int | None = None

    def __post_init__(self) -> None:
        if self.length is None and self.end_date is not None:
            self.length = (self.end_date - self.start_date).days + 1

    @property
    def is_open(self) -> bool:
        return self.end_date is None

    def length_as_of(self, as_of: date) -> int:
        """Return the period length, treating an open period as ending on ``as_of``."""
        if self.length is not None:
            return self.length
        return (as_of - self.start_date).days + 1


# ---------------------------------------------------------------------------
# Output records
# ---------------------------------------------------------------------------


@dataclass
class CycleStats:
    """Cycle and period length statistics.

    Attributes:
        average_cycle_length:  Rounded mean gap between period starts, None
                               with fewer than 2 periods.
        average_period_length: Rounded mean period length, None if no closed
                               period has a length.
        cycle_lengths:         Gaps between consecutive start dates, in the
                               same order as ``cycles``.
        period_lengths:        Lengths of closed periods, in ``cycles`` order.
        cycles:                The periods analysed, most recent first.
    """

    average_cycle_length: int | None = None
    average_period_length: int | None = None
    cycle_lengths: list[int] = field(default_factory=list)
    period_lengths: list[int] = field(default_factory=list)
    cycles: list[CyclePeriod] = field(default_factory=list)


@dataclass
class Insight:
    """A human-readable pattern observation.  ``icon`` is a display tag."""

    icon: str
    text: str


@dataclass
class PatternReport:
    insights: list[Insight] = field(default_factory=list)


@dataclass
class SymptomCorrelation:
    """Co-occurrence strength between two symptoms.

    Attributes:
        symptom_a:           Lexicographically smaller symptom id.
        symptom_b:           Lexicographically larger symptom id.
        correlation:         count / min(total_a, total_b), in (0, 1].
        co_occurrence_count: Number of logs containing both symptoms.
    """

    symptom_a: str
    symptom_b: str
    correlation: float
    co_occurrence_count: int


@dataclass
class AnalyzedPeriod:
    start: date
    end: date
    day_count: int


@dataclass
class TrendSummary:
    """Second-half minus first-half deltas over a date-sorted log window."""

    mood_trend: float | None
    energy_trend: float | None
    symptom_trend: float | None
    analyzed_period: AnalyzedPeriod
