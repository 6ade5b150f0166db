"""Pydantic models for journal logs, periods, and analytics results.

This is the validation boundary: request bodies are checked here once and
converted into the plain records in ``src.analytics.base``.  Response
models are built from the engines' dataclasses via ``from_attributes``.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field, field_validator, model_validator

from src.analytics.base import CyclePeriod, DailyLog, PeriodFlow, SymptomEntry
from src.models.base import JournalBase


# ---------- Inputs ----------

class SymptomEntryIn(JournalBase):
    symptom_id: str = Field(min_length=1)
    severity: int = Field(default=1, ge=1, le=5)


class DailyLogIn(JournalBase):
    date: date
    period_flow: PeriodFlow = PeriodFlow.none
    mood_overall: int | None = Field(default=None, ge=1, le=10)
    mood_anxiety: int | None = Field(default=None, ge=1, le=10)
    mood_energy: int | None = Field(default=None, ge=1, le=10)
    sleep_hours: float | None = Field(default=None, ge=0, le=24)
    sleep_quality: int | None = Field(default=None, ge=1, le=5)
    symptoms: list[SymptomEntryIn] = Field(default_factory=list)

    @field_validator("symptoms")
    @classmethod
    def symptom_ids_unique(cls, value: list[SymptomEntryIn]) -> list[SymptomEntryIn]:
        ids = [s.symptom_id for s in value]
        if len(ids) != len(set(ids)):
            raise ValueError("symptom ids must be unique within a log")
        return value

    def to_record(self) -> DailyLog:
        return DailyLog(
            date=self.date,
            period_flow=self.period_flow,
            mood_overall=self.mood_overall,
            mood_anxiety=self.mood_anxiety,
            mood_energy=self.mood_energy,
            sleep_hours=self.sleep_hours,
            sleep_quality=self.sleep_quality,
            symptoms=[SymptomEntry(s.symptom_id, s.severity) for s in self.symptoms],
        )


class CyclePeriodIn(JournalBase):
    start_date: date
    end_date: date | None = None
    length: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def dates_consistent(self) -> "CyclePeriodIn":
        if self.end_date is None:
            if self.length is not None:
                raise ValueError("an open period (end_date null) has no length")
            return self
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        expected = (self.end_date - self.start_date).days + 1
        if self.length is not None and self.length != expected:
            raise ValueError(
                f"length {self.length} does not match the {expected} days "
                "between start_date and end_date"
            )
        return self

    def to_record(self) -> CyclePeriod:
        return CyclePeriod(
            start_date=self.start_date, end_date=self.end_date, length=self.length
        )


class LogsRequest(JournalBase):
    logs: list[DailyLogIn] = Field(default_factory=list)

    @field_validator("logs")
    @classmethod
    def one_log_per_date(cls, value: list[DailyLogIn]) -> list[DailyLogIn]:
        dates = [log.date for log in value]
        if len(dates) != len(set(dates)):
            raise ValueError("only one log per date is allowed")
        return value

    def records(self) -> list[DailyLog]:
        return [log.to_record() for log in self.logs]


class PeriodsRequest(JournalBase):
    """Periods ordered most recent first."""

    periods: list[CyclePeriodIn] = Field(default_factory=list)

    @field_validator("periods")
    @classmethod
    def single_open_period(cls, value: list[CyclePeriodIn]) -> list[CyclePeriodIn]:
        if sum(1 for p in value if p.end_date is None) > 1:
            raise ValueError("at most one period may be open (end_date null)")
        return value

    def period_records(self) -> list[CyclePeriod]:
        return [p.to_record() for p in self.periods]


class PatternsRequest(LogsRequest, PeriodsRequest):
    pass


class SummaryRequest(LogsRequest):
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def range_ordered(self) -> "SummaryRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


# ---------- Outputs ----------

class InsightRead(JournalBase):
    icon: str
    text: str


class PatternsRead(JournalBase):
    insights: list[InsightRead]


class SymptomCorrelationRead(JournalBase):
    symptom_a: str
    symptom_b: str
    correlation: float
    co_occurrence_count: int


class AnalyzedPeriodRead(JournalBase):
    start: date
    end: date
    day_count: int


class TrendSummaryRead(JournalBase):
    mood_trend: float | None
    energy_trend: float | None
    symptom_trend: float | None
    analyzed_period: AnalyzedPeriodRead


class CyclePeriodRead(JournalBase):
    start_date: date
    end_date: date | None
    length: int | None


class CycleStatsRead(JournalBase):
    average_cycle_length: int | None
    average_period_length: int | None
    cycle_lengths: list[int]
    period_lengths: list[int]
    cycles: list[CyclePeriodRead]


class SymptomStatRead(JournalBase):
    symptom_id: str
    name: str
    count: int
    avg_severity: float
    max_severity: int


class MoodStatsRead(JournalBase):
    avg_overall: float | None
    avg_anxiety: float | None
    avg_energy: float | None
    avg_sleep_hours: float | None
    avg_sleep_quality: float | None
    log_count: int


class LogSummaryRead(JournalBase):
    total_days: int
    logged_days: int
    logging_rate: int
    period_days: int
    top_symptoms: list[str]
    mood: MoodStatsRead
    symptoms: list[SymptomStatRead] = Field(default_factory=list)
