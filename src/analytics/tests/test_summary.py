"""Tests for the symptom catalog and journal summary statistics."""

from __future__ import annotations

from datetime import timedelta

import pytest

from src.analytics.base import DailyLog, PeriodFlow, SymptomEntry
from src.analytics.summary import (
    build_log_summary,
    get_mood_stats,
    get_symptom_stats,
    symptom_name,
)
from src.analytics.tests.conftest import TEST_DATE, make_log


def test_symptom_name_known_and_custom() -> None:
    assert symptom_name("hot_flashes") == "Hot Flashes"
    assert symptom_name("custom_1712345") == "custom_1712345"


class TestSymptomStats:
    def test_frequency_and_severity(self) -> None:
        logs = [
            DailyLog(date=TEST_DATE, symptoms=[SymptomEntry("fatigue", 2), SymptomEntry("anxiety", 5)]),
            DailyLog(date=TEST_DATE + timedelta(days=1), symptoms=[SymptomEntry("fatigue", 4)]),
            DailyLog(date=TEST_DATE + timedelta(days=2), symptoms=[SymptomEntry("fatigue", 3)]),
        ]
        stats = get_symptom_stats(logs)
        assert [s.symptom_id for s in stats] == ["fatigue", "anxiety"]
        fatigue = stats[0]
        assert fatigue.count == 3
        assert fatigue.avg_severity == pytest.approx(3.0)
        assert fatigue.max_severity == 4
        assert fatigue.name == "Fatigue"

    def test_no_symptoms(self) -> None:
        assert get_symptom_stats([make_log(TEST_DATE)]) == []


class TestMoodStats:
    def test_averages_skip_missing_values(self) -> None:
        logs = [
            make_log(TEST_DATE, mood_overall=4, mood_energy=6, sleep_hours=7.0),
            make_log(TEST_DATE + timedelta(days=1), mood_overall=8, mood_anxiety=3),
            make_log(TEST_DATE + timedelta(days=2), sleep_hours=4.0),  # no mood at all
        ]
        stats = get_mood_stats(logs)
        assert stats.log_count == 2
        assert stats.avg_overall == pytest.approx(6.0)
        assert stats.avg_anxiety == pytest.approx(3.0)
        assert stats.avg_energy == pytest.approx(6.0)
        assert stats.avg_sleep_hours == pytest.approx(7.0)
        assert stats.avg_sleep_quality is None

    def test_empty(self) -> None:
        stats = get_mood_stats([])
        assert stats.log_count == 0
        assert stats.avg_overall is None


class TestLogSummary:
    def test_coverage(self) -> None:
        logs = [
            make_log(TEST_DATE, ["hot_flashes", "fatigue"], period_flow=PeriodFlow.heavy),
            make_log(TEST_DATE + timedelta(days=1), ["hot_flashes"], period_flow=PeriodFlow.spotting),
            make_log(TEST_DATE + timedelta(days=2), ["hot_flashes", "brain_fog"]),
            make_log(TEST_DATE + timedelta(days=5), ["fatigue"], mood_overall=7),
            make_log(TEST_DATE + timedelta(days=7)),
        ]
        summary = build_log_summary(logs, TEST_DATE, TEST_DATE + timedelta(days=7))
        assert summary.total_days == 8
        assert summary.logged_days == 5
        assert summary.logging_rate == 63  # 62.5 rounds up
        assert summary.period_days == 2
        assert summary.top_symptoms == ["Hot Flashes", "Fatigue", "Brain Fog"]
        assert summary.mood.log_count == 1

    def test_single_day_range(self) -> None:
        summary = build_log_summary([make_log(TEST_DATE)], TEST_DATE, TEST_DATE)
        assert summary.total_days == 1
        assert summary.logging_rate == 100

    def test_reversed_range_raises(self) -> None:
        with pytest.raises(ValueError, match="before start_date"):
            build_log_summary([], TEST_DATE, TEST_DATE - timedelta(days=1))
