"""Tests for first-half vs second-half trend deltas."""

from __future__ import annotations

import random
from datetime import timedelta

import pytest

from src.analytics.config_loader import AnalyticsConfig
from src.analytics.tests.conftest import TEST_DATE, consecutive_logs, make_log
from src.analytics.trends import get_trends


def _day(i: int):
    return TEST_DATE + timedelta(days=i)


class TestTrends:
    def test_fewer_than_seven_logs_returns_none(self, analytics_config: AnalyticsConfig) -> None:
        logs = consecutive_logs(TEST_DATE, 6, mood_overall=5)
        assert get_trends(logs, analytics_config) is None

    def test_seven_logs_split_three_four(self, analytics_config: AnalyticsConfig) -> None:
        # If the split were 4/3 the fourth day would land in the first half
        moods = [4, 4, 4, 8, 8, 8, 8]
        logs = [make_log(_day(i), mood_overall=m) for i, m in enumerate(moods)]
        trend = get_trends(logs, analytics_config)
        assert trend is not None
        assert trend.mood_trend == pytest.approx(4.0)

    def test_logs_sorted_before_split(self, analytics_config: AnalyticsConfig) -> None:
        moods = [2, 2, 2, 2, 6, 6, 6, 6]
        logs = [make_log(_day(i), mood_overall=m) for i, m in enumerate(moods)]
        shuffled = list(logs)
        random.Random(7).shuffle(shuffled)
        trend = get_trends(shuffled, analytics_config)
        assert trend is not None
        assert trend.mood_trend == pytest.approx(4.0)
        assert trend == get_trends(logs, analytics_config)

    def test_missing_mood_excluded_not_zero(self, analytics_config: AnalyticsConfig) -> None:
        moods = [4, None, 4, 8, None, 8, 8]
        logs = [make_log(_day(i), mood_overall=m) for i, m in enumerate(moods)]
        trend = get_trends(logs, analytics_config)
        assert trend.mood_trend == pytest.approx(4.0)

    def test_half_without_values_gives_none(self, analytics_config: AnalyticsConfig) -> None:
        energies = [None, None, None, 5, 6, 7, 8]
        logs = [make_log(_day(i), mood_energy=e) for i, e in enumerate(energies)]
        trend = get_trends(logs, analytics_config)
        assert trend.energy_trend is None
        assert trend.mood_trend is None

    def test_energy_trend(self, analytics_config: AnalyticsConfig) -> None:
        energies = [6, 6, 6, 3, 3, 3, 3]
        logs = [make_log(_day(i), mood_energy=e) for i, e in enumerate(energies)]
        trend = get_trends(logs, analytics_config)
        assert trend.energy_trend == pytest.approx(-3.0)

    def test_symptom_trend_counts_empty_days(self, analytics_config: AnalyticsConfig) -> None:
        counts = [2, 0, 0, 2, 2, 0, 0]
        logs = [
            make_log(_day(i), [f"s{j}" for j in range(c)])
            for i, c in enumerate(counts)
        ]
        trend = get_trends(logs, analytics_config)
        # second half 4/4 = 1.0, first half 2/3
        assert trend.symptom_trend == pytest.approx(1.0 - 2 / 3)

    def test_analyzed_period(self, analytics_config: AnalyticsConfig) -> None:
        logs = consecutive_logs(TEST_DATE, 10)
        trend = get_trends(list(reversed(logs)), analytics_config)
        assert trend.analyzed_period.start == TEST_DATE
        assert trend.analyzed_period.end == _day(9)
        assert trend.analyzed_period.day_count == 10
