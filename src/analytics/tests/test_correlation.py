"""Tests for symptom co-occurrence correlation."""

from __future__ import annotations

from datetime import timedelta

import pytest

from src.analytics.config_loader import AnalyticsConfig
from src.analytics.correlation import get_symptom_correlations
from src.analytics.tests.conftest import TEST_DATE, make_log


def _logs(*symptom_sets: list[str]):
    return [
        make_log(TEST_DATE + timedelta(days=i), symptoms)
        for i, symptoms in enumerate(symptom_sets)
    ]


class TestSymptomCorrelations:
    def test_always_together_is_full_correlation(self, analytics_config: AnalyticsConfig) -> None:
        logs = _logs(
            ["hot_flashes", "night_sweats"],
            ["hot_flashes", "night_sweats"],
            ["hot_flashes", "night_sweats"],
            ["fatigue"],
            [],
        )
        result = get_symptom_correlations(logs, analytics_config)
        assert len(result) == 1
        corr = result[0]
        assert (corr.symptom_a, corr.symptom_b) == ("hot_flashes", "night_sweats")
        assert corr.correlation == pytest.approx(1.0)
        assert corr.co_occurrence_count == 3

    def test_pair_order_canonicalized(self, analytics_config: AnalyticsConfig) -> None:
        logs = _logs(
            ["night_sweats", "hot_flashes"],
            ["hot_flashes", "night_sweats"],
            ["night_sweats", "hot_flashes"],
        )
        result = get_symptom_correlations(logs, analytics_config)
        assert len(result) == 1
        assert result[0].symptom_a == "hot_flashes"
        assert result[0].co_occurrence_count == 3

    def test_fewer_than_three_co_occurrences_dropped(
        self, analytics_config: AnalyticsConfig
    ) -> None:
        logs = _logs(["a", "b"], ["a", "b"], ["a"], ["b"])
        assert get_symptom_correlations(logs, analytics_config) == []

    def test_ratio_uses_rarer_symptom(self, analytics_config: AnalyticsConfig) -> None:
        # anxiety appears 6 times, irritability and headaches 3 times each
        logs = _logs(
            *([["anxiety", "irritability"]] * 3 + [["anxiety", "headaches"]] * 3)
        )
        result = get_symptom_correlations(logs, analytics_config)
        assert [(c.symptom_a, c.symptom_b) for c in result] == [
            ("anxiety", "irritability"),
            ("anxiety", "headaches"),
        ]
        assert all(c.correlation == pytest.approx(1.0) for c in result)

    def test_single_symptom_logs_ignored(self, analytics_config: AnalyticsConfig) -> None:
        logs = _logs(*([["a", "b"]] * 3 + [["a"]] * 5 + [["b"]] * 5))
        result = get_symptom_correlations(logs, analytics_config)
        assert len(result) == 1
        assert (result[0].symptom_a, result[0].symptom_b) == ("a", "b")
        assert result[0].correlation == pytest.approx(1.0)
        assert result[0].co_occurrence_count == 3

    def test_weak_correlation_dropped(self, analytics_config: AnalyticsConfig) -> None:
        # a and b: 3 / min(8, 8) = 0.375
        logs = _logs(*([["a", "b"]] * 3 + [["a", "c"]] * 5 + [["b", "d"]] * 5))
        result = get_symptom_correlations(logs, analytics_config)
        assert [(c.symptom_a, c.symptom_b) for c in result] == [("a", "c"), ("b", "d")]

    def test_sorted_by_correlation_descending(self, analytics_config: AnalyticsConfig) -> None:
        logs = _logs(*([["p", "q"]] * 3 + [["p", "r"]] * 3 + [["r", "s"]] * 2))
        result = get_symptom_correlations(logs, analytics_config)
        assert [(c.symptom_a, c.symptom_b) for c in result] == [("p", "q"), ("p", "r")]
        assert result[0].correlation == pytest.approx(1.0)
        assert result[1].correlation == pytest.approx(0.6)

    def test_at_most_ten_results(self, analytics_config: AnalyticsConfig) -> None:
        symptoms = ["s1", "s2", "s3", "s4", "s5", "s6"]  # 15 pairs
        logs = _logs(symptoms, symptoms, symptoms)
        result = get_symptom_correlations(logs, analytics_config)
        assert len(result) == 10
        assert all(c.correlation > 0.4 for c in result)

    def test_no_logs(self, analytics_config: AnalyticsConfig) -> None:
        assert get_symptom_correlations([], analytics_config) == []

    def test_log_order_irrelevant(self, analytics_config: AnalyticsConfig) -> None:
        logs = _logs(*([["p", "q"]] * 3 + [["p", "r"]] * 3 + [["r", "s"]] * 2))
        forward = get_symptom_correlations(logs, analytics_config)
        backward = get_symptom_correlations(list(reversed(logs)), analytics_config)
        assert forward == backward
