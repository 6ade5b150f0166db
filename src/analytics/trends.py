"""First-half vs second-half trends for mood, energy and symptom load."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from src.analytics.base import AnalyzedPeriod, DailyLog, TrendSummary
from src.analytics.config_loader import AnalyticsConfig, get_analytics_config

logger = logging.getLogger("journal.analytics.trends")


def _present_mean(
    logs: Sequence[DailyLog], value: Callable[[DailyLog], float | None]
) -> float | None:
    """Mean of the values that were actually logged; None if there are none."""
    values = [v for v in (value(log) for log in logs) if v is not None]
    if not values:
        return None
    return sum(values) / len(values)


def _delta(
    first: Sequence[DailyLog],
    second: Sequence[DailyLog],
    value: Callable[[DailyLog], float | None],
) -> float | None:
    first_mean = _present_mean(first, value)
    second_mean = _present_mean(second, value)
    if first_mean is None or second_mean is None:
        return None
    return second_mean - first_mean


def get_trends(
    logs: Sequence[DailyLog],
    config: AnalyticsConfig | None = None,
) -> TrendSummary | None:
    """Compare the later half of the logs with the earlier half.

    Logs are sorted by date first; the caller's order is not trusted.  With
    an odd count the first half is the smaller one.

    Mood and energy only average days where the value was logged.  Symptom
    load counts every day, with no symptoms meaning zero.

    Args:
        logs:   Daily logs in any order.
        config: Analytics config (defaults to the global singleton).

    Returns:
        TrendSummary, or None when there are fewer than ``min_logs`` logs.
    """
    config = config or get_analytics_config()
    if len(logs) < config.min_logs:
        logger.debug("Not enough logs for trends: %d (need %d)", len(logs), config.min_logs)
        return None

    ordered = sorted(logs, key=lambda log: log.date)
    midpoint = len(ordered) // 2
    first, second = ordered[:midpoint], ordered[midpoint:]

    return TrendSummary(
        mood_trend=_delta(first, second, lambda log: log.mood_overall),
        energy_trend=_delta(first, second, lambda log: log.mood_energy),
        symptom_trend=_delta(first, second, lambda log: log.symptom_count),
        analyzed_period=AnalyzedPeriod(
            start=ordered[0].date,
            end=ordered[-1].date,
            day_count=len(ordered),
        ),
    )
