"""Shared fixtures and record builders for analytics engine tests."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

import pytest

from src.analytics.base import CyclePeriod, DailyLog, SymptomEntry
from src.analytics.config_loader import AnalyticsConfig, load_analytics_config

# A Monday
TEST_DATE = date(2026, 2, 23)


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def analytics_config() -> AnalyticsConfig:
    """Load the real analytics config for tests."""
    return load_analytics_config()


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def make_log(
    d: date,
    symptoms: Iterable[str] = (),
    severity: int = 2,
    **fields,
) -> DailyLog:
    """Build a DailyLog with the given symptom ids at a fixed severity."""
    return DailyLog(
        date=d,
        symptoms=[SymptomEntry(symptom_id=s, severity=severity) for s in symptoms],
        **fields,
    )


def consecutive_logs(start: date, n: int, **fields) -> list[DailyLog]:
    """Build n logs on consecutive days sharing the same field values."""
    return [make_log(start + timedelta(days=i), **fields) for i in range(n)]


def make_period(start: date, length: int | None = 5) -> CyclePeriod:
    """Build a closed period of ``length`` days, or an open one if length is None."""
    if length is None:
        return CyclePeriod(start_date=start)
    return CyclePeriod(start_date=start, end_date=start + timedelta(days=length - 1))


def periods_from_gaps(latest_start: date, gaps: list[int]) -> list[CyclePeriod]:
    """Build closed periods, most recent first, separated by ``gaps`` days."""
    periods = [make_period(latest_start)]
    start = latest_start
    for gap in gaps:
        start -= timedelta(days=gap)
        periods.append(make_period(start))
    return periods
