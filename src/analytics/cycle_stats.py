"""Cycle and period length statistics.

Derives cycle lengths (gaps between consecutive period starts) and the
average cycle / period length from a recency-ordered list of periods.

Cycle lengths are not assumed to be 28 days and are not clamped: a zero or
negative gap means the periods were stored out of order, which is the
storage layer's problem to validate.  It is logged and passed through.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Sequence

from src.analytics.base import CyclePeriod, CycleStats
from src.analytics.config_loader import AnalyticsConfig, get_analytics_config

logger = logging.getLogger("journal.analytics.cycle_stats")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def period_length(start_date: date, end_date: date) -> int:
    """Length of a closed period in days, counting both ends."""
    return (end_date - start_date).days + 1


def cycle_day(cycle_start: date, on_date: date) -> int:
    """Return the 1-indexed cycle day of ``on_date``.

    Day 1 is the first day of the period.  Dates before the start give
    zero or negative numbers.
    """
    return (on_date - cycle_start).days + 1


def compute_cycle_stats(
    periods: Sequence[CyclePeriod],
    config: AnalyticsConfig | None = None,
) -> CycleStats:
    """Compute cycle statistics from periods ordered most recent first.

    Only the ``cycle_stats.max_periods`` most recent periods are used.  An
    open period still contributes its start date to the cycle gaps but has
    no period length yet.

    Args:
        periods: Period records, most recent first.
        config:  Analytics config (defaults to the global singleton).

    Returns:
        CycleStats.  With fewer than 2 periods every field is empty/None.
    """
    config = config or get_analytics_config()
    window = list(periods[: config.cycle_stats.max_periods])

    if len(window) < 2:
        logger.debug("Need at least 2 periods for cycle stats, got %d", len(window))
        return CycleStats()

    cycle_lengths = [
        (current.start_date - previous.start_date).days
        for current, previous in zip(window, window[1:])
    ]
    if any(length <= 0 for length in cycle_lengths):
        logger.warning(
            "Non-positive cycle length in %s; periods are not ordered most recent first",
            cycle_lengths,
        )

    period_lengths = [p.length for p in window if p.length is not None]

    return CycleStats(
        average_cycle_length=round_half_up(sum(cycle_lengths) / len(cycle_lengths)),
        average_period_length=(
            round_half_up(sum(period_lengths) / len(period_lengths))
            if period_lengths
            else None
        ),
        cycle_lengths=cycle_lengths,
        period_lengths=period_lengths,
        cycles=window,
    )


def current_cycle_day(periods: Sequence[CyclePeriod], as_of: date) -> int | None:
    """Return which day of the current cycle ``as_of`` falls on.

    The current cycle starts at the most recent period start.

    Args:
        periods: Period records, most recent first.
        as_of:   The reference date ("today"), always supplied by the caller.

    Returns:
        1-indexed cycle day, or None when no period has been logged.
    """
    if not periods:
        return None
    return cycle_day(periods[0].start_date, as_of)
