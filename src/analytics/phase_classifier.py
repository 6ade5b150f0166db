"""Map cycle days to phases and aggregate symptom load per phase.

Phases use approximate fixed day ranges from analytics_config.yaml:

    menstrual   days 1–5
    follicular  days 6–13
    ovulation   days 14–16
    luteal      everything else up to day 35

Days outside 1–35 are not classified.  The peak phase must average strictly
more than ``peak_ratio`` times the quietest phase; an exact ratio is not a peak.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from src.analytics.base import CyclePhase, DailyLog
from src.analytics.config_loader import AnalyticsConfig, get_analytics_config
from src.analytics.cycle_stats import cycle_day

logger = logging.getLogger("journal.analytics.phase_classifier")


@dataclass
class PhaseSummary:
    """Symptom totals for one phase.

    Attributes:
        phase:         The phase.
        day_count:     Number of logs that fell in this phase.
        symptom_count: Total symptoms across those logs.
    """

    phase: CyclePhase
    day_count: int = 0
    symptom_count: int = 0

    @property
    def avg_symptoms(self) -> float | None:
        if self.day_count == 0:
            return None
        return self.symptom_count / self.day_count


def classify_phase(
    day: int, config: AnalyticsConfig | None = None
) -> CyclePhase | None:
    """Return the phase for a 1-indexed cycle day, or None if out of range."""
    config = config or get_analytics_config()
    if day < 1 or day > config.cycle_phases.max_cycle_day:
        return None

    for phase in (CyclePhase.menstrual, CyclePhase.follicular, CyclePhase.ovulation):
        first, last = config.phase_range(phase.value)
        if first <= day <= last:
            return phase
    return CyclePhase.luteal


def phase_for_date(
    cycle_start: date, on_date: date, config: AnalyticsConfig | None = None
) -> CyclePhase | None:
    return classify_phase(cycle_day(cycle_start, on_date), config)


def summarize_phases(
    logs: Iterable[DailyLog],
    cycle_start: date,
    config: AnalyticsConfig | None = None,
) -> dict[CyclePhase, PhaseSummary]:
    """Bucket logs into phases relative to ``cycle_start``.

    Args:
        logs:        Daily logs in any order.
        cycle_start: First day of the cycle being analysed.
        config:      Analytics config (defaults to the global singleton).

    Returns:
        A PhaseSummary for every phase, including empty ones.
    """
    config = config or get_analytics_config()
    summaries = {phase: PhaseSummary(phase=phase) for phase in CyclePhase}

    for log in logs:
        phase = phase_for_date(cycle_start, log.date, config)
        if phase is None:
            continue
        summary = summaries[phase]
        summary.day_count += 1
        summary.symptom_count += log.symptom_count

    return summaries


def most_symptomatic_phase(
    summaries: dict[CyclePhase, PhaseSummary],
    config: AnalyticsConfig | None = None,
) -> CyclePhase | None:
    """Return the phase with a clearly higher symptom load, if any.

    Only phases with at least ``min_days_per_phase`` logged days are
    compared, and at least two of them are needed.  The busiest phase must
    average more than ``peak_ratio`` times the quietest one.
    """
    config = config or get_analytics_config()
    cp = config.cycle_phases

    # Phase order is preserved so ties resolve to the earlier phase
    eligible = [
        (phase, s.avg_symptoms)
        for phase, s in summaries.items()
        if s.day_count >= cp.min_days_per_phase
    ]
    if len(eligible) < 2:
        return None

    ranked = sorted(eligible, key=lambda item: item[1], reverse=True)
    peak_phase, peak_avg = ranked[0]
    low_avg = ranked[-1][1]

    if peak_avg > low_avg * cp.peak_ratio:
        return peak_phase
    return None
