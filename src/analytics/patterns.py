"""Pattern analyzer — turns daily logs into human-readable insights.

Four independent sub-analyses run over the same logs and their insights are
concatenated in this order:

1. Day of week   — are symptoms clustered on one weekday?
2. Sleep         — do poor or short nights line up with more symptoms / fatigue?
3. Mood          — is mood highly variable, and does anxiety drag it down?
4. Cycle         — does cycle length vary a lot, and which phase carries
                   the most symptoms?

Below the data floor (7 logs by default) nothing runs and a single
"keep logging" insight is returned instead.  Cycle insights also need at
least two closed periods; an ongoing period does not count.

Ratio checks are strict: "50% more" means busiest > quietest * 1.5, so an
exact 1.5x ratio is not flagged.
"""

from __future__ import annotations

import logging
import statistics
from typing import Sequence

from src.analytics.base import CycleStats, DailyLog, Insight, PatternReport
from src.analytics.config_loader import AnalyticsConfig, get_analytics_config
from src.analytics.cycle_stats import round_half_up
from src.analytics.phase_classifier import most_symptomatic_phase, summarize_phases

logger = logging.getLogger("journal.analytics.patterns")

# Sunday-first, matching _weekday_index()
WEEKDAY_NAMES = [
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
]

KEEP_LOGGING = Insight(
    icon="information",
    text="Continue logging for at least a week to see pattern insights.",
)


def _weekday_index(log: DailyLog) -> int:
    """0 = Sunday … 6 = Saturday."""
    return log.date.isoweekday() % 7


def _mean_symptoms(logs: Sequence[DailyLog]) -> float:
    return sum(log.symptom_count for log in logs) / len(logs)


def _closed_cycle_count(cycle_stats: CycleStats) -> int:
    return sum(1 for period in cycle_stats.cycles if not period.is_open)


def analyze_patterns(
    logs: Sequence[DailyLog],
    cycle_stats: CycleStats | None = None,
    config: AnalyticsConfig | None = None,
) -> PatternReport:
    """Run every pattern sub-analysis and collect the insights.

    Args:
        logs:        Daily logs in any order.
        cycle_stats: Output of ``compute_cycle_stats``; cycle insights are
                     skipped when it has fewer than 2 closed cycles.
        config:      Analytics config (defaults to the global singleton).

    Returns:
        PatternReport whose insights may be empty.
    """
    config = config or get_analytics_config()

    if len(logs) < config.min_logs:
        logger.info(
            "Insufficient log data: %d logs (need %d)", len(logs), config.min_logs
        )
        return PatternReport(insights=[Insight(KEEP_LOGGING.icon, KEEP_LOGGING.text)])

    insights: list[Insight] = []
    insights.extend(analyze_day_of_week(logs, config))
    insights.extend(analyze_sleep(logs, config))
    insights.extend(analyze_mood(logs, config))
    if cycle_stats is not None and _closed_cycle_count(cycle_stats) >= 2:
        insights.extend(analyze_cycle(logs, cycle_stats, config))

    logger.debug("Generated %d insights from %d logs", len(insights), len(logs))
    return PatternReport(insights=insights)


# ---------------------------------------------------------------------------
# Sub-analyses
# ---------------------------------------------------------------------------


def analyze_day_of_week(
    logs: Sequence[DailyLog], config: AnalyticsConfig
) -> list[Insight]:
    """Flag the weekday with clearly more symptoms than the quietest weekday."""
    dw = config.day_of_week
    counts = [0] * 7
    for log in logs:
        counts[_weekday_index(log)] += log.symptom_count

    # Stable sort: ties go to the earlier weekday (Sunday first)
    ranked = sorted(range(7), key=lambda day: counts[day], reverse=True)
    busiest, quietest = ranked[0], ranked[-1]

    if counts[busiest] > counts[quietest] * dw.peak_ratio and counts[busiest] > dw.min_peak_count:
        return [
            Insight(
                icon="calendar-week",
                text=f"You tend to experience more symptoms on {WEEKDAY_NAMES[busiest]}s.",
            )
        ]
    return []


def analyze_sleep(logs: Sequence[DailyLog], config: AnalyticsConfig) -> list[Insight]:
    """Compare symptom load after good vs poor sleep, and fatigue after short nights."""
    sc = config.sleep
    insights: list[Insight] = []

    with_sleep = [
        log for log in logs
        if log.sleep_hours is not None and log.sleep_quality is not None
    ]
    if len(with_sleep) < sc.min_logs:
        return insights

    good = [log for log in with_sleep if log.sleep_quality >= sc.good_quality_min]
    poor = [log for log in with_sleep if log.sleep_quality <= sc.poor_quality_max]
    if len(good) >= sc.min_group_size and len(poor) >= sc.min_group_size:
        if _mean_symptoms(poor) > _mean_symptoms(good) * sc.symptom_ratio:
            insights.append(
                Insight(
                    icon="sleep",
                    text=(
                        "Poor sleep appears to be associated with more symptoms. "
                        "Prioritizing sleep may help."
                    ),
                )
            )

    short_nights = [log for log in with_sleep if log.sleep_hours < sc.low_sleep_hours]
    if len(short_nights) >= sc.min_low_sleep_logs:
        fatigued = [log for log in short_nights if log.has_symptom(sc.fatigue_symptom_id)]
        if len(fatigued) / len(short_nights) > sc.fatigue_share:
            insights.append(
                Insight(
                    icon="battery-low",
                    text="Fatigue commonly follows nights with less than 6 hours of sleep.",
                )
            )

    return insights


def analyze_mood(logs: Sequence[DailyLog], config: AnalyticsConfig) -> list[Insight]:
    """Flag highly variable mood and lower mood on high-anxiety days."""
    mc = config.mood
    insights: list[Insight] = []

    moods = [log.mood_overall for log in logs if log.mood_overall is not None]
    if len(moods) < mc.min_logs:
        return insights

    avg_mood = statistics.mean(moods)
    if statistics.pstdev(moods) > mc.max_std_dev:
        insights.append(
            Insight(
                icon="emoticon-confused",
                text=(
                    "Your mood has been quite variable. "
                    "This can be common during perimenopause."
                ),
            )
        )

    with_both = [
        log for log in logs
        if log.mood_overall is not None and log.mood_anxiety is not None
    ]
    if len(with_both) >= mc.min_logs:
        anxious = [log for log in with_both if log.mood_anxiety >= mc.high_anxiety_min]
        if len(anxious) >= mc.min_high_anxiety_logs:
            anxious_mood = statistics.mean(log.mood_overall for log in anxious)
            if anxious_mood < avg_mood - mc.mood_drop:
                insights.append(
                    Insight(
                        icon="alert-circle",
                        text=(
                            "High anxiety days tend to coincide with lower mood. "
                            "Consider stress-reduction techniques."
                        ),
                    )
                )

    return insights


def analyze_cycle(
    logs: Sequence[DailyLog],
    cycle_stats: CycleStats,
    config: AnalyticsConfig,
) -> list[Insight]:
    """Flag irregular cycle lengths and the most symptomatic phase of the latest cycle."""
    cv = config.cycle_variability
    insights: list[Insight] = []

    lengths = cycle_stats.cycle_lengths
    if len(lengths) >= cv.min_cycle_lengths:
        avg_length = sum(lengths) / len(lengths)
        max_variation = max(abs(length - avg_length) for length in lengths)
        if max_variation > cv.max_variation_days:
            insights.append(
                Insight(
                    icon="calendar-clock",
                    text=(
                        f"Your cycle length varies by up to {round_half_up(max_variation)} days, "
                        "which is common in perimenopause."
                    ),
                )
            )

    if cycle_stats.cycles:
        recent_start = cycle_stats.cycles[0].start_date
        phase = most_symptomatic_phase(summarize_phases(logs, recent_start, config), config)
        if phase is not None:
            insights.append(
                Insight(
                    icon="calendar-sync",
                    text=(
                        f"Symptoms tend to be more pronounced during the {phase.value} "
                        "phase of your cycle."
                    ),
                )
            )

    return insights
