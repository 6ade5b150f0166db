"""Symptom co-occurrence correlation.

For every pair of symptoms logged together on the same day, compares how
often they co-occur with how often the rarer of the two occurs at all:

    correlation = co_occurrences / min(total_a, total_b)

This is a one-sided co-occurrence ratio, not Pearson r.  A value of 1.0
means the rarer symptom never shows up without the other.  Totals only
count logs with at least two symptoms; single-symptom days are ignored.
"""

from __future__ import annotations

import logging
from collections import Counter
from itertools import combinations
from typing import Iterable

from src.analytics.base import DailyLog, SymptomCorrelation
from src.analytics.config_loader import AnalyticsConfig, get_analytics_config

logger = logging.getLogger("journal.analytics.correlation")


def get_symptom_correlations(
    logs: Iterable[DailyLog],
    config: AnalyticsConfig | None = None,
) -> list[SymptomCorrelation]:
    """Return the strongest symptom pairs, highest correlation first.

    A pair is only reported once both symptoms and the pair itself clear the
    configured noise floors and the ratio exceeds ``min_correlation``.

    Args:
        logs:   Daily logs in any order.
        config: Analytics config (defaults to the global singleton).

    Returns:
        At most ``correlation.max_results`` SymptomCorrelation records.
    """
    config = config or get_analytics_config()
    cc = config.correlation

    totals: Counter[str] = Counter()
    pair_counts: Counter[tuple[str, str]] = Counter()

    for log in logs:
        ids = sorted(log.symptom_ids)
        if len(ids) < 2:
            continue
        totals.update(ids)
        # ids are sorted, so (a, b) is already canonical
        pair_counts.update(combinations(ids, 2))

    correlations: list[SymptomCorrelation] = []
    for (symptom_a, symptom_b), count in pair_counts.items():
        if count < cc.min_co_occurrences:
            continue
        total_a, total_b = totals[symptom_a], totals[symptom_b]
        if total_a < cc.min_symptom_total or total_b < cc.min_symptom_total:
            continue

        correlation = count / min(total_a, total_b)
        if correlation > cc.min_correlation:
            correlations.append(
                SymptomCorrelation(
                    symptom_a=symptom_a,
                    symptom_b=symptom_b,
                    correlation=correlation,
                    co_occurrence_count=count,
                )
            )

    correlations.sort(key=lambda c: c.correlation, reverse=True)
    logger.debug(
        "%d symptom pairs seen, %d above threshold",
        len(pair_counts), len(correlations),
    )
    return correlations[: cc.max_results]
