"""Analytics endpoints over caller-supplied journal data.

Nothing is stored: the client posts the logs and periods it already holds
and gets the computed insights back.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter

from src.analytics.config_loader import get_analytics_config
from src.analytics.correlation import get_symptom_correlations
from src.analytics.cycle_stats import compute_cycle_stats
from src.analytics.patterns import analyze_patterns
from src.analytics.summary import build_log_summary, get_symptom_stats
from src.analytics.trends import get_trends
from src.models.journal import (
    CycleStatsRead,
    LogSummaryRead,
    LogsRequest,
    PatternsRead,
    PatternsRequest,
    PeriodsRequest,
    SummaryRequest,
    SymptomCorrelationRead,
    SymptomStatRead,
    TrendSummaryRead,
)

router = APIRouter(prefix="/insights", tags=["insights"])
logger = logging.getLogger("journal.routers.insights")


@router.post("/patterns", response_model=PatternsRead)
async def patterns(body: PatternsRequest) -> Any:
    config = get_analytics_config()
    stats = compute_cycle_stats(body.period_records(), config)
    report = analyze_patterns(body.records(), stats, config)
    return PatternsRead.model_validate(report)


@router.post("/correlations", response_model=list[SymptomCorrelationRead])
async def correlations(body: LogsRequest) -> Any:
    return [
        SymptomCorrelationRead.model_validate(c)
        for c in get_symptom_correlations(body.records(), get_analytics_config())
    ]


@router.post("/trends", response_model=TrendSummaryRead | None)
async def trends(body: LogsRequest) -> Any:
    summary = get_trends(body.records(), get_analytics_config())
    if summary is None:
        return None
    return TrendSummaryRead.model_validate(summary)


@router.post("/cycle-stats", response_model=CycleStatsRead)
async def cycle_stats(body: PeriodsRequest) -> Any:
    stats = compute_cycle_stats(body.period_records(), get_analytics_config())
    return CycleStatsRead.model_validate(stats)


@router.post("/summary", response_model=LogSummaryRead)
async def summary(body: SummaryRequest) -> Any:
    logs = body.records()
    result = build_log_summary(logs, body.start_date, body.end_date)
    logger.debug(
        "Summary %s..%s: %d/%d days logged",
        body.start_date, body.end_date, result.logged_days, result.total_days,
    )
    read = LogSummaryRead.model_validate(result)
    read.symptoms = [SymptomStatRead.model_validate(s) for s in get_symptom_stats(logs)]
    return read
