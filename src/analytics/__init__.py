"""Journal analytics engine.

Pure, synchronous analysis over daily journal logs and menstrual period
records that the caller has already loaded.  Nothing here touches storage
or the clock; "today" is always passed in.

Core modules:
    base             — Record types consumed and produced by the engines
    config_loader    — Load/validate/hot-reload analytics_config.yaml
    cycle_stats      — Cycle and period length statistics
    phase_classifier — Cycle day → phase mapping and per-phase symptom load
    correlation      — Symptom co-occurrence correlation
    trends           — First-half vs second-half mood/energy/symptom trends
    patterns         — Human-readable pattern insights
    summary          — Symptom catalog and journal summary statistics
"""

from src.analytics.base import (
    AnalyzedPeriod,
    CyclePeriod,
    CyclePhase,
    CycleStats,
    DailyLog,
    Insight,
    PatternReport,
    PeriodFlow,
    SymptomCorrelation,
    SymptomEntry,
    TrendSummary,
)
from src.analytics.config_loader import AnalyticsConfig, get_analytics_config
from src.analytics.correlation import get_symptom_correlations
from src.analytics.cycle_stats import compute_cycle_stats
from src.analytics.patterns import analyze_patterns
from src.analytics.trends import get_trends

__all__ = [
    "AnalyticsConfig",
    "AnalyzedPeriod",
    "CyclePeriod",
    "CyclePhase",
    "CycleStats",
    "DailyLog",
    "Insight",
    "PatternReport",
    "PeriodFlow",
    "SymptomCorrelation",
    "SymptomEntry",
    "TrendSummary",
    "analyze_patterns",
    "compute_cycle_stats",
    "get_analytics_config",
    "get_symptom_correlations",
    "get_trends",
]
