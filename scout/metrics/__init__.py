"""
Pipeline Analytics

Turns a creator's deal list into dashboard insights:
- Win rate, average deal value and deal cycle
- 30 and 90 day revenue projections
- Best pitch day and time
- Industry benchmark comparison
- Pipeline and per-stage summaries
"""

from .calculator import (
    Benchmark,
    DealMetricsEngine,
    MetricsReport,
    compute_metrics,
)
from .dashboard import InsightsGenerator, InsightsPanel, time_ago
from .pipeline import PipelineSummary, StageBreakdown, summarize_pipeline

__all__ = [
    "Benchmark",
    "DealMetricsEngine",
    "MetricsReport",
    "compute_metrics",
    "InsightsGenerator",
    "InsightsPanel",
    "time_ago",
    "PipelineSummary",
    "StageBreakdown",
    "summarize_pipeline",
]
