"""
Insights Panel Generation

Bundles the metrics report, pipeline summary, benchmark comparison and
recent activity into one snapshot for the dashboard.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional, Union

from ..config.settings import MetricsConfig
from ..core.entities import Deal, TimeRange
from .calculator import DealLike, DealMetricsEngine, MetricsReport, coerce_deal
from .pipeline import PipelineSummary, summarize_pipeline

logger = logging.getLogger(__name__)


def time_ago(created_at: datetime, now: datetime) -> str:
    """Short relative label such as "5m ago"; older than a week shows the date."""
    seconds = int((now - created_at).total_seconds())

    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    if seconds < 604800:
        return f"{seconds // 86400}d ago"
    return created_at.date().isoformat()


@dataclass(frozen=True)
class RecentDeal:
    """A deal in the recent activity list."""
    deal: Deal
    time_ago: str


@dataclass
class InsightsPanel:
    """Complete insights snapshot."""
    generated_at: datetime
    time_range: TimeRange = TimeRange.ALL

    report: MetricsReport = field(default_factory=MetricsReport)
    pipeline: PipelineSummary = field(default_factory=PipelineSummary)

    # Comparisons
    vs_benchmark: dict = field(default_factory=dict)

    recent_deals: list = field(default_factory=list)


class InsightsGenerator:
    """Generates insights panel data from a deal list."""

    def __init__(self, engine: DealMetricsEngine = None, config: MetricsConfig = None):
        self._engine = engine or DealMetricsEngine(config)
        self._config = self._engine.config

    def generate(
        self,
        deals: Optional[Iterable[DealLike]],
        time_range: Union[TimeRange, str],
        now: datetime
    ) -> InsightsPanel:
        """Generate the panel; pipeline stats and recent deals ignore the range."""
        if deals is not None:
            deals = list(deals)
        report = self._engine.compute_metrics(deals, time_range, now)
        all_deals = [coerce_deal(d, now) for d in deals]

        newest_first = sorted(all_deals, key=lambda d: d.created_at, reverse=True)
        recent = [
            RecentDeal(deal=d, time_ago=time_ago(d.created_at, now))
            for d in newest_first[:self._config.recent_deals_limit]
        ]

        logger.debug(
            "Generated insights panel: %d deals, %d in range",
            len(all_deals), report.sample_size
        )

        return InsightsPanel(
            generated_at=now,
            time_range=report.time_range,
            report=report,
            pipeline=summarize_pipeline(all_deals),
            vs_benchmark=self._engine.compare_to_benchmark(report),
            recent_deals=recent,
        )

    def format_summary(self, panel: InsightsPanel) -> str:
        """Format the panel as a text summary."""
        report = panel.report
        lines = [
            f"Insights Summary ({panel.generated_at.strftime('%Y-%m-%d %H:%M')}, "
            f"range: {panel.time_range.value})",
            "",
            "Pipeline:",
            f"  Deals: {panel.pipeline.total_deals} total, "
            f"{panel.pipeline.active_deals} active, {panel.pipeline.won_deals} won",
            f"  Total value: ${panel.pipeline.total_value:,.0f}",
        ]

        for stage in panel.pipeline.stages:
            lines.append(f"    {stage.label}: {stage.count} (${stage.value:,.0f})")

        lines.extend([
            "",
            "Performance:",
            f"  Win rate: {report.win_rate}%",
            f"  Average deal: ${report.average_deal_value:,}",
            f"  Average deal cycle: {report.average_deal_cycle_days} days",
            f"  Projected revenue: ${report.projected_revenue_30d:,} (30d), "
            f"${report.projected_revenue_90d:,} (90d)",
            f"  Best time to pitch: {report.best_pitch_day}, {report.best_pitch_time}",
            "",
            "Vs. Industry Benchmark:",
        ])

        for name, comparison in panel.vs_benchmark.items():
            delta = comparison["delta"]
            direction = "↑" if delta > 0 else "↓" if delta < 0 else "→"
            if comparison["unit"] == "%":
                current = f"{comparison['current_value']}%"
                reference = f"{comparison['benchmark_value']}%"
            else:
                current = f"${comparison['current_value']:,}"
                reference = f"${comparison['benchmark_value']:,}"
            lines.append(f"  {name}: {current} {direction} (benchmark {reference})")

        if panel.recent_deals:
            lines.extend(["", "Recent Deals:"])
            for recent in panel.recent_deals:
                value = (
                    f"${recent.deal.deal_value:,.0f}"
                    if recent.deal.deal_value is not None else "no value"
                )
                lines.append(
                    f"  - {recent.deal.brand_name or recent.deal.id} "
                    f"[{recent.deal.status.value}] {value}, {recent.time_ago}"
                )

        return "\n".join(lines)
