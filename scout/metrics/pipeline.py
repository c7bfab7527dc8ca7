"""
Pipeline Summary

Headline deal counts and per-stage totals shown on the dashboard and
profile pages. Unlike the insights report these cover the full deal
list, with no time range applied.
"""

from dataclasses import dataclass, field
from typing import Iterable

from ..core.entities import PIPELINE_STAGES, Deal, DealStatus
from .calculator import round_half_up


@dataclass(frozen=True)
class StageBreakdown:
    """Deal count and total value for one board column."""
    status: DealStatus
    label: str
    count: int = 0
    value: float = 0.0


@dataclass(frozen=True)
class PipelineSummary:
    """Headline pipeline stats."""
    total_deals: int = 0
    active_deals: int = 0
    won_deals: int = 0
    total_value: float = 0.0
    win_rate: int = 0
    stages: tuple = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "totalDeals": self.total_deals,
            "activeDeals": self.active_deals,
            "wonDeals": self.won_deals,
            "totalValue": self.total_value,
            "winRate": self.win_rate,
            "stages": [
                {"id": s.status.value, "label": s.label, "count": s.count, "value": s.value}
                for s in self.stages
            ],
        }


def stage_deals(deals: Iterable[Deal], status: DealStatus) -> list[Deal]:
    """Deals sitting in one stage."""
    return [d for d in deals if d.status == status]


def stage_value(deals: Iterable[Deal], status: DealStatus) -> float:
    """Sum of deal values in one stage, counting missing values as 0."""
    return sum(d.deal_value or 0 for d in stage_deals(deals, status))


def total_pipeline_value(deals: Iterable[Deal]) -> float:
    return sum(d.deal_value or 0 for d in deals)


def summarize_pipeline(deals: Iterable[Deal]) -> PipelineSummary:
    """Summarize the whole deal list."""
    deals = list(deals)
    total = len(deals)
    won = sum(1 for d in deals if d.is_won)

    # "Active" here means not yet delivered (or lost); won deals still
    # count until the content ships.
    active = sum(
        1 for d in deals
        if d.status not in (DealStatus.DELIVERED, DealStatus.LOST)
    )

    stages = tuple(
        StageBreakdown(
            status=status,
            label=label,
            count=len(stage_deals(deals, status)),
            value=stage_value(deals, status),
        )
        for status, label in PIPELINE_STAGES
    )

    return PipelineSummary(
        total_deals=total,
        active_deals=active,
        won_deals=won,
        total_value=total_pipeline_value(deals),
        win_rate=round_half_up(won / total * 100) if total else 0,
        stages=stages,
    )
