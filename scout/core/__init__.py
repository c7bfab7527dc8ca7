"""
Core domain models for Scout analytics.
"""

from .entities import (
    CLOSED_STATUSES,
    PIPELINE_STAGES,
    WON_STATUSES,
    Deal,
    DealStatus,
    TimeRange,
    next_stage,
    previous_stage,
    stage_label,
)
from .errors import InvalidArgumentError, ScoutError

__all__ = [
    "CLOSED_STATUSES",
    "PIPELINE_STAGES",
    "WON_STATUSES",
    "Deal",
    "DealStatus",
    "TimeRange",
    "next_stage",
    "previous_stage",
    "stage_label",
    "InvalidArgumentError",
    "ScoutError",
]
