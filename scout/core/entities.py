"""
Core Scout Entities

The deal records the analytics layer reads. Scout's datastore remains
the system of record; these models are read-only snapshots handed to
the calculators by the caller.

Entities:
- Deal: a sponsorship opportunity between a creator and a brand
- DealStatus: pipeline stage of a deal
- TimeRange: lookback window selected on the dashboard
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidArgumentError


class DealStatus(str, Enum):
    """
    Pipeline stages a deal moves through on the board.
    LOST never appears on the board; it is accepted so that callers
    can exclude lost deals from open-pipeline counts.
    """
    PROSPECT = "prospect"
    PITCHED = "pitched"
    NEGOTIATING = "negotiating"
    WON = "won"
    DELIVERED = "delivered"
    LOST = "lost"


WON_STATUSES = frozenset({DealStatus.WON, DealStatus.DELIVERED})
CLOSED_STATUSES = frozenset({DealStatus.WON, DealStatus.DELIVERED, DealStatus.LOST})

# Board order, left to right
PIPELINE_STAGES = (
    (DealStatus.PROSPECT, "Prospects"),
    (DealStatus.PITCHED, "Pitched"),
    (DealStatus.NEGOTIATING, "Negotiating"),
    (DealStatus.WON, "Won"),
    (DealStatus.DELIVERED, "Delivered"),
)


class TimeRange(str, Enum):
    """Dashboard lookback windows."""
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"
    ALL = "all"

    @property
    def days(self) -> Optional[int]:
        """Window length in days, or None when no filtering applies."""
        return _RANGE_DAYS[self]

    @classmethod
    def parse(cls, value: Any) -> "TimeRange":
        """Coerce a member or its string value; anything else is a caller bug."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            allowed = ", ".join(member.value for member in cls)
            raise InvalidArgumentError(
                f"Unknown time range {value!r} (expected one of: {allowed})",
                argument="range",
                value=value,
            ) from None


_RANGE_DAYS = {
    TimeRange.LAST_7_DAYS: 7,
    TimeRange.LAST_30_DAYS: 30,
    TimeRange.LAST_90_DAYS: 90,
    TimeRange.ALL: None,
}


class Deal(BaseModel):
    """
    A tracked sponsorship opportunity.

    Accepts datastore rows (snake_case) and client payloads (camelCase).
    `created_at` doubles as the pitch date and the close-date proxy in
    analytics, since deals carry no separate close timestamp.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(default_factory=lambda: str(uuid4()))
    brand_name: str = Field(
        default="",
        validation_alias=AliasChoices("brand_name", "brandName"),
    )
    status: DealStatus = DealStatus.PROSPECT
    deal_value: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("deal_value", "dealValue"),
    )
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
    )
    pitched_date: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("pitched_date", "pitchedDate"),
    )
    notes: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return str(value)

    @classmethod
    def from_record(cls, record: dict) -> "Deal":
        """Build a deal from a datastore row."""
        return cls.model_validate(record)

    @property
    def has_value(self) -> bool:
        """True only for an agreed, positive deal value."""
        return self.deal_value is not None and self.deal_value > 0

    @property
    def is_won(self) -> bool:
        return self.status in WON_STATUSES

    @property
    def is_open(self) -> bool:
        return self.status not in CLOSED_STATUSES


def stage_label(status: DealStatus) -> str:
    """Board label for a stage; off-board stages use their capitalized value."""
    for stage, label in PIPELINE_STAGES:
        if stage == status:
            return label
    return DealStatus(status).value.capitalize()


def _stage_index(status: DealStatus) -> Optional[int]:
    for index, (stage, _) in enumerate(PIPELINE_STAGES):
        if stage == status:
            return index
    return None


def next_stage(status: DealStatus) -> Optional[DealStatus]:
    """Stage to the right on the board, or None at the end."""
    index = _stage_index(status)
    if index is None or index >= len(PIPELINE_STAGES) - 1:
        return None
    return PIPELINE_STAGES[index + 1][0]


def previous_stage(status: DealStatus) -> Optional[DealStatus]:
    """Stage to the left on the board, or None at the start."""
    index = _stage_index(status)
    if index is None or index == 0:
        return None
    return PIPELINE_STAGES[index - 1][0]
