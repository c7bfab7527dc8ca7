"""Shared fixtures for Scout analytics tests."""

from datetime import datetime, timedelta
from typing import Optional

import pytest

from scout.core.entities import Deal, DealStatus

# Friday, 15 March 2024, 5pm
NOW = datetime(2024, 3, 15, 17, 0, 0)


def make_deal(
    status: DealStatus = DealStatus.PROSPECT,
    value: Optional[float] = None,
    days_ago: float = 1,
    hour: Optional[int] = None,
    brand: str = "Brand",
    now: datetime = NOW,
) -> Deal:
    """Build a deal created `days_ago` days before `now`, optionally at `hour`."""
    created = now - timedelta(days=days_ago)
    if hour is not None:
        created = created.replace(hour=hour, minute=0, second=0, microsecond=0)
    return Deal(
        brand_name=brand,
        status=status,
        deal_value=value,
        created_at=created,
    )


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def mixed_pipeline() -> list[Deal]:
    """One deal per stage plus a lost deal, all within the last 30 days."""
    return [
        make_deal(DealStatus.PROSPECT, 1000, days_ago=1, hour=10, brand="Notion"),
        make_deal(DealStatus.PITCHED, 2000, days_ago=3, hour=13, brand="Gymshark"),
        make_deal(DealStatus.NEGOTIATING, None, days_ago=5, hour=16, brand="Skillshare"),
        make_deal(DealStatus.WON, 3000, days_ago=8, hour=10, brand="Glossier"),
        make_deal(DealStatus.DELIVERED, 4000, days_ago=20, hour=11, brand="Audible"),
        make_deal(DealStatus.LOST, 500, days_ago=25, hour=19, brand="HelloFresh"),
    ]
