#!/usr/bin/env python3
"""
Scout Pipeline Analytics - Demo

Builds a sample creator pipeline and prints the dashboard insights for
each time range:
1. Advanced insights report (win rate, projections, best pitch timing)
2. Pipeline summary and per-stage breakdown
3. Benchmark comparison
"""

import sys
from datetime import datetime, timedelta

from scout.config import get_settings
from scout.core import Deal, DealStatus, TimeRange
from scout.core.logger import configure_logging
from scout.metrics import InsightsGenerator

settings = get_settings()
logger = configure_logging(
    level=settings.log_level,
    debug=settings.debug,
    log_to_file=settings.log_to_file,
)


def build_sample_deals(now: datetime) -> list[Deal]:
    """A small pipeline spread across the last four months."""
    rows = [
        ("Glossier", DealStatus.DELIVERED, 3200, 85, 10),
        ("Notion", DealStatus.WON, 2500, 40, 14),
        ("Gymshark", DealStatus.WON, 1800, 21, 10),
        ("Athletic Greens", DealStatus.NEGOTIATING, 4000, 12, 16),
        ("Skillshare", DealStatus.PITCHED, 1500, 6, 11),
        ("Squarespace", DealStatus.PITCHED, None, 4, 9),
        ("HelloFresh", DealStatus.PROSPECT, 0, 2, 19),
        ("Audible", DealStatus.LOST, 2200, 60, 13),
    ]

    deals = []
    for i, (brand, status, value, days_ago, hour) in enumerate(rows, 1):
        created = (now - timedelta(days=days_ago)).replace(
            hour=hour, minute=0, second=0, microsecond=0
        )
        deals.append(Deal(
            id=f"deal-{i}",
            brand_name=brand,
            status=status,
            deal_value=value,
            created_at=created,
        ))
    return deals


def run_insights_demo(now: datetime) -> None:
    """Print the insights panel for every time range."""
    generator = InsightsGenerator(config=settings.metrics)
    deals = build_sample_deals(now)

    for time_range in TimeRange:
        print("=" * 60)
        print(f"{settings.app_name.upper()} INSIGHTS - {time_range.value}")
        print("=" * 60)
        panel = generator.generate(deals, time_range, now)
        print(generator.format_summary(panel))
        print()


def main():
    """Main entry point."""
    now = datetime.now()
    logger.info("Running %s insights demo", settings.app_name)
    run_insights_demo(now)
    return 0


if __name__ == "__main__":
    sys.exit(main())
