"""
Deal Metrics Engine

Turns a creator's deal list into the "Advanced Insights" metrics:
- Win rate
- Average deal value and deal cycle
- 30 and 90 day revenue projections
- Best pitch day and time of day
- Benchmark comparison against industry placeholders

Every report is a pure function of (deals, time range, now) for a given
MetricsConfig. The clock is always injected by the caller.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, Optional, Union

from ..config.settings import DEFAULT_METRICS_CONFIG, MetricsConfig
from ..core.entities import Deal, TimeRange
from ..core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# Indexed by datetime.weekday()
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# (start hour inclusive, end hour exclusive, label)
PITCH_TIME_BUCKETS = (
    (9, 12, "9am - 12pm"),
    (12, 15, "12pm - 3pm"),
    (15, 18, "3pm - 6pm"),
)
OTHER_PITCH_TIME = "Other"

# The two "no data" day defaults differ on purpose: an empty range reports
# Monday, a range with deals but no wins reports Tuesday.
EMPTY_RANGE_PITCH_DAY = "Monday"
NO_WINS_PITCH_DAY = "Tuesday"
DEFAULT_PITCH_TIME = "10am - 12pm"

DealLike = Union[Deal, dict]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def hour_bucket(hour: int) -> str:
    """Time-of-day bucket label for an hour of the day."""
    for start, end, label in PITCH_TIME_BUCKETS:
        if start <= hour < end:
            return label
    return OTHER_PITCH_TIME


def most_common(labels: Iterable[str], default: str) -> str:
    """
    Label with the highest tally.

    Ties go to the label encountered first; there is no secondary key.
    """
    tally: dict[str, int] = {}
    for label in labels:
        tally[label] = tally.get(label, 0) + 1

    best = None
    best_count = 0
    for label, count in tally.items():
        if count > best_count:
            best = label
            best_count = count

    return best if best is not None else default


@dataclass(frozen=True)
class Benchmark:
    """The user's metrics next to fixed industry reference values."""
    your_win_rate: int = 0
    your_avg_deal: int = 0
    avg_win_rate: int = 43
    avg_deal_value: int = 2800

    def to_dict(self) -> dict:
        return {
            "yourWinRate": self.your_win_rate,
            "yourAvgDeal": self.your_avg_deal,
            "avgWinRate": self.avg_win_rate,
            "avgDealValue": self.avg_deal_value,
        }


@dataclass(frozen=True)
class MetricsReport:
    """A computed insights report. Built per call, never cached."""
    win_rate: int = 0
    average_deal_value: int = 0
    projected_revenue_30d: int = 0
    projected_revenue_90d: int = 0
    average_deal_cycle_days: int = 0
    best_pitch_day: str = EMPTY_RANGE_PITCH_DAY
    best_pitch_time: str = DEFAULT_PITCH_TIME
    benchmark: Benchmark = field(default_factory=Benchmark)

    # Context
    time_range: TimeRange = TimeRange.ALL
    sample_size: int = 0
    won_count: int = 0
    active_pipeline_value: float = 0.0

    def to_dict(self) -> dict:
        return {
            "winRate": self.win_rate,
            "averageDealValue": self.average_deal_value,
            "projectedRevenue30d": self.projected_revenue_30d,
            "projectedRevenue90d": self.projected_revenue_90d,
            "averageDealCycleDays": self.average_deal_cycle_days,
            "bestPitchDay": self.best_pitch_day,
            "bestPitchTime": self.best_pitch_time,
            "benchmark": self.benchmark.to_dict(),
            "timeRange": self.time_range.value,
            "sampleSize": self.sample_size,
        }


class DealMetricsEngine:
    """
    Calculates pipeline analytics over an in-memory deal list.

    Holds only its configuration, so a single instance can be shared
    between callers.
    """

    def __init__(self, config: MetricsConfig = None):
        self._config = config or DEFAULT_METRICS_CONFIG

    @property
    def config(self) -> MetricsConfig:
        return self._config

    def compute_metrics(
        self,
        deals: Optional[Iterable[DealLike]],
        time_range: Union[TimeRange, str],
        now: datetime
    ) -> MetricsReport:
        """
        Compute the insights report for deals created within `time_range`
        of `now`.

        Best pitch day and time read the weekday and hour of `created_at`
        as given, so convert datastore timestamps (usually UTC) to the
        user's local time zone before calling.

        Raises:
            InvalidArgumentError: deals is None, time_range is not one of
                7d/30d/90d/all, or now and a deal's created_at mix naive
                and timezone-aware datetimes.
        """
        if deals is None:
            raise InvalidArgumentError("deals must not be None", argument="deals")
        if not isinstance(now, datetime):
            raise InvalidArgumentError(
                f"now must be a datetime, got {type(now).__name__}",
                argument="now",
                value=now,
            )
        time_range = TimeRange.parse(time_range)

        in_range = self.filter_by_range(
            [coerce_deal(deal, now) for deal in deals],
            time_range,
            now
        )

        if not in_range:
            logger.debug("No deals in range %s, returning defaults", time_range.value)
            return MetricsReport(
                benchmark=self._benchmark(0, 0),
                time_range=time_range,
            )

        won = [d for d in in_range if d.is_won]
        win_rate = round_half_up(100 * len(won) / len(in_range))
        average_deal_value = self._average_deal_value(in_range)

        # Won deals carry no close timestamp, so the cycle runs to `now`
        # and overstates cycle time for deals won long ago.
        if won:
            cycle_days = [max(0, (now - d.created_at) // timedelta(days=1)) for d in won]
            average_cycle = round_half_up(sum(cycle_days) / len(cycle_days))
        else:
            average_cycle = self._config.default_cycle_days

        # The 30 day figure is a flat share of the 90 day projection,
        # not a separately time-weighted forecast.
        pipeline_value = sum(d.deal_value or 0 for d in in_range if d.is_open)
        probability = win_rate / 100
        projected_90d = round_half_up(pipeline_value * probability)
        projected_30d = round_half_up(
            pipeline_value * probability * self._config.thirty_day_fraction
        )

        best_day = most_common(
            (WEEKDAY_NAMES[d.created_at.weekday()] for d in won),
            NO_WINS_PITCH_DAY
        )
        best_time = most_common(
            (hour_bucket(d.created_at.hour) for d in won),
            DEFAULT_PITCH_TIME
        )

        logger.debug(
            "Computed metrics over %d deals (%d won) for range %s",
            len(in_range), len(won), time_range.value
        )

        return MetricsReport(
            win_rate=win_rate,
            average_deal_value=average_deal_value,
            projected_revenue_30d=projected_30d,
            projected_revenue_90d=projected_90d,
            average_deal_cycle_days=average_cycle,
            best_pitch_day=best_day,
            best_pitch_time=best_time,
            benchmark=self._benchmark(win_rate, average_deal_value),
            time_range=time_range,
            sample_size=len(in_range),
            won_count=len(won),
            active_pipeline_value=pipeline_value,
        )

    @staticmethod
    def filter_by_range(
        deals: list[Deal],
        time_range: TimeRange,
        now: datetime
    ) -> list[Deal]:
        """Deals created at or after the range cutoff; `all` keeps everything."""
        days = TimeRange.parse(time_range).days
        if days is None:
            return list(deals)

        cutoff = now - timedelta(days=days)
        return [d for d in deals if d.created_at >= cutoff]

    def compare_to_benchmark(self, report: MetricsReport) -> dict:
        """Compare the report's win rate and average deal to the benchmark."""
        benchmark = report.benchmark
        pairs = {
            "win_rate": (benchmark.your_win_rate, benchmark.avg_win_rate, "%"),
            "average_deal_value": (benchmark.your_avg_deal, benchmark.avg_deal_value, "$"),
        }

        comparisons = {}
        for name, (current, reference, unit) in pairs.items():
            delta = current - reference
            delta_percent = (delta / reference * 100) if reference else 0

            comparisons[name] = {
                "metric": name,
                "unit": unit,
                "current_value": current,
                "benchmark_value": reference,
                "delta": delta,
                "delta_percent": delta_percent,
                "is_above": delta > 0,
            }

        return comparisons

    def _average_deal_value(self, deals: list[Deal]) -> int:
        # Missing and zero values mean "not agreed yet", never zero dollars
        values = [d.deal_value for d in deals if d.has_value]
        if not values:
            return 0
        return round_half_up(sum(values) / len(values))

    def _benchmark(self, win_rate: int, average_deal_value: int) -> Benchmark:
        return Benchmark(
            your_win_rate=win_rate,
            your_avg_deal=average_deal_value,
            avg_win_rate=self._config.benchmark_win_rate,
            avg_deal_value=self._config.benchmark_deal_value,
        )


def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def coerce_deal(deal: DealLike, now: datetime) -> Deal:
    """
    Accept a Deal or a datastore row, checking it can be compared to `now`.
    """
    if isinstance(deal, dict):
        deal = Deal.from_record(deal)
    elif not isinstance(deal, Deal):
        raise InvalidArgumentError(
            f"Expected a Deal or a deal record, got {type(deal).__name__}",
            argument="deals",
        )

    if _is_aware(deal.created_at) != _is_aware(now):
        raise InvalidArgumentError(
            f"Deal {deal.id} created_at and now mix naive and timezone-aware datetimes",
            argument="now",
            value=now,
        )
    return deal


def compute_metrics(
    deals: Optional[Iterable[DealLike]],
    time_range: Union[TimeRange, str],
    now: datetime,
    config: MetricsConfig = None
) -> MetricsReport:
    """Compute an insights report with a default-configured engine."""
    return DealMetricsEngine(config).compute_metrics(deals, time_range, now)
