"""Tests for the deal model, stages and time ranges."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from scout.core.entities import (
    PIPELINE_STAGES,
    Deal,
    DealStatus,
    TimeRange,
    next_stage,
    previous_stage,
    stage_label,
)
from scout.core.errors import InvalidArgumentError, ScoutError


class TestDeal:
    def test_from_snake_case_record(self):
        deal = Deal.from_record({
            "id": "d-1",
            "brand_name": "Notion",
            "status": "negotiating",
            "deal_value": 1500,
            "created_at": "2024-03-01T09:15:00",
            "user_id": "ignored",
        })

        assert deal.id == "d-1"
        assert deal.brand_name == "Notion"
        assert deal.status is DealStatus.NEGOTIATING
        assert deal.deal_value == 1500
        assert deal.created_at == datetime(2024, 3, 1, 9, 15)

    def test_from_camel_case_payload(self):
        deal = Deal.model_validate({
            "id": 42,
            "brandName": "Gymshark",
            "status": "won",
            "dealValue": 800.5,
            "createdAt": "2024-03-01T09:15:00Z",
            "pitchedDate": "2024-03-02T10:00:00Z",
        })

        assert deal.id == "42"
        assert deal.brand_name == "Gymshark"
        assert deal.deal_value == 800.5
        assert deal.created_at.tzinfo is not None
        assert deal.created_at.utcoffset() == timezone.utc.utcoffset(None)
        assert deal.pitched_date is not None

    def test_value_is_optional(self):
        deal = Deal(created_at=datetime(2024, 3, 1))
        assert deal.deal_value is None
        assert deal.status is DealStatus.PROSPECT
        assert deal.id

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError):
            Deal(deal_value=-1, created_at=datetime(2024, 3, 1))

    @pytest.mark.parametrize("value", ["inf", "Infinity", float("inf"), "nan", float("nan")])
    def test_non_finite_value_rejected(self, value):
        with pytest.raises(ValidationError):
            Deal.model_validate({"status": "pitched", "deal_value": value, "created_at": datetime(2024, 3, 1)})

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Deal(status="archived", created_at=datetime(2024, 3, 1))

    def test_created_at_required(self):
        with pytest.raises(ValidationError):
            Deal(brand_name="Notion")

    def test_frozen(self):
        deal = Deal(created_at=datetime(2024, 3, 1))
        with pytest.raises(ValidationError):
            deal.status = DealStatus.WON

    @pytest.mark.parametrize("value,expected", [(None, False), (0, False), (0.01, True), (500, True)])
    def test_has_value(self, value, expected):
        assert Deal(deal_value=value, created_at=datetime(2024, 3, 1)).has_value is expected

    @pytest.mark.parametrize("status,won,open_", [
        (DealStatus.PROSPECT, False, True),
        (DealStatus.PITCHED, False, True),
        (DealStatus.NEGOTIATING, False, True),
        (DealStatus.WON, True, False),
        (DealStatus.DELIVERED, True, False),
        (DealStatus.LOST, False, False),
    ])
    def test_status_flags(self, status, won, open_):
        deal = Deal(status=status, created_at=datetime(2024, 3, 1))
        assert deal.is_won is won
        assert deal.is_open is open_


class TestTimeRange:
    @pytest.mark.parametrize("value,days", [("7d", 7), ("30d", 30), ("90d", 90), ("all", None)])
    def test_parse_and_days(self, value, days):
        time_range = TimeRange.parse(value)
        assert time_range.value == value
        assert time_range.days == days

    def test_parse_member(self):
        assert TimeRange.parse(TimeRange.ALL) is TimeRange.ALL

    @pytest.mark.parametrize("value", ["1y", "7", None, 7, ["7d"]])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TimeRange.parse(value)
        assert "7d, 30d, 90d, all" in str(exc_info.value)


class TestStages:
    def test_board_order(self):
        assert [s for s, _ in PIPELINE_STAGES] == [
            DealStatus.PROSPECT,
            DealStatus.PITCHED,
            DealStatus.NEGOTIATING,
            DealStatus.WON,
            DealStatus.DELIVERED,
        ]

    def test_next_stage(self):
        assert next_stage(DealStatus.PROSPECT) is DealStatus.PITCHED
        assert next_stage(DealStatus.WON) is DealStatus.DELIVERED
        assert next_stage(DealStatus.DELIVERED) is None

    def test_previous_stage(self):
        assert previous_stage(DealStatus.PITCHED) is DealStatus.PROSPECT
        assert previous_stage(DealStatus.PROSPECT) is None

    def test_lost_is_off_the_board(self):
        assert next_stage(DealStatus.LOST) is None
        assert previous_stage(DealStatus.LOST) is None

    def test_labels(self):
        assert stage_label(DealStatus.PROSPECT) == "Prospects"
        assert stage_label("negotiating") == "Negotiating"
        assert stage_label(DealStatus.LOST) == "Lost"


class TestErrors:
    def test_message_carries_code(self):
        error = InvalidArgumentError("bad range", argument="range", value="1y")
        assert str(error) == "[INVALID_ARGUMENT] bad range"
        assert error.details == {"argument": "range", "value": "1y"}

    def test_hierarchy(self):
        error = InvalidArgumentError("bad")
        assert isinstance(error, ScoutError)
        assert isinstance(error, ValueError)

    def test_base_defaults(self):
        error = ScoutError("boom")
        assert error.code == "UNKNOWN"
        assert error.details == {}
