"""Tests for DeadlineService."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from melclock.config.settings import MelSettings
from melclock.services.deadline import DeadlineService, DiscoveryInputs

NOW = datetime(2024, 3, 15, 8, 0, tzinfo=UTC)


def _inputs(**kwargs: object) -> DiscoveryInputs:
    base: dict[str, object] = {"discovery_date": "2024-03-10", "discovery_time": "08:00"}
    base.update(kwargs)
    return DiscoveryInputs.model_validate(base)


class TestCalculate:
    def test_all_categories_present(self, service: DeadlineService) -> None:
        result = service.calculate(_inputs(category_a_days=15), now=NOW)
        assert result.ok
        assert result.op == "calculate"
        assert list(result.data["categories"]) == ["A", "B", "C", "D"]
        assert result.data["current_time"] == "2024-03-15 08:00 UTC"
        assert result.data["discovery"] == "2024-03-10 08:00 UTC"
        assert result.data["interval_start"] == "2024-03-10"

    def test_category_c_payload(self, service: DeadlineService) -> None:
        result = service.calculate(_inputs(), now=NOW)
        c = result.data["categories"]["C"]
        assert c["formatted_deadline"] == "2024-03-20 23:59 UTC"
        assert c["remaining"] == "6 days remaining"
        assert c["is_expired"] is False
        assert c["interval_days"] == 10

    def test_needs_input_warning(self, service: DeadlineService) -> None:
        result = service.calculate(_inputs(), now=NOW)
        assert result.data["categories"]["A"]["needs_input"] is True
        assert any("Category A needs a repair interval" in w for w in result.warnings)

    def test_expired_warning(self, service: DeadlineService) -> None:
        result = service.calculate(_inputs(), now=NOW)
        b = result.data["categories"]["B"]
        assert b["is_expired"] is True
        assert "Category B deadline expired at 2024-03-13 23:59 UTC" in result.warnings

    def test_missing_time_skips_calculation(self, service: DeadlineService) -> None:
        result = service.calculate(_inputs(discovery_time=None), now=NOW)
        assert result.ok
        assert result.data["categories"] == {}
        assert result.data["discovery"] is None
        assert result.warnings == []

    def test_malformed_date_is_error(self, service: DeadlineService) -> None:
        result = service.calculate(_inputs(discovery_date="2024-02-30"), now=NOW)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DISCOVERY"
        assert result.error.detail["discovery_date"] == "2024-02-30"

    def test_out_of_range_interval_is_error(self, service: DeadlineService) -> None:
        result = service.calculate(_inputs(category_a_days=5_000_000), now=NOW)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "DEADLINE_OUT_OF_RANGE"

    def test_repeatable(self, service: DeadlineService) -> None:
        first = service.calculate(_inputs(category_a_days=3), now=NOW)
        second = service.calculate(_inputs(category_a_days=3), now=NOW)
        assert first.model_dump_json() == second.model_dump_json()


class TestDefaults:
    def test_default_inputs_use_current_minute(self, service: DeadlineService) -> None:
        inputs = service.default_inputs(datetime(2024, 7, 4, 13, 37, 42, tzinfo=UTC))
        assert inputs.discovery_date == "2024-07-04"
        assert inputs.discovery_time == "13:37"
        assert inputs.category_a_days is None

    def test_default_a_days_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "melclock.toml").write_text("[deadlines]\ncategory_a_days = 5\n")
        svc = DeadlineService(MelSettings.from_cli(search_from=tmp_path))
        assert svc.default_inputs(NOW).category_a_days == 5

    def test_inputs_reject_unknown_fields(self) -> None:
        with pytest.raises(Exception):
            DiscoveryInputs.model_validate({"discovery_day": "2024-01-01"})


class TestCategories:
    def test_reference_data(self, service: DeadlineService) -> None:
        result = service.categories()
        assert result.ok
        assert result.op == "categories"
        assert result.data["count"] == 4
        assert [item["category"] for item in result.data["items"]] == ["A", "B", "C", "D"]
        assert result.data["items"][1]["repair_hours"] == "72 hours"
        assert len(result.data["rules"]) == 4
