"""Tests for api/training.py — training overview and planning context."""

import pytest
from unittest.mock import AsyncMock

from intervals_gateway.api.training import (
    filter_by_type,
    get_planning_context,
    get_training_overview,
)
from intervals_gateway.errors import ClientInputError, UpstreamError
from tests.conftest import respond


def test_filter_by_type_case_insensitive():
    activities = [{"id": 1, "type": "Ride"}, {"id": 2, "type": "Run"}, {"id": 3}]
    assert filter_by_type(activities, "ride") == [{"id": 1, "type": "Ride"}]
    assert filter_by_type(activities, None) == activities


class TestTrainingOverview:
    @pytest.mark.asyncio
    async def test_composes_three_reads(self, upstream):
        upstream.add("GET", "/athlete/0/wellness", respond(json=[{"id": "2026-02-01", "ctl": 50}]))
        upstream.add("GET", "/athlete/0/activities", respond(json=[
            {"id": "a1", "type": "Ride"},
            {"id": "a2", "type": "Run"},
        ]))
        upstream.add("GET", "/athlete/0/events", respond(json=[{"id": 9, "category": "WORKOUT"}]))

        result = await get_training_overview(
            upstream.client(), "2026-02-01", "2026-02-07", activity_type="Run",
        )

        assert result["period"] == {"oldest": "2026-02-01", "newest": "2026-02-07"}
        assert result["wellness"] == [{"id": "2026-02-01", "ctl": 50}]
        assert result["completed_activities"] == [{"id": "a2", "type": "Run"}]
        assert result["planned_events"] == [{"id": 9, "category": "WORKOUT"}]

        assert len(upstream.requests) == 3
        for request in upstream.requests:
            assert request.url.params["oldest"] == "2026-02-01"
            assert request.url.params["newest"] == "2026-02-07"

    @pytest.mark.asyncio
    async def test_one_failure_fails_the_whole_overview(self, upstream):
        upstream.add("GET", "/athlete/0/wellness", respond(json=[]))
        upstream.add("GET", "/athlete/0/activities", respond(500, text="down"))
        upstream.add("GET", "/athlete/0/events", respond(json=[]))

        with pytest.raises(UpstreamError) as exc_info:
            await get_training_overview(upstream.client(), "2026-02-01", "2026-02-07")

        assert exc_info.value.status == 500

    @pytest.mark.asyncio
    async def test_rejects_inverted_range(self, upstream):
        with pytest.raises(ClientInputError):
            await get_training_overview(upstream.client(), "2026-02-07", "2026-02-01")
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_uses_athlete_id(self, upstream):
        for path in ("wellness", "activities", "events"):
            upstream.add("GET", f"/athlete/i42/{path}", respond(json=[]))

        await get_training_overview(
            upstream.client(), "2026-02-01", "2026-02-07", athlete_id="i42",
        )

        assert len(upstream.calls("GET")) == 3
        assert all("/athlete/i42/" in r.url.path for r in upstream.requests)


class TestPlanningContext:
    @pytest.mark.asyncio
    async def test_windows_from_date(self, upstream):
        upstream.add("GET", "/athlete/0/events", respond(json=[{"id": 1}]))
        upstream.add("GET", "/athlete/0/workouts", respond(json=[{"id": "w1"}]))
        upstream.add("GET", "/athlete/0/wellness", respond(json=[{"id": "2026-02-28"}]))

        result = await get_planning_context(upstream.client(), from_date="2026-03-01")

        assert result["period"] == {"from_date": "2026-03-01", "to_date": "2026-03-15"}
        assert result["wellness_period"] == {"oldest": "2026-02-22", "newest": "2026-03-01"}
        assert result["planned_events"] == [{"id": 1}]
        assert result["workout_library"] == [{"id": "w1"}]
        assert result["recent_wellness"] == [{"id": "2026-02-28"}]

        events_request = upstream.calls("GET", "/athlete/0/events")[0]
        assert events_request.url.params["oldest"] == "2026-03-01"
        assert events_request.url.params["newest"] == "2026-03-15"
        wellness_request = upstream.calls("GET", "/athlete/0/wellness")[0]
        assert wellness_request.url.params["oldest"] == "2026-02-22"
        assert wellness_request.url.params["newest"] == "2026-03-01"

    @pytest.mark.asyncio
    async def test_custom_spans(self, upstream):
        upstream.add("GET", "/athlete/0/events", respond(json=[]))
        upstream.add("GET", "/athlete/0/workouts", respond(json=[]))
        upstream.add("GET", "/athlete/0/wellness", respond(json=[]))

        result = await get_planning_context(
            upstream.client(), from_date="2026-12-30", span_days=3, wellness_days_back=0,
        )

        assert result["period"]["to_date"] == "2027-01-02"
        assert result["wellness_period"] == {"oldest": "2026-12-30", "newest": "2026-12-30"}

    @pytest.mark.asyncio
    async def test_negative_span_rejected(self, upstream):
        with pytest.raises(ClientInputError):
            await get_planning_context(upstream.client(), from_date="2026-03-01", span_days=-1)
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_rate_limited_read_is_retried_inside_pipeline(self, upstream):
        upstream.add("GET", "/athlete/0/events", respond(json=[]))
        upstream.add("GET", "/athlete/0/workouts", respond(429), respond(json=[{"id": "w1"}]))
        upstream.add("GET", "/athlete/0/wellness", respond(json=[]))

        result = await get_planning_context(
            upstream.client(sleep=AsyncMock()), from_date="2026-03-01",
        )

        assert result["workout_library"] == [{"id": "w1"}]
        assert len(upstream.calls("GET", "/athlete/0/workouts")) == 2
