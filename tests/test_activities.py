"""
Tests for activity MCP tools.
"""

import json
import pytest
from unittest.mock import patch
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from intervals_gateway import activities
from intervals_gateway.errors import ConfigurationError
from tests.conftest import get_tool_result_text


@pytest.fixture
def app_with_activities():
    app = FastMCP("Test Intervals Activities")
    app = activities.register_tools(app)
    return app


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.activities.export_activities_csv")
async def test_fetch_activities_returns_raw_csv(mock_export, app_with_activities, mock_client):
    mock_export.return_value = "id,name\n1,Ride\n"

    result = await app_with_activities.call_tool("fetch_activities", {})

    assert get_tool_result_text(result) == "id,name\n1,Ride\n"
    mock_export.assert_awaited_once_with(mock_client, "0")


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.activities.list_activities")
async def test_fetch_activities_list(mock_list, app_with_activities, mock_client):
    mock_list.return_value = [{"id": "a1", "type": "Run"}]

    result = await app_with_activities.call_tool("fetch_activities_list", {
        "oldest": "2026-02-01",
        "newest": "2026-02-07",
    })

    assert json.loads(get_tool_result_text(result)) == [{"id": "a1", "type": "Run"}]
    mock_list.assert_awaited_once_with(mock_client, "0", "2026-02-01", "2026-02-07")


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.activities.get_activity")
async def test_get_activity(mock_get, app_with_activities, mock_client):
    mock_get.return_value = {"id": "a1", "icu_intervals": [{"type": "WORK"}]}

    result = await app_with_activities.call_tool("get_activity", {"activity_id": "a1"})

    data = json.loads(get_tool_result_text(result))
    assert data["icu_intervals"] == [{"type": "WORK"}]
    mock_get.assert_awaited_once_with(mock_client, "a1", include_intervals=True)


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.activities.update_activity")
async def test_update_activity(mock_update, app_with_activities, mock_client):
    mock_update.return_value = {"id": "a1", "name": "Hill reps"}

    await app_with_activities.call_tool("update_activity", {
        "activity_id": "a1",
        "body": {"name": "Hill reps"},
    })

    mock_update.assert_awaited_once_with(mock_client, "a1", {"name": "Hill reps"})


@pytest.mark.asyncio
async def test_missing_configuration_surfaces_as_tool_error(app_with_activities, mock_get_client):
    mock_get_client.side_effect = ConfigurationError("Missing INTERVALS_ICU_API_KEY environment variable")

    with pytest.raises(ToolError) as exc_info:
        await app_with_activities.call_tool("fetch_activities", {})

    assert "INTERVALS_ICU_API_KEY" in str(exc_info.value)
