"""
Tests for wellness MCP tools.
"""

import json
import pytest
from unittest.mock import patch
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from intervals_gateway import wellness
from tests.conftest import get_tool_result_text


@pytest.fixture
def app_with_wellness():
    app = FastMCP("Test Intervals Wellness")
    app = wellness.register_tools(app)
    return app


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.wellness.get_wellness")
@patch("intervals_gateway.sdk.wellness.list_wellness")
async def test_fetch_wellness_range(mock_list, mock_get, app_with_wellness, mock_client):
    mock_list.return_value = [{"id": "2026-02-01", "hrv": 62}]

    result = await app_with_wellness.call_tool("fetch_wellness", {
        "oldest": "2026-02-01",
        "newest": "2026-02-03",
    })

    assert json.loads(get_tool_result_text(result)) == [{"id": "2026-02-01", "hrv": 62}]
    mock_list.assert_awaited_once_with(mock_client, "0", "2026-02-01", "2026-02-03")
    mock_get.assert_not_awaited()


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.wellness.get_wellness")
@patch("intervals_gateway.sdk.wellness.list_wellness")
async def test_fetch_wellness_single_day(mock_list, mock_get, app_with_wellness, mock_client):
    mock_get.return_value = {"id": "2026-02-01", "restingHR": 48}

    result = await app_with_wellness.call_tool("fetch_wellness", {"oldest": "2026-02-01"})

    assert json.loads(get_tool_result_text(result))["restingHR"] == 48
    mock_get.assert_awaited_once_with(mock_client, "0", "2026-02-01")
    mock_list.assert_not_awaited()


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.wellness.update_wellness")
async def test_update_wellness(mock_update, app_with_wellness, mock_client):
    mock_update.return_value = {"id": "2026-02-01", "sleepSecs": 28800}

    await app_with_wellness.call_tool("update_wellness", {
        "date": "2026-02-01",
        "body": {"sleepSecs": 28800},
    })

    mock_update.assert_awaited_once_with(mock_client, "0", "2026-02-01", {"sleepSecs": 28800})


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.wellness.update_wellness")
async def test_update_wellness_rejects_bad_date(mock_update, app_with_wellness, mock_get_client):
    with pytest.raises(ToolError):
        await app_with_wellness.call_tool("update_wellness", {"date": "yesterday", "body": {}})

    mock_update.assert_not_awaited()
    mock_get_client.assert_not_called()
