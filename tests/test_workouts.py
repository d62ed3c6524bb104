"""
Tests for workout library and folder MCP tools.
"""

import json
import pytest
from unittest.mock import patch
from mcp.server.fastmcp import FastMCP

from intervals_gateway import workouts
from tests.conftest import get_tool_result_text


@pytest.fixture
def app_with_workouts():
    app = FastMCP("Test Intervals Workouts")
    app = workouts.register_tools(app)
    return app


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.workouts.list_workouts")
async def test_fetch_workouts(mock_list, app_with_workouts, mock_client):
    mock_list.return_value = [{"id": "w1", "name": "Threshold 2x20"}]

    result = await app_with_workouts.call_tool("fetch_workouts", {})

    assert json.loads(get_tool_result_text(result))[0]["name"] == "Threshold 2x20"
    mock_list.assert_awaited_once_with(mock_client, "0")


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.workouts.create_workout")
async def test_create_workout_omits_empty_fields(mock_create, app_with_workouts, mock_client):
    mock_create.return_value = {"id": "w2"}

    await app_with_workouts.call_tool("create_workout", {"name": "Recovery spin", "category": "Ride"})

    mock_create.assert_awaited_once_with(mock_client, "0", {"name": "Recovery spin", "category": "Ride"})


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.workouts.delete_workout")
async def test_delete_workout(mock_delete, app_with_workouts):
    mock_delete.return_value = {}

    result = await app_with_workouts.call_tool("delete_workout", {"workout_id": "w2"})

    assert json.loads(get_tool_result_text(result)) == {"deleted": True, "workout_id": "w2"}


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.workouts.list_folders")
async def test_fetch_folders(mock_list, app_with_workouts, mock_client):
    mock_list.return_value = [{"id": "f1", "children": []}]

    await app_with_workouts.call_tool("fetch_folders", {"athlete_id": "i9"})

    mock_list.assert_awaited_once_with(mock_client, "i9")


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.workouts.delete_folder")
async def test_delete_folder(mock_delete, app_with_workouts):
    mock_delete.return_value = {}

    result = await app_with_workouts.call_tool("delete_folder", {"folder_id": "f1"})

    assert json.loads(get_tool_result_text(result)) == {"deleted": True, "folder_id": "f1"}


@pytest.mark.asyncio
@patch("intervals_gateway.sdk.workouts.get_folder_shared_with")
async def test_get_folder_shared_with(mock_get, app_with_workouts, mock_client):
    mock_get.return_value = [{"id": "i2", "name": "Coach"}]

    result = await app_with_workouts.call_tool("get_folder_shared_with", {"folder_id": "f1"})

    assert json.loads(get_tool_result_text(result)) == [{"id": "i2", "name": "Coach"}]
    mock_get.assert_awaited_once_with(mock_client, "0", "f1")
