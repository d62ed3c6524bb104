"""
Activity tools for the Intervals.icu MCP server.

Provides tools for listing, reading and updating activities.
"""

from typing import Any, Dict

from intervals_gateway.client_factory import get_client
from intervals_gateway.sdk import activities as sdk_activities
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.utils import to_json


def register_tools(app):
    """Register activity tools with the MCP app."""

    @app.tool()
    async def fetch_activities(athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        Retrieve the activities list in CSV format.

        Returns activity data including dates, types, durations, distances, etc.

        Args:
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)

        Returns:
            Raw CSV text
        """
        client = get_client()
        return await sdk_activities.export_activities_csv(client, athlete_id or DEFAULT_ATHLETE_ID)

    @app.tool()
    async def fetch_activities_list(
        oldest: str,
        newest: str,
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Retrieve activities as a JSON list for a date range.

        Args:
            oldest: Start date in yyyy-MM-dd format
            newest: End date in yyyy-MM-dd format
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)

        Returns:
            JSON list of activity summaries
        """
        client = get_client()
        data = await sdk_activities.list_activities(
            client, athlete_id or DEFAULT_ATHLETE_ID, oldest, newest,
        )
        return to_json(data)

    @app.tool()
    async def get_activity(activity_id: str, include_intervals: bool = True) -> str:
        """
        Get detailed activity data including intervals and metrics.

        Args:
            activity_id: The activity ID
            include_intervals: Include interval data (default: true)

        Returns:
            JSON with the full activity
        """
        client = get_client()
        data = await sdk_activities.get_activity(client, activity_id, include_intervals=include_intervals)
        return to_json(data)

    @app.tool()
    async def update_activity(activity_id: str, body: Dict[str, Any]) -> str:
        """
        Update an activity (e.g. name, type).

        Args:
            activity_id: The activity ID to update
            body: Activity fields to update, e.g. {"name": "Morning run", "type": "Run"}

        Returns:
            JSON with the updated activity
        """
        client = get_client()
        return to_json(await sdk_activities.update_activity(client, activity_id, body))

    return app
