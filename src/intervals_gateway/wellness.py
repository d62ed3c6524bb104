"""
Wellness tools for the Intervals.icu MCP server.

Resting HR, HRV, sleep, weight, mood and the rest of the daily record.
"""

from typing import Any, Dict

from intervals_gateway.client_factory import get_client
from intervals_gateway.sdk import wellness as sdk_wellness
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.utils import parse_date, to_json


def register_tools(app):
    """Register wellness tools with the MCP app."""

    @app.tool()
    async def fetch_wellness(
        oldest: str,
        newest: str = None,
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Get wellness data for a date or date range.

        Args:
            oldest: Start date in yyyy-MM-dd format
            newest: End date in yyyy-MM-dd format. Omit for a single day.
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)

        Returns:
            JSON with one wellness record (single day) or a list (range)
        """
        client = get_client()
        athlete_id = athlete_id or DEFAULT_ATHLETE_ID
        if newest:
            data = await sdk_wellness.list_wellness(client, athlete_id, oldest, newest)
        else:
            data = await sdk_wellness.get_wellness(client, athlete_id, oldest)
        return to_json(data)

    @app.tool()
    async def update_wellness(
        date: str,
        body: Dict[str, Any],
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Update wellness data for a date (e.g. restingHR, sleepSecs, mood).

        Args:
            date: Wellness date in yyyy-MM-dd format
            body: Wellness fields to update, e.g. {"restingHR": 55, "sleepSecs": 28800}
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)

        Returns:
            JSON with the updated wellness record
        """
        parse_date(date)
        client = get_client()
        data = await sdk_wellness.update_wellness(client, athlete_id or DEFAULT_ATHLETE_ID, date, body)
        return to_json(data)

    return app
