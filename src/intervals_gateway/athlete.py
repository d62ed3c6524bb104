"""
Athlete tools for the Intervals.icu MCP server.

Health check, calendars and power curves.
"""

import logging

from intervals_gateway.client_factory import get_client
from intervals_gateway.config import get_settings
from intervals_gateway.sdk import athlete as sdk_athlete
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.utils import normalize_local_datetime, to_json

logger = logging.getLogger(__name__)


def register_tools(app):
    """Register athlete-level tools with the MCP app."""

    @app.tool()
    async def ping(check_api: bool = False) -> str:
        """
        Health check - verify API connectivity and authentication.

        Never fails: connectivity problems are reported in the result.

        Args:
            check_api: If true, makes a test API call to verify credentials

        Returns:
            JSON with ok flag and, on failure, the error
        """
        if not check_api:
            return to_json({"ok": True, "configured": bool(get_settings().api_key)})

        try:
            client = get_client()
            await sdk_athlete.list_calendars(client, DEFAULT_ATHLETE_ID)
        except Exception as e:
            logger.warning(f"Ping failed: {e}")
            return to_json({"ok": False, "error": str(e)})

        return to_json({"ok": True, "api": "connected", "authenticated": True})

    @app.tool()
    async def fetch_calendars(athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        List all calendars for the athlete.

        Args:
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)

        Returns:
            JSON list of calendars
        """
        client = get_client()
        return to_json(await sdk_athlete.list_calendars(client, athlete_id or DEFAULT_ATHLETE_ID))

    @app.tool()
    async def fetch_power_curves(
        athlete_id: str = DEFAULT_ATHLETE_ID,
        curves: str = None,
        type: str = None,
        newest: str = None,
        include_ranks: bool = None,
        sub_max_efforts: int = None,
        filters: str = None,
    ) -> str:
        """
        Get power curves for the athlete (e.g. 90d curve for Ride).

        Args:
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
            curves: Curves to return (e.g. "90d")
            type: Activity type (e.g. "Ride", "Run")
            newest: Newest date of activities to include (yyyy-MM-dd or yyyy-MM-ddTHH:mm:ss)
            include_ranks: Include ranks
            sub_max_efforts: Number of sub-max efforts
            filters: JSON filter array, e.g. [{"field_id":"type","value":["Ride","VirtualRide"]}]

        Returns:
            JSON with power curve data
        """
        client = get_client()
        data = await sdk_athlete.get_power_curves(
            client,
            athlete_id or DEFAULT_ATHLETE_ID,
            curves=curves or None,
            sport_type=type or None,
            newest=normalize_local_datetime(newest) if newest else None,
            include_ranks=include_ranks,
            sub_max_efforts=sub_max_efforts,
            filters=filters or None,
        )
        return to_json(data)

    return app
