"""
Aggregation tools for the Intervals.icu MCP server.

Each tool composes several upstream reads into one answer. Composition
lives in intervals_gateway.api; these are thin wrappers.
"""

from intervals_gateway.client_factory import get_client
from intervals_gateway import api
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.utils import to_json


def register_tools(app):
    """Register aggregation tools with the MCP app."""

    @app.tool()
    async def get_training_overview(
        oldest: str,
        newest: str,
        activity_type: str = None,
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Wellness, completed activities and planned events for a date range.

        The three lists come back side by side; correlate them by date.
        Fails as a whole if any of the three reads fails.

        Args:
            oldest: Start date in yyyy-MM-dd format
            newest: End date in yyyy-MM-dd format
            activity_type: Only keep activities of this type (e.g. "Ride")
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        data = await api.get_training_overview(
            client, oldest, newest,
            activity_type=activity_type or None,
            athlete_id=athlete_id or DEFAULT_ATHLETE_ID,
        )
        return to_json(data)

    @app.tool()
    async def get_planning_context(
        from_date: str = None,
        span_days: int = 14,
        wellness_days_back: int = 7,
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Everything needed to plan ahead: upcoming events, the workout
        library, and recent wellness.

        Args:
            from_date: Planning start in yyyy-MM-dd format (default: today)
            span_days: Days of upcoming events to include (default: 14)
            wellness_days_back: Days of wellness before from_date (default: 7)
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        data = await api.get_planning_context(
            client,
            from_date=from_date or None,
            span_days=span_days,
            wellness_days_back=wellness_days_back,
            athlete_id=athlete_id or DEFAULT_ATHLETE_ID,
        )
        return to_json(data)

    @app.tool()
    async def fetch_activities_with_details(
        oldest: str,
        newest: str,
        type: str = None,
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Full detail, intervals included, for activities in a date range.

        At most 20 activities are detailed per call; "truncated" tells you
        when more exist. Narrow the range to see the rest.

        Args:
            oldest: Start date in yyyy-MM-dd format
            newest: End date in yyyy-MM-dd format
            type: Only keep activities of this type (e.g. "Run")
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        data = await api.get_activities_with_details(
            client, oldest, newest,
            activity_type=type or None,
            athlete_id=athlete_id or DEFAULT_ATHLETE_ID,
        )
        return to_json(data)

    @app.tool()
    async def get_event_with_completed_activity(
        event_id: str,
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        A planned event together with the activity that completed it.

        When the event has no paired activity, completed_activity is null and
        has_completed_activity is false.

        Args:
            event_id: The event ID
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
        """
        client = get_client()
        data = await api.get_event_with_completed_activity(
            client, event_id, athlete_id=athlete_id or DEFAULT_ATHLETE_ID,
        )
        return to_json(data)

    return app
