"""
Calendar event tools for the Intervals.icu MCP server.

Planned workouts, races and notes: list, read, create, update, delete and
download as trainer files.
"""

from typing import Any, Dict

from intervals_gateway.client_factory import get_client
from intervals_gateway.sdk import events as sdk_events
from intervals_gateway.sdk.types import DEFAULT_ATHLETE_ID
from intervals_gateway.utils import normalize_local_datetime, to_json


def _whole(value):
    """3600.0 goes upstream as 3600; fractional values are kept."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def register_tools(app):
    """Register calendar event tools with the MCP app."""

    @app.tool()
    async def fetch_events(
        oldest: str,
        newest: str,
        athlete_id: str = DEFAULT_ATHLETE_ID,
        calendar_id: str = None,
    ) -> str:
        """
        List calendar events for a date range.

        Use this to view planned workouts, races, and other calendar entries.

        Args:
            oldest: Start date in yyyy-MM-dd format
            newest: End date in yyyy-MM-dd format
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
            calendar_id: Optional calendar ID to filter events

        Returns:
            JSON list of events
        """
        client = get_client()
        data = await sdk_events.list_events(
            client, athlete_id or DEFAULT_ATHLETE_ID, oldest, newest, calendar_id=calendar_id,
        )
        return to_json(data)

    @app.tool()
    async def get_event(event_id: str, athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        Get a single calendar event by ID.

        Args:
            event_id: The event ID
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)

        Returns:
            JSON with the event
        """
        client = get_client()
        return to_json(await sdk_events.get_event(client, athlete_id or DEFAULT_ATHLETE_ID, event_id))

    @app.tool()
    async def create_event(
        start_date_local: str,
        athlete_id: str = DEFAULT_ATHLETE_ID,
        type: str = None,
        category: str = None,
        name: str = None,
        description: str = None,
        workout_id: str = None,
        duration: float = None,
        distance: float = None,
    ) -> str:
        """
        Create a planned workout or calendar event.

        Args:
            start_date_local: Start date in yyyy-MM-dd or yyyy-MM-ddTHH:mm:ss format
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)
            type: Event type (e.g. "Ride", "Run", "Swim")
            category: Event category (e.g. "WORKOUT", "RACE", "NOTE")
            name: Event name/title
            description: Event description or workout details
            workout_id: Workout ID from the library to use as template
            duration: Planned duration in seconds (sent as moving_time)
            distance: Planned distance in meters

        Returns:
            JSON with the created event
        """
        payload = {"start_date_local": normalize_local_datetime(start_date_local)}

        optional = {
            "type": type,
            "category": category,
            "name": name,
            "description": description,
            "workout_id": workout_id,
            "moving_time": _whole(duration),
            "distance": _whole(distance),
        }
        payload.update({k: v for k, v in optional.items() if v is not None})

        client = get_client()
        event = await sdk_events.create_event(client, athlete_id or DEFAULT_ATHLETE_ID, payload)
        return to_json(event)

    @app.tool()
    async def update_event(
        event_id: str,
        body: Dict[str, Any],
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Update an existing calendar event.

        Args:
            event_id: The event ID to update
            body: Event fields to change, e.g. {"name": "New title", "moving_time": 3600}
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)

        Returns:
            JSON with the updated event
        """
        client = get_client()
        event = await sdk_events.update_event(client, athlete_id or DEFAULT_ATHLETE_ID, event_id, body)
        return to_json(event)

    @app.tool()
    async def delete_event(event_id: str, athlete_id: str = DEFAULT_ATHLETE_ID) -> str:
        """
        Delete a calendar event by ID.

        Args:
            event_id: The event ID to delete
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)

        Returns:
            JSON confirmation
        """
        client = get_client()
        await sdk_events.delete_event(client, athlete_id or DEFAULT_ATHLETE_ID, event_id)
        return to_json({"deleted": True, "event_id": event_id})

    @app.tool()
    async def download_event(
        event_id: str,
        ext: str,
        athlete_id: str = DEFAULT_ATHLETE_ID,
    ) -> str:
        """
        Download a planned workout as a .zwo, .mrc or .erg file.

        The file content is returned as base64; decode it and save it with
        the given extension.

        Args:
            event_id: The event ID
            ext: File format: zwo (Zwift), mrc or erg
            athlete_id: Athlete ID. Use "0" for the authenticated user (default)

        Returns:
            JSON with ext, contentType and base64
        """
        client = get_client()
        file = await sdk_events.download_event(client, athlete_id or DEFAULT_ATHLETE_ID, event_id, ext)
        ext = ext.lower()
        return to_json({
            "ext": ext,
            **file.to_dict(),
            "note": f"Decode base64 to get file bytes; save with .{ext} extension",
        })

    return app
